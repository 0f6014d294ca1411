"""SQLAlchemy ORM mapping for the customer-manager database.

The ``customers`` table is the only table. The migration chain under
``migrations/versions`` must stay in step with this module.
"""

from __future__ import annotations

from sqlalchemy import Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base holding the shared ``MetaData``."""


class Customer(Base):
    """A customer row. Only ``id`` carries meaning to the service layer."""

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str | None] = mapped_column(Text, unique=True)
    phone: Mapped[str | None] = mapped_column(Text)
    address: Mapped[str | None] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"Customer(id={self.id!r}, name={self.name!r}, email={self.email!r})"


metadata = Base.metadata
customers = Customer.__table__
