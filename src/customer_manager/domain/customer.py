"""CustomerRecord — the serializable view of a customer row."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class CustomerRecord(BaseModel):
    """Frozen snapshot of a customer, readable from ORM objects.

    Build one with ``CustomerRecord.model_validate(orm_obj)``.
    """

    model_config = {"frozen": True, "from_attributes": True}

    id: int | None = None
    name: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None

    def to_data(self) -> dict[str, Any]:
        """Plain dict payload for a ServiceResult."""
        return self.model_dump()
