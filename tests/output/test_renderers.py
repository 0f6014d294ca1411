"""Tests for the operation-specific Rich renderers."""

from customer_manager.output.renderers import render_quiet, render_result
from customer_manager.services.result import ServiceError, ServiceResult


def _flat(text: str) -> str:
    """Collapse runs of whitespace so assertions ignore column padding."""
    return " ".join(text.split())


def _customer(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "id": 1,
        "name": "Acme",
        "email": "ops@acme.test",
        "phone": None,
        "address": None,
    }
    data.update(overrides)
    return data


class TestRenderCustomer:
    def test_fields_rendered(self) -> None:
        result = ServiceResult(ok=True, op="get_customer", data=_customer())
        out = _flat(render_result(result))
        assert "OK" in out
        assert "get_customer" in out
        assert "name: Acme" in out
        assert "email: ops@acme.test" in out

    def test_null_shown_as_dash(self) -> None:
        result = ServiceResult(ok=True, op="update_customer", data=_customer())
        assert "phone: -" in _flat(render_result(result))


class TestRenderCustomerList:
    def test_count_and_rows(self) -> None:
        items = [_customer(), _customer(id=2, name="Initech", email=None)]
        result = ServiceResult(ok=True, op="list_customers", data={"count": 2, "items": items})
        out = render_result(result)
        assert "2 customers" in out
        assert "Acme" in out
        assert "Initech" in out
        assert "Email" in out

    def test_empty(self) -> None:
        result = ServiceResult(ok=True, op="list_customers", data={"count": 0, "items": []})
        assert render_result(result) == "0 customers"


class TestRenderError:
    def test_message(self) -> None:
        result = ServiceResult(
            ok=False,
            op="get_customer",
            error=ServiceError(code="NOT_FOUND", message="No customer found with ID 9"),
        )
        out = render_result(result)
        assert "ERROR" in out
        assert "No customer found with ID 9" in out

    def test_verbose_shows_detail(self) -> None:
        result = ServiceResult(
            ok=False,
            op="create_customer",
            error=ServiceError(
                code="STORE_ERROR",
                message="UNIQUE constraint failed",
                detail={"exception": "IntegrityError"},
            ),
        )
        assert "IntegrityError" not in render_result(result)
        assert "exception: IntegrityError" in render_result(result, verbose=True)


class TestRenderGeneric:
    def test_unknown_op_key_values(self) -> None:
        result = ServiceResult(ok=True, op="delete_customer", data={"id": 4})
        out = _flat(render_result(result))
        assert "delete_customer" in out
        assert "id: 4" in out

    def test_verbose_shows_meta(self) -> None:
        result = ServiceResult(
            ok=True, op="init", data={"revision": "001_baseline"}, meta={"duration_ms": 5}
        )
        assert "duration_ms: 5" in render_result(result, verbose=True)


class TestRenderQuiet:
    def test_list_skips_missing_ids(self) -> None:
        result = ServiceResult(
            ok=True, op="list_customers", data={"count": 1, "items": [_customer(id=None)]}
        )
        assert render_quiet(result) == ""
