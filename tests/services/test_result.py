"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from rosterctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_field_set(self) -> None:
        assert set(ServiceResult.model_fields) == {"ok", "op", "data", "error"}
        assert set(ServiceError.model_fields) == {"code", "message"}

    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="add", data={"name": "Alice"})
        assert result.ok is True
        assert result.op == "add"
        assert result.data == {"name": "Alice"}
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="PARSE_ERROR", message="Invalid command")
        result = ServiceResult(ok=False, op="parse", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="list", data={"names": ["Alice", "Bob"]})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["names"] == ["Alice", "Bob"]
        assert parsed["error"] is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="add")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
