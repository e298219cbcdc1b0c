"""ServiceResult and ServiceError — the contract between services and the shell.

INVARIANT: every RosterService operation returns ServiceResult.
The shell loop and the output layer consume only this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str


class ServiceResult(BaseModel):
    """Return type for all roster operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"add"``, ``"remove"``, ``"list"``,
            ``"exit"``, or ``"parse"`` for rejected input).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
