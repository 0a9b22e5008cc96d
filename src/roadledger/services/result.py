"""ServiceResult and ServiceError — the contract every service method returns.

INVARIANT: Service methods never raise for bad input. Validation
failures come back as ``ok=False`` with a ``ServiceError`` whose
``code`` is one of :class:`roadledger.domain.types.ErrorCode`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Which precondition failed, and why."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type of every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add_road"``).
        data: JSON-safe, operation-specific payload.
        warnings: Non-fatal issues, e.g. a snapshot that could not be written.
        error: Structured error when ``ok`` is False.
        meta: Optional extra metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
