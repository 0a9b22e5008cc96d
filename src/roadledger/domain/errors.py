"""Typed validation errors raised by the road network.

INVARIANT: Every error is raised before any state is touched, so a
caught ``NetworkError`` always means "nothing changed".
The service layer converts them into ``ServiceError`` via ``code``.
"""

from __future__ import annotations

from typing import Any, ClassVar

from roadledger.domain.types import ErrorCode


class NetworkError(Exception):
    """Base class for all recoverable network validation failures."""

    code: ClassVar[ErrorCode]

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class DuplicateNameError(NetworkError):
    code = ErrorCode.DUPLICATE_NAME


class NotFoundError(NetworkError):
    code = ErrorCode.NOT_FOUND


class CityNotFoundError(NotFoundError):
    """A road or budget endpoint did not resolve to a city."""

    code = ErrorCode.CITY_NOT_FOUND


class SameNameError(NetworkError):
    code = ErrorCode.SAME_NAME


class SelfLoopError(NetworkError):
    code = ErrorCode.SELF_LOOP


class DuplicateRoadError(NetworkError):
    code = ErrorCode.DUPLICATE_ROAD


class NoRoadError(NetworkError):
    code = ErrorCode.NO_ROAD


class NegativeBudgetError(NetworkError):
    code = ErrorCode.NEGATIVE_BUDGET
