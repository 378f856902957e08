from __future__ import annotations

from enum import StrEnum


class ViolationKind(StrEnum):
    REQUIRED = "required"
    TOO_LONG = "too_long"
    PAST_DATE = "past_date"
    INVALID_DATE = "invalid_date"
