# tenet/types/builtins.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Built-in runtime types."""

import re
from datetime import date, datetime
from urllib.parse import urlparse

from tenet.core.values import is_number, is_whole_number
from tenet.types.base import Type

_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_UUID = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)
_LEGAL_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _is_url(value) -> bool:
    if not isinstance(value, str):
        return False
    parts = urlparse(value)
    return bool(parts.scheme) and bool(parts.netloc)


def _is_uuid(value) -> bool:
    return isinstance(value, str) and _UUID.match(value) is not None


def _is_timestamp(value) -> bool:
    if not isinstance(value, str) or "T" not in value:
        return False
    try:
        # fromisoformat() only learned the "Z" suffix in 3.11
        datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return False
    return True


def _is_legal_date(value) -> bool:
    if not isinstance(value, str) or not _LEGAL_DATE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


TString = Type("string", lambda v: isinstance(v, str))

TNumber = Type("number", is_number)

TBoolean = Type("boolean", lambda v: isinstance(v, bool))

TInteger = Type("integer", is_whole_number)

TPositiveInt = Type("positive integer", lambda v: is_whole_number(v) and v > 0)

TNonEmptyString = Type("non-empty string", lambda v: isinstance(v, str) and len(v) > 0)

TEmail = Type("email address", lambda v: isinstance(v, str) and _EMAIL.match(v) is not None)

TUrl = Type("URL", _is_url)

TUuid = Type("UUID", _is_uuid)

# ISO 8601 timestamp string, e.g. "2024-01-15T10:30:00Z"
Timestamp = Type("ISO 8601 timestamp", _is_timestamp)

# Calendar date string in YYYY-MM-DD form
LegalDate = Type("date (YYYY-MM-DD)", _is_legal_date)
