"""Default TypeConverter: lenient conversions between str, bytes, numbers and datetimes."""
from __future__ import annotations

from datetime import datetime
from typing import Any

from loguru import logger

_TRUE = {"true", "yes", "on", "1"}
_FALSE = {"false", "no", "off", "0"}


class DefaultTypeConverter:
    """TypeConverter implementation. Failed conversions are logged at debug level and return None."""

    def convert_to(self, target_type: type, value: Any) -> Any:
        if value is None:
            return None
        try:
            return self._convert(target_type, value)
        except (TypeError, ValueError, OverflowError, UnicodeDecodeError) as exc:
            logger.debug(
                "cannot convert {} to {}: {}",
                type(value).__name__,
                getattr(target_type, "__name__", target_type),
                exc,
            )
            return None

    def _convert(self, target_type: type, value: Any) -> Any:
        if isinstance(value, bool) and target_type in (int, float):
            return None
        if isinstance(value, target_type):
            return value
        if target_type is str:
            if isinstance(value, (bytes, bytearray)):
                return bytes(value).decode("utf-8")
            if isinstance(value, datetime):
                return value.isoformat()
            return str(value)
        if target_type is int:
            if isinstance(value, float):
                return int(value) if value.is_integer() else None
            if isinstance(value, (str, bytes, bytearray)):
                return int(value.strip())
            return None
        if target_type is float:
            if isinstance(value, (int, str, bytes, bytearray)):
                return float(value)
            return None
        if target_type is bool:
            if isinstance(value, (bytes, bytearray)):
                value = bytes(value).decode("utf-8")
            if isinstance(value, str):
                text = value.strip().lower()
                if text in _TRUE:
                    return True
                if text in _FALSE:
                    return False
            return None
        if target_type is datetime:
            if isinstance(value, str):
                return datetime.fromisoformat(value.strip())
            return None
        return None
