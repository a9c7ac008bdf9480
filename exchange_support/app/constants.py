"""Well-known exchange header, property and global option names."""
from __future__ import annotations


class Exchange:
    FILE_LAST_MODIFIED = "CamelFileLastModified"
    LOG_DEBUG_BODY_MAX_CHARS = "CamelLogDebugBodyMaxChars"


class ExchangePropertyKey:
    EXCEPTION_CAUGHT = "CamelExceptionCaught"
