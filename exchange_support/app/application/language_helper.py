"""Pure helpers used by expression languages, loggers and predicates to inspect an exchange.

None of these functions mutate the exchange; called twice on the same exchange state
they return equal results.
"""
from __future__ import annotations

import io
import os
import traceback
from datetime import datetime
from typing import Any, Callable

from loguru import logger

from exchange_support.app.application.context_helper import parse_integer
from exchange_support.app.constants import Exchange as ExchangeHeaders
from exchange_support.app.core import SERVICE_NAME
from exchange_support.app.domain.context import ExchangeContext
from exchange_support.app.domain.errors import RuntimeExchangeError
from exchange_support.app.domain.exchange import Exchange, millis_to_datetime
from exchange_support.app.domain.exchange_formatter import DefaultExchangeFormatter, OutputStyle
from exchange_support.app.ports.exchange_formatter import ExchangeFormatter

DateFallback = Callable[[Exchange, Any], "datetime | None"]


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def exception(exchange: Exchange) -> Exception | None:
    """The exception on the exchange, falling back to the caught-exception property."""
    return exchange.resolve_exception()


def exception_message(exchange: Exchange) -> str | None:
    error = exception(exchange)
    if error is None:
        return None
    return str(error)


def exception_stacktrace(exchange: Exchange) -> str | None:
    """Full traceback text of the exchange's exception, or None when there is none."""
    error = exception(exchange)
    if error is None:
        return None
    with io.StringIO() as sink:
        traceback.print_exception(type(error), error, error.__traceback__, file=sink)
        return sink.getvalue()


def _as_text_pair(exchange: Exchange, left: Any, right: Any) -> tuple[str, str] | None:
    converter = exchange.context.type_converter
    left_text = converter.convert_to(str, left)
    right_text = converter.convert_to(str, right)
    if left_text is None or right_text is None:
        return None
    return left_text, right_text


def ends_with(exchange: Exchange, left_value: Any, right_value: Any) -> bool:
    """True if left_value ends with right_value once both are converted to text.

    Two None values count as equal (True); a single None is never a match.
    """
    if left_value is None and right_value is None:
        return True
    if left_value is None or right_value is None:
        return False
    pair = _as_text_pair(exchange, left_value, right_value)
    if pair is None:
        return False
    return pair[0].endswith(pair[1])


def starts_with(exchange: Exchange, left_value: Any, right_value: Any) -> bool:
    """True if left_value starts with right_value once both are converted to text.

    Two None values count as equal (True); a single None is never a match.
    """
    if left_value is None and right_value is None:
        return True
    if left_value is None or right_value is None:
        return False
    pair = _as_text_pair(exchange, left_value, right_value)
    if pair is None:
        return False
    return pair[0].startswith(pair[1])


def get_or_create_exchange_formatter(
    context: ExchangeContext,
    exchange_formatter: ExchangeFormatter | None = None,
) -> ExchangeFormatter:
    """Return exchange_formatter, else the one bound in the registry, else a new default formatter.

    The default formatter takes max_chars from the LOG_DEBUG_BODY_MAX_CHARS global option;
    a malformed option raises RuntimeExchangeError.
    """
    if exchange_formatter is not None:
        return exchange_formatter

    found = context.registry.find_single_by_type(ExchangeFormatter)
    if found is not None:
        return found

    formatter = DefaultExchangeFormatter(
        show_exchange_id=True,
        multiline=True,
        show_headers=True,
        style=OutputStyle.FIXED,
    )
    try:
        max_chars = parse_integer(
            context, context.get_global_option(ExchangeHeaders.LOG_DEBUG_BODY_MAX_CHARS)
        )
    except Exception as exc:
        raise RuntimeExchangeError(str(exc)) from exc
    if max_chars is not None:
        formatter.max_chars = max_chars
    _log("exchange_formatter_created", max_chars=formatter.max_chars)
    return formatter


def sysenv(name: str | None) -> str | None:
    """Look up an OS environment variable by upper-cased name, retrying with '-' replaced by '_'."""
    if name is None:
        return None
    key = name.upper()
    answer = os.environ.get(key)
    if answer is None:
        # some shells do not allow dashes in variable names
        answer = os.environ.get(key.replace("-", "_"))
    return answer


def escape_quotes(text: str) -> str:
    """Backslash-escape every double quote that is not already escaped."""
    out: list[str] = []
    prev = ""
    for ch in text:
        if ch == '"' and prev != "\\":
            out.append('\\"')
        else:
            out.append(ch)
        prev = ch
    return "".join(out)


def date_from_file_last_modified(exchange: Exchange, command: str) -> datetime:
    """Timestamp from the file-last-modified header.

    Raises ValueError when the header holds neither a positive epoch-millis value nor a datetime.
    """
    millis = exchange.get_header(ExchangeHeaders.FILE_LAST_MODIFIED, int)
    if millis is not None and millis > 0:
        try:
            return millis_to_datetime(millis)
        except OverflowError:
            logger.debug("file last modified header out of range: {}", millis)
    date = exchange.get_header(ExchangeHeaders.FILE_LAST_MODIFIED, datetime)
    if date is None:
        raise ValueError(
            f"Cannot find {ExchangeHeaders.FILE_LAST_MODIFIED} header at command: {command}"
        )
    return date


def _command_key(command: str) -> str:
    return command[command.rfind(".") + 1:]


def _date_from_value(
    exchange: Exchange, value: Any, or_else: DateFallback | None
) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return millis_to_datetime(value)
        except OverflowError:
            logger.debug("epoch millis out of range: {}", value)
            return None
    if or_else is not None:
        return or_else(exchange, value)
    return None


def date_from_exchange_property(
    exchange: Exchange, command: str, or_else: DateFallback | None = None
) -> datetime | None:
    """Timestamp from the property named by the last dotted segment of command."""
    value = exchange.get_property(_command_key(command))
    return _date_from_value(exchange, value, or_else)


def date_from_header(
    exchange: Exchange, command: str, or_else: DateFallback | None = None
) -> datetime | None:
    """Timestamp from the header named by the last dotted segment of command."""
    value = exchange.get_header(_command_key(command))
    return _date_from_value(exchange, value, or_else)


def date_from_exchange_created(exchange: Exchange) -> datetime:
    return millis_to_datetime(exchange.created)
