from __future__ import annotations

import pytest

from exchange_support.app.application.language_helper import ends_with, starts_with
from exchange_support.app.domain.exchange import Exchange

from tests.conftest import NullTypeConverter, make_context


@pytest.mark.parametrize("helper", [starts_with, ends_with])
def test_both_none_count_as_equal(exchange: Exchange, helper):
    assert helper(exchange, None, None) is True


@pytest.mark.parametrize("helper", [starts_with, ends_with])
@pytest.mark.parametrize("left,right", [(None, "a"), ("a", None)])
def test_single_none_never_matches(exchange: Exchange, helper, left, right):
    assert helper(exchange, left, right) is False


def test_starts_with(exchange: Exchange):
    assert starts_with(exchange, "hello", "he") is True
    assert starts_with(exchange, "hello", "lo") is False
    assert starts_with(exchange, "hello", "") is True


def test_ends_with(exchange: Exchange):
    assert ends_with(exchange, "hello", "lo") is True
    assert ends_with(exchange, "hello", "he") is False


def test_values_are_converted_to_text(exchange: Exchange):
    assert starts_with(exchange, 12345, 12) is True
    assert ends_with(exchange, 12345, "45") is True
    assert starts_with(exchange, b"bytes-body", "bytes") is True


def test_failed_conversion_is_false():
    exchange = Exchange(context=make_context(type_converter=NullTypeConverter()))

    assert starts_with(exchange, "hello", "he") is False
    assert ends_with(exchange, "hello", "lo") is False
    assert starts_with(exchange, None, None) is True


def test_undecodable_bytes_do_not_match(exchange: Exchange):
    assert starts_with(exchange, b"\xff\xfe", "x") is False
