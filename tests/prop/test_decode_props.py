from __future__ import annotations

import os

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from gecko.codes import MalformedCodeError, convert_gecko_code, resolve_address

from .strategies import gecko_codes

MAX_EXAMPLES = int(os.getenv("GECKO_PROP_EXAMPLES", "300"))
SEPARATOR = "\n\n// ---\n\n"


@given(code=gecko_codes())
@settings(max_examples=MAX_EXAMPLES, deadline=None, suppress_health_check=[HealthCheck.too_slow])
def test_supported_codes_decode(code) -> None:
    words = [word for record in code for word in record]
    assert len(words) % 2 == 0
    text = convert_gecko_code(words)
    assert text
    assert text.count(SEPARATOR) == len(code)


@given(words=st.lists(st.integers(0, 0xFFFFFFFF), min_size=1, max_size=15).filter(lambda w: len(w) % 2))
def test_odd_length_is_malformed(words) -> None:
    with pytest.raises(MalformedCodeError):
        convert_gecko_code(words)


@given(raw=st.integers(0, 0xFFFFFFFF), larger=st.booleans())
def test_resolved_addresses_stay_in_ram(raw: int, larger: bool) -> None:
    address = resolve_address(raw, larger)
    assert address & 0x00FFFFFF == raw & 0x00FFFFFF
    assert address >> 24 == (0x81 if larger else 0x80)
