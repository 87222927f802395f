import math

import pytest
from pydantic import ValidationError

from mof_screener import InputVector, parse_value
from mof_screener.config import DEFAULT_INPUTS, FIELD_NAMES, FIELDS


@pytest.mark.parametrize("raw, expected", [
    ("3000", 3000.0),
    (" 0.75 ", 0.75),
    ("-1.5", -1.5),
    ("1e3", 1000.0),
    (12, 12.0),
    ("not-a-number", 0.0),
    ("", 0.0),
    ("12abc", 0.0),
    (None, 0.0),
    ("nan", 0.0),
    ("inf", 0.0),
    ("-Infinity", 0.0),
])
def test_parse_value(raw, expected):
    assert parse_value(raw) == expected


def test_defaults_match_config(default_inputs):
    assert default_inputs.model_dump() == DEFAULT_INPUTS


def test_set_field_parse_failure_gives_zero(default_inputs):
    updated = default_inputs.set_field("gsa", "not-a-number")
    assert updated.gsa == 0.0
    for name in FIELD_NAMES:
        if name != "gsa":
            assert getattr(updated, name) == getattr(default_inputs, name)


def test_set_field_returns_new_vector(default_inputs):
    updated = default_inputs.set_field("pv", "2.0")
    assert updated is not default_inputs
    assert updated.pv == 2.0
    assert default_inputs.pv == 1.2


def test_set_field_does_not_keep_stale_value():
    v = InputVector().set_field("lcd", "20").set_field("lcd", "oops")
    assert v.lcd == 0.0


def test_set_field_unknown_name(default_inputs):
    with pytest.raises(KeyError):
        default_inputs.set_field("porosity", "1")


def test_input_vector_is_frozen(default_inputs):
    with pytest.raises(ValidationError):
        default_inputs.gsa = 1.0


def test_input_vector_rejects_non_finite():
    with pytest.raises(ValidationError):
        InputVector(gsa=math.inf)


def test_field_metadata():
    assert tuple(FIELDS) == FIELD_NAMES
    for meta in FIELDS.values():
        assert set(meta) == {"label", "unit", "symbol"}
