import pytest
from weightconv.services.units import Unit, GRAMS_PER_UNIT, factor, parse_unit, supported_tokens
from weightconv.services.errors import UnrecognizedUnit


def test_wire_tokens():
    assert parse_unit("gram") is Unit.GRAM
    assert parse_unit("kilo") is Unit.KILOGRAM
    assert parse_unit("ton") is Unit.TON
    assert parse_unit("lb") is Unit.POUND


def test_supported_tokens_order():
    assert supported_tokens() == ["gram", "kilo", "ton", "lb"]


def test_unit_passthrough():
    # Already resolved at the boundary
    for unit in Unit:
        assert parse_unit(unit) is unit


@pytest.mark.parametrize("token", ["GRAM", "Kilo", "g", "kg", "metric ton", "pound", "ounce", "", " lb", None, 5])
def test_rejected_tokens(token):
    with pytest.raises(UnrecognizedUnit) as exc_info:
        parse_unit(token)
    assert exc_info.value.token == token
    assert exc_info.value.code == "unrecognized_unit"


def test_error_message_lists_tokens():
    with pytest.raises(UnrecognizedUnit, match="'gram', 'kilo', 'ton', 'lb'"):
        parse_unit("ounce")


def test_factors():
    assert factor(Unit.GRAM) == 1.0
    assert factor(Unit.KILOGRAM) == 1000.0
    assert factor(Unit.TON) == 1_000_000.0
    assert factor(Unit.POUND) == 453.59237


def test_every_unit_has_positive_factor():
    assert set(GRAMS_PER_UNIT) == set(Unit)
    assert all(v > 0 for v in GRAMS_PER_UNIT.values())


def test_table_is_read_only():
    with pytest.raises(TypeError):
        GRAMS_PER_UNIT[Unit.GRAM] = 2.0
