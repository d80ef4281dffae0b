import pytest

from deskentry.diagnostics import SerializeError
from deskentry.serde import SerializerState, begin_group, begin_key, end_group, end_value


def test_first_group_has_no_prefix() -> None:
    assert begin_group(SerializerState.NO_HEADER) == ("", SerializerState.HEADER)


def test_later_groups_are_separated_by_a_blank_line() -> None:
    assert begin_group(SerializerState.NEW_SECTION) == ("\n\n", SerializerState.HEADER)
    assert begin_group(SerializerState.NEW_SECTION, blank_line=False) == ("\n", SerializerState.HEADER)


@pytest.mark.parametrize("state", [SerializerState.HEADER, SerializerState.KEY])
def test_group_inside_group_is_nesting(state: SerializerState) -> None:
    with pytest.raises(SerializeError) as error:
        begin_group(state)
    assert error.value.code == "SERIALIZER_NESTING_NOT_SUPPORTED"


def test_key_lifecycle() -> None:
    prefix, state = begin_key(SerializerState.HEADER)

    assert prefix == "\n"
    assert state == SerializerState.KEY
    assert end_value(state) == SerializerState.HEADER
    assert end_group(SerializerState.HEADER) == SerializerState.NEW_SECTION


@pytest.mark.parametrize("state", [SerializerState.NO_HEADER, SerializerState.NEW_SECTION])
def test_key_outside_group_expects_map(state: SerializerState) -> None:
    with pytest.raises(SerializeError) as error:
        begin_key(state)
    assert error.value.code == "SERIALIZER_EXPECTED_MAP"


def test_key_inside_key_is_nesting() -> None:
    with pytest.raises(SerializeError) as error:
        begin_key(SerializerState.KEY)
    assert error.value.code == "SERIALIZER_NESTING_NOT_SUPPORTED"


def test_out_of_order_transitions_are_bugs() -> None:
    with pytest.raises(RuntimeError):
        end_value(SerializerState.HEADER)
    with pytest.raises(RuntimeError):
        end_group(SerializerState.KEY)

