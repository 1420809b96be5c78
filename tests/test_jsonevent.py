import pytest

from paxlib.jsonevent import Event, EventType
from paxlib.number import IntType


def test_error_event_carries_subject_and_message():
    event = Event.error("@", "Unkown symbol")
    assert event.type is EventType.ERROR
    assert (event.subject, event.message) == ("@", "Unkown symbol")
    assert event.value is None


@pytest.mark.parametrize(
    "factory, kind",
    [
        (Event.object_open, EventType.OBJECT_OPEN),
        (Event.object_close, EventType.OBJECT_CLOSE),
        (Event.array_open, EventType.ARRAY_OPEN),
        (Event.array_close, EventType.ARRAY_CLOSE),
    ],
)
def test_bracket_events(factory, kind):
    event = factory()
    assert event.type is kind
    assert event.name == ""


def test_name_event():
    event = Event.named("coords")
    assert event.type is EventType.NAME
    assert event.name == "coords"


def test_string_event():
    event = Event.string("player", "name")
    assert (event.type, event.name, event.value) == (EventType.STRING, "name", "player")


def test_unsigned_event():
    event = Event.unsigned(156, "code")
    assert (event.type, event.name, event.value) == (EventType.UNSIGNED, "code", 156)


def test_integer_event():
    event = Event.integer(-1, "x")
    assert (event.type, event.name, event.value) == (EventType.INTEGER, "x", -1)


def test_floating_event_stores_float():
    event = Event.floating(2, "y")
    assert event.type is EventType.FLOATING
    assert event.value == 2.0
    assert isinstance(event.value, float)


def test_boolean_events():
    assert Event.boolean(True, "alive").value is True
    assert Event.boolean(0, "pause").value is False
    assert Event.boolean(1, "alive").type is EventType.BOOLEAN


def test_null_event():
    event = Event.null("z")
    assert (event.type, event.name, event.value) == (EventType.NULL, "z", None)


def test_values_in_arrays_have_no_name():
    assert Event.unsigned(16).name == ""
    assert Event.string("player").name == ""


def test_word_limits_are_enforced():
    assert Event.unsigned(IntType.UWORD.max).value == IntType.UWORD.max
    assert Event.integer(IntType.IWORD.min).value == IntType.IWORD.min
    with pytest.raises(ValueError):
        Event.unsigned(-1)
    with pytest.raises(ValueError):
        Event.unsigned(IntType.UWORD.max + 1)
    with pytest.raises(ValueError):
        Event.integer(IntType.IWORD.max + 1)


def test_events_compare_by_value():
    assert Event.string("gio", "name") == Event.string("gio", "name")
    assert Event.string("gio", "name") != Event.string("gio", "code")


def test_events_are_immutable():
    event = Event.null("z")
    with pytest.raises(AttributeError):
        event.name = "w"
    assert event.name == "z"
    assert event == Event.null("z")


def test_each_factory_gives_its_own_event_type():
    events = [
        Event.error("@", "Unkown symbol"),
        Event.object_open(),
        Event.object_close(),
        Event.array_open(),
        Event.array_close(),
        Event.named("coords"),
        Event.string("player", "name"),
        Event.unsigned(156, "code"),
        Event.integer(-1, "x"),
        Event.floating(1.5, "y"),
        Event.boolean(True, "alive"),
        Event.null("z"),
    ]
    kinds = [event.type for event in events]
    assert len(set(kinds)) == len(events)
    assert EventType.NONE not in kinds
    assert EventType.COUNT not in kinds