import pytest

from tzsuggest import interaction as I
from tzsuggest.engine import Engine

NAMES = [f"Zone/{i:02d}" for i in range(40)] + ["Europe/Paris", "Europe/Prague", "Asia/Tokyo"]


@pytest.fixture
def engine():
    eng = Engine(NAMES).build()
    yield eng
    eng.shutdown()


def _autocomplete(*options):
    return {"type": I.APPLICATION_COMMAND_AUTOCOMPLETE, "data": {"options": list(options)}}


def test_ping_gets_pong(engine):
    assert I.respond({"type": I.PING}, engine) == {"type": I.PONG}


def test_autocomplete_returns_ranked_choices(engine):
    out = I.respond(_autocomplete(
        {"name": "timezone", "type": 3, "value": "Europe/Par", "focused": True},
    ), engine)
    assert out["type"] == I.APPLICATION_COMMAND_AUTOCOMPLETE_RESULT
    choices = out["data"]["choices"]
    assert len(choices) == 25
    assert choices[0] == {"name": "Europe/Paris", "value": "Europe/Paris"}
    assert all(c["name"] == c["value"] for c in choices)
    assert {c["name"] for c in choices} <= set(NAMES)


def test_autocomplete_without_focused_timezone_is_empty(engine):
    out = I.respond(_autocomplete({"name": "year", "type": 4, "value": 2024}), engine)
    assert out == {"type": I.APPLICATION_COMMAND_AUTOCOMPLETE_RESULT, "data": {"choices": []}}


def test_autocomplete_caps_choices_for_small_dictionaries():
    eng = Engine(["UTC", "Europe/Paris", "Asia/Tokyo"]).build()
    try:
        out = I.respond(_autocomplete({"name": "timezone", "type": 3, "value": "", "focused": True}), eng)
        assert len(out["data"]["choices"]) == 2
    finally:
        eng.shutdown()


def test_command_returns_ephemeral_timestamp(engine):
    payload = {"type": I.APPLICATION_COMMAND, "data": {"options": [
        {"name": "timezone", "type": 3, "value": "UTC"},
        {"name": "year", "type": 4, "value": 2000},
        {"name": "month", "type": 4, "value": 1},
        {"name": "day", "type": 4, "value": 2},
        {"name": "hour", "type": 4, "value": 3},
        {"name": "minute", "type": 4, "value": 4},
        {"name": "secs", "type": 4, "value": 5},
    ]}}
    out = I.respond(payload, engine)
    assert out == {"type": 4, "data": {"content": "946782245", "flags": 64}}


def test_command_with_unknown_timezone_reports_error(engine):
    payload = {"type": I.APPLICATION_COMMAND, "data": {"options": [
        {"name": "timezone", "type": 3, "value": "Nowhere/Atlantis"},
    ]}}
    out = I.respond(payload, engine)
    assert out["type"] == I.CHANNEL_MESSAGE_WITH_SOURCE
    assert out["data"]["flags"] == 64
    assert "timezone" in out["data"]["content"].lower()


@pytest.mark.parametrize("payload", [
    {"type": 3, "data": {}},
    {"type": 5},
    {},
])
def test_unsupported_interaction_type(engine, payload):
    out = I.respond(payload, engine)
    assert out["data"]["content"] == "Unsupported interaction type."


def test_missing_payload(engine):
    out = I.respond({"type": I.APPLICATION_COMMAND}, engine)
    assert out["data"]["content"] == "Missing interaction payload."


def test_malformed_options_are_fatal(engine):
    out = I.respond({"type": I.APPLICATION_COMMAND, "data": {"options": "oops"}}, engine)
    assert out["data"]["content"].startswith("Fatal error")


def test_try_respond_propagates_errors(engine):
    from tzsuggest.errors import MissingPayload
    with pytest.raises(MissingPayload):
        I.try_respond({"type": I.APPLICATION_COMMAND_AUTOCOMPLETE}, engine)
