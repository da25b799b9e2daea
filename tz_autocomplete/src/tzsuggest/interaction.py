"""
Interaction handling: turn a chat-platform interaction payload (a dict
decoded from JSON) into the response payload to send back.

    PING (1)                  -> PONG (1)
    APPLICATION_COMMAND (2)   -> ephemeral message with the Unix timestamp
    AUTOCOMPLETE (4)          -> up to MAX_CHOICES timezone choices

respond() never raises on bad input; failures become an ephemeral message
carrying the error's user-facing text.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from . import config as CFG
from .engine import Engine
from .errors import Fatal, InteractionError, MissingPayload, UnsupportedInteractionType
from .models import Choice, CommandOption
from .timestamp import compose_timestamp

log = logging.getLogger(__name__)

# Interaction types
PING = 1
APPLICATION_COMMAND = 2
APPLICATION_COMMAND_AUTOCOMPLETE = 4

# Response types
PONG = 1
CHANNEL_MESSAGE_WITH_SOURCE = 4
APPLICATION_COMMAND_AUTOCOMPLETE_RESULT = 8

# Command option types
OPTION_STRING = 3


def _message(content: str) -> Dict[str, Any]:
    return {
        "type": CHANNEL_MESSAGE_WITH_SOURCE,
        "data": {"content": content, "flags": CFG.EPHEMERAL_FLAG},
    }

def _options(data: Dict[str, Any]) -> List[CommandOption]:
    raw = data.get("options") or []
    if not isinstance(raw, list) or not all(isinstance(o, dict) for o in raw):
        log.error("Malformed command options: %r", raw)
        raise Fatal()
    return [CommandOption.from_dict(o) for o in raw]

def _focused_query(options: List[CommandOption]) -> Optional[str]:
    for opt in options:
        if opt.name == "timezone" and opt.focused and isinstance(opt.value, str):
            if opt.type not in (None, OPTION_STRING):
                continue
            return opt.value
    return None


def on_app_command(data: Dict[str, Any]) -> Dict[str, Any]:
    timestamp = compose_timestamp(_options(data))
    return _message(str(timestamp))


def on_autocomplete(data: Dict[str, Any], engine: Engine) -> Dict[str, Any]:
    query = _focused_query(_options(data))
    names = engine.suggest(query, top_k=CFG.MAX_CHOICES) if query is not None else []
    choices = [Choice(name=n, value=n) for n in names[:CFG.MAX_CHOICES]]
    log.info("Generated autocompletions: %s", [c.name for c in choices])
    return {
        "type": APPLICATION_COMMAND_AUTOCOMPLETE_RESULT,
        "data": {"choices": [c.to_dict() for c in choices]},
    }


def try_respond(payload: Dict[str, Any], engine: Engine) -> Dict[str, Any]:
    kind = payload.get("type")
    if kind == PING:
        log.info("Received a ping.")
        return {"type": PONG}
    if kind not in (APPLICATION_COMMAND, APPLICATION_COMMAND_AUTOCOMPLETE):
        log.error("Received unsupported interaction type %r.", kind)
        raise UnsupportedInteractionType()

    data = payload.get("data")
    if data is None:
        raise MissingPayload()
    if not isinstance(data, dict):
        log.error("Missing payload from application command invocation.")
        raise Fatal()

    if kind == APPLICATION_COMMAND:
        log.info("Received application command.")
        return on_app_command(data)
    log.info("Received autocompletion request.")
    return on_autocomplete(data, engine)


def respond(payload: Dict[str, Any], engine: Engine) -> Dict[str, Any]:
    try:
        return try_respond(payload, engine)
    except InteractionError as err:
        return _message(str(err))
