"""Parsing of command messages sent by the web UI over the websocket."""

from __future__ import annotations

import json

from contracts.ui_protocol import MESSAGE_COMMAND
from pomodoro.constants import USER_ACTIONS


class CommandMessageError(ValueError):
    """Raised when a websocket message is not a valid clock command."""


def parse_command_message(raw: str | bytes) -> str:
    """Return the clock action named by a `{"type": "command"}` message."""
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as error:
            raise CommandMessageError("Command message must be UTF-8 text") from error

    try:
        message = json.loads(raw)
    except json.JSONDecodeError as error:
        raise CommandMessageError(f"Command message is not valid JSON: {error}") from error

    if not isinstance(message, dict):
        raise CommandMessageError("Command message must be a JSON object")

    if message.get("type") != MESSAGE_COMMAND:
        raise CommandMessageError(f"Unsupported message type: {message.get('type')!r}")

    action = message.get("action")
    if not isinstance(action, str) or action not in USER_ACTIONS:
        allowed = ", ".join(sorted(USER_ACTIONS))
        raise CommandMessageError(f"Command action must be one of: {allowed}")
    return action
