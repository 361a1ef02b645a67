"""UI server module for the static clock UI and websocket streaming."""

from .commands import CommandMessageError, parse_command_message
from .config import ServerConfigurationError, UIServerConfig
from .service import UIServer

__all__ = [
    "CommandMessageError",
    "ServerConfigurationError",
    "UIServerConfig",
    "UIServer",
    "parse_command_message",
]
