"""Monitor command interfaces and registrations."""

from .builtin import register_builtin_commands
from .registry import CommandDispatchError, CommandHandler, CommandRegistry, CommandResult

__all__ = [
    "CommandDispatchError",
    "CommandHandler",
    "CommandRegistry",
    "CommandResult",
    "register_builtin_commands",
]
