from .argument_builder import ArgumentBuilder
from .base import TfvcCommand
from .factory import CommandFactory
from .helper import CommandHelper
from .status import StatusCommand

# Register all commands
CommandFactory.register(StatusCommand, "status")

__all__ = [
    "ArgumentBuilder",
    "CommandFactory",
    "CommandHelper",
    "StatusCommand",
    "TfvcCommand",
]
