from typing import Any, Dict, List, Type

from tfvc.schemas.command import CommandMetadata
from tfvc.services.commands.base import TfvcCommand


class CommandFactory:
    """Factory for creating and managing tf commands"""

    _commands: Dict[str, Type[TfvcCommand]] = {}

    @classmethod
    def register(cls, command_class: Type[TfvcCommand], name: str) -> None:
        """Register a command class under its tf subcommand name"""
        cls._commands[name] = command_class

    @classmethod
    def get_command(cls, command_name: str, **kwargs: Any) -> TfvcCommand:
        """Create a command instance by name"""
        if command_name not in cls._commands:
            raise ValueError(f"Command {command_name} not found")
        return cls._commands[command_name](**kwargs)

    @classmethod
    def list_commands(cls) -> List[str]:
        """List the names of all registered commands"""
        return sorted(cls._commands)

    @classmethod
    def describe(cls, command_name: str, **kwargs: Any) -> CommandMetadata:
        """Metadata of a command, built with the given constructor arguments"""
        return cls.get_command(command_name, **kwargs).metadata
