from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, TypeVar

from tfvc.schemas.command import CommandMetadata, ExecutionResult
from tfvc.services.commands.argument_builder import ArgumentBuilder

TResult = TypeVar("TResult")


class TfvcCommand(Generic[TResult], ABC):
    """Base class for all tf commands"""

    @property
    @abstractmethod
    def metadata(self) -> CommandMetadata:
        """
        Return metadata about the command.
        Should include:
        - name: str (the tf subcommand)
        - description: str
        - documentation: str (supported options and output format)
        """
        pass

    @abstractmethod
    def get_arguments(self) -> ArgumentBuilder:
        """
        Return the arguments used to invoke tf for this command
        """
        pass

    def get_options(self) -> Dict[str, Any]:
        """Extra process options (cwd, env) for the runner"""
        return {}

    @abstractmethod
    async def parse_output(self, execution_result: ExecutionResult) -> TResult:
        """Convert the raw execution result into the command's result type"""
        pass
