import asyncio
import logging
import os
import subprocess
from typing import Optional, TypeVar

from tfvc.core.config import Settings, get_settings
from tfvc.core.exceptions import CommandTimeoutError, TfvcNotFoundError
from tfvc.schemas.command import ExecutionResult
from tfvc.services.commands.base import TfvcCommand

TResult = TypeVar("TResult")


class TfvcRunner:
    """Runs tf commands as child processes"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.logger = logging.getLogger(__name__)

    async def execute(self, command: TfvcCommand) -> ExecutionResult:
        """Run the command's arguments through the tf executable and capture the output"""
        builder = command.get_arguments()
        options = command.get_options()
        env = None
        if options.get("env"):
            env = {**os.environ, **options["env"]}

        self.logger.info(f"Running tf {builder.to_string()}")
        try:
            process = await asyncio.create_subprocess_exec(
                self.settings.TFVC_LOCATION,
                *builder.get_arguments(),
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                env=env,
                cwd=options.get("cwd"),
            )
        except FileNotFoundError as e:
            raise TfvcNotFoundError(
                f"tf executable not found at '{self.settings.TFVC_LOCATION}'"
            ) from e

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=self.settings.TFVC_TIMEOUT
            )
        except asyncio.TimeoutError:
            process.kill()
            await process.wait()
            raise CommandTimeoutError(
                f"tf {builder.get_command()} timed out after {self.settings.TFVC_TIMEOUT} seconds"
            )

        self.logger.info(
            f"tf {builder.get_command()} exited with code {process.returncode}"
        )
        return ExecutionResult(
            exit_code=process.returncode,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )

    async def run(self, command: TfvcCommand[TResult]) -> TResult:
        """Execute the command and parse its output"""
        result = await self.execute(command)
        return await command.parse_output(result)
