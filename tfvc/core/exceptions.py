"""
Exceptions raised by the TFVC command layer.
"""
from typing import Optional


class TfvcError(Exception):
    """Base exception for all TFVC command errors."""
    pass


class ExecutionFailedError(TfvcError):
    """Raised when the tf process reports an error."""

    def __init__(self, command: str, stderr: str, exit_code: Optional[int] = None):
        self.command = command
        self.stderr = stderr
        self.exit_code = exit_code
        message = f"Command '{command}' failed"
        if exit_code is not None:
            message += f" with exit code {exit_code}"
        if stderr:
            message += f": {stderr.strip()}"
        super().__init__(message)


class AuthenticationFailedError(ExecutionFailedError):
    """Raised when the server rejects the supplied credentials."""
    pass


class NotATfvcFolderError(ExecutionFailedError):
    """Raised when the local path is not mapped in any workspace."""
    pass


class MalformedOutputError(TfvcError):
    """Raised when tf output has no usable XML payload or does not match the expected shape."""
    pass


class TfvcNotFoundError(TfvcError):
    """Raised when the tf executable cannot be started."""
    pass


class CommandTimeoutError(TfvcError):
    """Raised when a tf process runs longer than the configured timeout."""
    pass


class XmlPayloadNotFoundError(MalformedOutputError):
    """Raised when tf output contains no XML document at all."""
    pass


class XmlParseError(MalformedOutputError):
    """Raised when the XML document in tf output cannot be parsed."""
    pass
