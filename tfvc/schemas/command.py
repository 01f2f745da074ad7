from pydantic import BaseModel, ConfigDict


class CommandMetadata(BaseModel):
    """Metadata about a command"""
    name: str
    description: str
    documentation: str


class ExecutionResult(BaseModel):
    """Raw result of running the tf executable"""
    model_config = ConfigDict(frozen=True)

    exit_code: int = 0
    stdout: str = ""
    stderr: str = ""

    @property
    def failed(self) -> bool:
        return self.exit_code != 0 or bool(self.stderr)
