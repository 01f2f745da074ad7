from typing import List, Optional, Tuple

from tfvc.schemas.server_context import ServerContext

SECRET_MASK = "********"


class ArgumentBuilder:
    """Builds the argument list for a single tf subcommand.

    Switches are written in the `-name` / `-name:value` form the cross
    platform client accepts. Values marked secret are passed to the process
    as-is but masked whenever the builder is rendered as text.
    """

    def __init__(self, command: str, server_context: Optional[ServerContext] = None):
        if not command:
            raise ValueError("command must be a non-empty string")
        self._command = command
        # (argument, secret text) pairs; secret text is masked by to_string()
        self._arguments: List[Tuple[str, Optional[str]]] = [(command, None)]

        self.add_switch("noprompt")
        if server_context and server_context.collection_url:
            self.add_switch_with_value("collection", server_context.collection_url)
            if server_context.has_credentials:
                password = (
                    server_context.password.get_secret_value()
                    if server_context.password
                    else ""
                )
                self.add_switch_with_value(
                    "login", f"{server_context.username},{password}", is_secret=True
                )

    def add(self, argument: str) -> "ArgumentBuilder":
        """Append a positional argument exactly as given"""
        self._arguments.append((argument, None))
        return self

    def add_switch(self, switch: str) -> "ArgumentBuilder":
        self._arguments.append((f"-{switch}", None))
        return self

    def add_switch_with_value(
        self, switch: str, value: str, is_secret: bool = False
    ) -> "ArgumentBuilder":
        argument = f"-{switch}:{value}"
        self._arguments.append((argument, value if is_secret else None))
        return self

    def get_command(self) -> str:
        return self._command

    def get_arguments(self) -> List[str]:
        """Arguments to hand to the process, secrets included"""
        return [argument for argument, _ in self._arguments]

    def to_string(self) -> str:
        """Printable form of the arguments with secret values masked"""
        rendered = []
        for argument, secret in self._arguments:
            if secret:
                argument = argument.replace(secret, SECRET_MASK)
            rendered.append(argument)
        return " ".join(rendered)

    def __str__(self) -> str:
        return self.to_string()
