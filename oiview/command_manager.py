"""Named commands, predefined command groups and their dispatch."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Tuple


class UnknownCommandError(LookupError):
    """Raised when a request names a command that was never registered."""


@dataclass
class CommandArgs:
    """Ordered key/value arguments of a command request."""

    args: List[Tuple[str, str]] = field(default_factory=list)

    @classmethod
    def from_string(cls, text: str) -> CommandArgs:
        """Parse ``key=value;key=value`` text."""
        pairs = []
        for item in text.split(";"):
            if not item:
                continue
            parts = item.split("=")
            if len(parts) < 2:
                raise ValueError(f"malformed command argument: {item!r}")
            pairs.append((parts[0], parts[1]))
        return cls(pairs)

    def get(self, name: str) -> str:
        """Value of the first argument called ``name``, or an empty string."""
        return next((value for key, value in self.args if key == name), "")


@dataclass(frozen=True)
class CommandGroup:
    group_id: str
    display_name: str
    command_name: str
    arguments: str = ""


@dataclass
class CommandRequest:
    display_name: str = ""
    command_name: str = ""
    args: CommandArgs = field(default_factory=CommandArgs)


CommandCallback = Callable[[CommandRequest], str]


@dataclass(frozen=True)
class Command:
    name: str
    callback: CommandCallback

    def execute(self, request: CommandRequest) -> str:
        return self.callback(request)


class CommandManager:
    """Registry of commands and predefined command groups."""

    def __init__(self) -> None:
        self._groups: Dict[str, CommandGroup] = {}
        self._commands: Dict[str, Command] = {}

    @property
    def command_groups(self) -> Mapping[str, CommandGroup]:
        return dict(sorted(self._groups.items()))

    def add_command(self, command: Command) -> None:
        """Register a command; an existing command of the same name is kept."""
        self._commands.setdefault(command.name, command)

    def add_command_group(self, group: CommandGroup) -> None:
        """Register a group; an existing group with the same id is kept."""
        self._groups.setdefault(group.group_id, group)

    def command_request_for_group(self, group_id: str) -> CommandRequest:
        """Build the request a group describes, or an empty request if unknown."""
        group = self._groups.get(group_id)
        if group is None:
            return CommandRequest()
        return CommandRequest(
            group.display_name,
            group.command_name,
            CommandArgs.from_string(group.arguments),
        )

    def execute(self, request: CommandRequest) -> str:
        """Run the named command and return its result text."""
        command = self._commands.get(request.command_name)
        if command is None:
            raise UnknownCommandError(request.command_name)
        return command.execute(request)