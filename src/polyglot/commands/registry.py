"""Registry of commands, looked up by name or alias."""

from typing import TypeVar

from polyglot.commands.base import BaseCommand

CommandClass = TypeVar("CommandClass", bound=type[BaseCommand])


class CommandRegistry:
    """Class-level registry of command classes.

    Names and aliases share one namespace: registering a command whose name
    or alias is already taken fails.

    Usage:
        @CommandRegistry.register
        class ShowCommand(BaseCommand):
            ...

        cmd = CommandRegistry.get_instance("show")
    """

    # name -> class, in registration order
    _commands: dict[str, type[BaseCommand]] = {}
    # name or alias -> name
    _lookup: dict[str, str] = {}

    @classmethod
    def register(cls, command_class: CommandClass) -> CommandClass:
        """Class decorator form of register_command."""
        cls.register_command(command_class)
        return command_class

    @classmethod
    def register_command(cls, command_class: type[BaseCommand]) -> None:
        """Add a command class under its name and aliases.

        Raises:
            ValueError: If the name or one of the aliases is taken.
        """
        command = command_class()
        keys = [command.name, *command.aliases]

        taken = [key for key in keys if key in cls._lookup]
        if taken:
            raise ValueError(
                f"Command '{command.name}' is already registered"
                if command.name in taken
                else f"Alias '{taken[0]}' conflicts with existing command or alias"
            )

        cls._commands[command.name] = command_class
        for key in keys:
            cls._lookup[key] = command.name

    @classmethod
    def get(cls, name: str) -> type[BaseCommand] | None:
        """Command class for a name or alias, or None."""
        target = cls._lookup.get(name)
        return cls._commands[target] if target is not None else None

    @classmethod
    def get_instance(cls, name: str) -> BaseCommand | None:
        command_class = cls.get(name)
        return command_class() if command_class is not None else None

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._lookup

    @classmethod
    def unregister(cls, name: str) -> bool:
        """Remove a command and its aliases. False if ``name`` is unknown."""
        if cls._commands.pop(name, None) is None:
            return False
        for key in [key for key, target in cls._lookup.items() if target == name]:
            del cls._lookup[key]
        return True

    @classmethod
    def get_command_info(cls) -> list[dict[str, str]]:
        """Name, description and comma-separated aliases per command."""
        info = []
        for command_class in cls._commands.values():
            command = command_class()
            info.append(
                {
                    "name": command.name,
                    "description": command.description,
                    "aliases": ", ".join(command.aliases),
                }
            )
        return info
