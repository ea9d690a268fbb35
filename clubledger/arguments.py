"""A small command-line argument parser with typed, chainable argument definitions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

T = TypeVar("T")


class ArgumentError(ValueError):
    """Raised for conflicting definitions or command lines that cannot be parsed."""


def _parse_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ArgumentError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ArgumentError(f"integer out of range: {text!r}")
    return value


@dataclass
class HelpCommand:
    """Names of the help option and the program description it prints."""

    short_name: str | None
    name: str
    description: str = ""
    requested: bool = False


class Argument:
    """Common description of a named command-line argument."""

    def __init__(self, short_name: str | None, name: str, description: str) -> None:
        self.short_name = short_name or None
        self.name = name
        self.description = description
        self.is_multivalue = False
        self.is_defaulted = False
        self.min_value_count = 0
        self._store: tuple[Any, str] | None = None

    def _help_body(self) -> str:
        raise NotImplementedError


class FlagArgument(Argument):
    """A boolean switch that becomes true when it appears on the command line."""

    def __init__(self, short_name: str | None, name: str, description: str) -> None:
        super().__init__(short_name, name, description)
        self._value = False
        self._default = False

    def default(self, value: bool) -> FlagArgument:
        """Set the value the flag has when it is not given."""
        self.is_defaulted = True
        self._value = bool(value)
        self._default = bool(value)
        return self

    def store_value(self, target: Any, attribute: str) -> FlagArgument:
        """Mirror every value the flag receives into ``target.attribute``."""
        self._store = (target, attribute)
        return self

    def set_value(self, value: bool) -> None:
        """Set the flag and update the stored attribute, if any."""
        self._value = bool(value)
        if self._store is not None:
            target, attribute = self._store
            setattr(target, attribute, self._value)

    def value(self) -> bool:
        """Current state of the flag."""
        return self._value

    def _help_body(self) -> str:
        text = f"--{self.name},\t{self.description}"
        if self.is_defaulted:
            text += f" [default = {int(self._default)}]"
        return text


class ValueArgument(Argument, Generic[T]):
    """An argument that carries one value or, when multivalued, several."""

    _empty: Any = None
    _placeholder = ""

    def __init__(self, short_name: str | None, name: str, description: str) -> None:
        super().__init__(short_name, name, description)
        self._values: list[T] = []
        self._default_value: T | None = None

    def _convert(self, text: str) -> T:
        raise NotImplementedError

    def multivalue(self, min_count: int = 0) -> ValueArgument[T]:
        """Accept repeated values, requiring at least ``min_count`` of them."""
        self.is_multivalue = True
        self.min_value_count = min_count
        return self

    def store_value(self, target: Any, attribute: str) -> ValueArgument[T]:
        """Mirror received values into ``target.attribute``.

        For a multivalued argument the attribute must hold a list, which is
        appended to in place.
        """
        self._store = (target, attribute)
        return self

    def _stored_list(self) -> list[T]:
        target, attribute = self._store  # type: ignore[misc]
        return getattr(target, attribute)

    def _store_single(self, value: T) -> None:
        target, attribute = self._store  # type: ignore[misc]
        setattr(target, attribute, value)

    def default(self, value: T) -> ValueArgument[T]:
        """Give the argument a value used until one comes from the command line."""
        self.is_defaulted = True
        self._default_value = value
        self._values.append(value)
        if self._store is not None:
            if self.is_multivalue:
                self._stored_list().append(value)
            else:
                self._store_single(value)
        return self

    def set_value(self, value: T) -> None:
        """Record a value received from the command line."""
        if self.is_multivalue:
            if self.is_defaulted:
                self.is_defaulted = False
                self._values.clear()
                if self._store is not None:
                    self._stored_list().clear()
            if self._store is not None:
                self._stored_list().append(value)
            if self.min_value_count > 0:
                self.min_value_count -= 1
            self._values.append(value)
        else:
            self._values[:] = [value]
            if self._store is not None:
                self._store_single(value)

    def value(self, index: int = 0) -> T:
        """Return the value at ``index``, or the type's empty value if there is none."""
        if 0 <= index < len(self._values):
            return self._values[index]
        return self._empty

    def _help_body(self) -> str:
        text = f"--{self.name}={self._placeholder},\t{self.description}"
        if self.is_defaulted:
            text += f" [default = {self._default_value}]"
        if self.is_multivalue:
            text += f" [repeated, min args = {self.min_value_count}]"
        return text


class IntArgument(ValueArgument[int]):
    """An argument holding integers."""

    _empty = 0
    _placeholder = "<int>"

    def _convert(self, text: str) -> int:
        return _parse_int(text)


class StringArgument(ValueArgument[str]):
    """An argument holding strings."""

    _empty = ""
    _placeholder = "<string>"

    def _convert(self, text: str) -> str:
        return text


class ArgParser:
    """Parses a command line against a set of defined arguments."""

    def __init__(self, name: str = "new parser") -> None:
        self.name = name
        self._arguments: list[Argument] = []
        self._help = HelpCommand("h", "Help", "show Help description")

    def _find(self, short_name: str | None = None, name: str = "") -> Argument | None:
        for argument in self._arguments:
            if (short_name and short_name == argument.short_name) or (
                name and name == argument.name
            ):
                return argument
        return None

    def _check_definition(self, short_name: str | None, name: str) -> None:
        if (
            self._find(short_name, name) is not None
            or (short_name or None) == self._help.short_name
            or name == self._help.name
        ):
            raise ArgumentError("Arguments must be named with difference.")

    def _add(self, factory: Callable[[str | None, str, str], Any], name: str,
             description: str, short_name: str | None) -> Any:
        self._check_definition(short_name, name)
        argument = factory(short_name, name, description)
        self._arguments.append(argument)
        return argument

    def add_string_argument(
        self, name: str, description: str = "", short_name: str | None = None
    ) -> StringArgument:
        """Define a string argument and return it for further configuration."""
        return self._add(StringArgument, name, description, short_name)

    def add_int_argument(
        self, name: str, description: str = "", short_name: str | None = None
    ) -> IntArgument:
        """Define an integer argument and return it for further configuration."""
        return self._add(IntArgument, name, description, short_name)

    def add_flag(
        self, name: str, description: str = "", short_name: str | None = None
    ) -> FlagArgument:
        """Define a flag and return it for further configuration."""
        return self._add(FlagArgument, name, description, short_name)

    def add_help(self, short_name: str | None, name: str, description: str = "") -> None:
        """Rename the help option and set the program description."""
        if self._find(short_name, name) is not None:
            raise ArgumentError("arguments must be named with difference")
        self._help = HelpCommand(short_name or None, name, description)

    def _assign(self, argument: Argument, text: str) -> None:
        if isinstance(argument, FlagArgument):
            argument.set_value(True)
        elif isinstance(argument, ValueArgument):
            argument.set_value(argument._convert(text))

    def parse(self, argv: list[str]) -> None:
        """Parse ``argv`` (without the program name); raise ArgumentError on failure."""
        pending: Argument | None = None
        for term in argv:
            if term.startswith("--"):
                pending = None
                equal = term.find("=")
                if equal == -1:
                    name, text = term[2:], term
                else:
                    name, text = term[2:equal], term[equal + 1:]
                argument = self._find(None, name)
                if argument is not None:
                    self._assign(argument, text)
                elif term[2:] == self._help.name:
                    self._help.requested = True
                else:
                    raise ArgumentError(f"a non-existent parameter {term}")
            elif term.startswith("-"):
                short = term[1:2]
                argument = self._find(short) if short else None
                if argument is not None:
                    if isinstance(argument, FlagArgument):
                        argument.set_value(True)
                    else:
                        pending = argument
                elif short and short == self._help.short_name:
                    self._help.requested = True
                else:
                    raise ArgumentError(f"A non-existent parameter: {short}")
            elif pending is not None:
                self._assign(pending, term)
            else:
                raise ArgumentError("positional argument must be not empty")

        for argument in self._arguments:
            if not isinstance(argument, FlagArgument) and argument.min_value_count > 0:
                raise ArgumentError(f"Too few parameters for argument {argument.name}")

    def help_requested(self) -> bool:
        """Return True if the help option appeared on the command line."""
        return self._help.requested

    def help_description(self) -> str:
        """Render the help text listing every defined argument."""
        lines = [self.name, self._help.description, ""]
        for argument in self._arguments:
            prefix = f"-{argument.short_name},\t" if argument.short_name else "\t"
            lines.append(prefix + argument._help_body())
        lines.append("")
        lines.append(f"-{self._help.short_name or ''},\t--{self._help.name}"
                     "\tDisplay this help and exit")
        return "\n".join(lines) + "\n"

    def get_int_value(self, name: str, index: int = 0) -> int:
        """Value of an integer argument, or -1 if no argument has that name."""
        argument = self._find(None, name)
        if argument is None:
            return -1
        if not isinstance(argument, IntArgument):
            raise ArgumentError(f"argument {name} is not an integer argument")
        return argument.value(index)

    def get_string_value(self, name: str, index: int = 0) -> str:
        """Value of a string argument, or an empty string if no argument has that name."""
        argument = self._find(None, name)
        if argument is None:
            return ""
        if not isinstance(argument, StringArgument):
            raise ArgumentError(f"argument {name} is not a string argument")
        return argument.value(index)

    def get_flag(self, name: str) -> bool:
        """State of a flag, or False if no argument has that name."""
        argument = self._find(None, name)
        if argument is None:
            return False
        if not isinstance(argument, FlagArgument):
            raise ArgumentError(f"argument {name} is not a flag")
        return argument.value()