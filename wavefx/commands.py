"""Transform commands: one variant per transform, carrying its arguments."""

import re
from dataclasses import dataclass, fields

from .errors import (
    InvalidSpeedError, InvalidTimeError, InvalidVolumeError, InvalidEchoError,
    UnrecognizedCommandError,
)

# Unsigned decimal: "12", "1.", ".5", "1.5"
_NUMBER_RE = re.compile(r'(?:\d+\.?\d*|\.\d+)')


def parse_number(text, error=UnrecognizedCommandError):
    """Parse a non-negative decimal argument.

    Signs, exponents and anything else that is not plain digits with at most
    one decimal point are rejected.

    Args:
        text: Raw command-line token.
        error: WaveError subclass to raise for malformed input.

    Returns:
        The value as a float.
    """
    if not _NUMBER_RE.fullmatch(text):
        raise error()
    return float(text)


class Command:
    """Base class for transform commands.

    Subclasses are dataclasses whose fields are the numeric arguments, in
    command-line order. ``error`` is raised for malformed arguments.
    """

    flag = None
    error = UnrecognizedCommandError

    @classmethod
    def arity(cls):
        return len(fields(cls))

    @classmethod
    def from_tokens(cls, tokens):
        """Build the command from its raw argument tokens."""
        if len(tokens) != cls.arity():
            raise UnrecognizedCommandError()
        return cls(*(parse_number(token, cls.error) for token in tokens))


@dataclass(frozen=True)
class Reverse(Command):
    flag = '-r'


@dataclass(frozen=True)
class ChangeSpeed(Command):
    factor: float
    flag = '-s'
    error = InvalidSpeedError


@dataclass(frozen=True)
class FlipChannels(Command):
    flag = '-f'


@dataclass(frozen=True)
class FadeOut(Command):
    duration: float
    flag = '-o'
    error = InvalidTimeError


@dataclass(frozen=True)
class FadeIn(Command):
    duration: float
    flag = '-i'
    error = InvalidTimeError


@dataclass(frozen=True)
class Volume(Command):
    scale: float
    flag = '-v'
    error = InvalidVolumeError


@dataclass(frozen=True)
class Echo(Command):
    delay: float
    scale: float
    flag = '-e'
    error = InvalidEchoError


COMMANDS = (Reverse, ChangeSpeed, FlipChannels, FadeOut, FadeIn, Volume, Echo)
FLAGS = {command.flag: command for command in COMMANDS}
