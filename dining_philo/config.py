"""Command-line settings for the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

MAX_PHILOSOPHERS = 250

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


class ConfigError(ValueError):
    """Raised when the simulation settings are invalid."""


def parse_int(text: str) -> int:
    """Read a leading integer from ``text`` leniently.

    Leading whitespace is skipped, then any run of ``+``/``-`` signs. More
    than one sign character yields 0. Digits are read until the first
    non-digit; anything after them is ignored, and no digits yields 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    stripped = rest.lstrip("+-")
    signs = rest[: len(rest) - len(stripped)]
    if len(signs) > 1:
        return 0
    digits = []
    for char in stripped:
        if char not in _DIGITS:
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return -value if signs == "-" else value


@dataclass(frozen=True)
class Settings:
    """Validated parameters of one simulation run, times in milliseconds.

    ``meals`` is the number of meals each philosopher must eat before the
    simulation ends, or ``None`` when it runs until someone dies.
    """

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: int | None = None

    def __post_init__(self) -> None:
        if self.philosophers < 1:
            raise ConfigError("number of philosopher must be at least one")
        if self.philosophers > MAX_PHILOSOPHERS:
            raise ConfigError(
                f"number of philosopher must not be above {MAX_PHILOSOPHERS}"
            )
        if min(self.time_to_eat, self.time_to_sleep, self.time_to_die) < 1:
            raise ConfigError("timers must be over 0")
        if self.meals is not None and self.meals < 0:
            raise ConfigError("number of meals to eat must be 0 or above")


def parse_settings(args: Sequence[str]) -> Settings:
    """Build settings from the program arguments, without the program name.

    Expects four or five arguments: number of philosophers, time to die,
    time to eat, time to sleep and optionally the number of meals.
    """
    if len(args) not in (4, 5):
        raise ConfigError(f"expected 4 or 5 arguments, got {len(args)}")
    philosophers, die, eat, sleep, *rest = (parse_int(arg) for arg in args)
    return Settings(
        philosophers=philosophers,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        meals=rest[0] if rest else None,
    )