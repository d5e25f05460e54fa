"""
Integer ranges and bandwidth strings as entered on the command line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import regex as re

from bencomp.core.errors import ConfigurationError

if TYPE_CHECKING:
    from bencomp.core.random_source import RandomSource


UINT64_MAX = 2**64 - 1

RANGE_RE = re.compile(r"([0-9]+)-([0-9]+)")
BANDWIDTH_RE = re.compile(r"([0-9]+)([KMG]?B)?", re.IGNORECASE)

BANDWIDTH_MULTIPLIERS = {
    "": 1,
    "B": 1,
    "KB": 1_000,
    "MB": 1_000_000,
    "GB": 1_000_000_000,
}


@dataclass(frozen=True)
class IntRange:
    """Half-open integer draw interval ``[start, stop)``.

    Users write ranges inclusively (``"4-6"``); the upper bound is bumped by
    one when the range is built so draws can use half-open primitives
    directly.
    """

    start: int
    stop: int

    def __post_init__(self) -> None:
        if self.stop <= self.start:
            raise ConfigurationError(f"Empty range [{self.start}, {self.stop})")

    @classmethod
    def fixed(cls, value: int) -> "IntRange":
        return cls(value, value + 1)

    @classmethod
    def inclusive(cls, minimum: int, maximum: int) -> "IntRange":
        if minimum > maximum:
            raise ConfigurationError(
                f"min '{minimum}' cannot be greater than max '{maximum}'"
            )
        return cls(minimum, maximum + 1)

    @property
    def minimum(self) -> int:
        return self.start

    @property
    def maximum(self) -> int:
        return self.stop - 1

    @property
    def is_constant(self) -> bool:
        return self.stop - self.start == 1

    def draw(self, rng: "RandomSource") -> int:
        # Constant ranges must not consume randomness.
        if self.is_constant:
            return self.start
        return rng.randrange(self.start, self.stop)

    def __contains__(self, value: int) -> bool:
        return self.start <= value < self.stop

    def __str__(self) -> str:
        if self.is_constant:
            return str(self.start)
        return f"{self.minimum}-{self.maximum}"


def parse_range(text: str) -> IntRange:
    """Parse an inclusive ``"lo-hi"`` range.

    Args:
        text: Range as typed by the user, e.g. ``"4-6"``

    Returns:
        IntRange drawing from ``{lo, ..., hi}``

    Raises:
        ConfigurationError: If the text is not two non-negative integers
            separated by ``-``, or if lo > hi
    """
    match = RANGE_RE.fullmatch(text or "")
    if match is None:
        raise ConfigurationError(f"invalid range {text!r}")
    return IntRange.inclusive(int(match.group(1)), int(match.group(2)))


def parse_bandwidth(text: str) -> int:
    """Parse a bandwidth such as ``"128KB"`` into bytes per second.

    Units are decimal (K=1e3, M=1e6, G=1e9) and case-insensitive. A bare
    number or a ``B`` suffix means bytes. An empty string means no network
    stage and yields 0.

    Raises:
        ConfigurationError: On malformed input or if the value does not fit
            in an unsigned 64-bit integer
    """
    if not text:
        return 0

    match = BANDWIDTH_RE.fullmatch(text)
    if match is None:
        raise ConfigurationError(f"invalid value {text!r} for network bandwidth")

    unit = (match.group(2) or "").upper()
    value = int(match.group(1)) * BANDWIDTH_MULTIPLIERS[unit]
    if value > UINT64_MAX:
        raise ConfigurationError(
            f"invalid value {text!r} for network bandwidth: value out of range"
        )
    return value
