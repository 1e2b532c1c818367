"""Byte-size units, conversions between them and platform detection."""

from __future__ import annotations

import sys
from enum import Enum

__all__ = [
    "ByteUnit",
    "to_bytes",
    "from_bytes",
    "from_bytes_ceil",
    "remainder",
    "convert",
    "platform_name",
]


class ByteUnit(Enum):
    """Decimal (SI) and binary (IEC) byte multiples, valued in bytes."""

    KB = 1000
    MB = 1000000
    GB = 1000000000
    KIB = 1024
    MIB = 1048576
    GIB = 1073741824

    @property
    def nbytes(self) -> int:
        """Number of bytes in one of this unit."""
        return self.value


def _check_amount(amount: int, what: str) -> None:
    if amount < 0:
        raise ValueError(f"{what} must not be negative, got {amount}")


def to_bytes(amount: int, unit: ByteUnit) -> int:
    """Return the number of bytes in ``amount`` of ``unit``."""
    _check_amount(amount, "amount")
    return amount * unit.value


def from_bytes(nbytes: int, unit: ByteUnit) -> int:
    """Return how many whole ``unit`` fit in ``nbytes`` (rounded down)."""
    _check_amount(nbytes, "nbytes")
    return nbytes // unit.value


def from_bytes_ceil(nbytes: int, unit: ByteUnit) -> int:
    """Return how many ``unit`` are needed to hold ``nbytes`` (rounded up)."""
    _check_amount(nbytes, "nbytes")
    return (nbytes + unit.value - 1) // unit.value


def remainder(nbytes: int, unit: ByteUnit) -> int:
    """Return the bytes left over after taking whole ``unit`` out of ``nbytes``."""
    _check_amount(nbytes, "nbytes")
    return nbytes % unit.value


def convert(amount: int, source: ByteUnit, target: ByteUnit) -> int:
    """Convert ``amount`` of ``source`` into whole ``target`` units (rounded down)."""
    _check_amount(amount, "amount")
    return amount * source.value // target.value


_PLATFORMS = {
    "emscripten": "WASM",
    "win32": "Windows",
    "cygwin": "Windows",
    "darwin": "macOS",
    "linux": "Linux",
}


def platform_name() -> str:
    """Return the name of the running platform; raise RuntimeError if unknown."""
    for prefix, name in _PLATFORMS.items():
        if sys.platform.startswith(prefix):
            return name
    raise RuntimeError("Unknown platform!")