"""Colors parsed from GitHub's 6-digit hex notation (e.g. label colors)."""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_RE = re.compile(r"[0-9A-Fa-f]{6}")


def _check_length(hex: str) -> None:
    if len(hex) != 6:
        msg = f"Color hex must be exactly 6 characters, got {hex!r}"
        raise ValueError(msg)


@dataclass(frozen=True)
class RGBColor:
    """An opaque RGB color with channels in the range [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_hex(cls, hex: str) -> RGBColor:
        """Parse ``RRGGBB``. Anything other than six hex digits is a caller bug."""
        _check_length(hex)
        if not _HEX_RE.fullmatch(hex):
            msg = f"Invalid hex color: {hex!r}"
            raise ValueError(msg)

        rgb = int(hex, 16)
        return cls(
            red=((rgb & 0xFF0000) >> 16) / 255,
            green=((rgb & 0x00FF00) >> 8) / 255,
            blue=(rgb & 0x0000FF) / 255,
            alpha=1.0,
        )


@dataclass(frozen=True)
class HexColor:
    """Fallback color that only keeps the hex text it was created from.

    Equality is plain string equality; channels are never computed.
    """

    hex: str

    @classmethod
    def from_hex(cls, hex: str) -> HexColor:
        _check_length(hex)
        return cls(hex)


Color = RGBColor
