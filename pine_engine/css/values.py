"""
CSS declaration values.

A value is exactly one of ``Keyword``, ``Length`` or ``Color``.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional


class Unit(Enum):
    """Length units understood by the stylesheet parser."""
    PX = "px"
    PERCENTAGE = "%"
    EM = "em"
    UNKNOWN = ""

    @classmethod
    def from_suffix(cls, suffix: str) -> 'Unit':
        """
        Map a unit suffix to a Unit, case-insensitively.

        Args:
            suffix: The text following the number, e.g. "px"

        Returns:
            The matching unit, or Unit.UNKNOWN
        """
        suffix = suffix.lower()
        for unit in (cls.PX, cls.PERCENTAGE, cls.EM):
            if unit.value == suffix:
                return unit
        return cls.UNKNOWN


class Value:
    """Base class for declaration values."""

    def _key(self) -> tuple:
        raise NotImplementedError("Subclasses must implement _key")

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())


class Keyword(Value):
    """A bare identifier value such as ``block`` or ``red``."""

    def __init__(self, name: str):
        self.name = name

    def _key(self) -> tuple:
        return (self.name,)

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"Keyword({self.name!r})"


class Length(Value):
    """
    A numeric value with a unit, e.g. ``1.5em``.

    ``suffix`` keeps the unit text as written so that an unrecognised unit
    such as ``vw`` still prints back as ``10vw``; it does not take part in
    comparisons.
    """

    def __init__(self, value: float, unit: Unit, suffix: Optional[str] = None):
        self.value = value
        self.unit = unit
        self.suffix = unit.value if suffix is None else suffix

    def _key(self) -> tuple:
        return (self.value, self.unit)

    def __str__(self):
        number = float(self.value)
        if number.is_integer():
            text = str(int(number))
        else:
            # Shortest round-trip digits, never in exponent notation.
            text = format(Decimal(repr(number)), "f")
        unit = self.suffix if self.unit is Unit.UNKNOWN else self.unit.value
        return f"{text}{unit}"

    def __repr__(self):
        return f"Length({self.value!r}, {self.unit})"


class Color(Value):
    """An RGBA color, each channel in 0-255."""

    def __init__(self, r: int, g: int, b: int, a: int = 255):
        for channel in (r, g, b, a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")
        self.r = r
        self.g = g
        self.b = b
        self.a = a

    def _key(self) -> tuple:
        return (self.r, self.g, self.b, self.a)

    def to_hex(self) -> str:
        """Get the color as ``#rrggbb`` (alpha is not represented)."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def __str__(self):
        return self.to_hex()

    def __repr__(self):
        return f"Color({self.r}, {self.g}, {self.b}, {self.a})"
