# heading.py

from enum import Enum

from config import HEADING_TABLE


class UnrecognizedDirection(ValueError):
    """Raised when a move is requested in something other than a cardinal Heading."""


class Heading(Enum):
    """The four cardinal directions a robot can be asked to move in."""

    PLUS_X = "PLUS_X"
    PLUS_Y = "PLUS_Y"
    MINUS_X = "MINUS_X"
    MINUS_Y = "MINUS_Y"

    @property
    def offset(self):
        """Grid offset (dx, dy) of one step in this direction."""
        return HEADING_TABLE[self.value][0]

    @property
    def degrees(self):
        return HEADING_TABLE[self.value][1]

    @classmethod
    def from_offset(cls, dx, dy):
        for heading in cls:
            if heading.offset == (dx, dy):
                return heading
        raise UnrecognizedDirection(f"No cardinal heading for grid offset ({dx}, {dy})")
