"""Integer point value type and its proximity queries."""

import logging
import re
from collections.abc import Iterable
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

from point_struct.errors import InvalidArgumentError, InvalidFormatError, NullArgumentError

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]

# Optional ASCII whitespace around an optionally signed run of ASCII digits
_INTEGER_LITERAL = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+[ \t\n\v\f\r]*")


class Alignment(str, Enum):
    """How a point lines up with a reference point."""

    SAME = "SAME"  # both coordinates match
    X = "X"  # same x, different y
    Y = "Y"  # same y, different x


def _parse_coordinate(part: str) -> int:
    if not _INTEGER_LITERAL.fullmatch(part):
        raise InvalidFormatError(f"Point coordinate {part!r} is not an integer.")
    value = int(part)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidFormatError(f"Point coordinate {part!r} is outside the 64-bit range.")
    return value


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


class Point(BaseModel):
    """An immutable 2D point with 64-bit integer coordinates."""

    model_config = ConfigDict(frozen=True, strict=True)

    x: Int64
    y: Int64

    def __init__(self, x: int, y: int, **data: Any) -> None:
        super().__init__(x=x, y=y, **data)

    @classmethod
    def parse(cls, text: str | None) -> "Point":
        """Parse the canonical ``"x,y"`` form.

        Empty pieces produced by the comma split are dropped, so exactly two
        non-empty parts must remain. Each part may carry surrounding
        whitespace and a leading sign.

        Raises:
            InvalidFormatError: if the text is blank, does not have two parts,
                or either part is not a 64-bit integer.
        """
        if text is None or not text.strip():
            raise InvalidFormatError("Point string cannot be null or empty.")

        parts = [part for part in text.split(",") if part]
        if len(parts) != 2:
            raise InvalidFormatError("Point string must contain two parts separated by comma.")

        return cls(_parse_coordinate(parts[0]), _parse_coordinate(parts[1]))

    @classmethod
    def try_parse(cls, text: str | None) -> "Point | None":
        """Parse like :meth:`parse`, returning None instead of raising."""
        try:
            return cls.parse(text)
        except InvalidFormatError as e:
            logger.debug("Rejected point string %r: %s", text, e)
            return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return self.hash_code()

    def __str__(self) -> str:
        return f"{self.x},{self.y}"

    def hash_code(self) -> int:
        """Fold both coordinates into a signed 32-bit hash."""
        return _to_int32(((self.x >> 32) ^ self.x) ^ ((self.y >> 32) ^ self.y))

    def chebyshev_distance(self, other: "Point") -> int:
        """Largest absolute coordinate difference to another point."""
        return max(abs(other.x - self.x), abs(other.y - self.y))

    def is_neighbor(self, distance: int, other: "Point") -> bool:
        """Check whether other lies in the square of half-width distance around this point."""
        return abs(other.x - self.x) <= distance and abs(other.y - self.y) <= distance

    def count_points_in_exact_same_location(self, points: Iterable["Point"]) -> int:
        """Count the points equal to this one."""
        return sum(1 for point in points if point == self)

    def alignment_with(self, other: "Point") -> Alignment | None:
        """Classify how other shares coordinates with this point.

        Returns None when other shares neither coordinate.
        """
        if other.x == self.x and other.y == self.y:
            return Alignment.SAME
        if other.x == self.x:
            return Alignment.X
        if other.y == self.y:
            return Alignment.Y
        return None

    def get_collinear_point_coordinates(self, points: Iterable["Point"]) -> str:
        """Describe the points sharing a coordinate with this one.

        Each match renders as ``(x,y,"TAG")`` in input order and the entries
        are joined with commas, e.g. ``(0,0,"SAME"),(0,5,"X")``.
        """
        entries = []
        for point in points:
            alignment = self.alignment_with(point)
            if alignment is not None:
                entries.append(f'({point},"{alignment.value}")')
        return ",".join(entries)

    def get_neighbors(self, distance: int, points: Iterable["Point"] | None) -> list["Point"]:
        """Find points within Chebyshev distance of this point.

        Points equal to this one are never returned. Order follows the input.

        Raises:
            InvalidArgumentError: if distance is not positive.
            NullArgumentError: if points is None.
        """
        if distance <= 0:
            raise InvalidArgumentError(f"Distance must be positive, got {distance}.")
        if points is None:
            raise NullArgumentError("points cannot be None.")

        neighbors = [
            point for point in points if point != self and self.is_neighbor(distance, point)
        ]
        logger.debug(
            "Found %d neighbors of (%s) within distance %d", len(neighbors), self, distance
        )
        return neighbors
