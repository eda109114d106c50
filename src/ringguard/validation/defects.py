"""
Defect taxonomy and validation outcomes.

Every defect is an input-validation failure. Validation entry points return
defects as data wrapped in ``Invalid``; ``InvalidGeometryError`` is only
raised by the entry points that promise a Ring or raise.
"""

from dataclasses import dataclass
from typing import Union

from ..core.geometry import MIN_RING_POINTS, LATITUDE_RANGE, LONGITUDE_RANGE, Point, Ring


LATITUDE = 'latitude'
LONGITUDE = 'longitude'

_AXIS_RANGES = {
    LATITUDE: LATITUDE_RANGE,
    LONGITUDE: LONGITUDE_RANGE,
}


@dataclass(frozen=True)
class TooFewPoints:
    """
    Fewer than three distinct vertices were submitted.

    Attributes
    ----------
    count : int
        Number of coordinates submitted.
    closed : bool
        True when the last coordinate repeats the first, so one of the
        submitted coordinates is only the closing point.
    """
    count: int
    closed: bool = False

    kind = 'too_few_points'

    @property
    def message(self) -> str:
        if self.closed:
            return (
                f"Polygon must have at least {MIN_RING_POINTS} distinct coordinates, "
                f"got {self.count} including the closing point"
            )
        return f"Polygon must have at least {MIN_RING_POINTS} coordinates, got {self.count}"


@dataclass(frozen=True)
class CoordinateOutOfRange:
    """
    A coordinate component is outside its valid range or not finite.

    Attributes
    ----------
    index : int
        Position of the point in the submitted sequence.
    axis : str
        ``'latitude'`` or ``'longitude'``.
    value : float
        The offending component value.
    """
    index: int
    axis: str
    value: float

    kind = 'coordinate_out_of_range'

    @property
    def message(self) -> str:
        low, high = _AXIS_RANGES[self.axis]
        return (
            f"Point {self.index + 1}: {self.axis.capitalize()} must be between "
            f"{low:g} and {high:g}, got {self.value}"
        )


@dataclass(frozen=True)
class ZeroLengthEdge:
    """Two consecutive points of the closed ring coincide."""
    index: int

    kind = 'zero_length_edge'

    @property
    def message(self) -> str:
        return f"Polygon contains a zero-length edge at index {self.index}"


@dataclass(frozen=True)
class SelfIntersection:
    """Two non-adjacent edges cross, touch or overlap."""
    edge_a: int
    edge_b: int

    kind = 'self_intersection'

    @property
    def message(self) -> str:
        return (
            f"Polygon edges {self.edge_a} and {self.edge_b} must not cross "
            f"(self-intersection detected)"
        )


Defect = Union[TooFewPoints, CoordinateOutOfRange, ZeroLengthEdge, SelfIntersection]


@dataclass(frozen=True)
class Valid:
    """Successful validation carrying the closed ring (or a single point)."""
    value: Union[Ring, Point]

    is_valid = True

    @property
    def ring(self) -> Ring:
        if not isinstance(self.value, Ring):
            raise AttributeError("Outcome holds a point, not a ring")
        return self.value


@dataclass(frozen=True)
class Invalid:
    """Failed validation carrying the first defect found."""
    defect: Defect

    is_valid = False

    @property
    def message(self) -> str:
        return self.defect.message


ValidationOutcome = Union[Valid, Invalid]


class InvalidGeometryError(ValueError):
    """
    Raised when a caller asks for a ring and the input has a defect.

    Attributes
    ----------
    defect : Defect
        The defect that stopped validation.
    """

    def __init__(self, defect: Defect):
        super().__init__(defect.message)
        self.defect = defect
