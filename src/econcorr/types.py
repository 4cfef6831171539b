"""Common type helpers for econcorr.

This module defines the lightweight containers exchanged between the data
sources, the correlation engine and the command line front end.  The
structures are intentionally minimal but add clarity and type safety around
frequently exchanged data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union


class Strength(str, Enum):
    """Display label describing how strongly two series move together."""

    STRONG_POSITIVE = "Strong Positive"
    STRONG_NEGATIVE = "Strong Negative"
    MODERATE_POSITIVE = "Moderate Positive"
    MODERATE_NEGATIVE = "Moderate Negative"
    WEAK_POSITIVE = "Weak Positive"
    WEAK_NEGATIVE = "Weak Negative"
    NONE = "No Correlation"


class Direction(str, Enum):
    SAME = "Same"
    OPPOSITE = "Opposite"
    NONE = "None"


class Confidence(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class TimePoint:
    """One observation of an indicator at a calendar date."""

    date: str
    value: float


PointLike = Union[TimePoint, Mapping[str, Any], Tuple[str, float]]


def to_point(item: PointLike) -> TimePoint:
    """Coerce ``item`` into a :class:`TimePoint`.

    Mappings must provide ``date`` and ``value`` keys; tuples are read as
    ``(date, value)``.
    """

    if isinstance(item, TimePoint):
        return item
    if isinstance(item, Mapping):
        return TimePoint(str(item["date"]), float(item["value"]))
    date, value = item
    return TimePoint(str(date), float(value))


@dataclass
class TimeSeries:
    """Chronological sequence of :class:`TimePoint` keyed by date.

    Dates must be unique within a series.  Two series are not required to
    share the same dates.
    """

    series_id: str
    points: List[TimePoint] = field(default_factory=list)
    name: Optional[str] = None

    def __post_init__(self) -> None:
        self.points = [to_point(p) for p in self.points]
        seen: set[str] = set()
        for point in self.points:
            if point.date in seen:
                raise ValueError(f"duplicate date {point.date!r} in series {self.series_id}")
            seen.add(point.date)

    @classmethod
    def from_pairs(
        cls, series_id: str, pairs: Iterable[PointLike], name: Optional[str] = None
    ) -> "TimeSeries":
        return cls(series_id, list(pairs), name=name)

    @property
    def dates(self) -> List[str]:
        return [p.date for p in self.points]

    @property
    def values(self) -> List[float]:
        return [p.value for p in self.points]

    @property
    def label(self) -> str:
        """Return the display name, falling back to the identifier."""

        return self.name or self.series_id

    def as_mapping(self) -> Dict[str, float]:
        return {p.date: p.value for p in self.points}

    def __iter__(self) -> Iterator[TimePoint]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class AlignedPair:
    """A date present in both series with the value of each."""

    date: str
    value1: float
    value2: float


@dataclass(frozen=True)
class Interpretation:
    """Classification of a correlation coefficient for display."""

    strength: Strength
    direction: Direction
    description: str


@dataclass(frozen=True)
class CorrelationResult:
    """Outcome of correlating two aligned series.

    Attributes
    ----------
    aligned_pairs:
        Common-date points in the order of the first series.
    r:
        Pearson correlation coefficient.  ``0.0`` when it cannot be computed.
    sample_size:
        Number of aligned pairs.
    r_squared:
        Coefficient of determination, ``r * r``.
    insufficient_data:
        ``True`` when fewer than two aligned points exist, so ``r == 0``
        reflects missing data rather than an absence of relationship.
    """

    aligned_pairs: Sequence[AlignedPair]
    r: float
    sample_size: int
    r_squared: float
    direction: Direction
    strength: Strength
    description: str
    confidence: Confidence
    insufficient_data: bool = False

    @property
    def interpretation(self) -> Interpretation:
        return Interpretation(self.strength, self.direction, self.description)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON friendly mapping using the dashboard field names."""

        return {
            "alignedPairs": [
                {"date": p.date, "value1": p.value1, "value2": p.value2}
                for p in self.aligned_pairs
            ],
            "r": self.r,
            "sampleSize": self.sample_size,
            "rSquared": self.r_squared,
            "direction": self.direction.value,
            "strength": self.strength.value,
            "description": self.description,
            "confidence": self.confidence.value,
            "insufficientData": self.insufficient_data,
        }
