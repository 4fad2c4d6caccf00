import math
from dataclasses import dataclass

from utils.signal import estimate_distance


@dataclass(frozen=True)
class Point:
    """Floating-point working coordinate"""
    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


@dataclass(frozen=True)
class Measurement:
    """Access point position and the signal strength reported for it"""
    x: int
    y: int
    rssi: int

    def to_point(self) -> Point:
        return Point(float(self.x), float(self.y))

    def estimated_distance(self) -> float:
        return estimate_distance(self.rssi)


@dataclass
class SimulationResult:
    """Accuracy statistics of a simulated localization run"""
    trials: int
    exact_hits: int
    mean_error: float
    max_error: float
    median_error: float
    percentile_95: float
