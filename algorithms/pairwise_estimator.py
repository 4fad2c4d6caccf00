import logging
from itertools import combinations
from typing import List, Optional, Sequence, Tuple

from core.errors import DegenerateCirclesError
from core.models import Measurement, Point
from utils.geometry import circle_intersection

logger = logging.getLogger(__name__)

_ORIGIN = Point(0.0, 0.0)


class PairwiseIntersectionEstimator:
    def __init__(self, measurements: Sequence[Measurement]):
        """
        Initialize the pairwise circle-intersection estimator

        Every pair of access points votes with the two intersection points of
        their distance circles. Votes are matched against two running anchor
        points, and the anchor whose votes drifted least is averaged into the
        final position.

        :param measurements: Access point measurements, at least three are expected
        """
        self.measurements = list(measurements)
        self.centers = [m.to_point() for m in self.measurements]
        self.radii = [m.estimated_distance() for m in self.measurements]
        self.skipped_pairs: List[Tuple[int, int]] = []

    def _intersect(self, i1: int, i2: int) -> Optional[Tuple[Point, Point]]:
        try:
            return circle_intersection(self.centers[i1], self.radii[i1], self.centers[i2], self.radii[i2])
        except DegenerateCirclesError as e:
            logger.debug("Skipping access point pair (%d, %d): %s", i1, i2, e)
            self.skipped_pairs.append((i1, i2))
            return None

    def estimate_point(self) -> Optional[Tuple[int, int]]:
        """
        Combine pairwise intersections into a single position

        Returns:
            Rounded (x, y) position, or None if every pair was degenerate
        """
        self.skipped_pairs = []
        p1 = p2 = None
        p1d = p2d = _ORIGIN
        delta_count = 1

        for i1, i2 in combinations(range(len(self.measurements)), 2):
            intersection = self._intersect(i1, i2)
            if intersection is None:
                continue
            if p1 is None:
                # first usable pair seeds the anchors
                p1, p2 = intersection
                continue
            p3, p4 = intersection

            # make p1 closest to one of the new points
            if min(p1.distance_to(p3), p1.distance_to(p4)) > min(p2.distance_to(p3), p2.distance_to(p4)):
                p1, p2 = p2, p1
                p1d, p2d = p2d, p1d
            # make p3 closest to p1
            if p1.distance_to(p3) > p1.distance_to(p4):
                p3, p4 = p4, p3

            p1d = Point(p1d.x + p3.x - p1.x, p1d.y + p3.y - p1.y)
            p2d = Point(p2d.x + p4.x - p2.x, p2d.y + p4.y - p2.y)
            delta_count += 1

        if p1 is None:
            return None

        # anchor with the smaller accumulated drift sits in the dense cluster
        if _ORIGIN.distance_to(p1d) > _ORIGIN.distance_to(p2d):
            p1, p2 = p2, p1
            p1d, p2d = p2d, p1d

        logger.debug("Combined %d intersection pairs, anchor (%.3f, %.3f), drift (%.3f, %.3f)",
                     delta_count, p1.x, p1.y, p1d.x, p1d.y)
        # + .5 for rounding
        x = int(p1.x + p1d.x / delta_count + 0.5)
        y = int(p1.y + p1d.y / delta_count + 0.5)
        return x, y
