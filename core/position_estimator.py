from typing import Sequence, Tuple
import logging

from algorithms.pairwise_estimator import PairwiseIntersectionEstimator
from core.errors import InsufficientDataError
from core.models import Measurement

MIN_TRILATERATION_POINTS = 3


class SubscriberPositionEstimator:
    """Subscriber position estimator - picks the estimation strategy by the number of access points"""

    def __init__(self):
        self._logger = logging.getLogger(__name__)

    @staticmethod
    def _closest_access_point(measurements: Sequence[Measurement]) -> Measurement:
        # strongest signal wins, ties go to the earliest measurement
        closest = measurements[0]
        for measurement in measurements[1:]:
            if measurement.rssi > closest.rssi:
                closest = measurement
        return closest

    def estimate(self, measurements: Sequence[Measurement]) -> Tuple[int, int]:
        if not measurements:
            raise InsufficientDataError("At least one access point measurement is required")

        if len(measurements) < MIN_TRILATERATION_POINTS:
            closest = self._closest_access_point(measurements)
            self._logger.debug("Only %d access point(s); using closest access point at (%d, %d)",
                               len(measurements), closest.x, closest.y)
            return closest.x, closest.y

        estimator = PairwiseIntersectionEstimator(measurements)
        position = estimator.estimate_point()
        if position is None:
            closest = self._closest_access_point(measurements)
            self._logger.warning("All %d access point pairs are degenerate; using closest access point at (%d, %d)",
                                 len(estimator.skipped_pairs), closest.x, closest.y)
            return closest.x, closest.y
        if estimator.skipped_pairs:
            self._logger.debug("Ignored degenerate access point pairs: %s", estimator.skipped_pairs)
        return position


def estimate_position(measurements: Sequence[Measurement]) -> Tuple[int, int]:
    """
    Estimate subscriber coordinates from access point measurements.

    Raises:
        InsufficientDataError: if no measurements are given
    """
    return SubscriberPositionEstimator().estimate(measurements)
