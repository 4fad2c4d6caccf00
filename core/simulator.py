from typing import List, Tuple
import logging
import numpy as np

from utils.configuration import ConfigurationManager
from utils.signal import estimate_rssi
from core.models import Measurement, SimulationResult
from core.position_estimator import estimate_position


class MeasurementSimulator:
    """Measurement simulator - synthesizes noise-free measurements and reports localization accuracy"""

    def __init__(self, config_manager: ConfigurationManager):
        self.config = config_manager.get_config().simulation
        self.rng = np.random.default_rng(self.config.seed)
        self._logger = logging.getLogger(__name__)

    def random_plane_position(self) -> Tuple[int, int]:
        return int(self.rng.random() * self.config.area_width), int(self.rng.random() * self.config.area_height)

    def synthesize_measurements(self, subscriber: Tuple[int, int], ap_count: int) -> List[Measurement]:
        """Place ap_count access points at random and derive their RSSI from the true distance"""
        measurements = []
        for _ in range(ap_count):
            ap_x, ap_y = self.random_plane_position()
            distance = float(np.hypot(ap_x - subscriber[0], ap_y - subscriber[1]))
            measurements.append(Measurement(x=ap_x, y=ap_y, rssi=estimate_rssi(distance)))
        return measurements

    def _random_ap_count(self) -> int:
        spread = self.config.max_access_points - self.config.min_access_points
        return int(self.config.min_access_points + self.rng.random() * spread)

    def run(self) -> SimulationResult:
        trials = self.config.trials
        if trials <= 0:
            raise ValueError(f"Simulation requires a positive number of trials, got {trials}")

        errors = np.zeros(trials)
        for trial in range(trials):
            subscriber = self.random_plane_position()
            measurements = self.synthesize_measurements(subscriber, self._random_ap_count())
            x, y = estimate_position(measurements)
            errors[trial] = np.hypot(x - subscriber[0], y - subscriber[1])
            if errors[trial] > 0:
                self._logger.debug("Trial %d: expected (%d, %d), got (%d, %d), error %.2f",
                                   trial, subscriber[0], subscriber[1], x, y, errors[trial])

        return SimulationResult(
            trials=trials,
            exact_hits=int(np.count_nonzero(errors == 0)),
            mean_error=float(np.mean(errors)),
            max_error=float(np.max(errors)),
            median_error=float(np.median(errors)),
            percentile_95=float(np.percentile(errors, 95)),
        )
