from typing import Tuple
import logging

from core.models import SimulationResult


class ResultManager:
    """Result manager - responsible for formatting and reporting results"""

    def __init__(self):
        self._logger = logging.getLogger(__name__)

    @staticmethod
    def format_position(position: Tuple[int, int]) -> str:
        x, y = position
        return f"Subscriber coordinates x:{x} y:{y}"

    def print_statistics(self, result: SimulationResult) -> None:
        """Pretty-print simulated localization accuracy statistics"""
        self._logger.info("Simulated localization accuracy over %d trials:", result.trials)
        self._logger.info("   - Exact position hits: %d (%.1f%%)", result.exact_hits, result.exact_hits / result.trials * 100)
        self._logger.info("   - Average error: %.2f", result.mean_error)
        self._logger.info("   - Max error: %.2f", result.max_error)
        self._logger.info("   - Error median: %.2f", result.median_error)
        self._logger.info("   - 95%% localization error ≤ %.2f", result.percentile_95)
