#!/usr/bin/env python3
"""
Subscriber Localization - estimates subscriber coordinates from access point RSSI measurements
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from utils.configuration import ConfigurationManager, LoggingConfig
from core.errors import InsufficientDataError
from core.models import Measurement, SimulationResult
from core.position_estimator import estimate_position
from core.result_manager import ResultManager
from core.simulator import MeasurementSimulator
from io_layer.measurement_parser import parse_measurements, load_measurements

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = './config/subscriber_localization_config.yaml'

USAGE_INFO = (
    'Accepts single argument - json array of {"x": int, "y": int, "rssi": int}\n'
    'Usage: %s "[{\\"x\\": 0,\\"y\\": 0,\\"rssi\\": -50}, {\\"x\\": 10,\\"y\\": 10,\\"rssi\\": -60}, '
    '{\\"x\\": 30,\\"y\\": 40,\\"rssi\\": -80}]"'
)

EXIT_OK = 0
EXIT_ESTIMATION_ERROR = 1
EXIT_INPUT_ERROR = 2


def executable_name(path: str) -> str:
    """Strip both Windows and POSIX directory components from an executable path"""
    for separator in ('\\', '/'):
        path = path.split(separator)[-1]
    return path


class SubscriberLocalizationSystem:
    """Subscriber localization main controller - wires parsing, estimation and reporting together"""

    def __init__(self, config_file: Optional[str] = None):
        if config_file is None:
            config_file = DEFAULT_CONFIG_FILE
        self.config_manager = ConfigurationManager(config_file)
        self.result_manager = ResultManager()
        self._logger = logging.getLogger(__name__)

    def locate(self, measurements: List[Measurement]) -> Tuple[int, int]:
        self._logger.info("Estimating subscriber position from %d access points", len(measurements))
        position = estimate_position(measurements)
        self._logger.info("Estimated subscriber position: (%d, %d)", position[0], position[1])
        return position

    def simulate(self) -> SimulationResult:
        self._logger.info("Running localization accuracy simulation")
        result = MeasurementSimulator(self.config_manager).run()
        self.result_manager.print_statistics(result)
        return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Subscriber localization from access point RSSI measurements')
    parser.add_argument('measurements', nargs='?', default=None,
                        help='JSON array of {"x": int, "y": int, "rssi": int} objects')
    parser.add_argument('--file', '-f', type=str, default=None, help='Read the measurement JSON array from a file')
    parser.add_argument('--simulate', action='store_true', help='Run the simulated accuracy check instead of locating')
    parser.add_argument('--config', '-c', type=str, default=None,
                        help='Configuration file path (supports .yaml and .json formats)')
    parser.add_argument('--log-level', default=None, help='Logging level (DEBUG, INFO, WARNING, ERROR)')
    return parser


def _read_measurements(args) -> List[Measurement]:
    if args.file:
        return load_measurements(args.file)
    if args.measurements is None:
        raise ValueError("Argument required")
    return parse_measurements(args.measurements)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log_level = args.log_level or 'INFO'
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.INFO),
                        format=LoggingConfig.format)
    system = SubscriberLocalizationSystem(args.config)

    # reconfigure from the loaded file; --log-level still wins
    log_config = system.config_manager.get_config().logging
    level = args.log_level or log_config.level
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in root.handlers:
        handler.setFormatter(logging.Formatter(log_config.format))

    if args.simulate:
        try:
            system.simulate()
        except ValueError as e:
            print(f"Error: {e}")
            return EXIT_INPUT_ERROR
        return EXIT_OK

    try:
        measurements = _read_measurements(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}")
        print(USAGE_INFO % executable_name(sys.argv[0]))
        return EXIT_INPUT_ERROR

    try:
        position = system.locate(measurements)
    except InsufficientDataError as e:
        logger.debug("Estimation failed: %s", e)
        print("Error while calculating subscriber position")
        return EXIT_ESTIMATION_ERROR

    print(system.result_manager.format_position(position))
    return EXIT_OK


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        logger.error("Unhandled exception in subscriber_localization: %s", e, exc_info=True)
        sys.exit(EXIT_ESTIMATION_ERROR)
