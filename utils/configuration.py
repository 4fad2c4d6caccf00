"""
Configuration System - Centralized configuration management for subscriber localization
"""

import json
import yaml
import os
import logging
from typing import Dict, Any, Optional
from dataclasses import dataclass


@dataclass
class LoggingConfig:
    """Configuration for logging output"""
    level: str = 'INFO'
    format: str = '%(asctime)s %(levelname)s %(name)s: %(message)s'


@dataclass
class SimulationConfig:
    """Configuration for the simulated accuracy run"""
    area_width: int = 100
    area_height: int = 100
    min_access_points: int = 3
    max_access_points: int = 6
    trials: int = 100
    seed: Optional[int] = None


@dataclass
class MainSystemConfig:
    """Main system configuration"""
    logging: LoggingConfig = None
    simulation: SimulationConfig = None

    def __post_init__(self):
        """Initialize sub-configurations if not provided"""
        if self.logging is None:
            self.logging = LoggingConfig()
        if self.simulation is None:
            self.simulation = SimulationConfig()


class ConfigurationManager:
    """
    Centralized configuration management system
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager

        Args:
            config_file: Path to configuration file (YAML or JSON)
        """
        self.logger = logging.getLogger(__name__)
        self.config_file = config_file
        self.config = MainSystemConfig()

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str) -> MainSystemConfig:
        """
        Load configuration from YAML or JSON file

        Args:
            config_file: Path to configuration file

        Returns:
            Loaded MainSystemConfig object
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                if config_file.endswith('.yaml') or config_file.endswith('.yml'):
                    config_dict = yaml.safe_load(f)
                else:
                    config_dict = json.load(f)

            self.config = self._dict_to_config(config_dict or {})
            self.logger.info("Configuration loaded from %s", config_file)

        except Exception as e:
            self.logger.error("Failed to load configuration from %s: %s", config_file, e)
            self.logger.info("Using default configuration")
            self.config = MainSystemConfig()

        return self.config

    def get_config(self) -> MainSystemConfig:
        """Get current configuration"""
        return self.config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> MainSystemConfig:
        """Convert dictionary to MainSystemConfig object"""
        logging_dict = config_dict.get('logging') or {}
        simulation_dict = config_dict.get('simulation') or {}

        simulation = SimulationConfig(**simulation_dict)
        if simulation.min_access_points < 1 or simulation.max_access_points < simulation.min_access_points:
            raise ValueError(
                f"Invalid access point range [{simulation.min_access_points}, {simulation.max_access_points}]"
            )

        return MainSystemConfig(
            logging=LoggingConfig(**logging_dict),
            simulation=simulation,
        )
