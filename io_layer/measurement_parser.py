import json
import os
import logging
from typing import Any, Dict, List

from core.errors import MeasurementParseError
from core.models import Measurement

logger = logging.getLogger(__name__)

MEASUREMENT_FIELDS = ('x', 'y', 'rssi')


def _parse_field(item: Dict[str, Any], field: str, index: int) -> int:
    if field in item:
        value = item[field]
    else:
        value = next((v for k, v in item.items() if k.lower() == field), 0)
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, int):
        raise MeasurementParseError(f"Measurement {index}: field '{field}' must be an integer, got {value!r}")
    return value


def parse_measurements(text: str) -> List[Measurement]:
    """
    Decode a JSON array of {"x": int, "y": int, "rssi": int} objects.

    Keys are matched case-insensitively, unknown keys are ignored and
    missing keys default to 0. A JSON null decodes to an empty list.

    Raises:
        MeasurementParseError: if the document is not valid measurement JSON
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MeasurementParseError(f"Invalid JSON: {e}") from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise MeasurementParseError(f"Expected a JSON array of measurements, got {type(data).__name__}")

    measurements = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise MeasurementParseError(f"Measurement {index} must be a JSON object, got {type(item).__name__}")
        x, y, rssi = (_parse_field(item, field, index) for field in MEASUREMENT_FIELDS)
        measurements.append(Measurement(x=x, y=y, rssi=rssi))
    logger.debug("Parsed %d measurements", len(measurements))
    return measurements


def load_measurements(file_path: str) -> List[Measurement]:
    """Load measurements from a JSON file"""
    if not isinstance(file_path, str) or not file_path:
        raise ValueError("Invalid measurement file path provided to load_measurements")
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Measurement file does not exist: {file_path}")
    with open(file_path, 'r', encoding='utf-8') as f:
        return parse_measurements(f.read())
