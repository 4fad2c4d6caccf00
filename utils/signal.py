import math
import logging

logger = logging.getLogger(__name__)

# Log-distance path-loss model calibration
CARRIER_FREQUENCY = 2400.0
PATH_LOSS_EXPONENT = 27.0
CALIBRATION_OFFSET = 28.0
MIN_REFERENCE_DISTANCE = 1.0


def estimate_distance(rssi):
    """
    Convert RSSI value to distance using the fixed log-distance path-loss model

    Args:
        rssi: RSSI value

    Returns:
        Estimated distance to the access point (always positive)
    """
    exponent = (CALIBRATION_OFFSET - float(rssi) - 20 * math.log10(CARRIER_FREQUENCY)) / PATH_LOSS_EXPONENT
    return math.pow(10, exponent)


def estimate_rssi(distance):
    """
    Forward model: expected RSSI for an access point at the given distance.

    Distances below the reference distance are treated as the reference distance.
    """
    distance = max(float(distance), MIN_REFERENCE_DISTANCE)
    return -int(20 * math.log10(CARRIER_FREQUENCY) + PATH_LOSS_EXPONENT * math.log10(distance) - CALIBRATION_OFFSET)
