import pytest

from utils.signal import estimate_distance, estimate_rssi, PATH_LOSS_EXPONENT


def test_distance_decreases_with_stronger_signal():
    rssis = [-100, -80, -60, -40, -20, 0, 10]
    distances = [estimate_distance(r) for r in rssis]
    assert all(a > b for a, b in zip(distances, distances[1:]))
    assert all(d > 0 for d in distances)


def test_distance_known_values():
    assert estimate_distance(-50) == pytest.approx(2.4268, abs=1e-3)
    assert estimate_distance(-60) == pytest.approx(5.6938, abs=1e-3)
    assert estimate_distance(-80) == pytest.approx(31.343, abs=1e-2)


def test_rssi_clamps_short_distances():
    assert estimate_rssi(0) == estimate_rssi(1.0)
    assert estimate_rssi(0.3) == estimate_rssi(1.0)
    assert estimate_rssi(1.0) == -39


def test_rssi_truncates_toward_zero():
    # 20*log10(2400) + 27 - 28 = 66.604...
    assert estimate_rssi(10.0) == -66


@pytest.mark.parametrize("distance", [1.0, 2.5, 7.0, 10.0, 33.3, 70.0, 141.0])
def test_round_trip_within_truncation_error(distance):
    recovered = estimate_distance(estimate_rssi(distance))
    assert recovered <= distance + 1e-9
    assert recovered >= distance / 10 ** (1 / PATH_LOSS_EXPONENT) - 1e-9
