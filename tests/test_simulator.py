import math

import pytest

from core.position_estimator import estimate_position
from core.simulator import MeasurementSimulator
from utils.configuration import ConfigurationManager


def _simulator(**overrides):
    manager = ConfigurationManager()
    for key, value in overrides.items():
        setattr(manager.get_config().simulation, key, value)
    return MeasurementSimulator(manager)


def test_synthesized_measurements_follow_forward_model():
    simulator = _simulator(seed=7)
    measurements = simulator.synthesize_measurements((50, 50), 5)
    assert len(measurements) == 5
    for m in measurements:
        assert 0 <= m.x < 100 and 0 <= m.y < 100
        distance = math.hypot(m.x - 50, m.y - 50)
        # weaker signal never implies a shorter distance than the true one
        assert m.estimated_distance() <= max(distance, 1.0) + 1e-9


def test_run_reports_statistics():
    result = _simulator(seed=1, trials=50).run()
    assert result.trials == 50
    assert 0 <= result.exact_hits <= 50
    assert 0 <= result.median_error <= result.max_error
    assert result.mean_error <= result.max_error
    assert result.percentile_95 <= result.max_error


def test_run_is_reproducible_with_seed():
    assert _simulator(seed=3, trials=20).run() == _simulator(seed=3, trials=20).run()


def test_single_access_point_simulation_returns_ap_position():
    # a 1x1 area puts the subscriber and its only access point on the same spot
    simulator = _simulator(seed=5, min_access_points=1, max_access_points=1, trials=10,
                           area_width=1, area_height=1)
    result = simulator.run()
    assert result.trials == 10
    assert result.exact_hits == 10
    assert result.max_error == 0

    ap = _simulator(seed=9).synthesize_measurements((30, 30), 1)[0]
    assert estimate_position([ap]) == (ap.x, ap.y)


def test_run_rejects_non_positive_trials():
    with pytest.raises(ValueError):
        _simulator(trials=0).run()
