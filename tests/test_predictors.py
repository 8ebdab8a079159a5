import math
import statistics

import pytest
from hypothesis import given
from hypothesis import strategies as st

from vivotk.predictors import (
    GAEMA,
    LPEMA,
    ExponentialMovingAverage,
    LastValue,
    SimpleRunningAverage,
    predict_quality,
)

EPSILON = 0.0001


def test_last_value_empty_and_updates():
    lv = LastValue()
    assert lv.predict() is None
    lv.add(3.5)
    assert lv.predict() == 3.5
    lv.add(1.0)
    assert lv.predict() == 1.0


def test_last_value_holds_arbitrary_objects():
    lv = LastValue()
    pos = (1.0, 2.0, 3.0)
    lv.add(pos)
    assert lv.predict() == (1.0, 2.0, 3.0)


def test_simple_running_avg():
    avg = SimpleRunningAverage(3)
    assert avg.predict() is None
    avg.add(1.0)
    assert abs(avg.predict() - 1.0) < EPSILON
    avg.add(2.0)
    assert abs(avg.predict() - 1.5) < EPSILON
    avg.add(2.0)
    assert abs(avg.predict() - 1.66666667) < EPSILON
    avg.add(3.0)
    assert abs(avg.predict() - 2.33333333) < EPSILON
    avg.add(5.0)
    avg.add(10.0)
    assert abs(avg.predict() - 6.0) < EPSILON
    avg.add(7.0)
    assert abs(avg.predict() - 7.33333333) < EPSILON


def test_simple_running_avg_ignores_zero():
    avg = SimpleRunningAverage(3)
    avg.add(0.0)
    assert avg.predict() is None
    avg.add(4.0)
    avg.add(0.0)
    assert avg.predict() == pytest.approx(4.0)


@pytest.mark.parametrize("size", [0, -1])
def test_simple_running_avg_rejects_bad_size(size):
    with pytest.raises(ValueError):
        SimpleRunningAverage(size)


@given(
    st.integers(min_value=1, max_value=6),
    st.lists(st.floats(min_value=0.5, max_value=1000.0), min_size=1, max_size=30),
)
def test_simple_running_avg_matches_window_mean(size, values):
    avg = SimpleRunningAverage(size)
    for v in values:
        avg.add(v)
    assert avg.predict() == pytest.approx(statistics.mean(values[-size:]), rel=1e-6)


def test_ema():
    ema = ExponentialMovingAverage(0.1)
    assert ema.predict() is None
    ema.add(1.0)
    assert abs(ema.predict() - 1.0) < EPSILON
    ema.add(2.0)
    assert abs(ema.predict() - 1.1) < EPSILON
    ema.add(2.0)
    assert abs(ema.predict() - 1.19) < EPSILON
    ema.add(3.0)
    assert abs(ema.predict() - 1.371) < EPSILON
    ema.add(5.0)
    ema.add(10.0)
    assert abs(ema.predict() - 2.56051) < EPSILON
    ema.add(7.0)
    assert abs(ema.predict() - 3.004459) < EPSILON
    assert abs(ema.predict() - 3.004459) < EPSILON


def test_lpema():
    lpema = LPEMA(0.1)
    assert lpema.predict() is None
    lpema.add(1.0)
    assert abs(lpema.predict() - 1.0) < EPSILON
    lpema.add(2.0)
    assert abs(lpema.predict() - 1.428571) < EPSILON
    lpema.add(2.0)
    assert abs(lpema.predict() - 2.0) < EPSILON
    lpema.add(3.0)
    assert abs(lpema.predict() - 2.333333) < EPSILON
    lpema.add(5.0)
    lpema.add(10.0)
    assert abs(lpema.predict() - 3.689890) < EPSILON
    lpema.add(7.0)
    assert abs(lpema.predict() - 4.250925) < EPSILON


def test_lpema_all_zero_input_gives_nan_not_error():
    lpema = LPEMA(0.1)
    lpema.add(0.0)
    assert lpema.predict() == 0.0
    lpema.add(0.0)
    assert math.isnan(lpema.predict())


def test_gaema_first_steps():
    gaema = GAEMA(0.1)
    assert gaema.predict() is None
    gaema.add(1.0)
    assert abs(gaema.predict() - 1.0) < EPSILON
    gaema.add(2.0)
    assert abs(gaema.predict() - 1.177828) < EPSILON


def test_gaema_zero_gradient_freezes_prediction():
    gaema = GAEMA(0.1)
    gaema.add(5.0)
    gaema.add(5.0)
    assert gaema.predict() == pytest.approx(5.0)
    gaema.add(7.0)
    assert gaema.predict() == pytest.approx(5.0)


def test_predict_quality_at_origin():
    assert predict_quality(0.0, 0.0) == pytest.approx(2.2929714)


def test_predict_quality_linear_terms():
    assert predict_quality(0.0, 1.0) == pytest.approx(2.2929714 + 0.20795236 - 0.00678052)
    assert predict_quality(1.0, 0.0) == pytest.approx(2.2929714 - 0.0020313 - 0.00464757)