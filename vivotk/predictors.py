"""Throughput and viewport predictors, plus the point cloud quality model."""

from __future__ import annotations

import math
from collections import deque
from typing import Deque, Generic, Optional, TypeVar

T = TypeVar("T")

__all__ = [
    "LastValue",
    "SimpleRunningAverage",
    "ExponentialMovingAverage",
    "GAEMA",
    "LPEMA",
    "predict_quality",
]


def _div(a: float, b: float) -> float:
    """Divide with IEEE semantics: zero divisors give inf or nan instead of raising."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _pow(base: float, exponent: float) -> float:
    """Power with IEEE semantics: domain errors give nan, overflow gives inf."""
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


def _blend(previous: Optional[float], value: float, alpha: float) -> float:
    if previous is None:
        return value
    return previous * (1.0 - alpha) + alpha * value


class LastValue(Generic[T]):
    """Predicts the most recently recorded value."""

    def __init__(self) -> None:
        self._last: Optional[T] = None

    def add(self, value: T) -> None:
        self._last = value

    def predict(self) -> Optional[T]:
        return self._last


class SimpleRunningAverage:
    """Average of the last ``size`` non-zero values."""

    def __init__(self, size: int = 3) -> None:
        if size <= 0:
            raise ValueError("size must be a positive integer")
        self._size = size
        self._window: Deque[float] = deque(maxlen=size)
        self._avg: Optional[float] = None

    def add(self, value: float) -> None:
        """Add a datapoint, dropping the oldest once the window is full. Zero is ignored."""
        if value == 0.0:
            return
        count = len(self._window)
        evicted = self._window[0] if count == self._size else 0.0
        previous = self._avg if self._avg is not None else 0.0
        self._avg = (previous * count + (value - evicted)) / min(self._size, count + 1)
        self._window.append(value)

    def predict(self) -> Optional[float]:
        return self._avg


class ExponentialMovingAverage:
    """Exponential moving average with a fixed smoothing factor."""

    def __init__(self, alpha: float) -> None:
        self.alpha = alpha
        self._last_value: Optional[float] = None
        self._prediction: Optional[float] = None

    def add(self, value: float) -> None:
        self._last_value = value
        self._prediction = _blend(self._prediction, value, self.alpha)

    def predict(self) -> Optional[float]:
        return self._prediction


class _AdaptiveAverage:
    """Shared state for moving averages whose alpha follows the signal's gradient."""

    def __init__(self, alpha: float) -> None:
        self._alpha = alpha
        self._last_value: Optional[float] = None
        self._last_last_value: Optional[float] = None
        self._count = 0
        self._alltime_average = 0.0
        self._prediction: Optional[float] = None

    def _next_alpha(self, m_inst: float, m_norm: float) -> float:
        raise NotImplementedError

    def add(self, value: float) -> None:
        self._last_last_value = self._last_value
        self._last_value = value
        self._count += 1
        self._alltime_average = (
            self._alltime_average * (self._count - 1) + value
        ) / self._count

        m_inst = abs(value - (self._last_last_value or 0.0))
        m_norm = self._alltime_average / (self._count + 1.0e-10)
        self._alpha = self._next_alpha(m_inst, m_norm)
        self._prediction = _blend(self._prediction, value, self._alpha)

    def predict(self) -> Optional[float]:
        return self._prediction


class GAEMA(_AdaptiveAverage):
    """Gradient adaptive exponential moving average."""

    def _next_alpha(self, m_inst: float, m_norm: float) -> float:
        return _pow(self._alpha, _div(m_norm, m_inst))

    def add(self, value: float) -> None:
        super().add(value)

    def predict(self) -> Optional[float]:
        return super().predict()


class LPEMA(_AdaptiveAverage):
    """Low pass exponential moving average."""

    def _next_alpha(self, m_inst: float, m_norm: float) -> float:
        return _div(1.0, 1.0 + _div(m_inst, m_norm))

    def add(self, value: float) -> None:
        super().add(value)

    def predict(self) -> Optional[float]:
        return super().predict()


def predict_quality(geo_qp: float, attr_qp: float) -> float:
    """Predict point cloud quality from geometry and attribute quantisation parameters."""
    return (
        2.2929714
        - 0.0020313 * geo_qp
        + 0.20795236 * attr_qp
        - 0.00464757 * geo_qp * geo_qp
        + 0.00631909 * geo_qp * attr_qp
        - 0.00678052 * attr_qp * attr_qp
    )