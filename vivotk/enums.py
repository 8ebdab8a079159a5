"""Choices offered on the player's command line."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "DecoderType",
    "AbrType",
    "ThroughputPredictionType",
    "ViewportPredictionType",
]


class _Choice(str, Enum):
    """A command-line choice whose value is the name typed by the user."""

    def __str__(self) -> str:
        return self.value


class DecoderType(_Choice):
    """Decoder used for fetched segments; NOOP means no decoding."""

    NOOP = "noop"
    DRACO = "draco"
    TMC2RS = "tmc2rs"


class AbrType(_Choice):
    """Adaptive bitrate algorithm."""

    QUETRA = "quetra"
    QUETRA_MULTIVIEW = "quetra-multiview"
    MCKP = "mckp"


class ThroughputPredictionType(_Choice):
    """Throughput predictor."""

    LAST = "last"
    """Last throughput."""
    AVG = "avg"
    """Average of the last 3 throughputs."""
    EMA = "ema"
    """Exponential moving average."""
    GAEMA = "gaema"
    """Gradient adaptive exponential moving average."""
    LPEMA = "lpema"
    """Low pass exponential moving average."""


class ViewportPredictionType(_Choice):
    """Viewport predictor."""

    LAST = "last"