"""Command-line arguments of the prefetching player."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from vivotk.enums import (
    AbrType,
    DecoderType,
    ThroughputPredictionType,
    ViewportPredictionType,
)

__all__ = ["Args", "build_parser", "parse_args"]


@dataclass
class Args:
    """Player settings taken from the command line."""

    src: str
    fps: float = 30.0
    camera_x: float = 0.0
    camera_y: float = 0.0
    camera_z: float = 1.5
    camera_pitch: float = 0.0
    camera_yaw: float = -90.0
    width: int = 1600
    height: int = 900
    show_controls: bool = True
    buffer_capacity: Optional[int] = None
    metrics: Optional[str] = None
    abr_type: AbrType = AbrType.QUETRA
    decoder_type: DecoderType = DecoderType.NOOP
    multiview: bool = False
    decoder_path: Optional[Path] = None
    throughput_prediction_type: ThroughputPredictionType = ThroughputPredictionType.LAST
    throughput_alpha: float = 0.1
    viewport_prediction_type: ViewportPredictionType = ViewportPredictionType.LAST
    network_trace: Optional[Path] = None
    camera_trace: Optional[Path] = None
    record_camera_trace: Optional[Path] = None
    enable_fetcher_optimizations: bool = False
    bg_color: str = "rgb(255,255,255)"


def _unsigned(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"{text} is not a non-negative integer")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(prog="vvplay-async-prefetch")
    parser.add_argument(
        "src", help="directory with the ply files, or the location of the mpd (dash)"
    )
    parser.add_argument("-f", "--fps", type=float, default=30.0)
    parser.add_argument("-x", "--camera-x", dest="camera_x", type=float, default=0.0)
    parser.add_argument("-y", "--camera-y", dest="camera_y", type=float, default=0.0)
    parser.add_argument("-z", "--camera-z", dest="camera_z", type=float, default=1.5)
    parser.add_argument("--pitch", dest="camera_pitch", type=float, default=0.0)
    parser.add_argument("--yaw", dest="camera_yaw", type=float, default=-90.0)
    parser.add_argument("-W", "--width", type=_unsigned, default=1600, help="screen width")
    parser.add_argument("-H", "--height", type=_unsigned, default=900, help="screen height")
    parser.add_argument(
        "--controls", dest="show_controls", action="store_true", default=True
    )
    parser.add_argument(
        "-b", "--buffer-capacity", type=_unsigned, default=None,
        help="buffer capacity in seconds",
    )
    parser.add_argument("-m", "--metrics", default=None)
    parser.add_argument(
        "--abr", dest="abr_type", type=AbrType, choices=list(AbrType), default=AbrType.QUETRA
    )
    parser.add_argument(
        "--decoder", dest="decoder_type", type=DecoderType,
        choices=list(DecoderType), default=DecoderType.NOOP,
    )
    parser.add_argument(
        "--multiview", action="store_true", help="each view is encoded separately"
    )
    parser.add_argument(
        "--decoder-path", type=Path, default=None, help="path to the decoder binary (Draco only)"
    )
    parser.add_argument(
        "--tp", dest="throughput_prediction_type", type=ThroughputPredictionType,
        choices=list(ThroughputPredictionType), default=ThroughputPredictionType.LAST,
    )
    parser.add_argument(
        "--throughput-alpha", type=float, default=0.1,
        help="alpha for EMA, GAEMA and LPEMA throughput prediction",
    )
    parser.add_argument(
        "--vp", dest="viewport_prediction_type", type=ViewportPredictionType,
        choices=list(ViewportPredictionType), default=ViewportPredictionType.LAST,
    )
    parser.add_argument(
        "--network-trace", type=Path, default=None, help="network trace in Kbps"
    )
    parser.add_argument(
        "--camera-trace", type=Path, default=None,
        help="camera trace of x,y,z,pitch,yaw,roll with angles in degrees",
    )
    parser.add_argument(
        "--record-camera-trace", type=Path, default=None,
        help="where to record the player's camera trace",
    )
    parser.add_argument(
        "--enable-fetcher-optimizations", action="store_true",
        help="skip fetching files that were already downloaded",
    )
    parser.add_argument("--bg-color", default="rgb(255,255,255)")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> Args:
    """Parse ``argv`` (or the process arguments) into :class:`Args`."""
    namespace = build_parser().parse_args(argv)
    return Args(**vars(namespace))