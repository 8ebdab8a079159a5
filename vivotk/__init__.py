"""Point cloud utilities for volumetric video: throughput predictors, Velodyne files, upsampling, playback traces and player options."""

__version__ = "0.1.0"