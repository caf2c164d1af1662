"""
Utility functions for convolution layer geometry.

This module provides helper functions for:
- Output size calculation and validation
- Height/width and channel extraction from shapes
- Kernel size and feature-map extraction from layer configurations
"""

from convshape.utils.shapes import (
    compute_output_shape,
    compute_output_size,
    height_width_from_config,
    height_width_from_shape,
    num_channels_from_shape,
    num_feature_maps_from_config,
)

__all__ = [
    "compute_output_shape",
    "compute_output_size",
    "height_width_from_config",
    "height_width_from_shape",
    "num_channels_from_shape",
    "num_feature_maps_from_config",
]
