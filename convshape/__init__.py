"""
Convolution shape utilities.

This package computes the output height/width of 2D convolution layers and
checks that a kernel/stride/padding combination fits a given input shape,
reporting the full geometry when it does not.

Typical usage:
--------------
    from convshape import compute_output_size, ConvolutionLayer, NeuralNetConfiguration

    # Output size of a 3x3 convolution over 8x8 inputs
    out_h, out_w = compute_output_size([1, 3, 8, 8], (3, 3), (1, 1), (0, 0))  # (6, 6)

    # Same thing driven by a layer configuration
    conf = NeuralNetConfiguration(
        layer=ConvolutionLayer(n_in=3, n_out=16, kernel_size=3, padding=1)
    )
    compute_output_shape([1, 3, 8, 8], conf)  # (1, 16, 8, 8)
"""

from convshape.exceptions import (
    ConvolutionShapeError,
    InvalidConfigError,
    InvalidInputError,
    LayerTypeError,
)
from convshape.layers import (
    ConvolutionLayer,
    DenseLayer,
    Layer,
    NeuralNetConfiguration,
)
from convshape.utils.shapes import (
    compute_output_shape,
    compute_output_size,
    height_width_from_config,
    height_width_from_shape,
    num_channels_from_shape,
    num_feature_maps_from_config,
)

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "ConvolutionShapeError",
    "InvalidConfigError",
    "InvalidInputError",
    "LayerTypeError",
    # Configuration
    "ConvolutionLayer",
    "DenseLayer",
    "Layer",
    "NeuralNetConfiguration",
    # Shape utilities
    "compute_output_shape",
    "compute_output_size",
    "height_width_from_config",
    "height_width_from_shape",
    "num_channels_from_shape",
    "num_feature_maps_from_config",
]
