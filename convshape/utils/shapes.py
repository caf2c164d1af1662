"""
Shape arithmetic and validation for 2D convolution layers.

Data Conventions
----------------
Activations use the (N, C, H, W) layout:
    - N: number of examples in the minibatch
    - C: number of channels (input depth / feature maps)
    - H, W: spatial height and width

Kernel size, stride and padding are (height, width) pairs. Padding is
symmetric, so each spatial axis grows by 2 * padding before the kernel is
applied. The output size along one axis is

    out = (dim - kernel + 2 * padding) / stride + 1

which is only defined when stride divides (dim - kernel + 2 * padding).

This module provides utilities to:
1. Compute and validate the output height/width of a convolution
2. Read height/width and channel counts from shapes
3. Read kernel size and feature-map counts from layer configurations
"""

from typing import Sequence, Tuple, Union

import numpy as np

from convshape.exceptions import InvalidConfigError, InvalidInputError, LayerTypeError
from convshape.layers import (
    ConvolutionLayer,
    NeuralNetConfiguration,
    PairLike,
    to_pair,
    to_shape,
)

ShapeLike = Union[np.ndarray, Sequence[int]]

_STRIDE_REFERENCE = 'See "Constraints on strides" at http://cs231n.github.io/convolutional-networks/'


def _input_shape(input_data: ShapeLike) -> Tuple[int, ...]:
    # A 1-D integer array is a shape vector, any other array is input data.
    if isinstance(input_data, np.ndarray):
        if input_data.ndim == 1 and np.issubdtype(input_data.dtype, np.integer):
            return to_shape(input_data, "input shape")
        return tuple(input_data.shape)
    return to_shape(input_data, "input shape")


def _convolution_layer(conf: NeuralNetConfiguration) -> ConvolutionLayer:
    layer = conf.layer
    if not isinstance(layer, ConvolutionLayer):
        raise LayerTypeError(layer)
    return layer


def compute_output_size(
    input_data: ShapeLike,
    kernel: PairLike,
    stride: PairLike,
    padding: PairLike,
) -> Tuple[int, int]:
    """
    Get the output size (height, width) for the given input and CNN configuration.

    Parameters
    ----------
    input_data : np.ndarray or sequence of int
        Either the input activations, shape (N, C, H, W), or that shape
        itself given as a list/tuple or 1-D integer array
    kernel : int or (int, int)
        Kernel size (height, width); a scalar means a square kernel
    stride : int or (int, int)
        Strides (height, width)
    padding : int or (int, int)
        Padding (height, width)

    Returns
    -------
    out_h, out_w : int
        Output height and width

    Raises
    ------
    ValueError
        If the input is not rank 4, an entry is not an integer, or a
        parameter is neither an int nor a pair
    InvalidInputError
        If 0 < kernel <= dim + 2 * padding does not hold on an axis
    InvalidConfigError
        If stride does not evenly divide (dim - kernel + 2 * padding) on an axis

    Examples
    --------
    >>> compute_output_size([1, 3, 8, 8], (3, 3), (1, 1), (0, 0))
    (6, 6)

    >>> x = np.zeros((2, 3, 32, 32), dtype=np.float32)
    >>> compute_output_size(x, (5, 5), (1, 1), (2, 2))
    (32, 32)

    >>> compute_output_size([1, 3, 8, 8], (3, 3), (2, 2), (1, 1))  # Raises InvalidConfigError
    """
    input_shape = _input_shape(input_data)
    if len(input_shape) != 4:
        raise ValueError(
            f"Input must be 4D (N, C, H, W), got shape {input_shape}"
        )
    kernel = to_pair(kernel, "kernel")
    stride = to_pair(stride, "stride")
    padding = to_pair(padding, "padding")
    context = (input_shape, kernel, stride, padding)

    axes = (("height", 0), ("width", 1))
    dims = input_shape[2:]

    for axis, i in axes:
        k, p, d = kernel[i], padding[i], dims[i]
        if k <= 0 or k > d + 2 * p:
            raise InvalidInputError(
                f"Invalid input data or configuration: kernel {axis} and input {axis} must satisfy "
                f"0 < kernel {axis} <= input {axis} + 2 * padding {axis}. "
                f"\nGot kernel {axis} = {k}, input {axis} = {d} and padding {axis} = {p} "
                f"which do not satisfy 0 < {k} <= {d + 2 * p}",
                *context,
            )

    for axis, i in axes:
        if stride[i] <= 0:
            raise InvalidConfigError(
                f"Invalid input data or configuration: stride {axis} must be positive, "
                f"got {stride[i]}",
                *context,
            )

    for axis, i in axes:
        k, s, p, d = kernel[i], stride[i], padding[i], dims[i]
        if (d - k + 2 * p) % s != 0:
            quotient = (d - k + 2 * p) / s + 1.0
            raise InvalidConfigError(
                "Invalid input data or configuration: Combination of kernel size, stride and "
                f"padding are not valid for given input {axis}.\n"
                "Require: (input - kernelSize + 2*padding)/stride + 1 in "
                f"{axis} dimension to be an integer. Got: "
                f"({d} - {k} + 2*{p})/{s} + 1 = {quotient:.2f}\n"
                + _STRIDE_REFERENCE,
                *context,
            )

    out_h = (dims[0] - kernel[0] + 2 * padding[0]) // stride[0] + 1
    out_w = (dims[1] - kernel[1] + 2 * padding[1]) // stride[1] + 1
    return out_h, out_w


def compute_output_shape(
    input_data: ShapeLike, conf: NeuralNetConfiguration
) -> Tuple[int, int, int, int]:
    """
    Get the full (N, C_out, H_out, W_out) activation shape produced by a
    convolution layer configuration.

    Raises
    ------
    LayerTypeError
        If the configuration does not hold a ConvolutionLayer
    ValueError
        If the layer has no n_out set
    """
    layer = _convolution_layer(conf)
    n_out = num_feature_maps_from_config(conf)
    out_h, out_w = compute_output_size(input_data, layer.kernel_size, layer.stride, layer.padding)
    return _input_shape(input_data)[0], n_out, out_h, out_w


def height_width_from_shape(shape: Sequence[int]) -> Tuple[int, int]:
    """
    Get the height and width for an image shape.

    The last axis is returned first, followed by the second-to-last, for
    any rank >= 2.

    Parameters
    ----------
    shape : sequence of int
        Shape vector, at least 2 entries

    Returns
    -------
    (shape[-1], shape[-2])

    Raises
    ------
    ValueError
        If shape has fewer than 2 entries

    Examples
    --------
    >>> height_width_from_shape([1, 3, 28, 32])
    (32, 28)
    """
    shape = to_shape(shape)
    if len(shape) < 2:
        raise ValueError("No width and height able to be found: array must be at least length 2")
    return shape[-1], shape[-2]


def height_width_from_config(conf: NeuralNetConfiguration) -> Tuple[int, int]:
    """
    Get the height and width from a convolution layer configuration.

    Reads the layer's kernel size through height_width_from_shape.

    Raises
    ------
    LayerTypeError
        If the configuration does not hold a ConvolutionLayer
    """
    return height_width_from_shape(_convolution_layer(conf).kernel_size)


def num_feature_maps_from_config(conf: NeuralNetConfiguration) -> int:
    """
    Number of kernels/filters (n_out) the configured convolution layer applies.

    Raises
    ------
    LayerTypeError
        If the configuration does not hold a ConvolutionLayer
    ValueError
        If the layer has no n_out set
    """
    n_out = _convolution_layer(conf).n_out
    if n_out is None:
        raise ValueError("ConvolutionLayer.n_out must be set")
    return n_out


def num_channels_from_shape(shape: Sequence[int]) -> int:
    """
    Get the number of channels for a shape.

    Shapes with fewer than 4 dimensions have no channel axis and count as
    single-channel. Otherwise the channel axis is 1, as in (N, C, H, W).

    Examples
    --------
    >>> num_channels_from_shape([10, 3, 28, 28])
    3
    >>> num_channels_from_shape([28, 28])
    1
    """
    shape = to_shape(shape)
    if len(shape) < 4:
        return 1
    return shape[1]
