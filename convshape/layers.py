"""
Layer configuration objects read by the shape utilities.

A NeuralNetConfiguration wraps exactly one layer description. Only the
fields the shape helpers need are modelled: channel counts for every layer,
plus kernel size, stride and padding for convolution layers.

Typical usage:
--------------
    from convshape.layers import ConvolutionLayer, NeuralNetConfiguration
    from convshape.utils import height_width_from_config

    conf = NeuralNetConfiguration(
        layer=ConvolutionLayer(n_in=3, n_out=16, kernel_size=(3, 3))
    )
    height_width_from_config(conf)  # (3, 3)
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, Union

import numpy as np

PairLike = Union[int, Tuple[int, int]]


def to_int(value, name: str) -> int:
    """Return value as a Python int, rejecting bools and non-integral numbers."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} entries must be integers, got {value!r}")
    return int(value)


def to_shape(values: Sequence[int], name: str = "shape") -> Tuple[int, ...]:
    """Return a shape vector as a tuple of Python ints."""
    return tuple(to_int(v, name) for v in values)


def to_pair(value: PairLike, name: str) -> Tuple[int, int]:
    """Expand a scalar to a square (height, width) pair and validate length."""
    if np.ndim(value) == 0:
        value = to_int(value, name)
        return (value, value)
    pair = to_shape(value, name)
    if len(pair) != 2:
        raise ValueError(f"{name} must be an int or a (height, width) pair, got {value!r}")
    return pair


@dataclass
class Layer:
    """
    Base layer configuration.

    Parameters
    ----------
    n_in : int, optional
        Number of input channels / features
    n_out : int, optional
        Number of output channels / features
    name : str, optional
        Layer name, used only for display
    """
    n_in: Optional[int] = None
    n_out: Optional[int] = None
    name: Optional[str] = None

    def __post_init__(self):
        """Validate channel counts."""
        for attr in ("n_in", "n_out"):
            value = getattr(self, attr)
            if value is None:
                continue
            value = to_int(value, attr)
            if value <= 0:
                raise ValueError(f"{attr} must be positive, got {value}")
            setattr(self, attr, value)


@dataclass
class DenseLayer(Layer):
    """Fully connected layer. Has no spatial geometry."""


@dataclass
class ConvolutionLayer(Layer):
    """
    2D convolution layer configuration.

    Parameters
    ----------
    kernel_size : int or (int, int), default=(5, 5)
        Kernel (height, width)
    stride : int or (int, int), default=(1, 1)
        Stride (height, width)
    padding : int or (int, int), default=(0, 0)
        Symmetric zero padding (height, width)
    """
    kernel_size: PairLike = (5, 5)
    stride: PairLike = (1, 1)
    padding: PairLike = (0, 0)

    def __post_init__(self):
        """Validate configuration."""
        super().__post_init__()
        self.kernel_size = to_pair(self.kernel_size, "kernel_size")
        self.stride = to_pair(self.stride, "stride")
        self.padding = to_pair(self.padding, "padding")

        if min(self.kernel_size) <= 0:
            raise ValueError(f"kernel_size entries must be positive, got {self.kernel_size}")
        if min(self.stride) <= 0:
            raise ValueError(f"stride entries must be positive, got {self.stride}")
        if min(self.padding) < 0:
            raise ValueError(f"padding entries must be non-negative, got {self.padding}")


@dataclass
class NeuralNetConfiguration:
    """
    Configuration of a single network layer.

    Parameters
    ----------
    layer : Layer
        The layer this configuration describes
    """
    layer: Layer = field(default_factory=ConvolutionLayer)

    def __post_init__(self):
        """Validate configuration."""
        if not isinstance(self.layer, Layer):
            raise ValueError(f"layer must be a Layer instance, got {type(self.layer).__name__}")
