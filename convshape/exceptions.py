"""
Exception types raised by convshape.

Malformed arguments (wrong rank, wrong pair length) raise the built-in
ValueError. The classes below cover failures that depend on the combination
of input shape and layer configuration.
"""


class ConvolutionShapeError(Exception):
    """Base class for all convshape errors."""


def _common_context(input_shape, kernel, stride, padding) -> str:
    return (
        f"\nInput size: [numExamples,inputDepth,inputHeight,inputWidth]={list(input_shape)}"
        f", kernel={list(kernel)}, strides={list(stride)}, padding={list(padding)}"
    )


class _ConvolutionGeometryError(ConvolutionShapeError, ValueError):
    """Error carrying the full geometry of the failed output-size calculation."""

    def __init__(self, message: str, input_shape, kernel, stride, padding):
        self.input_shape = tuple(input_shape)
        self.kernel = tuple(kernel)
        self.stride = tuple(stride)
        self.padding = tuple(padding)
        self.message = message
        super().__init__(message + _common_context(input_shape, kernel, stride, padding))


class InvalidInputError(_ConvolutionGeometryError):
    """Raised when the kernel does not fit inside the padded input."""


class InvalidConfigError(_ConvolutionGeometryError):
    """Raised when kernel size, stride and padding do not tile the input exactly."""


class LayerTypeError(ConvolutionShapeError, TypeError):
    """Raised when a configuration does not hold a convolution layer."""

    def __init__(self, layer):
        self.layer = layer
        super().__init__(
            f"Expected a ConvolutionLayer configuration, got {type(layer).__name__}"
        )
