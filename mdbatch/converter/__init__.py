"""External converter boundary: the Converter protocol and its pandoc implementation."""

from .base import ConversionResult, Converter, ConverterUnavailable
from .pandoc import PandocConverter

__all__ = [
    "ConversionResult",
    "Converter",
    "ConverterUnavailable",
    "PandocConverter",
]
