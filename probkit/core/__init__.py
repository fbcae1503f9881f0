"""Core module for probkit.

This module contains the capability interfaces shared by all distributions,
the random source abstraction, and the context manager that selects the
default source for sampling.
"""

from .types import (
    Continuous,
    Discrete,
    Distribution,
    Entropy,
    InvalidParameter,
    Kurtosis,
    Mean,
    Median,
    Modes,
    Sample,
    Skewness,
    Variance,
)
from .source import NumpySource, Source, default_source
from .context import SamplingContext, resolve_source

__all__ = [
    "Continuous",
    "Discrete",
    "Distribution",
    "Entropy",
    "InvalidParameter",
    "Kurtosis",
    "Mean",
    "Median",
    "Modes",
    "Sample",
    "Skewness",
    "Variance",
    "NumpySource",
    "Source",
    "default_source",
    "SamplingContext",
    "resolve_source",
]
