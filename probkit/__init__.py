"""probkit: probability distributions with density, CDF, moments and sampling.

This package provides a capability-based set of distribution interfaces,
the Gamma distribution with its Chisquared and Erlang reparameterisations,
pluggable random sources, and a context manager for the default source.
"""

try:
    from probkit._version import version as __version__
except ImportError:
    __version__ = "0.1.0"

from .core.types import InvalidParameter
from .core.source import NumpySource, Source
from .core.context import SamplingContext
from .distributions import Chisquared, Erlang, Gamma
from .sampler import Independent, SampleSet, draw

__all__ = [
    "InvalidParameter",
    "NumpySource",
    "Source",
    "SamplingContext",
    "Gamma",
    "Chisquared",
    "Erlang",
    "Independent",
    "SampleSet",
    "draw",
]
