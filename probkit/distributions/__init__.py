"""Distribution implementations for probkit.

Gamma carries the numerical work; Chisquared and Erlang are
reparameterisations that forward to an owned Gamma.
"""

from .gamma import Gamma
from .chisquared import Chisquared
from .erlang import Erlang

__all__ = [
    "Gamma",
    "Chisquared",
    "Erlang",
]
