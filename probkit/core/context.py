"""Context manager selecting the default random source."""

import logging
from typing import Optional

from .source import NumpySource, Source, default_source

logger = logging.getLogger(__name__)

_fallback_source: Optional[Source] = None


class SamplingContext:
    """Context manager that provides the default source for sampling.

    Inside the context, ``sample()`` calls made without an explicit source
    draw from this context's source. Contexts nest: leaving an inner
    context restores the outer one.

    Example:
        >>> with SamplingContext(seed=42):
        ...     x = Gamma(2.0, 1.0).sample()
    """

    _active_context: Optional['SamplingContext'] = None

    def __init__(self, source: Optional[Source] = None, seed: Optional[int] = None):
        """Initialize a new sampling context.

        Args:
            source: The source to draw from.
            seed: Seed for a fresh :class:`NumpySource`, used when no
                *source* is given.

        Raises:
            ValueError: If both *source* and *seed* are given.
        """
        if source is not None and seed is not None:
            raise ValueError("Pass either source or seed, not both")
        self.source: Source = source if source is not None else NumpySource(seed)
        self._parent_context: Optional['SamplingContext'] = None

    def __enter__(self) -> 'SamplingContext':
        """Enter the context.

        Returns:
            The SamplingContext instance.
        """
        self._parent_context = SamplingContext._active_context
        SamplingContext._active_context = self
        logger.debug("Entered sampling context with %r", self.source)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """Exit the context, restoring the enclosing one.

        Returns:
            False to propagate any exceptions.
        """
        SamplingContext._active_context = self._parent_context
        self._parent_context = None
        logger.debug("Left sampling context with %r", self.source)
        return False

    @classmethod
    def get_active_context(cls) -> Optional['SamplingContext']:
        """Get the currently active context, or None."""
        return cls._active_context

    @classmethod
    def is_active(cls) -> bool:
        """Check if a sampling context is currently active."""
        return cls._active_context is not None


def resolve_source(source: Optional[Source] = None) -> Source:
    """Return *source*, else the active context's source, else a shared default.

    The shared default is created lazily on first use and unseeded.
    """
    global _fallback_source
    if source is not None:
        return source
    context = SamplingContext.get_active_context()
    if context is not None:
        return context.source
    if _fallback_source is None:
        _fallback_source = default_source()
        logger.debug("Created fallback source %r", _fallback_source)
    return _fallback_source
