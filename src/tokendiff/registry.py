# -*- coding: utf-8 -*-
"""
Process-wide boundary pattern.

A registry holds at most one token boundary pattern.  The word diff entry
points in `tokendiff.custom_word` read it fresh on every call and use it in
place of the default word boundary rule.  Last write wins; nothing is
validated until a diff actually tokenizes with the pattern.
"""
from contextlib import contextmanager

from loguru import logger


class BoundaryPatternRegistry(object):
    """A single settable slot for a token boundary pattern."""

    def __init__(self, pattern=None):
        self._pattern = pattern

    def get(self):
        """Return the installed pattern, or None."""
        return self._pattern

    def set(self, pattern):
        """Install `pattern` (a regex string or compiled pattern); a falsy
        value clears the slot."""
        self._pattern = pattern or None
        if self._pattern is None:
            logger.debug("Boundary pattern cleared")
        else:
            logger.debug("Boundary pattern set to {!r}", _pattern_source(self._pattern))

    def clear(self):
        """Remove the installed pattern."""
        self.set(None)

    @contextmanager
    def installed(self, pattern):
        """
        Install `pattern` for the duration of a with-block, then put back
        whatever was installed before.
        """
        previous = self._pattern
        self.set(pattern)
        try:
            yield pattern
        finally:
            self.set(previous)


def _pattern_source(pattern):
    return getattr(pattern, 'pattern', pattern)


default_registry = BoundaryPatternRegistry()


def set_boundary_pattern(pattern):
    """Install (or with None, clear) the process-wide boundary pattern."""
    default_registry.set(pattern)


def get_boundary_pattern():
    """Return the process-wide boundary pattern, or None."""
    return default_registry.get()
