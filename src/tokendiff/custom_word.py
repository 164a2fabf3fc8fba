# -*- coding: utf-8 -*-
"""
Word diffs with a configurable token boundary.

`diff_custom_words` and `diff_custom_words_with_space` behave exactly like
`diff_words` and `diff_words_with_space`, except that the boundary pattern
installed with `set_boundary_pattern` (if any) replaces the tokenizer's
default word boundary rule.  This lets domain tokens such as the stage
directions ``(VO)``, ``(ON)`` and ``(OFF)`` diff as single units::

    set_boundary_pattern(r'(\\(VO\\)|\\(ON\\)|\\(OFF\\)|\\s+|\\b)')
    diff_custom_words_with_space('(VO) gamal', '(VO)(ON) gamal')

The pattern is merged into the options when the call is made, so changing
it later does not affect a diff that was already started.
"""
from loguru import logger

from .config import TOKEN_PATTERN_OPTION, OPTION_ALIASES
from .registry import default_registry, set_boundary_pattern, get_boundary_pattern
from .text_differ import diff_words, diff_words_with_space
from .utils import split_callback, find_callback, future_from_call, complete


_PATTERN_ALIASES = tuple(k for k, v in OPTION_ALIASES.items() if v == TOKEN_PATTERN_OPTION)


def merge_options(options, pattern):
    """
    Return the options a custom word diff actually runs with.

    Without a pattern the caller's options come back as they are (None
    included).  With one, a new dict is built from the caller's options
    with the boundary pattern set to `pattern`, overriding any pattern the
    caller gave.  The caller's mapping is never modified.
    """
    if not pattern:
        return options
    rv = dict(options) if options else {}
    for alias in _PATTERN_ALIASES:
        rv.pop(alias, None)
    rv[TOKEN_PATTERN_OPTION] = pattern
    return rv


class CustomWordDiffer(object):
    """Word diffs bound to a `BoundaryPatternRegistry`.

    The module level functions use one of these bound to the process-wide
    registry; build your own to keep a pattern private to some code.
    """

    def __init__(self, registry=None):
        self.registry = registry if registry is not None else default_registry

    def _effective_options(self, options):
        return merge_options(options, self.registry.get())

    def _diff(self, diff_func, old_text, new_text, options):
        options, _ = split_callback(options)
        options = self._effective_options(options)
        logger.trace("{} with boundary pattern {!r}", diff_func.__name__,
                     (options or {}).get(TOKEN_PATTERN_OPTION))
        return diff_func(old_text, new_text, options)

    def _dispatch(self, diff_func, old_text, new_text, options, callback):
        # Once a callback is asked for, every failure goes to it.
        callback = find_callback(options, callback)
        future = future_from_call(self._diff, diff_func, old_text, new_text, options)
        return complete(future, callback)

    def diff_words(self, old_text, new_text, options=None, callback=None):
        """Word diff where whitespace runs compare equal to each other."""
        return self._dispatch(diff_words, old_text, new_text, options, callback)

    def diff_words_with_space(self, old_text, new_text, options=None, callback=None):
        """Word diff where whitespace runs are tokens of their own."""
        return self._dispatch(diff_words_with_space, old_text, new_text, options, callback)


_default_differ = CustomWordDiffer(default_registry)


def diff_custom_words(old_text, new_text, options=None, callback=None):
    """
    Diff two texts word by word using the installed boundary pattern.

    Returns the edit script, or with a callback (passed as `callback`, as
    `options` itself or as ``options['callback']``) calls
    ``callback(error, changes)`` once and returns None.
    """
    return _default_differ.diff_words(old_text, new_text, options, callback)


def diff_custom_words_with_space(old_text, new_text, options=None, callback=None):
    """Like `diff_custom_words`, but whitespace differences are reported."""
    return _default_differ.diff_words_with_space(old_text, new_text, options, callback)


__all__ = [
    'merge_options',
    'CustomWordDiffer',
    'diff_custom_words',
    'diff_custom_words_with_space',
    'set_boundary_pattern',
    'get_boundary_pattern',
]
