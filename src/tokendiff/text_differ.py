# -*- coding: utf-8 -*-
"""
Word level text diffing.

This module contains the word tokenizer, the word equality rules and the two
word diff modes: one where whitespace runs compare equal to each other, and
one where whitespace is significant and shows up in the edit script.
"""
import re

from loguru import logger

from .config import (
    _word_split_re, _extended_word_chars_re, _non_whitespace_re,
    TOKEN_PATTERN_OPTION, IGNORE_CASE_OPTION, IGNORE_WHITESPACE_OPTION,
    COMPARATOR_OPTION, CALLBACK_OPTION,
    WORD_DIFF_DEFAULTS, WORD_DIFF_WITH_SPACE_DEFAULTS,
)
from .differ import SequenceDiffer
from .utils import generate_options, find_callback, future_from_call, complete


def word_split(text, pattern=None):
    """
    Tokenize text for word diffing.

    `pattern` is a regular expression (string or compiled) whose matches
    separate tokens; captured separators are kept as tokens of their own.
    Without a pattern, whitespace runs and word boundaries split.

    A zero-width split between two runs of latin letters is undone, so
    accented words stay whole.
    """
    rx = _word_split_re if pattern is None else re.compile(pattern)
    tokens = rx.split(text)
    i = 0
    while i < len(tokens) - 2:
        if not tokens[i + 1] and tokens[i + 2] and tokens[i] \
                and _extended_word_chars_re.match(tokens[i]) \
                and _extended_word_chars_re.match(tokens[i + 2]):
            tokens[i] += tokens[i + 2]
            del tokens[i + 1:i + 3]
            continue
        i += 1
    return tokens


def is_whitespace_token(token):
    """True for tokens without any non-whitespace character."""
    return _non_whitespace_re.search(token) is None


class WordDiffer(SequenceDiffer):
    """Diffs texts word by word."""

    def tokenize(self, value):
        return word_split(value, self.options.get(TOKEN_PATTERN_OPTION) or None)

    def equals(self, left, right):
        comparator = self.options.get(COMPARATOR_OPTION)
        if comparator is not None:
            return comparator(left, right)
        if self.options.get(IGNORE_CASE_OPTION):
            left = left.lower()
            right = right.lower()
        return left == right or (
            bool(self.options.get(IGNORE_WHITESPACE_OPTION))
            and is_whitespace_token(left) and is_whitespace_token(right))


def _run_differ(differ_class, old_text, new_text, options, defaults):
    options = generate_options(options, defaults)
    options.pop(CALLBACK_OPTION, None)
    return differ_class(options).diff(old_text, new_text)


def run_diff(differ_class, old_text, new_text, options, defaults, callback=None):
    """
    Run a differ in the calling form the caller asks for.

    Without a callback the edit script is returned and failures are raised.
    With a callback (passed directly, as `options` or as
    ``options['callback']``) the callback receives ``(error, changes)``
    exactly once and nothing is raised, not even for malformed options.
    """
    callback = find_callback(options, callback)
    future = future_from_call(_run_differ, differ_class, old_text, new_text,
                              options, defaults)
    if callback is not None:
        logger.trace("Completing {} through callback", differ_class.__name__)
    return complete(future, callback)


def diff_words(old_text, new_text, options=None, callback=None):
    """
    Diff two texts word by word, treating all whitespace runs as equal.

    Whitespace is still reported inside the segments; it just never causes
    a change by itself.
    """
    return run_diff(WordDiffer, old_text, new_text, options,
                    WORD_DIFF_DEFAULTS, callback)


def diff_words_with_space(old_text, new_text, options=None, callback=None):
    """Diff two texts word by word; whitespace runs are significant tokens."""
    return run_diff(WordDiffer, old_text, new_text, options,
                    WORD_DIFF_WITH_SPACE_DEFAULTS, callback)
