# -*- coding: utf-8 -*-
"""
    tokendiff
    ~~~~~~~~~

    Word diffs with a configurable token boundary.  Useful when a text
    carries domain tokens that must never be split, such as stage
    directions in dialogue.  Examples:

    >>> from tokendiff import diff_custom_words, convert_changes_to_xml

    >>> print(convert_changes_to_xml(diff_custom_words('New Value', 'New  ValueMoreData')))
    New  <del>Value</del><ins>ValueMoreData</ins>

    >>> print(convert_changes_to_xml(diff_custom_words('Foo & bar', 'Foo & baz')))
    Foo &amp; <del>bar</del><ins>baz</ins>

    >>> from tokendiff import diff_custom_words_with_space, set_boundary_pattern
    >>> set_boundary_pattern(r'(\\(VO\\)|\\(ON\\)|\\(OFF\\)|\\s+|\\b)')
    >>> print(convert_changes_to_xml(diff_custom_words_with_space('(VO) gamal', '(VO)(ON) gamal')))
    (VO)<ins>(ON)</ins> gamal
    >>> set_boundary_pattern(None)
"""
from .registry import BoundaryPatternRegistry, set_boundary_pattern, get_boundary_pattern
from .custom_word import (
    CustomWordDiffer,
    merge_options,
    diff_custom_words,
    diff_custom_words_with_space,
)
from .text_differ import diff_words, diff_words_with_space, word_split
from .differ import Change, SequenceDiffer
from .render import convert_changes_to_xml, convert_changes_to_dmp

from loguru import logger

# Library logging is off unless the application opts in with
# `logger.enable("tokendiff")`.
logger.disable(__name__)

__version__ = '0.1.0'

__all__ = [
    'set_boundary_pattern',
    'get_boundary_pattern',
    'BoundaryPatternRegistry',
    'merge_options',
    'CustomWordDiffer',
    'diff_custom_words',
    'diff_custom_words_with_space',
    'diff_words',
    'diff_words_with_space',
    'word_split',
    'Change',
    'SequenceDiffer',
    'convert_changes_to_xml',
    'convert_changes_to_dmp',
]
