# -*- coding: utf-8 -*-
"""
Constants and option names for tokendiff.
"""
import re

# Default word boundary: whitespace runs are their own tokens, and every
# word/non-word transition splits.
_word_split_re = re.compile(r'(\s+|\b)', re.U)

# Latin letters (including the extended ranges) that a zero-width split must
# not separate.
_extended_word_chars_re = re.compile(
    u'^[A-Za-z\xc0-\u02c6\u02c8-\u02d7\u02de-\u02ff\u1e00-\u1eff]+$', re.U)

# Any non-whitespace character.
_non_whitespace_re = re.compile(r'\S', re.U)

# Option names understood by the differs.
TOKEN_PATTERN_OPTION = 'custom_token_regex'
IGNORE_CASE_OPTION = 'ignore_case'
IGNORE_WHITESPACE_OPTION = 'ignore_whitespace'
COMPARATOR_OPTION = 'comparator'
CALLBACK_OPTION = 'callback'

# camelCase spellings accepted for compatibility with jsdiff-style options.
OPTION_ALIASES = {
    'customTokenRegex': TOKEN_PATTERN_OPTION,
    'ignoreCase': IGNORE_CASE_OPTION,
    'ignoreWhitespace': IGNORE_WHITESPACE_OPTION,
}

# Defaults applied by the two word diff modes.
WORD_DIFF_DEFAULTS = {IGNORE_WHITESPACE_OPTION: True}
WORD_DIFF_WITH_SPACE_DEFAULTS = {}
