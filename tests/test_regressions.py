import doctest

import tokendiff
from tokendiff import (
    convert_changes_to_xml,
    diff_custom_words,
    diff_custom_words_with_space,
    set_boundary_pattern,
)


def test_doctests_tokendiff_module():
    res = doctest.testmod(tokendiff, verbose=False)
    assert res.failed == 0


def test_identical_texts_have_no_changes():
    set_boundary_pattern(r'(\(VO\)|\(ON\)|\(OFF\)|\s+|\b)')
    for text in ['', ' ', 'New Value', '(VO)(ON) gamal\n', 'hase  igel\tfuchs']:
        for func in (diff_custom_words, diff_custom_words_with_space):
            assert not any(c.is_change for c in func(text, text)), (func, text)


def test_removed_line_break_is_folded_into_last_segment():
    # A trailing whitespace-only change is not reported on its own.
    changes = diff_custom_words('Foo bar\n', 'Foo bar')
    assert changes == [{'value': 'Foo bar\n', 'count': 3}]


def test_trailing_whitespace_is_reported_with_space():
    out = convert_changes_to_xml(diff_custom_words_with_space('Foo bar\n', 'Foo bar'))
    assert out == 'Foo bar<del>\n</del>'
