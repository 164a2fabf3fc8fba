import re

import pytest

from tokendiff import (
    BoundaryPatternRegistry,
    CustomWordDiffer,
    convert_changes_to_xml,
    diff_custom_words_with_space,
    get_boundary_pattern,
    merge_options,
    set_boundary_pattern,
)
from tokendiff.registry import default_registry

DIALOGUE_TAGS = r'(\(VO\)|\(ON\)|\(OFF\)|\s+|\b)'


def test_registry_set_get_clear():
    registry = BoundaryPatternRegistry()
    assert registry.get() is None
    registry.set(DIALOGUE_TAGS)
    assert registry.get() == DIALOGUE_TAGS
    registry.set(r'(\s+)')
    assert registry.get() == r'(\s+)'
    registry.clear()
    assert registry.get() is None


def test_empty_pattern_clears():
    registry = BoundaryPatternRegistry(DIALOGUE_TAGS)
    registry.set('')
    assert registry.get() is None


def test_set_does_not_validate():
    registry = BoundaryPatternRegistry()
    registry.set('(')
    assert registry.get() == '('


def test_module_functions_use_default_registry():
    set_boundary_pattern(DIALOGUE_TAGS)
    assert default_registry.get() == DIALOGUE_TAGS
    assert get_boundary_pattern() == DIALOGUE_TAGS


def test_installed_restores_previous_pattern():
    registry = BoundaryPatternRegistry(r'(\s+)')
    with registry.installed(DIALOGUE_TAGS):
        assert registry.get() == DIALOGUE_TAGS
    assert registry.get() == r'(\s+)'

    with pytest.raises(RuntimeError):
        with registry.installed(DIALOGUE_TAGS):
            raise RuntimeError('boom')
    assert registry.get() == r'(\s+)'


def test_merge_without_pattern_passes_options_through():
    options = {'ignore_case': True}
    assert merge_options(options, None) is options
    assert merge_options(None, None) is None


def test_merge_with_pattern_builds_new_options():
    options = {'ignore_case': True, 'ignore_whitespace': False}
    merged = merge_options(options, DIALOGUE_TAGS)
    assert merged == {'ignore_case': True, 'ignore_whitespace': False,
                      'custom_token_regex': DIALOGUE_TAGS}
    assert options == {'ignore_case': True, 'ignore_whitespace': False}
    assert merge_options(None, DIALOGUE_TAGS) == {'custom_token_regex': DIALOGUE_TAGS}


def test_merge_pattern_wins_over_caller_pattern():
    rx = re.compile(DIALOGUE_TAGS)
    merged = merge_options({'custom_token_regex': r'(\s+)', 'customTokenRegex': r'(,)'}, rx)
    assert merged == {'custom_token_regex': rx}


def test_private_registry_leaves_global_alone():
    registry = BoundaryPatternRegistry(DIALOGUE_TAGS)
    differ = CustomWordDiffer(registry)
    changes = differ.diff_words_with_space('(VO) gamal', '(VO)(ON) gamal')
    assert convert_changes_to_xml(changes) == '(VO)<ins>(ON)</ins> gamal'
    assert get_boundary_pattern() is None
    assert diff_custom_words_with_space('(VO) gamal', '(VO)(ON) gamal') != changes


def test_effective_options_are_fixed_when_the_call_starts():
    registry = BoundaryPatternRegistry(DIALOGUE_TAGS)
    differ = CustomWordDiffer(registry)

    def comparator(left, right):
        registry.set(None)
        return left == right

    calls = []
    differ.diff_words_with_space('(VO) gamal', '(VO)(ON) gamal', {'comparator': comparator},
                                 lambda err, changes: calls.append((err, changes)))
    assert registry.get() is None
    err, changes = calls[0]
    assert err is None
    assert convert_changes_to_xml(changes) == '(VO)<ins>(ON)</ins> gamal'
