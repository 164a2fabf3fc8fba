# -*- coding: utf-8 -*-
"""
Generic sequence differ.

Computes an edit script between two token sequences with the greedy
O(ND) algorithm by Myers: edit lengths are explored in increasing order and
only the furthest reaching path on each diagonal is kept.  Subclasses decide
how input is tokenized and how tokens compare.
"""
from loguru import logger

from .config import COMPARATOR_OPTION, IGNORE_CASE_OPTION
from .utils import remove_empty, future_from_call


class Change(dict):
    """
    One segment of an edit script.

    A plain dict with the keys ``value`` and ``count``; segments that are
    not unchanged also carry ``added`` and ``removed`` (one of them True,
    the other None).  Keys can be read as attributes too.
    """

    __slots__ = ()

    def __getattr__(self, name):
        if name in ('added', 'removed'):
            return self.get(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    @property
    def is_change(self):
        return bool(self.get('added') or self.get('removed'))


class _Path(object):
    __slots__ = ('new_pos', 'components')

    def __init__(self, new_pos, components):
        self.new_pos = new_pos
        self.components = components

    def clone(self):
        return _Path(self.new_pos, list(self.components))


class SequenceDiffer(object):
    """Diffs two inputs token by token.

    The default implementation treats every character as a token.  One
    instance holds the options of a single diff call.
    """

    #: Take the longer of the old/new token for unchanged segments instead
    #: of always the new one.
    use_longest_token = False

    def __init__(self, options=None):
        self.options = options or {}

    # -- hooks ---------------------------------------------------------

    def cast_input(self, value):
        return value

    def tokenize(self, value):
        return list(value)

    def remove_empty(self, tokens):
        return remove_empty(tokens)

    def equals(self, left, right):
        comparator = self.options.get(COMPARATOR_OPTION)
        if comparator is not None:
            return comparator(left, right)
        return left == right or (
            bool(self.options.get(IGNORE_CASE_OPTION))
            and left.lower() == right.lower())

    def join(self, tokens):
        return u''.join(tokens)

    # -- entry points --------------------------------------------------

    def diff(self, old, new):
        """Return the edit script turning `old` into `new`."""
        old_tokens = self.remove_empty(self.tokenize(self.cast_input(old)))
        new_tokens = self.remove_empty(self.tokenize(self.cast_input(new)))
        logger.trace("Diffing {} old tokens against {} new tokens",
                     len(old_tokens), len(new_tokens))

        new_len = len(new_tokens)
        old_len = len(old_tokens)
        max_edit_length = new_len + old_len
        best_path = {0: _Path(-1, [])}

        # Seed edit length 0: the inputs may start with the same tokens.
        old_pos = self._extract_common(best_path[0], new_tokens, old_tokens, 0)
        if best_path[0].new_pos + 1 >= new_len and old_pos + 1 >= old_len:
            if not new_tokens:
                return []
            return [Change(value=self.join(new_tokens), count=new_len)]

        edit_length = 1
        while edit_length <= max_edit_length:
            rv = self._exec_edit_length(edit_length, best_path,
                                        new_tokens, old_tokens)
            if rv is not None:
                return rv
            edit_length += 1
        # Unreachable: an edit script of length new_len + old_len always exists.
        raise RuntimeError('edit script search exhausted')

    def submit(self, old, new):
        """
        Run the diff and return a completed `concurrent.futures.Future`.

        The future holds either the edit script or the exception the diff
        raised.
        """
        return future_from_call(self.diff, old, new)

    # -- internals -----------------------------------------------------

    def _exec_edit_length(self, edit_length, best_path, new_tokens, old_tokens):
        new_len = len(new_tokens)
        old_len = len(old_tokens)
        for diagonal in range(-edit_length, edit_length + 1, 2):
            add_path = best_path.get(diagonal - 1)
            remove_path = best_path.get(diagonal + 1)
            old_pos = (remove_path.new_pos if remove_path else 0) - diagonal
            if add_path:
                # Nobody else will branch from this one.
                best_path[diagonal - 1] = None

            can_add = add_path is not None and add_path.new_pos + 1 < new_len
            can_remove = remove_path is not None and 0 <= old_pos < old_len
            if not can_add and not can_remove:
                best_path[diagonal] = None
                continue

            # Branch from whichever path got furthest into the new sequence.
            if not can_add or (can_remove and add_path.new_pos < remove_path.new_pos):
                base_path = remove_path.clone()
                self._push_component(base_path.components, None, True)
            else:
                base_path = add_path
                base_path.new_pos += 1
                self._push_component(base_path.components, True, None)

            old_pos = self._extract_common(base_path, new_tokens, old_tokens, diagonal)

            if base_path.new_pos + 1 >= new_len and old_pos + 1 >= old_len:
                return self._build_values(base_path.components,
                                          new_tokens, old_tokens)
            best_path[diagonal] = base_path
        return None

    def _push_component(self, components, added, removed):
        last = components[-1] if components else None
        if last is not None and last.get('added') == added \
                and last.get('removed') == removed:
            # Components are shared between cloned paths: replace, never mutate.
            components[-1] = {'count': last['count'] + 1,
                              'added': added, 'removed': removed}
        else:
            components.append({'count': 1, 'added': added, 'removed': removed})

    def _extract_common(self, path, new_tokens, old_tokens, diagonal):
        new_len = len(new_tokens)
        old_len = len(old_tokens)
        new_pos = path.new_pos
        old_pos = new_pos - diagonal
        common_count = 0
        while new_pos + 1 < new_len and old_pos + 1 < old_len \
                and self.equals(new_tokens[new_pos + 1], old_tokens[old_pos + 1]):
            new_pos += 1
            old_pos += 1
            common_count += 1

        if common_count:
            path.components.append({'count': common_count})

        path.new_pos = new_pos
        return old_pos

    def _build_values(self, components, new_tokens, old_tokens):
        changes = [Change(c) for c in components]
        new_pos = 0
        old_pos = 0
        for idx, change in enumerate(changes):
            count = change['count']
            if not change.get('removed'):
                if not change.get('added') and self.use_longest_token:
                    value = [
                        old_tokens[old_pos + i] if len(old_tokens[old_pos + i]) > len(token) else token
                        for i, token in enumerate(new_tokens[new_pos:new_pos + count])
                    ]
                    change['value'] = self.join(value)
                else:
                    change['value'] = self.join(new_tokens[new_pos:new_pos + count])
                new_pos += count
                if not change.get('added'):
                    old_pos += count
            else:
                change['value'] = self.join(old_tokens[old_pos:old_pos + count])
                old_pos += count
                # The search emits additions before removals; report removals
                # first.
                if idx and changes[idx - 1].get('added'):
                    changes[idx - 1], changes[idx] = changes[idx], changes[idx - 1]

        # A trailing change that is equal to nothing (e.g. whitespace when
        # whitespace is ignored) is folded into the segment before it.
        if len(changes) > 1:
            last = changes[-1]
            if last.is_change and self.equals(u'', last['value']):
                changes[-2]['value'] += last['value']
                changes.pop()
        return changes
