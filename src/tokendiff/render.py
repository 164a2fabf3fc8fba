# -*- coding: utf-8 -*-
"""
Rendering of edit scripts.
"""
from genshi.core import Stream, QName, Attrs, START, END, TEXT

_POS = (None, -1, -1)

INS = QName('ins')
DEL = QName('del')

# diff-match-patch operation codes
DIFF_DELETE = -1
DIFF_EQUAL = 0
DIFF_INSERT = 1


def _change_tag(change):
    if change.get('added'):
        return INS
    if change.get('removed'):
        return DEL
    return None


def changes_to_stream(changes):
    """Turn an edit script into a Genshi stream with ``<ins>``/``<del>``
    around the changed segments."""
    events = []
    for change in changes:
        tag = _change_tag(change)
        if tag is not None:
            events.append((START, (tag, Attrs()), _POS))
        events.append((TEXT, change['value'], _POS))
        if tag is not None:
            events.append((END, tag, _POS))
    return Stream(events)


def convert_changes_to_xml(changes):
    """
    Render an edit script as markup: unchanged text as is, removed text in
    ``<del>``, added text in ``<ins>``.  Text is escaped and whitespace kept
    verbatim.
    """
    stream = changes_to_stream(changes)
    return stream.render('html', encoding=None, strip_whitespace=False)


def convert_changes_to_dmp(changes):
    """Convert an edit script to diff-match-patch style ``(op, text)``
    tuples."""
    rv = []
    for change in changes:
        if change.get('added'):
            op = DIFF_INSERT
        elif change.get('removed'):
            op = DIFF_DELETE
        else:
            op = DIFF_EQUAL
        rv.append((op, change['value']))
    return rv
