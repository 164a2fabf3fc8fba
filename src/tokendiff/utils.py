# -*- coding: utf-8 -*-
"""
Helpers shared by the differs: option handling and callback delivery.
"""
from collections.abc import Mapping
from concurrent.futures import Future

from loguru import logger

from .config import OPTION_ALIASES, CALLBACK_OPTION


def normalize_option_name(name):
    """Map a camelCase option name to the snake_case one used internally."""
    return OPTION_ALIASES.get(name, name)


def generate_options(options, defaults):
    """
    Overlay caller options on top of `defaults` and return a new dict.

    Caller values win over defaults.  A callable passed in place of the
    options is taken as the completion callback.  Neither argument is
    modified.
    """
    rv = dict(defaults)
    if callable(options):
        rv[CALLBACK_OPTION] = options
    elif options:
        for name, value in options.items():
            rv[normalize_option_name(name)] = value
    return rv


def find_callback(options, callback=None):
    """
    Return the completion callback a call asks for, or None.

    Only looks, never fails: malformed options are left for the diff itself
    to report.
    """
    if callback is not None:
        return callback
    if callable(options):
        return options
    if isinstance(options, Mapping):
        return options.get(CALLBACK_OPTION)
    return None


def split_callback(options, callback=None):
    """
    Separate a completion callback from the options.

    Accepts the callback as its own argument, as the `options` argument
    itself, or as an entry of the options mapping.  Returns
    ``(options, callback)``; the options are copied when the callback has to
    be removed from them.
    """
    if callable(options):
        return None, callback or options
    if options and CALLBACK_OPTION in options:
        options = dict(options)
        from_options = options.pop(CALLBACK_OPTION)
        callback = callback or from_options
    return options, callback


def future_from_call(func, *args):
    """Call `func` and return a completed future holding its result or the
    exception it raised."""
    future = Future()
    try:
        future.set_result(func(*args))
    except Exception as exc:
        future.set_exception(exc)
    return future


def complete(future, callback=None):
    """
    Finish a call in the form the caller picked: return the result (raising
    on failure) without a callback, or hand it to the callback.
    """
    if callback is None:
        return future.result()
    deliver(future, callback)


def deliver(future, callback):
    """
    Complete a callback-style call from a finished future.

    The callback is invoked exactly once, as ``callback(error, result)``.
    On failure the result is ``None``.
    """
    error = future.exception()
    if error is not None:
        logger.debug("Delivering diff failure to callback: {!r}", error)
        callback(error, None)
        return
    callback(None, future.result())


def remove_empty(tokens):
    """Drop empty (or ``None``) tokens."""
    return [t for t in tokens if t]
