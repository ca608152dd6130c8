"""Abort signalling.

A BEFORE hook aborts the invocation either by returning ``ABORT`` or by
raising ``Abort`` (useful from deep inside helper calls). Neither is an
error: the engine turns both into the ``ABORTED`` result marker.
"""

from typing import Any


class _Sentinel:
    """Named singleton with a stable repr."""

    __slots__ = ('_name',)

    def __init__(self, name: str):
        self._name = name

    def __repr__(self):
        return self._name

    def __bool__(self):
        return False

    def __reduce__(self):
        return self._name


# Returned by a hook to stop the BEFORE phase and skip the body.
ABORT = _Sentinel('ABORT')

# Returned by run() when the body never produced a result.
ABORTED = _Sentinel('ABORTED')


class Abort(Exception):
    """Raised by a hook to signal abort. Caught by the engine, never propagated."""


def is_abort_signal(value: Any) -> bool:
    return value is ABORT


def halts_on_false(result: Any) -> bool:
    """Terminator that aborts when a BEFORE hook returns exactly ``False``.

    Gives return-value short-circuiting (``return false unless valid?``)
    as an opt-in alternative to explicit abort signals.
    """
    return result is False
