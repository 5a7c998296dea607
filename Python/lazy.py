"""
A thunk is an unevaluated computation that is evaluated on first demand.

Forcing a thunk runs its function once, caches the result and drops the
function. Every later force returns the cached object.

Two threads forcing the same pending thunk may both run the function. The
functions wrapped here are expected to be pure, so that costs time but can
never expose a half-initialised thunk.
"""


class Thunk:
    __slots__ = ('_func', '_value')

    def __init__(self, func):
        self._func = func
        self._value = None

    @classmethod
    def of(cls, value):
        """An already evaluated thunk."""
        thunk = cls(None)
        thunk._value = value
        return thunk

    def force(self):
        func = self._func
        if func is None:
            return self._value
        value = func()
        self._value = value
        self._func = None
        return value

    def is_forced(self):
        return self._func is None

    def __repr__(self):
        if self.is_forced():
            return 'Thunk({!r})'.format(self._value)
        return 'Thunk(<pending>)'


def delay(func_or_thunk):
    """Wrap a zero-argument callable in a Thunk; thunks pass through."""
    if isinstance(func_or_thunk, Thunk):
        return func_or_thunk
    if not callable(func_or_thunk):
        raise TypeError('expected a Thunk or a callable, got {!r}'.format(func_or_thunk))
    return Thunk(func_or_thunk)
