"""
A stream is a possibly infinite sequence whose cells are evaluated on demand.

> A stream is Empty, or a Cons of a deferred head and a deferred tail.

Both parts of a Cons are thunks: building a cell evaluates nothing, and
forcing a part caches the result for every holder of that cell. Streams
derived from other streams reuse their thunks rather than copying them.

Everything that walks an unbounded number of cells (iteration, `to_list`,
`drop`, `exists`, `for_all`, `filter`, `flat_map`) is a loop, so stream length is never
limited by the interpreter's recursion limit. Combinators built on
`fold_right` recurse only as deep as their function forces the rest of the
fold.
"""

from functional_data_structures import Singleton, Nothing, Some
from lazy import Thunk, delay

REPR_LIMIT = 10


class Stream:
    __slots__ = ()

    @staticmethod
    def of(*values):
        return from_values(*values)

    def __iter__(self):
        return _iterate(self)

    def __bool__(self):
        return not self.is_empty()

    def to_list(self):
        return list(self)

    def drop(self, n):
        _check_count(n)
        stream = self
        while n > 0 and not stream.is_empty():
            stream = stream.tail()
            n -= 1
        return stream

    def exists(self, pred):
        return any(pred(item) for item in self)

    def for_all(self, pred):
        return all(pred(item) for item in self)

    def filter(self, pred):
        stream = self
        while not stream.is_empty():
            if pred(stream.head()):
                tail = stream._tail
                return Cons(stream._head, lambda: tail.force().filter(pred))
            stream = stream.tail()
        return stream

    def find(self, pred):
        return self.filter(pred).head_option()

    # -- specialisations of fold_right --

    def exists_via_fold(self, pred):
        return self.fold_right(False, lambda a, rest: pred(a) or rest.force())

    def head_option_via_fold(self):
        return self.fold_right(Nothing(), lambda a, _rest: Some(a))

    def take_while_via_fold(self, pred):
        return self.fold_right(empty(), lambda a, rest: Cons(Thunk.of(a), rest) if pred(a) else empty())

    def map(self, func):
        return self.fold_right(empty(), lambda a, rest: Cons(lambda: func(a), rest))

    def append(self, other):
        """Concatenate `other`, a thunk or zero-argument callable producing a
        stream. It is only evaluated once the end of this stream is reached."""
        return self.fold_right(delay(other), lambda a, rest: Cons(Thunk.of(a), rest))

    def flat_map(self, func):
        stream = self
        while not stream.is_empty():
            inner = func(stream.head())
            if not inner.is_empty():
                tail = stream._tail
                return inner.append(lambda: tail.force().flat_map(func))
            stream = stream.tail()
        return stream

    def scan_right(self, z, func):
        """Like fold_right, but a stream of all intermediate results.

        `func` receives the element and a Thunk of the result to its right.
        Each intermediate result is computed once and reused.
        """

        def step(a, acc):
            result = func(a, Thunk(lambda: acc.force()[0]))
            return result, Cons(Thunk.of(result), lambda: acc.force()[1])

        return self.fold_right((z, from_values(z)), step)[1]

    # -- specialisations of unfold --
    # Seeds hold the unforced tail thunk, so the source tail is only forced
    # when the next output cell is.

    def map_via_unfold(self, func):
        def step(seed):
            stream = seed.force()
            if stream.is_empty():
                return Nothing()
            return Some((func(stream.head()), stream._tail))

        return unfold(Thunk.of(self), step)

    def take_via_unfold(self, n):
        _check_count(n)

        def step(state):
            stream, remaining = state
            if remaining == 0 or stream.is_empty():
                return Nothing()
            rest = stream.tail() if remaining > 1 else empty()
            return Some((stream.head(), (rest, remaining - 1)))

        return unfold((self, n), step)

    def take_while_via_unfold(self, pred):
        def step(seed):
            stream = seed.force()
            if stream.is_empty():
                return Nothing()
            head = stream.head()
            if not pred(head):
                return Nothing()
            return Some((head, stream._tail))

        return unfold(Thunk.of(self), step)

    def zip_with(self, other, func):
        def step(pair):
            left, right = pair[0].force(), pair[1].force()
            if left.is_empty() or right.is_empty():
                return Nothing()
            return Some((func(left.head(), right.head()), (left._tail, right._tail)))

        return unfold((Thunk.of(self), Thunk.of(other)), step)

    def zip_all(self, other):
        """Pairs of Options, continuing until both streams are exhausted."""

        def step(pair):
            left, right = pair[0].force(), pair[1].force()
            if left.is_empty() and right.is_empty():
                return Nothing()
            heads = (left.head_option(), right.head_option())
            return Some((heads, (_rest(left), _rest(right))))

        return unfold((Thunk.of(self), Thunk.of(other)), step)

    def starts_with(self, prefix):
        return (self.zip_all(prefix)
                .take_while(lambda pair: not pair[1].is_empty())
                .for_all(lambda pair: pair[0] == pair[1]))

    def tails(self):
        def step(seed):
            stream = seed.force()
            if stream.is_empty():
                return Nothing()
            return Some((stream, stream._tail))

        return unfold(Thunk.of(self), step).append(lambda: from_values(empty()))

    def has_subsequence(self, sub):
        return self.tails().exists(lambda suffix: suffix.starts_with(sub))


class Empty(Singleton, Stream):
    """The empty Stream"""

    @staticmethod
    def is_empty():
        return True

    @staticmethod
    def head_option():
        return Nothing()

    def take(self, n):
        _check_count(n)
        return self

    def take_while(self, _pred):
        return self

    @staticmethod
    def fold_right(z, _func):
        if isinstance(z, Thunk):
            return z.force()
        return z

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __repr__(self):
        return 'Stream()'


class Cons(Stream):
    """A Stream cell made of a head thunk and a tail thunk.

    Either part may also be given as a zero-argument callable.
    """

    __slots__ = ('_head', '_tail')

    def __init__(self, head, tail):
        object.__setattr__(self, '_head', delay(head))
        object.__setattr__(self, '_tail', delay(tail))

    @staticmethod
    def is_empty():
        return False

    def head(self):
        return self._head.force()

    def tail(self):
        return self._tail.force()

    def head_option(self):
        return Some(self.head())

    def take(self, n):
        _check_count(n)
        if n == 0:
            return empty()
        if n == 1:
            return Cons(self._head, Thunk.of(empty()))
        tail = self._tail
        return Cons(self._head, lambda: tail.force().take(n - 1))

    def take_while(self, pred):
        if not pred(self.head()):
            return empty()
        tail = self._tail
        return Cons(self._head, lambda: tail.force().take_while(pred))

    def fold_right(self, z, func):
        """Fold from the right without forcing more than `func` asks for.

        `func(a, rest)` gets the head and a Thunk of the fold over the tail.
        `z` is the result for the end of the stream; if it is a Thunk it is
        forced only when the end is reached.
        """
        tail = self._tail
        return func(self.head(), Thunk(lambda: tail.force().fold_right(z, func)))

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __repr__(self):
        items = []
        stream = self
        while not stream.is_empty():
            if len(items) == REPR_LIMIT:
                items.append('...')
                break
            items.append(repr(stream._head.force()) if stream._head.is_forced() else '?')
            if not stream._tail.is_forced():
                items.append('...')
                break
            stream = stream._tail.force()
        return 'Stream({})'.format(', '.join(items))


def _iterate(stream):
    while not stream.is_empty():
        yield stream.head()
        stream = stream.tail()


def _rest(stream):
    if stream.is_empty():
        return Thunk.of(stream)
    return stream._tail


def _check_count(n):
    if n < 0:
        raise ValueError('count must not be negative: {}'.format(n))


def empty():
    return Empty()


def cons(head, tail):
    return Cons(head, tail)


def from_values(*values):
    stream = empty()
    for value in reversed(values):
        stream = Cons(Thunk.of(value), Thunk.of(stream))
    return stream


def unfold(seed, step):
    """Generate a stream from a seed.

    `step(seed)` returns Nothing to end the stream, or Some((value, next_seed)).
    The step for the next seed runs only when the tail is forced.
    """
    option = step(seed)
    if option.is_empty():
        return empty()
    value, next_seed = option.get()
    return Cons(Thunk.of(value), lambda: unfold(next_seed, step))


def constant(value):
    # a single cell whose tail is itself
    def tail():
        return stream

    stream = Cons(Thunk.of(value), tail)
    return stream


def ones():
    return constant(1)


def from_(n):
    return Cons(Thunk.of(n), lambda: from_(n + 1))


def fibs():
    def go(a, b):
        return Cons(Thunk.of(a), lambda: go(b, a + b))

    return go(0, 1)


def constant_via_unfold(value):
    return unfold(value, lambda v: Some((v, v)))


def ones_via_unfold():
    return unfold(1, lambda v: Some((v, v)))


def from_via_unfold(n):
    return unfold(n, lambda i: Some((i, i + 1)))


def fibs_via_unfold():
    return unfold((0, 1), lambda pair: Some((pair[0], (pair[1], pair[0] + pair[1]))))
