from rng import make_seeded_rng
from state import run, unit
from stream import Cons, empty, from_values, unfold

empty_stream = empty


def from_thunks(head, tail):
    """Stream cell from a head and a tail, each a Thunk or a zero-argument
    callable. Neither is evaluated here."""
    return Cons(head, tail)


def take(n, stream):
    """Iterate over at most the first n elements of stream."""
    if n < 0:
        raise ValueError('count must not be negative: {}'.format(n))
    return (item for _, item in zip(range(n), stream))


def run_stream(stream, n=None):
    if n is None:
        return stream.to_list()
    return list(take(n, stream))


__all__ = ['empty_stream', 'from_thunks', 'from_values', 'unfold',
           'unit', 'make_seeded_rng', 'run', 'take', 'run_stream']
