"""
Pseudo-random numbers as state actions.

A SimpleRNG is an immutable 48-bit linear congruential generator. Drawing a
number returns the number together with the next generator; the old
generator stays valid and always produces the same draw.
"""

import logging

from state import unit, map_, map2, flat_map, sequence

logger = logging.getLogger(__name__)

MULTIPLIER = 0x5DEECE66D
INCREMENT = 0xB
SEED_MASK = (1 << 48) - 1

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1


def to_int32(n):
    """Wrap an integer into the signed 32-bit range."""
    n &= 0xFFFFFFFF
    if n > INT_MAX:
        n -= 1 << 32
    return n


class SimpleRNG:
    __slots__ = ('seed',)

    def __init__(self, seed):
        object.__setattr__(self, 'seed', seed & SEED_MASK)

    def next_int(self):
        new_seed = (self.seed * MULTIPLIER + INCREMENT) & SEED_MASK
        return to_int32(new_seed >> 16), SimpleRNG(new_seed)

    def __eq__(self, other):
        return isinstance(other, SimpleRNG) and self.seed == other.seed

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((SimpleRNG, self.seed))

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __repr__(self):
        return 'SimpleRNG({})'.format(self.seed)


def make_seeded_rng(seed):
    return SimpleRNG(seed)


def int_(rng):
    return rng.next_int()


def non_negative_int(rng):
    n, next_rng = rng.next_int()
    if n == INT_MIN:
        return 0, next_rng
    if n < 0:
        return -(n + 1), next_rng
    return n, next_rng


def double_direct(rng):
    n, next_rng = non_negative_int(rng)
    return n / (INT_MAX + 1), next_rng


double = map_(non_negative_int, lambda n: n / (INT_MAX + 1))

non_negative_even = map_(non_negative_int, lambda n: n - n % 2)

int_double = map2(int_, double, lambda i, d: (i, d))

double_int = map_(int_double, lambda pair: (pair[1], pair[0]))

double3 = map_(sequence([double, double, double]), tuple)


def ints(count):
    if count < 0:
        raise ValueError('count must not be negative: {}'.format(count))
    return sequence([int_] * count)


def non_negative_less_than(n):
    """Uniform integer in [0, n).

    Draws that fall into the incomplete last block of size n below INT_MAX
    would favour small results, so they are rejected and redrawn.
    """
    if n <= 0:
        raise ValueError('upper bound must be positive: {}'.format(n))

    def accept_or_retry(i):
        mod = i % n
        if to_int32(i + (n - 1) - mod) >= 0:
            return unit(mod)
        logger.debug('rejected draw %d for bound %d', i, n)
        return non_negative_less_than(n)

    return flat_map(non_negative_int, accept_or_retry)


roll_die = map_(non_negative_less_than(6), lambda n: n + 1)
