import logging

import sympy as sy

from api import from_thunks, run_stream
from functional_data_structures import Some
from stream import from_, unfold

logger = logging.getLogger(__name__)


def primes():
    return unfold(2, lambda p: Some((p, sy.nextprime(p))))


def sieve(stream):
    prime = stream.head()
    rest = stream.tail()
    return from_thunks(lambda: prime, lambda: sieve(rest.filter(lambda n: n % prime != 0)))


def twin_primes():
    ps = primes()
    pairs = ps.zip_with(ps.drop(1), lambda a, b: (a, b))
    return pairs.filter(lambda pair: pair[1] - pair[0] == 2)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(name)s: %(message)s')

    first = run_stream(primes(), 15)
    logger.info('first primes: %s', first)
    logger.info('sieve agrees: %s', run_stream(sieve(from_(2)), 15) == first)
    logger.info('twin primes: %s', run_stream(twin_primes(), 8))
    logger.info('first prime above 10**6: %s', primes().find(lambda p: p > 10 ** 6).get())
