import logging
from collections import Counter

from api import make_seeded_rng, run
from candy import Input, Machine, simulate_machine
from rng import roll_die, double
from state import sequence

logger = logging.getLogger(__name__)


def roll_dice(count):
    return sequence([roll_die] * count)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(name)s: %(message)s')

    rng = make_seeded_rng(42)
    rolls, rng = run(roll_dice(600), rng)
    logger.info('600 rolls: %s', sorted(Counter(rolls).items()))

    d, rng = run(double, rng)
    logger.info('a double in [0, 1): %f', d)

    inputs = [Input.COIN, Input.TURN] * 4
    (coins, candies), machine = run(simulate_machine(inputs), Machine(locked=True, candies=5, coins=10))
    logger.info('machine after %d inputs: %d coins, %d candies (%s)', len(inputs), coins, candies, machine)
