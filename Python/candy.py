"""
A candy dispenser driven by a list of inputs, modelled as a state action.

Rules:
 * inserting a coin into a locked machine unlocks it if there is candy left
 * turning the knob on an unlocked machine dispenses a candy and locks it
 * turning the knob on a locked machine, or inserting a coin into an
   unlocked one, does nothing
 * a machine that is out of candy ignores all inputs
"""

import enum
import logging
from collections import namedtuple

from state import flat_map, get, map_, modify, sequence

logger = logging.getLogger(__name__)


class Input(enum.Enum):
    COIN = 'coin'
    TURN = 'turn'


Machine = namedtuple('Machine', 'locked candies coins')


def update(inp, machine):
    if machine.candies == 0:
        logger.debug('%s ignored: out of candy', inp.name)
        return machine
    if inp is Input.COIN and machine.locked:
        return machine._replace(locked=False, coins=machine.coins + 1)
    if inp is Input.TURN and not machine.locked:
        return machine._replace(locked=True, candies=machine.candies - 1)
    logger.debug('%s ignored: machine is %s', inp.name, 'locked' if machine.locked else 'unlocked')
    return machine


def simulate_machine(inputs):
    """Action returning (coins, candies) after feeding all inputs."""
    steps = sequence(modify(lambda m, inp=inp: update(inp, m)) for inp in inputs)
    return flat_map(steps, lambda _: map_(get, lambda m: (m.coins, m.candies)))
