from candy import Input, Machine, simulate_machine, update
from state import run


def test_coin_unlocks_locked_machine():
    machine = update(Input.COIN, Machine(locked=True, candies=1, coins=0))
    assert machine == Machine(locked=False, candies=1, coins=1)


def test_turn_dispenses_from_unlocked_machine():
    machine = update(Input.TURN, Machine(locked=False, candies=1, coins=1))
    assert machine == Machine(locked=True, candies=0, coins=1)


def test_turn_on_locked_machine_does_nothing():
    machine = Machine(locked=True, candies=3, coins=2)
    assert update(Input.TURN, machine) == machine


def test_coin_into_unlocked_machine_does_nothing():
    machine = Machine(locked=False, candies=3, coins=2)
    assert update(Input.COIN, machine) == machine


def test_empty_machine_ignores_everything():
    machine = Machine(locked=True, candies=0, coins=4)
    assert update(Input.COIN, machine) == machine
    assert update(Input.TURN, machine) == machine


def test_simulate_machine():
    inputs = [Input.COIN, Input.TURN] * 4
    result, machine = run(simulate_machine(inputs), Machine(locked=True, candies=5, coins=10))
    assert result == (14, 1)
    assert machine == Machine(locked=True, candies=1, coins=14)


def test_simulate_machine_without_inputs():
    start = Machine(locked=True, candies=2, coins=0)
    assert run(simulate_machine([]), start) == ((0, 2), start)


def test_simulation_runs_out_of_candy():
    inputs = [Input.COIN, Input.TURN] * 3
    result, _ = run(simulate_machine(inputs), Machine(locked=True, candies=2, coins=0))
    assert result == (2, 0)
