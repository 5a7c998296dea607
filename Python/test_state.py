from state import (run, unit, map_, map2, flat_map, map_via_flat_map,
                   map2_via_flat_map, both, sequence, traverse, get, set_, modify)


def tick(s):
    return s, s + 1


def double_state(s):
    return 'doubled', s * 2


def test_unit_leaves_state_unchanged():
    assert run(unit('a'), 5) == ('a', 5)


def test_unit_has_a_docstring():
    assert unit.__doc__.startswith("produce an action that")


def test_map_transforms_value_only():
    assert run(map_(tick, lambda v: v * 100), 3) == (300, 4)


def test_map2_threads_state_left_to_right():
    action = map2(tick, double_state, lambda a, b: (a, b))
    assert run(action, 3) == ((3, 'doubled'), 8)


def test_map2_runs_second_action_on_intermediate_state():
    action = map2(double_state, tick, lambda a, b: b)
    assert run(action, 3) == (6, 7)


def test_flat_map_chooses_next_action_from_result():
    action = flat_map(tick, lambda v: unit('even') if v % 2 == 0 else tick)
    assert run(action, 2) == ('even', 3)
    assert run(action, 3) == (4, 5)


def test_map_via_flat_map_agrees_with_map():
    f = lambda v: -v
    for s in range(5):
        assert run(map_via_flat_map(tick, f), s) == run(map_(tick, f), s)


def test_map2_via_flat_map_agrees_with_map2():
    f = lambda a, b: (a, b)
    for first, second in [(tick, double_state), (double_state, tick), (tick, tick)]:
        assert run(map2_via_flat_map(first, second, f), 7) == run(map2(first, second, f), 7)


def test_both():
    assert run(both(tick, tick), 0) == ((0, 1), 2)


def test_sequence_preserves_order_and_threads_state():
    results, final = run(sequence([tick, double_state, tick]), 1)
    assert results == [1, 'doubled', 4]
    assert final == 5


def test_sequence_matches_running_by_hand():
    a1, s1 = tick(10)
    a2, s2 = double_state(s1)
    a3, s3 = tick(s2)
    assert run(sequence([tick, double_state, tick]), 10) == ([a1, a2, a3], s3)


def test_sequence_of_nothing():
    assert run(sequence([]), 'state') == ([], 'state')


def test_sequence_is_stack_safe():
    results, final = run(sequence([tick] * 50000), 0)
    assert results == list(range(50000))
    assert final == 50000


def test_sequence_accepts_a_generator():
    assert run(sequence(unit(i) for i in range(3)), None) == ([0, 1, 2], None)


def test_sequence_action_can_be_rerun():
    action = sequence([tick, tick])
    assert run(action, 0) == run(action, 0) == ([0, 1], 2)


def test_traverse():
    add = lambda n: lambda s: (s + n, s + n)
    assert run(traverse([1, 2, 3], add), 0) == ([1, 3, 6], 6)


def test_get_set_modify():
    assert run(get, 4) == (4, 4)
    assert run(set_(9), 4) == (None, 9)
    assert run(modify(lambda s: s * 3), 4) == (None, 12)


def test_actions_never_mutate_their_input():
    state = [1, 2]
    action = modify(lambda s: s + [3])
    _, new_state = run(action, state)
    assert state == [1, 2]
    assert new_state == [1, 2, 3]
