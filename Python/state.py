"""
A state action is a function of the form action(s) -> (value, next_s).

Actions never modify the state they are given; they return a new one.
The combinators below build new actions out of existing ones and pass the
state from one action to the next, left to right.
"""


def make_action(func):
    """Decorator that turns a function of the form f(s, ...) into
    an action-creating function.

    For example:
        @make_action
        def add(s, n):
            ...

    is equivalent to
        def add(n):
            def action(s):
                ...
            return action
    """

    def wrap(*args, **kwargs):
        def action(s):
            return func(s, *args, **kwargs)

        return action

    if func.__doc__ is not None:
        wrap.__doc__ = "produce an action that " + func.__doc__
    return wrap


def run(action, s):
    return action(s)


@make_action
def unit(s, a):
    """returns `a` and leaves the state unchanged"""
    return a, s


def map_(action, func):
    def mapped(s):
        a, s1 = action(s)
        return func(a), s1

    return mapped


def map2(action_a, action_b, func):
    def mapped(s):
        a, s1 = action_a(s)
        b, s2 = action_b(s1)
        return func(a, b), s2

    return mapped


def flat_map(action, func):
    def bound(s):
        a, s1 = action(s)
        return func(a)(s1)

    return bound


def map_via_flat_map(action, func):
    return flat_map(action, lambda a: unit(func(a)))


def map2_via_flat_map(action_a, action_b, func):
    return flat_map(action_a, lambda a: map_via_flat_map(action_b, lambda b: func(a, b)))


def both(action_a, action_b):
    return map2(action_a, action_b, lambda a, b: (a, b))


def sequence(actions):
    """Combine actions into one action returning the list of their results.

    Each action runs on the state left behind by the one before it.
    """
    actions = list(actions)

    def sequenced(s):
        results = []
        for action in actions:
            a, s = action(s)
            results.append(a)
        return results, s

    return sequenced


def traverse(items, func):
    return sequence(func(item) for item in items)


def get(s):
    return s, s


@make_action
def set_(_s, new_state):
    """replaces the state"""
    return None, new_state


@make_action
def modify(s, func):
    """replaces the state s by func(s)"""
    return None, func(s)
