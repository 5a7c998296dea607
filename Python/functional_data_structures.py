class Singleton:
    """Class with a single instance"""

    def __new__(cls):
        obj = object.__new__(cls)
        cls.__new__ = lambda _: obj
        return obj


class Option:
    """An optional value: either Nothing or Some(value).

    Both variants are immutable. Only presence or absence is significant;
    `None` is a perfectly good payload for Some.
    """

    __slots__ = ()

    @staticmethod
    def from_nullable(value):
        if value is None:
            return Nothing()
        return Some(value)

    def get_or_else(self, default):
        if self.is_empty():
            return default
        return self.get()

    def or_else(self, alternative):
        """Return self if it holds a value, else the Option produced by
        calling `alternative` without arguments."""
        if self.is_empty():
            return alternative()
        return self

    def filter(self, pred):
        if self.is_empty() or pred(self.get()):
            return self
        return Nothing()

    def __bool__(self):
        return not self.is_empty()


class Nothing(Singleton, Option):
    """The empty Option"""

    @staticmethod
    def is_empty():
        return True

    @staticmethod
    def get():
        raise ValueError('Nothing.get()')

    def map(self, _func):
        return self

    def flat_map(self, _func):
        return self

    @staticmethod
    def __iter__():
        return iter([])

    @staticmethod
    def __len__():
        return 0

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __repr__(self):
        return 'Nothing'


class Some(Option):
    """Option holding exactly one value."""

    __slots__ = ('_value',)

    def __init__(self, value):
        object.__setattr__(self, '_value', value)

    @staticmethod
    def is_empty():
        return False

    def get(self):
        return self._value

    def map(self, func):
        return Some(func(self._value))

    def flat_map(self, func):
        return func(self._value)

    def __iter__(self):
        yield self._value

    def __len__(self):
        return 1

    def __eq__(self, other):
        return isinstance(other, Some) and self._value == other._value

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((Some, self._value))

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __repr__(self):
        return 'Some({!r})'.format(self._value)
