from typing import TypeVar, Callable, Generic

from transducer.compose import compose
from transducer.util import identity

A = TypeVar("A")
T = TypeVar("T")
U = TypeVar("U")
Reducer = Callable[[A, T], A]


class Transducer(Generic[T, U]):
    """
    A reducer transformer built from a single control function.

    The subclass is the tag: it decides how fn is used when a reducer of U
    is wrapped into a reducer of T. Instances are callable, so they chain
    point free: t1(t2(t3(rf))).
    """

    def __init__(self, fn):
        if not callable(fn):
            raise TypeError("%s needs a callable, got %s" % (type(self).__name__, type(fn)))
        self.fn = fn

    @classmethod
    def of(cls, fn):
        return cls(fn)

    def apply(self, rf: Reducer[A, U]) -> Reducer[A, T]:
        raise NotImplementedError()

    def __call__(self, rf: Reducer[A, U]) -> Reducer[A, T]:
        return self.apply(rf)

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, getattr(self.fn, '__name__', self.fn))


class Mapping(Transducer[T, U]):

    def apply(self, rf: Reducer[A, U]) -> Reducer[A, T]:
        f = self.fn
        def mapped(acc, val):
            return rf(acc, f(val))
        return mapped


class Filtering(Transducer[T, T]):

    def apply(self, rf: Reducer[A, T]) -> Reducer[A, T]:
        pred = self.fn
        def filtered(acc, val):
            if pred(val):
                return rf(acc, val)
            return acc
        return filtered


def mapping(transform: Callable[[T], U], rf=None):
    """
    mapping(f) is the curried transducer, mapping(f, rf) the reducer it makes from rf.
    """
    xform = Mapping(transform)
    if rf is None:
        return xform
    return xform(rf)


def filtering(pred: Callable[[T], bool], rf=None):
    """
    pred is (a->Bool)
    rf is (b -> a -> b)
    filtering(pred) is the curried transducer, filtering(pred, rf) the reducer.
    """
    xform = Filtering(pred)
    if rf is None:
        return xform
    return xform(rf)


def comp(*xforms):
    """
    Combine transducers into one. Values visit xforms from left to right:
    comp(t1, t2, t3)(rf) == t1(t2(t3(rf)))
    """
    if not xforms:
        return identity
    return compose(*reversed(xforms))
