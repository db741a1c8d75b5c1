"""
Function composition in pipeline order: compose(f, g)(x) == g(f(x)).
"""
from functools import reduce


def _comp_2(a, b):
    def _combined2(*args, **kwargs):
        return b(a(*args, **kwargs))

    return _combined2


def compose(*fns):
    if not fns:
        raise TypeError("Composition of 0 functions is not supported.")
    for fn in fns:
        if not callable(fn):
            raise TypeError("Can't compose %s" % type(fn))
    return reduce(_comp_2, fns)
