"""
Reductions and the reducers that sit at the end of a transducer chain.

reducer is (b -> a -> b)
seed is b
iterable is [a]
"""
import logging

log = logging.getLogger(__name__)

def reduceWith(reducer, seed, iterable):
    """
    reduceWith takes reducer as first argument, computes a reduction over iterable.
    Think foldl from Haskell.
    reduceWith is (b -> a -> b) -> b -> [a] -> b
    """
    accumulation = seed
    for value in iterable:
        accumulation = reducer(accumulation, value)
    return accumulation

def runReduce(sequence, reducer, seed):
    """
    Folds sequence left to right with reducer, starting from seed.
    An empty sequence returns seed untouched.
    """
    return reduceWith(reducer, seed, sequence)

def makeReducer(combine):
    """Names combine as the base reducer of a chain."""
    if not callable(combine):
        raise TypeError("Can't make a reducer from %s" % type(combine))
    def reducer(acc, val):
        return combine(acc, val)
    reducer.__name__ = "reducer_" + getattr(combine, '__name__', 'combine')
    return reducer

concatOf = lambda acc, val: acc + [val]
concatOf.__doc__ = \
"""
Append which builds a new list on every step, the seed is never mutated.
"""

arrayOf = lambda acc, val: acc.append(val) or acc
arrayOf.__doc__ = \
"""
Optimized version of array accumulator which doesn't reallocate on every loop
iteration.
"""

sumOf = lambda acc, val: acc + val
sumOf.__doc__ = """Reducer which computes a sum"""

setOf = lambda acc, val: acc.add(val) or acc
setOf.__doc__ = """Reducer which collects distinct values into a set seed"""

class _Joined(str):
    """A string accumulator which already holds at least one element."""

def joinedWith(seperator):
    def joint(acc, val):
        if acc == '' and not isinstance(acc, _Joined):
            return _Joined(val)
        else:
            return _Joined("%s%s%s" % (acc, seperator, val))
    joint.__name__ = "joinedWith"
    return joint

def transduce(transformer, reducer, seed, iterable):
    """
    transformer is ((b -> a -> b) -> (b -> c -> b))
    reducer is (b -> a -> b)
    seed is b
    iterable is [c]
    """
    transformedReducer = transformer(reducer)
    log.debug("transduce %s into %s",
              getattr(transformer, '__name__', type(transformer).__name__),
              getattr(reducer, '__name__', type(reducer).__name__))
    return reduceWith(transformedReducer, seed, iterable)
