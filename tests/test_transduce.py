import pytest
from transducer.transduce import \
    arrayOf,     \
    concatOf,    \
    joinedWith,  \
    makeReducer, \
    reduceWith,  \
    runReduce,   \
    setOf,       \
    sumOf,       \
    transduce
from transducer.xform import filtering, mapping, comp

numbers = [1, 2, 10, 23, 238]
one2ten = list(range(1, 10 + 1))
isOdd = lambda x: x % 2 == 1
isEven = lambda x: x % 2 == 0
squares = mapping(lambda x: x * x)
doubled = lambda x: x * 2

def test_accumulators():
    assert concatOf([1, 2, 3], 4) == [1, 2, 3, 4]
    assert setOf(set([1, 2, 3]), 4) == set([1, 2, 3, 4])
    assert sumOf(3, 4) == 7

def test_concatOf_leaves_seed_alone():
    seed = [1]
    assert concatOf(seed, 2) == [1, 2]
    assert seed == [1]

def test_efficientAccumulator():
    seed = []
    assert reduceWith(arrayOf, seed, [1, 2, 3]) == [1, 2, 3]
    assert seed == [1, 2, 3]

def test_joinedWithReducer():
    assert reduceWith(joinedWith(', '), '', [1, 2, 3]) == "1, 2, 3"
    assert reduceWith(joinedWith(', '), '', []) == ''

def test_joinedWith_keeps_separator_after_empty_values():
    assert reduceWith(joinedWith(','), '', ['', 'a']) == ',a'
    assert reduceWith(joinedWith(','), '', ['a', '', '', 'b']) == 'a,,,b'
    assert reduceWith(joinedWith(','), '', ['', '']) == ','
    assert reduceWith(joinedWith(','), 'x', ['a']) == 'x,a'

def test_joinedWith_is_reusable():
    joint = joinedWith('-')
    assert reduceWith(joint, '', [1, 2]) == '1-2'
    assert reduceWith(joint, '', [3]) == '3'

def test_reduceWith():
    assert reduceWith(arrayOf, [], one2ten) == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    def bigUns(acc, val):
        if val > 5:
            acc.append(val)
        return acc
    assert reduceWith(bigUns, [], one2ten) == [6, 7, 8, 9, 10]
    assert reduceWith(squares(bigUns), [], one2ten) == [9, 16, 25, 36, 49, 64, 81, 100]

def test_runReduce_empty_returns_seed():
    seed = object()
    assert runReduce([], sumOf, seed) is seed

def test_runReduce_sum():
    assert runReduce(numbers, makeReducer(lambda acc, e: acc + e), 0) == 274

def test_makeReducer():
    def plus(acc, val):
        return acc + val
    reducer = makeReducer(plus)
    assert reducer(1, 2) == 3
    assert reducer.__name__ == "reducer_plus"

def test_makeReducer_rejects_non_callable():
    with pytest.raises(TypeError):
        makeReducer([])

def test_fold_as_copy():
    copy = runReduce(numbers, makeReducer(concatOf), [])
    assert copy == numbers
    assert copy is not numbers

def test_filter_emulation():
    assert runReduce(numbers, filtering(isEven)(makeReducer(concatOf)), []) == [2, 10, 238]

def test_map_emulation():
    assert runReduce(numbers, mapping(doubled)(makeReducer(concatOf)), []) == [2, 4, 20, 46, 476]

def test_reduceWithMap():
    incrementValue = mapping(lambda x: x + 1)
    assert reduceWith(incrementValue(arrayOf), [], [1, 2, 3]) == [2, 3, 4]
    assert reduceWith(incrementValue(joinedWith('.')), '', [1, 2, 3]) == "2.3.4"
    assert reduceWith(incrementValue(sumOf), 0, [1, 2, 3]) == 9
    assert reduceWith(squares(sumOf), 0, one2ten) == 385

def test_reduceWithAsAggregator():
    assert reduceWith(filtering(lambda x: x > 5)(squares(arrayOf)), [], one2ten) == [36, 49, 64, 81, 100]
    assert reduceWith(filtering(isOdd)(arrayOf), [], one2ten) == [1, 3, 5, 7, 9]
    assert reduceWith(filtering(isOdd)(squares(sumOf)), 0, one2ten) == 165

def test_non_sequence_accumulators():
    xform = comp(filtering(isEven), mapping(doubled))
    assert runReduce(numbers, xform(sumOf), 0) == 4 + 20 + 476
    assert runReduce([2, 2, 4], xform(setOf), set()) == set([4, 8])
    assert runReduce(numbers, xform(joinedWith('-')), '') == "4-20-476"

squaresOfTheOddNumbers = comp(filtering(isOdd), squares)

def test_transduce():
    assert transduce(squaresOfTheOddNumbers, sumOf, 0, one2ten) == 165
    assert transduce(squaresOfTheOddNumbers, arrayOf, [], one2ten) == [1, 9, 25, 49, 81]

def test_transduce_consumes_iterators_once():
    assert transduce(squaresOfTheOddNumbers, arrayOf, [], iter(one2ten)) == [1, 9, 25, 49, 81]

def test_transduce_matches_separate_passes():
    expected = reduceWith(concatOf, [], map(doubled, filter(isEven, numbers)))
    xform = comp(filtering(isEven), mapping(doubled))
    assert transduce(xform, concatOf, [], numbers) == expected == [4, 20, 476]

def test_errors_propagate_from_combine():
    def broken(acc, val):
        if val == 10:
            raise RuntimeError("boom")
        return acc + [val]
    with pytest.raises(RuntimeError, match="boom"):
        runReduce(numbers, makeReducer(broken), [])

def test_input_not_mutated():
    before = list(numbers)
    runReduce(numbers, makeReducer(concatOf), [])
    transduce(comp(filtering(isEven), mapping(doubled)), arrayOf, [], numbers)
    assert numbers == before
