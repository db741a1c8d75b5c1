import timeit
from functools import reduce
from tabulate import tabulate
from transducer.util import pipeline, fmap
from transducer.transduce import transduce, reduceWith, arrayOf, sumOf
from transducer.xform import comp, filtering, mapping
from transducer.compose import compose

def consume(collection):
    for _ in collection:
        pass

def isEven(n):
    return n % 2 == 0

def inc(x):
    return x + 1

def square(x):
    return x * x

def plus(x, y):
    return x + y

# args example: inc_square_loop, case_args=[hundredK]
# kwargs example number=1000
def performance_compare(*cases, case_args=[], timeit_kwargs={}):
    results = {}
    for case in cases:
        name = case.__name__
        def run(case=case):
            return case(*case_args)
        time = timeit.timeit(run, **timeit_kwargs)
        results[name] = time
    lowest = min([time for time in results.values()])
    table = [(name, time, "%.2f" % (time / lowest)) for (name, time) in results.items()]
    print(tabulate(table, headers=['case', 'time', 'scale']))

def sum_even_loop(ns):
    total = 0
    for n in ns:
        if isEven(n):
            total += n
    return total

def sum_even_filter(ns):
    return sum(filter(isEven, ns))

def sum_even_transduce(ns):
    return transduce(filtering(isEven), sumOf, 0, ns)

def inc_square_even_loop(nums):
    out = []
    for n in nums:
        if isEven(n):
            out.append(square(inc(n)))
    return out

def inc_square_even_passes(nums):
    return list(map(square, map(inc, filter(isEven, nums))))

def inc_square_even_pipeline(nums):
    return pipeline(fmap(inc), fmap(square), list)(filter(isEven, nums))

def inc_square_even_transduce(nums):
    return transduce(comp(filtering(isEven), mapping(inc), mapping(square)), arrayOf, [], nums)

def inc_square_even_compose(nums):
    return transduce(comp(filtering(isEven), mapping(compose(inc, square))), arrayOf, [], nums)

def reduce_functools(ns):
    return reduce(plus, ns, 0)

def reduce_with(ns):
    return reduceWith(plus, 0, ns)


hundredK = range(100000)

def test_sum_even():
    performance_compare(sum_even_loop,
                        sum_even_filter,
                        sum_even_transduce,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})

def test_chains():
    performance_compare(inc_square_even_loop,
                        inc_square_even_passes,
                        inc_square_even_pipeline,
                        inc_square_even_transduce,
                        inc_square_even_compose,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})

def test_reduce():
    performance_compare(reduce_functools,
                        reduce_with,
                        case_args=[range(10000)],
                        timeit_kwargs={'number': 1000})

def test_drain():
    performance_compare(pipeline(fmap(inc), consume),
                        case_args=[hundredK],
                        timeit_kwargs={'number': 100})
