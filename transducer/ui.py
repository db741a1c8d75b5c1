import logging
import math
import sys
from json import JSONEncoder

from docopt import docopt
from func_prototypes import typed, returned

from transducer.transduce import transduce, arrayOf, setOf, sumOf, joinedWith
from transducer.xform import Transducer, filtering, mapping, comp
from transducer.util import fmap, identity, pipeline, strip_blank, values_pbar

log = logging.getLogger(__name__)

json_encoder = JSONEncoder(ensure_ascii=False, allow_nan=False)
json_encode = lambda data: json_encoder.encode(data)

UI_USAGE = """
Transduce

Fold numbers through a chain of filters and maps in a single pass.
Values are read one per line from stdin when none are given.

Usage:
  transduce names
  transduce [--xf=<step>]... [--into=<reducer>] [--sep=<sep>] [--progress] [--verbose] [--] [<value>...]

Options:
  --xf=<step>       A step of the chain, filter:<name> or map:<name>.
  --into=<reducer>  How results are combined: list, set, sum or join [default: list].
  --sep=<sep>       Separator used by the join reducer [default: ,].
  --progress        Show a progress bar while values are consumed.
  --verbose         Log debug messages to stderr.
"""

def even(x):
    return x % 2 == 0

def odd(x):
    return x % 2 == 1

def positive(x):
    return x > 0

def negative(x):
    return x < 0

def nonzero(x):
    return x != 0

def double(x):
    return x * 2

def square(x):
    return x * x

def inc(x):
    return x + 1

def dec(x):
    return x - 1

def negate(x):
    return -x

def half(x):
    return x / 2

PREDICATES = {fn.__name__: fn for fn in [even, odd, positive, negative, nonzero]}
TRANSFORMS = {fn.__name__: fn for fn in [double, square, inc, dec, negate, abs, half]}
STEP_KINDS = {'filter': (filtering, PREDICATES), 'map': (mapping, TRANSFORMS)}

def sorted_set_encode(result):
    return json_encode(sorted(result))

# name -> (reducer builder taking the separator, seed builder, printr)
REDUCERS = {
    'list': (lambda sep: arrayOf, list, pipeline(json_encode, print)),
    'set': (lambda sep: setOf, set, pipeline(sorted_set_encode, print)),
    'sum': (lambda sep: sumOf, int, print),
    'join': (joinedWith, str, print),
}

@returned(Transducer)
@typed(str)
def parse_step(step):
    """Turns 'filter:even' or 'map:double' into the matching transducer."""
    kind, sep, name = step.partition(':')
    if not sep:
        raise ValueError("Step '%s' should look like filter:<name> or map:<name>" % step)
    if kind not in STEP_KINDS:
        raise ValueError("Unknown step kind '%s', expected one of %s" % (kind, ", ".join(sorted(STEP_KINDS))))
    (make, table) = STEP_KINDS[kind]
    if name not in table:
        raise ValueError("Unknown %s '%s', expected one of %s" % (kind, name, ", ".join(sorted(table))))
    return make(table[name])

@typed(str)
def parse_value(text):
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        raise ValueError("'%s' is not a number" % text)
    if not math.isfinite(value):
        raise ValueError("'%s' is not a finite number" % text)
    return value

def lookup_reducer(name):
    if name not in REDUCERS:
        raise ValueError("Unknown reducer '%s', expected one of %s" % (name, ", ".join(sorted(REDUCERS))))
    return REDUCERS[name]

def names_printr():
    print("filter:", " ".join(sorted(PREDICATES)))
    print("map:", " ".join(sorted(TRANSFORMS)))
    print("into:", " ".join(sorted(REDUCERS)))

def setup_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s - %(name)s - %(message)s",
        stream=sys.stderr)

def ui_main():
    result = transduce_ui(sys.argv[1:])
    exit(result)

def transduce_ui(argv, stdin=None):
    exitcode = 0
    args = docopt(UI_USAGE, argv)
    setup_logging(args['--verbose'])
    if args['names']:
        names_printr()
        return exitcode
    try:
        xform = comp(*map(parse_step, args['--xf']))
        (make_reducer, make_seed, printr) = lookup_reducer(args['--into'])
        if args['<value>']:
            raw_values = args['<value>']
        else:
            raw_values = strip_blank(stdin if stdin is not None else sys.stdin)
        progress = values_pbar('values') if args['--progress'] else identity
        values = pipeline(progress, fmap(parse_value))(raw_values)
        log.debug("steps %s into %s", args['--xf'], args['--into'])
        result = transduce(xform, make_reducer(args['--sep']), make_seed(), values)
        printr(result)
    except ValueError as e:
        print("error: %s" % e, file=sys.stderr)
        exitcode = 1
    return exitcode
