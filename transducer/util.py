import tqdm

def identity(x):
    return x

def fmap(func):
    def mapped(collection):
        return map(func, collection)
    mapped.__name__ = "mapped_" + func.__name__
    return mapped

def pipeline(*funcs):
    if funcs:
        foo = funcs[0]
        rest = funcs[1:]
        if rest:
            next_hop = pipeline(*rest)
            def pipe(*args, **kwargs):
                return next_hop(foo(*args, **kwargs))
            return pipe
        else:  # no rest, foo is final function.
            return foo
    else:  # no funcs at all.
        return fmap(identity)

def strip_blank(lines):
    """Drops surrounding whitespace and skips empty lines."""
    for line in lines:
        line = line.strip()
        if line:
            yield line

def values_pbar(label='', quiet=False):
    """Passes values through unchanged while ticking a progress bar on stderr."""
    def _values_pbar(values):
        with tqdm.tqdm(values, desc=label, disable=quiet, leave=False, delay=1) as pbar:
            for value in pbar:
                yield value
    return _values_pbar
