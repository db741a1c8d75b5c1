from transducer.transduce import \
    arrayOf,    \
    concatOf,   \
    joinedWith, \
    makeReducer, \
    reduceWith, \
    runReduce,  \
    setOf,      \
    sumOf,      \
    transduce
from transducer.xform import Transducer, Filtering, Mapping, filtering, mapping, comp
from transducer.compose import compose
