"""Exact two-level minimization.

Generate all primes by iterated consensus,
then select a minimum cover with `mincov`.
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import logging
import time

import humanize

from espresso.twolevel import cube as _cube
from espresso.twolevel import mincov
from espresso.twolevel import unate


log = logging.getLogger(__name__)


def all_primes(cubes, shape):
    """Return all prime implicants of the union of `cubes`.

    Iterate consensus until no new cube appears that
    is not contained in an existing one. For cubes with
    intersecting inputs, the consensus on the output
    field (union of outputs) is also formed.

    @rtype: `list`
    """
    t0 = time.time()
    primes = _cube.scc([
        c for c in cubes if not _cube.is_empty(c, shape)])
    pairs = _pairs(range(len(primes)), range(len(primes)))
    while True:
        new = list()
        for i, j in pairs:
            for x in _consensus_all(primes[i], primes[j], shape):
                if any(_cube.covers(p, x) for p in primes):
                    continue
                if any(_cube.covers(p, x) for p in new):
                    continue
                new.append(x)
        if not new:
            break
        n = len(primes)
        primes = _cube.scc(primes + new)
        # only pairs with a new cube can yield new consensus
        old = [k for k, p in enumerate(primes) if p not in new]
        fresh = [k for k, p in enumerate(primes) if p in new]
        pairs = _pairs(old, fresh) + _pairs(fresh, fresh)
        log.debug('primes: {n} -> {m}'.format(n=n, m=len(primes)))
    t1 = time.time()
    log.info('{n} primes, took {dt}'.format(
        n=humanize.intcomma(len(primes)),
        dt=humanize.naturaldelta(t1 - t0)))
    return primes


def _pairs(a, b):
    a = list(a)
    b = list(b)
    if a == b:
        return [(x, y) for i, x in enumerate(a) for y in a[i + 1:]]
    return [(x, y) for x in a for y in b if x != y]


def _consensus_all(a, b, shape):
    """Yield consensus cubes of `a` and `b` that lie in neither."""
    x = _cube.consensus(a, b, shape)
    if x is None:
        return
    if not _cube.is_empty(x, shape):
        if not _cube.covers(a, x) and not _cube.covers(b, x):
            yield x
    # at distance 0, also union the output fields
    if shape.nout and _cube.distance(a, b, shape) == 0:
        y = (a & b & shape.inmask) | ((a | b) & shape.outmask)
        if not _cube.covers(a, y) and not _cube.covers(b, y):
            yield y


def minimize_exact(f, d, shape, config):
    """Return minimum cover of `f` using primes of `f | d`.

    The cover has the fewest cubes, and among those,
    the fewest input literals.
    """
    log.info('---- exact minimization ----')
    f = [c for c in f if not _cube.is_empty(c, shape)]
    d = [c for c in d if not _cube.is_empty(c, shape)]
    if not f:
        return list()
    primes = all_primes(f + d, shape)
    # primes inside the don't care set are never needed
    primes = [
        p for p in primes
        if not unate.cube_is_covered(p, d, shape)]
    selectable = list(enumerate(primes))
    rows = set()
    for c in f:
        rows.update(unate.covering_rows(c, d, selectable, shape))
    literals = [_cube.input_literals(p, shape) for p in primes]
    big = 1 + sum(literals)
    weights = [big + n for n in literals]
    chosen = mincov.mincov(rows, weights)
    r = [primes[i] for i in sorted(chosen)]
    if config.debug:
        log.debug('exact cover:\n{s}'.format(
            s=_cube.format_cubes(r, shape)))
    log.info('==== exact minimization ====')
    return r
