"""Essential primes, last gasp, and sparse outputs."""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import logging

from espresso.twolevel import cube as _cube
from espresso.twolevel import expand as _expand
from espresso.twolevel import irredundant as _irr
from espresso.twolevel import reduce as _reduce
from espresso.twolevel import unate


log = logging.getLogger(__name__)


def essentials(f, d, shape):
    """Return essential primes of `f` and the other cubes.

    A prime `c` is not essential iff the consensus of `c`
    with the other cubes of `f` and with `d` contains `c`.
    The cubes of `f` are assumed to be prime.

    @rtype: `tuple(list, list)`
    """
    log.debug('---- essentials ----')
    f = list(f)
    d = list(d)
    ess = list()
    rest = list()
    for i, c in enumerate(f):
        others = f[:i] + f[i + 1:] + d
        cons = list()
        for g in others:
            x = _cube.consensus(c, g, shape)
            if x is not None and not _cube.is_empty(x, shape):
                cons.append(x)
        if unate.cube_is_covered(c, cons, shape):
            rest.append(c)
        else:
            ess.append(c)
    log.debug('{n} essential primes'.format(n=len(ess)))
    log.debug('==== essentials ====')
    return ess, rest


def last_gasp(f, d, r, shape, config, rng=None):
    """Return cover found by reducing all cubes at once.

    Each cube is reduced against the rest of the
    original cover. The reduced cubes are expanded,
    and those primes that cover at least two reduced
    cubes are added to `f` before an irredundant pass.
    """
    return _gasp(f, d, r, shape, config, rng, superset=False)


def super_gasp(f, d, r, shape, config, rng=None):
    """Like `last_gasp`, but add every new prime and expand again."""
    return _gasp(f, d, r, shape, config, rng, superset=True)


def _gasp(f, d, r, shape, config, rng, superset):
    log.debug('---- gasp ----')
    f = list(f)
    reduced = list()
    for i, c in enumerate(f):
        others = f[:i] + f[i + 1:] + d
        x = _reduce.reduce_cube(c, others, shape)
        if x is not None:
            reduced.append(x)
    density = _expand.column_density(reduced, shape)
    new = list()
    for i, c in enumerate(reduced):
        covered = [False] * len(reduced)
        covered[i] = True
        p = _expand.expand_cube(
            c, reduced, covered, r, density, shape, config)
        n = sum(1 for x in reduced if _cube.covers(p, x))
        if p in f or p in new:
            continue
        if superset or n > 1:
            new.append(p)
    log.debug('gasp found {n} new primes'.format(n=len(new)))
    if not new:
        log.debug('==== gasp ====')
        return f
    g = _irr.irredundant(f + new, d, shape, config)
    if superset:
        g = _expand.expand(g, r, shape, config, rng)
        g = _irr.irredundant(g, d, shape, config)
    log.debug('==== gasp ====')
    return g


def make_sparse(f, d, r, shape, config):
    """Return cover with fewer output bits and larger input parts.

    Alternate removal of redundant output bits with
    expansion of input parts only, until neither
    lowers the cost.
    """
    log.debug('---- make sparse ----')
    f = list(f)
    while True:
        old = _literal_total(f, shape)
        f = reduce_outputs(f, d, shape)
        if _literal_total(f, shape) == old:
            break
        f = _expand.expand(sorted(f), r, shape, config, nonsparse=True)
        if _literal_total(f, shape) == old:
            break
    log.debug('==== make sparse ====')
    return f


def reduce_outputs(f, d, shape):
    """Clear each output bit that the other cubes cover.

    Cubes are visited in increasing order of their
    encoding, so the result depends only on the set
    of cubes. Cubes left without outputs are removed.
    """
    f = list(f)
    inmask = shape.inmask
    order = sorted(range(len(f)), key=lambda i: f[i])
    for i in order:
        for j in shape.outputs(f[i]):
            bit = shape.output_bit(j)
            others = [
                x for k, x in enumerate(f)
                if k != i and x is not None] + d
            part = (f[i] & inmask) | bit
            if not unate.cube_is_covered(part, others, shape):
                continue
            f[i] &= ~ bit
            if not f[i] & shape.outmask:
                f[i] = None
                break
    return [c for c in f if c is not None]


def _literal_total(f, shape):
    return sum(
        _cube.input_literals(c, shape) +
        _cube.output_count(c, shape)
        for c in f)
