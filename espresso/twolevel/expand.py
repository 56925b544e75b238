"""Expansion of cubes to prime implicants."""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import logging

from espresso.twolevel import cube as _cube


log = logging.getLogger(__name__)


def expand(f, r, shape, config, rng=None, nonsparse=False):
    """Return primes that cover `f` and are disjoint from `r`.

    Cubes are expanded from largest to smallest
    (shuffled if `config.use_random_order`).
    A cube that lies inside an expanded cube is
    not expanded itself.

    @param f: ON-set cubes
    @param r: OFF-set cubes
    @param nonsparse: raise only input parts
    @type config: `EspressoConfig`
    @param rng: `random.Random`, used if
        `config.use_random_order`
    @rtype: `list`
    """
    if config.debug:
        log.debug('---- expand ----')
    f = list(f)
    density = column_density(f, shape)
    order = _expansion_order(f, config, rng)
    covered = [False] * len(f)
    primes = list()
    for i in order:
        if covered[i]:
            continue
        c = expand_cube(
            f[i], f, covered, r, density,
            shape, config, nonsparse)
        covered[i] = True
        for k, d in enumerate(f):
            if not covered[k] and _cube.covers(c, d):
                covered[k] = True
        primes.append(c)
        if config.verbose_debug:
            log.debug('expanded {a} to {b}'.format(
                a=_cube.cube_to_str(f[i], shape),
                b=_cube.cube_to_str(c, shape)))
    primes = _cube.scc(primes)
    if config.debug:
        log.debug('expand: {n} cubes to {m} primes'.format(
            n=len(f), m=len(primes)))
        log.debug('==== expand ====')
    return primes


def _expansion_order(f, config, rng):
    order = sorted(
        range(len(f)),
        key=lambda i: (- _cube.size(f[i]), i))
    if config.use_random_order and rng is not None:
        rng.shuffle(order)
    return order


def column_density(cubes, shape):
    """Return number of cubes that have each bit set."""
    counts = [0] * (shape.offset + shape.nout)
    for c in cubes:
        while c:
            b = c & - c
            counts[b.bit_length() - 1] += 1
            c ^= b
    return counts


def expand_cube(c, f, covered, r, density, shape,
                config, nonsparse=False):
    """Return prime that contains `c` and is disjoint from `r`.

    First raise `c` to contain as many cubes of `f`
    as possible (a single such raise if
    `config.single_expand`). Then raise the
    remaining parts one at a time, densest first.
    """
    free = shape.full & ~ c
    if nonsparse:
        free &= shape.inmask
    free = _lower(c, free, r, shape)
    raises = 0
    while free:
        if not (config.single_expand and raises):
            d = _best_covering_raise(
                c, free, f, covered, r, density, shape)
            if d is not None:
                c = d
                raises += 1
                free = _lower(c, free & ~ c, r, shape)
                continue
        bit = _densest(free, density)
        free &= ~ bit
        if is_disjoint_from(c | bit, r, shape):
            c |= bit
            free = _lower(c, free, r, shape)
    return c


def is_disjoint_from(c, cubes, shape):
    """Return `True` if `c` intersects none of `cubes`."""
    return all(
        _cube.is_empty(c & x, shape)
        for x in cubes)


def _lower(c, free, r, shape):
    """Remove from `free` the parts that cannot be raised.

    If `c` conflicts with an OFF-set cube in a single
    field, then raising `c` in the part of that field
    where the OFF-set cube lies would intersect it.
    """
    for x in r:
        if not free:
            break
        y = c & x
        blocking = None
        for field in shape.fields:
            if y & field:
                continue
            if blocking is not None:
                blocking = None
                break
            blocking = field
        else:
            if blocking is not None:
                free &= ~ (x & blocking)
    return free


def _best_covering_raise(c, free, f, covered, r, density, shape):
    """Return `c` raised to contain most cubes of `f`, or `None`.

    Candidates are the supercubes of `c` and each
    uncovered cube of `f` that need only `free`
    parts and avoid `r`. Ties are broken by
    larger column density, then by position in `f`.
    """
    best = None
    best_key = None
    for k, d in enumerate(f):
        if covered[k] or _cube.covers(c, d):
            continue
        need = d & ~ c
        if need & ~ free:
            continue
        x = c | d
        if not is_disjoint_from(x, r, shape):
            continue
        n = sum(
            1 for m, e in enumerate(f)
            if not covered[m] and _cube.covers(x, e))
        key = (n, _weight(need, density))
        if best_key is None or key > best_key:
            best = x
            best_key = key
    return best


def _weight(bits, density):
    total = 0
    while bits:
        b = bits & - bits
        total += density[b.bit_length() - 1]
        bits ^= b
    return total


def _densest(bits, density):
    """Return single bit from `bits` with largest density.

    Ties are broken by lowest position.
    """
    best = None
    most = -1
    while bits:
        b = bits & - bits
        n = density[b.bit_length() - 1]
        if n > most:
            best = b
            most = n
        bits ^= b
    return best
