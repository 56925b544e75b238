"""Reduction of cubes to the smallest cubes needed."""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import logging

from espresso.twolevel import complement as _compl
from espresso.twolevel import cube as _cube
from espresso.twolevel import unate


log = logging.getLogger(__name__)


def reduce(f, d, shape, config, rng=None):
    """Return cover where each cube of `f` is maximally reduced.

    Cubes are reduced one after the other, so each
    reduction sees the already reduced cubes.
    Cubes that become empty are removed.

    @param rng: `random.Random`, used if
        `config.use_random_order`
    @rtype: `list`
    """
    if config.debug:
        log.debug('---- reduce ----')
    f = list(f)
    d = list(d)
    order = sorted(
        range(len(f)),
        key=lambda i: (- _cube.size(f[i]), i))
    if config.use_random_order and rng is not None:
        rng.shuffle(order)
    for i in order:
        c = f[i]
        others = [x for k, x in enumerate(f) if k != i and x is not None]
        f[i] = reduce_cube(c, others + d, shape)
        if config.verbose_debug:
            log.debug('reduced {a} to {b}'.format(
                a=_cube.cube_to_str(c, shape),
                b=(_cube.cube_to_str(f[i], shape)
                   if f[i] is not None else 'nothing')))
    r = [c for c in f if c is not None]
    if config.debug:
        log.debug('reduce: {n} cubes remain of {m}'.format(
            n=len(r), m=len(f)))
        log.debug('==== reduce ====')
    return r


def reduce_cube(c, others, shape):
    """Return smallest cube in `c` that contains `c` minus `others`.

    @return: cube, or `None` if `others` contain `c`
    """
    inmask = shape.inmask
    cin = c & inmask
    lift = inmask & ~ cin
    inputs = 0
    outputs = 0
    for j in shape.outputs(c):
        bit = shape.output_bit(j)
        rows = [
            (x & inmask) | lift for x in others
            if x & bit and _cube.inputs_intersect(x, cin, shape)]
        if unate.input_tautology(rows, shape):
            continue
        uncovered = _compl.complement_inputs(rows, shape)
        assert uncovered, (c, j)
        outputs |= bit
        inputs |= _cube.supercube(uncovered)
    if not outputs:
        return None
    return (cin & inputs) | outputs
