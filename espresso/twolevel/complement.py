"""Complement of a cover by unate recursive splitting."""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import logging

from espresso.twolevel import cube as _cube
from espresso.twolevel import unate


log = logging.getLogger(__name__)
_SPLIT = 'split'
_MERGE = 'merge'


def complement(cubes, shape):
    """Return cover of the minterms that `cubes` do not contain.

    Each output is complemented separately.
    Cubes of different outputs with equal
    input parts are then merged.

    @param cubes: `list` of cubes
    @type shape: `Shape`
    @rtype: `list`
    """
    log.debug('---- complement ----')
    inmask = shape.inmask
    merged = dict()
    for j in range(shape.nout):
        bit = shape.output_bit(j)
        rows = [c & inmask for c in cubes if c & bit]
        for r in complement_inputs(rows, shape):
            merged[r] = merged.get(r, 0) | bit
    r = _cube.scc([c | out for c, out in merged.items()])
    log.debug('complement has {n} cubes'.format(n=len(r)))
    log.debug('==== complement ====')
    return r


def complement_inputs(rows, shape):
    """Return complement of input `rows` as input cubes."""
    tasks = [(_SPLIT, rows)]
    results = list()
    while tasks:
        op, arg = tasks.pop()
        if op == _MERGE:
            c1 = results.pop()
            c0 = results.pop()
            results.append(_merge(c0, c1, arg, shape))
            continue
        rows = arg
        r = _terminal(rows, shape)
        if r is not None:
            results.append(r)
            continue
        i = unate.split_var(rows, shape)
        assert i is not None, rows
        tasks.append((_MERGE, i))
        tasks.append(
            (_SPLIT, unate.cofactor_literal(rows, i, True, shape)))
        tasks.append(
            (_SPLIT, unate.cofactor_literal(rows, i, False, shape)))
    r, = results
    return r


def _terminal(rows, shape):
    full = shape.inmask
    if not rows:
        return [full]
    if any(r == full for r in rows):
        return list()
    if len(rows) == 1:
        return _de_morgan(rows[0], shape)
    return None


def _de_morgan(row, shape):
    """Return complement of a single input cube."""
    full = shape.inmask
    r = list()
    for field in shape.var_masks:
        part = row & field
        if part != field:
            r.append((full & ~ field) | (field & ~ part))
    return r


def _merge(c0, c1, i, shape):
    """Combine complements of the two cofactors wrt variable `i`.

    A cube of one half that lies inside a cube of the
    other half is in the complement for both values of
    the variable, so it stays free in `i`.
    """
    only_0 = shape.inmask & ~ (0b10 << (2 * i))
    only_1 = shape.inmask & ~ (0b01 << (2 * i))
    r = list()
    for c in c0:
        if any(_cube.covers(d, c) for d in c1):
            r.append(c)
        else:
            r.append(c & only_0)
    for c in c1:
        if any(_cube.covers(d, c) for d in c0):
            r.append(c)
        else:
            r.append(c & only_1)
    return _cube.scc(r)
