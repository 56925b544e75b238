"""Cofactors, unate covers, and containment by recursive splitting.

The functions with `rows` in their signature work
on input parts only, i.e., cubes masked by `shape.inmask`.
Splitting uses an explicit stack, so the depth of
recursion is not bounded by the interpreter.
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import logging

from espresso.twolevel import cube as _cube


log = logging.getLogger(__name__)


def cofactor(cubes, c, shape):
    """Return cofactor of `cubes` with respect to cube `c`.

    Cubes that do not intersect `c` are dropped.
    The remaining ones are raised in the parts of `c`.
    """
    lift = shape.full & ~ c
    return [
        x | lift for x in cubes
        if not _cube.is_empty(x & c, shape)]


def cofactor_literal(rows, i, value, shape):
    """Return cofactor of `rows` for variable `i` equal to `value`."""
    bit = 1 << (2 * i + int(value))
    field = shape.var_masks[i]
    return [r | field for r in rows if r & bit]


def var_counts(rows, shape):
    """Return how many rows require each variable to be 0, and 1.

    @rtype: `tuple(list, list)`
    """
    zeros = [0] * shape.nin
    ones = [0] * shape.nin
    low = shape.low
    for r in rows:
        neg = r & low & ~ (r >> 1)
        pos = (r >> 1) & low & ~ r
        _tally(neg, zeros)
        _tally(pos, ones)
    return zeros, ones


def _tally(bits, counts):
    while bits:
        b = bits & - bits
        counts[(b.bit_length() - 1) // 2] += 1
        bits ^= b


def binate_var(rows, shape):
    """Return binate variable that occurs in most rows.

    Ties are broken by smaller index.

    @return: index of variable, or `None` if `rows` are unate
    """
    zeros, ones = var_counts(rows, shape)
    best = None
    most = 0
    for i, (n, p) in enumerate(zip(zeros, ones)):
        if n and p and n + p > most:
            best = i
            most = n + p
    return best


def split_var(rows, shape):
    """Return variable to split on for complementation.

    Prefer binate variables, otherwise the
    variable with most literals in `rows`.
    """
    zeros, ones = var_counts(rows, shape)
    best = None
    key = None
    for i, (n, p) in enumerate(zip(zeros, ones)):
        if not n and not p:
            continue
        k = (bool(n and p), n + p)
        if key is None or k > key:
            best = i
            key = k
    return best


def is_unate(rows, shape):
    return binate_var(rows, shape) is None


def unate_polarity(rows, shape):
    """Return for each variable `'+'`, `'-'`, `'*'`, or `None`.

    `'*'` marks binate variables, `None` absent ones.
    """
    zeros, ones = var_counts(rows, shape)
    r = list()
    for n, p in zip(zeros, ones):
        if n and p:
            r.append('*')
        elif p:
            r.append('+')
        elif n:
            r.append('-')
        else:
            r.append(None)
    return r


def input_tautology(rows, shape):
    """Return `True` if the union of `rows` is the input space."""
    full = shape.inmask
    stack = [rows]
    while stack:
        rows = stack.pop()
        if any(r == full for r in rows):
            continue
        if not rows:
            return False
        i = binate_var(rows, shape)
        # a unate cover is a tautology iff
        # it contains the universe
        if i is None:
            return False
        stack.append(cofactor_literal(rows, i, True, shape))
        stack.append(cofactor_literal(rows, i, False, shape))
    return True


def tautology(cubes, shape):
    """Return `True` if `cubes` cover every output everywhere."""
    inmask = shape.inmask
    for j in range(shape.nout):
        bit = shape.output_bit(j)
        rows = [c & inmask for c in cubes if c & bit]
        if not input_tautology(rows, shape):
            return False
    return True


def _rows_under(c, cubes, bit, shape):
    """Return cofactor of output `bit` of `cubes` wrt inputs of `c`."""
    inmask = shape.inmask
    cin = c & inmask
    lift = inmask & ~ cin
    return [
        (x & inmask) | lift for x in cubes
        if x & bit and _cube.inputs_intersect(x, cin, shape)]


def cube_is_covered(c, cubes, shape):
    """Return `True` if cube `c` is contained in union of `cubes`."""
    for j in shape.outputs(c):
        bit = shape.output_bit(j)
        rows = _rows_under(c, cubes, bit, shape)
        if not input_tautology(rows, shape):
            return False
    return True


def covering_rows(c, fixed, selectable, shape):
    """Return rows of the covering problem for cube `c`.

    Split the cofactor of `fixed` and `selectable` wrt `c`
    until each leaf is unate. A leaf that no fixed cube
    covers yields a row: the keys of selectable cubes that
    cover the whole leaf. Each solution of the covering
    problem that these rows define selects cubes that,
    together with `fixed`, contain `c`.

    @param fixed: cubes always available
    @param selectable: `list` of `(key, cube)`
    @return: `set` of `frozenset` of keys.
        An empty row means that `c` cannot be covered.
    """
    full = shape.inmask
    rows = set()
    for j in shape.outputs(c):
        bit = shape.output_bit(j)
        fix = _rows_under(c, fixed, bit, shape)
        sel = _rows_under(c, [x for _, x in selectable], bit, shape)
        # keys of cubes that survived the cofactor
        cin = c & shape.inmask
        keys = [
            k for k, x in selectable
            if x & bit and _cube.inputs_intersect(x, cin, shape)]
        stack = [(fix, list(zip(keys, sel)))]
        while stack:
            fix, sel = stack.pop()
            if any(r == full for r in fix):
                continue
            everything = fix + [r for _, r in sel]
            i = binate_var(everything, shape)
            if i is None:
                row = frozenset(k for k, r in sel if r == full)
                rows.add(row)
                continue
            for value in (True, False):
                bitv = 1 << (2 * i + int(value))
                field = shape.var_masks[i]
                fix_ = [r | field for r in fix if r & bitv]
                sel_ = [(k, r | field) for k, r in sel if r & bitv]
                stack.append((fix_, sel_))
    return rows
