"""Cubes over binary inputs and multiple outputs, as bit sets.

A cube is an `int`. A `Shape` gives the meaning of its bits:

  - input variable `i` owns bits `2 * i` ("may be 0")
    and `2 * i + 1` ("may be 1"), so the field reads
    `01` for the literal `~ x`, `10` for `x`,
    `11` for "absent", and `00` for the empty cube
  - output `j` owns bit `2 * nin + j`

The output bits form one multiple-valued field.
The sets of minterms that two cubes denote
intersect iff their conjunction `a & b` is
nonempty in every field.

Reference
=========

Robert K. Brayton, Gary D. Hachtel,
Curtis T. McMullen, Alberto L. Sangiovanni-Vincentelli
    "Logic minimization algorithms for VLSI synthesis"
    Kluwer Academic Publishers, 1984
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
from espresso import errors


DONT_CARE = '-'
INPUT_CHARS = {0b01: '0', 0b10: '1', 0b11: '-', 0b00: '?'}


class Shape(object):
    """Number of inputs and outputs of a cube.

    Attributes:

    - `nin`, `nout`: numbers of inputs and outputs
    - `offset`: index of first output bit
    - `inmask`, `outmask`: bits of inputs and outputs
    - `full`: the universe cube
    - `low`: bit `2 * i` of each input variable `i`
    - `var_masks`: field of each input variable
    - `fields`: input fields followed by the output field
    """

    def __init__(self, nin, nout):
        if nin < 0 or nout < 0:
            raise ValueError((nin, nout))
        self.nin = nin
        self.nout = nout
        self.offset = 2 * nin
        self.inmask = (1 << self.offset) - 1
        self.outmask = ((1 << nout) - 1) << self.offset
        self.full = self.inmask | self.outmask
        self.low = self.inmask // 3
        self.var_masks = tuple(
            0b11 << (2 * i) for i in range(nin))
        if nout:
            self.fields = self.var_masks + (self.outmask,)
        else:
            self.fields = self.var_masks

    def output_bit(self, j):
        return 1 << (self.offset + j)

    def outputs(self, c):
        """Return indices of outputs that are set in cube `c`."""
        out = c >> self.offset
        return [j for j in range(self.nout) if out >> j & 1]

    def __eq__(self, other):
        if not isinstance(other, Shape):
            return NotImplemented
        return (self.nin, self.nout) == (other.nin, other.nout)

    def __hash__(self):
        return hash((self.nin, self.nout))

    def __repr__(self):
        return 'Shape(nin={i}, nout={o})'.format(
            i=self.nin, o=self.nout)


def cube_from_literals(inputs, outputs, shape):
    """Return cube with given literals.

    @param inputs: `None` for absent variable,
        else the value that the variable must take
    @type inputs: iterable of `None` or `bool`
    @param outputs: `True` where the cube is on
    @type outputs: iterable of `bool`
    @rtype: `int`
    """
    inputs = list(inputs)
    outputs = list(outputs)
    if len(inputs) != shape.nin:
        raise errors.CubeShapeMismatch(shape.nin, len(inputs))
    if len(outputs) != shape.nout:
        raise errors.CubeShapeMismatch(
            shape.nout, len(outputs), what='outputs')
    c = 0
    for i, value in enumerate(inputs):
        if value is None:
            field = 0b11
        elif value:
            field = 0b10
        else:
            field = 0b01
        c |= field << (2 * i)
    for j, value in enumerate(outputs):
        if value:
            c |= shape.output_bit(j)
    return c


def cube_to_literals(c, shape):
    """Inverse of `cube_from_literals`.

    @rtype: `tuple(tuple, tuple)`
    """
    inputs = list()
    for i in range(shape.nin):
        field = (c >> (2 * i)) & 0b11
        assert field, ('empty input field', i, c)
        if field == 0b11:
            inputs.append(None)
        else:
            inputs.append(field == 0b10)
    outputs = tuple(
        bool(c & shape.output_bit(j))
        for j in range(shape.nout))
    return tuple(inputs), outputs


def cube_from_str(s, shape):
    """Return cube from string like `'01- 10'`.

    The input part uses `0`, `1`, `-`.
    The output part is `1` or `0` per output and
    may be separated by whitespace or `|`.
    Without an output part, all outputs are set.
    """
    parts = s.replace('|', ' ').split()
    if not parts:
        inp, out = '', '1' * shape.nout
    elif len(parts) == 1 and shape.nin == 0:
        inp, out = '', parts[0]
    elif len(parts) == 1:
        inp, out = parts[0], '1' * shape.nout
    else:
        inp, out = parts
    in_table = {'0': False, '1': True, '-': None}
    out_table = {'0': False, '1': True}
    try:
        inputs = [in_table[x] for x in inp]
        outputs = [out_table[x] for x in out]
    except KeyError as e:
        raise ValueError('unexpected character {e} in {s!r}'.format(
            e=e, s=s))
    return cube_from_literals(inputs, outputs, shape)


def cube_to_str(c, shape):
    """Return string like `'01- 10'` for cube `c`."""
    inp = ''.join(
        INPUT_CHARS[(c >> (2 * i)) & 0b11]
        for i in range(shape.nin))
    out = ''.join(
        '1' if c & shape.output_bit(j) else '0'
        for j in range(shape.nout))
    return '{i} {o}'.format(i=inp, o=out)


def format_cubes(cubes, shape):
    return '\n'.join(cube_to_str(c, shape) for c in cubes)


def _nonempty_fields(x, shape):
    """Return bit `2 * i` set iff input field `i` of `x` is nonempty."""
    return (x | (x >> 1)) & shape.low


def is_input_empty(c, shape):
    return _nonempty_fields(c, shape) != shape.low


def is_empty(c, shape):
    """Return `True` if cube `c` denotes no minterm."""
    if is_input_empty(c, shape):
        return True
    return bool(shape.nout) and not (c & shape.outmask)


def inputs_intersect(a, b, shape):
    return not is_input_empty(a & b, shape)


def intersect(a, b, shape):
    """Return `a & b`, or `None` if the two cubes are disjoint."""
    x = a & b
    if is_empty(x, shape):
        return None
    return x


def covers(a, b):
    """Return `True` if cube `a` contains cube `b`.

    A cube contains another if every
    bit set in `b` is set in `a`.
    """
    return not (b & ~ a)


def distance(a, b, shape):
    """Return number of fields where `a` and `b` conflict.

    The output part counts as one field.
    """
    x = a & b
    d = (shape.low & ~ _nonempty_fields(x, shape)).bit_count()
    if shape.nout and not (x & shape.outmask):
        d += 1
    return d


def consensus(a, b, shape):
    """Return consensus of cubes `a` and `b`.

    For distance 0 this is the intersection.
    For distance 1 the conflicting field becomes
    the union of the two fields, and every other
    field the intersection.

    @return: cube, or `None` if the distance exceeds 1
    """
    x = a & b
    conflict = shape.low & ~ _nonempty_fields(x, shape)
    out_conflict = bool(shape.nout) and not (x & shape.outmask)
    d = conflict.bit_count() + out_conflict
    if d == 0:
        return x
    if d > 1:
        return None
    if conflict:
        field = conflict * 0b11
    else:
        field = shape.outmask
    return x | ((a | b) & field)


def sharp(a, b, shape):
    """Return cubes whose union is `a` minus `b`.

    Each field where `a` has bits outside `b`
    yields one cube.
    """
    if intersect(a, b, shape) is None:
        return [a]
    r = list()
    for field in shape.fields:
        rest = a & ~ b & field
        if rest:
            r.append((a & ~ field) | rest)
    return r


def supercube(cubes):
    """Return smallest cube that contains all `cubes`."""
    r = 0
    for c in cubes:
        r |= c
    return r


def input_literals(c, shape):
    """Return number of input variables that occur in `c`."""
    both = c & (c >> 1) & shape.low
    return shape.nin - both.bit_count()


def output_count(c, shape):
    return (c & shape.outmask).bit_count()


def size(c):
    """Return number of set bits."""
    return c.bit_count()


def is_full_input(c, shape):
    return (c & shape.inmask) == shape.inmask


def minterm(values, shape):
    """Return input cube of a single input assignment.

    @param values: `bool` per input
    """
    return cube_from_literals(
        values, [False] * shape.nout, shape)


def scc(cubes):
    """Return `cubes` without those contained in others.

    Of equal cubes, the first is kept.
    The order of the remaining cubes is preserved.
    """
    order = sorted(
        range(len(cubes)),
        key=lambda i: (- cubes[i].bit_count(), i))
    kept = list()
    kept_index = list()
    for i in order:
        c = cubes[i]
        if any(covers(k, c) for k in kept):
            continue
        kept.append(c)
        kept_index.append(i)
    return [cubes[i] for i in sorted(kept_index)]


def unravel(cubes, shape):
    """Split each cube into cubes with one output each."""
    r = list()
    inmask = shape.inmask
    for c in cubes:
        for j in shape.outputs(c):
            r.append((c & inmask) | shape.output_bit(j))
    return r


def regrow(c, old, new):
    """Return cube `c` in the wider shape `new`.

    Added inputs are absent, added outputs unset.
    """
    assert new.nin >= old.nin, (old, new)
    assert new.nout >= old.nout, (old, new)
    inputs = c & old.inmask
    pad = new.inmask & ~ old.inmask
    outputs = (c & old.outmask) >> old.offset
    return inputs | pad | (outputs << new.offset)
