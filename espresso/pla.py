"""Reading and writing covers in Berkeley PLA format.

Example of PLA text:

```
.i 2
.o 1
.ilb a b
.ob f
.p 2
01 1
1- 1
.e
```

The directives read are `.i`, `.o`, `.ilb`, `.ob`,
`.p`, `.type`, `.e`, `.end`. Other directives
are logged and skipped.
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import logging

from espresso import errors
from espresso.cover import Cover
from espresso.cover import CoverType
from espresso.cover import DC
from espresso.cover import OFF
from espresso.cover import ON
from espresso.twolevel import cube as _cube


log = logging.getLogger(__name__)
INPUT_BITS = {
    '0': 0b01, '1': 0b10,
    '-': 0b11, '~': 0b11, 'x': 0b11, 'X': 0b11, '2': 0b11}
# output character -> role it adds the column to
OUTPUT_ROLES = {
    '1': ON, '4': ON,
    '0': OFF, '3': OFF,
    '-': DC, '2': DC,
    '~': None}
COMMENT = '#'
SEPARATOR = '|'


def load(filename):
    """Return `Cover` read from PLA file `filename`."""
    with open(filename, 'r') as f:
        text = f.read()
    return loads(text)


def loads(text):
    """Return `Cover` parsed from PLA `text`.

    The cover type is FD, unless a `.type` says otherwise.
    Output columns of a role that the type lacks are
    ignored. The numbers of inputs and outputs are
    inferred from the first cube if `.i` or `.o` is missing.

    @type text: `str`
    @rtype: `Cover`
    """
    nin = None
    nout = None
    input_labels = None
    output_labels = None
    cover_type = CoverType.FD
    expected = None
    rows = list()
    for lineno, line in enumerate(text.splitlines(), start=1):
        s = line.strip()
        if not s or s.startswith(COMMENT):
            continue
        if s.startswith('.'):
            key, *args = s.split()
            if key in ('.e', '.end'):
                break
            elif key == '.i':
                nin = _parse_int(args, line, lineno)
            elif key == '.o':
                nout = _parse_int(args, line, lineno)
            elif key == '.p':
                expected = _parse_int(args, line, lineno)
            elif key == '.ilb':
                input_labels = _parse_labels(args, line, lineno)
            elif key == '.ob':
                output_labels = _parse_labels(args, line, lineno)
            elif key == '.type':
                cover_type = _parse_type(args, line, lineno)
            else:
                log.warning(
                    'line {i}: skipping directive "{key}"'.format(
                        i=lineno, key=key))
            continue
        rows.append((lineno, line))
    if nin is None or nout is None:
        if not rows:
            raise errors.ParseError(
                text, 0, 'missing ".i" or ".o" and no cubes', line=0)
        lineno, line = rows[0]
        parts = _split_cube(line)
        if len(parts) != 2:
            raise errors.ParseError(
                line, 0, 'cannot infer numbers of inputs and outputs',
                line=lineno)
        if nin is None:
            nin = len(parts[0][1])
        if nout is None:
            nout = len(parts[1][1])
    _check_labels(input_labels, nin, 'input')
    _check_labels(output_labels, nout, 'output')
    shape = _cube.Shape(nin, nout)
    cubes = list()
    for lineno, line in rows:
        cubes.extend(_parse_cube(
            line, lineno, shape, cover_type))
    if expected is not None and expected != len(rows):
        log.warning(
            '".p {p}" does not match the {n} cubes read'.format(
                p=expected, n=len(rows)))
    log.debug('read PLA with {i} inputs, {o} outputs, {n} cubes'.format(
        i=nin, o=nout, n=len(cubes)))
    return Cover._from_cubes(
        cover_type, shape, cubes,
        input_labels=input_labels,
        output_labels=output_labels)


def _parse_int(args, line, lineno):
    if len(args) != 1 or not args[0].isdigit():
        raise errors.ParseError(
            line, 0, 'expected one nonnegative integer',
            line=lineno)
    return int(args[0])


def _parse_labels(args, line, lineno):
    if len(set(args)) != len(args):
        raise errors.ParseError(
            line, 0, 'duplicate label', line=lineno)
    return list(args)


def _parse_type(args, line, lineno):
    if len(args) != 1:
        raise errors.ParseError(
            line, 0, 'expected one cover type', line=lineno)
    try:
        return CoverType.from_pla_name(args[0])
    except KeyError:
        raise errors.ParseError(
            line, line.find(args[0]),
            'unknown cover type "{t}"'.format(t=args[0]),
            line=lineno)


def _check_labels(labels, n, what):
    if labels is None or len(labels) == n:
        return
    raise errors.ShapeError(
        '{n} {what} labels given for {k} {what}s'.format(
            n=len(labels), what=what, k=n))


def _split_cube(line):
    """Return fields of `line` as `(column, text)` pairs.

    Fields are separated by whitespace or `|`.
    """
    parts = list()
    start = None
    for k, ch in enumerate(line + ' '):
        if ch.isspace() or ch == SEPARATOR:
            if start is not None:
                parts.append((start, line[start:k]))
                start = None
        elif start is None:
            start = k
    return parts


def _parse_cube(line, lineno, shape, cover_type):
    """Return `(kind, cube)` pairs of one cube line."""
    parts = _split_cube(line)
    # characters with their columns
    chars = [
        (col + k, ch)
        for col, part in parts
        for k, ch in enumerate(part)]
    if len(chars) != shape.nin + shape.nout:
        raise errors.ParseError(
            line, 0,
            'expected {i} input and {o} output characters'.format(
                i=shape.nin, o=shape.nout),
            line=lineno)
    inputs = 0
    for i, (col, ch) in enumerate(chars[:shape.nin]):
        bits = INPUT_BITS.get(ch)
        if bits is None:
            raise errors.ParseError(
                line, col,
                'invalid input character "{c}"'.format(c=ch),
                line=lineno)
        inputs |= bits << (2 * i)
    roles = {ON: 0, DC: 0, OFF: 0}
    for j, (col, ch) in enumerate(chars[shape.nin:]):
        if ch not in OUTPUT_ROLES:
            raise errors.ParseError(
                line, col,
                'invalid output character "{c}"'.format(c=ch),
                line=lineno)
        kind = OUTPUT_ROLES[ch]
        if kind is not None:
            roles[kind] |= shape.output_bit(j)
    present = {
        ON: cover_type.has_f,
        DC: cover_type.has_d,
        OFF: cover_type.has_r}
    return [
        (kind, inputs | roles[kind])
        for kind in (ON, DC, OFF)
        if present[kind] and roles[kind]]


def dump(cover, filename, cover_type=None):
    """Write `cover` to file `filename` in PLA format."""
    s = dumps(cover, cover_type)
    with open(filename, 'w') as f:
        f.write(s)


def dumps(cover, cover_type=None):
    """Return PLA text of `cover`.

    @param cover_type: which roles to write,
        by default the cover's own type
    @type cover_type: `CoverType` or `str`
    @rtype: `str`
    """
    if cover_type is None:
        cover_type = cover.cover_type
    elif isinstance(cover_type, str):
        cover_type = CoverType.from_pla_name(cover_type)
    else:
        cover_type = CoverType(cover_type)
    shape = cover.shape
    present = {
        ON: cover_type.has_f,
        DC: cover_type.has_d,
        OFF: cover_type.has_r}
    cubes = [
        (kind, c) for kind, c in cover._cubes
        if present[kind]]
    lines = [
        '.type {t}'.format(t=cover_type.pla_name),
        '.i {n}'.format(n=shape.nin)]
    if cover.input_labels is not None:
        lines.append('.ilb ' + ' '.join(cover.input_labels))
    lines.append('.o {n}'.format(n=shape.nout))
    if cover.output_labels is not None:
        lines.append('.ob ' + ' '.join(cover.output_labels))
    lines.append('.p {n}'.format(n=len(cubes)))
    for kind, c in cubes:
        lines.append(_format_cube(kind, c, shape, cover_type))
    lines.append('.e')
    return '\n'.join(lines) + '\n'


def _format_cube(kind, c, shape, cover_type):
    inputs = ''.join(
        _cube.INPUT_CHARS[(c >> (2 * i)) & 0b11]
        for i in range(shape.nin))
    if cover_type is CoverType.F:
        on, off = '1', '0'
    else:
        on = {ON: '1', DC: '-', OFF: '0'}[kind]
        off = '~'
    outputs = ''.join(
        on if c & shape.output_bit(j) else off
        for j in range(shape.nout))
    if not shape.nin:
        return outputs
    if not shape.nout:
        return inputs
    return '{i} {o}'.format(i=inputs, o=outputs)
