"""Tests of `espresso.pla`."""
import logging

import pytest

from espresso import errors
from espresso import pla
from espresso.cover import Cover
from espresso.cover import CoverType


logger = logging.getLogger('espresso')
logger.setLevel(logging.ERROR)


PLA_F = '''\
.type f
.i 2
.ilb a b
.o 1
.ob f
.p 2
01 1
1- 1
.e
'''


def test_dumps_f():
    cover = Cover.with_labels(CoverType.F, ['a', 'b'], ['f'])
    cover.add_cube([False, True], [True])
    cover.add_cube([True, None], [True])
    s = pla.dumps(cover)
    assert s == PLA_F, s
    assert cover.to_pla_string() == PLA_F
    assert str(cover) == PLA_F


def test_loads_f():
    cover = pla.loads(PLA_F)
    assert cover.cover_type is CoverType.F
    assert cover.input_labels == ['a', 'b']
    assert cover.output_labels == ['f']
    cubes = [(c.inputs, c.outputs) for c in cover.cubes()]
    assert cubes == [
        ((False, True), (True,)),
        ((True, None), (True,))], cubes


def test_dumps_fd():
    cover = Cover(CoverType.FD)
    cover.add_cube([True, False], [True, None])
    s = pla.dumps(cover)
    lines = s.splitlines()
    assert lines == [
        '.type fd', '.i 2', '.o 2', '.p 2',
        '10 1~', '10 ~-', '.e'], lines
    # only the ON-set
    s = pla.dumps(cover, CoverType.F)
    lines = s.splitlines()
    assert lines == [
        '.type f', '.i 2', '.o 2', '.p 1', '10 10', '.e'], lines
    assert pla.dumps(cover, 'f') == s


def test_round_trip():
    for t in CoverType:
        cover = Cover(t)
        cover.add_cube([True, None, False], [True, None, False])
        cover.add_cube([None, True, None], [False, True, True])
        s = pla.dumps(cover)
        assert pla.loads(s) == cover, (t, s)
    cover = Cover.with_labels(CoverType.FDR, ['x', 'y'], ['f', 'g'])
    cover.add_cube([True, False], [None, False])
    s = cover.to_pla_string()
    assert Cover.from_pla_string(s) == cover, s


def test_file_round_trip(tmp_path):
    cover = Cover.with_labels(CoverType.FR, ['a', 'b', 'c'], ['f'])
    cover.add_cube([True, None, True], [True])
    cover.add_cube([False, False, None], [False])
    fname = str(tmp_path / 'cover.pla')
    cover.write_pla(fname)
    other = Cover.from_pla_file(fname)
    assert other == cover
    pla.dump(cover, fname, cover_type=CoverType.F)
    other = pla.load(fname)
    assert other.cover_type is CoverType.F
    assert len(other) == 1, other.cubes()


def test_loads_default_type_and_characters():
    s = '''
        # a comment
        .i 3
        .o 4
        .phase 1111
        x-2|1~-0
        012 4320
        .end
        111 1111
        '''
    cover = pla.loads(s)
    assert cover.cover_type is CoverType.FD
    kinds = [c.kind for c in cover.cubes()]
    # `0` and `3` add nothing without an OFF-set
    assert kinds == ['F', 'D', 'F', 'D'], kinds
    c = cover.cubes()[0]
    assert c.inputs == (None, None, None), c
    assert c.outputs == (True, False, False, False), c
    c = cover.cubes()[3]
    assert c.inputs == (False, True, None), c
    assert c.outputs == (False, False, True, False), c


def test_loads_type_fr():
    s = '.type fr\n.i 1\n.o 2\n1 10\n0 -1\n'
    cover = pla.loads(s)
    kinds = [c.kind for c in cover.cubes()]
    assert kinds == ['F', 'R', 'F'], kinds


def test_loads_infers_shape():
    cover = pla.loads('01 1\n1- 1\n')
    assert cover.num_inputs == 2, cover.num_inputs
    assert cover.num_outputs == 1, cover.num_outputs
    assert cover.input_labels is None
    assert len(cover) == 2, len(cover)
    cover = pla.loads('.i 2\n01 10\n')
    assert cover.num_outputs == 2, cover.num_outputs


def test_loads_count_mismatch():
    cover = pla.loads('.i 1\n.o 1\n.p 5\n1 1\n.e\n')
    assert len(cover) == 1, len(cover)


def test_parse_errors():
    with pytest.raises(errors.ParseError) as info:
        pla.loads('.i 2\n.o 1\n0a 1\n')
    e = info.value
    assert e.line == 3, e.line
    assert e.offset == 1, e.offset
    assert e.text == '0a 1', e.text
    assert 'line 3' in str(e), str(e)
    with pytest.raises(errors.ParseError) as info:
        pla.loads('.i 2\n.o 1\n01 5\n')
    assert info.value.offset == 3, info.value.offset
    # wrong number of characters
    with pytest.raises(errors.ParseError):
        pla.loads('.i 2\n.o 1\n011 1\n')
    with pytest.raises(errors.ParseError):
        pla.loads('.i two\n.o 1\n')
    with pytest.raises(errors.ParseError):
        pla.loads('.type fx\n.i 1\n.o 1\n')
    with pytest.raises(errors.ParseError):
        pla.loads('# nothing\n')
    with pytest.raises(errors.ParseError):
        pla.loads('.i 1\n.o 1\n.ilb a a\n')
    with pytest.raises(errors.ShapeError):
        pla.loads('.i 2\n.o 1\n.ilb a\n')
