"""Tests of `espresso.twolevel.expand`."""
import logging

from espresso.config import EspressoConfig
from espresso.twolevel import complement as _compl
from espresso.twolevel import cube as _cube
from espresso.twolevel import expand as _expand


logger = logging.getLogger('espresso')
logger.setLevel(logging.ERROR)


def test_expand_merges_adjacent_cubes():
    shape = _cube.Shape(2, 1)
    f = _cubes(['01 1', '11 1'], shape)
    r = _compl.complement(f, shape)
    config = EspressoConfig()
    g = _expand.expand(f, r, shape, config)
    assert g == _cubes(['-1 1'], shape), _str(g, shape)


def test_expand_to_primes():
    shape = _cube.Shape(3, 1)
    f = _cubes(['110 1', '111 1', '011 1', '101 1'], shape)
    r = _compl.complement(f, shape)
    config = EspressoConfig()
    g = _expand.expand(f, r, shape, config)
    primes = set(_cubes(['11- 1', '-11 1', '1-1 1'], shape))
    assert set(g) <= primes, _str(g, shape)
    for c in f:
        assert any(_cube.covers(p, c) for p in g), _str([c], shape)
    for c in g:
        assert _expand.is_disjoint_from(c, r, shape)


def test_expand_raises_outputs():
    shape = _cube.Shape(1, 2)
    f = _cubes(['1 10', '1 01'], shape)
    r = _compl.complement(f, shape)
    config = EspressoConfig()
    g = _expand.expand(f, r, shape, config)
    assert g == _cubes(['1 11'], shape), _str(g, shape)
    # input parts only
    g = _expand.expand(f, r, shape, config, nonsparse=True)
    assert g == f, _str(g, shape)


def test_expand_single_expand():
    shape = _cube.Shape(3, 1)
    f = _cubes(['000 1', '001 1', '010 1', '011 1'], shape)
    r = _compl.complement(f, shape)
    config = EspressoConfig(single_expand=True)
    g = _expand.expand(f, r, shape, config)
    assert g == _cubes(['0-- 1'], shape), _str(g, shape)


def test_expand_random_order():
    shape = _cube.Shape(3, 1)
    f = _cubes(['000 1', '001 1', '010 1', '111 1'], shape)
    r = _compl.complement(f, shape)
    config = EspressoConfig(use_random_order=True, seed=3)
    g = _expand.expand(f, r, shape, config, config.rng())
    for c in f:
        assert any(_cube.covers(p, c) for p in g), _str([c], shape)
    for c in g:
        assert _expand.is_disjoint_from(c, r, shape)


def test_column_density():
    shape = _cube.Shape(1, 1)
    f = _cubes(['0 1', '- 1'], shape)
    d = _expand.column_density(f, shape)
    assert d == [2, 1, 2], d


def test_is_disjoint_from():
    shape = _cube.Shape(2, 1)
    c = _cube.cube_from_str('1- 1', shape)
    assert _expand.is_disjoint_from(c, _cubes(['0- 1'], shape), shape)
    assert not _expand.is_disjoint_from(
        c, _cubes(['0- 1', '-1 1'], shape), shape)


def _cubes(strings, shape):
    return [_cube.cube_from_str(s, shape) for s in strings]


def _str(cubes, shape):
    return _cube.format_cubes(cubes, shape)
