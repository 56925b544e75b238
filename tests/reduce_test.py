"""Tests of `espresso.twolevel.reduce`."""
import logging

from espresso.config import EspressoConfig
from espresso.twolevel import cube as _cube
from espresso.twolevel import reduce as _reduce
from espresso.twolevel import unate


logger = logging.getLogger('espresso')
logger.setLevel(logging.ERROR)


def test_reduce_sequential():
    shape = _cube.Shape(2, 1)
    f = _cubes(['-1 1', '1- 1'], shape)
    g = _reduce.reduce(f, list(), shape, EspressoConfig())
    # the second cube sees the reduced first cube
    assert g == _cubes(['01 1', '1- 1'], shape), _str(g, shape)


def test_reduce_cube():
    shape = _cube.Shape(2, 1)
    c = _cube.cube_from_str('11 1', shape)
    others = _cubes(['1- 1'], shape)
    assert _reduce.reduce_cube(c, others, shape) is None
    c = _cube.cube_from_str('-- 1', shape)
    others = _cubes(['1- 1'], shape)
    r = _reduce.reduce_cube(c, others, shape)
    assert r == _cube.cube_from_str('0- 1', shape), _str([r], shape)


def test_reduce_outputs():
    shape = _cube.Shape(1, 2)
    c = _cube.cube_from_str('- 11', shape)
    others = _cubes(['- 10'], shape)
    r = _reduce.reduce_cube(c, others, shape)
    assert r == _cube.cube_from_str('- 01', shape), _str([r], shape)


def test_reduce_with_dont_care():
    shape = _cube.Shape(2, 1)
    f = _cubes(['-- 1'], shape)
    d = _cubes(['0- 1'], shape)
    g = _reduce.reduce(f, d, shape, EspressoConfig())
    assert g == _cubes(['1- 1'], shape), _str(g, shape)


def test_reduce_keeps_function():
    shape = _cube.Shape(3, 2)
    f = _cubes(['1-- 11', '-1- 10', '--1 01', '0-0 10'], shape)
    config = EspressoConfig(use_random_order=True, seed=7)
    g = _reduce.reduce(f, list(), shape, config, config.rng())
    for c in f:
        assert unate.cube_is_covered(c, g, shape), _str([c], shape)
    for c in g:
        assert unate.cube_is_covered(c, f, shape), _str([c], shape)


def _cubes(strings, shape):
    return [_cube.cube_from_str(s, shape) for s in strings]


def _str(cubes, shape):
    return _cube.format_cubes(cubes, shape)
