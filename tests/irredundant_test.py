"""Tests of `espresso.twolevel.irredundant`."""
import logging

from espresso.config import EspressoConfig
from espresso.twolevel import cube as _cube
from espresso.twolevel import irredundant as _irr
from espresso.twolevel import unate


logger = logging.getLogger('espresso')
logger.setLevel(logging.ERROR)


def test_totally_redundant():
    shape = _cube.Shape(2, 1)
    f = _cubes(['0- 1', '-1 1', '1- 1'], shape)
    essential, redundant = _irr.classify(f, list(), shape)
    assert essential == _cubes(['0- 1', '1- 1'], shape), essential
    assert redundant == _cubes(['-1 1'], shape), redundant
    g = _irr.irredundant(f, list(), shape, EspressoConfig())
    assert g == _cubes(['0- 1', '1- 1'], shape), _str(g, shape)


def test_partially_redundant():
    shape = _cube.Shape(2, 1)
    f = _cubes(['0- 1', '-1 1', '1- 1', '-0 1'], shape)
    essential, redundant = _irr.classify(f, list(), shape)
    assert not essential, essential
    config = EspressoConfig()
    g = _irr.irredundant(f, list(), shape, config)
    assert g == _cubes(['0- 1', '1- 1'], shape), _str(g, shape)
    g = _irr.irredundant(f, list(), shape, config, exact=True)
    assert len(g) == 2, _str(g, shape)
    assert unate.tautology(g, shape)


def test_dont_care_makes_cube_redundant():
    shape = _cube.Shape(2, 1)
    f = _cubes(['11 1', '0- 1'], shape)
    d = _cubes(['1- 1'], shape)
    g = _irr.irredundant(f, d, shape, EspressoConfig())
    assert g == _cubes(['0- 1'], shape), _str(g, shape)


def test_irredundant_keeps_function():
    shape = _cube.Shape(3, 2)
    f = _cubes([
        '11- 10', '1-1 10', '-11 10',
        '111 01', '0-- 01', '-0- 01', '--0 01', '11- 01'], shape)
    g = _irr.irredundant(f, list(), shape, EspressoConfig())
    assert len(g) < len(f), _str(g, shape)
    for c in f:
        assert unate.cube_is_covered(c, g, shape), _str([c], shape)


def test_duplicates_kept_once():
    shape = _cube.Shape(1, 1)
    f = _cubes(['1 1', '1 1'], shape)
    g = _irr.irredundant(f, list(), shape, EspressoConfig())
    assert g == _cubes(['1 1'], shape), _str(g, shape)


def _cubes(strings, shape):
    return [_cube.cube_from_str(s, shape) for s in strings]


def _str(cubes, shape):
    return _cube.format_cubes(cubes, shape)
