"""Tests of `espresso.twolevel.minimize`."""
import itertools
import logging
import random

import pytest

from espresso import errors
from espresso.config import EspressoConfig
from espresso.twolevel import cube as _cube
from espresso.twolevel import minimize as _min


logger = logging.getLogger('espresso')
logger.setLevel(logging.ERROR)


def test_xor_is_minimal():
    shape = _cube.Shape(2, 1)
    f = _cubes(['01 1', '10 1'], shape)
    _assert_minimizes_to(f, list(), shape, ['01 1', '10 1'])


def test_absorption():
    shape = _cube.Shape(3, 1)
    f = _cubes(['11- 1', '111 1'], shape)
    _assert_minimizes_to(f, list(), shape, ['11- 1'])


def test_consensus():
    shape = _cube.Shape(2, 1)
    f = _cubes(['01 1', '11 1'], shape)
    _assert_minimizes_to(f, list(), shape, ['-1 1'])


def test_majority():
    shape = _cube.Shape(3, 1)
    f = _cubes(['11- 1', '-11 1', '1-1 1'], shape)
    _assert_minimizes_to(f, list(), shape, ['11- 1', '-11 1', '1-1 1'])


def test_dont_care():
    shape = _cube.Shape(3, 1)
    f = _cubes(['001 1', '010 1'], shape)
    d = _cubes(['011 1', '000 1'], shape)
    _assert_minimizes_to(f, d, shape, ['0-- 1'])


def test_multiple_outputs():
    shape = _cube.Shape(2, 2)
    f = _cubes(['01 10', '10 10', '11 01'], shape)
    _assert_minimizes_to(f, list(), shape, ['01 10', '10 10', '11 01'])


def test_tautology():
    shape = _cube.Shape(2, 1)
    f = _cubes(['0- 1', '1- 1'], shape)
    g = _min.espresso(f, list(), None, shape)
    assert g == [shape.full], _str(g, shape)


def test_empty():
    shape = _cube.Shape(2, 1)
    assert _min.espresso(list(), list(), None, shape) == list()
    assert _min.espresso_exact(list(), list(), None, shape) == list()


def test_cyclic_exact_not_worse():
    shape = _cube.Shape(3, 1)
    f = _cubes([
        '000 1', '001 1', '010 1',
        '101 1', '110 1', '111 1'], shape)
    g = _min.espresso(f, list(), None, shape)
    h = _min.espresso_exact(f, list(), None, shape)
    _assert_equivalent(f, g, list(), shape)
    _assert_equivalent(f, h, list(), shape)
    assert len(h) == 3, _str(h, shape)
    assert len(h) <= len(g), (_str(h, shape), _str(g, shape))


def test_minimize_result_again():
    shape = _cube.Shape(4, 2)
    f = _cubes([
        '0000 10', '0001 10', '0011 11', '0111 01',
        '1111 11', '1011 10', '1100 01', '1101 01'], shape)
    g = _min.espresso(f, list(), None, shape)
    _assert_equivalent(f, g, list(), shape)
    h = _min.espresso(g, list(), None, shape)
    _assert_equivalent(f, h, list(), shape)
    assert set(h) == set(g), (_str(h, shape), _str(g, shape))


def test_minimize_is_idempotent():
    shape = _cube.Shape(3, 2)
    rng = random.Random(0)
    covers = [_cubes(['--1 01', '-0- 01', '0-0 11', '01- 10'], shape)]
    for _ in range(40):
        n = rng.randint(1, 6)
        covers.append([
            _random_cube(rng, shape)
            for _ in range(n)])
    for f in covers:
        g = _min.espresso(f, list(), None, shape)
        _assert_equivalent(f, g, list(), shape)
        h = _min.espresso(g, list(), None, shape)
        assert set(h) == set(g), (
            _str(f, shape), _str(g, shape), _str(h, shape))


def test_options_keep_function():
    shape = _cube.Shape(4, 2)
    f = _cubes([
        '0-00 10', '01-1 11', '1-11 01', '111- 10',
        '0000 01', '1010 11', '-001 10'], shape)
    d = _cubes(['1100 11'], shape)
    options = [
        dict(),
        dict(remove_essential=False),
        dict(force_irredundant=False),
        dict(unwrap_onset=True),
        dict(single_expand=True),
        dict(use_super_gasp=True),
        dict(use_random_order=True, seed=11),
        dict(skip_make_sparse=True),
        dict(verify=True, trace=True, summary=True, debug=True)]
    for kw in options:
        config = EspressoConfig(**kw)
        g = _min.espresso(f, d, None, shape, config)
        _assert_equivalent(f, g, d, shape)
        h = _min.espresso_exact(f, d, None, shape, config)
        _assert_equivalent(f, h, d, shape)
        assert len(h) <= len(g), kw


def test_with_off_set():
    shape = _cube.Shape(2, 1)
    f = _cubes(['11 1'], shape)
    r = _cubes(['00 1'], shape)
    # everything outside `f` and `r` is don't care
    d = _cubes(['01 1', '10 1'], shape)
    g = _min.espresso(f, d, r, shape)
    assert len(g) == 1, _str(g, shape)
    c, = g
    assert _cube.input_literals(c, shape) == 1, _str(g, shape)


def test_iteration_budget():
    shape = _cube.Shape(3, 1)
    f = _cubes([
        '000 1', '001 1', '010 1',
        '101 1', '110 1', '111 1'], shape)
    config = EspressoConfig(max_iterations=0)
    with pytest.raises(errors.BudgetError):
        _min.espresso(f, list(), None, shape, config)


def test_cost():
    shape = _cube.Shape(3, 2)
    f = _cubes(['01- 10', '--- 11'], shape)
    c = _min.cost(f, shape)
    assert c == (2, 2, 3), c
    assert c.total == 5, c.total
    assert c.key() == (2, 5), c.key()


def test_verify_detects_change():
    shape = _cube.Shape(2, 1)
    f = _cubes(['01 1'], shape)
    g = _cubes(['-1 1'], shape)
    with pytest.raises(AssertionError):
        _min.verify(g, f, list(), shape)
    _min.verify(f, f, list(), shape)


def _assert_minimizes_to(f, d, shape, expected):
    expected = _cubes(expected, shape)
    g = _min.espresso(f, d, None, shape)
    assert set(g) == set(expected), _str(g, shape)
    assert len(g) == len(expected), _str(g, shape)
    h = _min.espresso_exact(f, d, None, shape)
    assert set(h) == set(expected), _str(h, shape)


def _assert_equivalent(f, g, d, shape):
    """Assert that `f` and `g` differ only inside `d`."""
    care = _points(f, shape)
    dc = _points(d, shape)
    new = _points(g, shape)
    assert care <= new, care - new
    assert new <= care | dc, new - care - dc


def _points(cubes, shape):
    r = set()
    for values in itertools.product(
            [False, True], repeat=shape.nin):
        m = _cube.minterm(values, shape)
        for c in cubes:
            if not _cube.covers(c | shape.outmask, m):
                continue
            for j in shape.outputs(c):
                r.add((values, j))
    return r


def _random_cube(rng, shape):
    inputs = ''.join(rng.choice('01-') for _ in range(shape.nin))
    outputs = rng.choice(['01', '10', '11'])
    return _cube.cube_from_str('{i} {o}'.format(i=inputs, o=outputs), shape)


def _cubes(strings, shape):
    return [_cube.cube_from_str(s, shape) for s in strings]


def _str(cubes, shape):
    return _cube.format_cubes(cubes, shape)
