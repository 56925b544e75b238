"""Tests of `espresso.symbolic.bdd`."""
import logging

from espresso.logic import lexyacc
from espresso.symbolic import bdd as _bdd


logger = logging.getLogger('dd')
logger.setLevel(logging.ERROR)
logger = logging.getLogger('espresso')
logger.setLevel(logging.ERROR)


parser = lexyacc.Parser(nodes=_bdd.BDDNodes())


def test_new_manager():
    bdd = _bdd.new_manager()
    assert not bdd.vars, bdd.vars
    other = _bdd.new_manager()
    assert bdd is not other


def test_add_tree_declares_in_order():
    bdd = _bdd.new_manager()
    tree = parser.parse('b & ~ a | c')
    u = _bdd.add_tree(tree, bdd)
    assert set(bdd.vars) == {'a', 'b', 'c'}, bdd.vars
    assert bdd.level_of_var('b') < bdd.level_of_var('a')
    assert bdd.level_of_var('a') < bdd.level_of_var('c')
    v = bdd.add_expr(r'(b /\ ~ a) \/ c')
    assert u == v, (u, v)


def test_flatten_without_manager():
    tree = parser.parse('a & (b | ~ c)')
    s = tree.flatten()
    assert s == 'a * (b + ~c)', s


def test_constants():
    bdd = _bdd.new_manager()
    u = _bdd.add_tree(parser.parse('1'), bdd)
    assert u == bdd.true
    u = _bdd.add_tree(parser.parse('a & ~ a'), bdd)
    assert u == bdd.false


def test_dnf():
    bdd = _bdd.new_manager()
    u = _bdd.add_tree(parser.parse('a & b | ~ a & c'), bdd)
    cubes = _bdd.dnf(u, bdd)
    assert len(cubes) == 2, cubes
    assert {'a': True, 'b': True} in cubes, cubes
    assert {'a': False, 'c': True} in cubes, cubes
    # constants
    assert _bdd.dnf(bdd.false, bdd) == list()
    assert _bdd.dnf(bdd.true, bdd) == [dict()]


def test_dnf_shares_cubes():
    bdd = _bdd.new_manager()
    bdd.declare('a', 'z', 'w')
    u = _bdd.add_tree(parser.parse('z | a & w'), bdd)
    cubes = _bdd.dnf(u, bdd)
    # the cube `z` is common to both cofactors of `a`
    assert {'z': True} in cubes, cubes
    assert len(cubes) == 2, cubes
    v = bdd.false
    for c in cubes:
        v |= bdd.cube(c)
    assert u == v, cubes


def test_support_and_evaluate():
    bdd = _bdd.new_manager()
    u = _bdd.add_tree(parser.parse('x10 & x2 | x1 & ~ x1'), bdd)
    assert _bdd.support(u, bdd) == ['x2', 'x10']
    assert _bdd.evaluate(u, dict(x2=True, x10=True), bdd)
    assert not _bdd.evaluate(u, dict(x2=True), bdd)
    assert not _bdd.evaluate(bdd.false, dict(), bdd)
    assert _bdd.evaluate(bdd.true, dict(), bdd)
