"""Tests of `espresso.symbolic.expression`."""
import logging

import pytest

from espresso import errors
from espresso.symbolic import bdd as _bdd
from espresso.symbolic.expression import BoolExpr


logger = logging.getLogger('dd')
logger.setLevel(logging.ERROR)
logger = logging.getLogger('espresso')
logger.setLevel(logging.ERROR)


def test_parse_and_str():
    e = BoolExpr.parse('a & b | ~ c')
    assert str(e) == 'a * b + ~c', str(e)
    assert repr(e) == "BoolExpr('a * b + ~c')", repr(e)
    e = BoolExpr.parse('(a | b) & c')
    assert str(e) == '(a + b) * c', str(e)
    for s in ('a & & b', 'a b', '(a | b', 'a |', '', 'a | 2'):
        with pytest.raises(errors.ParseError) as info:
            BoolExpr.parse(s)
        assert info.value.text == s, (info.value.text, s)
    # the parser is usable after an error
    e = BoolExpr.parse('a | b')
    assert str(e) == 'a + b', str(e)


def test_separate_managers():
    e = BoolExpr.parse('a')
    f = BoolExpr.parse('a')
    assert e.bdd is not f.bdd
    g = BoolExpr.parse('a', bdd=e.bdd)
    assert g.bdd is e.bdd
    assert e.to_bdd() == g.to_bdd()


def test_operators():
    x = BoolExpr.variable('x')
    y = BoolExpr.variable('y', x.bdd)
    e = x & ~ y
    assert str(e) == 'x * ~y', str(e)
    assert e.bdd is x.bdd
    e = (x | y) & x
    assert str(e) == '(x + y) * x', str(e)
    assert e.to_bdd() == x.to_bdd()
    e = x.and_(y).or_(x.not_())
    assert str(e) == 'x * y + ~x', str(e)
    # constants
    e = x | True
    assert e.to_bdd() == x.bdd.true
    e = True & x
    assert str(e) == '1 * x', str(e)
    e = x & False
    assert e.to_bdd() == x.bdd.false
    with pytest.raises(TypeError):
        x & 3


def test_constant():
    t = BoolExpr.constant(True)
    f = BoolExpr.constant(False)
    assert str(t) == '1', str(t)
    assert str(f) == '0', str(f)
    assert t.evaluate(dict())
    assert not f.evaluate(dict())


def test_collect_variables_and_support():
    e = BoolExpr.parse('x10 & x2 | x1 & ~ x1')
    assert e.collect_variables() == ['x1', 'x2', 'x10']
    assert e.support() == ['x2', 'x10']


def test_bdd_queries():
    e = BoolExpr.parse('a & b')
    assert e.node_count() == 3, e.node_count()
    assert e.var_count() == 2, e.var_count()
    assert not e.is_terminal()
    # `b` does not affect the function
    e = BoolExpr.parse('a & (b | ~ b)')
    assert e.collect_variables() == ['a', 'b']
    assert e.var_count() == 1, e.var_count()
    assert e.node_count() == 2, e.node_count()
    e = BoolExpr.parse('a | ~ a')
    assert e.is_true()
    assert not e.is_false()
    assert e.is_terminal()
    assert e.node_count() == 1, e.node_count()
    assert e.var_count() == 0, e.var_count()
    e = BoolExpr.constant(False)
    assert e.is_false()
    assert e.is_terminal()


def test_evaluate():
    e = BoolExpr.parse('a & ~ b')
    assert e.evaluate(dict(a=True))
    assert e.evaluate(dict(a=True, b=False))
    assert not e.evaluate(dict(a=True, b=True))
    assert not e.evaluate(dict())


def test_to_dnf():
    e = BoolExpr.parse('a & b | ~ a & c')
    cubes = e.to_dnf()
    assert len(cubes) == 2, cubes
    assert dict(a=True, b=True) in cubes, cubes
    assert dict(a=False, c=True) in cubes, cubes


def test_minimize():
    e = BoolExpr.parse('a & b | a & ~ b')
    m = e.minimize()
    assert str(m) == 'a', str(m)
    assert m.bdd is e.bdd
    e = BoolExpr.parse('a & b | ~ a & b | a & ~ b')
    m = e.minimize()
    assert str(m) in ('a + b', 'b + a'), str(m)
    assert m.equivalent_to(e)


def test_equivalent_to():
    e = BoolExpr.parse('a & b')
    # same manager
    f = BoolExpr.parse('b & a', bdd=e.bdd)
    assert e.equivalent_to(f)
    # different managers
    f = BoolExpr.parse('b & a')
    assert e.equivalent_to(f)
    f = BoolExpr.parse('a | b')
    assert not e.equivalent_to(f)
    f = BoolExpr.parse('~ (~ a | ~ b)')
    assert e.equivalent_to(f)
    # constants
    t = BoolExpr.parse('a | ~ a')
    assert t.equivalent_to(BoolExpr.constant(True))
    assert not t.equivalent_to(BoolExpr.constant(False))
    assert BoolExpr.constant(False).equivalent_to(
        BoolExpr.constant(False))


def test_from_bdd():
    bdd = _bdd.new_manager()
    bdd.declare('a', 'b', 'c')
    u = bdd.add_expr(r'(a /\ b) \/ (a /\ c)')
    e = BoolExpr.from_bdd(u, bdd)
    assert e.to_bdd() == u
    assert e.equivalent_to(BoolExpr.parse('a & (b | c)', bdd=bdd))
    assert e.support() == ['a', 'b', 'c']
