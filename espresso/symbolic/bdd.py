"""Boolean expressions as binary decision diagrams.

This module translates syntax trees of Boolean
expressions to reduced ordered BDDs of `dd`,
and BDDs back to disjunctive normal forms.

Each manager declares variables in the order
that they first appear. Reordering is disabled,
so a manager's variable order never changes.
"""
# Copyright 2015-2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import logging

import dd.autoref as _bdd
import natsort

from espresso.logic import ast
from espresso.logic.ast import Nodes as _Nodes


log = logging.getLogger(__name__)


def new_manager():
    """Return a new BDD manager with fixed variable order.

    @rtype: `dd.autoref.BDD`
    """
    bdd = _bdd.BDD()
    bdd.configure(reordering=False)
    return bdd


class BDDNodes(_Nodes):
    """AST to flatten Boolean expressions to BDDs.

    Calling `flatten(bdd=bdd)` returns a BDD node.
    Calling `flatten()` returns infix text.
    """

    class Var(_Nodes.Var):
        def flatten(self, bdd=None, *arg, **kw):
            if bdd is None:
                return super(BDDNodes.Var, self).flatten(*arg, **kw)
            if self.value not in bdd.vars:
                bdd.declare(self.value)
            return bdd.var(self.value)

    class Bool(_Nodes.Bool):
        def flatten(self, bdd=None, *arg, **kw):
            if bdd is None:
                return super(BDDNodes.Bool, self).flatten(*arg, **kw)
            if self.value == ast.TRUE:
                return bdd.true
            assert self.value == ast.FALSE, self.value
            return bdd.false

    class Unary(_Nodes.Unary):
        def flatten(self, bdd=None, *arg, **kw):
            if bdd is None:
                return super(BDDNodes.Unary, self).flatten(*arg, **kw)
            x, = self.operands
            assert self.operator == ast.NOT, self.operator
            return ~ x.flatten(bdd=bdd, *arg, **kw)

    class Binary(_Nodes.Binary):
        def flatten(self, bdd=None, *arg, **kw):
            if bdd is None:
                return super(BDDNodes.Binary, self).flatten(*arg, **kw)
            u, v = (
                x.flatten(bdd=bdd, *arg, **kw)
                for x in self.operands)
            if self.operator == ast.AND:
                return u & v
            assert self.operator == ast.OR, self.operator
            return u | v


def add_tree(tree, bdd):
    """Return BDD node of syntax tree `tree`.

    Variables not yet in `bdd` are declared
    in the order that they occur in `tree`.

    @param tree: tree of `BDDNodes`
    @type bdd: `dd.autoref.BDD`
    """
    return tree.flatten(bdd=bdd)


def dnf(u, bdd):
    """Return disjunctive normal form of `u`.

    At each node, the cubes of the two cofactors
    are extended with the literal of the variable,
    except for cubes that both cofactors share.

    @type u: `dd.autoref.Function`
    @return: `list` of `dict` that map
        variable names to `bool`
    """
    memo = dict()
    return _dnf(u, bdd, memo)


def _dnf(u, bdd, memo):
    if u == bdd.false:
        return list()
    if u == bdd.true:
        return [dict()]
    if u in memo:
        return memo[u]
    var = u.var
    low = _dnf(bdd.let({var: False}, u), bdd, memo)
    high = _dnf(bdd.let({var: True}, u), bdd, memo)
    common = [c for c in low if c in high]
    cubes = [dict(c) for c in common]
    for value, half in ((False, low), (True, high)):
        for c in half:
            if c in common:
                continue
            d = dict(c)
            d[var] = value
            cubes.append(d)
    memo[u] = cubes
    return cubes


def support(u, bdd):
    """Return variables of `u` in natural order."""
    return natsort.natsorted(bdd.support(u))


def evaluate(u, assignment, bdd):
    """Return value of `u` at `assignment`.

    Variables missing from `assignment` are `False`.

    @param assignment: `dict` from names to `bool`
    @rtype: `bool`
    """
    values = {
        var: bool(assignment.get(var, False))
        for var in bdd.support(u)}
    if not values:
        return u == bdd.true
    r = bdd.let(values, u)
    assert r in (bdd.true, bdd.false), r
    return r == bdd.true

