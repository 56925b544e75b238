"""Boolean expressions with a canonical BDD."""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import logging

import natsort

from espresso.logic import ast
from espresso.logic import lexyacc
from espresso.symbolic import bdd as _bdd
from espresso.symbolic import factor as _factor


log = logging.getLogger(__name__)
nodes = _bdd.BDDNodes()
parser = lexyacc.Parser(nodes=nodes)


class BoolExpr(object):
    """Boolean expression and its BDD.

    An expression owns a syntax tree and a reference
    to a BDD manager (`dd.autoref.BDD`). The BDD is
    computed on first use and then cached. Expressions
    built from others share the manager of their left
    operand, so variables of one session are ordered
    consistently. Pass `bdd` to put expressions of
    independent origin in the same manager.

    Operators `&`, `|`, `~` build new expressions.
    """

    def __init__(self, tree, bdd=None):
        if bdd is None:
            bdd = _bdd.new_manager()
        self.tree = tree
        self.bdd = bdd
        self._node = None

    @classmethod
    def variable(cls, name, bdd=None):
        return cls(nodes.Var(name), bdd)

    @classmethod
    def constant(cls, value, bdd=None):
        s = ast.TRUE if value else ast.FALSE
        return cls(nodes.Bool(s), bdd)

    @classmethod
    def parse(cls, text, bdd=None):
        """Return expression from `text`.

        Raise `espresso.errors.ParseError` if `text`
        is not an expression.
        """
        tree = parser.parse(text)
        return cls(tree, bdd)

    @classmethod
    def from_bdd(cls, u, bdd):
        """Return factored expression of BDD node `u`."""
        cubes = _bdd.dnf(u, bdd)
        tree = _factor.factor(cubes, nodes)
        e = cls(tree, bdd)
        e._node = u
        return e

    def and_(self, other):
        other = _as_expr(other, self.bdd)
        return BoolExpr(
            nodes.Binary(ast.AND, self.tree, other.tree), self.bdd)

    def or_(self, other):
        other = _as_expr(other, self.bdd)
        return BoolExpr(
            nodes.Binary(ast.OR, self.tree, other.tree), self.bdd)

    def not_(self):
        return BoolExpr(nodes.Unary(ast.NOT, self.tree), self.bdd)

    def __and__(self, other):
        return self.and_(other)

    def __rand__(self, other):
        return _as_expr(other, self.bdd).and_(self)

    def __or__(self, other):
        return self.or_(other)

    def __ror__(self, other):
        return _as_expr(other, self.bdd).or_(self)

    def __invert__(self):
        return self.not_()

    def to_bdd(self):
        """Return BDD node in `self.bdd`.

        @rtype: `dd.autoref.Function`
        """
        if self._node is None:
            self._node = _bdd.add_tree(self.tree, self.bdd)
        return self._node

    def collect_variables(self):
        """Return names of variables in the syntax tree.

        @rtype: `list`, naturally sorted
        """
        names = set()
        stack = [self.tree]
        while stack:
            u = stack.pop()
            if u.type == 'var':
                names.add(u.value)
            elif u.type == 'operator':
                stack.extend(u.operands)
        return natsort.natsorted(names)

    def support(self):
        """Return variables that the function depends on."""
        return _bdd.support(self.to_bdd(), self.bdd)

    def node_count(self):
        """Return number of BDD nodes, including the leaf."""
        return len(self.to_bdd())

    def var_count(self):
        return len(self.bdd.support(self.to_bdd()))

    def is_true(self):
        return self.to_bdd() == self.bdd.true

    def is_false(self):
        return self.to_bdd() == self.bdd.false

    def is_terminal(self):
        """Return `True` if the function is constant."""
        return self.is_true() or self.is_false()

    def evaluate(self, assignment):
        """Return truth value for `assignment`.

        Variables missing from `assignment` are `False`.

        @param assignment: `dict` from names to `bool`
        """
        return _bdd.evaluate(self.to_bdd(), assignment, self.bdd)

    def to_dnf(self):
        """Return disjunctive normal form.

        @return: `list` of `dict` from names to `bool`
        """
        return _bdd.dnf(self.to_bdd(), self.bdd)

    def minimize(self, config=None):
        """Return equivalent expression from a minimal cover."""
        from espresso.cover import Cover
        cover = Cover.from_expr(self)
        cover = cover.minimize(config)
        r = cover.to_expr_by_index(0)
        return BoolExpr(r.tree, self.bdd)

    def equivalent_to(self, other):
        """Return `True` if `self` and `other` are equivalent.

        With a shared manager, compare BDD nodes.
        Otherwise, minimize exactly the cover with the two
        expressions as outputs, and check that every cube
        asserts both outputs or neither.
        """
        if self.bdd is other.bdd:
            return self.to_bdd() == other.to_bdd()
        from espresso.config import EspressoConfig
        from espresso.cover import Cover
        from espresso.cover import CoverType
        if not self.collect_variables() and not other.collect_variables():
            return self.evaluate(dict()) == other.evaluate(dict())
        cover = Cover(CoverType.F)
        cover.add_expr(self, 'expr1')
        cover.add_expr(other, 'expr2')
        config = EspressoConfig(skip_make_sparse=True)
        cover = cover.minimize_exact(config)
        for _, outputs in cover.cubes_iter():
            if outputs[0] != outputs[1]:
                return False
        return True

    def __str__(self):
        return self.tree.flatten()

    def __repr__(self):
        return 'BoolExpr({s!r})'.format(s=str(self))


def _as_expr(x, bdd):
    if isinstance(x, BoolExpr):
        return x
    if isinstance(x, bool):
        return BoolExpr.constant(x, bdd)
    raise TypeError(x)
