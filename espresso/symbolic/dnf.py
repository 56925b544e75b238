"""Disjunctive normal forms over named variables.

A `Dnf` sits between BDDs and covers: conversions
to it go through the BDD of an expression, so
equivalent expressions in one manager give the
same cubes.
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import natsort

from espresso.symbolic import bdd as _bdd
from espresso.symbolic import factor as _factor
from espresso.symbolic.expression import BoolExpr
from espresso.symbolic.expression import nodes as _nodes


class Dnf(object):
    """Sum of products.

    Each cube is a `dict` that maps a variable name
    to `True` (positive literal) or `False` (negated).
    An empty `dict` is the constant true cube,
    and no cubes is the constant false.

    Attributes:

      - `cubes`: `list` of `dict`
      - `variables`: names that occur in `cubes`,
        naturally sorted
    """

    def __init__(self, cubes=None):
        if cubes is None:
            cubes = list()
        self.cubes = [dict(c) for c in cubes]
        names = set()
        for c in self.cubes:
            names.update(c)
        self.variables = natsort.natsorted(names)

    @classmethod
    def from_bdd(cls, u, bdd):
        """Return cubes of BDD node `u`.

        @type u: `dd.autoref.Function`
        """
        return cls(_bdd.dnf(u, bdd))

    @classmethod
    def from_expr(cls, expr):
        """Return cubes of the BDD of `expr`.

        @type expr: `BoolExpr`
        """
        return cls.from_bdd(expr.to_bdd(), expr.bdd)

    def to_expr(self, bdd=None):
        """Return factored expression of the cubes.

        @param bdd: manager for the expression,
            by default a fresh one
        @rtype: `BoolExpr`
        """
        tree = _factor.factor(self.cubes, _nodes)
        return BoolExpr(tree, bdd)

    def to_bdd(self, bdd):
        """Return BDD node of the disjunction of the cubes.

        @type bdd: `dd.autoref.BDD`
        """
        u = bdd.false
        for c in self.cubes:
            v = bdd.true
            for var, value in c.items():
                if var not in bdd.vars:
                    bdd.declare(var)
                x = bdd.var(var)
                v &= x if value else ~ x
            u |= v
        return u

    def is_empty(self):
        return not self.cubes

    def __len__(self):
        return len(self.cubes)

    def __iter__(self):
        return iter(self.cubes)

    def __eq__(self, other):
        if not isinstance(other, Dnf):
            return NotImplemented
        return self.cubes == other.cubes

    def __repr__(self):
        return 'Dnf({c!r})'.format(c=self.cubes)
