"""Algebraic factoring of sums of products.

Repeatedly factor out the literal that most
product terms share, for example
`a * b + a * c + d` becomes `a * (b + c) + d`.
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import natsort

from espresso.logic import ast


def factor(cubes, nodes):
    """Return syntax tree of the disjunction of `cubes`.

    @param cubes: `list` of `dict` that map
        variable names to `bool`
    @param nodes: container of node classes
    """
    terms = [dict(c) for c in cubes]
    return _factor(terms, nodes)


def _factor(terms, nodes):
    if not terms:
        return nodes.Bool(ast.FALSE)
    if any(not t for t in terms):
        return nodes.Bool(ast.TRUE)
    lit = _most_shared_literal(terms)
    if lit is None:
        return ast.disj(nodes, [product(t, nodes) for t in terms])
    var, value = lit
    inside = list()
    outside = list()
    for t in terms:
        if t.get(var) == value:
            t = dict(t)
            del t[var]
            inside.append(t)
        else:
            outside.append(t)
    u = ast.literal(nodes, var, value)
    rest = _factor(inside, nodes)
    if rest.type != 'bool':
        u = nodes.Binary(ast.AND, u, rest)
    if not outside:
        return u
    return nodes.Binary(ast.OR, u, _factor(outside, nodes))


def _most_shared_literal(terms):
    """Return literal in most terms, or `None` if none in two.

    Ties are broken by the natural order of names,
    with negative literals first.
    """
    counts = dict()
    for t in terms:
        for lit in t.items():
            counts[lit] = counts.get(lit, 0) + 1
    shared = [lit for lit, n in counts.items() if n > 1]
    if not shared:
        return None
    shared = natsort.natsorted(shared)
    return max(shared, key=lambda lit: counts[lit])


def product(term, nodes):
    """Return conjunction of the literals in `term`."""
    names = natsort.natsorted(term)
    return ast.conj(
        nodes, [ast.literal(nodes, k, term[k]) for k in names])
