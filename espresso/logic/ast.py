"""Abstract syntax tree classes for Boolean expressions."""
# Copyright 2014-2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import astutils


AND = '&'
OR = '|'
NOT = '~'
TRUE = '1'
FALSE = '0'
# printed forms
SYMBOLS = {AND: '*', OR: '+'}


class Nodes(object):
    """Container of AST node classes for Boolean expressions."""

    Terminal = astutils.Terminal

    class Var(astutils.Terminal):
        """Variable identifier."""

        def __init__(self, value, dtype='var'):
            super(Nodes.Var, self).__init__(value, dtype)

    class Bool(astutils.Terminal):
        """Boolean constant, `'1'` or `'0'`."""

        def __init__(self, value, dtype='bool'):
            super(Nodes.Bool, self).__init__(value, dtype)

    class Unary(astutils.Operator):
        """Negation."""

        def flatten(self, *arg, **kw):
            x, = self.operands
            s = x.flatten(*arg, **kw)
            if x.type == 'operator' and x.operator != NOT:
                s = '({s})'.format(s=s)
            return NOT + s

    class Binary(astutils.Operator):
        """Conjunction or disjunction."""

        def flatten(self, *arg, **kw):
            # parenthesize only where precedence requires
            parts = list()
            for x in self.operands:
                s = x.flatten(*arg, **kw)
                if (self.operator == AND and
                        getattr(x, 'operator', None) == OR):
                    s = '({s})'.format(s=s)
                parts.append(s)
            sep = ' {op} '.format(op=SYMBOLS[self.operator])
            return sep.join(parts)


def conj(nodes, operands):
    """Return conjunction of `operands` as a balanced tree.

    @param nodes: container of node classes, like `Nodes`
    @type operands: `list` of nodes
    """
    return _balanced(nodes, AND, operands, TRUE)


def disj(nodes, operands):
    """Return disjunction of `operands` as a balanced tree."""
    return _balanced(nodes, OR, operands, FALSE)


def _balanced(nodes, op, operands, empty):
    operands = list(operands)
    if not operands:
        return nodes.Bool(empty)
    while len(operands) > 1:
        paired = [
            nodes.Binary(op, a, b)
            for a, b in zip(operands[0::2], operands[1::2])]
        if len(operands) % 2:
            paired.append(operands[-1])
        operands = paired
    return operands[0]


def literal(nodes, name, value):
    """Return `name` if `value`, else its negation."""
    u = nodes.Var(name)
    if value:
        return u
    return nodes.Unary(NOT, u)
