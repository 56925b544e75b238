#!/usr/bin/env python
"""Parser for Boolean expressions.

Syntax:

    expr := expr ('+' | '|') expr
          | expr ('*' | '&') expr
          | ('~' | '!') expr
          | '(' expr ')'
          | NAME | '0' | '1' | 'true' | 'false'

Negation binds tighter than conjunction,
which binds tighter than disjunction.
"""
# Copyright 2014-2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
from espresso import errors
from espresso.logic import ast
from espresso.logic.ast import Nodes
import astutils


TABMODULE = 'espresso.logic.expr_parsetab'


class Lexer(astutils.Lexer):
    """Token rules to build lexer for Boolean expressions."""

    reserved = {
        'FALSE': 'FALSE',
        'False': 'FALSE',
        'false': 'FALSE',
        'TRUE': 'TRUE',
        'True': 'TRUE',
        'true': 'TRUE'}
    delimiters = ['LPAREN', 'RPAREN']
    operators = ['NOT', 'AND', 'OR']
    misc = ['NAME', 'NUMBER']

    def t_NAME(self, t):
        r'[A-Za-z_][A-Za-z0-9_]*'
        t.type = self.reserved.get(t.value, 'NAME')
        return t

    def t_AND(self, t):
        r'\*|\&'
        t.value = ast.AND
        return t

    def t_OR(self, t):
        r'\+|\|'
        t.value = ast.OR
        return t

    def t_NOT(self, t):
        r'~|\!'
        t.value = ast.NOT
        return t

    t_LPAREN = r'\('
    t_RPAREN = r'\)'
    t_NUMBER = r'\d+'
    t_ignore = ' \t'

    def t_newline(self, t):
        r'\n+'
        t.lexer.lineno += t.value.count('\n')

    def t_error(self, t):
        raise errors.ParseError(
            t.lexer.lexdata, t.lexpos,
            'illegal character "{c}"'.format(c=t.value[0]))


class Parser(astutils.Parser):
    """Production rules to build parser for Boolean expressions."""

    tabmodule = TABMODULE
    start = 'expr'
    # lowest to highest
    precedence = (
        ('left', 'OR'),
        ('left', 'AND'),
        ('right', 'NOT'))
    Lexer = Lexer
    nodes = Nodes

    def p_binary(self, p):
        """expr : expr AND expr
                | expr OR expr
        """
        p[0] = self.nodes.Binary(p[2], p[1], p[3])

    def p_not(self, p):
        """expr : NOT expr"""
        p[0] = self.nodes.Unary(p[1], p[2])

    def p_paren(self, p):
        """expr : LPAREN expr RPAREN"""
        p[0] = p[2]

    def p_var(self, p):
        """expr : NAME"""
        p[0] = self.nodes.Var(p[1])

    def p_true(self, p):
        """expr : TRUE"""
        p[0] = self.nodes.Bool(ast.TRUE)

    def p_false(self, p):
        """expr : FALSE"""
        p[0] = self.nodes.Bool(ast.FALSE)

    def p_number(self, p):
        """expr : NUMBER"""
        if p[1] not in (ast.TRUE, ast.FALSE):
            raise errors.ParseError(
                p.lexer.lexdata, p.lexpos(1),
                'expected 0 or 1, found "{n}"'.format(n=p[1]))
        p[0] = self.nodes.Bool(p[1])

    def p_error(self, p):
        data = self._lexer.lexer.lexdata
        if p is None:
            raise errors.ParseError(
                data, len(data), 'unexpected end of input')
        raise errors.ParseError(
            data, p.lexpos,
            'unexpected "{t}"'.format(t=p.value))


def _rewrite_tables(outputdir='./'):
    astutils.rewrite_tables(Parser, TABMODULE, outputdir)


if __name__ == '__main__':
    import logging
    log = logging.getLogger('astutils')
    log.setLevel(logging.DEBUG)
    log.addHandler(logging.StreamHandler())
    _rewrite_tables()
