"""Print a minimal formula from a BDD.

Use this to read what function a BDD represents,
as a short sum of products.
"""
import dd.autoref as _bdd

from espresso import BoolExpr
from espresso import Cover


def print_minimal_formula():
    """How to see what expression a BDD represents."""
    bdd = _bdd.BDD()
    bdd.declare('x1', 'x2', 'x3', 'x10')
    s = r'''
        (x1 /\ x2) \/ (x1 /\ ~ x2 /\ x3)
        \/ (~ x1 /\ x3 /\ x10) \/ (x1 /\ x10)
        '''
    u = bdd.add_expr(s)
    cover = Cover.from_bdd(u, bdd, output_name='f')
    print(cover.to_pla_string())
    cover = cover.minimize()
    print(cover.to_pla_string())
    expr = cover.to_expr('f')
    print(expr)
    expr = BoolExpr.from_bdd(u, bdd)
    assert expr.equivalent_to(cover.to_expr('f'))


if __name__ == '__main__':
    print_minimal_formula()
