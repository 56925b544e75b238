"""Minimum weight unate covering by branch and bound.

A covering problem is a collection of rows, each
a set of columns. A solution is a set of columns
that meets every row. The problem is split into
independent blocks, and each block is reduced to
its cyclic core by removing essential columns,
dominated rows and dominated columns.


References
==========

Olivier Coudert
    "Two-level logic minimization: An overview"
    Integration, the VLSI Journal
    Vol.17, No.2, Oct 1994, pp.97--140
    http://dx.doi.org/10.1016/0167-9260(94)00007-7

Olivier Coudert
    "On solving covering problems"
    33rd Design Automation Conference, 1996, pp.197--202
"""
# Copyright 2016-2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import logging
import time

import humanize
import networkx as nx


log = logging.getLogger(__name__)


def mincov(rows, weights, heuristic=False):
    """Return set of columns of minimum weight that meets all `rows`.

    @param rows: each row is a set of columns
    @type rows: iterable of `frozenset` of `int`
    @param weights: positive weight of each column
    @type weights: `list` or `dict`
    @param heuristic: if `True`, then return
        a greedy solution
    @rtype: `set`
    """
    rows = [frozenset(r) for r in rows]
    assert all(rows), 'a row that no column meets'
    if not rows:
        return set()
    t0 = time.time()
    cover = set()
    blocks = list(_blocks(rows))
    log.debug('{n} independent blocks'.format(n=len(blocks)))
    for block in blocks:
        if heuristic:
            sub = _some_cover(block, weights)
        else:
            sub = _exact_cover(block, weights)
        cover.update(sub)
    assert _is_cover(cover, rows), (cover, rows)
    t1 = time.time()
    log.debug('mincov with {m} rows took {dt}'.format(
        m=humanize.intcomma(len(rows)),
        dt=humanize.naturaldelta(t1 - t0)))
    return cover


def _blocks(rows):
    """Yield groups of rows that share no columns."""
    g = nx.Graph()
    for i, row in enumerate(rows):
        g.add_node(('row', i))
        g.add_edges_from((('row', i), ('col', c)) for c in row)
    components = sorted(
        (sorted(i for kind, i in comp if kind == 'row')
         for comp in nx.connected_components(g)),
        key=lambda x: x[0])
    for comp in components:
        yield [rows[i] for i in comp]


def _exact_cover(rows, weights):
    """Return minimum cover of `rows` by branch and bound."""
    log.info('---- branch and bound ----')
    bab = _BranchAndBound(weights)
    greedy = _some_cover(rows, weights)
    bab.upper_bound = _cost(greedy, weights)
    bab.best_cover = greedy
    _traverse(rows, frozenset(), 0, bab)
    log.info('==== branch and bound ====')
    return set(bab.best_cover)


def _traverse(rows, path, path_cost, bab):
    """Compute cyclic core and terminate, prune, or branch."""
    essential, core = cyclic_core(rows, bab.weights)
    cost_ess = _cost(essential, bab.weights)
    core_lb = _lower_bound(core, bab.weights)
    branch_lb = path_cost + cost_ess + core_lb
    if not core:
        if branch_lb < bab.upper_bound:
            bab.upper_bound = branch_lb
            bab.best_cover = path | essential
        return
    # set global lower bound only once at the top,
    # farther below the bounds are local
    if bab.lower_bound is None:
        bab.lower_bound = branch_lb
    if branch_lb >= bab.upper_bound:
        log.debug('prune')
        return
    _branch(core, path | essential, path_cost + cost_ess, bab)


def _branch(rows, path, path_cost, bab):
    col = _branching_column(rows, bab.weights)
    log.debug('branch on column {c}'.format(c=col))
    # left: select `col`
    left = [r for r in rows if col not in r]
    _traverse(
        left, path | {col},
        path_cost + bab.weights[col], bab)
    # right: discard `col`
    right = [r - {col} for r in rows]
    if all(right):
        _traverse(right, path, path_cost, bab)


def cyclic_core(rows, weights):
    """Return essential columns and the remaining rows.

    Iterate removal of essential columns, dominated
    rows and dominated columns until nothing changes.

    @rtype: `tuple(set, list)`
    """
    essential = set()
    rows = list(rows)
    while True:
        old = rows
        ess = {next(iter(r)) for r in rows if len(r) == 1}
        if ess:
            essential |= ess
            rows = [r for r in rows if not (r & ess)]
        rows = _remove_dominated_rows(rows)
        rows = _remove_dominated_columns(rows, weights)
        if rows == old:
            break
    return essential, rows


def _remove_dominated_rows(rows):
    """Return rows that contain no other row."""
    rows = sorted(set(rows), key=lambda r: (len(r), sorted(r)))
    kept = list()
    for r in rows:
        if not any(k <= r for k in kept):
            kept.append(r)
    return kept


def _remove_dominated_columns(rows, weights):
    """Remove each column that another column dominates.

    Column `b` dominates column `a` if `b` meets
    every row that `a` meets and costs no more.
    Of two equal columns the one with smaller
    index is kept.
    """
    meets = dict()
    for i, r in enumerate(rows):
        for c in r:
            meets.setdefault(c, set()).add(i)
    cols = sorted(meets)
    removed = set()
    for a in cols:
        for b in cols:
            if a == b or b in removed:
                continue
            if not meets[a] <= meets[b]:
                continue
            if weights[b] > weights[a]:
                continue
            tie = (meets[a] == meets[b] and
                   weights[a] == weights[b])
            if tie and a < b:
                continue
            removed.add(a)
            break
    if not removed:
        return rows
    return [r - removed for r in rows]


def _lower_bound(rows, weights):
    """Return lower bound from disjoint rows.

    Greedily picks rows that share no columns,
    shortest first. Each needs a different column.
    """
    bound = 0
    used = set()
    for r in sorted(rows, key=lambda r: (len(r), sorted(r))):
        if r & used:
            continue
        used |= r
        bound += min(weights[c] for c in r)
    return bound


def _some_cover(rows, weights):
    """Return a cover computed greedily, without redundant columns."""
    cover = set()
    all_rows = list(rows)
    rows = list(rows)
    while rows:
        essential, rows = cyclic_core(rows, weights)
        cover |= essential
        if not rows:
            break
        col = _branching_column(rows, weights)
        cover.add(col)
        rows = [r for r in rows if col not in r]
    # drop redundant columns, most expensive first
    for c in sorted(cover, key=lambda c: (- weights[c], - c)):
        rest = cover - {c}
        if _is_cover(rest, all_rows):
            cover = rest
    return cover


def _branching_column(rows, weights):
    """Return column that meets most rows per unit of weight.

    Ties are broken by smaller index.
    """
    counts = dict()
    for r in rows:
        for c in r:
            counts[c] = counts.get(c, 0) + 1
    return min(
        counts,
        key=lambda c: (- counts[c] / weights[c], c))


def _cost(cover, weights):
    if cover is None:
        return float('inf')
    return sum(weights[c] for c in cover)


def _is_cover(cover, rows):
    return all(r & cover for r in rows)


class _BranchAndBound(object):
    """A data structure that stores useful values.

    It helps avoid passing many arguments in each
    function call during the recursion.
    Attributes:

    - `lower_bound`: global lower bound
    - `upper_bound`: global upper bound (feasible)
    - `best_cover`: cover that attains `upper_bound`
    - `weights`: cost of each column
    """

    def __init__(self, weights):
        self._lower_bound = None
        self._upper_bound = None
        self.best_cover = None  # found so far
        self.weights = weights

    def _assert_invariant(self, lower=None, upper=None):
        """Raise `AssertionError` if lower > upper bound."""
        if lower is None:
            lower = self._lower_bound
        if upper is None:
            upper = self._upper_bound
        if lower is None or upper is None:
            return
        assert lower <= upper, (lower, upper)

    @property
    def lower_bound(self):
        return self._lower_bound

    @lower_bound.setter
    def lower_bound(self, c):
        assert c >= 0, c
        # only initialize global lower bound
        assert self._lower_bound is None, self._lower_bound
        self._assert_invariant(lower=c)
        log.info('global lower bound: {c}'.format(c=c))
        self._lower_bound = c

    @property
    def upper_bound(self):
        return self._upper_bound

    @upper_bound.setter
    def upper_bound(self, c):
        assert c > 0, c
        self._assert_invariant(upper=c)
        if self._upper_bound is None:
            log.info(
                'initialized upper bound to {c}'.format(
                    c=c))
        elif c < self._upper_bound:
            log.info((
                'improved upper bound from '
                '{old} to {new}').format(
                    old=self._upper_bound,
                    new=c))
        self._upper_bound = c
