"""Removal of redundant cubes from a cover."""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import logging

from espresso.twolevel import mincov
from espresso.twolevel import unate


log = logging.getLogger(__name__)


def irredundant(f, d, shape, config, exact=False):
    """Return subset of `f` that with `d` still covers `f`.

    Cubes are classified as:

      - relatively essential: not covered by the
        other cubes of `f` and `d`
      - totally redundant: covered by the relatively
        essential cubes and `d`
      - partially redundant: the rest

    A minimum subset of the partially redundant cubes
    is selected by solving a covering problem.

    @param exact: solve covering problem exactly
    @rtype: `list`
    """
    if config.debug:
        log.debug('---- irredundant ----')
    f = list(f)
    d = list(d)
    essential, redundant = classify(f, d, shape)
    fixed = essential + d
    partial = [
        c for c in redundant
        if not unate.cube_is_covered(c, fixed, shape)]
    if config.debug:
        log.debug((
            '{e} relatively essential, {t} totally redundant, '
            '{p} partially redundant').format(
                e=len(essential),
                t=len(redundant) - len(partial),
                p=len(partial)))
    if not partial:
        r = [c for c in f if c in essential]
        if config.debug:
            log.debug('==== irredundant ====')
        return r
    selectable = list(enumerate(partial))
    rows = set()
    for c in partial:
        rows.update(unate.covering_rows(
            c, fixed, selectable, shape))
    weights = [1] * len(partial)
    chosen = mincov.mincov(rows, weights, heuristic=not exact)
    keep = set(essential)
    keep.update(partial[i] for i in chosen)
    r = _ordered_subset(f, keep)
    if config.debug:
        log.debug('irredundant: {n} cubes to {m}'.format(
            n=len(f), m=len(r)))
        log.debug('==== irredundant ====')
    return r


def classify(f, d, shape):
    """Return relatively essential and redundant cubes of `f`.

    @rtype: `tuple(list, list)`
    """
    essential = list()
    redundant = list()
    for i, c in enumerate(f):
        others = f[:i] + f[i + 1:] + d
        if unate.cube_is_covered(c, others, shape):
            redundant.append(c)
        else:
            essential.append(c)
    return essential, redundant


def _ordered_subset(f, keep):
    """Return cubes of `f` that are in `keep`, once each."""
    r = list()
    seen = set()
    for c in f:
        if c in keep and c not in seen:
            r.append(c)
            seen.add(c)
    return r
