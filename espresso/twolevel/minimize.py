"""Heuristic and exact two-level minimization of covers.

The heuristic loop is that of Espresso-II:

  1. expand to primes, then remove redundant primes
  2. set aside the essential primes
  3. iterate reduce, expand, irredundant
     while the cost decreases
  4. try a last gasp, and if it helps, go to 3
  5. restore the essential primes, make outputs sparse
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import collections
import logging
import time

import humanize

from espresso import errors
from espresso.config import EspressoConfig
from espresso.twolevel import complement as _compl
from espresso.twolevel import cube as _cube
from espresso.twolevel import essential as _ess
from espresso.twolevel import exact as _exact
from espresso.twolevel import expand as _expand
from espresso.twolevel import irredundant as _irr
from espresso.twolevel import reduce as _reduce
from espresso.twolevel import unate


log = logging.getLogger(__name__)


class Cost(collections.namedtuple(
        'Cost', ['cubes', 'inputs', 'outputs'])):
    """Number of cubes, input literals, and output bits."""

    @property
    def total(self):
        return self.inputs + self.outputs

    def key(self):
        return (self.cubes, self.total)

    def __str__(self):
        return '{c} cubes, {i} input literals, {o} output bits'.format(
            c=self.cubes, i=self.inputs, o=self.outputs)


def cost(cubes, shape):
    """Return `Cost` of cover `cubes`."""
    inputs = sum(_cube.input_literals(c, shape) for c in cubes)
    outputs = sum(_cube.output_count(c, shape) for c in cubes)
    return Cost(len(cubes), inputs, outputs)


def _improved(new, old):
    return new.key() < old.key()


def espresso(f, d, r, shape, config=None):
    """Return minimized cover of ON-set `f`.

    @param f: ON-set cubes
    @param d: don't care cubes
    @param r: OFF-set cubes. If `None`, then
        computed as complement of `f | d`.
    @type shape: `Shape`
    @type config: `EspressoConfig`
    @return: cubes that cover `f` and lie in `f | d`
    @rtype: `list`
    """
    if config is None:
        config = EspressoConfig()
    t0 = time.time()
    f = [c for c in f if not _cube.is_empty(c, shape)]
    d = [c for c in d if not _cube.is_empty(c, shape)]
    f_input = list(f)
    if r is None:
        r = _compl.complement(f + d, shape)
    rng = config.rng()
    initial = cost(f, shape)
    if config.summary or config.trace:
        log.info('initial: {c}'.format(c=initial))
    if not f or not shape.nout:
        return f
    if not r:
        # f | d is a tautology
        return [shape.full]
    if config.unwrap_onset and shape.nout > 1:
        f = _cube.unravel(f, shape)
    f = _expand.expand(f, r, shape, config, rng)
    f = _irr.irredundant(f, d, shape, config)
    _trace('expand, irredundant', f, shape, config)
    ess = list()
    if config.remove_essential:
        ess, f = _ess.essentials(f, d, shape)
        d = d + ess
        _trace('essentials', f, shape, config)
    iterations = 0
    gasps = 0
    while True:
        # reduce, expand, irredundant
        while f:
            iterations += 1
            if (config.max_iterations is not None and
                    iterations > config.max_iterations):
                raise errors.BudgetError(
                    'iteration', config.max_iterations)
            old = cost(f, shape)
            f = _reduce.reduce(f, d, shape, config, rng)
            f = _expand.expand(f, r, shape, config, rng)
            f = _irr.irredundant(f, d, shape, config)
            _trace('iteration {i}'.format(i=iterations),
                   f, shape, config)
            if not _improved(cost(f, shape), old):
                break
        if not f:
            break
        gasps += 1
        if (config.max_gasp_rounds is not None and
                gasps > config.max_gasp_rounds):
            raise errors.BudgetError('gasp', config.max_gasp_rounds)
        old = cost(f, shape)
        if config.use_super_gasp:
            g = _ess.super_gasp(f, d, r, shape, config, rng)
        else:
            g = _ess.last_gasp(f, d, r, shape, config, rng)
        _trace('gasp', g, shape, config)
        if not _improved(cost(g, shape), old):
            break
        f = g
    # restore essential primes
    if ess:
        d = d[:len(d) - len(ess)]
        f = f + ess
    if config.force_irredundant:
        f = _irr.irredundant(f, d, shape, config)
    if not config.skip_make_sparse:
        f = _ess.make_sparse(f, d, r, shape, config)
        _trace('make sparse', f, shape, config)
    if config.verify:
        verify(f, f_input, d, shape)
    if config.summary:
        t1 = time.time()
        log.info((
            'espresso: {c} after {i} iterations and {g} gasps, '
            'took {dt}').format(
                c=cost(f, shape),
                i=humanize.intcomma(iterations),
                g=humanize.intcomma(gasps),
                dt=humanize.naturaldelta(t1 - t0)))
    return f


def espresso_exact(f, d, r, shape, config=None):
    """Return minimum cover of ON-set `f`.

    Same arguments as `espresso`.
    """
    if config is None:
        config = EspressoConfig()
    t0 = time.time()
    f = [c for c in f if not _cube.is_empty(c, shape)]
    d = [c for c in d if not _cube.is_empty(c, shape)]
    if not f or not shape.nout:
        return f
    f_input = list(f)
    g = _exact.minimize_exact(f, d, shape, config)
    if g and not config.skip_make_sparse:
        if r is None:
            r = _compl.complement(f + d, shape)
        g = _ess.make_sparse(g, d, r, shape, config)
    if config.verify:
        verify(g, f_input, d, shape)
    if config.summary:
        t1 = time.time()
        log.info('exact: {c}, took {dt}'.format(
            c=cost(g, shape),
            dt=humanize.naturaldelta(t1 - t0)))
    return g


def verify(f, f_input, d, shape):
    """Assert that `f` and `f_input` agree outside of `d`."""
    for c in f:
        assert unate.cube_is_covered(c, f_input + d, shape), (
            'cube outside ON and DC sets',
            _cube.cube_to_str(c, shape))
    for c in f_input:
        assert unate.cube_is_covered(c, f + d, shape), (
            'ON-set cube not covered',
            _cube.cube_to_str(c, shape))


def _trace(phase, f, shape, config):
    if not config.trace:
        return
    log.info('{phase}: {c}'.format(
        phase=phase, c=cost(f, shape)))
