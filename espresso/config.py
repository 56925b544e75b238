"""Options that control minimization."""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import random


DEFAULTS = dict(
    # logging
    debug=False,
    verbose_debug=False,
    trace=False,
    summary=False,
    # algorithm
    remove_essential=True,
    force_irredundant=True,
    unwrap_onset=False,
    single_expand=False,
    use_super_gasp=False,
    use_random_order=False,
    skip_make_sparse=False,
    # budgets
    max_iterations=None,
    max_gasp_rounds=None,
    seed=0,
    verify=False)


class EspressoConfig(object):
    """Options for one call of the minimizer.

    Pass an instance to `Cover.minimize` or to the
    functions in `espresso.twolevel.minimize`.
    The minimizer reads options only from the instance
    it receives.

    Logging:

      - `debug`: cube counts after each phase
      - `verbose_debug`: also each cube
      - `trace`: cost after each iteration
      - `summary`: statistics at the end

    Algorithm:

      - `remove_essential`: set aside essential primes
        before the main loop
      - `force_irredundant`: final irredundant pass
      - `unwrap_onset`: split multiple-output cubes
        before the first expansion
      - `single_expand`: at most one covering raise per cube
      - `use_super_gasp`: gasp adds all primes found
      - `use_random_order`: shuffle cube orderings
      - `skip_make_sparse`: omit the sparsity pass

    Budgets (`None` means unbounded):

      - `max_iterations`: rounds of reduce, expand, irredundant
      - `max_gasp_rounds`: rounds of gasp
      - `seed`: for `use_random_order`
      - `verify`: assert that the result is equivalent to the input
    """

    def __init__(self, **kw):
        self.__dict__.update(DEFAULTS)
        self.configure(**kw)

    def configure(self, **kw):
        """Set options and return their previous values.

        @return: `dict` that maps each given option to its old value
        """
        unknown = set(kw).difference(DEFAULTS)
        if unknown:
            raise TypeError(
                'unknown options: {u}'.format(u=sorted(unknown)))
        old = {k: getattr(self, k) for k in kw}
        self.__dict__.update(kw)
        return old

    def copy(self):
        return type(self)(**self.as_dict())

    def as_dict(self):
        return {k: getattr(self, k) for k in DEFAULTS}

    def rng(self):
        """Return a fresh random number generator from `seed`."""
        return random.Random(self.seed)

    def __eq__(self, other):
        if not isinstance(other, EspressoConfig):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        changed = ', '.join(
            '{k}={v!r}'.format(k=k, v=v)
            for k, v in self.as_dict().items()
            if v != DEFAULTS[k])
        return 'EspressoConfig({c})'.format(c=changed)
