"""Covers of multiple-output Boolean functions.

A `Cover` is a list of cubes over named inputs and outputs.
Each cube plays one of three roles: ON-set (`'F'`),
don't care set (`'D'`), OFF-set (`'R'`). The cover type
says which roles a cover has.

Example:

```python
from espresso import Cover, CoverType

cover = Cover(CoverType.F)
cover.add_cube([False, True], [True])
cover.add_cube([True, True], [True])
cover = cover.minimize()
print(cover.to_expr_by_index(0))  # x1
```
"""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import collections
import enum
import logging

from espresso import errors
from espresso.config import EspressoConfig
from espresso.symbolic import bdd as _bdd
from espresso.symbolic import factor as _factor
from espresso.symbolic.dnf import Dnf
from espresso.symbolic.expression import BoolExpr
from espresso.symbolic.expression import nodes as _nodes
from espresso.twolevel import complement as _compl
from espresso.twolevel import cube as _cube
from espresso.twolevel import minimize as _min
# inline:
# from espresso import pla


log = logging.getLogger(__name__)
ON = 'F'
DC = 'D'
OFF = 'R'
INPUT_PREFIX = 'x'
OUTPUT_PREFIX = 'y'


class CoverType(enum.Enum):
    """Which roles the cubes of a cover play."""

    F = 1
    FD = 3
    FR = 5
    FDR = 7

    @property
    def has_f(self):
        return bool(self.value & 1)

    @property
    def has_d(self):
        return bool(self.value & 2)

    @property
    def has_r(self):
        return bool(self.value & 4)

    @property
    def pla_name(self):
        return self.name.lower()

    @classmethod
    def from_pla_name(cls, name):
        """Return type for `name` in `'f', 'fd', 'fr', 'fdr'`."""
        return cls[name.upper()]


Cube = collections.namedtuple('Cube', ['inputs', 'outputs', 'kind'])


class Cover(object):
    """Multiple-output Boolean function as a list of cubes.

    Minimization returns a new cover,
    and leaves the receiver unchanged.

    @param cover_type: `CoverType`
    """

    def __init__(self, cover_type=CoverType.F):
        self._cover_type = CoverType(cover_type)
        self._shape = _cube.Shape(0, 0)
        self._input_labels = None
        self._output_labels = None
        # list of `(kind, cube)`
        self._cubes = list()

    @classmethod
    def with_labels(cls, cover_type, input_labels, output_labels):
        """Return empty cover with named inputs and outputs.

        The numbers of labels fix the shape of the cover.
        """
        input_labels = [str(x) for x in input_labels]
        output_labels = [str(x) for x in output_labels]
        _assert_unique(input_labels, 'input')
        _assert_unique(output_labels, 'output')
        cover = cls(cover_type)
        cover._shape = _cube.Shape(
            len(input_labels), len(output_labels))
        cover._input_labels = input_labels
        cover._output_labels = output_labels
        return cover

    @classmethod
    def _from_cubes(
            cls, cover_type, shape, cubes,
            input_labels=None, output_labels=None):
        """Return cover of `(kind, cube)` pairs over `shape`."""
        cover = cls(cover_type)
        cover._shape = shape
        cover._input_labels = input_labels
        cover._output_labels = output_labels
        cover._cubes = list(cubes)
        return cover

    @property
    def num_inputs(self):
        return self._shape.nin

    @property
    def num_outputs(self):
        return self._shape.nout

    @property
    def num_cubes(self):
        """Number of cubes that `cubes_iter` yields."""
        if self._cover_type is CoverType.F:
            return sum(1 for kind, _ in self._cubes if kind == ON)
        return len(self._cubes)

    @property
    def cover_type(self):
        return self._cover_type

    @property
    def input_labels(self):
        """Input names, or `None` if none were given."""
        if self._input_labels is None:
            return None
        return list(self._input_labels)

    @property
    def output_labels(self):
        """Output names, or `None` if none were given."""
        if self._output_labels is None:
            return None
        return list(self._output_labels)

    @property
    def shape(self):
        return self._shape

    def __len__(self):
        return self.num_cubes

    def add_cube(self, inputs, outputs):
        """Append cube with literals `inputs` and `outputs`.

        Inputs are `True`, `False`, or `None` (absent).
        Outputs are `True` (ON-set), `False` (OFF-set),
        or `None` (don't care). A role that the cover
        type lacks is ignored. If the cube is wider than
        the cover, then the cover grows, unless it has
        labels (then `CubeShapeMismatch` is raised).
        Narrower cubes are padded with absent inputs
        and unset outputs.
        """
        inputs = list(inputs)
        outputs = [None if x is None else bool(x) for x in outputs]
        nin = len(inputs)
        nout = len(outputs)
        if self._input_labels is not None and nin > self._shape.nin:
            raise errors.CubeShapeMismatch(self._shape.nin, nin)
        if self._output_labels is not None and nout > self._shape.nout:
            raise errors.CubeShapeMismatch(
                self._shape.nout, nout, what='outputs')
        self._grow(max(nin, self._shape.nin), max(nout, self._shape.nout))
        shape = self._shape
        inputs.extend([None] * (shape.nin - nin))
        base = _cube.cube_from_literals(
            inputs, [False] * shape.nout, shape)
        roles = (
            (ON, True, self._cover_type.has_f),
            (DC, None, self._cover_type.has_d),
            (OFF, False, self._cover_type.has_r))
        for kind, value, present in roles:
            if not present:
                continue
            bits = 0
            for j, x in enumerate(outputs):
                if x is value:
                    bits |= shape.output_bit(j)
            if bits:
                self._cubes.append((kind, base | bits))

    def _grow(self, nin, nout):
        old = self._shape
        if (nin, nout) == (old.nin, old.nout):
            return
        new = _cube.Shape(nin, nout)
        self._cubes = [
            (kind, _cube.regrow(c, old, new))
            for kind, c in self._cubes]
        self._shape = new

    def cubes(self):
        """Return `list` of `Cube` in insertion order.

        Each `Cube` has input literals (`None` if absent),
        output values (`bool`), and the role (`'F'`, `'D'`, `'R'`).
        """
        r = list()
        for kind, c in self._cubes:
            inputs, outputs = _cube.cube_to_literals(c, self._shape)
            r.append(Cube(inputs, outputs, kind))
        return r

    def cubes_iter(self):
        """Yield `(inputs, outputs)` of each cube.

        For covers of type F, only ON-set cubes.
        """
        for kind, c in self._cubes:
            if self._cover_type is CoverType.F and kind != ON:
                continue
            yield _cube.cube_to_literals(c, self._shape)

    def on_set(self):
        """Return ON-set cubes as `int`."""
        return [c for kind, c in self._cubes if kind == ON]

    def dc_set(self):
        return [c for kind, c in self._cubes if kind == DC]

    def off_set(self):
        return [c for kind, c in self._cubes if kind == OFF]

    def minimize(self, config=None):
        """Return cover minimized by the Espresso heuristic.

        @type config: `EspressoConfig`
        @rtype: `Cover`
        """
        return self._minimize(_min.espresso, config)

    def minimize_exact(self, config=None):
        """Return cover with the fewest cubes.

        @type config: `EspressoConfig`
        @rtype: `Cover`
        """
        return self._minimize(_min.espresso_exact, config)

    def _minimize(self, method, config):
        if config is None:
            config = EspressoConfig()
        f, d, r = self._roles()
        try:
            g = method(f, d, r, self._shape, config)
        except (errors.ShapeError, errors.BoundsError) as e:
            raise errors.MinimizationError(str(e)) from e
        new = self._empty_copy()
        new._cubes = [(ON, c) for c in g]
        new._cubes.extend(
            (kind, c) for kind, c in self._cubes if kind != ON)
        return new

    def _roles(self):
        """Return ON-set, don't care set, and OFF-set.

        A missing OFF-set is `None`. A missing don't care
        set is empty for type F, and the complement
        of the other two for type FR.
        """
        f = self.on_set()
        d = self.dc_set()
        r = self.off_set()
        t = self._cover_type
        if not t.has_r:
            r = None
        if not t.has_d:
            d = list()
            if t.has_r:
                d = _compl.complement(f + r, self._shape)
        return f, d, r

    def complement(self):
        """Return F cover of minterms outside ON and DC sets."""
        f, d, _ = self._roles()
        new = self._empty_copy()
        new._cover_type = CoverType.F
        r = _compl.complement(f + d, self._shape)
        new._cubes = [(ON, c) for c in r]
        return new

    def evaluate(self, inputs):
        """Return output values of the ON-set at `inputs`.

        @param inputs: `bool` per input
        @rtype: `tuple` of `bool`
        """
        shape = self._shape
        m = _cube.minterm(inputs, shape)
        out = 0
        for c in self.on_set():
            if _cube.covers(c | shape.outmask, m):
                out |= c
        return tuple(
            bool(out & shape.output_bit(j))
            for j in range(shape.nout))

    def _input_names(self):
        return _fill_labels(
            self._input_labels, self._shape.nin, INPUT_PREFIX)

    def _output_names(self):
        return _fill_labels(
            self._output_labels, self._shape.nout, OUTPUT_PREFIX)

    def add_expr(self, expr, output_name):
        """Add output `output_name` that equals `expr`.

        Inputs are matched to variables by name.
        Variables that no input has become new inputs.
        Unnamed inputs and outputs are named first.

        @type expr: `BoolExpr`
        @type output_name: `str`
        """
        out_names = self._output_names()
        if output_name in out_names:
            raise errors.OutputAlreadyExists(output_name)
        u = expr.to_bdd()
        cubes = _bdd.dnf(u, expr.bdd)
        in_names = self._input_names()
        known = set(in_names)
        for var in _bdd.support(u, expr.bdd):
            if var not in known:
                in_names.append(var)
                known.add(var)
        out_names.append(output_name)
        self._grow(len(in_names), len(out_names))
        self._input_labels = in_names
        self._output_labels = out_names
        shape = self._shape
        index = {name: i for i, name in enumerate(in_names)}
        bit = shape.output_bit(shape.nout - 1)
        for term in cubes:
            inputs = [None] * shape.nin
            for var, value in term.items():
                inputs[index[var]] = value
            c = _cube.cube_from_literals(
                inputs, [False] * shape.nout, shape)
            self._cubes.append((ON, c | bit))

    def to_expr(self, name):
        """Return expression of output `name`.

        @rtype: `BoolExpr`
        """
        names = self._output_names()
        if name not in names:
            raise errors.OutputNotFound(name)
        return self.to_expr_by_index(names.index(name))

    def to_expr_by_index(self, index):
        """Return expression of the output at `index`.

        The sum of products is factored.

        @rtype: `BoolExpr`
        """
        shape = self._shape
        if not (0 <= index < shape.nout):
            raise errors.OutputIndexOutOfBounds(index, shape.nout)
        names = self._input_names()
        bit = shape.output_bit(index)
        terms = list()
        for c in self.on_set():
            if not c & bit:
                continue
            inputs, _ = _cube.cube_to_literals(c, shape)
            terms.append({
                names[i]: x for i, x in enumerate(inputs)
                if x is not None})
        tree = _factor.factor(terms, _nodes)
        return BoolExpr(tree)

    def to_exprs(self):
        """Yield `(name, expression)` for each output."""
        for i, name in enumerate(self._output_names()):
            yield name, self.to_expr_by_index(i)

    @classmethod
    def from_expr(cls, expr, output_name='out'):
        """Return F cover with one output that equals `expr`."""
        cover = cls(CoverType.F)
        cover.add_expr(expr, output_name)
        return cover

    @classmethod
    def from_bdd(cls, u, bdd, output_name='out'):
        """Return F cover with one output that equals BDD `u`.

        Inputs are the variables of `u`, naturally sorted.
        """
        dnf = Dnf.from_bdd(u, bdd)
        cover = cls.with_labels(
            CoverType.F, dnf.variables, [output_name])
        for term in dnf:
            inputs = [term.get(var) for var in dnf.variables]
            cover.add_cube(inputs, [True])
        return cover

    def to_pla_string(self, cover_type=None):
        """Return PLA text, by default of the cover's own type."""
        from espresso import pla
        return pla.dumps(self, cover_type)

    def write_pla(self, filename, cover_type=None):
        from espresso import pla
        pla.dump(self, filename, cover_type)

    @classmethod
    def from_pla_string(cls, text):
        from espresso import pla
        return pla.loads(text)

    @classmethod
    def from_pla_file(cls, filename):
        from espresso import pla
        return pla.load(filename)

    def copy(self):
        new = self._empty_copy()
        new._cubes = list(self._cubes)
        return new

    def _empty_copy(self):
        new = type(self)(self._cover_type)
        new._shape = self._shape
        new._input_labels = self.input_labels
        new._output_labels = self.output_labels
        return new

    def __eq__(self, other):
        if not isinstance(other, Cover):
            return NotImplemented
        return (
            self._cover_type == other._cover_type and
            self._shape == other._shape and
            self._input_labels == other._input_labels and
            self._output_labels == other._output_labels and
            self._cubes == other._cubes)

    def __repr__(self):
        return (
            'Cover(type={t}, inputs={i}, outputs={o}, '
            'cubes={n})').format(
                t=self._cover_type.pla_name,
                i=self.num_inputs,
                o=self.num_outputs,
                n=len(self._cubes))

    def __str__(self):
        return self.to_pla_string()


def _fill_labels(labels, n, prefix):
    """Return `labels` extended to `n` names.

    Missing names are `prefix` followed by the position,
    or by the next unused index if that name is taken.
    """
    labels = list(labels or list())
    used = set(labels)
    i = len(labels)
    while len(labels) < n:
        name = '{p}{i}'.format(p=prefix, i=i)
        while name in used:
            i += 1
            name = '{p}{i}'.format(p=prefix, i=i)
        labels.append(name)
        used.add(name)
        i += 1
    return labels


def _assert_unique(labels, what):
    seen = set()
    for name in labels:
        if name in seen:
            raise errors.ShapeError(
                'duplicate {what} label "{name}"'.format(
                    what=what, name=name))
        seen.add(name)
