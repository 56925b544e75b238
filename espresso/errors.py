"""Exceptions raised by `espresso`."""
# Copyright 2026 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#


class EspressoError(Exception):
    """Base class of errors raised by this package."""


class ParseError(EspressoError, ValueError):
    """Malformed PLA text or Boolean expression.

    @param text: the offending source text
    @param offset: character offset in `text`
        (column within the line for PLA input)
    @param message: what went wrong
    @param line: line number (PLA input only)
    """

    def __init__(self, text, offset, message, line=None):
        self.text = text
        self.offset = offset
        self.message = message
        self.line = line
        super(ParseError, self).__init__(str(self))

    def __str__(self):
        if self.line is None:
            where = 'offset {k}'.format(k=self.offset)
        else:
            where = 'line {i}, column {k}'.format(
                i=self.line, k=self.offset)
        return '{msg} at {where}: {text!r}'.format(
            msg=self.message, where=where, text=self.text)


class ShapeError(EspressoError, ValueError):
    """Inconsistent numbers of inputs or outputs."""


class CubeShapeMismatch(ShapeError):
    """A cube does not fit the shape of a cover."""

    def __init__(self, expected, found, what='inputs'):
        self.expected = expected
        self.found = found
        self.what = what
        super(CubeShapeMismatch, self).__init__(
            'expected {e} {what}, found {f}'.format(
                e=expected, f=found, what=what))


class OutputAlreadyExists(ShapeError):
    """An output with this name is already in the cover."""

    def __init__(self, name):
        self.name = name
        super(OutputAlreadyExists, self).__init__(
            'output "{name}" already exists'.format(name=name))


class BoundsError(EspressoError, LookupError):
    """Lookup of an output that is not there."""


class OutputNotFound(BoundsError):

    def __init__(self, name):
        self.name = name
        super(OutputNotFound, self).__init__(
            'no output named "{name}"'.format(name=name))


class OutputIndexOutOfBounds(BoundsError, IndexError):

    def __init__(self, index, size):
        self.index = index
        self.size = size
        super(OutputIndexOutOfBounds, self).__init__(
            'output index {i} out of range '
            '(cover has {n} outputs)'.format(i=index, n=size))


class MinimizationError(EspressoError):
    """Minimization of a cover failed.

    The cause is chained as `__cause__`.
    """


class BudgetError(MinimizationError):
    """An iteration or gasp budget was exhausted."""

    def __init__(self, what, limit):
        self.what = what
        self.limit = limit
        super(BudgetError, self).__init__(
            '{what} budget of {n} exhausted'.format(
                what=what, n=limit))
