"""Two-level minimization of Boolean functions."""
from espresso.config import EspressoConfig
from espresso.cover import Cover
from espresso.cover import CoverType
from espresso.cover import Cube
from espresso.errors import (
    BoundsError,
    BudgetError,
    CubeShapeMismatch,
    EspressoError,
    MinimizationError,
    OutputAlreadyExists,
    OutputIndexOutOfBounds,
    OutputNotFound,
    ParseError,
    ShapeError)
from espresso.symbolic.dnf import Dnf
from espresso.symbolic.expression import BoolExpr
try:
    from espresso._version import version as __version__
except ImportError:
    __version__ = None
