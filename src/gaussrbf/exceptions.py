"""
Error types raised by the Gaussian RBF model.

All errors are local and synchronous: they are raised to the immediate
caller and never retried or swallowed inside the package.
"""


class RBFError(Exception):
    """Base class for all gaussrbf errors."""


class InvalidParameter(RBFError, ValueError):
    """A construction parameter (centroids, gamma, alpha) is invalid."""


class DimensionMismatch(RBFError, ValueError):
    """An input's column count does not match the model's input dimension."""


class ShapeMismatch(RBFError, ValueError):
    """Training inputs and targets have inconsistent shapes."""


class DegenerateBasis(RBFError, ArithmeticError):
    """All Gaussian responses underflowed to zero under normalization.

    Parameters
    ----------
    rows : array-like of int
        Indices of the offending input rows.
    """

    def __init__(self, rows):
        self.rows = [int(r) for r in rows]
        shown = self.rows[:10]
        more = '' if len(self.rows) <= 10 else f' (+{len(self.rows) - 10} more)'
        super().__init__(
            "Cannot normalize basis: every Gaussian response is zero for "
            f"input row(s) {shown}{more}. Use a smaller gamma or "
            "normalize=False."
        )


class FitFailed(RBFError, RuntimeError):
    """The least-squares solve could not produce a weight vector."""


class InternalStateError(RBFError, RuntimeError):
    """Stored weights disagree with the basis length of the model."""
