"""
Error taxonomy for nn_infer.

Every error raised by the core is a precondition violation on an otherwise
pure computation, so all of them are recoverable by the caller.
"""

from typing import Optional, Sequence, Tuple


class NNInferError(Exception):
    """Base class for all nn_infer errors."""
    pass


class DimensionMismatch(NNInferError, ValueError):
    """Raised when an input or parameter vector has the wrong length."""

    def __init__(self, what: str, expected: int, actual: int):
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} size mismatch: expected {expected}, got {actual}")


class UnknownModelType(NNInferError, ValueError):
    """
    Raised by the factory for an unrecognized type identifier, or for a
    shape that does not match what the identifier expects.
    """

    def __init__(
        self,
        type_id: str,
        shape: Sequence = (),
        expected: Optional[Tuple[str, ...]] = None,
        reason: Optional[str] = None
    ):
        self.type_id = type_id
        self.shape = tuple(shape)
        self.expected = expected

        if reason is None:
            if expected is None:
                reason = f"Unknown model type: '{type_id}'"
            else:
                reason = (
                    f"Model type '{type_id}' expects shape ({', '.join(expected)}), "
                    f"got {list(self.shape)}"
                )
        super().__init__(reason)
