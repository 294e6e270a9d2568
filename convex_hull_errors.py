class ConvexHullError(Exception):
    pass


class PreconditionViolation(ConvexHullError, ValueError):
    """
    An internal contract was broken: selection on an empty sequence,
    a bridge search with fewer than two points, and the like.
    Raised immediately, never recovered from.
    """


class BridgeStalled(PreconditionViolation):
    """A bridge pruning round did not discard any candidate."""

    def __init__(self, size):
        super().__init__(f"bridge pruning stalled at {size} candidates")
        self.size = size


class InvalidPointsError(ConvexHullError, ValueError):
    pass
