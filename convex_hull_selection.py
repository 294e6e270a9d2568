from convex_hull_errors import PreconditionViolation

GROUP_SIZE = 5


def _lower_middle(group):
    return sorted(group)[(len(group) - 1) // 2]


def median_of_medians(values):
    """
    Approximate median in worst-case linear time.

    Up to 5 values: the exact lower-middle element.
    Otherwise values are split into groups of 5, the exact median of each group
    is taken, and the lower median of those group medians is returned. The
    result is one of the input values and at least 3/10 of the values lie on
    each side of it (up to a constant). A unique maximum is never returned
    unless it is the only value.
    """
    values = list(values)
    if not values:
        raise PreconditionViolation("no median of an empty sequence")
    if len(values) <= GROUP_SIZE:
        return _lower_middle(values)
    medians = [_lower_middle(values[i:i + GROUP_SIZE])
               for i in range(0, len(values), GROUP_SIZE)]
    return select(medians, (len(medians) - 1) // 2)


def select(values, k):
    """
    k-th smallest value (0-based) in worst-case linear time,
    partitioning around median_of_medians pivots.
    """
    values = list(values)
    if not values:
        raise PreconditionViolation("cannot select from an empty sequence")
    if not 0 <= k < len(values):
        raise PreconditionViolation(f"rank {k} out of range for {len(values)} values")

    while True:
        if len(values) <= GROUP_SIZE:
            return sorted(values)[k]
        pivot = median_of_medians(values)
        lows = [v for v in values if v < pivot]
        highs = [v for v in values if v > pivot]
        nb_pivots = len(values) - len(lows) - len(highs)
        if k < len(lows):
            values = lows
        elif k < len(lows) + nb_pivots:
            return pivot
        else:
            k -= len(lows) + nb_pivots
            values = highs


def median(values):
    """ exact lower median
    """
    values = list(values)
    if not values:
        raise PreconditionViolation("no median of an empty sequence")
    return select(values, (len(values) - 1) // 2)
