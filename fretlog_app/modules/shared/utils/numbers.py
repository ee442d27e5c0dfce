# File: fretlog_app/modules/shared/utils/numbers.py

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (2.5 -> 3, -2.5 -> -2).

    Unlike round(), ties never go to the even neighbour.
    """
    return int(math.floor(value + 0.5))
