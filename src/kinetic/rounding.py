"""Half-up rounding used for every presented number."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Union


def round_half_up(value: float, ndigits: int = 0) -> Union[int, float]:
    """Round to ``ndigits`` decimals with halves rounded up.

    Python's built-in ``round`` uses banker's rounding, so 220.5 would
    become 220. Targets and burn estimates always round halves up.

    With ``ndigits > 0`` the float's exact binary value is rounded, so a
    literal such as 1.45 (stored as 1.4499999...) gives 1.4. Ties that are
    exactly representable, such as 7.25, round away from zero to 7.3.

    Returns:
        int when ndigits is 0, float otherwise
    """
    if ndigits == 0:
        return int(math.floor(value + 0.5))
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
