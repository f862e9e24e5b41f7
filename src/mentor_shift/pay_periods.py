"""
Split a month of scheduled days into two pay periods.
"""

from typing import List, Tuple

from .config import ConfigurationError
from .models import Day, PayPeriod


class PayPeriodSplitter:
    """Partitions assigned days into ``pay1`` (first N days) and ``pay2``."""

    def __init__(self, length: int = 15):
        if isinstance(length, bool) or not isinstance(length, int) or length < 1:
            raise ConfigurationError(
                f"Pay period length must be a positive integer, got {length}"
            )
        self.length = length

    def split(self, days: List[Day]) -> Tuple[PayPeriod, PayPeriod]:
        """
        Split days into two contiguous periods.

        ``pay2`` is empty when the length covers the whole month. Both periods
        hold the same Day objects as ``days``.
        """
        return PayPeriod(days=days[: self.length]), PayPeriod(days=days[self.length :])
