import math
from dataclasses import dataclass


@dataclass
class Statistics:
    """
    Summary of the values of a dataset or a dataset group.

    The values are computed elsewhere and only cached on the model; an unset
    cache holds NaN for both bounds.
    """

    minimum: float = math.nan
    maximum: float = math.nan

    @property
    def is_empty(self) -> bool:
        return math.isnan(self.minimum) and math.isnan(self.maximum)
