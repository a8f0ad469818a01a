"""`numeric`: elementary number theory, integer sampling and descriptive statistics.

Public API:
- `gcd`, `lcm`, `fibonacci`, `factorial`, `is_prime`, `power`
- `random_in_range`
- `average`, `median`, `mode`
- `InvalidArgument`, `EmptyInput`
- `ToolkitConfig`
"""

from .config import ToolkitConfig
from .errors import EmptyInput, InvalidArgument
from .number_theory import factorial, fibonacci, gcd, is_prime, lcm, power
from .sampling import default_rng, random_in_range, reset_default_rng
from .statistics import average, median, mode

__all__ = [
    "gcd",
    "lcm",
    "fibonacci",
    "factorial",
    "is_prime",
    "power",
    "random_in_range",
    "default_rng",
    "reset_default_rng",
    "average",
    "median",
    "mode",
    "InvalidArgument",
    "EmptyInput",
    "ToolkitConfig",
]
