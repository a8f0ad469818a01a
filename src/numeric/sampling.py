"""Uniform integer sampling.

The only non-deterministic corner of the toolkit. Callers that need
reproducibility pass their own ``random.Random`` or set
``NUMERIC_TOOLKIT_RANDOM_SEED``.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Optional

from .config import ToolkitConfig
from .errors import InvalidArgument
from .number_theory import _require_int

logger = logging.getLogger(__name__)

_default_rng: Optional[random.Random] = None
_default_rng_lock = threading.Lock()


def default_rng(config: Optional[ToolkitConfig] = None) -> random.Random:
    """Build the RNG selected by *config* (or the environment when omitted)."""
    cfg = config if config is not None else ToolkitConfig.from_env()
    if cfg.random_seed is None:
        logger.debug("using SystemRandom for sampling")
        return random.SystemRandom()
    logger.debug("using seeded Random for sampling", extra={"data": {"seed": cfg.random_seed}})
    return random.Random(cfg.random_seed)


def _shared_rng() -> random.Random:
    global _default_rng
    with _default_rng_lock:
        if _default_rng is None:
            _default_rng = default_rng()
        return _default_rng


def reset_default_rng() -> None:
    """Drop the cached process-wide RNG; the next draw re-reads the environment."""
    global _default_rng
    with _default_rng_lock:
        _default_rng = None


def random_in_range(lo: int, hi: int, *, rng: Optional[random.Random] = None) -> int:
    """Uniformly chosen int in ``[lo, hi]``, inclusive on both ends."""
    _require_int(lo, name="lo")
    _require_int(hi, name="hi")
    if hi < lo:
        raise InvalidArgument("hi", hi, "hi must be greater than or equal to lo")
    source = rng if rng is not None else _shared_rng()
    return source.randint(lo, hi)
