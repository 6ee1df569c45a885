"""Environment-variable configuration for prefixcalc.

Self-contained — no config files. Every variable has the PREFIXCALC_ prefix.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from prefixcalc.models import Strategy

STRATEGY_VAR = "PREFIXCALC_STRATEGY"
DEFAULT_STRATEGY = Strategy.RESULTS


def default_strategy(env: Optional[Mapping[str, str]] = None) -> Strategy:
    """Strategy named by PREFIXCALC_STRATEGY, or DEFAULT_STRATEGY if unset.

    Args:
        env: Mapping to read instead of os.environ.

    Raises:
        ValueError: If the variable names no known strategy.
    """
    env = os.environ if env is None else env
    raw = env.get(STRATEGY_VAR, "").strip().lower()
    if not raw:
        return DEFAULT_STRATEGY
    try:
        return Strategy(raw)
    except ValueError:
        choices = ", ".join(s.value for s in Strategy)
        raise ValueError(f"{STRATEGY_VAR}={raw!r} is not a strategy (choose: {choices})") from None


def resolve_strategy(name: Optional[str] = None) -> Strategy:
    """Explicit name wins; otherwise fall back to the environment."""
    if name:
        try:
            return Strategy(name.strip().lower())
        except ValueError:
            choices = ", ".join(s.value for s in Strategy)
            raise ValueError(f"Unknown strategy: {name!r} (choose: {choices})") from None
    return default_strategy()
