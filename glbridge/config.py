"""
Environment-driven settings for glbridge.

    GLBRIDGE_LOG_LEVEL      level of the ``glbridge`` logger (default WARNING)
    GLBRIDGE_COLOR_POLICY   ``truncate`` (default) or ``clamp``
    GLBRIDGE_TOLERANCE      default tolerance of the ``is_close`` helpers
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

_LOG = logging.getLogger("glbridge.config")


class ColorPolicy(str, Enum):
    """
    How out-of-range color components reach the 8-bit engine boundary
    """
    TRUNCATE = "truncate"
    CLAMP = "clamp"


_COLOR_POLICY_ALIASES: Dict[str, ColorPolicy] = {
    "truncate": ColorPolicy.TRUNCATE,
    "trunc": ColorPolicy.TRUNCATE,
    "raw": ColorPolicy.TRUNCATE,
    "clamp": ColorPolicy.CLAMP,
    "clip": ColorPolicy.CLAMP,
    "saturate": ColorPolicy.CLAMP,
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class BridgeConfig:
    log_level: str = "WARNING"
    color_policy: ColorPolicy = ColorPolicy.TRUNCATE
    tolerance: float = 1e-6


_CONFIG: Optional[BridgeConfig] = None


def _resolve_log_level(raw: Optional[str], default: str) -> str:
    if raw is None:
        return default
    normalized = raw.strip().upper()
    if normalized == "WARN":
        normalized = "WARNING"
    if normalized not in _LOG_LEVELS:
        _LOG.warning("Ignoring unknown GLBRIDGE_LOG_LEVEL %r", raw)
        return default
    return normalized


def _resolve_color_policy(raw: Optional[str], default: ColorPolicy) -> ColorPolicy:
    if raw is None:
        return default
    policy = _COLOR_POLICY_ALIASES.get(raw.strip().lower())
    if policy is None:
        _LOG.warning("Ignoring unknown GLBRIDGE_COLOR_POLICY %r", raw)
        return default
    return policy


def _resolve_tolerance(raw: Optional[str], default: float) -> float:
    if raw is None:
        return default
    try:
        tolerance = float(raw)
    except ValueError:
        _LOG.warning("Ignoring non-numeric GLBRIDGE_TOLERANCE %r", raw)
        return default
    if not tolerance >= 0.0:
        _LOG.warning("Ignoring negative GLBRIDGE_TOLERANCE %r", raw)
        return default
    return tolerance


def resolve_config() -> BridgeConfig:
    """
    Build a fresh config from the current environment
    """
    defaults = BridgeConfig()
    return BridgeConfig(
        log_level=_resolve_log_level(
            os.getenv("GLBRIDGE_LOG_LEVEL"), defaults.log_level),
        color_policy=_resolve_color_policy(
            os.getenv("GLBRIDGE_COLOR_POLICY"), defaults.color_policy),
        tolerance=_resolve_tolerance(
            os.getenv("GLBRIDGE_TOLERANCE"), defaults.tolerance),
    )


def get_config() -> BridgeConfig:
    """
    Return the process-wide config, resolving it on first use
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = resolve_config()
    return _CONFIG


def reset_config() -> None:
    global _CONFIG
    _CONFIG = None


__all__ = ["BridgeConfig", "ColorPolicy", "get_config", "reset_config", "resolve_config"]
