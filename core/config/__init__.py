# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for controller rendering.
"""

from core.config.defaults import (
    RenderingDefaults,
    ServerDefaults,
    Defaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "RenderingDefaults",
    "ServerDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
