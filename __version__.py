# ============================================================================
# VERSION - CONTROLLER RENDERERS
# ============================================================================
# EPOCH: 1 - RENDERER DISPATCH
# ============================================================================
"""
Version information for Controller Renderers.

This is the single source of truth for the application version.
Updated manually for each release.
"""
# Version format: major.minor.patch
# Criteria for 0.1 - json/js/xml/update renderers dispatch from controllers
__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Build metadata
BUILD_DATE = "2026-10-19"

EPOCH = 1
CODENAME = "Controller Renderers"
