"""
Edge and region resolution for the signaling service.

This module provides:
- Lookup tables for edges, regions, deprecated regions and shortcodes
- Hostname formatting for a resolved region or edge
- Deprecation advisories steering callers from regions to edges
"""

from .tables import (
    Edge,
    Region,
    DeprecatedRegion,
    DEFAULT_EDGE,
    DEFAULT_REGION,
    EDGE_TO_REGION,
    REGION_TO_EDGE,
    DEPRECATED_REGIONS,
    REGION_SHORTCODES,
    VALID_REGIONS,
    VALID_EDGES,
    KNOWN_REGIONS,
    token_value,
)
from .uri import BASE_URI, build_uri
from .deprecation import (
    RegionCallback,
    MessageCallback,
    preferred_edge_for,
    region_deprecation_message,
)
from .resolver import (
    resolve_region_uri,
    resolve_chunder_uri,
    resolve_shortcode,
)

__all__ = [
    # Tables
    "Edge",
    "Region",
    "DeprecatedRegion",
    "DEFAULT_EDGE",
    "DEFAULT_REGION",
    "EDGE_TO_REGION",
    "REGION_TO_EDGE",
    "DEPRECATED_REGIONS",
    "REGION_SHORTCODES",
    "VALID_REGIONS",
    "VALID_EDGES",
    "KNOWN_REGIONS",
    "token_value",
    # URI
    "BASE_URI",
    "build_uri",
    # Deprecation
    "RegionCallback",
    "MessageCallback",
    "preferred_edge_for",
    "region_deprecation_message",
    # Resolver
    "resolve_region_uri",
    "resolve_chunder_uri",
    "resolve_shortcode",
]
