"""
Deprecation advisories for the legacy region model.

Two callback shapes exist:
- RegionCallback receives the bare successor region token
  (used by resolve_region_uri).
- MessageCallback receives a human-readable advisory
  (used by resolve_chunder_uri).
"""

import logging
from typing import Callable, Optional

from .tables import (
    DEFAULT_EDGE,
    DEFAULT_REGION,
    DEPRECATED_REGIONS,
    REGION_TO_EDGE,
)

logger = logging.getLogger(__name__)

RegionCallback = Callable[[str], None]
MessageCallback = Callable[[str], None]

REGIONS_DEPRECATED_NOTICE = "Regions are deprecated in favor of edges."


def preferred_edge_for(region: str) -> Optional[str]:
    """Return the edge to recommend in place of a region, if there is one."""
    if region == DEFAULT_REGION:
        return DEFAULT_EDGE
    if region in DEPRECATED_REGIONS:
        return REGION_TO_EDGE.get(DEPRECATED_REGIONS[region])
    return REGION_TO_EDGE.get(region)


def region_deprecation_message(region: str) -> str:
    """
    Build the advisory for a caller that selected a region instead of an edge.

    Unknown regions only get the general notice since there is no edge to
    recommend for them.
    """
    lines = [REGIONS_DEPRECATED_NOTICE]

    edge = preferred_edge_for(region)
    if edge is not None:
        lines.append(f'Region "{region}" is deprecated, please use `edge` "{edge}".')

    return "\n".join(lines)


def notify(callback: Optional[Callable[[str], None]], payload: str) -> None:
    """Deliver an advisory synchronously, at most once, to the caller's callback."""
    logger.debug(f"Deprecation advisory: {payload}")
    if callback is not None:
        callback(payload)
