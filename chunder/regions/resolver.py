"""
Resolve the signaling hostname for an edge or a legacy region.

Unknown edges, regions and shortcodes are never an error: they are passed
through (or resolve to None) so tokens added server-side keep working with
clients that were shipped before them.
"""

import logging
from typing import Optional

from ..errors import InvalidArgumentError
from .deprecation import (
    MessageCallback,
    RegionCallback,
    notify,
    region_deprecation_message,
)
from .tables import (
    DEFAULT_EDGE,
    DEFAULT_REGION,
    DEPRECATED_REGIONS,
    EDGE_TO_REGION,
    REGION_SHORTCODES,
    Token,
    token_value,
)
from .uri import build_uri

logger = logging.getLogger(__name__)


def resolve_region_uri(
    region: Optional[Token] = None,
    on_deprecated: Optional[RegionCallback] = None,
) -> str:
    """
    Resolve the hostname for a region (legacy API).

    Deprecated regions are swapped for their successor, and `on_deprecated`
    is called once with the successor region token.
    """
    region = token_value(region)

    if not region or region == DEFAULT_REGION:
        return build_uri(None)

    if region in DEPRECATED_REGIONS:
        new_region = DEPRECATED_REGIONS[region]
        logger.debug(f"Region {region} is deprecated, using {new_region}")
        notify(on_deprecated, new_region)
        return build_uri(new_region)

    return build_uri(region)


def resolve_chunder_uri(
    edge: Optional[Token] = None,
    region: Optional[Token] = None,
    on_deprecated: Optional[MessageCallback] = None,
) -> str:
    """
    Resolve the hostname for an edge or a region.

    Args:
        edge: Edge to connect through. Takes the place of `region`.
        region: Legacy region. Always produces a deprecation advisory.
        on_deprecated: Called once with the advisory message when a region
            is given.

    Raises:
        InvalidArgumentError: If both `edge` and `region` are given.
    """
    edge = token_value(edge)
    region = token_value(region)

    if edge and region:
        raise InvalidArgumentError("If `edge` is present, `region` must be `None`.")

    if edge:
        return _resolve_edge(edge)

    if region:
        return _resolve_region(region, on_deprecated)

    return build_uri(None)


def _resolve_edge(edge: str) -> str:
    if edge == DEFAULT_EDGE:
        return build_uri(None)

    if edge in EDGE_TO_REGION:
        return build_uri(EDGE_TO_REGION[edge])

    logger.debug(f"Unknown edge {edge}, passing through")
    return build_uri(edge)


def _resolve_region(region: str, on_deprecated: Optional[MessageCallback]) -> str:
    notify(on_deprecated, region_deprecation_message(region))

    if region in DEPRECATED_REGIONS:
        return build_uri(DEPRECATED_REGIONS[region])

    # Default region maps to the base hostname; anything else passes through.
    return build_uri(region)


def resolve_shortcode(code: str) -> Optional[str]:
    """Return the region for a shortcode, or None if the shortcode is unknown."""
    return REGION_SHORTCODES.get(code)
