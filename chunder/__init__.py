"""
chunder - signaling host resolution

Pick the signaling hostname a real-time client should connect to from an
edge or a legacy region.

Example:
    >>> from chunder import resolve_chunder_uri
    >>> resolve_chunder_uri(edge="sydney")
    'chunderw-vpc-gll-au1.twilio.com'
"""

__version__ = "1.0.0"

from .config import Config, get_config
from .errors import InvalidArgumentError
from .regions import (
    Edge,
    Region,
    resolve_chunder_uri,
    resolve_region_uri,
    resolve_shortcode,
)

__all__ = [
    "__version__",
    "Config",
    "get_config",
    "InvalidArgumentError",
    "Edge",
    "Region",
    "resolve_chunder_uri",
    "resolve_region_uri",
    "resolve_shortcode",
]
