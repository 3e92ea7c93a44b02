"""
Signaling hostname formatting.
"""

from typing import Optional

from .tables import DEFAULT_EDGE, DEFAULT_REGION, Token, token_value

CHUNDER_HOST_PREFIX = "chunderw-vpc-gll"
CHUNDER_HOST_DOMAIN = "twilio.com"
BASE_URI = f"{CHUNDER_HOST_PREFIX}.{CHUNDER_HOST_DOMAIN}"


def build_uri(suffix: Optional[Token] = None) -> str:
    """
    Build the chunder hostname for a region or edge token.

    The token is inserted verbatim; no validation is done here. A missing
    token, or the default region/edge, yields the base hostname.
    """
    suffix = token_value(suffix)
    if not suffix or suffix in (DEFAULT_REGION, DEFAULT_EDGE):
        return BASE_URI
    return f"{CHUNDER_HOST_PREFIX}-{suffix}.{CHUNDER_HOST_DOMAIN}"
