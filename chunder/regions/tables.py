"""
Lookup tables for edges, regions and shortcodes.

Edges are the current model for picking a signaling point-of-presence.
Regions are the legacy model; some of them are retired in favor of a
successor region. All tables are keyed and valued by plain strings; raw
tokens unknown to this client simply miss.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class Edge(str, Enum):
    """Known signaling edges."""
    SYDNEY = "sydney"
    SAO_PAULO = "sao-paulo"
    DUBLIN = "dublin"
    FRANKFURT = "frankfurt"
    TOKYO = "tokyo"
    SINGAPORE = "singapore"
    ASHBURN = "ashburn"
    UMATILLA = "umatilla"
    ROAMING = "roaming"

    # Private interconnect edges
    ASHBURN_IX = "ashburn-ix"
    SAN_JOSE_IX = "san-jose-ix"
    LONDON_IX = "london-ix"
    FRANKFURT_IX = "frankfurt-ix"
    SINGAPORE_IX = "singapore-ix"
    SYDNEY_IX = "sydney-ix"
    TOKYO_IX = "tokyo-ix"


class Region(str, Enum):
    """Known (legacy) signaling regions."""
    AU1 = "au1"
    AU1_IX = "au1-ix"
    BR1 = "br1"
    DE1 = "de1"
    DE1_IX = "de1-ix"
    GLL = "gll"
    IE1 = "ie1"
    IE1_IX = "ie1-ix"
    IE1_TNX = "ie1-tnx"
    JP1 = "jp1"
    JP1_IX = "jp1-ix"
    SG1 = "sg1"
    SG1_IX = "sg1-ix"
    SG1_TNX = "sg1-tnx"
    US1 = "us1"
    US1_IX = "us1-ix"
    US1_TNX = "us1-tnx"
    US2 = "us2"
    US2_IX = "us2-ix"
    US2_TNX = "us2-tnx"


class DeprecatedRegion(str, Enum):
    """Retired region names still accepted for backward compatibility."""
    AU = "au"
    BR = "br"
    IE = "ie"
    JP = "jp"
    SG = "sg"
    US_OR = "us-or"
    US_VA = "us-va"


Token = Union[str, Edge, Region, DeprecatedRegion]


def token_value(value: Optional[Token]) -> Optional[str]:
    """Return the plain string form of an enum member or raw token."""
    if isinstance(value, Enum):
        return value.value
    return value


DEFAULT_REGION: str = Region.GLL.value
DEFAULT_EDGE: str = Edge.ROAMING.value

VALID_REGIONS: frozenset = frozenset(r.value for r in Region)
VALID_EDGES: frozenset = frozenset(e.value for e in Edge)


EDGE_TO_REGION: Mapping[str, str] = MappingProxyType({
    Edge.SYDNEY.value: Region.AU1.value,
    Edge.SAO_PAULO.value: Region.BR1.value,
    Edge.DUBLIN.value: Region.IE1.value,
    Edge.FRANKFURT.value: Region.DE1.value,
    Edge.TOKYO.value: Region.JP1.value,
    Edge.SINGAPORE.value: Region.SG1.value,
    Edge.ASHBURN.value: Region.US1.value,
    Edge.UMATILLA.value: Region.US2.value,
    Edge.ROAMING.value: Region.GLL.value,

    Edge.ASHBURN_IX.value: Region.US1_IX.value,
    Edge.SAN_JOSE_IX.value: Region.US2_IX.value,
    Edge.LONDON_IX.value: Region.IE1_IX.value,
    Edge.FRANKFURT_IX.value: Region.DE1_IX.value,
    Edge.SINGAPORE_IX.value: Region.SG1_IX.value,
    Edge.SYDNEY_IX.value: Region.AU1_IX.value,
    Edge.TOKYO_IX.value: Region.JP1_IX.value,
})


# Inverse of EDGE_TO_REGION for canonical pairs. The tnx regions have no
# edge of their own and are steered to the nearest interconnect edge.
REGION_TO_EDGE: Mapping[str, str] = MappingProxyType({
    Region.AU1.value: Edge.SYDNEY.value,
    Region.BR1.value: Edge.SAO_PAULO.value,
    Region.IE1.value: Edge.DUBLIN.value,
    Region.DE1.value: Edge.FRANKFURT.value,
    Region.JP1.value: Edge.TOKYO.value,
    Region.SG1.value: Edge.SINGAPORE.value,
    Region.US1.value: Edge.ASHBURN.value,
    Region.US2.value: Edge.UMATILLA.value,
    Region.GLL.value: Edge.ROAMING.value,

    Region.US1_IX.value: Edge.ASHBURN_IX.value,
    Region.US2_IX.value: Edge.SAN_JOSE_IX.value,
    Region.IE1_IX.value: Edge.LONDON_IX.value,
    Region.DE1_IX.value: Edge.FRANKFURT_IX.value,
    Region.SG1_IX.value: Edge.SINGAPORE_IX.value,
    Region.AU1_IX.value: Edge.SYDNEY_IX.value,
    Region.JP1_IX.value: Edge.TOKYO_IX.value,

    Region.US1_TNX.value: Edge.ASHBURN_IX.value,
    Region.US2_TNX.value: Edge.ASHBURN_IX.value,
    Region.IE1_TNX.value: Edge.LONDON_IX.value,
    Region.SG1_TNX.value: Edge.SINGAPORE_IX.value,
})


DEPRECATED_REGIONS: Mapping[str, str] = MappingProxyType({
    DeprecatedRegion.AU.value: Region.AU1.value,
    DeprecatedRegion.BR.value: Region.BR1.value,
    DeprecatedRegion.IE.value: Region.IE1.value,
    DeprecatedRegion.JP.value: Region.JP1.value,
    DeprecatedRegion.SG.value: Region.SG1.value,
    DeprecatedRegion.US_OR.value: Region.US1.value,
    DeprecatedRegion.US_VA.value: Region.US1.value,
})


# Every region token the client recognizes, current or retired.
KNOWN_REGIONS: frozenset = VALID_REGIONS | frozenset(DEPRECATED_REGIONS)


REGION_SHORTCODES: Mapping[str, str] = MappingProxyType({
    "ASIAPAC_SINGAPORE": Region.SG1.value,
    "ASIAPAC_SYDNEY": Region.AU1.value,
    "ASIAPAC_TOKYO": Region.JP1.value,
    "EU_FRANKFURT": Region.DE1.value,
    "EU_IRELAND": Region.IE1.value,
    "SOUTH_AMERICA_SAO_PAULO": Region.BR1.value,
    "US_EAST_VIRGINIA": Region.US1.value,
    "US_WEST_OREGON": Region.US2.value,
})
