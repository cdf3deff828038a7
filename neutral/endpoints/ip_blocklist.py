"""Detect potentially malicious or dangerous IP addresses.

Flags open proxies, tor nodes, public VPNs, spam and phishing hosts, malware
servers, botnets and similar. VPN detection is always requested.
See https://www.neutrinoapi.com/api/ip-blocklist
"""

from ipaddress import IPv4Address, IPv6Address
from typing import TYPE_CHECKING

from neutral.endpoints.base import Endpoint, normalize_ip_address
from neutral.models.ip import IpBlocklistResponse

if TYPE_CHECKING:
    from neutral.client import Neutral


def _build_query(ip: str | IPv4Address | IPv6Address) -> dict[str, str]:
    return {"ip": normalize_ip_address(ip), "vpn-lookup": "true"}


IP_BLOCKLIST = Endpoint(
    path="/ip-blocklist",
    response_model=IpBlocklistResponse,
    build_query=_build_query,
)


async def send(client: "Neutral", ip: str | IPv4Address | IPv6Address) -> IpBlocklistResponse:
    """Send an IP blocklist request to neutrinoapi.com."""
    return await client.send(IP_BLOCKLIST, ip)
