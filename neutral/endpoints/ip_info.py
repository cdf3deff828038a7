"""Get location information about an IP address."""

from ipaddress import IPv4Address, IPv6Address
from typing import TYPE_CHECKING

from neutral.endpoints.base import Endpoint, normalize_ip_address
from neutral.models.ip import IpInfoResponse

if TYPE_CHECKING:
    from neutral.client import Neutral


def _build_query(ip: str | IPv4Address | IPv6Address) -> dict[str, str]:
    return {"ip": normalize_ip_address(ip)}


IP_INFO = Endpoint(
    path="/ip-info",
    response_model=IpInfoResponse,
    build_query=_build_query,
)


async def send(client: "Neutral", ip: str | IPv4Address | IPv6Address) -> IpInfoResponse:
    """Send an IP info request to neutrinoapi.com."""
    return await client.send(IP_INFO, ip)
