"""Run a realtime network probe against an IPv4 or IPv6 address.

See https://www.neutrinoapi.com/api/ip-probe
"""

from ipaddress import IPv4Address, IPv6Address
from typing import TYPE_CHECKING

from neutral.endpoints.base import Endpoint, normalize_ip_address
from neutral.models.ip import IpProbeResponse

if TYPE_CHECKING:
    from neutral.client import Neutral


def _build_query(ip: str | IPv4Address | IPv6Address) -> dict[str, str]:
    return {"ip": normalize_ip_address(ip)}


IP_PROBE = Endpoint(
    path="/ip-probe",
    response_model=IpProbeResponse,
    build_query=_build_query,
)


async def send(client: "Neutral", ip: str | IPv4Address | IPv6Address) -> IpProbeResponse:
    """Send an IP probe request to neutrinoapi.com."""
    return await client.send(IP_PROBE, ip)
