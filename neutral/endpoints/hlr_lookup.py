"""Retrieve the live status of a mobile device from the home location register (HLR).

Tells whether a mobile number is live and registered on a network, its
carrier, and whether it was ported or is roaming.
See https://www.neutrinoapi.com/api/hlr-lookup
"""

from typing import TYPE_CHECKING

from neutral.endpoints.base import Endpoint, normalize_phone_number
from neutral.models.phone import HlrLookupResponse

if TYPE_CHECKING:
    from neutral.client import Neutral


def _build_query(phone_number: str) -> dict[str, str]:
    return {"number": normalize_phone_number(phone_number)}


HLR_LOOKUP = Endpoint(
    path="/hlr-lookup",
    response_model=HlrLookupResponse,
    build_query=_build_query,
)


async def send(client: "Neutral", phone_number: str) -> HlrLookupResponse:
    """Send an HLR lookup request to neutrinoapi.com."""
    return await client.send(HLR_LOOKUP, phone_number)
