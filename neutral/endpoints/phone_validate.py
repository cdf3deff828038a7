"""Parse, validate and get location information about a phone number.

See https://www.neutrinoapi.com/api/phone-validate
"""

from typing import TYPE_CHECKING

from neutral.endpoints.base import Endpoint, normalize_phone_number
from neutral.models.phone import PhoneValidateResponse

if TYPE_CHECKING:
    from neutral.client import Neutral


def _build_query(phone_number: str) -> dict[str, str]:
    return {"number": normalize_phone_number(phone_number)}


PHONE_VALIDATE = Endpoint(
    path="/phone-validate",
    response_model=PhoneValidateResponse,
    build_query=_build_query,
)


async def send(client: "Neutral", phone_number: str) -> PhoneValidateResponse:
    """Send a phone validate request to neutrinoapi.com."""
    return await client.send(PHONE_VALIDATE, phone_number)
