from collections.abc import Callable, Mapping
from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Any, Generic, TypeVar
from urllib.parse import quote, urlencode

from pydantic import BaseModel

from neutral.errors import MalformedRequestError

ResponseT = TypeVar("ResponseT", bound=BaseModel)

COMMON_QUERY = {"output-case": "snake"}


@dataclass(frozen=True)
class Endpoint(Generic[ResponseT]):
    """One neutrinoapi.com feature: where to send it and what comes back.

    Endpoints never perform I/O themselves. `Neutral.send` composes, dispatches
    and decodes on their behalf.
    """

    path: str
    response_model: type[ResponseT]
    build_query: Callable[..., Mapping[str, str]]

    def path_and_query(self, *args: Any, **kwargs: Any) -> str:
        """Build `/path?output-case=snake&...` with percent-escaped values."""
        params = {**COMMON_QUERY, **self.build_query(*args, **kwargs)}
        return f"{self.path}?{urlencode(params, quote_via=quote)}"


def normalize_phone_number(phone_number: str) -> str:
    """Strip the leading `+`; the service expects bare digit strings."""
    return phone_number.lstrip("+")


def normalize_ip_address(ip: str | IPv4Address | IPv6Address) -> str:
    try:
        return str(ip_address(str(ip).strip()))
    except ValueError as exc:
        raise MalformedRequestError(f"{ip!r} is not a valid IPv4 or IPv6 address") from exc
