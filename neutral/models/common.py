from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class NeutrinoModel(BaseModel):
    """Base for every decoded neutrinoapi.com response.

    Unknown fields are ignored so new upstream fields never break decoding,
    and decoded records are frozen.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)


def object_empty_as_none(value: Any) -> Any:
    """Treat an empty JSON object the same as `null`.

    neutrinoapi.com emits `{}` for nested records that do not apply (e.g. the
    timezone of a bogon address). Used as a `BeforeValidator`, so a populated
    object is passed through and decoded as usual.
    """
    if value is None:
        return None
    if isinstance(value, dict) and not value:
        return None
    return value


class PhoneInfoKind(str, Enum):
    """Kind of a phone number."""

    mobile = "mobile"
    fixed_line = "fixed-line"
    premium_rate = "premium-rate"
    toll_free = "toll-free"
    voip = "voip"
    unknown = "unknown"


class NeutrinoProviderKind(str, Enum):
    """Kind of network provider behind an IP address."""

    isp = "isp"
    hosting = "hosting"
    vpn = "vpn"
    proxy = "proxy"
    university = "university"
    government = "government"
    commercial = "commercial"
    unknown = "unknown"


class NeutrinoTimeZone(NeutrinoModel):
    id: str
    name: str
    abbr: str
    date: str
    time: str
    offset: str


class NeutrinoSensor(NeutrinoModel):
    id: int
    blocklist: str
    description: str
