from typing import Annotated

from pydantic import AliasChoices, BeforeValidator, Field, IPvAnyAddress

from neutral.models.common import (
    NeutrinoModel,
    NeutrinoProviderKind,
    NeutrinoSensor,
    NeutrinoTimeZone,
    object_empty_as_none,
)


class IpBlocklistResponse(NeutrinoModel):
    """Response of the /ip-blocklist endpoint."""

    ip: IPvAnyAddress
    is_listed: bool
    last_seen: int
    list_count: int
    blocklists: tuple[str, ...]
    sensors: tuple[NeutrinoSensor, ...]
    is_proxy: bool
    is_tor: bool
    is_vpn: bool
    is_malware: bool
    is_spyware: bool
    is_dshield: bool
    is_hijacked: bool
    is_spider: bool
    is_bot: bool
    is_spam_bot: bool
    is_exploit_bot: bool


class IpInfoResponse(NeutrinoModel):
    """Response of the /ip-info endpoint.

    `timezone` is None when the service sends `{}` or `null` for it.
    """

    ip: IPvAnyAddress
    is_valid: bool = Field(validation_alias=AliasChoices("is_valid", "valid"))
    is_v6: bool
    is_v4_mapped: bool
    is_bogon: bool
    country: str
    country_code: str
    country_code3: str
    continent_code: str
    currency_code: str
    city: str
    region: str
    longitude: float
    latitude: float
    hostname: str
    host_domain: str
    timezone: Annotated[NeutrinoTimeZone | None, BeforeValidator(object_empty_as_none)] = None


class IpProbeResponse(NeutrinoModel):
    """Response of the /ip-probe endpoint."""

    ip: IPvAnyAddress
    is_valid: bool = Field(validation_alias=AliasChoices("is_valid", "valid"))
    is_v6: bool
    is_v4_mapped: bool
    is_bogon: bool
    country: str
    country_code: str
    country_code3: str
    continent_code: str
    currency_code: str
    city: str
    region: str
    hostname: str
    host_domain: str
    provider_description: str
    provider_website: str
    provider_domain: str
    provider_type: NeutrinoProviderKind
    is_hosting: bool
    is_isp: bool
    is_vpn: bool
    is_proxy: bool
    vpn_domain: str
    asn: str
    as_cidr: str
    as_domains: tuple[str, ...]
    as_description: str
    as_age: int
    as_country_code: str
    as_country_code3: str
