from enum import Enum

from pydantic import AliasChoices, Field

from neutral.models.common import NeutrinoModel, PhoneInfoKind


class HlrStatus(str, Enum):
    """Status of a mobile device as reported by the home location register."""

    ok = "ok"
    absent = "absent"
    unknown = "unknown"
    invalid = "invalid"
    fixed_line = "fixed-line"
    voip = "voip"
    failed = "failed"


class PhoneValidateResponse(NeutrinoModel):
    """Response of the /phone-validate endpoint."""

    is_valid: bool = Field(validation_alias=AliasChoices("is_valid", "valid"))
    kind: PhoneInfoKind = Field(validation_alias=AliasChoices("kind", "type"))
    international_calling_code: str
    international_number: str
    local_number: str
    location: str
    country: str
    country_code: str
    country_code3: str
    currency_code: str
    is_mobile: bool
    prefix_network: str


class HlrLookupResponse(NeutrinoModel):
    """Response of the /hlr-lookup endpoint."""

    country: str
    country_code: str
    country_code3: str
    currency_code: str
    current_network: str
    hlr_status: HlrStatus
    is_hlr_valid: bool = Field(validation_alias=AliasChoices("is_hlr_valid", "hlr_valid"))
    imsi: str
    international_calling_code: str
    international_number: str
    is_mobile: bool
    is_ported: bool
    is_roaming: bool
    local_number: str
    location: str
    mcc: str
    mnc: str
    msc: str
    msin: str
    kind: PhoneInfoKind = Field(validation_alias=AliasChoices("kind", "number_type"))
    is_valid: bool = Field(validation_alias=AliasChoices("is_valid", "number_valid"))
    origin_network: str
    ported_network: str
    roaming_country_code: str
