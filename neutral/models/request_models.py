import re
from ipaddress import ip_address

from pydantic import BaseModel, Field, field_validator

PHONE_NUMBER_RE = re.compile(r"^\+?\d{3,20}$")


class IPQuery(BaseModel):
    """Query parameters of the gateway's IP lookups."""

    ip: str = Field(
        description="IPv4 or IPv6 address to look up.",
        examples=["8.8.8.8", "2001:4860:4860::8888"],
    )

    @field_validator("ip", mode="before")
    @classmethod
    def _validate_ip(cls, value: str) -> str:
        """Accept only IPv4/IPv6 literals, stripped of surrounding whitespace."""
        value_str = str(value).strip()
        try:
            ip_address(value_str)
        except ValueError as exc:
            raise ValueError("ip must be a valid IPv4 or IPv6 address") from exc
        return value_str


class PhoneQuery(BaseModel):
    """Query parameters of the gateway's phone lookups.

    The number may carry a leading `+`; it is removed before calling neutrinoapi.com.
    """

    number: str = Field(
        description="Phone number in international format, digits only with an optional leading '+'.",
        examples=["+12345678901", "12345678901"],
    )

    @field_validator("number", mode="before")
    @classmethod
    def _validate_number(cls, value: str) -> str:
        value_str = str(value).strip()
        if not PHONE_NUMBER_RE.match(value_str):
            raise ValueError("number must be digits with an optional leading '+'")
        return value_str
