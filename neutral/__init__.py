"""Unofficial async client for neutrinoapi.com."""

from neutral.auth import ApiAuth
from neutral.client import DEFAULT_BASE_URL, Neutral
from neutral.errors import (
    DecodeError,
    InvalidBaseAddressError,
    MalformedRequestError,
    NeutralError,
    RemoteFailureError,
    TransportError,
)

__all__ = [
    "ApiAuth",
    "DEFAULT_BASE_URL",
    "DecodeError",
    "InvalidBaseAddressError",
    "MalformedRequestError",
    "Neutral",
    "NeutralError",
    "RemoteFailureError",
    "TransportError",
]
