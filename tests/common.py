import json
from http import HTTPStatus
from typing import Any

import httpx

from neutral import ApiAuth, Neutral

BASE_URL = "http://localhost:1234"
USER_ID = "User"
API_KEY = "test"


class RecordingTransport(httpx.MockTransport):
    """MockTransport answering every request with a fixed response and keeping the requests it saw."""

    def __init__(self, status_code: int = HTTPStatus.OK, body: bytes | str | dict[str, Any] = b"") -> None:
        if isinstance(body, dict):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


class FailingTransport(httpx.AsyncBaseTransport):
    """Transport raising a configured exception to simulate network failures or cancellation."""

    def __init__(self, exc: BaseException) -> None:
        self._exc = exc

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        raise self._exc


def make_client(transport: httpx.AsyncBaseTransport, base_url: str = BASE_URL) -> Neutral:
    return Neutral(base_url, ApiAuth(user_id=USER_ID, api_key=API_KEY), transport=transport)


TIMEZONE_PAYLOAD = {
    "id": "Europe/Paris",
    "name": "Central European Standard Time",
    "abbr": "CET",
    "date": "2021-11-24",
    "time": "12:47:33.825588",
    "offset": "+01:00",
}

IP_INFO_PAYLOAD: dict[str, Any] = {
    "ip": "128.0.0.1",
    "valid": True,
    "is_v6": False,
    "is_v4_mapped": False,
    "is_bogon": False,
    "country": "ACountry",
    "country_code": "AC",
    "country_code3": "ACO",
    "continent_code": "EU",
    "currency_code": "ABC",
    "city": "Roubaix",
    "region": "Hauts-de-ACountry",
    "longitude": 1.0,
    "latitude": 1.0,
    "hostname": "",
    "host_domain": "",
    "timezone": TIMEZONE_PAYLOAD,
}

IP_BLOCKLIST_PAYLOAD: dict[str, Any] = {
    "ip": "128.0.0.1",
    "is_listed": True,
    "last_seen": 1637752053,
    "list_count": 2,
    "blocklists": ["spam-bot", "proxy"],
    "sensors": [{"id": 42, "blocklist": "spam-bot", "description": "Honeypot sensor"}],
    "is_proxy": True,
    "is_tor": False,
    "is_vpn": False,
    "is_malware": False,
    "is_spyware": False,
    "is_dshield": False,
    "is_hijacked": False,
    "is_spider": False,
    "is_bot": False,
    "is_spam_bot": True,
    "is_exploit_bot": False,
}

IP_PROBE_PAYLOAD: dict[str, Any] = {
    "country": "ACountry",
    "country_code": "AC",
    "provider_domain": "networkoperator.com",
    "city": "Roubaix",
    "vpn_domain": "",
    "is_vpn": False,
    "as_cidr": "128.0.0.0/22",
    "valid": True,
    "provider_type": "isp",
    "hostname": "",
    "as_age": 8,
    "continent_code": "EU",
    "is_bogon": False,
    "ip": "128.0.0.1",
    "as_country_code": "AC",
    "provider_description": "A network operator description",
    "as_country_code3": "ACO",
    "is_v4_mapped": False,
    "is_isp": True,
    "provider_website": "https://www.networkoperator.com/",
    "as_description": "NETWORK-OPERATOR-AS,AC,Network Operator",
    "is_hosting": False,
    "as_domains": ["networkoperator.com"],
    "host_domain": "",
    "is_proxy": False,
    "currency_code": "ABC",
    "region": "Hauts-de-ACountry",
    "asn": "12345",
    "country_code3": "ACO",
    "is_v6": False,
}

PHONE_VALIDATE_PAYLOAD: dict[str, Any] = {
    "valid": True,
    "type": "mobile",
    "international_calling_code": "33",
    "international_number": "+12345678901",
    "local_number": "01 23 45 67 89",
    "location": "ACountry",
    "country": "ACountry",
    "country_code": "AC",
    "country_code3": "ACO",
    "currency_code": "ABC",
    "is_mobile": True,
    "prefix_network": "Phone operator",
}

HLR_LOOKUP_PAYLOAD: dict[str, Any] = {
    "country": "ACountry",
    "country_code": "AC",
    "country_code3": "ACO",
    "currency_code": "ABC",
    "current_network": "Phone operator",
    "hlr_status": "ok",
    "hlr_valid": True,
    "imsi": "2081594584",
    "international_calling_code": "33",
    "international_number": "+12345678901",
    "is_mobile": True,
    "is_ported": False,
    "is_roaming": False,
    "local_number": "01 23 45 67 89",
    "location": "ACountry",
    "mcc": "208",
    "mnc": "15",
    "msc": "320433",
    "msin": "",
    "number_type": "mobile",
    "number_valid": True,
    "origin_network": "Phone operator",
    "ported_network": "",
    "roaming_country_code": "",
}
