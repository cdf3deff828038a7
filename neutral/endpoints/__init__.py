from neutral.endpoints.base import Endpoint
from neutral.endpoints.hlr_lookup import HLR_LOOKUP
from neutral.endpoints.ip_blocklist import IP_BLOCKLIST
from neutral.endpoints.ip_info import IP_INFO
from neutral.endpoints.ip_probe import IP_PROBE
from neutral.endpoints.phone_validate import PHONE_VALIDATE

__all__ = ["Endpoint", "HLR_LOOKUP", "IP_BLOCKLIST", "IP_INFO", "IP_PROBE", "PHONE_VALIDATE"]
