from collections.abc import AsyncIterator, Awaitable
from contextlib import asynccontextmanager
from typing import Annotated, TypeVar

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from neutral.client import Neutral
from neutral.config import NeutralSettings
from neutral.errors import DecodeError, MalformedRequestError, RemoteFailureError, TransportError
from neutral.exception_handlers import unhandled_exception_handler, validation_exception_handler
from neutral.logger import configure_logging, logger
from neutral.models.ip import IpBlocklistResponse, IpInfoResponse, IpProbeResponse
from neutral.models.phone import HlrLookupResponse, PhoneValidateResponse
from neutral.models.request_models import IPQuery, PhoneQuery
from neutral.models.response_models import HealthResponse

ResponseT = TypeVar("ResponseT", bound=BaseModel)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build one shared neutrinoapi.com client for the lifetime of the app."""
    configure_logging()
    settings = NeutralSettings()
    client = Neutral(settings.base_url, settings.api_auth(), timeout_seconds=settings.timeout_seconds)
    app.state.neutral = client
    logger.info(f"Started neutrinoapi.com lookup gateway base_url={client.scheme}://{client.authority}")
    try:
        yield
    finally:
        await client.aclose()
        logger.info("Stopped neutrinoapi.com lookup gateway")


app = FastAPI(
    title="neutrinoapi.com Lookup Gateway",
    version="0.1.0",
    description="Phone and IP lookups backed by neutrinoapi.com.",
    lifespan=lifespan,
)

app.add_exception_handler(ValidationError, validation_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


def get_neutral_client(request: Request) -> Neutral:
    """Dependency returning the client created in the lifespan."""
    return request.app.state.neutral


async def _run_lookup(request: Request, lookup: str, value: str, call: Awaitable[ResponseT]) -> ResponseT:
    """Await a client call and map the client's error taxonomy onto HTTP errors."""
    logger.info(f"Performing {lookup} lookup path={request.url.path} method={request.method} value={value}")
    try:
        return await call
    except MalformedRequestError as exc:
        logger.error(f"Malformed {lookup} request path={request.url.path} value={value} error={exc}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"code": "invalid_request", "message": str(exc), "lookup": lookup},
        ) from exc
    except RemoteFailureError as exc:
        logger.error(
            f"neutrinoapi.com rejected {lookup} lookup path={request.url.path} value={value} "
            f"upstream_status={exc.status_code} body={exc.text}"
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "code": "upstream_error",
                "message": exc.text,
                "upstream_status": exc.status_code,
                "lookup": lookup,
            },
        ) from exc
    except TransportError as exc:
        logger.exception(f"neutrinoapi.com unreachable during {lookup} lookup path={request.url.path} error={exc}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"code": "upstream_unavailable", "message": str(exc), "lookup": lookup},
        ) from exc
    except DecodeError as exc:
        logger.exception(
            f"Undecodable neutrinoapi.com response during {lookup} lookup path={request.url.path} body={exc.body!r}"
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"code": "upstream_decode_error", "message": str(exc), "lookup": lookup},
        ) from exc


NeutralClient = Annotated[Neutral, Depends(get_neutral_client)]


@app.get(
    "/health",
    tags=["health"],
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def health() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(status="ok")


@app.get(
    "/v1/phone/validate",
    response_model=PhoneValidateResponse,
    tags=["phone"],
    summary="Validate a phone number and get its location.",
)
async def phone_validate(
    request: Request, query: Annotated[PhoneQuery, Depends()], client: NeutralClient
) -> PhoneValidateResponse:
    return await _run_lookup(request, "phone-validate", query.number, client.phone_validate(query.number))


@app.get(
    "/v1/phone/hlr-lookup",
    response_model=HlrLookupResponse,
    tags=["phone"],
    summary="Get the live network status of a mobile number.",
)
async def hlr_lookup(
    request: Request, query: Annotated[PhoneQuery, Depends()], client: NeutralClient
) -> HlrLookupResponse:
    return await _run_lookup(request, "hlr-lookup", query.number, client.hlr_lookup(query.number))


@app.get(
    "/v1/ip/blocklist",
    response_model=IpBlocklistResponse,
    tags=["ip"],
    summary="Check whether an IP address is listed as malicious.",
)
async def ip_blocklist(
    request: Request, query: Annotated[IPQuery, Depends()], client: NeutralClient
) -> IpBlocklistResponse:
    return await _run_lookup(request, "ip-blocklist", query.ip, client.ip_blocklist(query.ip))


@app.get(
    "/v1/ip/info",
    response_model=IpInfoResponse,
    tags=["ip"],
    summary="Look up geolocation information for an IP address.",
)
async def ip_info(request: Request, query: Annotated[IPQuery, Depends()], client: NeutralClient) -> IpInfoResponse:
    return await _run_lookup(request, "ip-info", query.ip, client.ip_info(query.ip))


@app.get(
    "/v1/ip/probe",
    response_model=IpProbeResponse,
    tags=["ip"],
    summary="Probe the network and provider behind an IP address.",
)
async def ip_probe(request: Request, query: Annotated[IPQuery, Depends()], client: NeutralClient) -> IpProbeResponse:
    return await _run_lookup(request, "ip-probe", query.ip, client.ip_probe(query.ip))
