from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import StreamingResponse
from pydantic import ValidationError

from ipfinder.engine import LookupEngine
from ipfinder.exception_handlers import (
    pydantic_validation_exception_handler,
    unhandled_exception_handler,
)
from ipfinder.logger import logger
from ipfinder.models.request_models import IPLookupRequest
from ipfinder.models.response_models import HealthResponse, IPLookupResponse, LookupResultResponse

app = FastAPI(
    title="IP Location Finder",
    version="0.1.0",
    description="Looks up an IP address across several public geolocation providers at once.",
)
logger.info("Started IP Location Finder")


def get_lookup_engine() -> LookupEngine:
    """Dependency to provide a LookupEngine over the default provider registry."""
    return LookupEngine()


# Register global exception handlers using the shared handlers module.
app.add_exception_handler(ValidationError, pydantic_validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


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
    "/v1/ip/lookup",
    response_model=IPLookupResponse,
    status_code=status.HTTP_200_OK,
    tags=["ip"],
    summary="Look up an IP address across all providers.",
)
async def ip_lookup(
    request: Request,
    query: Annotated[IPLookupRequest, Depends()],
    engine: Annotated[LookupEngine, Depends(get_lookup_engine)],
) -> IPLookupResponse:
    """Query every provider and return the ones that located the IP.

    Results are listed in the order the providers answered. Providers that
    failed or had no data for the address are left out.
    """
    ip = query.ip
    logger.info(f"Performing IP lookup path={request.url.path} method={request.method} ip={ip}")

    results = [
        LookupResultResponse.from_result(result) for result in await engine.lookup_all(ip) if not result.is_empty
    ]
    logger.info(f"IP lookup finished ip={ip} found={len(results)} providers={engine.provider_count}")

    return IPLookupResponse(ip=ip, providers_queried=engine.provider_count, results=results)


@app.get(
    "/v1/ip/lookup/stream",
    status_code=status.HTTP_200_OK,
    tags=["ip"],
    summary="Stream provider answers for an IP address as they arrive.",
    response_class=StreamingResponse,
)
async def ip_lookup_stream(
    request: Request,
    query: Annotated[IPLookupRequest, Depends()],
    engine: Annotated[LookupEngine, Depends(get_lookup_engine)],
) -> StreamingResponse:
    """Newline-delimited JSON, one LookupResultResponse per line, fastest provider first."""
    ip = query.ip
    logger.info(f"Streaming IP lookup path={request.url.path} method={request.method} ip={ip}")

    async def _lines() -> AsyncIterator[str]:
        results = engine.lookup(ip)
        try:
            async for result in results:
                if not result.is_empty:
                    yield LookupResultResponse.from_result(result).model_dump_json() + "\n"
        finally:
            await results.aclose()

    return StreamingResponse(_lines(), media_type="application/x-ndjson")
