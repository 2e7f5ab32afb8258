from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from bobassistant.parsing import LoggingObserver, PayloadDecodeError, PayloadDecoder
from bobassistant.server_app.config import ServerSettings, get_settings
from bobassistant.server_app.logging import create_logger, find_ring_buffer
from bobassistant.server_app.models import DecodeResponse, ErrorResponse, LogsResponse

MISSING_PAYLOAD = "Missing payload"


def create_app(settings: Optional[ServerSettings] = None) -> FastAPI:
    settings = settings or get_settings()
    logger = create_logger(settings.logger_name, settings.log_ring_size, settings.log_level)
    decoder = PayloadDecoder(LoggingObserver(logger))

    app = FastAPI(title="BoB Assistant payload decoder")
    app.state.settings = settings
    app.state.logger = logger
    app.state.decoder = decoder

    def _error(status_code: int, message: str) -> JSONResponse:
        return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())

    @app.get("/logs", response_model=LogsResponse)
    async def logs(limit: Optional[int] = Query(None, ge=1)) -> LogsResponse:
        handler = find_ring_buffer(logger)
        return LogsResponse(events=handler.get_events(limit) if handler else [])

    @app.delete("/logs", status_code=204)
    async def clear_logs() -> None:
        handler = find_ring_buffer(logger)
        if handler:
            handler.clear()

    @app.get("/")
    async def missing_payload() -> JSONResponse:
        return _error(400, MISSING_PAYLOAD)

    @app.get(
        "/{payload}",
        response_model=DecodeResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def decode(payload: str):
        if not payload.strip():
            return _error(400, MISSING_PAYLOAD)
        try:
            result = decoder.decode(payload)
        except PayloadDecodeError as exc:
            logger.info("decode_failed", extra={"details": {"payload": payload, "error": str(exc)}})
            return _error(500, str(exc))
        return DecodeResponse(**result.as_dict())

    return app
