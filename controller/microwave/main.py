"""FastAPI entry-point for the microwave panel."""
from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, HTTPException, Request, WebSocket, WebSocketDisconnect, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from .config import Settings, get_settings
from .logging_config import configure_logging
from .oven import Oven, UnknownButtonError

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, *, oven: Optional[Oven] = None) -> FastAPI:
    settings = settings or get_settings()
    oven = oven or Oven(settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Panel service started in %s mode", oven.mode.value)
        try:
            yield
        finally:
            oven.shutdown()
            logger.info("Panel service shutdown complete")

    app = FastAPI(title="microwave-panel", version="0.1.0", lifespan=lifespan)
    app.state.oven = oven

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
        """Catch-all exception handler to prevent application crashes."""
        logger.exception(f"Unhandled exception in {request.url.path}: {exc}")
        return PlainTextResponse(
            f"Internal server error: {str(exc)}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle request validation errors gracefully."""
        logger.warning(f"Validation error in {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc)},
        )

    @app.get("/healthz")
    async def healthcheck() -> JSONResponse:
        return JSONResponse({"status": "ok", "mode": oven.mode.value})

    @app.get("/state")
    async def panel_state() -> JSONResponse:
        return JSONResponse(oven.status())

    @app.post("/door/open")
    async def open_door() -> JSONResponse:
        oven.open_door()
        return JSONResponse(oven.status())

    @app.post("/door/close")
    async def close_door() -> JSONResponse:
        oven.close_door()
        return JSONResponse(oven.status())

    @app.post("/buttons/{name}/press")
    async def press_button(name: str) -> JSONResponse:
        try:
            oven.press(name)
        except UnknownButtonError:
            raise HTTPException(status_code=404, detail=f"Unknown button: {name}")
        logger.debug("Button %s pressed via HTTP", name)
        return JSONResponse(oven.status())

    @app.websocket("/ws/ui")
    async def ui_socket(ws: WebSocket) -> None:
        # Subscribe before accepting so no line published after connect is missed
        queue = oven.output.register_ui()
        try:
            await ws.accept()
            while True:
                try:
                    event = await queue.get()
                except asyncio.CancelledError:
                    break  # Clean shutdown

                payload = {
                    "type": event.type,
                    "mode": oven.mode.value,
                    "data": event.data,
                }
                try:
                    await ws.send_json(payload)
                except Exception as e:
                    # WebSocket closed, break out of loop
                    logger.debug(f"WebSocket send failed (client disconnected): {e}")
                    break
        except WebSocketDisconnect:
            pass
        except Exception as e:
            logger.error(f"Unexpected error in UI websocket: {e}")
        finally:
            oven.output.unregister_ui(queue)
            try:
                await ws.close()
            except Exception:
                logger.debug("UI websocket already closed")

    return app


def build_default_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_directory, settings.log_retention_days)
    return create_app(settings)
