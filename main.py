import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

# Custom modules
import config
import logging_utils
import metrics
from schema import BadgeQuery

SVG_CONTENT_TYPE = "image/svg+xml; charset=utf-8"
# Every hit changes the badge, so nothing along the way may cache it
NO_CACHE = "max-age=0, no-cache, no-store, must-revalidate"

# Paths that are not badges
FIXED_PATHS = {"/", "/health", "/health/live", "/health/ready", "/metrics", "/stats"}


def _metric_path(path):
    # One label value for all badges, or every key would become its own series
    if path in FIXED_PATHS:
        return path
    if path.count("/") == 1:
        return "/{key}"
    return "unmatched"


def create_app(handler=None, settings=None):
    """
    Builds the FastAPI app around a BadgeHandler.
    Without a handler, one is loaded from settings (or the environment) on startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "handler", None) is None:
            current = settings or config.Settings.from_env()
            # Broken files or settings raise here and the server never starts
            app.state.handler = config.load_handler(current)
            logging_utils.log_event(
                "startup",
                colors=len(app.state.handler.scale.colors),
                max_views=app.state.handler.scale.max_views,
                template=str(current.template_path),
            )
        yield
        logging_utils.log_event("shutdown")

    app = FastAPI(title="Profile View Counter", lifespan=lifespan)
    app.state.handler = handler

    @app.middleware("http")
    async def log_middleware(request: Request, call_next):
        request_id = str(uuid.uuid4())
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time

        # METRICS: Count every HTTP request
        metric_path = _metric_path(request.url.path)
        metrics.inc("http_requests_total", {
            "path": metric_path,
            "status": str(response.status_code),
        })

        # LOGGING: badges are logged by their endpoint, with the key and count
        if metric_path != "/{key}":
            logging_utils.log_request(
                request_id=request_id,
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                latency=process_time,
            )

        return response

    @app.get("/")
    def index():
        return Response(status_code=200)

    @app.get("/health")
    @app.get("/health/live")
    def health_live():
        return {"status": "alive"}

    @app.get("/health/ready")
    def health_ready(request: Request, response: Response):
        badge_handler = request.app.state.handler
        counter_is_ok = badge_handler is not None and badge_handler.counter.check()

        if counter_is_ok:
            return {"status": "ready"}
        response.status_code = 503
        return {
            "status": "not ready",
            "counter": "up" if counter_is_ok else "down",
        }

    @app.get("/metrics")
    def get_metrics():
        return PlainTextResponse(metrics.generate_text())

    @app.get("/stats")
    def get_stats(request: Request):
        return request.app.state.handler.counter.stats()

    @app.get("/{key}")
    def view_count_badge(request: Request, key: str, fill_mode: str | None = Query(None)):
        start_time = time.time()
        request_id = str(uuid.uuid4())

        try:
            query = BadgeQuery(fill_mode=fill_mode)
        except ValidationError:
            metrics.inc("badge_errors_total", {"reason": "invalid_fill_mode"})
            logging_utils.log_request(
                request_id=request_id, method="GET", path=request.url.path,
                status=400, latency=time.time() - start_time,
                key=key, fill_mode=fill_mode, result="invalid_fill_mode",
            )
            return PlainTextResponse(f"Invalid fill_mode: {fill_mode!r}", status_code=400)

        result = request.app.state.handler.handle(key, query.fill_mode)

        if not result.ok:
            metrics.inc("badge_errors_total", {"reason": "counter_unavailable"})
            logging_utils.log_event("counter_unavailable", level="ERROR", key=key, error=result.body)
            logging_utils.log_request(
                request_id=request_id, method="GET", path=request.url.path,
                status=500, latency=time.time() - start_time,
                key=key, fill_mode=query.fill_mode.value, result="counter_unavailable",
            )
            return PlainTextResponse(result.body, status_code=500)

        metrics.inc("badge_renders_total", {"fill_mode": query.fill_mode.value})
        logging_utils.log_request(
            request_id=request_id, method="GET", path=request.url.path,
            status=200, latency=time.time() - start_time,
            key=key, fill_mode=query.fill_mode.value, views=result.views, color=result.color,
        )
        return Response(
            content=result.body,
            media_type=SVG_CONTENT_TYPE,
            headers={"Cache-Control": NO_CACHE},
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = config.Settings.from_env()
    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port)
