"""Access logging and HTTP metrics middleware."""

import re
import time
from typing import Callable, List, Tuple

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route, compile_path

from loan_decision.core.metrics import record_http_request

logger = structlog.get_logger(__name__)

# Paths that get no access log line
QUIET_PATHS = frozenset({"/metrics", "/docs", "/redoc", "/openapi.json"})


def _route_templates(app) -> List[Tuple[re.Pattern, str]]:
    """
    Full path templates of every route, compiled once per app.

    The route object in the request scope only knows the path declared on
    its own router, without the prefixes of the routers that include it,
    so the templates come from the OpenAPI paths plus the app's own routes.
    """
    templates = getattr(app.state, "route_templates", None)
    if templates is None:
        paths = list(app.openapi().get("paths", {}))
        paths += [route.path for route in app.routes if isinstance(route, Route)]
        templates = [(compile_path(path)[0], path) for path in dict.fromkeys(paths)]
        app.state.route_templates = templates
    return templates


def _endpoint_label(request: Request) -> str:
    """Route template of the requested path, e.g. /v1/decision."""
    path = request.url.path
    for regex, template in _route_templates(request.app):
        if regex.match(path):
            return template
    return "unmatched"


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Writes one access log line per request and records its latency.

    Successful requests log at info, client errors at warning and server
    errors (including exceptions escaping the app) at error.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        quiet = request.url.path in QUIET_PATHS
        log = logger.bind(method=request.method, path=request.url.path)
        if not quiet:
            log.debug("request_started", client=request.client.host if request.client else None)

        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        except Exception as e:
            log.error("request_failed", error=str(e), error_type=type(e).__name__)
            raise
        finally:
            duration = time.perf_counter() - started

            if not quiet:
                emit = log.info
                if status_code >= 500:
                    emit = log.error
                elif status_code >= 400:
                    emit = log.warning
                emit(
                    "request_completed",
                    status_code=status_code,
                    duration_ms=round(duration * 1000, 2),
                )

            if request.app.state.settings.metrics_enabled:
                record_http_request(request.method, _endpoint_label(request), status_code, duration)
