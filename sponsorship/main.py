"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers and the
shared collaborators on app.state. No business logic here.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from sponsorship.api import api_router
from sponsorship.core.config import get_settings
from sponsorship.core.exception_handlers import register_exception_handlers
from sponsorship.core.lifespan import create_lifespan
from sponsorship.core.limiter import limiter
from sponsorship.infrastructure.cache import build_cache
from sponsorship.infrastructure.external.certificates import TypstCertificateRenderer
from sponsorship.infrastructure.external.mail import MailTemplateRenderer, build_mail_sender
from sponsorship.middleware import RequestLogMiddleware


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.cache = build_cache(settings)
    app.state.mail_sender = build_mail_sender(settings)
    app.state.mail_templates = MailTemplateRenderer()
    app.state.certificate_renderer = TypstCertificateRenderer(settings)

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

    register_exception_handlers(app)

    # Last added = outermost: request logging wraps CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogMiddleware)

    app.include_router(api_router, prefix="/api")

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "sponsorship.main:app",
        host=settings.server_host,
        port=settings.server_port,
    )


app = create_app()

if __name__ == "__main__":
    run()
