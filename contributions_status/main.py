from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contributions_status.api.routes.contributions import router
from contributions_status.core.middleware import ContributionsRateLimitMiddleware
from contributions_status.core.observability import configure_logging
from contributions_status.core.observability import init_sentry
from contributions_status.services.fonts import load_graph_font
from contributions_status.settings import Settings


def create_app() -> FastAPI:
    """Build the FastAPI application with fonts, middleware and routes."""

    app_settings = Settings()
    configure_logging(app_settings)
    init_sentry(app_settings)

    app = FastAPI(title="contributions-status")
    app.state.graph_font = load_graph_font(
        app_settings.font_paths, size=app_settings.font_size
    )

    app.add_middleware(
        ContributionsRateLimitMiddleware,
        requests_per_window=app_settings.rate_limit_per_minute,
        window_seconds=app_settings.rate_limit_window_seconds,
        trust_forwarded_for=app_settings.trust_forwarded_for,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_allow_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["ETag"],
    )
    app.include_router(router)
    return app


app = create_app()
