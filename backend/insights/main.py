import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from insights.api.deps import get_feedback_store, get_notifier, get_report_store
from insights.api.routes import feedback, health, reports
from insights.config import settings as app_settings
from insights.middleware.error_handler import register_error_handlers
from insights.middleware.rate_limit import RateLimitMiddleware
from insights.middleware.security import SecurityMiddleware

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if app_settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    schedule_task = None
    if app_settings.report_schedule_enabled:
        from insights.services.reporting.schedule import run_report_schedule

        schedule_task = asyncio.create_task(
            run_report_schedule(get_feedback_store(), get_report_store(), get_notifier())
        )
    else:
        logger.info("Weekly report schedule disabled")
    yield
    if schedule_task is not None:
        schedule_task.cancel()


app = FastAPI(title=app_settings.app_name, version="0.1.0", lifespan=lifespan)

# Middleware (order matters: outermost first)
app.add_middleware(
    RateLimitMiddleware,
    max_requests=app_settings.rate_limit_requests,
    window_seconds=app_settings.rate_limit_window,
)
app.add_middleware(SecurityMiddleware, max_body_size=app_settings.max_upload_size)
app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Error handlers
register_error_handlers(app)

# Routes
app.include_router(health.router)
app.include_router(feedback.router)
app.include_router(reports.router)
