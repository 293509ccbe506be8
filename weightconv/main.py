# Weight Converter API Main Entry Point
import logging
import sys
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from . import __version__
from .ratelimit import limiter
from .settings import settings
from .routers.convert import router as convert_router
from .routers.ready import router as ready_router

# Configure structured logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("weightconv")

app = FastAPI(title=settings.app_name, version=__version__)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ready_router, tags=["ready"])
app.include_router(convert_router, tags=["convert"])

logger.info(f"{settings.app_name} {__version__} ready (rate limiting {'on' if limiter.enabled else 'off'})")
