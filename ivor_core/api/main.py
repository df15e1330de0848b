"""ASGI entry point: `uvicorn ivor_core.api.main:app`."""

from ivor_core.api.app import create_app
from ivor_core.config import configure_logging, load_settings

settings = load_settings()
configure_logging(settings)

app = create_app(settings=settings)
