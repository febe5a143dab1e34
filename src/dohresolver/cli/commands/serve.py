"""Server command implementation."""

import logging
import os
from typing import Optional

from dohresolver.api.main import run

logger = logging.getLogger(__name__)


def serve(host: Optional[str], port: Optional[int], reload: bool, options):
    """Start uvicorn with the API app."""
    settings = options.settings
    if host:
        settings.host = host
    if port:
        settings.port = port

    # The app reads its settings from the environment at startup, also in
    # the reloader's worker process.
    os.environ["DOH_HOST"] = settings.host
    os.environ["DOH_PORT"] = str(settings.port)
    if settings.nameservers:
        os.environ["DOH_NAMESERVERS"] = ",".join(settings.nameservers)

    logger.debug(f"Starting uvicorn on {settings.host}:{settings.port} (reload={reload})")
    level = logging.getLevelName(logging.getLogger().getEffectiveLevel())
    run(settings.host, settings.port, reload=reload, log_level=level)
