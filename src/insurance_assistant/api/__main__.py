"""
insurance_assistant.api.__main__

Entrypoint for running the service via `python -m insurance_assistant.api`.
"""

from __future__ import annotations

import uvicorn

from insurance_assistant.api.app import create_app
from insurance_assistant.observability.logging import get_logger
from insurance_assistant.settings import get_settings

log = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)
    log.info(
        "serving",
        host=settings.api_host,
        port=settings.api_port,
        upstream=settings.insurance_api_base_url,
    )

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
        # `RequestContextMiddleware` already logs one line per request.
        access_log=False,
    )


if __name__ == "__main__":
    main()
