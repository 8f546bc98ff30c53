"""
rent_car.api.__main__

Entrypoint: `python -m rent_car.api` (or the `rent-car-api` script).
"""

from __future__ import annotations

import uvicorn

from rent_car.api.app import create_app
from rent_car.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
