"""Process entrypoint: configure logging and serve the API with uvicorn."""

from __future__ import annotations

import logging

import uvicorn

from product_catalog.infra import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main() -> None:
    logging.basicConfig(level=config.log_level(), format=LOG_FORMAT)

    host = config.server_host()
    port = config.server_port()
    logging.getLogger(__name__).info("Starting server", extra={"host": host, "port": port})

    uvicorn.run(
        "product_catalog.entrypoints.http.app:app",
        host=host,
        port=port,
        lifespan="on",
        log_level=config.log_level().lower(),
    )


if __name__ == "__main__":
    main()
