"""ASGI entrypoint.

Serve with ``uvicorn dorry.api.main:app`` after installing the ``serve`` extra.
"""

import logging

from dorry.api.app import create_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = create_app()
