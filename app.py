"""Builds the HTTP calculator.

``uvicorn app:app`` serves the module-level instance, which is limited
to ``API_MAX_DIGITS`` digits per value.  Tests build their own instance
through ``create_app`` with whatever batch settings they need.
"""
from __future__ import annotations

from fastapi import FastAPI

from api import router, set_settings
from batch import BatchSettings

# Digits per value in the served app.
API_MAX_DIGITS = 512


def create_app(settings: BatchSettings | None = None) -> FastAPI:
    """FastAPI app exposing the ``/bignum`` routes under ``settings``."""
    if settings is None:
        settings = BatchSettings(max_digits=API_MAX_DIGITS)

    set_settings(settings)

    app = FastAPI(
        title="Radix BigNum Calculator",
        description=(
            "Signed integers of any length written in a radix between 2 and "
            f"16. Values are limited to {settings.max_digits or 'any number of'} "
            "digits. Evaluate one operator, change radix, compare two values "
            "or run a batch job in the plain-text block format."
        ),
        version="0.1.0",
    )
    app.include_router(router)
    return app


app = create_app()
