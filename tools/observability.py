"""Timing and outcome logging for weather lookups."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Callable, TypeVar

from stylist_app.logging_config import (
    WEATHER_LOOKUP_COMPLETED,
    WEATHER_LOOKUP_FAILED,
    WEATHER_LOOKUP_STARTED,
    get_logger,
    log_event,
)

LOGGER = get_logger(__name__)
Provider = TypeVar("Provider")
Report = TypeVar("Report")


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


def instrument_weather_lookup(
    lookup: Callable[[Provider, str], Report],
) -> Callable[[Provider, str], Report]:
    """Wrap a provider's ``get_weather`` with started, completed and failed events.

    The location itself is never logged. Failures record the lookup error code
    when the exception has one and are re-raised unchanged.
    """

    @wraps(lookup)
    def wrapper(provider: Provider, location: str) -> Report:
        provider_name = type(provider).__name__
        start = time.perf_counter()
        log_event(LOGGER, logging.INFO, WEATHER_LOOKUP_STARTED, provider=provider_name)
        try:
            report = lookup(provider, location)
        except Exception as exc:
            log_event(
                LOGGER,
                logging.WARNING,
                WEATHER_LOOKUP_FAILED,
                provider=provider_name,
                error_code=getattr(exc, "code", type(exc).__name__),
                duration_ms=_elapsed_ms(start),
                exc_info=True,
            )
            raise
        log_event(
            LOGGER,
            logging.INFO,
            WEATHER_LOOKUP_COMPLETED,
            provider=provider_name,
            condition=getattr(report, "condition", None),
            temperature_band=getattr(report, "temperature_band", None),
            duration_ms=_elapsed_ms(start),
        )
        return report

    return wrapper


__all__ = ["instrument_weather_lookup"]
