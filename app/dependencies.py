"""Dependency injection for FastAPI."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings
from slipprint.printing import PrintDispatcher


@lru_cache
def get_dispatcher() -> PrintDispatcher:
    """Get the process-wide print dispatcher.

    Returns:
        PrintDispatcher: Dispatcher built from the application settings.
    """
    settings = get_settings()
    return PrintDispatcher(settings.print_configuration(), default_method=settings.print_method)


AppSettings = Annotated[Settings, Depends(get_settings)]
Dispatcher = Annotated[PrintDispatcher, Depends(get_dispatcher)]
