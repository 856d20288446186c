"""Slips module for order slip printing."""

from app.slips.router import router
from app.slips.service import SlipService

__all__ = ["router", "SlipService"]
