"""Expose dashboard card render functions."""

from .card_route_forecast import card_route_forecast

__all__ = [
    "card_route_forecast",
]
