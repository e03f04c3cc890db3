"""Pacing for animated output."""

from .pacing import PacingWaiter, Waiter

__all__ = ["PacingWaiter", "Waiter"]
