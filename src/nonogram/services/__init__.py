"""Services that run complete solving sessions."""

from .solve_service import solve_puzzle

__all__ = ["solve_puzzle"]
