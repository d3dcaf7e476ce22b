"""Core runtime components."""
from app.core.broadcaster import Broadcaster

__all__ = [
    "Broadcaster",
]
