from .models import Guest

__all__ = [
    "Guest",
]
