"""Runtime - wrapping unreliable operations into Results.

Contains: try_result / try_result_sync boundaries and the decorator adapters.
"""

from .decorator import wrap_methods, wrap_result
from .wrap import MapError, try_result, try_result_sync

__all__ = [
    "try_result",
    "try_result_sync",
    "MapError",
    "wrap_result",
    "wrap_methods",
]
