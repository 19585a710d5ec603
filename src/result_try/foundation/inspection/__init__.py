"""Never-raising, cycle-safe inspection of arbitrary values.

- inspect: render any value as a tagged diagnostic string
- CIRCULAR / MAX_DEPTH / TRUNCATED: markers emitted for cycles, over-deep graphs
  and graphs larger than the node budget
- error_marker: marker format for a field whose inspection failed
"""

from .inspector import CIRCULAR, MAX_DEPTH, MAX_SAFE_INTEGER, TRUNCATED, error_marker, inspect, type_name

__all__ = ["inspect", "CIRCULAR", "MAX_DEPTH", "TRUNCATED", "MAX_SAFE_INTEGER", "error_marker", "type_name"]
