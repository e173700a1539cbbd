"""Plugin infrastructure for lintprogress.

Formatter plugins (lintprogress.formatters) are discovered via Python
entry points.
"""

from lintprogress.plugins.discovery import (
    FORMATTER_ENTRY_POINT_GROUP,
    discover_plugins,
)

__all__ = [
    "discover_plugins",
    "FORMATTER_ENTRY_POINT_GROUP",
]
