"""Formatter plugins for lintprogress output.

Plugins are discovered via Python entry points (lintprogress.formatters
group). The built-in progress formatter is always available.
"""

from __future__ import annotations

import inspect
from typing import IO, Any, Dict, List, Type

from lintprogress.core.logging import get_logger
from lintprogress.formatters.aggregator import OffenseAggregator
from lintprogress.formatters.base import FormatterPlugin
from lintprogress.formatters.progress import ProgressFormatter
from lintprogress.formatters.renderer import OffenseRenderer, mark_for, worst_severity
from lintprogress.formatters.summary import SummaryReporter
from lintprogress.plugins import FORMATTER_ENTRY_POINT_GROUP
from lintprogress.plugins.discovery import discover_plugins

LOGGER = get_logger(__name__)

BUILTIN_FORMATTERS: Dict[str, Type[FormatterPlugin]] = {
    "progress": ProgressFormatter,
}


def discover_formatter_plugins() -> Dict[str, Type[FormatterPlugin]]:
    """Return built-in formatters merged with installed formatter plugins."""
    plugins: Dict[str, Type[FormatterPlugin]] = dict(BUILTIN_FORMATTERS)
    plugins.update(discover_plugins(FORMATTER_ENTRY_POINT_GROUP, FormatterPlugin))
    return plugins


def get_formatter_plugin(name: str, output: IO[str], **kwargs: Any) -> FormatterPlugin | None:
    """Get an instantiated formatter plugin by name, or None if unknown.

    Options the formatter's constructor does not declare are dropped, so
    third-party formatters only receive what they understand.
    """
    plugin_class = discover_formatter_plugins().get(name)
    if plugin_class is None:
        return None
    options = _supported_options(plugin_class, kwargs)
    return plugin_class(output, **options)  # type: ignore[call-arg]


def _supported_options(plugin_class: Type[FormatterPlugin], options: Dict[str, Any]) -> Dict[str, Any]:
    params = inspect.signature(plugin_class).parameters
    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params.values()):
        return dict(options)
    supported = {key: value for key, value in options.items() if key in params}
    for key in options.keys() - supported.keys():
        LOGGER.debug(f"Formatter {plugin_class.__name__} does not accept '{key}', skipping it")
    return supported


def list_available_formatters() -> List[str]:
    """List names of all available formatters."""
    return sorted(discover_formatter_plugins())


__all__ = [
    "FormatterPlugin",
    "OffenseAggregator",
    "OffenseRenderer",
    "ProgressFormatter",
    "SummaryReporter",
    "mark_for",
    "worst_severity",
    "discover_formatter_plugins",
    "get_formatter_plugin",
    "list_available_formatters",
]
