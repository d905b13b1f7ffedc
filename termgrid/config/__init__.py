"""Centralized configuration management for termgrid.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from termgrid.config import EnvVar, get_environment
    >>>
    >>> placeholder = get_environment(EnvVar.TERMGRID_PLACEHOLDER)  # "Loading..."
    >>> padding = get_environment(EnvVar.TERMGRID_FRAME_PADDING, override=2)
    >>>
    >>> for var in list_environment_variables("frame"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    render: Placeholder text and colour output
    frame: Default frame border and padding
    logging: CLI log level
    demo: Size used for the example layouts
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Main interface
    color_enabled,
    get_demo_size,
    get_environment,
    get_environment_info,
    get_log_level,
    get_placeholder,
    # Introspection
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_placeholder",
    "color_enabled",
    "get_log_level",
    "get_demo_size",
    # Introspection
    "list_environment_variables",
]
