"""Centralized environment configuration management for termgrid.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from termgrid.config import EnvVar, get_environment
    >>>
    >>> # Get values with automatic type conversion
    >>> padding = get_environment(EnvVar.TERMGRID_FRAME_PADDING)  # Returns int
    >>> color = get_environment(EnvVar.TERMGRID_COLOR)  # Returns bool
    >>>
    >>> # Override at runtime
    >>> padding = get_environment(EnvVar.TERMGRID_FRAME_PADDING, override=2)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload

TRUE_TOKENS = frozenset({"true", "1", "yes", "on"})
FALSE_TOKENS = frozenset({"false", "0", "no", "off"})


# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "TERMGRID_COLOR").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, bool).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"

    def parse(self, raw: str | None) -> Any:
        """Convert a raw environment string to ``var_type``.

        Unset or unparseable values fall back to the default.
        """
        if raw is None or self.var_type is str:
            return self.default if raw is None else raw
        if self.var_type is bool:
            token = raw.strip().lower()
            if token in TRUE_TOKENS:
                return True
            return False if token in FALSE_TOKENS else self.default
        try:
            return self.var_type(raw)
        except ValueError:
            return self.default


class EnvVar(Enum):
    """All environment variables used by termgrid.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - render: Output produced by the layout engine
        - frame: Default frame decoration
        - logging: Log output
        - demo: Example layouts rendered by the CLI
    """

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    TERMGRID_PLACEHOLDER = EnvConfig(
        name="TERMGRID_PLACEHOLDER",
        default="Loading...",
        var_type=str,
        description="Text rendered by a grid that has no size or no items",
        category="render",
    )
    TERMGRID_COLOR = EnvConfig(
        name="TERMGRID_COLOR",
        default=True,
        var_type=bool,
        description="Emit ANSI colour sequences in rendered output",
        category="render",
    )

    # -------------------------------------------------------------------------
    # Frame Defaults
    # -------------------------------------------------------------------------
    TERMGRID_BORDER_STYLE = EnvConfig(
        name="TERMGRID_BORDER_STYLE",
        default="rounded",
        var_type=str,
        description="Default frame border (rounded, normal, thick, double, hidden, none)",
        category="frame",
    )
    TERMGRID_BORDER_COLOR = EnvConfig(
        name="TERMGRID_BORDER_COLOR",
        default="#874BFD",
        var_type=str,
        description="Default frame border colour (hex or colour name)",
        category="frame",
    )
    TERMGRID_FRAME_PADDING = EnvConfig(
        name="TERMGRID_FRAME_PADDING",
        default=1,
        var_type=int,
        description="Default frame padding in cells on every side",
        category="frame",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    TERMGRID_LOG_LEVEL = EnvConfig(
        name="TERMGRID_LOG_LEVEL",
        default="WARNING",
        var_type=str,
        description="Log level used by the CLI (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
    )

    # -------------------------------------------------------------------------
    # Demo Layouts
    # -------------------------------------------------------------------------
    TERMGRID_DEMO_WIDTH = EnvConfig(
        name="TERMGRID_DEMO_WIDTH",
        default=90,
        var_type=int,
        description="Width used by `demo` when --width is not given",
        category="demo",
    )
    TERMGRID_DEMO_HEIGHT = EnvConfig(
        name="TERMGRID_DEMO_HEIGHT",
        default=24,
        var_type=int,
        description="Height used by `demo` when --height is not given",
        category="demo",
    )


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str, int or bool).

    Example:
        >>> get_environment(EnvVar.TERMGRID_FRAME_PADDING)
        1
        >>> get_environment(EnvVar.TERMGRID_FRAME_PADDING, override=3)
        3
    """
    if override is not None:
        return override
    config: EnvConfig = env_var.value
    return config.parse(os.environ.get(config.name))


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable.

    Args:
        env_var: Environment variable enum member.

    Returns:
        EnvConfig with name, default, type, and description.
    """
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_placeholder(override: str | None = None) -> str:
    """Get the text rendered by grids that cannot lay out yet."""
    return get_environment(EnvVar.TERMGRID_PLACEHOLDER, override)


def color_enabled(override: bool | None = None) -> bool:
    """Check whether rendered output should carry ANSI colour sequences."""
    return bool(get_environment(EnvVar.TERMGRID_COLOR, override))


def get_log_level(override: str | None = None) -> str:
    """Get the configured log level name, upper-cased."""
    return str(get_environment(EnvVar.TERMGRID_LOG_LEVEL, override)).upper()


def get_demo_size(
    width: int | None = None,
    height: int | None = None,
) -> tuple[int, int]:
    """Get the (width, height) used to render demo layouts.

    Resolution per axis: argument > environment > default.
    """
    return (
        get_environment(EnvVar.TERMGRID_DEMO_WIDTH, width),
        get_environment(EnvVar.TERMGRID_DEMO_HEIGHT, height),
    )


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (render, frame, logging, demo).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


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
