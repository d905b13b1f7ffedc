"""Tests for configuration management."""

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    color_enabled,
    get_demo_size,
    get_environment,
    get_environment_info,
    get_log_level,
    get_placeholder,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("TERMGRID_FRAME_PADDING", raising=False)
        result = get_environment(EnvVar.TERMGRID_FRAME_PADDING)
        assert result == 1

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("TERMGRID_FRAME_PADDING", "4")
        result = get_environment(EnvVar.TERMGRID_FRAME_PADDING, override=2)
        assert result == 2

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("TERMGRID_DEMO_WIDTH", "120")
        result = get_environment(EnvVar.TERMGRID_DEMO_WIDTH)
        assert result == 120
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("TERMGRID_COLOR", value)
            assert get_environment(EnvVar.TERMGRID_COLOR) is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("TERMGRID_COLOR", value)
            assert get_environment(EnvVar.TERMGRID_COLOR) is False

    @pytest.mark.unit
    def test_unrecognized_bool_returns_default(self, monkeypatch):
        """Unrecognized boolean text falls back to the default."""
        monkeypatch.setenv("TERMGRID_COLOR", "maybe")
        assert get_environment(EnvVar.TERMGRID_COLOR) is True

    @pytest.mark.unit
    def test_string_type(self, monkeypatch):
        """String type returns as-is."""
        monkeypatch.setenv("TERMGRID_PLACEHOLDER", "Please wait")
        result = get_environment(EnvVar.TERMGRID_PLACEHOLDER)
        assert result == "Please wait"

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("TERMGRID_DEMO_HEIGHT", "tall")
        result = get_environment(EnvVar.TERMGRID_DEMO_HEIGHT)
        assert result == 24


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.TERMGRID_BORDER_COLOR)
        assert isinstance(info, EnvConfig)
        assert info.name == "TERMGRID_BORDER_COLOR"
        assert info.default == "#874BFD"
        assert info.var_type is str
        assert info.category == "frame"

    @pytest.mark.unit
    def test_every_variable_is_described(self):
        """Every variable carries a description."""
        for var in EnvVar:
            assert get_environment_info(var).description


class TestEnvConfigParse:
    """Tests for raw value conversion."""

    @pytest.mark.unit
    def test_unset_returns_default(self):
        config = EnvConfig("X", 4, int)
        assert config.parse(None) == 4

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["on", " YES ", "1"])
    def test_bool_true_tokens(self, raw):
        assert EnvConfig("X", False, bool).parse(raw) is True

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["off", "No", "0"])
    def test_bool_false_tokens(self, raw):
        assert EnvConfig("X", True, bool).parse(raw) is False

    @pytest.mark.unit
    def test_bad_int_returns_default(self):
        assert EnvConfig("X", 7, int).parse("seven") == 7

    @pytest.mark.unit
    def test_string_kept_verbatim(self):
        assert EnvConfig("X", "a", str).parse(" b ") == " b "


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        """Returns all EnvVar members when no category."""
        result = list_environment_variables()
        assert len(result) == len(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filters by category correctly."""
        frame_vars = list_environment_variables("frame")
        assert EnvVar.TERMGRID_BORDER_STYLE in frame_vars
        assert EnvVar.TERMGRID_FRAME_PADDING in frame_vars
        assert EnvVar.TERMGRID_COLOR not in frame_vars


# =============================================================================
# Tests for convenience functions
# =============================================================================


class TestConvenienceFunctions:
    """Tests for typed shortcuts over get_environment."""

    @pytest.mark.unit
    def test_placeholder_default(self, monkeypatch):
        """Placeholder defaults to the loading text."""
        monkeypatch.delenv("TERMGRID_PLACEHOLDER", raising=False)
        assert get_placeholder() == "Loading..."

    @pytest.mark.unit
    def test_placeholder_override(self):
        """Explicit placeholder wins."""
        assert get_placeholder("...") == "..."

    @pytest.mark.unit
    def test_color_enabled_follows_env(self, monkeypatch):
        """Colour output can be disabled through the environment."""
        monkeypatch.setenv("TERMGRID_COLOR", "0")
        assert color_enabled() is False
        assert color_enabled(True) is True

    @pytest.mark.unit
    def test_log_level_upper_cased(self, monkeypatch):
        """Log level names are normalized to upper case."""
        monkeypatch.setenv("TERMGRID_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    @pytest.mark.unit
    def test_demo_size_resolution(self, monkeypatch):
        """Arguments beat environment, environment beats defaults."""
        monkeypatch.delenv("TERMGRID_DEMO_WIDTH", raising=False)
        monkeypatch.setenv("TERMGRID_DEMO_HEIGHT", "30")
        assert get_demo_size() == (90, 30)
        assert get_demo_size(40, 10) == (40, 10)
