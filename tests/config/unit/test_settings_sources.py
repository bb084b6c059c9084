"""Unit tests for environment and argument overlays."""

from appsettings.config.sources import (
    apply_args,
    apply_env_vars,
    environ_entries,
    is_flag,
)


class TestApplyEnvVars:
    """Test NAME=VALUE overlays."""

    def test_keys_are_lower_cased(self):
        """Test that variable names are lower-cased."""
        overlay = {}

        apply_env_vars(["PORT=8080", "DebugMode=true"], overlay)

        assert overlay == {"port": 8080, "debugmode": True}

    def test_underscores_preserved(self):
        """Test that only case folding is applied to names."""
        overlay = {}

        apply_env_vars(["DATABASE_URL=postgres://db"], overlay)

        assert overlay == {"database_url": "postgres://db"}

    def test_entries_without_separator_skipped(self):
        """Test that entries without '=' contribute nothing."""
        overlay = {}

        apply_env_vars(["NOSEPARATOR", "NAME=app"], overlay)

        assert overlay == {"name": "app"}

    def test_value_split_on_first_separator(self):
        """Test that '=' inside the value is kept."""
        overlay = {}

        apply_env_vars(["DSN=user=admin;pwd=x"], overlay)

        assert overlay == {"dsn": "user=admin;pwd=x"}

    def test_empty_value(self):
        """Test that NAME= stores the empty string."""
        overlay = {}

        apply_env_vars(["NAME="], overlay)

        assert overlay == {"name": ""}

    def test_overwrites_existing_keys(self):
        """Test that entries replace earlier overlay values."""
        overlay = {"port": 8080, "name": "file"}

        apply_env_vars(["PORT=9000"], overlay)

        assert overlay == {"port": 9000, "name": "file"}

    def test_none_is_noop(self):
        """Test that unset entries leave the overlay untouched."""
        overlay = {"port": 1}

        apply_env_vars(None, overlay)

        assert overlay == {"port": 1}

    def test_values_are_inferred(self):
        """Test that values go through type inference."""
        overlay = {}

        apply_env_vars(["A=0", "B=2.5", "C=text"], overlay)

        assert overlay["a"] is False
        assert overlay["b"] == 2.5
        assert overlay["c"] == "text"


class TestApplyArgs:
    """Test --key value and --flag overlays."""

    def test_key_value(self):
        """Test that a flag followed by a value stores the inferred value."""
        overlay = {}

        apply_args(["--port", "3000"], overlay)

        assert overlay == {"port": 3000}

    def test_trailing_flag_is_true(self):
        """Test that a flag at the end of the list is a boolean flag."""
        overlay = {}

        apply_args(["--port", "8080", "--debug"], overlay)

        assert overlay == {"port": 8080, "debug": True}

    def test_flag_followed_by_flag(self):
        """Test that a flag followed by another flag is True."""
        overlay = {}

        apply_args(["--verbose", "--name", "svc"], overlay)

        assert overlay == {"verbose": True, "name": "svc"}

    def test_keys_are_lower_cased(self):
        """Test that flag names are lower-cased."""
        overlay = {}

        apply_args(["--DebugMode", "false"], overlay)

        assert overlay == {"debugmode": False}

    def test_inert_tokens_ignored(self):
        """Test that tokens not following a flag are skipped."""
        overlay = {}

        apply_args(["serve", "-v", "--port", "8080", "extra"], overlay)

        assert overlay == {"port": 8080}

    def test_single_dash_value_is_consumed(self):
        """Test that a single-dash token counts as a value."""
        overlay = {}

        apply_args(["--offset", "-5"], overlay)

        assert overlay == {"offset": -5}

    def test_consumed_value_not_reused(self):
        """Test that a consumed value is not treated as an inert token or key."""
        overlay = {}

        apply_args(["--a", "x", "y", "--b"], overlay)

        assert overlay == {"a": "x", "b": True}

    def test_last_occurrence_wins(self):
        """Test that repeated flags overwrite earlier values."""
        overlay = {}

        apply_args(["--port", "1", "--port", "2"], overlay)

        assert overlay == {"port": 2}

    def test_none_is_noop(self):
        """Test that unset args leave the overlay untouched."""
        overlay = {"port": 1}

        apply_args(None, overlay)

        assert overlay == {"port": 1}

    def test_empty_list_is_noop(self):
        """Test that an empty list behaves like unset."""
        overlay = {"port": 1}

        apply_args([], overlay)

        assert overlay == {"port": 1}


class TestHelpers:
    """Test small helpers."""

    def test_is_flag(self):
        """Test the flag prefix check."""
        assert is_flag("--port")
        assert not is_flag("-p")
        assert not is_flag("port")

    def test_environ_entries(self):
        """Test formatting a mapping into NAME=VALUE entries."""
        entries = environ_entries({"PORT": "80", "NAME": "a=b"})

        assert sorted(entries) == ["NAME=a=b", "PORT=80"]

    def test_environ_entries_round_trip(self):
        """Test that formatted entries overlay back to the same keys."""
        overlay = {}

        apply_env_vars(environ_entries({"PORT": "80"}), overlay)

        assert overlay == {"port": 80}
