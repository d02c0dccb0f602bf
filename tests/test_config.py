"""Test suite for config.py - debug options and environment configuration."""

import pytest

from nodeactions import (
    Action,
    Blink,
    InvalidArgument,
    MoveBy,
    attach,
    clear_observed_actions,
    configure_from_environment,
    get_debug_options,
    observe_actions,
    set_debug_options,
    set_strict_lifecycle,
)


class TestDebugOptions:
    """Test suite for the programmatic debug configuration."""

    def test_defaults(self):
        """Test logging is off and lifecycle checks are strict by default."""
        assert get_debug_options() == {
            "level": 0,
            "include_all": False,
            "include": None,
            "strict": True,
        }

    def test_set_debug_options(self):
        """Test level, include_all and include are stored."""
        set_debug_options(level=3, include_all=True, include=[MoveBy, "Blink"])
        options = get_debug_options()

        assert options["level"] == 3
        assert options["include_all"] is True
        assert options["include"] == {"MoveBy", "Blink"}

    def test_negative_level_rejected(self):
        """Test the debug level cannot be negative."""
        with pytest.raises(InvalidArgument):
            set_debug_options(level=-1)

    def test_observe_actions_extends_filter(self):
        """Test observe_actions adds to an existing filter."""
        observe_actions(MoveBy)
        observe_actions("Blink")
        assert get_debug_options()["include"] == {"MoveBy", "Blink"}

        clear_observed_actions()
        assert get_debug_options()["include"] is None

    def test_get_debug_options_returns_copy(self):
        """Test mutating the returned include set does not change the filter."""
        observe_actions(MoveBy)
        get_debug_options()["include"].add("Delay")
        assert Action.debug_include_classes == {"MoveBy"}

    def test_set_strict_lifecycle(self):
        """Test strict mode can be toggled."""
        set_strict_lifecycle(False)
        assert get_debug_options()["strict"] is False
        set_strict_lifecycle(True)
        assert get_debug_options()["strict"] is True

    def test_observed_class_is_logged(self, node, capsys):
        """Test observed classes produce output at the configured level."""
        set_debug_options(level=2)
        observe_actions(Blink)
        attach(Blink(2, 1.0), node)
        attach(MoveBy((1, 0), 1.0), node)

        output = capsys.readouterr().out
        assert "[NA L2 Blink] start()" in output
        assert "MoveBy" not in output


class TestConfigureFromEnvironment:
    """Test suite for NODEACTIONS_* environment variables."""

    def test_empty_environment_changes_nothing(self):
        """Test no variables leave the defaults in place."""
        options = configure_from_environment({})
        assert options["level"] == 0
        assert options["include"] is None
        assert options["strict"] is True

    def test_environment_values_applied(self):
        """Test each variable maps onto an option."""
        options = configure_from_environment(
            {
                "NODEACTIONS_DEBUG": "2",
                "NODEACTIONS_DEBUG_ALL": "1",
                "NODEACTIONS_DEBUG_INCLUDE": "MoveBy, Blink,",
                "NODEACTIONS_STRICT": "0",
            }
        )

        assert options == {
            "level": 2,
            "include_all": True,
            "include": {"MoveBy", "Blink"},
            "strict": False,
        }

    def test_reads_os_environ_by_default(self, monkeypatch):
        """Test os.environ is used when no mapping is given."""
        monkeypatch.setenv("NODEACTIONS_DEBUG", "1")
        assert configure_from_environment()["level"] == 1

    @pytest.mark.parametrize(
        "environ",
        [
            {"NODEACTIONS_DEBUG": "loud"},
            {"NODEACTIONS_DEBUG": "-2"},
            {"NODEACTIONS_STRICT": "yes"},
        ],
    )
    def test_invalid_values_rejected(self, environ):
        """Test malformed variables raise InvalidArgument."""
        with pytest.raises(InvalidArgument):
            configure_from_environment(environ)
