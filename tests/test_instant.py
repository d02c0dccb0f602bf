"""Test suite for instant.py - Instant action implementations."""

import pytest

from nodeactions import (
    CallFunction,
    CallFunctionWithTarget,
    Hide,
    InvalidArgument,
    Place,
    PreconditionViolation,
    Show,
    ToggleVisibility,
    UnsupportedOperation,
    attach,
)


class TestPlace:
    """Test suite for Place action."""

    def test_place_initialization(self):
        """Test Place action initialization."""
        action = Place((100, 200))
        assert action.position == (100, 200)
        assert action.done

    def test_place_requires_position(self):
        """Test Place action requires position parameter."""
        with pytest.raises(InvalidArgument):
            Place()

    def test_place_execution(self, node):
        """Test Place sets the position inside start()."""
        attach(Place((100, 200)), node)
        assert node.position == (100, 200)

    def test_place_step_and_stop_are_noops(self, node):
        """Test step/stop do not move the node again."""
        running = attach(Place((1, 1)), node)
        node.position = (5, 5)
        running.step(1.0)
        running.stop()
        assert node.position == (5, 5)

    def test_place_not_reversible_by_default(self):
        """Test Place cannot be reversed without the prior position."""
        with pytest.raises(UnsupportedOperation):
            Place((1, 2)).reverse()

    def test_place_reverse_with_previous_position(self, node):
        """Test Place with previous_position reverses back to it."""
        reversed_action = Place((10, 10), previous_position=(0, 0)).reverse()
        attach(reversed_action, node)
        assert node.position == (0, 0)
        assert reversed_action.previous_position == (10, 10)


class TestVisibility:
    """Test suite for Hide, Show and ToggleVisibility."""

    def test_hide_execution(self, node):
        """Test Hide action execution."""
        attach(Hide(), node)
        assert not node.visible

    def test_show_execution(self, node):
        """Test Show action execution."""
        node.visible = False
        attach(Show(), node)
        assert node.visible

    def test_hide_and_show_reverse_each_other(self):
        """Test Hide reverses to Show and Show to Hide."""
        assert isinstance(Hide().reverse(), Show)
        assert isinstance(Show().reverse(), Hide)

    def test_toggle_visibility(self, node):
        """Test ToggleVisibility flips the current state."""
        attach(ToggleVisibility(), node)
        assert not node.visible
        attach(ToggleVisibility(), node)
        assert node.visible

    def test_toggle_reverses_to_itself(self):
        """Test ToggleVisibility is its own inverse."""
        assert isinstance(ToggleVisibility().reverse(), ToggleVisibility)

    def test_visibility_requires_target(self):
        """Test visibility actions refuse to start unbound."""
        with pytest.raises(PreconditionViolation):
            Hide().start()


class TestCallFunction:
    """Test suite for CallFunction and CallFunctionWithTarget."""

    def test_call_function_invoked_in_start(self):
        """Test the callback runs synchronously inside start()."""
        calls = []
        action = CallFunction(lambda: calls.append("called"))
        running = attach(action, None)

        assert calls == ["called"]
        assert running.done

    def test_call_function_with_arguments(self):
        """Test extra arguments are forwarded."""
        calls = []
        attach(CallFunction(calls.append, "value"), None)
        assert calls == ["value"]

    def test_call_function_requires_callable(self):
        """Test non-callables are rejected at construction."""
        with pytest.raises(InvalidArgument):
            CallFunction("not callable")
        with pytest.raises(InvalidArgument):
            CallFunction()

    def test_call_function_not_reversible(self):
        """Test CallFunction has no inverse."""
        with pytest.raises(UnsupportedOperation):
            CallFunction(lambda: None).reverse()

    def test_call_function_clone_calls_same_function(self):
        """Test clones call the same function each run."""
        calls = []
        action = CallFunction(lambda: calls.append(1))
        attach(action, None)
        attach(action.clone(), None)
        assert calls == [1, 1]

    def test_callback_exception_propagates(self):
        """Test errors raised by the callback reach the caller."""

        def boom():
            raise KeyError("boom")

        with pytest.raises(KeyError):
            attach(CallFunction(boom), None)

    def test_call_function_with_target(self, node):
        """Test the target is passed as the first argument."""
        seen = []
        attach(CallFunctionWithTarget(lambda target, tag: seen.append((target, tag)), "hit"), node)
        assert seen == [(node, "hit")]

    def test_call_function_with_target_clone_type(self):
        """Test clone() preserves the subclass."""
        action = CallFunctionWithTarget(print)
        assert isinstance(action.clone(), CallFunctionWithTarget)

    def test_repr(self):
        """Test repr names the function."""

        def on_done():
            pass

        assert repr(CallFunction(on_done)) == "CallFunction(func=on_done)"
