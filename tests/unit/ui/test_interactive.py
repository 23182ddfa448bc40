"""Unit tests for the interactive render-and-input loop."""

import curses
import logging
from unittest.mock import Mock

import pytest

from termcal.display.console_renderer import ConsoleRenderer
from termcal.ui.interactive import InteractiveController
from termcal.ui.keyboard import KeyboardHandler
from termcal.utils.exceptions import TerminalError


@pytest.fixture
def run_keys(state, fake_screen, make_window):
    """Run the controller over scripted key presses and return it."""

    def _run(*keys):
        controller = InteractiveController(state, fake_screen, KeyboardHandler(make_window(*keys)))
        controller.run()
        return controller

    return _run


class TestInteractiveLoop:
    """Test the blocking loop from first frame to exit."""

    def test_quit_immediately_renders_once(self, run_keys, state, fake_screen):
        """Test 'q' as the first key exits after the initial frame only."""
        controller = run_keys("q")

        assert fake_screen.count("flush") == 1
        assert fake_screen.count("clear") == 1
        assert not controller.is_running
        assert state.as_triple() == (15, 7, 2023)

    def test_each_key_rerenders(self, run_keys, fake_screen):
        """Test every non-exit key press is followed by exactly one frame."""
        run_keys(curses.KEY_DOWN, "x", curses.KEY_RESIZE, "q")
        assert fake_screen.count("flush") == 4

    def test_arrow_bindings(self, run_keys, state):
        """Test Up/Down move months and Left/Right move years."""
        run_keys(curses.KEY_DOWN, curses.KEY_DOWN, curses.KEY_UP, curses.KEY_RIGHT, "q")
        assert state.as_triple() == (15, 8, 2024)

        state.jump_to_today()
        run_keys(curses.KEY_LEFT, "q")
        assert state.as_triple() == (15, 7, 2022)

    def test_t_jumps_to_today(self, run_keys, state):
        """Test 't' restores the anchor after navigating away."""
        run_keys(curses.KEY_RIGHT, curses.KEY_UP, "t", "q")
        assert state.as_triple() == (15, 7, 2023)

    def test_modified_keys_are_noops(self, run_keys, state, fake_screen):
        """Test Shift, Ctrl and Alt variants of bound keys change nothing."""
        run_keys("Q", "\x11", "\x1b", "q", curses.KEY_SR, "T", "q")

        assert state.as_triple() == (15, 7, 2023)
        # initial frame plus one per ignored key, Alt+q counts as one key
        assert fake_screen.count("flush") == 6

    def test_last_frame_shows_state_after_navigation(self, run_keys, fake_screen):
        """Test the frame drawn after a key reflects the new month."""
        run_keys(curses.KEY_DOWN, "q")

        frames = fake_screen.printed()
        assert "August" in [text for _, _, text, _ in frames]
        last_year_cells = [text for _, _, text, _ in frames if text == "2023"]
        assert len(last_year_cells) == 2


class TestInteractiveErrors:
    """Test I/O errors propagate out of the loop."""

    def test_read_error_propagates(self, state, fake_screen, make_window):
        """Test a failed key read ends the loop with TerminalError."""
        window = make_window(curses.KEY_DOWN, curses.error("gone"))
        controller = InteractiveController(state, fake_screen, KeyboardHandler(window))

        with pytest.raises(TerminalError):
            controller.run()

        assert not controller.is_running
        assert fake_screen.count("flush") == 2

    def test_render_error_propagates(self, state, make_window):
        """Test a failed frame write ends the loop with TerminalError."""
        screen = Mock()
        screen.size.return_value = (80, 24)
        screen.flush.side_effect = TerminalError("write failed")
        controller = InteractiveController(state, screen, KeyboardHandler(make_window("q")))

        with pytest.raises(TerminalError, match="write failed"):
            controller.run()

        assert not controller.is_running


class TestInteractiveController:
    """Test controller wiring."""

    def test_default_renderer(self, state, fake_screen):
        """Test a ConsoleRenderer is created when none is given."""
        controller = InteractiveController(state, fake_screen, KeyboardHandler(Mock()))
        assert isinstance(controller.renderer, ConsoleRenderer)

    def test_custom_renderer_used(self, state, fake_screen, make_window):
        """Test frames go through the supplied renderer."""
        renderer = Mock()
        controller = InteractiveController(
            state, fake_screen, KeyboardHandler(make_window(curses.KEY_UP, "q")), renderer
        )
        controller.run()

        assert renderer.render.call_count == 2
        renderer.render.assert_called_with(state, fake_screen)

    def test_key_bindings_logged_at_start(self, state, fake_screen, make_window, caplog):
        """Test the key help is written to the log when the loop starts."""
        controller = InteractiveController(state, fake_screen, KeyboardHandler(make_window("q")))

        with caplog.at_level(logging.INFO, logger="termcal.ui.interactive"):
            controller.run()

        assert "Key bindings: q: Quit | t: Today" in caplog.text
