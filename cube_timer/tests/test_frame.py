import io
import random
import unittest

from rich.console import Console

from cube_timer.app import theme
from cube_timer.app.frame import (
    LABEL_DONE,
    LABEL_IDLE,
    LABEL_INSPECTING,
    LABEL_SOLVING,
    build_frame,
    format_seconds,
)
from cube_timer.app.terminal import render_frame
from cube_timer.core.session import Session
from cube_timer.logic.scramble import generate_scramble
from cube_timer.tests.test_session import FakeClock


class TestFrame(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        rng = random.Random(0)
        self.session = Session(self.clock, lambda: generate_scramble(rng))

    def test_format_seconds(self):
        self.assertEqual(format_seconds(12.3456), "12.346s")
        self.assertEqual(format_seconds(0.0), "0.000s")

    def test_idle_frame(self):
        frame = build_frame(self.session)
        self.assertEqual(frame.label, LABEL_IDLE)
        self.assertIsNone(frame.seconds)
        self.assertEqual(frame.moves, self.session.state.scramble.moves)
        self.assertEqual(frame.fg, theme.IDLE.fg)
        self.assertIsNone(frame.bg)

    def test_inspecting_frame_counts_down(self):
        self.session.advance()
        self.clock.tick(5.0)
        frame = build_frame(self.session)
        self.assertEqual(frame.label, LABEL_INSPECTING)
        self.assertEqual(frame.seconds, "10.000s")
        self.assertEqual(frame.moves, ())
        self.assertEqual(frame.fg, theme.INSPECTING.fg)

    def test_inspecting_warning_tone(self):
        self.session.advance()
        self.clock.tick(13.5)
        frame = build_frame(self.session)
        self.assertEqual(frame.seconds, "1.500s")
        self.assertEqual(frame.fg, theme.INSPECTING_WARNING.fg)

    def test_solving_and_done_frames(self):
        self.session.advance()
        self.session.advance()
        self.clock.tick(1.25)
        frame = build_frame(self.session)
        self.assertEqual(frame.label, LABEL_SOLVING)
        self.assertEqual(frame.seconds, "1.250s")

        self.session.advance()
        self.clock.tick(30.0)
        frame = build_frame(self.session)
        self.assertEqual(frame.label, LABEL_DONE)
        self.assertEqual(frame.seconds, "1.250s")
        self.assertEqual(frame.fg, theme.DONE.fg)

    def test_color_bg(self):
        frame = build_frame(self.session, color_bg=True)
        self.assertEqual(frame.bg, theme.IDLE.bg)
        self.assertEqual(frame.fg, theme.BG_MODE_FG)


class TestRenderFrame(unittest.TestCase):
    def _render(self, frame):
        console = Console(file=io.StringIO(), width=200, record=True)
        console.print(render_frame(frame))
        return console.export_text()

    def test_idle_shows_scramble(self):
        session = Session(FakeClock(), lambda: generate_scramble(random.Random(9)))
        frame = build_frame(session)
        text = self._render(frame)
        self.assertIn(LABEL_IDLE, text)
        self.assertIn(str(session.state.scramble), text)

    def test_solving_shows_seconds(self):
        clock = FakeClock()
        session = Session(clock, lambda: generate_scramble(random.Random(9)))
        session.advance()
        session.advance()
        clock.tick(2.0)
        text = self._render(build_frame(session, color_bg=True))
        self.assertIn(LABEL_SOLVING, text)
        self.assertIn("2.000s", text)


if __name__ == "__main__":
    unittest.main()
