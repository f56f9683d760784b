import itertools
import random
import unittest

from cube_timer.core.config import INSPECTION_SECONDS, TimerConfig
from cube_timer.core.session import Done, Idle, Inspecting, Session, Solving
from cube_timer.logic.scramble import AdjacencyRule, generate_scramble


class FakeClock:
    """Reloj manual para mover el tiempo en los tests."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def tick(self, secs: float) -> None:
        self.now += secs


def make_session(clock: FakeClock, seed: int = 0) -> Session:
    rng = random.Random(seed)
    return Session(clock, lambda: generate_scramble(rng))


class TestSession(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.session = make_session(self.clock)

    def test_starts_idle_with_scramble(self):
        self.assertIsInstance(self.session.state, Idle)
        self.assertTrue(self.session.state.scramble.is_valid())

    def test_full_cycle(self):
        s = self.session
        self.assertIsInstance(s.advance(), Inspecting)
        self.assertEqual(s.state.start, self.clock.now)

        self.clock.tick(2.0)
        self.assertIsInstance(s.advance(), Solving)
        self.assertEqual(s.state.start, self.clock.now)

        self.clock.tick(7.5)
        state = s.advance()
        self.assertIsInstance(state, Done)
        self.assertAlmostEqual(state.elapsed, 7.5)

        self.assertIsInstance(s.advance(), Idle)

    def test_done_to_idle_generates_new_scramble(self):
        s = self.session
        first = s.state.scramble
        for _ in range(4):
            s.advance()
        self.assertIsInstance(s.state, Idle)
        self.assertNotEqual(s.state.scramble, first)

    def test_reshuffle_in_idle(self):
        s = self.session
        before = s.state.scramble
        self.assertTrue(s.reshuffle())
        self.assertIsInstance(s.state, Idle)
        self.assertNotEqual(s.state.scramble, before)

    def test_reshuffle_is_noop_outside_idle(self):
        s = self.session
        for _ in range(3):
            s.advance()
            state = s.state
            self.assertFalse(s.reshuffle())
            self.assertIs(s.state, state)

    def test_inspection_boundary(self):
        s = self.session
        s.advance()
        self.clock.tick(14.999)
        self.assertFalse(s.update())
        self.assertIsInstance(s.state, Inspecting)

        self.clock.now = s.state.start + INSPECTION_SECONDS
        self.assertTrue(s.update())
        self.assertIsInstance(s.state, Solving)
        self.assertEqual(s.state.start, self.clock.now)

    def test_inspection_remaining(self):
        s = self.session
        self.assertEqual(s.inspection_remaining(), 0.0)
        s.advance()
        self.clock.tick(4.0)
        self.assertAlmostEqual(s.inspection_remaining(), INSPECTION_SECONDS - 4.0)
        self.clock.tick(100.0)
        self.assertEqual(s.inspection_remaining(), 0.0)

    def test_update_only_acts_while_inspecting(self):
        s = self.session
        for _ in range(4):
            if not isinstance(s.state, Inspecting):
                self.clock.tick(60.0)
                state = s.state
                self.assertFalse(s.update())
                self.assertIs(s.state, state)
            s.advance()

    def test_solve_elapsed(self):
        s = self.session
        s.advance()
        s.advance()
        self.clock.tick(3.25)
        self.assertAlmostEqual(s.solve_elapsed(), 3.25)
        s.advance()
        self.clock.tick(10.0)
        self.assertAlmostEqual(s.solve_elapsed(), 3.25)

    def test_history(self):
        s = self.session
        for secs in (9.0, 11.0):
            s.advance()
            s.advance()
            self.clock.tick(secs)
            s.advance()
            s.advance()
        self.assertEqual(len(s.history), 2)
        self.assertAlmostEqual(s.history[0], 9.0)
        self.assertAlmostEqual(s.history[1], 11.0)

    def test_end_to_end(self):
        s = self.session
        scramble = s.state.scramble

        s.advance()
        self.assertIsInstance(s.state, Inspecting)
        self.assertAlmostEqual(s.state.start, self.clock.now)

        self.clock.tick(16.0)
        s.update()
        self.assertIsInstance(s.state, Solving)
        solve_start = self.clock.now

        self.clock.tick(20.0)
        s.advance()
        self.assertIsInstance(s.state, Done)
        self.assertAlmostEqual(s.state.elapsed, self.clock.now - solve_start)
        self.assertAlmostEqual(s.state.elapsed, 20.0)

        s.advance()
        self.assertIsInstance(s.state, Idle)
        self.assertNotEqual(s.state.scramble, scramble)

    def test_from_config_uses_rule_and_seed(self):
        config = TimerConfig(rule=AdjacencyRule.FACE, seed=123)
        a = Session.from_config(config, clock=FakeClock())
        b = Session.from_config(config, clock=FakeClock())
        self.assertEqual(a.state.scramble, b.state.scramble)
        self.assertTrue(a.state.scramble.is_valid(AdjacencyRule.FACE))

    def test_cycle_is_total(self):
        s = self.session
        order = itertools.cycle([Inspecting, Solving, Done, Idle])
        for expected in itertools.islice(order, 12):
            self.assertIsInstance(s.advance(), expected)


if __name__ == "__main__":
    unittest.main()
