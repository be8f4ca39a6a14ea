import io
import random
import unittest
from contextlib import redirect_stdout

from game import Direction, GameState, Position, Result, create_initial_state, render_ascii, status_line
from snake_core.cli import main, run_interactive, run_script


class TestRender(unittest.TestCase):
    def test_given_state_when_rendering_then_head_body_food_marked(self):
        s = GameState(snake=(Position(1, 1), Position(0, 1)), direction=Direction.RIGHT, food=Position(3, 0))
        lines = render_ascii(s, 4).splitlines()
        self.assertEqual(lines, ['...*', 'oH..', '....', '....'])

    def test_given_states_when_status_then_score_and_verdict(self):
        s = GameState(snake=(Position(1, 1),), direction=Direction.RIGHT, food=None, score=3)
        self.assertEqual(status_line(s), 'Score: 3')
        self.assertIn('paused', status_line(s.with_changes(running=False)))
        won = s.with_changes(running=False, game_over=True, result=Result.WON)
        self.assertIn('You win!', status_line(won))
        lost = s.with_changes(running=False, game_over=True, result=Result.LOST)
        self.assertIn('Game over.', status_line(lost))


class TestCli(unittest.TestCase):
    def test_given_no_input_ticks_when_scripted_then_head_moves_right(self):
        rng = random.Random(1).random
        s = create_initial_state(20, rng)
        final = run_script(s, '...', 20, rng, out=lambda _: None)
        self.assertEqual(final.snake[0], Position(14, 10))
        self.assertFalse(final.game_over)

    def test_given_script_into_wall_when_run_then_stops_on_loss(self):
        rng = random.Random(1).random
        s = create_initial_state(20, rng)
        final = run_script(s, 'd' * 15, 20, rng, out=lambda _: None)
        self.assertTrue(final.game_over)
        self.assertEqual(final.result, Result.LOST)
        self.assertEqual(final.snake[0], Position(19, 10))

    def test_given_turn_key_when_scripted_then_direction_applied_before_tick(self):
        rng = random.Random(5).random
        s = create_initial_state(20, rng)
        final = run_script(s, 'w', 20, rng, out=lambda _: None)
        self.assertEqual(final.direction, Direction.UP)
        self.assertEqual(final.snake[0], Position(11, 9))

    def test_given_interactive_lines_when_paused_then_snake_holds(self):
        rng = random.Random(3).random
        s = create_initial_state(10, rng)
        lines = iter(['', 'p', '', 'q'])
        shown = []
        final = run_interactive(s, 10, rng, read=lambda _: next(lines), out=shown.append)
        self.assertFalse(final.running)
        self.assertEqual(final.snake[0], Position(7, 5))
        self.assertTrue(shown)

    def test_given_args_when_main_then_prints_board_and_result(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            main(['--size', '10', '--seed', '3', '--moves', '...'])
        out = buf.getvalue()
        self.assertIn('Result: playing', out)
        self.assertIn('H', out)

    def test_given_no_moves_when_main_then_initial_board(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            main(['--size', '5', '--seed', '1'])
        self.assertIn('Initial board:', buf.getvalue())


if __name__ == '__main__':
    unittest.main(verbosity=2)
