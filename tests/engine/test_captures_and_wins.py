import unittest

from ludo_duel.errors import GameOver, IllegalMove, Reason
from ludo_duel.game import create_match, has_won, move, roll
from ludo_duel.moves import apply_move, resolve_captures
from ludo_duel.types import Capture, Phase, Position, Seat


class TestCapturesAndWins(unittest.TestCase):
    def setUp(self):
        self.state = create_match("conn-a", "conn-b", seed=3)

    def force_position(self, seat, piece_index, position):
        self.state.pieces[seat][piece_index] = position
        self.state.refresh_locks()

    def test_capture(self):
        # B sits on non-safe 5, A at 2 rolls 3 and lands on it
        self.force_position(Seat.B, 0, Position.track(5))
        self.force_position(Seat.A, 0, Position.track(2))
        roll(self.state, Seat.A, value=3)
        record = move(self.state, Seat.A, 0)
        self.assertEqual(record.captured, [Capture(Seat.B, 0)])
        self.assertTrue(record.kill_occurred)
        self.assertEqual(self.state.position(Seat.B, 0), Position.base(Seat.B, 0))
        self.assertEqual(self.state.position(Seat.A, 0), Position.track(5))
        # capture grants the repeat turn
        self.assertEqual(self.state.turn, Seat.A)
        self.assertIsNone(self.state.dice)

    def test_capture_returns_piece_to_its_own_slot(self):
        self.force_position(Seat.B, 2, Position.track(40))
        self.force_position(Seat.A, 1, Position.track(38))
        roll(self.state, Seat.A, value=2)
        record = move(self.state, Seat.A, 1)
        self.assertEqual(record.captured, [Capture(Seat.B, 2)])
        self.assertEqual(self.state.position(Seat.B, 2), Position.base(Seat.B, 2))

    def test_no_capture_on_safe_cell(self):
        self.force_position(Seat.B, 0, Position.track(8))
        self.force_position(Seat.A, 0, Position.track(5))
        roll(self.state, Seat.A, value=3)
        record = move(self.state, Seat.A, 0)
        self.assertEqual(record.captured, [])
        self.assertEqual(self.state.position(Seat.B, 0), Position.track(8))
        self.assertEqual(self.state.turn, Seat.B)

    def test_mixed_seats_on_safe_cell_do_not_lock(self):
        self.force_position(Seat.B, 0, Position.track(8))
        self.force_position(Seat.A, 0, Position.track(5))
        roll(self.state, Seat.A, value=3)
        move(self.state, Seat.A, 0)
        self.assertEqual(self.state.locks, {})

    def test_no_capture_on_locked_cell(self):
        # unreachable through legal play; the check still holds
        cell = Position.track(17)
        self.state.pieces[Seat.A][0] = cell
        self.state.pieces[Seat.A][1] = cell
        self.state.refresh_locks()
        self.state.pieces[Seat.B][0] = cell
        self.assertEqual(resolve_captures(self.state, Seat.A, cell), [])
        self.assertEqual(resolve_captures(self.state, Seat.B, cell), [])
        self.assertEqual(self.state.position(Seat.B, 0), cell)

    def test_landing_on_own_piece_forms_lock(self):
        self.force_position(Seat.A, 0, Position.track(12))
        self.force_position(Seat.A, 1, Position.track(9))
        roll(self.state, Seat.A, value=3)
        move(self.state, Seat.A, 1)
        self.assertEqual(self.state.locks, {Position.track(12): Seat.A})

    def test_capture_and_lock_on_same_landing(self):
        self.force_position(Seat.B, 0, Position.track(20))
        self.force_position(Seat.A, 0, Position.track(20))
        self.force_position(Seat.A, 1, Position.track(15))
        roll(self.state, Seat.A, value=5)
        record = move(self.state, Seat.A, 1)
        # A lands on its own piece and the lone B piece: captured, then A locks 20
        self.assertEqual(record.captured, [Capture(Seat.B, 0)])
        self.assertEqual(self.state.locks, {Position.track(20): Seat.A})

    def test_illegal_move_leaves_state_untouched(self):
        self.force_position(Seat.A, 0, Position.home_lane(Seat.A, 2))
        roll(self.state, Seat.A, value=5)
        before = {seat: list(p) for seat, p in self.state.pieces.items()}
        with self.assertRaises(IllegalMove) as ctx:
            move(self.state, Seat.A, 0)
        self.assertEqual(ctx.exception.reason, Reason.OVERSHOOT)
        self.assertEqual(self.state.pieces, before)
        self.assertEqual(self.state.dice, 5)
        self.assertEqual(self.state.turn, Seat.A)

    def test_apply_unvalidated_move_is_contract_violation(self):
        self.state.dice = 2
        with self.assertRaises(AssertionError):
            apply_move(self.state, Seat.A, 0)

    def test_win(self):
        for idx in range(3):
            self.state.pieces[Seat.A][idx] = Position.home(Seat.A)
        self.force_position(Seat.A, 3, Position.home_lane(Seat.A, 4))
        self.assertFalse(has_won(self.state, Seat.A))
        roll(self.state, Seat.A, value=1)
        record = move(self.state, Seat.A, 3)
        self.assertEqual(record.winner, Seat.A)
        self.assertTrue(has_won(self.state, Seat.A))
        self.assertFalse(has_won(self.state, Seat.B))
        self.assertEqual(self.state.phase, Phase.FINISHED)
        with self.assertRaises(GameOver):
            roll(self.state, Seat.A)
        with self.assertRaises(GameOver):
            roll(self.state, Seat.B)

    def test_win_on_a_six_still_ends_the_match(self):
        for idx in range(3):
            self.state.pieces[Seat.B][idx] = Position.home(Seat.B)
        self.force_position(Seat.B, 3, Position.track(24))
        self.state.turn = Seat.B
        roll(self.state, Seat.B, value=6)
        record = move(self.state, Seat.B, 3)
        self.assertEqual(record.winner, Seat.B)
        self.assertEqual(self.state.winner, Seat.B)
        self.assertIsNone(self.state.dice)


if __name__ == "__main__":
    unittest.main()
