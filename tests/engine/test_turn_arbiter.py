import unittest

from ludo_duel.errors import IllegalMove, NoRoll, NotYourTurn, Reason
from ludo_duel.game import create_match, move, pass_turn, roll
from ludo_duel.turns import grants_extra_turn
from ludo_duel.types import Phase, Position, Seat


class TestTurnArbiter(unittest.TestCase):
    def setUp(self):
        self.state = create_match("conn-a", "conn-b", seed=11)

    def test_seat_a_starts_awaiting_roll(self):
        self.assertEqual(self.state.turn, Seat.A)
        self.assertEqual(self.state.phase, Phase.AWAITING_ROLL)

    def test_roll_moves_to_awaiting_move(self):
        value = roll(self.state, Seat.A)
        self.assertTrue(1 <= value <= 6)
        self.assertEqual(self.state.dice, value)
        self.assertEqual(self.state.phase, Phase.AWAITING_MOVE)

    def test_roll_out_of_turn(self):
        with self.assertRaises(NotYourTurn) as ctx:
            roll(self.state, Seat.B)
        self.assertEqual(ctx.exception.reason, Reason.NOT_YOUR_TURN)
        self.assertIsNone(self.state.dice)

    def test_second_roll_rejected_while_pending(self):
        roll(self.state, Seat.A, value=4)
        with self.assertRaises(NotYourTurn) as ctx:
            roll(self.state, Seat.A)
        self.assertEqual(ctx.exception.reason, Reason.ROLL_PENDING)
        self.assertEqual(self.state.dice, 4)

    def test_injected_value_must_be_a_die_face(self):
        with self.assertRaises(ValueError):
            roll(self.state, Seat.A, value=7)
        self.assertIsNone(self.state.dice)

    def test_move_without_roll(self):
        with self.assertRaises(NoRoll):
            move(self.state, Seat.A, 0)

    def test_move_out_of_turn(self):
        roll(self.state, Seat.A, value=6)
        with self.assertRaises(NotYourTurn):
            move(self.state, Seat.B, 0)

    def test_six_grants_repeat_turn(self):
        roll(self.state, Seat.A, value=6)
        move(self.state, Seat.A, 0)
        self.assertEqual(self.state.position(Seat.A, 0), Position.track(0))
        self.assertEqual(self.state.turn, Seat.A)
        self.assertEqual(self.state.phase, Phase.AWAITING_ROLL)

    def test_plain_move_swaps_turn(self):
        self.state.pieces[Seat.A][0] = Position.track(3)
        roll(self.state, Seat.A, value=2)
        move(self.state, Seat.A, 0)
        self.assertEqual(self.state.turn, Seat.B)
        self.assertIsNone(self.state.dice)

    def test_pass_swaps_turn_and_clears_dice(self):
        roll(self.state, Seat.A, value=3)
        pass_turn(self.state, Seat.A)
        self.assertEqual(self.state.turn, Seat.B)
        self.assertIsNone(self.state.dice)

    def test_pass_after_six_still_swaps(self):
        # both entry cells locked by the opponent: a six with nothing to move
        self.state.pieces[Seat.B][0] = Position.track(0)
        self.state.pieces[Seat.B][1] = Position.track(0)
        self.state.refresh_locks()
        roll(self.state, Seat.A, value=6)
        pass_turn(self.state, Seat.A)
        self.assertEqual(self.state.turn, Seat.B)

    def test_pass_requires_pending_roll(self):
        with self.assertRaises(NoRoll):
            pass_turn(self.state, Seat.A)

    def test_pass_out_of_turn(self):
        roll(self.state, Seat.A, value=3)
        with self.assertRaises(NotYourTurn):
            pass_turn(self.state, Seat.B)
        self.assertEqual(self.state.dice, 3)

    def test_strict_pass_rejects_when_a_move_exists(self):
        state = create_match("conn-a", "conn-b", seed=1, strict_pass=True)
        roll(state, Seat.A, value=6)
        with self.assertRaises(IllegalMove) as ctx:
            pass_turn(state, Seat.A)
        self.assertEqual(ctx.exception.reason, Reason.MOVE_AVAILABLE)
        self.assertEqual(state.turn, Seat.A)

    def test_strict_pass_accepts_when_stuck(self):
        state = create_match("conn-a", "conn-b", seed=1, strict_pass=True)
        roll(state, Seat.A, value=2)
        pass_turn(state, Seat.A)
        self.assertEqual(state.turn, Seat.B)

    def test_extra_turn_rule(self):
        self.assertTrue(grants_extra_turn(6, False))
        self.assertTrue(grants_extra_turn(3, True))
        self.assertFalse(grants_extra_turn(5, False))

    def test_seeded_matches_roll_the_same(self):
        first = create_match("x", "y", seed=42)
        second = create_match("x", "y", seed=42)
        self.assertEqual(roll(first, Seat.A), roll(second, Seat.A))


if __name__ == "__main__":
    unittest.main()
