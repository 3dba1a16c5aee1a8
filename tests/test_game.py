import random

import pytest

from enfrendados.game import (
    Hand,
    InvalidSelection,
    MatchResult,
    Player,
    Scoreboard,
    TurnOutcome,
    decide_result,
    first_player_order,
    match_over,
    settle_turn,
    transfer_penalty,
)


def make_hand():
    return Hand(target_dice=(3, 4), dice=(1, 2, 3, 4, 5, 6))


@pytest.mark.parametrize("seed", range(20))
def test_roll_respects_dice_ranges(seed):
    hand = Hand.roll(5, random.Random(seed))
    assert len(hand.dice) == 5
    assert all(1 <= value <= 6 for value in hand.dice)
    assert all(1 <= value <= 12 for value in hand.target_dice)
    assert hand.target == sum(hand.target_dice)
    assert hand.chosen == []


def test_roll_rejects_empty_stock():
    with pytest.raises(ValueError):
        Hand.roll(0, random.Random(1))


def test_roll_is_reproducible_with_seed():
    first = Hand.roll(6, random.Random(7))
    second = Hand.roll(6, random.Random(7))
    assert len(first.dice) == 6
    assert tuple(first.dice) == tuple(second.dice)
    assert tuple(first.target_dice) == tuple(second.target_dice)
    rolls = {tuple(Hand.roll(6, random.Random(seed)).dice) for seed in range(10)}
    assert len(rolls) > 1


def test_new_player_defaults():
    player = Player("Ana")
    assert (player.stock, player.points) == (6, 0)


def test_select_returns_value_and_removes_die():
    hand = make_hand()
    assert hand.select(2) == hand.dice[2]
    assert (2, hand.dice[2]) not in hand.remaining()
    assert len(hand.remaining()) == len(hand.dice) - 1
    assert hand.chosen_values == [hand.dice[2]]


def test_select_same_die_twice_fails():
    hand = make_hand()
    hand.select(0)
    with pytest.raises(InvalidSelection):
        hand.select(0)


@pytest.mark.parametrize("index", [-1, 6, 100])
def test_select_out_of_range_fails(index):
    with pytest.raises(InvalidSelection):
        make_hand().select(index)


def test_outcome_progression():
    hand = make_hand()
    assert hand.outcome() is TurnOutcome.PENDING
    hand.select(2)
    assert hand.outcome() is TurnOutcome.PENDING
    hand.select(3)
    assert hand.total() == hand.target
    assert hand.outcome() is TurnOutcome.SUCCESS


def test_outcome_overshoot():
    hand = make_hand()
    hand.select(5)
    hand.select(4)
    assert hand.total() > hand.target
    assert hand.outcome() is TurnOutcome.OVERSHOOT


def test_select_after_decided_fails():
    hand = make_hand()
    hand.select(5)
    hand.select(4)
    with pytest.raises(InvalidSelection):
        hand.select(0)


def test_transfer_penalty_moves_one_die():
    player, opponent = Player("A", stock=4), Player("B", stock=3)
    assert transfer_penalty(player, opponent) is True
    assert (player.stock, opponent.stock) == (5, 2)


def test_transfer_penalty_keeps_last_die():
    player, opponent = Player("A", stock=4), Player("B", stock=1)
    assert transfer_penalty(player, opponent) is False
    assert (player.stock, opponent.stock) == (4, 1)


def test_settle_success_scores_and_transfers():
    player, opponent = Player("A"), Player("B")
    hand = make_hand()
    hand.select(2)
    hand.select(3)
    earned = settle_turn(player, opponent, hand, TurnOutcome.SUCCESS)
    assert earned == 2 * hand.target
    assert player.points == earned
    assert player.stock == 6 - 2
    assert opponent.stock == 6 + 2
    assert player.stock + opponent.stock == 12


def test_settle_emptying_stock_wins_prize():
    player, opponent = Player("A", stock=2), Player("B", stock=10)
    hand = Hand(target_dice=(1, 4), dice=(2, 3))
    hand.select(0)
    hand.select(1)
    assert settle_turn(player, opponent, hand, TurnOutcome.SUCCESS) == 10000
    assert player.points == 10000
    assert player.stock == 0
    assert opponent.stock == 10


@pytest.mark.parametrize("outcome", [TurnOutcome.OVERSHOOT, TurnOutcome.GAVE_UP])
def test_settle_failure_applies_penalty(outcome):
    player, opponent = Player("A"), Player("B")
    assert settle_turn(player, opponent, make_hand(), outcome) == 0
    assert player.points == 0
    assert (player.stock, opponent.stock) == (7, 5)


def test_settle_pending_fails():
    with pytest.raises(ValueError):
        settle_turn(Player("A"), Player("B"), make_hand(), TurnOutcome.PENDING)


def test_settle_success_without_match_fails():
    hand = make_hand()
    hand.select(0)
    with pytest.raises(ValueError):
        settle_turn(Player("A"), Player("B"), hand, TurnOutcome.SUCCESS)


@pytest.mark.parametrize("seed", range(30))
def test_first_player_order_rolls_differ(seed):
    first, second = first_player_order(random.Random(seed))
    assert first != second
    assert 1 <= first <= 6 and 1 <= second <= 6


@pytest.mark.parametrize(
    "round_number, stocks, expected",
    [
        (1, (6, 6), False),
        (2, (3, 9), False),
        (3, (6, 6), True),
        (1, (0, 12), True),
        (2, (12, 0), True),
    ],
)
def test_match_over(round_number, stocks, expected):
    first = Player("A", stock=stocks[0])
    second = Player("B", stock=stocks[1])
    assert match_over(round_number, first, second) is expected


def test_decide_tie():
    result = decide_result(Player("Ana", points=40), Player("Bruno", points=40))
    assert result.is_tie
    assert result.loser is None
    assert result.champion_name == "Ana y Bruno"
    assert result.champion_points == 40


def test_decide_first_wins():
    first, second = Player("Ana", points=50), Player("Bruno", points=20)
    result = decide_result(first, second)
    assert result.winner is first
    assert result.loser is second
    assert result.champion_name == "Ana"


def test_decide_second_wins():
    first, second = Player("Ana", points=10), Player("Bruno", points=30)
    result = decide_result(first, second)
    assert result.winner is second
    assert result.champion_points == 30


def test_scoreboard_records_better_scores():
    board = Scoreboard()
    assert board.record(decide_result(Player("Ana", points=50), Player("Bruno"))) is True
    assert (board.champion, board.best) == ("Ana", 50)
    assert board.record(decide_result(Player("Ana", points=10), Player("Bruno"))) is False
    assert (board.champion, board.best) == ("Ana", 50)


def test_scoreboard_equal_score_replaces_champion():
    board = Scoreboard(champion="Ana", best=50)
    result = MatchResult(Player("Carla", points=50), Player("Dario"), None)
    result = decide_result(Player("Carla", points=50), Player("Dario", points=50))
    assert board.record(result) is True
    assert board.champion == "Carla y Dario"
    assert board.best == 50