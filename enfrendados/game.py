"""Rules of a match: dice hands, turn settlement, results and the record."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from enfrendados.dice import roll_six, roll_twelve

STARTING_STOCK = 6
ROUNDS = 3
EMPTY_STOCK_PRIZE = 10000


@dataclass
class Player:
    """A player with a stock of six-sided dice and a running score."""

    name: str
    stock: int = STARTING_STOCK
    points: int = 0


class InvalidSelection(ValueError):
    """Raised when a die is already chosen, out of range, or the turn is over."""


class TurnOutcome(Enum):
    """How a turn stands or how it ended."""

    PENDING = "pending"
    SUCCESS = "success"
    OVERSHOOT = "overshoot"
    GAVE_UP = "gave_up"


@dataclass
class Hand:
    """The dice rolled in one turn and the ones chosen so far."""

    target_dice: tuple[int, int]
    dice: tuple[int, ...]
    chosen: list[int] = field(default_factory=list)

    @classmethod
    def roll(cls, stock: int, rng: random.Random | None = None) -> Hand:
        """Roll the two twelve-sided target dice and ``stock`` six-sided dice."""
        if stock < 1:
            raise ValueError("a hand needs at least one die")
        target_dice = (roll_twelve(rng), roll_twelve(rng))
        dice = tuple(roll_six(rng) for _ in range(stock))
        return cls(target_dice=target_dice, dice=dice)

    @property
    def target(self) -> int:
        """The number the chosen dice must add up to."""
        return sum(self.target_dice)

    @property
    def chosen_values(self) -> list[int]:
        """Values of the chosen dice, in the order they were chosen."""
        return [self.dice[index] for index in self.chosen]

    def select(self, index: int) -> int:
        """Choose the die at the 0-based ``index`` and return its value."""
        if self.outcome() is not TurnOutcome.PENDING:
            raise InvalidSelection("the turn is already decided")
        if not 0 <= index < len(self.dice) or index in self.chosen:
            raise InvalidSelection(f"die {index} is already chosen or out of range")
        self.chosen.append(index)
        return self.dice[index]

    def remaining(self) -> list[tuple[int, int]]:
        """Return (index, value) for every die not yet chosen."""
        return [
            (index, value)
            for index, value in enumerate(self.dice)
            if index not in self.chosen
        ]

    def total(self) -> int:
        """Sum of the chosen dice."""
        return sum(self.chosen_values)

    def outcome(self) -> TurnOutcome:
        """Whether the chosen dice hit, passed or are still short of the target."""
        total = self.total()
        if total == self.target:
            return TurnOutcome.SUCCESS
        if total > self.target:
            return TurnOutcome.OVERSHOOT
        return TurnOutcome.PENDING


def transfer_penalty(player: Player, opponent: Player) -> bool:
    """Move one die from the opponent to the player if the opponent has more than one."""
    if opponent.stock > 1:
        opponent.stock -= 1
        player.stock += 1
        return True
    return False


def settle_turn(
    player: Player, opponent: Player, hand: Hand, outcome: TurnOutcome
) -> int:
    """Apply the end of a turn to both players and return the points earned."""
    if outcome is TurnOutcome.PENDING:
        raise ValueError("a pending turn cannot be settled")
    if outcome is TurnOutcome.SUCCESS:
        if hand.outcome() is not TurnOutcome.SUCCESS:
            raise ValueError("the chosen dice do not match the target")
        used = len(hand.chosen)
        player.stock -= used
        if player.stock == 0:
            player.points += EMPTY_STOCK_PRIZE
            return EMPTY_STOCK_PRIZE
        earned = used * hand.target
        player.points += earned
        opponent.stock += used
        return earned
    transfer_penalty(player, opponent)
    return 0


def first_player_order(rng: random.Random | None = None) -> tuple[int, int]:
    """Roll a six-sided die for each player until they differ; return both rolls.

    The player with the higher roll starts every round.
    """
    while True:
        first = roll_six(rng)
        second = roll_six(rng)
        if first != second:
            return first, second


def match_over(round_number: int, first: Player, second: Player) -> bool:
    """True once the last round is played or a player has run out of dice."""
    return round_number >= ROUNDS or first.stock == 0 or second.stock == 0


@dataclass(frozen=True)
class MatchResult:
    """The end of a match; ``winner`` is None on a tie."""

    first: Player
    second: Player
    winner: Player | None

    @property
    def is_tie(self) -> bool:
        return self.winner is None

    @property
    def loser(self) -> Player | None:
        if self.winner is None:
            return None
        return self.second if self.winner is self.first else self.first

    @property
    def champion_name(self) -> str:
        """The winner's name, or both names joined on a tie."""
        if self.winner is None:
            return f"{self.first.name} y {self.second.name}"
        return self.winner.name

    @property
    def champion_points(self) -> int:
        return self.first.points if self.winner is None else self.winner.points


def decide_result(first: Player, second: Player) -> MatchResult:
    """Decide the winner of a finished match between player one and player two."""
    if first.points == second.points:
        return MatchResult(first, second, None)
    if first.points >= EMPTY_STOCK_PRIZE or first.points > second.points:
        return MatchResult(first, second, first)
    return MatchResult(first, second, second)


@dataclass
class Scoreboard:
    """The all-time best score and who made it."""

    champion: str = ""
    best: int = 0

    def record(self, result: MatchResult) -> bool:
        """Keep the result if it ties or beats the best; return whether it did."""
        points = result.champion_points
        if points >= self.best:
            self.best = points
            self.champion = result.champion_name
            return True
        return False