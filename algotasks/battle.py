"""The card game "battle" (war) between two players."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Sequence

MAX_STEPS = 1_000_000
DECK_SIZE = 52
HALF_DECK = DECK_SIZE // 2

_FACE_VALUES = {"A": 14, "K": 13, "Q": 12, "J": 11, "1": 10}


@dataclass(frozen=True, eq=False)
class Card:
    """A playing card; cards compare by value only."""

    value: int
    suit: str

    @classmethod
    def parse(cls, text: str) -> Card:
        """Parse a card such as "10H", "AS" or "7C"."""
        text = text.strip()
        if not text:
            raise ValueError("empty card")
        rank = text[0]
        if rank in _FACE_VALUES:
            value = _FACE_VALUES[rank]
        elif rank.isdigit():
            value = int(rank)
        else:
            raise ValueError(f"unknown card rank in {text!r}")
        return cls(value, text[-1])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        # A two beats an ace.
        if self.value == 14 and other.value == 2:
            return True
        if self.value == 2 and other.value == 14:
            return False
        return self.value < other.value


class Outcome(Enum):
    DRAW = "draw"
    FIRST = "first"
    SECOND = "second"
    UNKNOWN = "unknown"


def deal(cards: Sequence[Card]) -> tuple[deque[Card], deque[Card]]:
    """Deal the cards to two players; the top of each deck is its right end."""
    if len(cards) > DECK_SIZE:
        raise ValueError(f"a deck holds at most {DECK_SIZE} cards")
    players: tuple[deque[Card], deque[Card]] = (deque(), deque())
    for offset, card in enumerate(reversed(cards)):
        players[(DECK_SIZE - 1 - offset) // HALF_DECK].append(card)
    return players


def play(cards: Sequence[Card], max_steps: int = MAX_STEPS) -> Outcome:
    """Play the game for at most max_steps moves and report who won."""
    first, second = deal(cards)
    pile: list[Card] = []
    steps = 0
    while first and second:
        steps += 1
        if steps > max_steps:
            break
        left = first.pop()
        right = second.pop()
        pile.extend((left, right))
        if left == right:
            continue
        winner = second if left < right else first
        # The pile goes under the winner's deck, last card lowest.
        winner.extendleft(pile)
        pile.clear()

    first_out = not first
    second_out = not second
    if first_out and second_out:
        return Outcome.DRAW
    if first_out:
        return Outcome.SECOND
    if second_out:
        return Outcome.FIRST
    return Outcome.UNKNOWN


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="battle", description="Play a game of battle.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError as exc:
        print(f"battle: {exc}", file=sys.stderr)
        return 1
    cards = [Card.parse(line) for line in text.splitlines() if line.strip()]
    print(play(cards).value)
    return 0