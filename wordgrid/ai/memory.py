import random
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Hashable, List, Set

from wordgrid.domain.types import Cell, CoordinateGuess, Guess, LetterGuess, WordGuess

from .config import AIConfig

KIND_LETTER = "letter"
KIND_COORDINATE = "coordinate"
KIND_WORD = "word"


@dataclass(frozen=True)
class MemoryEntry:
    kind: str
    value: Hashable
    was_hit: bool
    turn: int


class GuessMemory:
    """
    What the AI has learned from its own guesses, with imperfect recall.

    The entry window is bounded, but every value ever learned stays in
    `ever_learned` so evicted facts are not mistaken for new ones. Forgetting only
    thins out the view returned by the effective_* methods for the current turn.
    """

    def __init__(self, config: AIConfig):
        self.config = config
        self.turn = 0
        self.entries: Deque[MemoryEntry] = deque(maxlen=max(1, config.memory_window))
        self.ever_learned: Dict[str, Set[Hashable]] = {KIND_LETTER: set(), KIND_COORDINATE: set()}

    def reset(self) -> None:
        self.entries.clear()
        for values in self.ever_learned.values():
            values.clear()
        self.turn = 0

    def advance_turn(self) -> None:
        self.turn += 1

    # -----------------------------
    # Recording
    # -----------------------------
    def record(self, guess: Guess, was_hit: bool) -> None:
        if isinstance(guess, LetterGuess):
            self._append(KIND_LETTER, guess.letter, was_hit)
        elif isinstance(guess, CoordinateGuess):
            self._append(KIND_COORDINATE, guess.cell, was_hit)
        elif isinstance(guess, WordGuess):
            self._append(KIND_WORD, guess.text, was_hit)
            if was_hit:
                for ch in guess.text:
                    self.record_revealed_letter(ch)
        else:
            raise TypeError(f"Unsupported guess type: {type(guess).__name__}")

    def record_hit(self, cell: Cell) -> None:
        self._append(KIND_COORDINATE, tuple(cell), True)

    def record_revealed_letter(self, letter: str) -> None:
        self._append(KIND_LETTER, letter.upper(), True)

    def _append(self, kind: str, value: Hashable, was_hit: bool) -> None:
        self.entries.append(MemoryEntry(kind, value, bool(was_hit), self.turn))
        if was_hit and kind in self.ever_learned:
            self.ever_learned[kind].add(value)

    # -----------------------------
    # Retrieval
    # -----------------------------
    def _learned(self, kind: str) -> List[Hashable]:
        """Hit values of one kind, oldest first, each at its first learned position."""
        seen: Set[Hashable] = set()
        out: List[Hashable] = []
        for entry in self.entries:
            if entry.kind == kind and entry.was_hit and entry.value not in seen:
                seen.add(entry.value)
                out.append(entry.value)
        return out

    def _filter(self, values: List[Hashable], skill: float, rng: random.Random) -> Set[Hashable]:
        cfg = self.config
        if skill >= cfg.perfect_memory_skill:
            return set(values)

        forget_chance = cfg.forget_chance_for_skill(skill)
        keep_from = len(values) - cfg.always_remember_recent
        kept: Set[Hashable] = set()
        for i, value in enumerate(values):
            if i >= keep_from or rng.random() >= forget_chance:
                kept.add(value)
        return kept

    def effective_hits(self, skill: float, rng: random.Random) -> Set[Cell]:
        return self._filter(self._learned(KIND_COORDINATE), skill, rng)

    def effective_letters(self, skill: float, rng: random.Random) -> Set[str]:
        return self._filter(self._learned(KIND_LETTER), skill, rng)

    def all_hits(self) -> Set[Cell]:
        return set(self._learned(KIND_COORDINATE))

    def all_letters(self) -> Set[str]:
        return set(self._learned(KIND_LETTER))

    def ever_learned_hits(self) -> Set[Cell]:
        return set(self.ever_learned[KIND_COORDINATE])

    def ever_learned_letters(self) -> Set[str]:
        return set(self.ever_learned[KIND_LETTER])

    def guessed_words(self) -> Set[str]:
        return {e.value for e in self.entries if e.kind == KIND_WORD}

    def debug_summary(self, skill: float) -> str:
        return "\n".join(
            [
                f"Turn: {self.turn}",
                f"Entries: {len(self.entries)}/{self.entries.maxlen}",
                f"Known hits: {len(self.all_hits())}",
                f"Known letters: {len(self.all_letters())}",
                f"Forget chance: {self.config.forget_chance_for_skill(skill):.1%}",
            ]
        )
