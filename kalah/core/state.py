from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Iterator, Sequence, Union

import numpy as np
from numpy.typing import NDArray

CountArray = NDArray[np.int16]

NUM_HOLES = 12
PITS_PER_SIDE = NUM_HOLES // 2
WHITE_STORE = 12
BLACK_STORE = 13
TURN_INDEX = 14
POSITION_SIZE = 15


class InvalidMove(ValueError):
    pass


class Side(IntEnum):
    WHITE = 0
    BLACK = 1

    @property
    def store(self) -> int:
        return WHITE_STORE + int(self)

    @property
    def opponent(self) -> "Side":
        return Side(1 - int(self))

    @property
    def holes(self) -> range:
        return range(int(self), NUM_HOLES, 2)


class GameResult(Enum):
    ONGOING = "ongoing"
    WHITE_WIN = "white_win"
    BLACK_WIN = "black_win"
    DRAW = "draw"


@dataclass(frozen=True, eq=False)
class Position:
    """Fifteen counters: holes 0-11 (even White, odd Black), stores 12/13, turn flag 14.

    The backing array is copied on construction and marked read-only, so a
    Position never changes once built. Transitions build a new one.
    """

    counts: CountArray

    def __post_init__(self) -> None:
        counts = np.array(self.counts, dtype=np.int16, copy=True)
        if counts.shape != (POSITION_SIZE,):
            raise ValueError(f"Position needs {POSITION_SIZE} counters, got shape {counts.shape}.")
        if (counts < 0).any():
            raise ValueError("Counters must be non-negative.")
        counts.setflags(write=False)
        object.__setattr__(self, "counts", counts)

    @classmethod
    def from_counts(cls, counts: Union[Sequence[int], Iterable[int]]) -> "Position":
        return cls(np.fromiter(counts, dtype=np.int16))

    @property
    def turn_flag(self) -> int:
        return int(self.counts[TURN_INDEX])

    @property
    def side_to_move(self) -> Side:
        return Side(self.turn_flag & 1)

    def store(self, side: Side) -> int:
        return int(self.counts[side.store])

    def row(self, side: Side) -> CountArray:
        return self.counts[int(side):NUM_HOLES:2]

    def row_total(self, side: Side) -> int:
        return int(self.row(side).sum())

    def editable_counts(self) -> CountArray:
        return self.counts.copy()

    def to_list(self) -> list:
        return [int(value) for value in self.counts]

    def __getitem__(self, index: int) -> int:
        return int(self.counts[index])

    def __len__(self) -> int:
        return POSITION_SIZE

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_list())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return bool(np.array_equal(self.counts, other.counts))

    def __hash__(self) -> int:
        return hash(self.counts.tobytes())

    def __repr__(self) -> str:
        return f"Position(to_move={self.side_to_move.name}, counts={self.to_list()})"

    def __str__(self) -> str:
        c = self.to_list()
        white = self.side_to_move == Side.WHITE
        top_marker = " " if white else ">"
        bottom_marker = ">" if white else " "
        top = " | ".join(f"{c[i]:2d}" for i in (11, 9, 7, 5, 3, 1))
        bottom = " | ".join(f"{c[i]:2d}" for i in (0, 2, 4, 6, 8, 10))
        return (
            f"{top_marker}  | {top} |\n"
            f"{c[BLACK_STORE]:2d} +----+----+----+----+----+----+ {c[WHITE_STORE]:2d}\n"
            f"{bottom_marker}  | {bottom} |"
        )
