"""Token-sequence alignment by edit distance (Needleman-Wunsch / Wagner-Fischer)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from typing import Hashable, Iterable, Sequence, TypeVar

SUBSTITUTION_COST = 1
DELETION_COST = 1
INSERTION_COST = 1

T = TypeVar("T")


class Operation(Enum):
    """An edit operation transforming one token sequence into another."""

    NOOP = "noop"
    SUBSTITUTION = "substitution"
    DELETION = "deletion"
    INSERTION = "insertion"


_OP_SYMBOLS = {
    Operation.DELETION: "-",
    Operation.SUBSTITUTION: "*",
    Operation.INSERTION: "+",
    Operation.NOOP: ".",
}


@dataclass(frozen=True)
class _Cell:
    parent: int
    operation: Operation
    cost: int


class Alignment:
    """Edit-distance table between token sequences ``x`` and ``y``.

    The table is filled on construction; the alignment is read back from it.
    """

    def __init__(self, x: Sequence[Hashable], y: Sequence[Hashable]) -> None:
        self.x = list(x)
        self.y = list(y)
        self._rows = len(self.y) + 1
        self._cols = len(self.x) + 1
        self._table = [_Cell(0, Operation.NOOP, 0)] * (self._rows * self._cols)
        self._fill()

    def _index(self, i: int, j: int) -> int:
        # Row-major storage: x runs along the top, y down the left side.
        return j * self._cols + i

    def _fill(self) -> None:
        table = self._table
        for i in range(1, self._cols):
            table[i] = _Cell(0, Operation.DELETION, i)
        for j in range(1, self._rows):
            table[j * self._cols] = _Cell(0, Operation.INSERTION, j)

        for i, x_i in enumerate(self.x):
            for j, y_j in enumerate(self.y):
                left = self._index(i, j + 1)
                diag = self._index(i, j)
                up = self._index(i + 1, j)
                same = x_i == y_j
                candidates = (
                    _Cell(left, Operation.DELETION, table[left].cost + DELETION_COST),
                    _Cell(
                        diag,
                        Operation.NOOP if same else Operation.SUBSTITUTION,
                        table[diag].cost + (0 if same else SUBSTITUTION_COST),
                    ),
                    _Cell(up, Operation.INSERTION, table[up].cost + INSERTION_COST),
                )
                # min() keeps the first of equal candidates.
                table[self._index(i + 1, j + 1)] = min(candidates, key=lambda c: c.cost)

    def operations(self) -> list[Operation]:
        """Read the edit operations from the table, in order."""
        ops: list[Operation] = []
        cell = self._table[self._index(len(self.x), len(self.y))]
        while True:
            ops.append(cell.operation)
            if cell.parent == 0:
                break
            cell = self._table[cell.parent]
        ops.reverse()
        return ops

    def coalesced_operations(self) -> list[tuple[Operation, int]]:
        """Operations with consecutive repeats collapsed into (operation, count) runs."""
        return run_length_encode(self.operations())

    def distance(self) -> float:
        """Number of non-trivial edits divided by the total number of operations."""
        numer, denom = self.distance_parts()
        return numer / denom

    def distance_parts(self) -> tuple[int, int]:
        """Return (number of edit operations, total number of operations)."""
        ops = self.operations()
        return sum(op is not Operation.NOOP for op in ops), len(ops)

    def levenshtein_distance(self) -> int:
        """Levenshtein distance between the two sequences."""
        return self._table[self._index(len(self.x), len(self.y))].cost

    def _format_cell(self, cell: _Cell) -> str:
        parent = self._table[cell.parent]
        return f"{parent.cost}{_OP_SYMBOLS[cell.operation]}{cell.cost}"

    def __str__(self) -> str:
        lines = [f"x: {self.x!r}", f"y: {self.y!r}", ""]
        header = ["      "]
        header.extend(f"{token}     " for token in [" ", *self.x])
        lines.append("".join(header))
        for j, label in enumerate([" ", *self.y]):
            row = [f"{label}     "]
            row.extend(
                f"{self._format_cell(self._table[self._index(i, j)])}   "
                for i in range(self._cols)
            )
            lines.append("".join(row))
        return "\n".join(lines) + "\n"


def run_length_encode(sequence: Iterable[T]) -> list[tuple[T, int]]:
    """Collapse runs of equal consecutive items into (item, run length) pairs."""
    return [(key, sum(1 for _ in run)) for key, run in groupby(sequence)]