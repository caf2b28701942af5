
# src/connectfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from connectfour.config import ROWS, COLS
from connectfour.errors import InvalidBoardError, InvalidColumnError
from connectfour.types import Cell, Player, Move, PLAYERS, check_player

Grid = Tuple[Tuple[Cell, ...], ...]

_SYMBOLS = {".": None, "X": "X", "O": "O"}


def check_column(col: object, cols: int) -> int:
    # bool is an int subclass; True/False as a column is always a caller bug
    if isinstance(col, bool) or not isinstance(col, int):
        raise InvalidColumnError(f"Column must be an int, got {col!r}.")
    if col < 0 or col >= cols:
        raise InvalidColumnError(f"Column {col} out of range 0..{cols - 1}.")
    return col


@dataclass(frozen=True, slots=True)
class Board:
    """
    Immutable Connect-Four grid. Row 0 is the top, row ``rows - 1`` the bottom.
    Placing a piece returns a new Board; nothing here mutates in place.
    """
    rows: int = ROWS
    cols: int = COLS
    grid: Grid = field(default=())

    def __post_init__(self) -> None:
        if not self.grid:
            empty = tuple(tuple(None for _ in range(self.cols)) for _ in range(self.rows))
            object.__setattr__(self, "grid", empty)
            return
        object.__setattr__(self, "grid", tuple(tuple(row) for row in self.grid))
        self._validate()

    def _validate(self) -> None:
        if len(self.grid) != self.rows:
            raise InvalidBoardError(f"Expected {self.rows} rows, got {len(self.grid)}.")
        for r, row in enumerate(self.grid):
            if len(row) != self.cols:
                raise InvalidBoardError(f"Row {r}: expected {self.cols} cells, got {len(row)}.")
            for c, cell in enumerate(row):
                if cell is not None and cell not in PLAYERS:
                    raise InvalidBoardError(f"Cell ({r}, {c}) holds unknown value {cell!r}.")

        # Gravity: below the first occupied cell of a column everything is occupied.
        for c in range(self.cols):
            seen = False
            for r in range(self.rows):
                if self.grid[r][c] is not None:
                    seen = True
                elif seen:
                    raise InvalidBoardError(f"Floating piece above empty cell ({r}, {c}).")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Board":
        if not rows:
            raise InvalidBoardError("Board needs at least one row.")
        return cls(len(rows), len(rows[0]), tuple(tuple(r) for r in rows))

    @classmethod
    def from_strings(cls, lines: Iterable[str]) -> "Board":
        """
        Parse a diagram, top row first, using ``.``, ``X`` and ``O``.
        Whitespace inside a line is ignored.
        """
        parsed: List[Tuple[Cell, ...]] = []
        for line in lines:
            chars = [ch for ch in line if not ch.isspace()]
            if not chars:
                continue
            try:
                parsed.append(tuple(_SYMBOLS[ch.upper()] for ch in chars))
            except KeyError as e:
                raise InvalidBoardError(f"Unknown symbol {e.args[0]!r} in {line!r}.") from None
        return cls.from_rows(parsed)

    def cell(self, r: int, c: int) -> Cell:
        return self.grid[r][c]

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def landing_row(self, col: int) -> Optional[int]:
        c = check_column(col, self.cols)
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] is None:
                return r
        return None

    def with_piece(self, row: int, col: int, player: Player) -> "Board":
        grid = [list(r) for r in self.grid]
        grid[row][col] = player
        return Board(self.rows, self.cols, tuple(tuple(r) for r in grid))

    def scratch(self) -> "ScratchBoard":
        return ScratchBoard(self.rows, self.cols, [list(r) for r in self.grid])

    def __str__(self) -> str:
        return "\n".join(" ".join(p or "." for p in row) for row in self.grid)


@dataclass(slots=True)
class ScratchBoard:
    """
    Mutable working copy for search: drop a piece, recurse, undo it.
    Never handed back to callers.
    """
    rows: int
    cols: int
    grid: List[List[Cell]]

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def drop(self, col: Move, player: Player) -> int:
        c = int(col)
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] is None:
                self.grid[r][c] = player
                return r
        raise ValueError("Column is full.")

    def undo(self, col: Move) -> None:
        """
        Remove the top-most piece from a column.
        """
        c = int(col)
        for r in range(self.rows):
            if self.grid[r][c] is not None:
                self.grid[r][c] = None
                return
        raise ValueError("Cannot undo: column is empty.")


@dataclass(frozen=True, slots=True)
class Drop:
    board: Board
    row: int


@dataclass(frozen=True, slots=True)
class ColumnFull:
    column: int

    def __str__(self) -> str:
        return f"Column {self.column + 1} is full."


DropResult = Union[Drop, ColumnFull]
BoardLike = Union[Board, ScratchBoard]


def valid_columns(board: Board) -> List[Move]:
    return board.valid_moves()


def drop_piece(board: Board, column: int, player: Player) -> DropResult:
    check_player(player)
    row = board.landing_row(column)
    if row is None:
        return ColumnFull(column)
    return Drop(board=board.with_piece(row, column, player), row=row)
