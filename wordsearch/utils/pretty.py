"""Pretty-print helpers for word search boards."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.models import Cell
    from ..engine.board import Board
    from ..engine.game import WordsearchOutput
    from ..engine.registry import WordRegistry


def cell_symbol(cell: "Cell", reveal: bool = False) -> str:
    letter = cell.letter or "."
    if reveal and (cell.found or cell.shown):
        return f"[{letter.upper()}]"
    return letter


def format_board(board: "Board", *, reveal: bool = False) -> str:
    """Render the board with row and column indexes.

    With ``reveal`` set, cells belonging to found or shown words are wrapped
    in brackets.
    """

    width = 4 if reveal else 3
    header_cells = [f"{y:>{width - 1}}" for y in range(board.size)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (width * board.size - 1))
    for x, row in enumerate(board.rows()):
        row_render = " ".join(f"{cell_symbol(cell, reveal):>{width - 1}}" for cell in row)
        lines.append(f"{x:>2} | {row_render}")
    return "\n".join(lines)


def format_word_list(registry: "WordRegistry") -> str:
    lines = []
    for placed in registry:
        status = "found" if placed.found else "shown" if placed.shown else ""
        start = placed.pos[0]
        lines.append(
            f"  {placed.word:<12} ({start.x},{start.y}) {placed.direction.value:<10} {status}".rstrip()
        )
    return "\n".join(lines)


def pretty_print_board(board: "Board", *, label: str | None = None, reveal: bool = False, stream=None) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(board, reveal=reveal), file=stream)


def print_puzzle_stats(output: "WordsearchOutput", *, reveal: bool = False, stream=None) -> None:
    """Print board + word list + stats for a generated puzzle."""

    stream = stream or sys.stdout
    board = output.board
    registry = output.registry
    if board is None or registry is None:
        print(output.error or "No puzzle generated", file=stream)
        return

    print(format_board(board, reveal=reveal), file=stream)

    total_cells = board.size * board.size
    usage: Counter = Counter()
    for placed in registry:
        usage.update(placed.pos)
    word_cells = len(usage)
    crossings = sum(1 for count in usage.values() if count > 1)
    lengths = [len(placed.word) for placed in registry]
    directions = Counter(placed.direction.value for placed in registry)

    print(file=stream)
    print("--- Board ---", file=stream)
    print(f"  Size:          {board.size} x {board.size} ({total_cells} cells)", file=stream)
    print(f"  Word cells:    {word_cells} ({word_cells / total_cells * 100:.0f}%)", file=stream)
    print(f"  Crossings:     {crossings}", file=stream)
    if output.attempts:
        print(f"  Attempts:      {output.attempts}", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Total:         {len(registry)}", file=stream)
    if lengths:
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
        dist_parts = [f"{name}:{count}" for name, count in sorted(directions.items())]
        print(f"  Directions:    {' '.join(dist_parts)}", file=stream)
    print(format_word_list(registry), file=stream)

    if output.end_game:
        print(file=stream)
        print("All words revealed.", file=stream)
