"""Divide-and-conquer grid problems."""

from __future__ import annotations

from typing import Sequence


def z_order_index(n: int, row: int, col: int) -> int:
    """Visit order of cell ``(row, col)`` in a Z-shaped traversal of a 2^n grid."""
    if n < 0:
        raise ValueError("n must not be negative")
    size = 1 << n
    if not (0 <= row < size and 0 <= col < size):
        raise ValueError(f"cell ({row}, {col}) lies outside a {size}x{size} grid")
    index = 0
    while size > 1:
        half = size // 2
        quadrant = 2 * (row >= half) + (col >= half)
        index += quadrant * half * half
        row %= half
        col %= half
        size = half
    return index


def count_paper_colors(paper: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Count the single-colour squares (white, blue) that quartering the paper yields."""
    size = len(paper)
    if size == 0 or size & (size - 1):
        raise ValueError("paper side must be a positive power of two")
    if any(len(line) != size for line in paper):
        raise ValueError("paper must be square")

    white = blue = 0

    def split(top: int, left: int, side: int) -> None:
        nonlocal white, blue
        color = paper[top][left]
        uniform = all(
            cell == color
            for line in paper[top : top + side]
            for cell in line[left : left + side]
        )
        if uniform:
            if color == 0:
                white += 1
            else:
                blue += 1
            return
        half = side // 2
        for dr, dc in ((0, 0), (0, half), (half, 0), (half, half)):
            split(top + dr, left + dc, half)

    split(0, 0, size)
    return white, blue


def _repaint_count(board: Sequence[Sequence[str]], top: int, left: int) -> int:
    white_start = black_start = 0
    for i, line in enumerate(board[top : top + 8]):
        for j, cell in enumerate(line[left : left + 8]):
            even = (i + j) % 2 == 0
            if cell == ("B" if even else "W"):
                white_start += 1
            if cell == ("W" if even else "B"):
                black_start += 1
    return min(white_start, black_start)


def min_chessboard_repaint(board: Sequence[Sequence[str]]) -> int:
    """Fewest squares to repaint so some 8x8 window becomes a chessboard."""
    height = len(board)
    width = len(board[0]) if board else 0
    if any(len(line) != width for line in board):
        raise ValueError("board rows must have equal length")
    if height < 8 or width < 8:
        raise ValueError("board must be at least 8x8")
    return min(
        _repaint_count(board, top, left)
        for top in range(height - 7)
        for left in range(width - 7)
    )