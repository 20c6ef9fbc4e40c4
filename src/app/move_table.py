from __future__ import annotations

from typing import Sequence


def format_table(matrix: Sequence[Sequence[str]]) -> str:
    if not matrix:
        return "(no moves)"

    widths = [max(len(row[col]) for row in matrix) for col in range(len(matrix[0]))]

    def _line(row: Sequence[str]) -> str:
        return "  ".join(f"{cell:<{w}}" for cell, w in zip(row, widths)).rstrip()

    header = _line(matrix[0])
    lines: list[str] = [header, "-" * len(header)]
    lines.extend(_line(row) for row in matrix[1:])
    return "\n".join(lines)
