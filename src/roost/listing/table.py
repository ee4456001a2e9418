"""Bordered text tables for console output.

::

    +--------+-------+
    | Method | URI   |
    +--------+-------+
    | GET    | /     |
    +--------+-------+
"""

from collections.abc import Sequence


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render ``headers`` and ``rows`` as a bordered table.

    Column widths fit the widest cell, header included.  Rows shorter
    than the header are padded with empty cells.
    """
    columns = len(headers)
    cells = [[str(cell) for cell in row] + [""] * (columns - len(row)) for row in rows]

    widths = [len(header) for header in headers]
    for row in cells:
        for i, cell in enumerate(row[:columns]):
            widths[i] = max(widths[i], len(cell))

    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(values: Sequence[str]) -> str:
        return "| " + " | ".join(v.ljust(w) for v, w in zip(values, widths, strict=True)) + " |"

    lines = [border, line(headers), border]
    lines.extend(line(row[:columns]) for row in cells)
    lines.append(border)
    return "\n".join(lines)
