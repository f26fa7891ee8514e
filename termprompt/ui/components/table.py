"""
Box-drawn table output.
"""

from ...core.formatting import visible_width
from ..primitives.theme import RenderContext, DEFAULT_CONTEXT

# Box drawing characters
BOX_TL = "┌"
BOX_TR = "┐"
BOX_BL = "└"
BOX_BR = "┘"
BOX_H = "─"
BOX_V = "│"
BOX_TOP_TEE = "┬"
BOX_BOTTOM_TEE = "┴"
BOX_LEFT_TEE = "├"
BOX_RIGHT_TEE = "┤"
BOX_CROSS = "┼"


def _single_line(cell) -> str:
    return str(cell).replace("\r", "").replace("\n", " ")


def format_table(headers: list[str], rows: list[list[str]], ctx: RenderContext = DEFAULT_CONTEXT) -> list[str]:
    """
    Lay out headers and rows as a box-drawn table.

    Cells are flattened to one line. Rows shorter than the header are padded
    with empty cells; extra cells are ignored. Column widths use terminal
    display width, so wide characters line up.
    """
    if not headers:
        return []

    headers = [_single_line(h) for h in headers]
    rows = [[_single_line(c) for c in row] for row in rows]

    widths = [visible_width(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[:len(widths)]):
            widths[i] = max(widths[i], visible_width(cell))
    # One space of padding each side
    widths = [w + 2 for w in widths]

    def rule(left: str, mid: str, right: str) -> str:
        return ctx.muted(left + mid.join(BOX_H * w for w in widths) + right)

    def row_line(cells: list[str], is_header: bool) -> str:
        parts = [ctx.muted(BOX_V)]
        for i, w in enumerate(widths):
            cell = cells[i] if i < len(cells) else ""
            padding = max(0, w - visible_width(cell) - 1)
            styled = ctx.bold(ctx.accent(cell)) if is_header else ctx.text(cell)
            parts.append(" " + styled + " " * padding + ctx.muted(BOX_V))
        return "".join(parts)

    lines = [rule(BOX_TL, BOX_TOP_TEE, BOX_TR), row_line(headers, True), rule(BOX_LEFT_TEE, BOX_CROSS, BOX_RIGHT_TEE)]
    lines.extend(row_line(row, False) for row in rows)
    lines.append(rule(BOX_BL, BOX_BOTTOM_TEE, BOX_BR))
    return lines


def print_table(headers: list[str], rows: list[list[str]], ctx: RenderContext = DEFAULT_CONTEXT):
    for line in format_table(headers, rows, ctx):
        print(line)
