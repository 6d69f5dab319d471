"""
Plain ASCII table rendering.

    +---------------+--------------+
    | name          | artist       |
    +---------------+--------------+
    | The Killchain | Bolt Thrower |
    +---------------+--------------+
    | Pull the Plug | Death        |
    +---------------+--------------+
"""
import math
from decimal import Decimal
from typing import Any, Iterable, Sequence


def format_cell(value: Any) -> str:
    """
    Render a cell. Floats are written out in full without an exponent,
    and a whole float drops its fraction (4.0 → '4', 1e16 → '10000000000000000').
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        text = format(Decimal(repr(value)), "f")
        return text[:-2] if text.endswith(".0") else text
    return str(value)


def render_table(headers: Sequence[str], rows: Iterable[Sequence[Any]]) -> str:
    cells = [[format_cell(v) for v in row] for row in rows]
    widths = [len(h) for h in headers]
    for row in cells:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(values: Sequence[str]) -> str:
        return "|" + "|".join(f" {v.ljust(w)} " for v, w in zip(values, widths)) + "|"

    out = [border, line(list(headers)), border]
    for row in cells:
        out.extend((line(row), border))
    return "\n".join(out)
