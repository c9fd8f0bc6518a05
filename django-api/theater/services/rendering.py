"""Plain-text rendering of statements."""

import os

from theater.domain import Statement


def render_plain_text(statement: Statement) -> str:
    """Render a statement, one line per performance in invoice order.

    Every line, the last included, ends with ``os.linesep``.
    """
    lines = [f"Statement for {statement.customer}"]
    lines.extend(
        f"  {line.play_name}: {line.amount} ({line.audience} seats)"
        for line in statement.lines
    )
    lines.append(f"Amount owed is {statement.total_amount}")
    lines.append(f"You earned {statement.volume_credits} credits")
    return "".join(line + os.linesep for line in lines)
