"""Statement service - pricing and aggregation of invoices.

Services:
- Depend only on interfaces (stores)
- Never mutate the invoice or the catalog
- Return domain models or raise domain errors

Generation is pure and holds no shared state, so concurrent calls with
distinct inputs need no synchronization.
"""

import logging
from collections.abc import Mapping

from theater.domain import (
    Invoice,
    Money,
    Performance,
    Play,
    PricingRules,
    Statement,
    StatementLine,
    amount_for,
    volume_credits_for,
)
from theater.domain.errors import UnknownPlayError
from theater.services.rendering import render_plain_text
from theater.stores import InMemoryPlayCatalog, PlayCatalog

logger = logging.getLogger(__name__)


class StatementService:
    """Service for billing statement generation."""

    def __init__(self, catalog: PlayCatalog, rules: PricingRules | None = None) -> None:
        self._catalog = catalog
        self._rules = rules or PricingRules()

    def build_statement(self, invoice: Invoice) -> Statement:
        """Price every performance of an invoice.

        Raises:
            UnknownPlayError: If a performance references a missing play.
            UnrecognizedCategoryError: If a play has no pricing formula.
        """
        lines = []
        credits = 0
        for performance in invoice.performances:
            play = self._play_for(performance)
            amount = amount_for(play, performance.audience, self._rules)
            credits += volume_credits_for(play, performance.audience, self._rules)
            lines.append(
                StatementLine(
                    play_name=play.name,
                    amount=amount,
                    audience=performance.audience.value,
                )
            )

        statement = Statement(
            customer=invoice.customer,
            lines=tuple(lines),
            total_amount=sum((line.amount for line in lines), Money.zero()),
            volume_credits=credits,
        )
        logger.debug(
            "Built statement for %s: %d performances, total %s, %d credits",
            invoice.customer,
            len(lines),
            statement.total_amount,
            statement.volume_credits,
        )
        return statement

    def generate_statement(self, invoice: Invoice) -> str:
        """Return the plain-text statement for an invoice.

        Raises:
            UnknownPlayError: If a performance references a missing play.
            UnrecognizedCategoryError: If a play has no pricing formula.
        """
        return render_plain_text(self.build_statement(invoice))

    def _play_for(self, performance: Performance) -> Play:
        play_id = performance.play_id.value
        play = self._catalog.get_play(play_id)
        if play is None:
            raise UnknownPlayError(play_id)
        return play


def generate_statement(
    invoice: Invoice,
    plays: Mapping[str, Play] | PlayCatalog,
    rules: PricingRules | None = None,
) -> str:
    """Return the plain-text statement for ``invoice`` priced against ``plays``."""
    catalog = plays if isinstance(plays, PlayCatalog) else InMemoryPlayCatalog(plays)
    return StatementService(catalog, rules).generate_statement(invoice)
