"""Text codec for Money amounts.

Accepted input shapes:

- a bare decimal, e.g. ``"125.00"`` or ``"-3.5"``, read in the default currency;
- ``"<CODE> <decimal>"`` separated by exactly one space, e.g. ``"TWD 150.00"``.

Anything else raises MalformedAmount. Formatting produces the second shape,
so ``parse(format(m)) == m`` for any currency code without spaces.
"""

from __future__ import annotations

import re
from decimal import Decimal

from waiter.domain.exceptions import MalformedAmount
from waiter.domain.model.value_objects import DEFAULT_CURRENCY, Money

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)")


def _is_decimal(token: str) -> bool:
    return _DECIMAL_PATTERN.fullmatch(token) is not None


class MoneyTextCodec:
    """Stateless parser/formatter between display strings and Money.

    ``locale`` is accepted by both directions and ignored: the grammar and
    the default currency are fixed.
    """

    def __init__(self, default_currency: str = DEFAULT_CURRENCY) -> None:
        self._default_currency = default_currency

    @property
    def default_currency(self) -> str:
        return self._default_currency

    def parse(self, text: str, locale: str | None = None) -> Money:
        """Read *text* as a Money amount or raise MalformedAmount."""
        candidate = (text or "").strip()

        if _is_decimal(candidate):
            return Money(Decimal(candidate), self._default_currency)

        if candidate:
            tokens = candidate.split(" ")
            if len(tokens) == 2 and tokens[0] and _is_decimal(tokens[1]):
                return Money(Decimal(tokens[1]), tokens[0])

        raise MalformedAmount(text, 0)

    def format(self, money: Money, locale: str | None = None) -> str:
        """Render *money* as ``"<CODE> <amount>"`` keeping the amount's scale."""
        return f"{money.currency} {money.amount:f}"
