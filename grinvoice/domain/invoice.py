"""Result model for invoice field extraction."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation

from grinvoice.domain.annotation import Annotation


@dataclass(frozen=True)
class InvoiceFields:
    """Extracted invoice fields. ``None`` means the field was not found."""

    total_payment_amount: Annotation | None = None
    due_date: Annotation | None = None
    # Parsed form of the due date text; None when absent or unparseable
    due_date_value: date | None = None

    @property
    def total_payment_amount_text(self) -> str | None:
        """Amount description with internal whitespace stripped."""
        if self.total_payment_amount is None:
            return None
        return "".join(self.total_payment_amount.description.split())

    @property
    def total_payment_amount_value(self) -> Decimal | None:
        text = self.total_payment_amount_text
        if text is None:
            return None
        try:
            return Decimal(text.replace(",", ""))
        except InvalidOperation:
            return None

    @property
    def due_date_text(self) -> str | None:
        return self.due_date.description if self.due_date is not None else None

