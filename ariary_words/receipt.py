"""
Receipt rendering helpers — the consumers of the amount speller.

Builds the pieces every sale receipt needs: ariary figures, the totals block
ending with the "Arrêté à la somme de" sentence, the HTML item rows, and the
template variables handed to the e-mail relay (including `amount_in_words`).

Sending the e-mail itself is the relay's job; we only prepare the payload.
"""

from __future__ import annotations

import html
import logging
import re

from .config import EmailRelaySettings
from .exceptions import EmailRelayNotConfiguredError, InvalidRecipientError
from .models import ReceiptData, ReceiptItem
from .speller import format_amount_in_words, get_amount_in_words, round_amount

logger = logging.getLogger(__name__)


# ─── Constants ───────────────────────────────────────────────────────

PAYMENT_METHOD_LABELS: dict[str, str] = {
    "cash": "Espèces",
    "card": "Carte bancaire",
    "mvola": "MVola",
    "orange_money": "Orange Money",
    "airtel_money": "Airtel Money",
}

DATE_FORMAT = "%d/%m/%Y %H:%M"
ANONYMOUS_CUSTOMER = "Client anonyme"

_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
_LABEL_WIDTH = 24
_VALUE_WIDTH = 16


# ─── Formatting ──────────────────────────────────────────────────────


def format_ariary(amount: object) -> str:
    """Format an amount as whole ariary with space-grouped thousands.

    Example:
        1000      → "1 000 Ar"
        1234567.6 → "1 234 568 Ar"

    Raises:
        InvalidAmountError: For negative, non-finite or non-numeric amounts.
    """
    return f"{round_amount(amount):,}".replace(",", " ") + " Ar"


def payment_method_label(method: str) -> str:
    """Human label for a payment method code; unknown codes pass through."""
    return PAYMENT_METHOD_LABELS.get(method, method)


def render_items_rows(items: list[ReceiptItem]) -> str:
    """HTML table rows for the e-mail body: name, quantity, unit price, total."""
    return "".join(
        f"<tr><td>{html.escape(item.name)}</td><td>{item.quantity}</td>"
        f"<td>{format_ariary(item.unit_price)}</td><td>{format_ariary(item.total)}</td></tr>"
        for item in items
    )


def render_totals_block(receipt: ReceiptData) -> str:
    """Plain-text totals section of a printed receipt.

    The last line is always the amount-in-words sentence for the total.
    """
    lines = [
        _total_line("Sous-total (HT):", format_ariary(receipt.subtotal)),
        _total_line("TVA:", format_ariary(receipt.tax_amount)),
        _total_line("TOTAL TTC:", format_ariary(receipt.total)),
        _total_line(
            f"Paiement ({payment_method_label(receipt.payment_method)}):",
            format_ariary(receipt.payment_amount),
        ),
    ]
    if receipt.change_amount > 0:
        lines.append(_total_line("Rendu:", format_ariary(receipt.change_amount)))

    lines.append("")
    lines.append(format_amount_in_words(receipt.total))
    return "\n".join(lines)


def _total_line(label: str, value: str) -> str:
    return f"{label:<{_LABEL_WIDTH}}{value:>{_VALUE_WIDTH}}"


# ─── E-mail Payload ─────────────────────────────────────────────────


def build_email_template_params(
    receipt: ReceiptData,
    customer_email: str,
    settings: EmailRelaySettings,
) -> dict[str, str]:
    """Build the e-mail relay template variables for one receipt.

    Args:
        receipt: The sale to send.
        customer_email: Recipient address.
        settings: Relay credentials and sender overrides.

    Returns:
        Flat dict of template variables; every value is a string.

    Raises:
        InvalidRecipientError: If `customer_email` does not look like an address.
        EmailRelayNotConfiguredError: If the relay credentials are unusable.
    """
    address = customer_email.strip()
    if not _EMAIL_RE.fullmatch(address):
        raise InvalidRecipientError(
            f"Invalid e-mail address: {customer_email!r}",
            details={"customer_email": customer_email},
        )

    if not settings.is_configured:
        logger.warning("E-mail relay is not configured — receipt %s not prepared", receipt.receipt_number)
        raise EmailRelayNotConfiguredError(
            "E-mail relay is not configured. Set the EMAILJS_* environment variables.",
            details={"receipt_number": receipt.receipt_number},
        )

    shop = receipt.establishment
    params = {
        # Establishment
        "establishment_name": shop.name,
        "establishment_address": shop.address,
        "establishment_phone": shop.phone,
        "establishment_email": shop.email,
        "establishment_nif": shop.nif or "",
        "establishment_stat": shop.stat or "",
        # Receipt
        "receipt_number": receipt.receipt_number,
        "date": receipt.date.strftime(DATE_FORMAT),
        "cashier_name": receipt.cashier_name,
        "customer_name": receipt.customer_name or ANONYMOUS_CUSTOMER,
        "items_content": render_items_rows(receipt.items),
        "subtotal": format_ariary(receipt.subtotal),
        "tax_amount": format_ariary(receipt.tax_amount),
        "total_amount": format_ariary(receipt.total),
        "payment_method": payment_method_label(receipt.payment_method),
        "payment_amount": format_ariary(receipt.payment_amount),
        "change_amount": format_ariary(receipt.change_amount) if receipt.change_amount > 0 else "0 Ar",
        "amount_in_words": get_amount_in_words(receipt.total),
        # Recipient
        "to_email": address,
        "to_name": receipt.customer_name or "Client",
        # Sender overrides
        "from_name": settings.from_name or shop.name,
        "from_email": settings.from_email or shop.email,
        "reply_to": settings.reply_to or settings.from_email or shop.email,
        "bcc": settings.bcc,
        "cc": settings.cc,
    }

    logger.info("Prepared e-mail payload for receipt %s", receipt.receipt_number)
    return params
