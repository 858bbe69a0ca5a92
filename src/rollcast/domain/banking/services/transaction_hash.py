"""Content-derived identity hashes for imported transactions.

The identity hash is a 32-bit rolling hash over the normalized date,
amount and description. It is not cryptographic; it only needs to keep
distinct events apart at human transaction volumes and to stay stable
across re-imports of the same statement line.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

HASH_DELIMITER = "|"
_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_CENTS = Decimal("0.01")


def rolling_hash(text: str) -> int:
    """Return the signed 32-bit ``h * 31 + c`` hash of ``text``.

    Characters are consumed as UTF-16 code units so the digest matches the
    one produced for the same text by browser-side tooling.
    """
    value = 0
    encoded = text.encode("utf-16-be")
    for index in range(0, len(encoded), 2):
        code_unit = (encoded[index] << 8) | encoded[index + 1]
        value = (value * 31 + code_unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def normalize_amount(amount: Decimal) -> str:
    """Signed amount rounded to cents, e.g. ``Decimal("-50.2")`` -> ``"-50.20"``."""
    return str(amount.quantize(_CENTS, rounding=ROUND_HALF_UP))


def normalize_description(description: str) -> str:
    return description.strip().upper()


def compute_transaction_hash(
    posting_date: date,
    amount: Decimal,
    description: str,
) -> str:
    """Compute the identity hash of a transaction.

    Parameters
    ----------
    posting_date
        Parsed posting date, rendered as ``YYYY-MM-DD``
    amount
        Amount signed by direction, negative for outflows
    description
        Free-text description, trimmed and uppercased before hashing

    Returns
    -------
    Lowercase hex digest of the absolute rolling hash.
    """
    identity_string = HASH_DELIMITER.join(
        [
            posting_date.isoformat(),
            normalize_amount(amount),
            normalize_description(description),
        ],
    )
    return format(abs(rolling_hash(identity_string)), "x")


def compute_fuzzy_hash(
    posting_date: date,
    amount: Decimal,
    description: str,
    amount_precision: int = 0,
    description_words: int = 3,
) -> str:
    """Coarse key for grouping likely duplicates before a full comparison.

    Uses the date, the amount rounded to ``amount_precision`` decimals and
    the first ``description_words`` words of the description.
    """
    quantum = Decimal(1).scaleb(-amount_precision)
    rounded = abs(amount).quantize(quantum, rounding=ROUND_HALF_UP)
    words = normalize_description(description).split()[:description_words]
    key = HASH_DELIMITER.join([posting_date.isoformat(), str(rounded), " ".join(words)])
    return _to_base36(abs(rolling_hash(key)))


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))
