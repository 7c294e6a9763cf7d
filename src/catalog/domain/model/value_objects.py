"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from catalog.domain.exceptions import InvalidFormatError, InvalidValueError

SUPPORTED_CURRENCIES = ("USD", "EUR", "GBP", "MXN", "CAD", "AUD")

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "MXN": "$",
    "CAD": "CA$",
    "AUD": "A$",
}

_CENTS = Decimal("0.01")
_HUNDRED = Decimal("100")


def to_decimal(value: str | float | int | Decimal, field: str = "amount") -> Decimal:
    """Coerce a number to Decimal without float artefacts (0.1 -> 0.1)."""
    if isinstance(value, bool):
        raise InvalidValueError(f"Invalid {field}: {value!r}", field)
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidValueError(f"Invalid {field}: {value!r}", field) from exc


@dataclass(frozen=True)
class Price:
    """Monetary amount with currency.

    Amounts are Decimals rounded to cents by ``Price.create``. Every
    arithmetic operation returns a new Price; operations between two
    prices require the same currency.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidValueError(
                f"Price amount must be a Decimal, got {type(self.amount).__name__}",
                "amount",
            )
        if self.currency not in SUPPORTED_CURRENCIES:
            raise InvalidValueError(
                f"Invalid currency: {self.currency}. "
                f"Supported currencies: {', '.join(SUPPORTED_CURRENCIES)}",
                "currency",
            )
        if not self.amount.is_finite():
            raise InvalidValueError(
                f"Price amount must be a valid number. Received: {self.amount}",
                "amount",
            )
        if self.amount < 0:
            raise InvalidValueError(
                f"Price amount cannot be negative. Received: {self.amount}",
                "amount",
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(amount: str | float | int | Decimal, currency: str = "USD") -> Price:
        """Validate and round ``amount`` to two decimals."""
        value = to_decimal(amount)
        normalized_currency = currency.strip().upper()
        if value.is_finite():
            if value < 0:
                raise InvalidValueError(
                    f"Price amount cannot be negative. Received: {value}", "amount"
                )
            value = value.quantize(_CENTS, rounding=ROUND_HALF_UP)
        return Price(value, normalized_currency)

    @staticmethod
    def zero(currency: str = "USD") -> Price:
        return Price.create(0, currency)

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Price) -> Price:
        self._assert_same_currency(other)
        return Price.create(self.amount + other.amount, self.currency)

    def subtract(self, other: Price) -> Price:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < 0:
            raise InvalidValueError("Subtraction would result in negative price", "amount")
        return Price.create(result, self.currency)

    def multiply(self, factor: str | float | int | Decimal) -> Price:
        value = to_decimal(factor, "factor")
        if not value.is_finite():
            raise InvalidValueError("Multiplication factor must be a valid number", "factor")
        if value < 0:
            raise InvalidValueError("Multiplication factor cannot be negative", "factor")
        return Price.create(self.amount * value, self.currency)

    def divide(self, divisor: str | float | int | Decimal) -> Price:
        value = to_decimal(divisor, "divisor")
        if not value.is_finite():
            raise InvalidValueError("Divisor must be a valid number", "divisor")
        if value <= 0:
            raise InvalidValueError("Divisor must be greater than zero", "divisor")
        return Price.create(self.amount / value, self.currency)

    def apply_discount(self, percentage: str | float | int | Decimal) -> Price:
        pct = to_decimal(percentage, "percentage")
        if not pct.is_finite() or pct < 0 or pct > _HUNDRED:
            raise InvalidValueError(
                "Discount percentage must be between 0 and 100", "percentage"
            )
        return self.multiply(1 - pct / _HUNDRED)

    def apply_tax(self, percentage: str | float | int | Decimal) -> Price:
        pct = to_decimal(percentage, "percentage")
        if not pct.is_finite() or pct < 0:
            raise InvalidValueError("Tax percentage cannot be negative", "percentage")
        return self.multiply(1 + pct / _HUNDRED)

    def calculate_percentage_of(self, total: Price) -> Decimal:
        """Share of ``total`` this price represents, in percent."""
        self._assert_same_currency(total)
        if total.is_zero():
            return Decimal("0")
        return self.amount / total.amount * _HUNDRED

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply

    # --- Comparison -----------------------------------------------------------

    def equals(self, other: Price) -> bool:
        return self == other

    def is_greater_than(self, other: Price) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def is_greater_than_or_equal(self, other: Price) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    def is_less_than(self, other: Price) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def is_less_than_or_equal(self, other: Price) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    __gt__ = is_greater_than
    __ge__ = is_greater_than_or_equal
    __lt__ = is_less_than
    __le__ = is_less_than_or_equal

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    # --- Display --------------------------------------------------------------

    def formatted(self) -> str:
        symbol = CURRENCY_SYMBOLS.get(self.currency, self.currency)
        return f"{symbol}{self.amount:.2f}"

    def formatted_with_currency(self) -> str:
        return f"{self.currency} {self.amount:.2f}"

    def __str__(self) -> str:
        return self.formatted()

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Price) -> None:
        if self.currency != other.currency:
            raise InvalidValueError(
                f"Cannot compare prices with different currencies: "
                f"{self.currency} vs {other.currency}",
                "currency",
            )


# ---------------------------------------------------------------------------
# Product codes: PREFIX-SUFFIX, e.g. ELEC-000007 or LAP-HP001
# ---------------------------------------------------------------------------
CODE_PATTERN = re.compile(r"^[A-Z0-9]{3,4}-[A-Z0-9]{3,6}$")
PREFIX_PATTERN = re.compile(r"^[A-Z0-9]{3,4}$")
SUFFIX_PATTERN = re.compile(r"^[A-Z0-9]{3,6}$")
MIN_CODE_LENGTH = 7
MAX_CODE_LENGTH = 11
MAX_SEQUENCE = 999_999
SEQUENCE_WIDTH = 6
DEFAULT_PREFIX = "PROD"


@dataclass(frozen=True)
class ProductCode:
    """SKU-like product code.

    Use ``create``, ``create_from_parts`` or ``generate`` for new codes;
    the plain constructor is for codes rehydrated from storage and does
    not re-validate.
    """

    code: str

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(code: str) -> ProductCode:
        normalized = code.strip().upper()

        if len(normalized) < MIN_CODE_LENGTH:
            raise InvalidFormatError(
                f"Product code is too short. Minimum length: {MIN_CODE_LENGTH}", "code"
            )
        if len(normalized) > MAX_CODE_LENGTH:
            raise InvalidFormatError(
                f"Product code is too long. Maximum length: {MAX_CODE_LENGTH}", "code"
            )
        if not CODE_PATTERN.match(normalized):
            raise InvalidFormatError(
                "Invalid product code format. Expected format: XXX-XXX to "
                f"XXXX-XXXXXX (alphanumeric). Received: {code}",
                "code",
            )
        return ProductCode(normalized)

    @staticmethod
    def create_from_parts(prefix: str, suffix: str) -> ProductCode:
        normalized_prefix = prefix.strip().upper()
        normalized_suffix = suffix.strip().upper()

        if not PREFIX_PATTERN.match(normalized_prefix):
            raise InvalidFormatError(
                "Invalid prefix format. Expected 3-4 alphanumeric characters. "
                f"Received: {prefix}",
                "prefix",
            )
        if not SUFFIX_PATTERN.match(normalized_suffix):
            raise InvalidFormatError(
                "Invalid suffix format. Expected 3-6 alphanumeric characters. "
                f"Received: {suffix}",
                "suffix",
            )
        return ProductCode(f"{normalized_prefix}-{normalized_suffix}")

    @staticmethod
    def generate(category: str, sequence: int) -> ProductCode:
        """Build ``<4-char category prefix>-<6-digit sequence>``."""
        if not category or not category.strip():
            raise InvalidValueError("Category cannot be empty", "category")
        if isinstance(sequence, bool) or not isinstance(sequence, int):
            raise InvalidValueError(
                f"Sequence number must be an integer, got {type(sequence).__name__}",
                "sequence",
            )
        if sequence < 0:
            raise InvalidValueError("Sequence number cannot be negative", "sequence")
        if sequence > MAX_SEQUENCE:
            raise InvalidValueError(
                f"Sequence number cannot exceed {MAX_SEQUENCE}", "sequence"
            )

        prefix = _prefix_for_category(category)
        suffix = str(sequence).zfill(SEQUENCE_WIDTH)
        return ProductCode.create_from_parts(prefix, suffix)

    # --- Accessors ------------------------------------------------------------

    @property
    def prefix(self) -> str:
        return self.code.split("-")[0]

    @property
    def suffix(self) -> str:
        return self.code.split("-")[1]

    @property
    def category(self) -> str:
        return self.prefix

    @property
    def sequence(self) -> int:
        if not self.suffix.isdigit():
            raise InvalidFormatError(
                f"Product code '{self.code}' has no numeric sequence", "code"
            )
        return int(self.suffix)

    # --- Queries --------------------------------------------------------------

    def equals(self, other: ProductCode) -> bool:
        return self.code == other.code

    def starts_with(self, prefix: str) -> bool:
        return self.code.startswith(prefix.strip().upper())

    def matches(self, pattern: str) -> bool:
        try:
            return re.search(pattern, self.code, re.IGNORECASE) is not None
        except re.error:
            return False

    def belongs_to_category(self, category: str) -> bool:
        return self.prefix == _prefix_for_category(category)

    def is_sequential(self, other: ProductCode) -> bool:
        if self.prefix != other.prefix:
            return False
        if not (self.suffix.isdigit() and other.suffix.isdigit()):
            return False
        return abs(self.sequence - other.sequence) == 1

    # --- Sequencing -----------------------------------------------------------

    def next(self) -> ProductCode:
        return ProductCode.generate(self.prefix, self.sequence + 1)

    def previous(self) -> ProductCode:
        current = self.sequence
        if current == 0:
            raise InvalidValueError("Cannot get previous code for sequence 0", "sequence")
        return ProductCode.generate(self.prefix, current - 1)

    def __str__(self) -> str:
        return self.code


def _prefix_for_category(category: str) -> str:
    """First four alphanumerics of the category, right-padded with X."""
    sanitized = re.sub(r"[^A-Z0-9]", "", category.strip().upper())
    if not sanitized:
        return DEFAULT_PREFIX
    return sanitized[:4].ljust(4, "X")
