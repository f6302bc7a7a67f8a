"""Money handling utilities - amounts are integer cents, text on the wire."""

import math
import re
from decimal import Decimal
from typing import Optional, Union

from pgmoney.core.exceptions import (
    InvalidMoneyFormatError,
    MoneyError,
    MoneyNilNotAllowedError,
    MoneyNumericParseError,
    MoneyWrongTypeError,
)
from pgmoney.core.logging import get_logger

logger = get_logger(__name__)


# Commas are stripped before matching, the comma groups only matter for direct use of the pattern
MONEY_PATTERN = re.compile(
    r"(?=.*[0-9])"
    r"-?\(?\$?\s*-?\s*\(?"
    r"(((\d{1,3}((,\d{3})*|\d*))?(\.\d{1,4})?)|((\d{1,3}((,\d{3})*|\d*))(\.\d{0,4})?))"
    r"\)?",
    re.ASCII | re.DOTALL,
)

ExternalValue = Union[bytes, bytearray, memoryview, str, None]


def is_money_literal(amount: str) -> bool:
    """Check whether a comma-stripped string matches the money grammar."""
    return MONEY_PATTERN.fullmatch(amount) is not None


def render_cents(cents: int) -> str:
    """
    Render an amount in cents in canonical form.

    Args:
        cents: Amount in cents

    Returns:
        String like "$10.05" or "-$0.66", no thousands separators
    """
    sign = "-" if cents < 0 else ""
    dollars, remainder = divmod(abs(cents), 100)
    return f"{sign}${dollars}.{remainder:02d}"


def parse_cents(amount: str) -> int:
    """
    Parse a money literal into cents.

    The fractional part is truncated to whole cents, not rounded. A "-" anywhere
    in the literal makes the result negative; parentheses do not.

    Args:
        amount: Money literal, e.g. "$1,234.56" or "-10"

    Returns:
        Amount in cents

    Raises:
        InvalidMoneyFormatError: If the literal does not match the grammar
        MoneyNumericParseError: If the numeric part is not a number or out of range
    """
    negative = "-" in amount
    amount = amount.replace(",", "")
    if not is_money_literal(amount):
        raise InvalidMoneyFormatError(amount)

    number = amount.split("$")[-1]
    # float() tolerates surrounding whitespace, the grammar only allows it before the number
    if number != number.strip():
        raise MoneyNumericParseError(number)
    try:
        f_amount = float(number)
    except ValueError as e:
        raise MoneyNumericParseError(number) from e
    if math.isinf(f_amount):
        raise MoneyNumericParseError(number)

    cents = int(f_amount * 100)

    if negative and cents > 0:
        # float() already handles a "-" that directly precedes the digits
        cents = -cents
    return cents


class Money:
    """Money amount held as integer cents with a cached canonical string."""

    __slots__ = ("_cents", "_display")

    def __init__(self, cents: int = 0):
        """
        Initialize Money object.

        Args:
            cents: Amount in cents (default: 0)
        """
        self.set_cents(cents)

    @classmethod
    def from_cents(cls, amount: int) -> "Money":
        """Create Money from an amount in cents."""
        return cls(amount)

    @property
    def cents(self) -> int:
        """Amount in cents, so $1.20 is 120."""
        return self._cents

    def set_cents(self, amount: int) -> None:
        """Set the amount in cents."""
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ValueError(f"Invalid amount type: {type(amount)}")
        self._cents = amount
        self._display = render_cents(amount)

    def set_string(self, amount: str) -> None:
        """
        Set the amount from a money literal.

        Args:
            amount: Money literal

        Raises:
            InvalidMoneyFormatError: If the literal does not match the grammar
            MoneyNumericParseError: If the numeric part is not a number
        """
        self.set_cents(parse_cents(amount))

    def add(self, amount: int) -> None:
        """Add (or with a negative amount, subtract) cents."""
        self.set_cents(self._cents + amount)

    def scan(self, value: ExternalValue) -> None:
        """
        Load the amount from a database value.

        Args:
            value: Text or bytes as returned by the driver

        Raises:
            MoneyNilNotAllowedError: If value is None
            MoneyWrongTypeError: If value is not text or bytes
            InvalidMoneyFormatError: If the text is not UTF-8 or not a money literal
            MoneyNumericParseError: If the numeric part is not a number
        """
        try:
            if value is None:
                raise MoneyNilNotAllowedError()
            if isinstance(value, (bytes, bytearray, memoryview)):
                raw = bytes(value)
                try:
                    value = raw.decode("utf-8")
                except UnicodeDecodeError as e:
                    raise InvalidMoneyFormatError(raw.decode("utf-8", errors="replace")) from e
            elif not isinstance(value, str):
                raise MoneyWrongTypeError(value)
            self.set_string(value)
        except MoneyError as e:
            logger.warning("Money scan failed", error_type=type(e).__name__, value=repr(value))
            self.set_cents(0)
            raise

    def value(self) -> str:
        """Database value, always the canonical string."""
        return self._display

    def to_decimal(self) -> Decimal:
        """Convert to Decimal in whole currency units."""
        return Decimal(self._cents).scaleb(-2)

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self._cents == 0

    def is_positive(self) -> bool:
        """Check if amount is positive."""
        return self._cents > 0

    def is_negative(self) -> bool:
        """Check if amount is negative."""
        return self._cents < 0

    def copy(self) -> "Money":
        """Return an independent copy."""
        return Money(self._cents)

    def __int__(self) -> int:
        return self._cents

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._cents == other._cents

    # Mutable, so not hashable
    __hash__ = None

    def __lt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._cents < other._cents

    def __le__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._cents <= other._cents

    def __gt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._cents > other._cents

    def __ge__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._cents >= other._cents

    def __repr__(self) -> str:
        return f"Money({self._display!r})"

    def __str__(self) -> str:
        return self._display


class NullMoney:
    """
    A Money amount that may be NULL, for nullable columns.

    money is only set while valid is True.
    """

    __slots__ = ("money", "valid")

    def __init__(self):
        self.money: Optional[Money] = None
        self.valid = False

    @classmethod
    def of(cls, money: Money) -> "NullMoney":
        """Create a valid NullMoney holding money."""
        nm = cls()
        nm.set_money(money)
        return nm

    def set_money(self, money: Money) -> None:
        """Take ownership of money and mark as valid."""
        self.money = money
        self.valid = True

    def clear(self) -> None:
        """Reset to NULL."""
        self.money, self.valid = None, False

    def scan(self, value: ExternalValue) -> None:
        """
        Load from a database value, None meaning NULL.

        Raises:
            MoneyWrongTypeError: If value is not text or bytes
            InvalidMoneyFormatError: If the text is not a money literal
            MoneyNumericParseError: If the numeric part is not a number
        """
        if value is None:
            self.clear()
            return

        money = Money()
        try:
            money.scan(value)
        except MoneyError:
            self.clear()
            raise
        self.set_money(money)

    def value(self) -> Optional[str]:
        """Database value, None when not valid."""
        if not self.valid:
            return None
        return self.money.value()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NullMoney):
            return NotImplemented
        return self.valid == other.valid and self.money == other.money

    __hash__ = None

    def __repr__(self) -> str:
        if not self.valid:
            return "NullMoney(None)"
        return f"NullMoney({self.money.value()!r})"


def parse_money(amount: str) -> Money:
    """Parse a money literal into a new Money object."""
    money = Money()
    money.set_string(amount)
    return money


def zero_money() -> Money:
    """Create zero Money object."""
    return Money(0)
