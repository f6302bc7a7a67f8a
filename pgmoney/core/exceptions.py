"""Custom exceptions for money parsing and marshalling."""


class MoneyError(ValueError):
    """Base exception for money values."""
    pass


class InvalidMoneyFormatError(MoneyError):
    """Raised when a string does not look like a money value."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"String provided does not appear to be a money value: {value!r}")


class MoneyNumericParseError(MoneyError):
    """Raised when the numeric part of a money string cannot be parsed."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Could not parse amount {value!r} as a number")


class MoneyNilNotAllowedError(MoneyError):
    """Raised when a non-nullable money value is scanned from NULL."""

    def __init__(self):
        super().__init__("Value cannot be None, use NullMoney instead")


class MoneyWrongTypeError(MoneyError):
    """Raised when an external value is not text or bytes."""

    def __init__(self, value):
        self.value_type = type(value)
        super().__init__(
            f"Value not of type bytes or str. Type: {self.value_type.__name__}, value: {value!r}"
        )
