"""SQLAlchemy column types storing money as canonical text."""

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

from pgmoney.core.config import settings
from pgmoney.core.exceptions import MoneyWrongTypeError
from pgmoney.core.money import Money, NullMoney, parse_money


def _to_money(value) -> Money:
    """Coerce a bind parameter to Money; ints are cents."""
    if isinstance(value, Money):
        return value
    if isinstance(value, str):
        return parse_money(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Money.from_cents(value)
    raise MoneyWrongTypeError(value)


class MoneyType(TypeDecorator):
    """
    Non-nullable money column.
    
    Values are written as the canonical string ("-$10.05") and read back into
    Money. Reading NULL raises MoneyNilNotAllowedError, use NullMoneyType for
    nullable columns.
    """
    
    impl = String
    cache_ok = True
    
    def __init__(self, length: int = None, **kwargs):
        super().__init__(length or settings.MONEY_COLUMN_LENGTH, **kwargs)
    
    @property
    def python_type(self):
        return Money
    
    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return _to_money(value).value()
    
    def process_result_value(self, value, dialect):
        money = Money()
        money.scan(value)
        return money


class NullMoneyType(TypeDecorator):
    """Nullable money column, read back as NullMoney."""
    
    impl = String
    cache_ok = True
    
    def __init__(self, length: int = None, **kwargs):
        super().__init__(length or settings.MONEY_COLUMN_LENGTH, **kwargs)
    
    @property
    def python_type(self):
        return NullMoney
    
    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, NullMoney):
            return value.value()
        return _to_money(value).value()
    
    def process_result_value(self, value, dialect):
        nm = NullMoney()
        nm.scan(value)
        return nm
