"""
Common Value Objects

Value objects used across multiple domains:
- Money: Represents monetary amounts with currency
- DateRange: Represents a rental period (start and end dates, both inclusive)
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from shared.domain.base import ValueObject
from shared.domain.exceptions import InvalidInput


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Money value object

    Represents a non-negative monetary amount with currency.
    Immutable; there is no conversion between currencies.
    """
    amount: Decimal
    currency: str = 'USD'

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, 'amount', Decimal(str(self.amount)))
            except InvalidOperation:
                raise InvalidInput(f"Invalid amount: {self.amount!r}") from None
        if not self.amount.is_finite():
            raise InvalidInput(f"Invalid amount: {self.amount}")
        if self.amount < 0:
            raise InvalidInput("Amount cannot be negative")
        if not self.currency or len(self.currency) != 3:
            raise InvalidInput(f"Invalid currency code: {self.currency!r}")

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    def __mul__(self, factor: int | Decimal) -> 'Money':
        """Multiply money by a whole or decimal factor (exact)"""
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError("Can only multiply Money by int or Decimal")
        return Money(self.amount * factor, self.currency)

    def __str__(self):
        return f"{self.amount:,.2f} {self.currency}"

    def __repr__(self):
        return f"Money({self.amount}, '{self.currency}')"


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a rental period from start_date to end_date. Both dates are
    calendar dates; datetimes are truncated to their date. The range must
    span at least one full day (start_date < end_date).
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        # datetime is a subclass of date, strip the time of day
        if isinstance(self.start_date, datetime):
            object.__setattr__(self, 'start_date', self.start_date.date())
        if isinstance(self.end_date, datetime):
            object.__setattr__(self, 'end_date', self.end_date.date())

        if self.start_date is None or self.end_date is None:
            raise InvalidInput("Start date and end date are required")
        if self.start_date >= self.end_date:
            raise InvalidInput(
                f"End date ({self.end_date}) must be after start date ({self.start_date})"
            )

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Check if this range overlaps with another

        Boundaries are inclusive: a range ending on day N conflicts with
        a range starting on day N.

        Examples:
            - DateRange(25, 28) overlaps with DateRange(27, 30) -> True
            - DateRange(25, 28) overlaps with DateRange(28, 31) -> True (touching)
            - DateRange(25, 28) overlaps with DateRange(29, 31) -> False
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")

        return (self.start_date <= other.end_date and
                other.start_date <= self.end_date)

    def starts_before(self, day: date) -> bool:
        return self.start_date < day

    def ends_before(self, day: date) -> bool:
        return self.end_date < day

    @property
    def days(self) -> int:
        """Number of billable days between start and end date"""
        return (self.end_date - self.start_date).days

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"
