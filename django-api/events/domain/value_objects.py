"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self
from uuid import uuid4


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("EventId cannot be blank")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value)

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4().hex)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RegistrationId:
    """Unique identifier for a Registration."""

    value: str

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4().hex)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def of(cls, amount: int | str | Decimal) -> Self:
        return cls(amount=Decimal(amount))

    @property
    def is_free(self) -> bool:
        return self.amount == 0

    def times(self, quantity: int) -> "Money":
        return Money(amount=self.amount * quantity)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class TicketCount:
    """Non-negative integer representing a ticket inventory."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Ticket count cannot be negative")

    def covers(self, quantity: int) -> bool:
        return quantity <= self.value

    def minus(self, quantity: int) -> "TicketCount":
        if quantity < 1:
            raise ValueError("Ticket quantity must be at least 1")
        return TicketCount(value=self.value - quantity)
