"""
Объекты-значения (Value Objects) менеджера бронирований.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Phone:
    """Номер телефона. Уникально идентифицирует человека в книге."""

    value: str

    def __post_init__(self):
        if not re.fullmatch(r"\d{3,}", self.value or ""):
            raise ValueError(
                "Phone numbers should only contain numbers, "
                "and it should be at least 3 digits long"
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tag:
    """Метка (тег) для человека или бронирования."""

    tag_name: str

    def __post_init__(self):
        if not re.fullmatch(r"[A-Za-z0-9]+", self.tag_name or ""):
            raise ValueError("Tags names should be alphanumeric")

    def __str__(self) -> str:
        return f"[{self.tag_name}]"


class BookingStatus(Enum):
    """Статус жизненного цикла бронирования."""

    UPCOMING = "UPCOMING"
    CANCELLED = "CANCELLED"
    ONGOING = "ONGOING"
    COMPLETED = "COMPLETED"

    @classmethod
    def from_string(cls, text: str) -> BookingStatus:
        """Разбирает имя статуса; регистр и пробелы по краям не важны."""
        normalized = (text or "").strip().upper()
        try:
            return cls[normalized]
        except KeyError:
            allowed = ", ".join(member.name for member in cls)
            raise ValueError(
                f"Invalid booking status: {text!r}. Allowed values: {allowed}"
            ) from None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class BookingEdit:
    """Частичное изменение бронирования.

    Поле со значением ``None`` не изменяется. Пустая строка в ``remarks``
    означает очистку примечания.
    """

    booking_datetime: Optional[datetime] = None
    pax: Optional[int] = None
    remarks: Optional[str] = None

    def __post_init__(self):
        if self.pax is not None and self.pax <= 0:
            raise ValueError("Pax must be a positive integer.")
        if self.booking_datetime is not None and self.booking_datetime.tzinfo is not None:
            raise ValueError("Booking date and time must not carry a timezone offset.")

    def is_any_field_edited(self) -> bool:
        return any(
            value is not None
            for value in (self.booking_datetime, self.pax, self.remarks)
        )
