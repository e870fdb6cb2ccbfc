"""
Общее ядро (Shared Kernel) менеджера бронирований.

Содержит исключения и утилиты, используемые во всех слоях.
"""

from .domain import (
    DataLoadingException,
    # Исключения
    DomainException,
    DuplicateBookingError,
    DuplicatePersonError,
    IllegalValueException,
    # Утилиты
    format_booking_datetime,
    format_filter_date,
    now,
)

__all__ = [
    # Исключения
    "DomainException",
    "DuplicatePersonError",
    "DuplicateBookingError",
    "IllegalValueException",
    "DataLoadingException",
    # Утилиты
    "now",
    "format_booking_datetime",
    "format_filter_date",
]
