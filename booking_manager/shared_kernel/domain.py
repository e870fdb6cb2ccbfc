"""
Основные исключения и утилиты общего ядра.
"""

from datetime import date, datetime


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class DuplicatePersonError(DomainException):
    """Исключение: человек с таким телефоном уже есть в книге."""

    pass


class DuplicateBookingError(DomainException):
    """Исключение: бронирование с таким ID уже зарегистрировано."""

    def __init__(self, booking_id: int):
        super().__init__(f"Booking with ID {booking_id} already exists")
        self.booking_id = booking_id


class IllegalValueException(DomainException):
    """Исключение при нарушении ограничений сохраненных данных."""

    pass


class DataLoadingException(DomainException):
    """Исключение при чтении файла данных."""

    pass


# Общие утилиты
def now() -> datetime:
    """Возвращает текущие локальные дату и время."""
    return datetime.now()


def format_booking_datetime(value: datetime) -> str:
    """Форматирует дату и время в виде ``2025-03-30 6:00 PM``."""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{value:%Y-%m-%d} {hour}:{value:%M} {meridiem}"


def format_filter_date(value: date) -> str:
    """Форматирует дату в виде ``25 Dec 2023``."""
    return value.strftime("%d %b %Y")
