"""
Сообщения, видимые пользователю, и форматирование сущностей для вывода.
"""

from booking_manager.domain.booking import Booking
from booking_manager.domain.person import Person
from booking_manager.shared_kernel import format_booking_datetime


def format_person(person: Person) -> str:
    """Форматирует человека для вывода пользователю."""
    tags = ", ".join(sorted(tag.tag_name for tag in person.tags))
    return (
        f"{person.name}; Phone: {person.phone}; Email: {person.email}"
        f"; Address: {person.address}; Tags: {tags}"
        f"; Member: {'Yes' if person.is_member else 'No'}"
    )


def format_booking(booking: Booking) -> str:
    """Форматирует бронирование для вывода пользователю."""
    return (
        f"Booking ID: {booking.booking_id}"
        f"; Booking Date: {format_booking_datetime(booking.booking_datetime)}"
        f"; Booking Number: {booking.person.phone}"
        f"; Pax: {booking.pax}"
        f"; Remark: {booking.remarks}"
    )
