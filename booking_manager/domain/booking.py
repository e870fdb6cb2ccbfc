"""
Сущность "Бронирование".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, Iterable, Optional

from booking_manager.domain.person import Person
from booking_manager.domain.value_objects import BookingEdit, BookingStatus, Tag
from booking_manager.shared_kernel import format_booking_datetime, now


@dataclass(eq=False)
class Booking:
    """Бронирование, сделанное одним человеком.

    ID назначается агрегатом AddressBook и не меняется. Человек не
    принадлежит бронированию: это ссылка, устанавливаемая один раз.
    """

    booking_id: int
    booking_datetime: datetime
    booking_made_datetime: datetime
    tags: FrozenSet[Tag] = field(default_factory=frozenset)
    status: BookingStatus = BookingStatus.UPCOMING
    remarks: str = ""
    pax: int = 1
    _person: Optional[Person] = field(default=None, repr=False)

    def __post_init__(self):
        if self.booking_datetime is None:
            raise ValueError("Booking date and time must be provided.")
        if self.booking_datetime.tzinfo is not None:
            raise ValueError("Booking date and time must not carry a timezone offset.")
        if self.pax <= 0:
            raise ValueError("Pax must be a positive integer.")
        self.tags = frozenset(self.tags)
        self.remarks = self.remarks or ""

    @classmethod
    def create(
        cls,
        person: Person,
        booking_datetime: datetime,
        booking_id: int,
        tags: Iterable[Tag] = (),
        remarks: Optional[str] = "",
        pax: int = 1,
    ) -> Booking:
        """Создает новое бронирование со статусом UPCOMING."""
        if person is None:
            raise ValueError("Booking person must be provided.")
        return cls(
            booking_id=booking_id,
            booking_datetime=booking_datetime,
            booking_made_datetime=now(),
            tags=frozenset(tags),
            remarks=remarks or "",
            pax=pax,
            _person=person,
        )

    @classmethod
    def restore(
        cls,
        booking_id: int,
        booking_datetime: datetime,
        booking_made_datetime: datetime,
        tags: Iterable[Tag],
        status: BookingStatus,
        remarks: str,
        pax: int,
    ) -> Booking:
        """Восстанавливает сохраненное бронирование, не расходуя новый ID."""
        return cls(
            booking_id=booking_id,
            booking_datetime=booking_datetime,
            booking_made_datetime=booking_made_datetime,
            tags=frozenset(tags),
            status=status,
            remarks=remarks,
            pax=pax,
        )

    @property
    def person(self) -> Optional[Person]:
        return self._person

    def attach_person(self, person: Person) -> None:
        """Связывает восстановленное бронирование с человеком."""
        if self._person is not None and not self._person.is_same_person(person):
            raise ValueError(
                f"Booking {self.booking_id} already belongs to {self._person.phone}"
            )
        self._person = person

    def relink_person(self, person: Person) -> None:
        """Переносит бронирование на отредактированного человека.

        Вызывается только из AddressBook.set_person.
        """
        self._person = person

    def apply_edit(self, edit: BookingEdit) -> None:
        """Применяет только заданные поля изменения."""
        if edit.booking_datetime is not None:
            self.booking_datetime = edit.booking_datetime
        if edit.pax is not None:
            self.pax = edit.pax
        if edit.remarks is not None:
            self.remarks = edit.remarks

    def set_status(self, status: BookingStatus) -> None:
        self.status = status

    def __str__(self) -> str:
        tags = (
            ", ".join(sorted(str(tag) for tag in self.tags))
            if self.tags
            else "No Remarks"
        )
        return (
            f"Booking ID: {self.booking_id}"
            f" Booking Date: {format_booking_datetime(self.booking_datetime)}"
            f" Booked On: {format_booking_datetime(self.booking_made_datetime)}"
            f" Booked By: {self._person}"
            f" Tags: {tags}"
            f" Status: {self.status}"
            f" Remarks: {self.remarks}"
            f" Pax: {self.pax}"
        )

    def __hash__(self):
        return hash(self.booking_id)

    def __eq__(self, other):
        if not isinstance(other, Booking):
            return NotImplemented
        return self.booking_id == other.booking_id
