"""
Агрегат "Адресная книга".

AddressBook - корень агрегата: владеет людьми, бронированиями и генератором
ID бронирований. Все изменения, затрагивающие связь человек-бронирование,
проходят через него.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterable, List, Optional

from booking_manager.domain.booking import Booking
from booking_manager.domain.person import Person
from booking_manager.domain.value_objects import Phone, Tag
from booking_manager.shared_kernel import DuplicateBookingError, DuplicatePersonError

BookingPredicate = Callable[[Booking], bool]


class BookingIdGenerator:
    """Монотонный генератор ID бронирований."""

    def __init__(self, start: int = 0) -> None:
        self._next_id = start

    def next_id(self) -> int:
        booking_id = self._next_id
        self._next_id += 1
        return booking_id

    def peek(self) -> int:
        return self._next_id

    def restore_high_water_mark(self, max_id: int) -> None:
        """Сдвигает счетчик за максимальный восстановленный ID.

        Счетчик никогда не уменьшается.
        """
        self._next_id = max(self._next_id, max_id + 1)


class AddressBook:
    """Корень агрегата: люди и их бронирования."""

    def __init__(self, id_generator: Optional[BookingIdGenerator] = None) -> None:
        self._persons: List[Person] = []
        self._bookings: List[Booking] = []
        self._id_generator = id_generator or BookingIdGenerator()

    # --- Люди ---

    @property
    def persons(self) -> List[Person]:
        return list(self._persons)

    def has_person(self, person: Person) -> bool:
        return any(p.is_same_person(person) for p in self._persons)

    def add_person(self, person: Person) -> None:
        if self.has_person(person):
            raise DuplicatePersonError(
                f"Person with phone {person.phone} already exists"
            )
        self._persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Заменяет ``target`` на ``edited``, сохраняя позицию в списке."""
        index = self._index_of(target)
        if not target.is_same_person(edited) and self.has_person(edited):
            raise DuplicatePersonError(
                f"Person with phone {edited.phone} already exists"
            )
        self._persons[index] = edited
        if edited is target:
            return
        # Бронирования переходят к новому объекту вместе с обратными ссылками.
        for booking in self._bookings:
            if booking.person is target:
                booking.relink_person(edited)
                edited.add_booking_id(booking.booking_id)

    def find_person_by_phone(self, phone: Phone) -> Optional[Person]:
        for person in self._persons:
            if person.phone == phone:
                return person
        return None

    def _index_of(self, target: Person) -> int:
        for index, person in enumerate(self._persons):
            if person is target:
                return index
        raise KeyError(f"Person with phone {target.phone} not found")

    # --- Бронирования ---

    @property
    def bookings(self) -> List[Booking]:
        return list(self._bookings)

    @property
    def id_generator(self) -> BookingIdGenerator:
        return self._id_generator

    def create_booking(
        self,
        person: Person,
        booking_datetime: datetime,
        remarks: Optional[str] = "",
        pax: int = 1,
        tags: Iterable[Tag] = (),
    ) -> Booking:
        """Создает бронирование со следующим ID и регистрирует его."""
        booking = Booking.create(
            person=person,
            booking_datetime=booking_datetime,
            booking_id=self._id_generator.peek(),
            tags=tags,
            remarks=remarks,
            pax=pax,
        )
        self.add_booking(booking)
        return booking

    def add_booking(self, booking: Booking) -> None:
        """Единственная точка добавления бронирования.

        Обновляет обе стороны связи: ID попадает в обратную ссылку человека,
        бронирование - в список книги.
        """
        person = booking.person
        if person is None:
            raise ValueError(f"Booking {booking.booking_id} has no person")
        if not any(p is person for p in self._persons):
            raise ValueError(
                f"Person with phone {person.phone} is not in this address book"
            )
        if self.find_booking(booking.booking_id) is not None:
            raise DuplicateBookingError(booking.booking_id)

        person.add_booking_id(booking.booking_id)
        self._bookings.append(booking)
        self._id_generator.restore_high_water_mark(booking.booking_id)

    def find_booking(self, booking_id: int) -> Optional[Booking]:
        for booking in self._bookings:
            if booking.booking_id == booking_id:
                return booking
        return None

    def filter_bookings(self, predicate: BookingPredicate) -> List[Booking]:
        return [booking for booking in self._bookings if predicate(booking)]

    def restore_high_water_mark(self, max_id: int) -> None:
        self._id_generator.restore_high_water_mark(max_id)
