"""
Модель приложения: адресная книга и ее текущие отфильтрованные представления.
"""

from typing import Callable, List, Optional

from booking_manager.domain.address_book import AddressBook
from booking_manager.domain.booking import Booking
from booking_manager.domain.person import Person
from booking_manager.domain.value_objects import Phone

PersonPredicate = Callable[[Person], bool]
BookingPredicate = Callable[[Booking], bool]


def PREDICATE_SHOW_ALL_PERSONS(person: Person) -> bool:
    return True


def PREDICATE_SHOW_ALL_BOOKINGS(booking: Booking) -> bool:
    return True


class Model:
    """Хранит адресную книгу и активные фильтры списков людей и бронирований.

    Фильтры применяются при каждом чтении, поэтому представления всегда
    отражают текущее состояние книги.
    """

    def __init__(self, address_book: AddressBook) -> None:
        self._address_book = address_book
        self._person_predicate: PersonPredicate = PREDICATE_SHOW_ALL_PERSONS
        self._booking_predicate: BookingPredicate = PREDICATE_SHOW_ALL_BOOKINGS

    @property
    def address_book(self) -> AddressBook:
        return self._address_book

    # --- Люди ---

    def has_person(self, person: Person) -> bool:
        return self._address_book.has_person(person)

    def add_person(self, person: Person) -> None:
        self._address_book.add_person(person)
        self.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)

    def set_person(self, target: Person, edited: Person) -> None:
        self._address_book.set_person(target, edited)

    def find_person_by_phone(self, phone: Phone) -> Optional[Person]:
        return self._address_book.find_person_by_phone(phone)

    def get_filtered_person_list(self) -> List[Person]:
        return [p for p in self._address_book.persons if self._person_predicate(p)]

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._person_predicate = predicate

    @property
    def current_person_predicate(self) -> PersonPredicate:
        return self._person_predicate

    # --- Бронирования ---

    def get_filtered_booking_list(self) -> List[Booking]:
        return self._address_book.filter_bookings(self._booking_predicate)

    def update_filtered_booking_list(self, predicate: BookingPredicate) -> None:
        self._booking_predicate = predicate

    @property
    def current_booking_predicate(self) -> BookingPredicate:
        return self._booking_predicate

    def is_booking_list_filtered(self) -> bool:
        return self._booking_predicate is not PREDICATE_SHOW_ALL_BOOKINGS
