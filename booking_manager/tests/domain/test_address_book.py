from datetime import datetime

import pytest

from booking_manager.domain.address_book import AddressBook, BookingIdGenerator
from booking_manager.domain.booking import Booking
from booking_manager.domain.person import Person
from booking_manager.domain.value_objects import BookingStatus, Phone
from booking_manager.shared_kernel import DuplicateBookingError, DuplicatePersonError

BOOKING_DATETIME = datetime(2030, 5, 1, 19, 30)


class TestBookingIdGenerator:
    def test_ids_increase(self):
        generator = BookingIdGenerator()
        assert [generator.next_id() for _ in range(3)] == [0, 1, 2]
        assert generator.peek() == 3

    def test_restore_high_water_mark(self):
        generator = BookingIdGenerator()
        generator.restore_high_water_mark(9)
        assert generator.next_id() == 10

    def test_restore_never_moves_back(self):
        generator = BookingIdGenerator(start=20)
        generator.restore_high_water_mark(5)
        assert generator.peek() == 20


class TestPersons:
    def test_add_and_find_by_phone(self, address_book: AddressBook, benson: Person):
        assert address_book.find_person_by_phone(Phone("98765432")) is benson
        assert address_book.find_person_by_phone(Phone("99999999")) is None

    def test_duplicate_phone_rejected(self, address_book: AddressBook):
        duplicate = Person(name="Someone Else", phone=Phone("94351253"))
        with pytest.raises(DuplicatePersonError):
            address_book.add_person(duplicate)

    def test_set_person_keeps_position(self, address_book: AddressBook, alice: Person):
        edited = Person(name="Alice Tan", phone=alice.phone)
        address_book.set_person(alice, edited)

        assert address_book.persons[0] is edited

    def test_set_person_carries_bookings(self, address_book: AddressBook, alice: Person):
        """Тест: бронирования переходят к отредактированному человеку."""
        booking = address_book.create_booking(alice, BOOKING_DATETIME)
        edited = Person(name="Alice New", phone=Phone("94351253"))

        address_book.set_person(alice, edited)

        owner = address_book.find_person_by_phone(Phone("94351253"))
        assert owner is edited
        assert owner.booking_ids == frozenset({booking.booking_id})
        assert booking.person is edited

    def test_set_person_with_new_phone_carries_bookings(
        self, address_book: AddressBook, alice: Person
    ):
        booking = address_book.create_booking(alice, BOOKING_DATETIME)
        edited = Person(name="Alice Pauline", phone=Phone("81111111"))

        address_book.set_person(alice, edited)

        assert booking.person is edited
        assert edited.has_booking(booking.booking_id)
        assert address_book.find_person_by_phone(Phone("94351253")) is None

    def test_persons_returns_copy(self, address_book: AddressBook):
        address_book.persons.clear()
        assert len(address_book.persons) == 2


class TestBookings:
    def test_create_booking_links_both_sides(self, address_book: AddressBook, alice: Person):
        """Тест: после добавления ID бронирования есть в обратной ссылке человека."""
        booking = address_book.create_booking(alice, BOOKING_DATETIME, "Dinner", 3)

        assert booking.person is alice
        assert alice.has_booking(booking.booking_id)
        assert address_book.bookings == [booking]

    def test_ids_unique_and_increasing(self, address_book: AddressBook, alice: Person, benson: Person):
        ids = [
            address_book.create_booking(person, BOOKING_DATETIME).booking_id
            for person in (alice, benson, alice, benson)
        ]

        assert ids == sorted(ids)
        assert len(set(ids)) == len(ids)

    def test_failed_create_does_not_consume_id(self, address_book: AddressBook, alice: Person):
        with pytest.raises(ValueError):
            address_book.create_booking(alice, BOOKING_DATETIME, pax=0)

        assert address_book.create_booking(alice, BOOKING_DATETIME).booking_id == 0
        assert len(address_book.bookings) == 1

    def test_add_restored_booking_advances_counter(self, address_book: AddressBook, benson: Person):
        restored = Booking.restore(
            15, BOOKING_DATETIME, BOOKING_DATETIME, [], BookingStatus.COMPLETED, "", 2
        )
        restored.attach_person(benson)
        address_book.add_booking(restored)

        fresh = address_book.create_booking(benson, BOOKING_DATETIME)
        assert fresh.booking_id == 16
        assert benson.booking_ids == frozenset({15, 16})

    def test_duplicate_booking_id_rejected(self, address_book: AddressBook, alice: Person):
        existing = address_book.create_booking(alice, BOOKING_DATETIME)
        clash = Booking.create(alice, BOOKING_DATETIME, booking_id=existing.booking_id)

        with pytest.raises(DuplicateBookingError):
            address_book.add_booking(clash)
        assert len(address_book.bookings) == 1

    def test_booking_without_person_rejected(self, address_book: AddressBook):
        orphan = Booking.restore(1, BOOKING_DATETIME, BOOKING_DATETIME, [], BookingStatus.UPCOMING, "", 1)
        with pytest.raises(ValueError, match="has no person"):
            address_book.add_booking(orphan)

    def test_booking_for_unknown_person_rejected(self, address_book: AddressBook):
        stranger = Person(name="Stranger", phone=Phone("11111111"))
        booking = Booking.create(stranger, BOOKING_DATETIME, booking_id=0)

        with pytest.raises(ValueError, match="not in this address book"):
            address_book.add_booking(booking)
        assert not stranger.has_booking(0)

    def test_filter_bookings_preserves_order(self, address_book: AddressBook, alice: Person, benson: Person):
        first = address_book.create_booking(alice, BOOKING_DATETIME, pax=2)
        address_book.create_booking(benson, BOOKING_DATETIME, pax=5)
        third = address_book.create_booking(alice, BOOKING_DATETIME, pax=3)

        result = address_book.filter_bookings(lambda b: b.person is alice)

        assert result == [first, third]
        assert len(address_book.bookings) == 3

    def test_find_booking(self, address_book: AddressBook, alice: Person):
        booking = address_book.create_booking(alice, BOOKING_DATETIME)
        assert address_book.find_booking(booking.booking_id) is booking
        assert address_book.find_booking(999) is None
