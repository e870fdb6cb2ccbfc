from datetime import datetime

from booking_manager.application.messages import format_booking, format_person
from booking_manager.domain.address_book import AddressBook
from booking_manager.domain.person import Person


def test_format_person(alice: Person, benson: Person):
    assert format_person(alice) == (
        "Alice Pauline; Phone: 94351253; Email: alice@example.com"
        "; Address: 123, Jurong West Ave 6, #08-111; Tags: friends; Member: No"
    )
    assert format_person(benson).endswith("; Tags: ; Member: Yes")


def test_format_booking(address_book: AddressBook, benson: Person):
    booking = address_book.create_booking(benson, datetime(2030, 1, 5, 9, 5), "Allergic to nuts", 4)

    assert format_booking(booking) == (
        "Booking ID: 0; Booking Date: 2030-01-05 9:05 AM; Booking Number: 98765432"
        "; Pax: 4; Remark: Allergic to nuts"
    )


def test_format_booking_noon_and_midnight(address_book: AddressBook, alice: Person):
    noon = address_book.create_booking(alice, datetime(2030, 1, 5, 12, 0))
    midnight = address_book.create_booking(alice, datetime(2030, 1, 5, 0, 30))

    assert "Booking Date: 2030-01-05 12:00 PM;" in format_booking(noon)
    assert "Booking Date: 2030-01-05 12:30 AM;" in format_booking(midnight)
