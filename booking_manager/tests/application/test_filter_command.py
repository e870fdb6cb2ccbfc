from datetime import date, datetime

import pytest

from booking_manager.application.commands import CommandException, FilterCommand
from booking_manager.application.model import Model
from booking_manager.domain.person import Person
from booking_manager.domain.value_objects import BookingStatus, Phone

CHRISTMAS_EVE = datetime(2030, 12, 24, 19, 0)
CHRISTMAS = datetime(2030, 12, 25, 12, 30)
CHRISTMAS_NIGHT = datetime(2030, 12, 25, 21, 15)


@pytest.fixture
def bookings(model: Model, alice: Person, benson: Person):
    book = model.address_book
    first = book.create_booking(alice, CHRISTMAS_EVE, "", 2)
    second = book.create_booking(benson, CHRISTMAS, "", 4)
    third = book.create_booking(alice, CHRISTMAS_NIGHT, "", 6)
    third.set_status(BookingStatus.COMPLETED)
    return first, second, third


def test_filter_by_phone(model: Model, bookings):
    first, _, third = bookings

    result = FilterCommand(phone=Phone("94351253")).execute(model)

    assert model.get_filtered_booking_list() == [first, third]
    assert result.feedback_to_user == "Here are the bookings for phone number 94351253:"


def test_filter_by_date_ignores_time(model: Model, bookings):
    _, second, third = bookings

    result = FilterCommand(booking_date=date(2030, 12, 25)).execute(model)

    assert model.get_filtered_booking_list() == [second, third]
    assert result.feedback_to_user == "Here are the bookings on 25 Dec 2030:"


def test_filter_accepts_datetime_as_date(model: Model, bookings):
    _, second, third = bookings

    FilterCommand(booking_date=datetime(2030, 12, 25, 8, 0)).execute(model)

    assert model.get_filtered_booking_list() == [second, third]


def test_filter_by_status(model: Model, bookings):
    first, second, _ = bookings

    result = FilterCommand(status=BookingStatus.UPCOMING).execute(model)

    assert model.get_filtered_booking_list() == [first, second]
    assert result.feedback_to_user == "Here are the bookings with status UPCOMING:"


def test_filter_by_phone_and_status(model: Model, bookings):
    """Тест: фильтры объединяются через И."""
    first, _, _ = bookings

    result = FilterCommand(
        phone=Phone("94351253"), status=BookingStatus.UPCOMING
    ).execute(model)

    assert model.get_filtered_booking_list() == [first]
    assert result.feedback_to_user == (
        "Here are the bookings for phone number 94351253 with status UPCOMING:"
    )


def test_filter_all_three_description_order(model: Model, bookings):
    _, _, third = bookings

    result = FilterCommand(
        phone=Phone("94351253"),
        booking_date=date(2030, 12, 25),
        status=BookingStatus.COMPLETED,
    ).execute(model)

    assert model.get_filtered_booking_list() == [third]
    assert result.feedback_to_user == (
        "Here are the bookings for phone number 94351253 on 25 Dec 2030"
        " with status COMPLETED:"
    )


def test_filter_no_results(model: Model, bookings):
    """Тест: пустой результат - это сообщение, а не исключение."""
    result = FilterCommand(
        phone=Phone("98765432"), status=BookingStatus.CANCELLED
    ).execute(model)

    assert model.get_filtered_booking_list() == []
    assert result.feedback_to_user == (
        "No bookings found for phone number 98765432 with status CANCELLED."
    )


def test_filter_unknown_phone_fails_before_filtering(model: Model, bookings):
    model.update_filtered_booking_list(lambda b: b.pax == 2)
    previous = model.current_booking_predicate

    with pytest.raises(
        CommandException, match=r"^No person found with phone number: 99999999$"
    ):
        FilterCommand(phone=Phone("99999999"), status=BookingStatus.UPCOMING).execute(model)

    assert model.current_booking_predicate is previous


def test_filter_without_arguments_rejected(model: Model):
    with pytest.raises(CommandException, match=FilterCommand.MESSAGE_NO_FILTER):
        FilterCommand().execute(model)


def test_filter_sees_later_status_changes(model: Model, bookings):
    first, second, _ = bookings
    FilterCommand(status=BookingStatus.UPCOMING).execute(model)

    second.set_status(BookingStatus.CANCELLED)

    assert model.get_filtered_booking_list() == [first]


def test_filter_does_not_mutate_bookings(model: Model, bookings):
    FilterCommand(status=BookingStatus.CANCELLED).execute(model)
    assert model.address_book.bookings == list(bookings)


def test_equals():
    assert FilterCommand(phone=Phone("123")) == FilterCommand(phone=Phone("123"))
    assert FilterCommand(status=BookingStatus.ONGOING) != FilterCommand(status=BookingStatus.UPCOMING)
    assert FilterCommand(booking_date=datetime(2030, 1, 1, 9, 0)) == FilterCommand(
        booking_date=date(2030, 1, 1)
    )
