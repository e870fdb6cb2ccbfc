"""
Команды приложения.

Каждая команда получает уже разобранные и проверенные аргументы, выполняется
над моделью и возвращает текст для пользователя.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from booking_manager.application.messages import format_booking, format_person
from booking_manager.application.model import (
    PREDICATE_SHOW_ALL_BOOKINGS,
    PREDICATE_SHOW_ALL_PERSONS,
    Model,
)
from booking_manager.core.logging import get_logger
from booking_manager.domain.booking import Booking
from booking_manager.domain.person import Person
from booking_manager.domain.value_objects import BookingEdit, BookingStatus, Phone
from booking_manager.shared_kernel import format_filter_date, now

logger = get_logger(__name__)


class CommandException(Exception):
    """Ошибка выполнения команды, показываемая пользователю как есть."""

    pass


@dataclass(frozen=True)
class CommandResult:
    """Результат выполнения команды."""

    feedback_to_user: str


class Command(ABC):
    """Базовый класс команд."""

    COMMAND_WORD: str = ""

    @abstractmethod
    def execute(self, model: Model) -> CommandResult:
        raise NotImplementedError


def _find_in_filtered_list(model: Model, booking_id: int) -> Optional[Booking]:
    """Ищет бронирование только среди видимых в текущем фильтре."""
    for booking in model.get_filtered_booking_list():
        if booking.booking_id == booking_id:
            return booking
    return None


class AddPersonCommand(Command):
    """Добавляет человека в адресную книгу."""

    COMMAND_WORD = "add"

    MESSAGE_SUCCESS = "New person added: %s"
    MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book"

    def __init__(self, person: Person):
        if person is None:
            raise ValueError("person must not be None")
        self.person = person

    def execute(self, model: Model) -> CommandResult:
        if model.has_person(self.person):
            raise CommandException(self.MESSAGE_DUPLICATE_PERSON)

        model.add_person(self.person)
        logger.info("person_added", phone=str(self.person.phone))
        return CommandResult(self.MESSAGE_SUCCESS % format_person(self.person))

    def __eq__(self, other):
        if not isinstance(other, AddPersonCommand):
            return NotImplemented
        return self.person == other.person


class AddBookingCommand(Command):
    """Добавляет бронирование для человека с указанным телефоном."""

    COMMAND_WORD = "book"

    MESSAGE_SUCCESS = "New booking added: \n%s"
    MESSAGE_INVALID_PERSON = "No person with the given phone number exists"
    MESSAGE_PAST_BOOKING_WARNING = "Warning: You are adding a booking for a past date!"

    def __init__(
        self,
        phone: Phone,
        booking_datetime: datetime,
        remark: Optional[str],
        pax: int,
    ):
        # Бронирование создается только в execute, после проверки телефона.
        if phone is None or booking_datetime is None:
            raise ValueError("phone and booking_datetime must not be None")
        if booking_datetime.tzinfo is not None:
            raise ValueError("booking_datetime must be a local date-time")
        self.phone = phone
        self.booking_datetime = booking_datetime
        self.remark = remark
        self.pax = pax

    def execute(self, model: Model) -> CommandResult:
        address_book = model.address_book

        booking_maker = None
        for person in address_book.persons:
            if person.phone == self.phone:
                booking_maker = person
        if booking_maker is None:
            raise CommandException(self.MESSAGE_INVALID_PERSON)

        is_past = self.booking_datetime < now()
        booking = address_book.create_booking(
            person=booking_maker,
            booking_datetime=self.booking_datetime,
            remarks=self.remark,
            pax=self.pax,
        )

        model.set_person(booking_maker, booking_maker)
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        logger.info(
            "booking_added", booking_id=booking.booking_id, phone=str(self.phone)
        )

        message = self.MESSAGE_SUCCESS % format_booking(booking)
        if is_past:
            return CommandResult(self.MESSAGE_PAST_BOOKING_WARNING + "\n" + message)
        return CommandResult(message)

    def __eq__(self, other):
        if not isinstance(other, AddBookingCommand):
            return NotImplemented
        return (
            self.phone == other.phone
            and self.booking_datetime == other.booking_datetime
            and self.remark == other.remark
            and self.pax == other.pax
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(phone={self.phone}, "
            f"booking_datetime={self.booking_datetime.isoformat()})"
        )


class EditBookingCommand(Command):
    """Изменяет поля бронирования, видимого в текущем списке."""

    COMMAND_WORD = "bedit"

    MESSAGE_EDIT_BOOKING_SUCCESS = "Edited Booking: %s"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MESSAGE_BOOKING_NOT_FOUND = "No booking with ID %d was found."
    MESSAGE_PAST_BOOKING_WARNING = "Warning: Editing a booking to a past date.\n"

    def __init__(self, booking_id: int, edit: BookingEdit):
        if edit is None:
            raise ValueError("edit must not be None")
        self.booking_id = booking_id
        self.edit = edit

    def execute(self, model: Model) -> CommandResult:
        if not self.edit.is_any_field_edited():
            raise CommandException(self.MESSAGE_NOT_EDITED)

        # Скрытое фильтром бронирование не редактируется.
        booking = _find_in_filtered_list(model, self.booking_id)
        if booking is None:
            raise CommandException(self.MESSAGE_BOOKING_NOT_FOUND % self.booking_id)

        booking.apply_edit(self.edit)
        booking_maker = booking.person

        model.update_filtered_booking_list(PREDICATE_SHOW_ALL_BOOKINGS)
        model.set_person(booking_maker, booking_maker)
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        logger.info("booking_edited", booking_id=self.booking_id)

        warning = ""
        new_datetime = self.edit.booking_datetime
        if new_datetime is not None and new_datetime < now():
            warning = self.MESSAGE_PAST_BOOKING_WARNING
        return CommandResult(
            warning + self.MESSAGE_EDIT_BOOKING_SUCCESS % format_booking(booking)
        )

    def __eq__(self, other):
        if not isinstance(other, EditBookingCommand):
            return NotImplemented
        return self.booking_id == other.booking_id and self.edit == other.edit


class SetBookingStatusCommand(Command):
    """Меняет статус бронирования, видимого в текущем списке."""

    COMMAND_WORD = "bstatus"

    MESSAGE_SUCCESS = "Booking %d status set to %s"

    def __init__(self, booking_id: int, status: BookingStatus):
        if status is None:
            raise ValueError("status must not be None")
        self.booking_id = booking_id
        self.status = status

    def execute(self, model: Model) -> CommandResult:
        booking = _find_in_filtered_list(model, self.booking_id)
        if booking is None:
            raise CommandException(
                EditBookingCommand.MESSAGE_BOOKING_NOT_FOUND % self.booking_id
            )

        booking.set_status(self.status)
        model.update_filtered_booking_list(PREDICATE_SHOW_ALL_BOOKINGS)
        logger.info(
            "booking_status_set", booking_id=self.booking_id, status=self.status.name
        )
        return CommandResult(self.MESSAGE_SUCCESS % (self.booking_id, self.status))

    def __eq__(self, other):
        if not isinstance(other, SetBookingStatusCommand):
            return NotImplemented
        return self.booking_id == other.booking_id and self.status == other.status


class ListBookingsCommand(Command):
    """Сбрасывает фильтр бронирований."""

    COMMAND_WORD = "blist"

    MESSAGE_SUCCESS = "Listed all bookings"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_booking_list(PREDICATE_SHOW_ALL_BOOKINGS)
        return CommandResult(self.MESSAGE_SUCCESS)

    def __eq__(self, other):
        if not isinstance(other, ListBookingsCommand):
            return NotImplemented
        return True


class FilterCommand(Command):
    """Фильтрует бронирования по телефону, дате и/или статусу."""

    COMMAND_WORD = "filter"

    MESSAGE_PERSON_NOT_FOUND = "No person found with phone number: %s"
    MESSAGE_NO_BOOKINGS = "No bookings found%s."
    MESSAGE_SUCCESS = "Here are the bookings%s:"
    MESSAGE_NO_FILTER = "At least one filter must be provided."

    def __init__(
        self,
        phone: Optional[Phone] = None,
        booking_date: Optional[date] = None,
        status: Optional[BookingStatus] = None,
    ):
        if isinstance(booking_date, datetime):
            booking_date = booking_date.date()
        self.phone = phone
        self.booking_date = booking_date
        self.status = status

    def execute(self, model: Model) -> CommandResult:
        if self.phone is None and self.booking_date is None and self.status is None:
            raise CommandException(self.MESSAGE_NO_FILTER)

        predicates = []
        description = ""

        if self.phone is not None:
            person = model.find_person_by_phone(self.phone)
            if person is None:
                raise CommandException(self.MESSAGE_PERSON_NOT_FOUND % self.phone)
            predicates.append(lambda booking: person.has_booking(booking.booking_id))
            description += f" for phone number {self.phone}"

        if self.booking_date is not None:
            booking_date = self.booking_date
            predicates.append(
                lambda booking: booking.booking_datetime.date() == booking_date
            )
            description += f" on {format_filter_date(booking_date)}"

        if self.status is not None:
            status = self.status
            predicates.append(lambda booking: booking.status == status)
            description += f" with status {status}"

        def predicate(booking: Booking) -> bool:
            return all(p(booking) for p in predicates)

        model.update_filtered_booking_list(predicate)

        matched = len(model.get_filtered_booking_list())
        logger.info("bookings_filtered", filters=description.strip(), matched=matched)
        if matched == 0:
            return CommandResult(self.MESSAGE_NO_BOOKINGS % description)
        return CommandResult(self.MESSAGE_SUCCESS % description)

    def __eq__(self, other):
        if not isinstance(other, FilterCommand):
            return NotImplemented
        return (
            self.phone == other.phone
            and self.booking_date == other.booking_date
            and self.status == other.status
        )
