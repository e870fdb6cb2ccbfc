"""
JSON-представление адресной книги.

Модели pydantic повторяют формат файла данных (camelCase) и преобразуются
в доменные объекты и обратно.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from booking_manager.core.logging import get_logger
from booking_manager.domain.address_book import AddressBook
from booking_manager.domain.booking import Booking
from booking_manager.domain.person import Person
from booking_manager.domain.value_objects import BookingStatus, Phone, Tag
from booking_manager.shared_kernel import DomainException, IllegalValueException

logger = get_logger(__name__)

MISSING_FIELD_MESSAGE_FORMAT = "%s's %s field is missing!"


class JsonAdaptedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class JsonAdaptedTag(JsonAdaptedModel):
    """JSON-представление тега."""

    tag_name: str = Field(alias="tagName")

    @classmethod
    def from_model(cls, tag: Tag) -> JsonAdaptedTag:
        return cls(tag_name=tag.tag_name)

    def to_model_type(self) -> Tag:
        try:
            return Tag(self.tag_name)
        except ValueError as e:
            raise IllegalValueException(str(e)) from e


class JsonAdaptedPerson(JsonAdaptedModel):
    """JSON-представление человека."""

    name: Optional[str] = None
    phone: Optional[str] = None
    email: str = ""
    address: str = ""
    tags: List[JsonAdaptedTag] = Field(default_factory=list)
    member: bool = False
    booking_ids: List[int] = Field(default_factory=list, alias="bookingIds")

    @classmethod
    def from_model(cls, person: Person) -> JsonAdaptedPerson:
        return cls(
            name=person.name,
            phone=str(person.phone),
            email=person.email,
            address=person.address,
            tags=[JsonAdaptedTag.from_model(tag) for tag in sorted(
                person.tags, key=lambda t: t.tag_name
            )],
            member=person.is_member,
            booking_ids=sorted(person.booking_ids),
        )

    def to_model_type(self) -> Person:
        """Создает человека без обратных ссылок: их восстанавливает AddressBook."""
        if self.name is None:
            raise IllegalValueException(MISSING_FIELD_MESSAGE_FORMAT % ("Person", "name"))
        if self.phone is None:
            raise IllegalValueException(MISSING_FIELD_MESSAGE_FORMAT % ("Person", "phone"))
        try:
            return Person(
                name=self.name,
                phone=Phone(self.phone),
                email=self.email,
                address=self.address,
                tags=frozenset(tag.to_model_type() for tag in self.tags),
                is_member=self.member,
            )
        except ValueError as e:
            raise IllegalValueException(str(e)) from e


class JsonAdaptedBooking(JsonAdaptedModel):
    """JSON-представление бронирования. Все поля обязательны."""

    booking_id: Optional[int] = Field(None, alias="bookingId")
    booking_date: Optional[str] = Field(None, alias="bookingDate")
    booking_made_date: Optional[str] = Field(None, alias="bookingMadeDate")
    tags: Optional[List[JsonAdaptedTag]] = None
    status: Optional[str] = None
    remarks: Optional[str] = None
    pax: Optional[int] = None

    @classmethod
    def from_model(cls, booking: Booking) -> JsonAdaptedBooking:
        return cls(
            booking_id=booking.booking_id,
            booking_date=booking.booking_datetime.isoformat(),
            booking_made_date=booking.booking_made_datetime.isoformat(),
            tags=[JsonAdaptedTag.from_model(tag) for tag in sorted(
                booking.tags, key=lambda t: t.tag_name
            )],
            status=booking.status.name,
            remarks=booking.remarks,
            pax=booking.pax,
        )

    def to_model_type(self) -> Booking:
        """Восстанавливает бронирование с исходным ID.

        Raises:
            IllegalValueException: если поле отсутствует или некорректно.
        """
        for field_name in (
            "booking_id",
            "booking_date",
            "booking_made_date",
            "tags",
            "status",
            "remarks",
            "pax",
        ):
            if getattr(self, field_name) is None:
                alias = type(self).model_fields[field_name].alias or field_name
                raise IllegalValueException(
                    MISSING_FIELD_MESSAGE_FORMAT % ("Booking", alias)
                )

        try:
            booking_datetime = datetime.fromisoformat(self.booking_date)
            booking_made_datetime = datetime.fromisoformat(self.booking_made_date)
            status = BookingStatus.from_string(self.status)
            return Booking.restore(
                booking_id=self.booking_id,
                booking_datetime=booking_datetime,
                booking_made_datetime=booking_made_datetime,
                tags=[tag.to_model_type() for tag in self.tags],
                status=status,
                remarks=self.remarks,
                pax=self.pax,
            )
        except ValueError as e:
            raise IllegalValueException(
                f"Invalid booking {self.booking_id}: {e}"
            ) from e


class JsonSerializableAddressBook(JsonAdaptedModel):
    """Корневой объект файла данных."""

    persons: List[JsonAdaptedPerson] = Field(default_factory=list)
    bookings: List[JsonAdaptedBooking] = Field(default_factory=list)

    @classmethod
    def from_model(cls, address_book: AddressBook) -> JsonSerializableAddressBook:
        return cls(
            persons=[JsonAdaptedPerson.from_model(p) for p in address_book.persons],
            bookings=[JsonAdaptedBooking.from_model(b) for b in address_book.bookings],
        )

    def to_model_type(self) -> AddressBook:
        """Собирает агрегат и восстанавливает связи человек-бронирование.

        После загрузки счетчик ID сдвигается за максимальный ID.
        """
        address_book = AddressBook()
        owners: Dict[int, Person] = {}

        for adapted_person in self.persons:
            person = adapted_person.to_model_type()
            if address_book.has_person(person):
                raise IllegalValueException(
                    f"Persons list contains duplicate phone {person.phone}"
                )
            address_book.add_person(person)
            for booking_id in adapted_person.booking_ids:
                if booking_id in owners:
                    raise IllegalValueException(
                        f"Booking {booking_id} is claimed by more than one person"
                    )
                owners[booking_id] = person

        seen_ids = set()
        for adapted_booking in self.bookings:
            booking = adapted_booking.to_model_type()
            if booking.booking_id in seen_ids:
                raise IllegalValueException(
                    f"Bookings list contains duplicate ID {booking.booking_id}"
                )
            seen_ids.add(booking.booking_id)
            owner = owners.pop(booking.booking_id, None)
            if owner is None:
                raise IllegalValueException(
                    f"Booking {booking.booking_id} does not belong to any person"
                )
            booking.attach_person(owner)
            try:
                address_book.add_booking(booking)
            except DomainException as e:
                raise IllegalValueException(str(e)) from e

        if owners:
            logger.warning("dangling_booking_ids_dropped", booking_ids=sorted(owners))

        if address_book.bookings:
            address_book.restore_high_water_mark(
                max(b.booking_id for b in address_book.bookings)
            )
        return address_book
