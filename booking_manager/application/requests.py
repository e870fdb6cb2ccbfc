"""
DTO входящих данных.

Граница между внешним разборщиком команд и прикладным слоем: pydantic
проверяет типы и ограничения, после чего DTO превращается в команду.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from booking_manager.application.commands import (
    AddBookingCommand,
    AddPersonCommand,
    EditBookingCommand,
    FilterCommand,
    SetBookingStatusCommand,
)
from booking_manager.domain.person import Person
from booking_manager.domain.value_objects import BookingEdit, BookingStatus, Phone, Tag


def _parse_status(value):
    if value is None or isinstance(value, BookingStatus):
        return value
    return BookingStatus.from_string(value)


MESSAGE_AWARE_DATETIME = (
    "Booking date and time must be a local date-time without a timezone offset"
)


def _require_local_datetime(value):
    # Время бронирования хранится как локальное, без смещения.
    if value is not None and value.tzinfo is not None:
        raise ValueError(MESSAGE_AWARE_DATETIME)
    return value


class AddPersonRequest(BaseModel):
    """Запрос на добавление человека."""

    name: str = Field(..., min_length=1)
    phone: str = Field(..., pattern=r"^\d{3,}$")
    email: str = ""
    address: str = ""
    tags: List[str] = Field(default_factory=list)
    is_member: bool = False

    @field_validator("tags")
    @classmethod
    def tags_are_alphanumeric(cls, v):
        for tag in v:
            Tag(tag)
        return v

    def to_command(self) -> AddPersonCommand:
        return AddPersonCommand(
            Person(
                name=self.name,
                phone=Phone(self.phone),
                email=self.email,
                address=self.address,
                tags=frozenset(Tag(tag) for tag in self.tags),
                is_member=self.is_member,
            )
        )


class AddBookingRequest(BaseModel):
    """Запрос на создание бронирования."""

    phone: str = Field(..., pattern=r"^\d{3,}$")
    booking_datetime: datetime
    remark: Optional[str] = None
    pax: int = Field(..., gt=0)

    @field_validator("booking_datetime")
    @classmethod
    def booking_datetime_is_local(cls, v):
        return _require_local_datetime(v)

    def to_command(self) -> AddBookingCommand:
        return AddBookingCommand(
            Phone(self.phone), self.booking_datetime, self.remark, self.pax
        )


class EditBookingRequest(BaseModel):
    """Запрос на изменение бронирования."""

    booking_id: int = Field(..., ge=0)
    booking_datetime: Optional[datetime] = None
    pax: Optional[int] = Field(None, gt=0)
    remark: Optional[str] = None

    @field_validator("booking_datetime")
    @classmethod
    def booking_datetime_is_local(cls, v):
        return _require_local_datetime(v)

    @model_validator(mode="after")
    def at_least_one_field(self):
        if self.booking_datetime is None and self.pax is None and self.remark is None:
            raise ValueError(EditBookingCommand.MESSAGE_NOT_EDITED)
        return self

    def to_command(self) -> EditBookingCommand:
        edit = BookingEdit(
            booking_datetime=self.booking_datetime,
            pax=self.pax,
            remarks=self.remark,
        )
        return EditBookingCommand(self.booking_id, edit)


class FilterBookingsRequest(BaseModel):
    """Запрос на фильтрацию бронирований."""

    phone: Optional[str] = Field(None, pattern=r"^\d{3,}$")
    booking_date: Optional[date] = None
    status: Optional[BookingStatus] = None

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v):
        return _parse_status(v)

    @model_validator(mode="after")
    def at_least_one_filter(self):
        if self.phone is None and self.booking_date is None and self.status is None:
            raise ValueError(FilterCommand.MESSAGE_NO_FILTER)
        return self

    def to_command(self) -> FilterCommand:
        phone = Phone(self.phone) if self.phone is not None else None
        return FilterCommand(phone, self.booking_date, self.status)


class SetBookingStatusRequest(BaseModel):
    """Запрос на смену статуса бронирования."""

    booking_id: int = Field(..., ge=0)
    status: BookingStatus

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v):
        return _parse_status(v)

    def to_command(self) -> SetBookingStatusCommand:
        return SetBookingStatusCommand(self.booking_id, self.status)
