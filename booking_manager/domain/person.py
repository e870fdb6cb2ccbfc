"""
Сущность "Человек", на которую ссылаются бронирования.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Set

from booking_manager.domain.value_objects import Phone, Tag


@dataclass(eq=False)
class Person:
    """Человек из адресной книги.

    Идентичность определяется телефоном. ``booking_ids`` - слабая обратная
    ссылка на бронирования: человек ими не владеет.
    """

    name: str
    phone: Phone
    email: str = ""
    address: str = ""
    tags: FrozenSet[Tag] = field(default_factory=frozenset)
    is_member: bool = False
    _booking_ids: Set[int] = field(default_factory=set, init=False, repr=False)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Names should not be blank")
        self.tags = frozenset(self.tags)

    @property
    def booking_ids(self) -> FrozenSet[int]:
        return frozenset(self._booking_ids)

    def has_booking(self, booking_id: int) -> bool:
        return booking_id in self._booking_ids

    def add_booking_id(self, booking_id: int) -> None:
        """Регистрирует ID бронирования. Вызывается только из AddressBook."""
        self._booking_ids.add(booking_id)

    def is_same_person(self, other: Person) -> bool:
        return other is not None and self.phone == other.phone

    def __str__(self) -> str:
        return f"{self.name}; Phone: {self.phone}"

    def __hash__(self):
        return hash(self.phone)

    def __eq__(self, other):
        if not isinstance(other, Person):
            return NotImplemented
        return (
            self.name == other.name
            and self.phone == other.phone
            and self.email == other.email
            and self.address == other.address
            and self.tags == other.tags
            and self.is_member == other.is_member
            and self._booking_ids == other._booking_ids
        )
