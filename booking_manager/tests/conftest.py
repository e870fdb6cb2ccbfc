"""
Общие фикстуры тестов.
"""

from datetime import datetime, timedelta

import pytest

from booking_manager.application.model import Model
from booking_manager.domain.address_book import AddressBook
from booking_manager.domain.person import Person
from booking_manager.domain.value_objects import Phone, Tag


@pytest.fixture
def alice() -> Person:
    return Person(
        name="Alice Pauline",
        phone=Phone("94351253"),
        email="alice@example.com",
        address="123, Jurong West Ave 6, #08-111",
        tags=frozenset({Tag("friends")}),
    )


@pytest.fixture
def benson() -> Person:
    return Person(
        name="Benson Meier",
        phone=Phone("98765432"),
        email="johnd@example.com",
        address="311, Clementi Ave 2, #02-25",
        is_member=True,
    )


@pytest.fixture
def address_book(alice: Person, benson: Person) -> AddressBook:
    book = AddressBook()
    book.add_person(alice)
    book.add_person(benson)
    return book


@pytest.fixture
def model(address_book: AddressBook) -> Model:
    return Model(address_book)


@pytest.fixture
def tomorrow() -> datetime:
    return (datetime.now() + timedelta(days=1)).replace(second=0, microsecond=0)


@pytest.fixture
def yesterday() -> datetime:
    return (datetime.now() - timedelta(days=1)).replace(second=0, microsecond=0)
