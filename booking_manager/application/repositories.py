from abc import ABC, abstractmethod
from typing import Optional

from booking_manager.domain.address_book import AddressBook


class AddressBookRepository(ABC):
    """Абстрактный репозиторий для агрегата AddressBook."""

    @abstractmethod
    def load(self) -> Optional[AddressBook]:
        """Загружает агрегат. Возвращает None, если данных еще нет."""
        raise NotImplementedError

    @abstractmethod
    def save(self, address_book: AddressBook) -> None:
        """Сохраняет состояние агрегата целиком."""
        raise NotImplementedError
