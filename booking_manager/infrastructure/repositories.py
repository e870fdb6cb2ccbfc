import json
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from booking_manager.application.repositories import AddressBookRepository
from booking_manager.core.logging import get_logger
from booking_manager.domain.address_book import AddressBook
from booking_manager.infrastructure.json_storage import JsonSerializableAddressBook
from booking_manager.shared_kernel import DataLoadingException, IllegalValueException

logger = get_logger(__name__)


class JsonFileAddressBookRepository(AddressBookRepository):
    """Хранит адресную книгу в JSON-файле, перезаписывая его целиком."""

    def __init__(self, file_path: Union[str, Path]) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> Optional[AddressBook]:
        if not self._file_path.exists():
            logger.info("data_file_not_found", path=str(self._file_path))
            return None

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                raw_data = f.read()
            if not raw_data.strip():
                return None
            data = JsonSerializableAddressBook.model_validate(json.loads(raw_data))
            address_book = data.to_model_type()
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            raise DataLoadingException(
                f"Could not read data file {self._file_path}: {e}"
            ) from e
        except IllegalValueException as e:
            raise DataLoadingException(
                f"Illegal values found in {self._file_path}: {e}"
            ) from e

        logger.info(
            "address_book_loaded",
            path=str(self._file_path),
            persons=len(address_book.persons),
            bookings=len(address_book.bookings),
        )
        return address_book

    def save(self, address_book: AddressBook) -> None:
        # Создаем директорию, если она не существует
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

        data = JsonSerializableAddressBook.from_model(address_book).model_dump(
            by_alias=True
        )
        with open(self._file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.debug("address_book_saved", path=str(self._file_path))


class InMemoryAddressBookRepository(AddressBookRepository):
    """Реализация репозитория в памяти.

    Хранит сериализованный снимок, чтобы загрузка проходила тот же путь,
    что и у файлового репозитория.
    """

    def __init__(self) -> None:
        self._snapshot: Optional[dict] = None
        self.save_count = 0

    def load(self) -> Optional[AddressBook]:
        if self._snapshot is None:
            return None
        try:
            return JsonSerializableAddressBook.model_validate(
                self._snapshot
            ).to_model_type()
        except IllegalValueException as e:
            raise DataLoadingException(str(e)) from e

    def save(self, address_book: AddressBook) -> None:
        self._snapshot = JsonSerializableAddressBook.from_model(
            address_book
        ).model_dump(by_alias=True)
        self.save_count += 1
