from __future__ import annotations

from booking_manager.application.commands import Command, CommandException, CommandResult
from booking_manager.application.model import Model
from booking_manager.application.repositories import AddressBookRepository
from booking_manager.core.logging import get_logger
from booking_manager.domain.address_book import AddressBook
from booking_manager.shared_kernel import DataLoadingException

logger = get_logger(__name__)


class BookingManagerService:
    """Сервис приложения: выполняет команды и сохраняет книгу после каждой."""

    def __init__(self, model: Model, repository: AddressBookRepository):
        self.model = model
        self.repository = repository

    @classmethod
    def from_repository(cls, repository: AddressBookRepository) -> BookingManagerService:
        """Создает сервис, загружая книгу из репозитория."""
        try:
            address_book = repository.load()
        except DataLoadingException as e:
            logger.warning("address_book_load_failed", error=str(e))
            address_book = None

        if address_book is None:
            logger.info("address_book_started_empty")
            address_book = AddressBook()

        return cls(Model(address_book), repository)

    def execute(self, command: Command) -> CommandResult:
        """Выполняет команду и сохраняет изменения."""
        try:
            result = command.execute(self.model)
        except CommandException as e:
            logger.info(
                "command_rejected", command=command.COMMAND_WORD, reason=str(e)
            )
            raise

        self.repository.save(self.model.address_book)
        logger.debug("command_executed", command=command.COMMAND_WORD)
        return result
