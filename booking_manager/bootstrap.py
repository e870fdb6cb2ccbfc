from typing import Optional

from booking_manager.application.services import BookingManagerService
from booking_manager.core.config import Settings, get_settings
from booking_manager.core.logging import setup_logging
from booking_manager.infrastructure.repositories import JsonFileAddressBookRepository


def bootstrap_app(settings: Optional[Settings] = None) -> BookingManagerService:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or get_settings()

    # 1. Логирование
    setup_logging(settings)

    # 2. Репозиторий поверх файла данных
    repository = JsonFileAddressBookRepository(settings.DATA_FILE_PATH)

    # 3. Сервис приложения с загруженной книгой
    return BookingManagerService.from_repository(repository)
