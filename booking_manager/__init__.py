"""
Менеджер контактов и бронирований.

Хранит людей и их бронирования (дата, количество гостей, примечания, статус)
и предоставляет команды для добавления, изменения и фильтрации бронирований.
"""

__version__ = "0.1.0"
