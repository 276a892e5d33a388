"""Иерархия исключений приложения."""


class SathornMapError(Exception):
    """Базовое исключение приложения."""

    status_code = 500


class NotFoundError(SathornMapError):
    """Объект с указанным ID не существует."""

    status_code = 404


class InvalidInputError(SathornMapError):
    """Входные данные не прошли валидацию."""

    status_code = 400


class UpstreamError(SathornMapError):
    """Запрос к языковой модели завершился ошибкой или вернул некорректный ответ."""


class InternalError(SathornMapError):
    """Непредвиденная ошибка каталога."""
