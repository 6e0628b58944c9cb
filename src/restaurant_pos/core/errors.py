"""
Доменные ошибки. CRUD-слой бросает их, а обработчики в api/errors.py
превращают в JSON-ответ {"error": "..."} с нужным статусом.
"""


class DomainError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(DomainError, ValueError):
    status_code = 400


class NotFoundError(DomainError, LookupError):
    status_code = 404


class ConflictError(DomainError):
    status_code = 409


class AuthenticationError(DomainError):
    status_code = 401
