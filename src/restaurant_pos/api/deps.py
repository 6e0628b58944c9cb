from typing import Optional, Tuple

from fastapi import Query, Request

from restaurant_pos.config import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def _positive_int(value: Optional[str], default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default


def get_pagination(
    request: Request,
    record_per_page: Optional[str] = Query(None, alias="recordPerPage", description="Записей на странице"),
    page: Optional[str] = Query(None, description="Номер страницы, с 1"),
) -> Tuple[int, int]:
    """
    Возвращает (limit, offset). Некорректные значения заменяются значениями по умолчанию.
    """
    limit = _positive_int(record_per_page, request.app.state.settings.DEFAULT_PAGE_SIZE)
    page_number = _positive_int(page, 1)
    return limit, (page_number - 1) * limit
