import uuid
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP


def generate_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_fixed(num: float, precision: int = 2) -> float:
    """
    Округляет деньги до `precision` знаков, половину — от нуля (5.005 -> 5.01, -5.005 -> -5.01).
    Округление идёт по десятичной записи числа, а не по его двоичному представлению.
    """
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(str(num)).quantize(quantum, rounding=ROUND_HALF_UP))


def as_utc(value: datetime) -> datetime:
    """SQLite отдаёт naive-даты: считаем их UTC, чтобы сравнивать с aware-датами из запроса."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
