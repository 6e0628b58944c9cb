"""
Отчёт по позициям заказа (кухня / счёт).

Позиции заказа присоединяются к блюду, заказу и столу, затем группируются
по паре (order_id, table_number). Конвейер — упорядоченный список именованных
шагов, каждый принимает и возвращает список словарей:

    match_order     позиции заказа              -> только позиции с нужным order_id
    lookup_food     + "food":  dict | None      (по food_id)
    lookup_order    + "order": dict | None      (по order_id)
    lookup_table    + "table": dict | None      (по order["table_id"])
    project_lines   -> плоские строки: food_name, food_image, price, amount, quantity, ...
    group_by_order  -> группы по (order_id, table_number) с суммами
    project_groups  -> итоговые строки отчёта

Все join-ы левые: позиция без блюда, заказа или стола остаётся в отчёте,
а присоединённые поля равны None.

Сумма строки (amount) берётся из цены блюда, а не unit_price * quantity.
Размер порции (S/M/L) не является количеством, поэтому каждая строка
считается за одну единицу в total_count.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from restaurant_pos.core.utils import to_fixed

Row = Dict[str, object]


@dataclass
class ReportSources:
    """Коллекции, к которым присоединяются позиции. Ключ — id записи."""
    order_id: str
    foods: Dict[str, Row] = field(default_factory=dict)
    orders: Dict[str, Row] = field(default_factory=dict)
    tables: Dict[str, Row] = field(default_factory=dict)


Step = Callable[[List[Row], ReportSources], List[Row]]


def match_order(rows: List[Row], sources: ReportSources) -> List[Row]:
    return [row for row in rows if row.get("order_id") == sources.order_id]


def lookup_food(rows: List[Row], sources: ReportSources) -> List[Row]:
    return [{**row, "food": sources.foods.get(row.get("food_id"))} for row in rows]


def lookup_order(rows: List[Row], sources: ReportSources) -> List[Row]:
    return [{**row, "order": sources.orders.get(row.get("order_id"))} for row in rows]


def lookup_table(rows: List[Row], sources: ReportSources) -> List[Row]:
    joined = []
    for row in rows:
        order = row.get("order") or {}
        joined.append({**row, "table": sources.tables.get(order.get("table_id"))})
    return joined


def project_lines(rows: List[Row], sources: ReportSources) -> List[Row]:
    lines = []
    for row in rows:
        food = row.get("food") or {}
        order = row.get("order") or {}
        table = row.get("table") or {}
        lines.append({
            "order_item_id": row.get("id"),
            "food_id": row.get("food_id"),
            "size": row.get("quantity"),
            "quantity": 1,
            "unit_price": row.get("unit_price"),
            "price": food.get("price"),
            "amount": food.get("price"),
            "food_name": food.get("name"),
            "food_image": food.get("food_image"),
            "table_number": table.get("table_number"),
            "table_id": table.get("id"),
            "order_id": order.get("id"),
        })
    return lines


def group_by_order(rows: List[Row], sources: ReportSources) -> List[Row]:
    # порядок групп — порядок первого появления ключа
    groups: Dict[Tuple[Optional[str], Optional[int]], Row] = {}
    for line in rows:
        key = (line["order_id"], line["table_number"])
        group = groups.get(key)
        if group is None:
            group = groups[key] = {
                "_id": {"order_id": key[0], "table_number": key[1]},
                "table_id": line["table_id"],
                "order_id": line["order_id"],
                "table_number": line["table_number"],
                "total_count": 0,
                "order_items": [],
                "total_amount": 0.0,
            }
        group["total_count"] += line["quantity"]
        group["order_items"].append(line)
        group["total_amount"] += line["amount"] or 0.0
    return list(groups.values())


def project_groups(rows: List[Row], sources: ReportSources) -> List[Row]:
    report = []
    for group in rows:
        total = to_fixed(group["total_amount"])
        report.append({
            "order_id": group["order_id"],
            "table_id": group["table_id"],
            "table_number": group["_id"]["table_number"],
            "total_count": group["total_count"],
            "order_items": group["order_items"],
            "total_amount": total,
            "payment_due": total,
        })
    return report


PIPELINE: List[Tuple[str, Step]] = [
    ("match_order", match_order),
    ("lookup_food", lookup_food),
    ("lookup_order", lookup_order),
    ("lookup_table", lookup_table),
    ("project_lines", project_lines),
    ("group_by_order", group_by_order),
    ("project_groups", project_groups),
]


def run_pipeline(order_items: List[Row], sources: ReportSources) -> List[Row]:
    rows = list(order_items)
    for _name, step in PIPELINE:
        rows = step(rows, sources)
    return rows
