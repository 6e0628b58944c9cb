from restaurant_pos.services.order_report import (
    PIPELINE,
    ReportSources,
    group_by_order,
    lookup_food,
    lookup_table,
    match_order,
    project_lines,
    run_pipeline,
)


ITEMS = [
    {"id": "i1", "order_id": "o1", "food_id": "f1", "quantity": "S", "unit_price": 4.0},
    {"id": "i2", "order_id": "o1", "food_id": "f2", "quantity": "L", "unit_price": 6.5},
    {"id": "i3", "order_id": "o2", "food_id": "f1", "quantity": "M", "unit_price": 4.0},
]

FOODS = {
    "f1": {"id": "f1", "name": "Pizza", "price": 10.0, "food_image": "pizza.jpg"},
    "f2": {"id": "f2", "name": "Soup", "price": 5.25, "food_image": "soup.jpg"},
}


def make_sources(order_id="o1", foods=None, orders=None, tables=None):
    return ReportSources(
        order_id=order_id,
        foods=FOODS if foods is None else foods,
        orders={"o1": {"id": "o1", "table_id": "t1"}} if orders is None else orders,
        tables={"t1": {"id": "t1", "table_number": 7}} if tables is None else tables,
    )


def test_pipeline_steps_are_in_documented_order():
    assert [name for name, _ in PIPELINE] == [
        "match_order",
        "lookup_food",
        "lookup_order",
        "lookup_table",
        "project_lines",
        "group_by_order",
        "project_groups",
    ]


def test_match_order_keeps_only_requested_order():
    rows = match_order(ITEMS, make_sources())
    assert [row["id"] for row in rows] == ["i1", "i2"]


def test_lookup_food_preserves_unmatched_rows():
    rows = lookup_food([{"id": "x", "food_id": "nope"}], make_sources())
    assert rows == [{"id": "x", "food_id": "nope", "food": None}]


def test_lookup_table_goes_through_joined_order():
    rows = [{"id": "i1", "order": {"id": "o1", "table_id": "t1"}}, {"id": "i2", "order": None}]
    joined = lookup_table(rows, make_sources())
    assert joined[0]["table"] == {"id": "t1", "table_number": 7}
    assert joined[1]["table"] is None


def test_project_lines_uses_food_price_as_amount():
    rows = [{**ITEMS[0], "food": FOODS["f1"], "order": {"id": "o1"}, "table": None}]
    (line,) = project_lines(rows, make_sources())
    assert line["amount"] == 10.0
    assert line["price"] == 10.0
    assert line["unit_price"] == 4.0
    assert line["size"] == "S"
    assert line["quantity"] == 1
    assert line["table_number"] is None


def test_run_pipeline_groups_one_order():
    (row,) = run_pipeline(ITEMS, make_sources())

    assert row["order_id"] == "o1"
    assert row["table_id"] == "t1"
    assert row["table_number"] == 7
    assert row["total_count"] == 2
    assert row["total_amount"] == 15.25
    assert row["payment_due"] == row["total_amount"]
    assert [line["food_name"] for line in row["order_items"]] == ["Pizza", "Soup"]
    assert [line["food_image"] for line in row["order_items"]] == ["pizza.jpg", "soup.jpg"]


def test_amount_ignores_unit_price_times_quantity():
    # unit_price 4.0 у позиции, но сумма берётся из цены блюда (10.0)
    items = [{"id": "i1", "order_id": "o1", "food_id": "f1", "quantity": "L", "unit_price": 4.0}]
    (row,) = run_pipeline(items, make_sources())
    assert row["total_amount"] == 10.0


def test_missing_food_keeps_row_without_food_fields():
    items = ITEMS[:1] + [{"id": "i9", "order_id": "o1", "food_id": "ghost", "quantity": "M", "unit_price": 3.0}]
    (row,) = run_pipeline(items, make_sources())

    ghost = row["order_items"][1]
    assert ghost["order_item_id"] == "i9"
    assert ghost["food_name"] is None
    assert ghost["food_image"] is None
    assert ghost["amount"] is None
    assert row["total_count"] == 2
    assert row["total_amount"] == 10.0


def test_missing_order_and_table_keep_rows():
    (row,) = run_pipeline(ITEMS[:2], make_sources(orders={}, tables={}))
    assert row["order_id"] is None
    assert row["table_number"] is None
    assert row["table_id"] is None
    assert row["total_count"] == 2


def test_group_by_order_splits_by_table_number():
    lines = [
        {"order_id": "o1", "table_number": 1, "table_id": "t1", "quantity": 1, "amount": 2.0},
        {"order_id": "o1", "table_number": 2, "table_id": "t2", "quantity": 1, "amount": 3.0},
        {"order_id": "o1", "table_number": 1, "table_id": "t1", "quantity": 1, "amount": None},
    ]
    groups = group_by_order(lines, make_sources())

    assert [(g["order_id"], g["table_number"]) for g in groups] == [("o1", 1), ("o1", 2)]
    assert groups[0]["total_count"] == 2
    assert groups[0]["total_amount"] == 2.0
    assert groups[1]["total_count"] == 1


def test_total_count_matches_lines_in_group():
    (row,) = run_pipeline(ITEMS, make_sources())
    assert row["total_count"] == sum(line["quantity"] for line in row["order_items"])


def test_empty_order_gives_empty_report():
    assert run_pipeline([], make_sources(order_id="nothing")) == []
