"""Tests for walking catalog documents into product rows.

Each test feeds a small parsed document through `walk_document` and
checks which products come out and what category and subcategory
they inherit from their containers.
"""

from __future__ import annotations

from catalogflow.ingest.walker import category_label, walk_document

NOW = "2024-05-01T10:00:00+00:00"


def _names(rows):
    return [row.name for row in rows]


def test_categories_with_products_drop_unnamed() -> None:
    document = [{"category": "Pens", "products": [{"name": "Blue Pen"}, {"name": ""}]}]
    rows = walk_document(document, "pens.json", now=NOW)
    assert len(rows) == 1
    assert rows[0].name == "Blue Pen"
    assert rows[0].category == "Pens"


def test_container_category_overrides_product_category() -> None:
    document = [{"name": "Writing", "products": [{"name": "Pen", "category": "Office"}]}]
    assert walk_document(document, now=NOW)[0].category == "Writing"


def test_container_without_label_is_uncategorized() -> None:
    document = [{"products": [{"name": "Pen", "category": "Office"}]}]
    assert walk_document(document, now=NOW)[0].category == "Uncategorized"


def test_categories_with_subcategories() -> None:
    document = [
        {
            "category": "Kitchen",
            "subcategories": [{"name": "Cookers", "products": [{"name": "Pot"}]}],
        }
    ]
    rows = walk_document(document, now=NOW)
    assert len(rows) == 1
    assert rows[0].category == "Kitchen"
    assert rows[0].subcategory == "Cookers"


def test_subcategory_container_replaces_product_subcategory() -> None:
    document = [
        {
            "name": "Kitchen",
            "subcategories": [
                {"subcategory": "Stoves", "products": [{"name": "Burner", "subcategory": "Gas"}]},
                {"products": [{"name": "Lid", "subcategory": "Glass"}]},
            ],
        }
    ]
    rows = walk_document(document, now=NOW)
    assert [(r.name, r.subcategory) for r in rows] == [("Burner", "Stoves"), ("Lid", "")]


def test_subcategory_entries_without_products_are_skipped() -> None:
    document = [
        {
            "category": "Kitchen",
            "subcategories": [
                {"name": "Empty"},
                "not an object",
                {"name": "Cookers", "products": "tbd"},
                {"name": "Jugs", "products": [{"name": "Jug 1L"}]},
            ],
        }
    ]
    rows = walk_document(document, now=NOW)
    assert _names(rows) == ["Jug 1L"]


def test_bare_array_keeps_own_category() -> None:
    document = [{"name": "Mug", "category": "Plasticware"}, {"title": "Tray"}]
    rows = walk_document(document, now=NOW)
    assert [(r.name, r.category) for r in rows] == [("Mug", "Plasticware"), ("Tray", "Uncategorized")]


def test_mixed_array_is_classified_per_element() -> None:
    document = [
        {"category": "Pens", "products": [{"name": "Gel Pen"}]},
        {"name": "Loose Item", "category": "Misc"},
        {"category": "Kitchen", "subcategories": [{"name": "Cookers", "products": [{"name": "Pot"}]}]},
        "stray note",
        None,
        {"category": "Broken", "products": {"name": "Hidden"}},
    ]
    rows = walk_document(document, now=NOW)
    assert _names(rows) == ["Gel Pen", "Loose Item", "Pot"]
    assert [r.category for r in rows] == ["Pens", "Misc", "Kitchen"]


def test_object_keyed_by_category_array_value() -> None:
    rows = walk_document({"Toys": [{"title": "Car"}]}, now=NOW)
    assert len(rows) == 1
    assert rows[0].name == "Car"
    assert rows[0].category == "Toys"


def test_object_keyed_by_category_object_value() -> None:
    document = {"Toys": {"name": "Kite"}, "version": 3, "Games": [{"name": "Chess"}, {"name": ""}]}
    rows = walk_document(document, now=NOW)
    assert [(r.name, r.category) for r in rows] == [("Kite", "Toys"), ("Chess", "Games")]


def test_object_with_products() -> None:
    document = {"name": "Household", "products": [{"product_name": "Comb"}, {"name": "Soap"}]}
    rows = walk_document(document, now=NOW)
    assert _names(rows) == ["Comb", "Soap"]
    assert {r.category for r in rows} == {"Household"}


def test_single_product_object() -> None:
    rows = walk_document({"title": "Lamp", "category": "Lighting", "price": "499"}, now=NOW)
    assert len(rows) == 1
    assert rows[0].category == "Lighting"
    assert rows[0].price == 499.0


def test_object_with_non_list_products_yields_nothing() -> None:
    assert walk_document({"name": "Household", "products": "coming soon"}, now=NOW) == []


def test_scalar_documents_yield_nothing() -> None:
    for document in (None, "text", 12, [], {}):
        assert walk_document(document, now=NOW) == []


def test_rows_share_the_walk_timestamp() -> None:
    rows = walk_document([{"name": "A"}, {"name": "B"}], now=NOW)
    assert {r.created_at for r in rows} == {NOW}


def test_category_label_fallbacks() -> None:
    assert category_label({"category": "Pens", "name": "Writing"}) == "Pens"
    assert category_label({"name": "Writing"}) == "Writing"
    assert category_label({"category": " "}) == "Uncategorized"
