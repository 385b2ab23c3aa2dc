# catalogflow/normalize/schema.py
from dataclasses import dataclass, asdict
from typing import Optional

PRODUCT_HEADERS = [
    "id", "name", "category", "subcategory", "description", "price",
    "image_url", "in_stock", "created_at", "updated_at", "brand", "series",
    "material", "features", "specifications", "dimensions", "weight",
    "color", "model", "sku",
]

UNCATEGORIZED = "Uncategorized"


def format_price(price: Optional[float]) -> str:
    if price is None:
        return ""
    if float(price).is_integer():
        return str(int(price))
    return repr(float(price))


@dataclass
class ProductRow:
    id: int                       # rewritten by finalize(); 0 until then
    name: str
    category: str
    subcategory: str
    description: str
    price: Optional[float]        # None when unset or unparseable
    image_url: str
    in_stock: bool
    created_at: str               # ISO8601
    updated_at: str               # ISO8601
    brand: str
    series: str
    material: str
    features: str                 # list inputs joined with ", "
    specifications: str
    dimensions: str
    weight: str
    color: str
    model: str
    sku: str

    def to_dict(self) -> dict:
        return asdict(self)

    def to_csv_row(self) -> list:
        d = asdict(self)
        d["id"] = str(self.id)
        d["price"] = format_price(self.price)
        d["in_stock"] = "true" if self.in_stock else "false"
        return [d[h] for h in PRODUCT_HEADERS]
