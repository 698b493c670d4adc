"""
Resource definitions - one configuration value per collection.

Every resource kind shares the same repository implementation. What
differs is the backing file, the fields a new record must carry, and how
the search endpoint matches records. Adding a resource means adding an
entry here, not writing new repository code.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Literal, Mapping, Tuple

from recordstore.utils.dates import parse_date_term
from recordstore.utils.text_cleaning import contains_normalized

Predicate = Callable[[Mapping[str, Any]], bool]


@dataclass(frozen=True)
class ResourceConfig:
    """Static description of one resource kind."""

    name: str
    label: str                       # singular, used in messages ("Store")
    prefix: str                      # mount path under /api
    filename: str                    # backing file inside settings.db_dir
    required_fields: Tuple[str, ...]
    search_field: str
    search_route: str = "search"
    search_mode: Literal["text", "exact_date"] = "text"
    # True: a search with no matches is a 404. False: 200 with an empty list.
    empty_search_not_found: bool = False
    date_fields: Tuple[str, ...] = field(default_factory=tuple)


USERS = ResourceConfig(
    name="users",
    label="User",
    prefix="/users",
    filename="user.json",
    required_fields=("name", "contact_email", "user", "pwd", "level", "status"),
    search_field="name",
)

PRODUCTS = ResourceConfig(
    name="products",
    label="Product",
    prefix="/products",
    filename="product.json",
    required_fields=("name", "description", "price", "stock_quantity", "supplier_id", "status"),
    search_field="name",
)

STORES = ResourceConfig(
    name="stores",
    label="Store",
    prefix="/stores",
    filename="store.json",
    required_fields=("store_name", "cnpj", "address", "phone_number", "contact_email", "status"),
    search_field="store_name",
    empty_search_not_found=True,
)

ORDERS = ResourceConfig(
    name="orders",
    label="Order",
    prefix="/orders",
    filename="order.json",
    required_fields=("store_id", "items", "total_amount", "status", "date"),
    search_field="date",
    search_route="date",
    search_mode="exact_date",
    empty_search_not_found=True,
    date_fields=("date",),
)

SUPPLIERS = ResourceConfig(
    name="suppliers",
    label="Supplier",
    prefix="/supplier",
    filename="suppliers.json",
    required_fields=("supplier_name", "supplier_category", "contact_email", "phone_number", "status"),
    search_field="supplier_name",
    search_route="nome",
)

CAMPAIGNS = ResourceConfig(
    name="campaigns",
    label="Campaign",
    prefix="/campaign",
    filename="campaign.json",
    required_fields=("supplier_id", "name", "start_date", "end_date", "discount_percentage"),
    search_field="name",
    search_route="nome",
)

RESOURCES: Dict[str, ResourceConfig] = {
    r.name: r for r in (USERS, PRODUCTS, STORES, ORDERS, SUPPLIERS, CAMPAIGNS)
}


def get_resource(name: str) -> ResourceConfig:
    """Look up a resource by name."""
    try:
        return RESOURCES[name]
    except KeyError:
        raise KeyError(
            f"Unknown resource {name!r}. Known resources: {', '.join(RESOURCES)}"
        ) from None


def is_empty_value(value: Any) -> bool:
    """
    True for values that do not satisfy a required field.

    0 and False are real values; None, blank strings and empty
    containers are not.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def missing_required_fields(fields: Mapping[str, Any], required: Tuple[str, ...]) -> list:
    return [name for name in required if is_empty_value(fields.get(name))]


def build_search_predicate(resource: ResourceConfig, term: str) -> Predicate:
    """
    Build the record filter used by a resource's search endpoint.

    Text mode matches substrings ignoring case and accents. Exact date mode
    canonicalizes the term first so ``2023-08-15`` finds ``15/08/2023``.
    """
    search_field = resource.search_field

    if resource.search_mode == "exact_date":
        wanted = parse_date_term(term) or term

        def _matches_date(record: Mapping[str, Any]) -> bool:
            return record.get(search_field) == wanted

        return _matches_date

    def _matches_text(record: Mapping[str, Any]) -> bool:
        return contains_normalized(record.get(search_field), term)

    return _matches_text
