"""Tests for resource configuration and search predicates."""
import pytest

from recordstore.resources import (
    CAMPAIGNS,
    ORDERS,
    PRODUCTS,
    RESOURCES,
    STORES,
    SUPPLIERS,
    USERS,
    build_search_predicate,
    get_resource,
    is_empty_value,
    missing_required_fields,
)


class TestResourceRegistry:

    def test_six_independent_resources(self):
        assert set(RESOURCES) == {"users", "products", "stores", "orders", "suppliers", "campaigns"}
        filenames = [r.filename for r in RESOURCES.values()]
        assert len(set(filenames)) == len(filenames)

    def test_get_resource_unknown_name(self):
        with pytest.raises(KeyError, match="Known resources"):
            get_resource("invoices")

    def test_empty_search_policy_is_fixed_per_resource(self):
        assert STORES.empty_search_not_found is True
        assert ORDERS.empty_search_not_found is True
        assert SUPPLIERS.empty_search_not_found is False
        assert CAMPAIGNS.empty_search_not_found is False
        assert USERS.empty_search_not_found is False
        assert PRODUCTS.empty_search_not_found is False

    def test_only_orders_normalize_dates(self):
        assert ORDERS.date_fields == ("date",)
        assert all(not r.date_fields for r in RESOURCES.values() if r is not ORDERS)


class TestRequiredFields:

    @pytest.mark.parametrize("value", [None, "", "   ", [], {}])
    def test_empty_values(self, value):
        assert is_empty_value(value)

    @pytest.mark.parametrize("value", [0, 0.0, False, "x", [1], {"a": 1}])
    def test_present_values(self, value):
        assert not is_empty_value(value)

    def test_missing_fields_keep_declaration_order(self):
        fields = {"store_id": "s1", "status": "Pending", "items": []}
        assert missing_required_fields(fields, ORDERS.required_fields) == ["items", "total_amount", "date"]


class TestSearchPredicates:

    def test_text_search_ignores_case_and_accents(self):
        matches = build_search_predicate(STORES, "BÍNGO")
        assert matches({"store_name": "Bingo Heeler"})
        assert not matches({"store_name": "Bluey"})

    def test_text_search_skips_records_without_field(self):
        matches = build_search_predicate(SUPPLIERS, "judite")
        assert not matches({"name": "Judite Heeler"})
        assert matches({"supplier_name": "Judite Heeler"})

    def test_date_search_canonicalizes_term(self):
        record = {"date": "15/08/2023"}
        assert build_search_predicate(ORDERS, "15/08/2023")(record)
        assert build_search_predicate(ORDERS, "2023-08-15")(record)
        assert not build_search_predicate(ORDERS, "2023-08-16")(record)

    def test_date_search_with_unparseable_term_is_exact(self):
        assert not build_search_predicate(ORDERS, "15/08")({"date": "15/08/2023"})
        assert build_search_predicate(ORDERS, "someday")({"date": "someday"})
