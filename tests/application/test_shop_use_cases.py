"""Tests for the shop use cases.

Uses the in-memory fake repository — no HTTP.
"""

import pytest

from shopadmin.application.add_shop import AddShopHandler
from shopadmin.application.delete_shop import DeleteShopHandler
from shopadmin.application.dto import ShopForm
from shopadmin.application.list_shops import ListShopsHandler
from shopadmin.application.query import CatalogQuery
from shopadmin.application.show_shop import ShowShopHandler
from shopadmin.application.update_shop import UpdateShopHandler
from shopadmin.domain.exceptions import (
    EntityNotFoundError,
    FetchFailedError,
    PreconditionFailedError,
    ValidationError,
)
from tests.builders import product, shop
from tests.fakes import FakeShopRepository


def _repo() -> FakeShopRepository:
    return FakeShopRepository([
        shop(1, "Green Grocer", [
            product(1, "Apples", stock=0),
            product(2, "Bananas", stock=3),
            product(3, "Carrots", stock=40),
        ]),
        shop(2, "Empty Shop"),
    ])


class TestAddShop:

    def test_creates_shop_with_assigned_id(self):
        repo = _repo()
        created = AddShopHandler(repo).handle(ShopForm(" Book Nook ", "Used books"))
        assert created.id == 3
        assert created.name == "Book Nook"
        assert created.products == []
        assert repo.get_by_id(3) is not None

    def test_blank_name_rejected_before_store(self):
        repo = _repo()
        with pytest.raises(ValidationError):
            AddShopHandler(repo).handle(ShopForm("", "Used books"))
        assert len(repo.list_all()) == 2


class TestListShops:

    def test_summaries(self):
        summaries = ListShopsHandler(_repo()).handle()
        assert [(s.id, s.product_count, s.total_stock) for s in summaries] == [
            (1, 3, 43),
            (2, 0, 0),
        ]


class TestShowShop:

    def test_default_query_uses_six_per_page(self):
        repo = FakeShopRepository([
            shop(1, products=[product(i, stock=i) for i in range(1, 9)]),
        ])
        dto = ShowShopHandler(repo).handle(1)
        assert len(dto.products.items) == 6
        assert dto.products.total_pages == 2
        assert dto.product_count == 8

    def test_filter_sort_and_rows(self):
        query = CatalogQuery(page_size=6).with_stock_bucket("lowStock")
        dto = ShowShopHandler(_repo()).handle("1", query)
        assert [row.name for row in dto.products.items] == ["Bananas"]
        assert dto.products.items[0].stock_status == "Low Stock"
        assert dto.products.items[0].shop_name == "Green Grocer"

    def test_sorted_by_stock(self):
        dto = ShowShopHandler(_repo()).handle(1, CatalogQuery().with_sort("stock"))
        assert [row.stock_level for row in dto.products.items] == [40, 3, 0]

    def test_empty_shop_renders_page_one(self):
        dto = ShowShopHandler(_repo()).handle(2)
        assert dto.products.items == []
        assert dto.products.page == 1
        assert dto.products.total_pages == 1

    def test_unknown_shop(self):
        with pytest.raises(EntityNotFoundError, match="Shop #99 not found"):
            ShowShopHandler(_repo()).handle(99)


class TestUpdateShop:

    def test_updates_fields_and_keeps_products(self):
        repo = _repo()
        UpdateShopHandler(repo).handle(1, ShopForm("Greener Grocer", "Organic", "new.png"))
        saved = repo.get_by_id(1)
        assert saved.name == "Greener Grocer"
        assert saved.logo == "new.png"
        assert len(saved.products) == 3

    def test_keeps_existing_logo_when_not_supplied(self):
        repo = _repo()
        UpdateShopHandler(repo).handle(1, ShopForm("A", "B", "first.png"))
        UpdateShopHandler(repo).handle(1, ShopForm("A", "C"))
        assert repo.get_by_id(1).logo == "first.png"

    def test_unknown_shop(self):
        with pytest.raises(EntityNotFoundError):
            UpdateShopHandler(_repo()).handle(42, ShopForm("A", "B"))


class TestDeleteShop:

    def test_deletes_empty_shop(self):
        repo = _repo()
        DeleteShopHandler(repo).handle(2)
        assert repo.get_by_id(2) is None

    def test_shop_with_products_is_refused_and_list_unchanged(self):
        repo = _repo()
        before = repo.list_all()
        with pytest.raises(PreconditionFailedError):
            DeleteShopHandler(repo).handle(1)
        assert repo.list_all() == before

    def test_store_refusal_propagates(self):
        repo = _repo()
        repo.fail_writes_with = PreconditionFailedError("refused by store")
        with pytest.raises(PreconditionFailedError, match="refused by store"):
            DeleteShopHandler(repo).handle(2)
        assert repo.get_by_id(2) is not None

    def test_store_failure_propagates(self):
        repo = _repo()
        repo.fail_writes_with = FetchFailedError("Failed to delete shop")
        with pytest.raises(FetchFailedError):
            DeleteShopHandler(repo).handle(2)

    def test_unknown_shop(self):
        with pytest.raises(EntityNotFoundError):
            DeleteShopHandler(_repo()).handle(7)
