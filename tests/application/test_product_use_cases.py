"""Tests for the product use cases.

Every product mutation rewrites the owning shop's product list; these
tests check the list that reaches the store.
"""

from decimal import Decimal

import pytest

from shopadmin.application.add_product import AddProductHandler
from shopadmin.application.delete_product import DeleteProductHandler
from shopadmin.application.dto import ProductForm
from shopadmin.application.update_product import UpdateProductHandler
from shopadmin.domain.exceptions import (
    EntityNotFoundError,
    FetchFailedError,
    ValidationError,
)
from tests.builders import product, shop
from tests.fakes import FakeShopRepository


def _repo() -> FakeShopRepository:
    return FakeShopRepository([
        shop(1, "Green Grocer", [
            product(1, "Apples", price="2.50", stock=10, image="apples.png"),
            product(4, "Bananas", price="1.20", stock=3),
        ]),
        shop(2, "Empty Shop"),
    ])


def _form(**overrides) -> ProductForm:
    fields = dict(
        name="Cherries",
        price=Decimal("8.00"),
        stock_level=5,
        description="Dark red",
        image=None,
    )
    fields.update(overrides)
    return ProductForm(**fields)


class TestAddProduct:

    def test_omitted_price_and_stock_default_to_zero(self):
        repo = _repo()
        created = AddProductHandler(repo).handle(1, _form(price=None, stock_level=None))
        assert created.price == Decimal("0")
        assert created.stock_level == 0

    def test_appends_with_next_id(self):
        repo = _repo()
        created = AddProductHandler(repo).handle(1, _form())
        assert created.id == 5
        saved = repo.get_by_id(1)
        assert [p.name for p in saved.products] == ["Apples", "Bananas", "Cherries"]

    def test_first_product_gets_id_one(self):
        repo = _repo()
        created = AddProductHandler(repo).handle("2", _form())
        assert created.id == 1
        assert repo.get_by_id(2).product_count == 1

    def test_validation_failure_leaves_shop_unchanged(self):
        repo = _repo()
        with pytest.raises(ValidationError, match="Product name is required"):
            AddProductHandler(repo).handle(1, _form(name="  "))
        assert len(repo.get_by_id(1).products) == 2

    def test_store_failure_leaves_shop_unchanged(self):
        repo = _repo()
        repo.fail_writes_with = FetchFailedError("Failed to save product")
        with pytest.raises(FetchFailedError):
            AddProductHandler(repo).handle(1, _form())
        assert len(repo.get_by_id(1).products) == 2

    def test_unknown_shop(self):
        with pytest.raises(EntityNotFoundError, match="Shop #9 not found"):
            AddProductHandler(_repo()).handle(9, _form())


class TestUpdateProduct:

    def test_replaces_in_place(self):
        repo = _repo()
        UpdateProductHandler(repo).handle(1, "4", _form(name="Plantains", stock_level=0))
        saved = repo.get_by_id(1)
        assert [p.name for p in saved.products] == ["Apples", "Plantains"]
        assert saved.products[1].id == 4
        assert saved.products[1].stock_level == 0

    def test_keeps_price_and_stock_when_not_supplied(self):
        repo = _repo()
        UpdateProductHandler(repo).handle(
            1, 1, _form(name="Green Apples", price=None, stock_level=None)
        )
        saved = repo.get_by_id(1).products[0]
        assert saved.name == "Green Apples"
        assert saved.price == Decimal("2.50")
        assert saved.stock_level == 10

    def test_keeps_image_when_not_supplied(self):
        repo = _repo()
        UpdateProductHandler(repo).handle(1, 1, _form(name="Apples"))
        assert repo.get_by_id(1).products[0].image == "apples.png"

    def test_new_image_replaces_old(self):
        repo = _repo()
        UpdateProductHandler(repo).handle(1, 1, _form(image="green.png"))
        assert repo.get_by_id(1).products[0].image == "green.png"

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="Product ID '99' not found"):
            UpdateProductHandler(_repo()).handle(1, 99, _form())


class TestDeleteProduct:

    def test_removes_product(self):
        repo = _repo()
        DeleteProductHandler(repo).handle(1, 1)
        assert [p.id for p in repo.get_by_id(1).products] == [4]

    def test_unknown_product(self):
        repo = _repo()
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(repo).handle(1, 2)
        assert len(repo.get_by_id(1).products) == 2

    def test_unknown_shop(self):
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(_repo()).handle(3, 1)
