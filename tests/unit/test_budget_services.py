"""Tests for the category picker flattening and ExpenseService."""

from datetime import date
from decimal import Decimal

import pytest

from app.application.dtos.category import CategoryDropdownItem, CategoryResult
from app.application.dtos.expense import ExpenseCreate
from app.application.services.category_service import (
    NO_CATEGORY_LABEL,
    CategoryService,
    flatten_categories,
)
from app.application.services.expense_service import ExpenseService
from app.domain.exceptions import ValidationException
from tests.fakes import InMemoryCategoryRepository, InMemoryExpenseRepository

OWNER = "owner@example.com"
OTHER = "other@example.com"


def _cat(id: str, name: str, parent_id: str | None = None) -> CategoryResult:
    return CategoryResult(id=id, name=name, parent_id=parent_id)


class TestFlattenCategories:
    def test_empty_list_has_only_no_category(self) -> None:
        assert flatten_categories([]) == [
            CategoryDropdownItem(id=None, level=1, name=NO_CATEGORY_LABEL)
        ]

    def test_tree_is_depth_first_with_sorted_siblings(self) -> None:
        items = flatten_categories(
            [
                _cat("t", "Transport"),
                _cat("f", "Food"),
                _cat("g", "Groceries", "f"),
                _cat("b", "Bus", "t"),
                _cat("r", "Restaurants", "f"),
                _cat("c", "Coffee", "r"),
            ]
        )
        assert [(i.id, i.level, i.name) for i in items] == [
            (None, 1, NO_CATEGORY_LABEL),
            ("f", 1, "Food"),
            ("g", 2, "Groceries"),
            ("r", 2, "Restaurants"),
            ("c", 3, "Coffee"),
            ("t", 1, "Transport"),
            ("b", 2, "Bus"),
        ]

    def test_orphan_is_treated_as_top_level(self) -> None:
        items = flatten_categories([_cat("x", "Orphan", "missing")])
        assert items[1] == CategoryDropdownItem(id="x", level=1, name="Orphan")

    def test_cycle_does_not_loop(self) -> None:
        items = flatten_categories([_cat("a", "A", "b"), _cat("b", "B", "a"), _cat("top", "Top")])
        assert [i.id for i in items] == [None, "top"]


class TestCategoryService:
    async def test_dropdown_only_contains_own_categories(self) -> None:
        repo = InMemoryCategoryRepository()
        repo.add(OWNER, "Rent")
        repo.add(OTHER, "Hidden")
        items = await CategoryService(repo).get_dropdown_items(OWNER)
        assert [i.name for i in items] == [NO_CATEGORY_LABEL, "Rent"]


class TestExpenseService:
    @pytest.fixture
    def categories(self) -> InMemoryCategoryRepository:
        return InMemoryCategoryRepository()

    @pytest.fixture
    def service(self, categories) -> ExpenseService:
        return ExpenseService(InMemoryExpenseRepository(), categories)

    async def test_create_and_list(self, service, categories) -> None:
        food = categories.add(OWNER, "Food")
        await service.create_expense(
            OWNER, ExpenseCreate(amount=Decimal("4.50"), category_id=food.id, date=date(2026, 1, 1))
        )
        latest = await service.create_expense(
            OWNER,
            ExpenseCreate(
                amount=Decimal("12.00"),
                category_id=food.id,
                date=date(2026, 1, 3),
                description="Lunch",
            ),
        )
        listed = await service.list_expenses(OWNER)
        assert [e.id for e in listed][0] == latest.id
        assert len(listed) == 2
        assert await service.list_expenses(OTHER) == []

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-1.00")])
    async def test_non_positive_amount_rejected(self, service, categories, amount) -> None:
        food = categories.add(OWNER, "Food")
        with pytest.raises(ValidationException) as exc_info:
            await service.create_expense(
                OWNER, ExpenseCreate(amount=amount, category_id=food.id, date=date(2026, 1, 1))
            )
        assert exc_info.value.details["field"] == "amount"

    async def test_category_of_other_user_rejected(self, service, categories) -> None:
        foreign = categories.add(OTHER, "Food")
        with pytest.raises(ValidationException) as exc_info:
            await service.create_expense(
                OWNER, ExpenseCreate(amount=Decimal("1"), category_id=foreign.id, date=date(2026, 1, 1))
            )
        assert exc_info.value.details["field"] == "category_id"
