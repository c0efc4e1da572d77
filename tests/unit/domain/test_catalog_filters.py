"""Unit tests for browse filters and sorts."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from core.domain.entities.product import Product
from core.domain.enums import ListingStatus, ProduceUnit
from core.domain.services.catalog_filters import (
    BrowseSort,
    ProductCard,
    count_by_status,
    filter_cards,
    sort_cards,
)

_NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)


def _card(title, price, slug="vegetables", organic=False, rating=None, age_days=0) -> ProductCard:
    product = Product(
        seller_id="s1",
        title=title,
        price_per_unit=Decimal(price),
        unit=ProduceUnit.KG,
        quantity_available=10,
        is_organic=organic,
        avg_rating=Decimal(rating) if rating else None,
        created_at=_NOW - timedelta(days=age_days),
    )
    return ProductCard(product=product, category_slug=slug)


@pytest.fixture
def cards():
    return [
        _card("Red Tomatoes", "40", organic=True, rating="4.5", age_days=3),
        _card("Alphonso Mango", "300", slug="fruits", rating="4.9", age_days=1),
        _card("Green Chilli", "60", organic=True, age_days=2),
        _card("Cherry tomatoes", "120", rating="3.0", age_days=0),
    ]


class TestFilterCards:

    def test_search_is_case_insensitive(self, cards):
        titles = [c.product.title for c in filter_cards(cards, search="  TOMATO ")]
        assert titles == ["Red Tomatoes", "Cherry tomatoes"]

    def test_category_all_means_no_filter(self, cards):
        assert len(filter_cards(cards, category="all")) == 4
        assert len(filter_cards(cards, category="fruits")) == 1

    def test_organic_and_search_combine(self, cards):
        result = filter_cards(cards, search="tomato", organic_only=True)
        assert [c.product.title for c in result] == ["Red Tomatoes"]


class TestSortCards:

    def test_price_ascending(self, cards):
        prices = [c.product.price_per_unit for c in sort_cards(cards, BrowseSort.PRICE_ASC)]
        assert prices == [Decimal("40"), Decimal("60"), Decimal("120"), Decimal("300")]

    def test_price_descending(self, cards):
        assert sort_cards(cards, BrowseSort.PRICE_DESC)[0].product.title == "Alphonso Mango"

    def test_rating_puts_unrated_last(self, cards):
        titles = [c.product.title for c in sort_cards(cards, BrowseSort.RATING)]
        assert titles[0] == "Alphonso Mango"
        assert titles[-1] == "Green Chilli"

    def test_newest_first(self, cards):
        assert sort_cards(cards, BrowseSort.NEWEST)[0].product.title == "Cherry tomatoes"

    def test_relevance_keeps_order_and_copies(self, cards):
        result = sort_cards(cards)
        assert result == cards
        assert result is not cards


def test_count_by_status_includes_empty_tabs(cards):
    products = [c.product for c in cards]
    products[0].status = ListingStatus.DRAFT

    counts = count_by_status(products)

    assert counts == {"active": 3, "draft": 1, "sold_out": 0, "expired": 0}
