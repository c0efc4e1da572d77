"""Integration tests for the marketplace API: checkout through returns."""

import json
from datetime import date, timedelta
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import AsyncClient

from apps.api.v1.endpoints.auth import code_verifier_from_cookies
from core.domain.enums import UserRole


async def _checkout(client: AsyncClient, buyer_headers: dict, product_id: str, address_id: str, quantity: int = 4) -> str:
    response = await client.post(
        "/api/v1/cart/items", json={"product_id": product_id, "quantity": quantity}, headers=buyer_headers
    )
    assert response.status_code == 200, response.text

    response = await client.post(
        "/api/v1/checkout/orders",
        json={
            "address_id": address_id,
            "payment_method": "cod",
            "delivery_mode": "seller_delivers",
            "delivery_date": (date.today() + timedelta(days=1)).isoformat(),
            "delivery_slot": "14:00-18:00",
        },
        headers=buyer_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["redirect_order_id"]


@pytest_asyncio.fixture
async def listing(seed, users):
    category = await seed.category()
    return await seed.product(users["seller"].id, title="Red Tomatoes", price="40", category_id=category.id)


@pytest_asyncio.fixture
async def address(seed, users):
    return await seed.address(users["buyer"].id, is_default=True)


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


class TestAuth:

    @pytest.mark.asyncio
    async def test_protected_route_requires_token(self, client: AsyncClient):
        response = await client.get("/api/v1/cart")
        assert response.status_code == 401
        assert response.json()["detail"] == "Sign in required"

    @pytest.mark.asyncio
    async def test_unknown_token(self, client: AsyncClient):
        response = await client.get("/api/v1/me", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_callback_redirects(self, client: AsyncClient, auth_provider):
        auth_provider.codes["oauth-code"] = "fresh-user"

        ok = await client.get("/auth/callback", params={"code": "oauth-code", "next": "/app/cart"})
        failed = await client.get("/auth/callback", params={"code": "bad"})

        assert ok.status_code == 307
        assert ok.headers["location"] == "http://test/app/cart"
        assert failed.headers["location"] == "http://test/?error=auth"

        me = await client.get("/api/v1/me", headers={"Authorization": "Bearer token-oauth-code"})
        assert me.json()["id"] == "fresh-user"
        assert me.json()["role"] == "buyer"

    @pytest.mark.asyncio
    async def test_callback_forwards_pkce_verifier(self, client: AsyncClient, auth_provider):
        auth_provider.codes["pkce-code"] = "pkce-user"
        auth_provider.verifiers["pkce-code"] = "ver-42"

        missing = await client.get("/auth/callback", params={"code": "pkce-code"})
        from_cookie = await client.get(
            "/auth/callback",
            params={"code": "pkce-code"},
            headers={"Cookie": "sb-project-auth-token-code-verifier=ver-42"},
        )
        from_query = await client.get(
            "/auth/callback", params={"code": "pkce-code", "code_verifier": "ver-42"}
        )

        assert missing.headers["location"] == "http://test/?error=auth"
        assert from_cookie.headers["location"] == "http://test/app/home"
        assert from_query.headers["location"] == "http://test/app/home"

    def test_code_verifier_cookie_lookup(self):
        assert code_verifier_from_cookies({"theme": "dark", "sb-x-auth-token-code-verifier": '"abc"'}) == "abc"
        assert code_verifier_from_cookies({"theme": "dark"}) is None

    @pytest.mark.asyncio
    async def test_buyer_cannot_use_seller_routes(self, client: AsyncClient, users, buyer_headers):
        response = await client.get("/api/v1/seller/dashboard", headers=buyer_headers)
        assert response.status_code == 403


class TestCatalog:

    @pytest.mark.asyncio
    async def test_browse_and_detail_anonymously(self, client: AsyncClient, listing):
        browse = await client.get("/api/v1/products", params={"search": "tomato", "sort": "price_asc"})
        assert browse.status_code == 200
        assert browse.json()["total"] == 1

        detail = await client.get(f"/api/v1/products/{listing.id}")
        assert detail.status_code == 200
        assert detail.json()["product"]["views_count"] == 1
        assert detail.json()["product"]["seller_name"] == "Ravi Farms"

        missing = await client.get("/api/v1/products/nope")
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_seller_manages_listings(self, client: AsyncClient, users, seller_headers):
        created = await client.post(
            "/api/v1/seller/listings",
            json={"title": "Onions", "price_per_unit": "25", "quantity_available": 100},
            headers=seller_headers,
        )
        assert created.status_code == 201, created.text
        product_id = created.json()["id"]

        copy = await client.post(f"/api/v1/seller/listings/{product_id}/duplicate", headers=seller_headers)
        assert copy.status_code == 201
        assert copy.json()["status"] == "draft"

        drafts = await client.get("/api/v1/seller/listings", params={"status": "draft"}, headers=seller_headers)
        assert drafts.json()["counts"]["active"] == 1
        assert len(drafts.json()["listings"]) == 1

        deleted = await client.delete(f"/api/v1/seller/listings/{copy.json()['id']}", headers=seller_headers)
        assert deleted.status_code == 204


class TestCheckoutAndFulfilment:

    @pytest.mark.asyncio
    async def test_checkout_to_delivery(
        self, client: AsyncClient, listing, address, notifications, buyer_headers, seller_headers
    ):
        cart = await client.post(
            "/api/v1/cart/items", json={"product_id": listing.id, "quantity": 4}, headers=buyer_headers
        )
        assert Decimal(cart.json()["total_amount"]) == Decimal("160")

        quote = await client.post(
            "/api/v1/checkout/quote", json={"delivery_mode": "buyer_pickup"}, headers=buyer_headers
        )
        assert quote.status_code == 200
        assert Decimal(quote.json()["platform_fee"]) == Decimal("3")
        assert Decimal(quote.json()["transport_fee"]) == 0
        await client.delete("/api/v1/cart", headers=buyer_headers)

        order_id = await _checkout(client, buyer_headers, listing.id, address.id)

        order = await client.get(f"/api/v1/orders/{order_id}", headers=buyer_headers)
        assert order.status_code == 200
        assert order.json()["status"] == "pending"
        assert order.json()["delivery_slot"] == "14:00-18:00"

        for expected in ("confirmed", "preparing", "shipped", "delivered"):
            response = await client.post(f"/api/v1/seller/orders/{order_id}/advance", headers=seller_headers)
            assert response.status_code == 200
            assert response.json()["status"] == expected

        again = await client.post(f"/api/v1/seller/orders/{order_id}/advance", headers=seller_headers)
        assert again.status_code == 409

        event_types = [n["event_type"] for n in notifications.get_notifications()]
        assert event_types.count("OrderPlacedEvent") == 1
        assert event_types.count("OrderStatusChangedEvent") == 4

    @pytest.mark.asyncio
    async def test_sold_out_listing_is_bad_request(self, client: AsyncClient, seed, users, buyer_headers):
        sold_out = await seed.product(users["seller"].id, title="Okra", quantity=0)

        response = await client.post(
            "/api/v1/cart/items", json={"product_id": sold_out.id, "quantity": 2}, headers=buyer_headers
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Out of stock"
        assert (await client.get("/api/v1/orders", headers=buyer_headers)).status_code == 200

    @pytest.mark.asyncio
    async def test_empty_cart_is_bad_request(self, client: AsyncClient, users, address, buyer_headers):
        response = await client.post(
            "/api/v1/checkout/orders", json={"address_id": address.id}, headers=buyer_headers
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Your cart is empty"

    @pytest.mark.asyncio
    async def test_seller_cancels_with_reason(self, client: AsyncClient, listing, address, buyer_headers, seller_headers):
        order_id = await _checkout(client, buyer_headers, listing.id, address.id)

        response = await client.post(
            f"/api/v1/seller/orders/{order_id}/cancel", json={"reason": "Out of stock"}, headers=seller_headers
        )

        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"
        assert response.json()["timeline_index"] == -1

    @pytest.mark.asyncio
    async def test_buyer_cannot_advance(self, client: AsyncClient, listing, address, buyer_headers, seller_headers, seed, auth_provider):
        order_id = await _checkout(client, buyer_headers, listing.id, address.id)
        other = await seed.profile(role=UserRole.BOTH, full_name="Other Seller")
        auth_provider.tokens["other-token"] = other.id

        response = await client.post(
            f"/api/v1/seller/orders/{order_id}/advance", headers={"Authorization": "Bearer other-token"}
        )
        assert response.status_code == 403


class TestReturnsAndReviews:

    @pytest.mark.asyncio
    async def test_return_with_photos(
        self, client: AsyncClient, listing, address, storage, buyer_headers, seller_headers
    ):
        order_id = await _checkout(client, buyer_headers, listing.id, address.id)
        for _ in range(4):
            await client.post(f"/api/v1/seller/orders/{order_id}/advance", headers=seller_headers)
        order = (await client.get(f"/api/v1/orders/{order_id}", headers=buyer_headers)).json()
        assert order["can_request_return"]

        payload = {
            "items": [{"order_item_id": order["items"][0]["id"], "quantity": 2}],
            "reason": "less_quantity",
            "description": "Only 2 kg arrived",
        }
        response = await client.post(
            f"/api/v1/orders/{order_id}/returns",
            data={"payload": json.dumps(payload)},
            files=[("photos", ("proof.jpg", b"\xff\xd8jpeg", "image/jpeg"))],
            headers=buyer_headers,
        )

        assert response.status_code == 201, response.text
        ret = response.json()
        assert ret["reason_label"] == "Less Quantity"
        assert len(ret["photos"]) == 1
        assert len(storage.objects) == 1

        inbox = await client.get("/api/v1/seller/returns", params={"status": "pending"}, headers=seller_headers)
        assert [r["id"] for r in inbox.json()] == [ret["id"]]

        rejected = await client.post(f"/api/v1/seller/returns/{ret['id']}/reject", headers=seller_headers)
        assert rejected.json()["status"] == "rejected"

        mine = await client.get(f"/api/v1/returns/{ret['id']}", headers=buyer_headers)
        assert mine.json()["timeline_index"] == -1

    @pytest.mark.asyncio
    async def test_return_before_delivery_is_rejected(self, client: AsyncClient, listing, address, buyer_headers):
        order_id = await _checkout(client, buyer_headers, listing.id, address.id)
        order = (await client.get(f"/api/v1/orders/{order_id}", headers=buyer_headers)).json()
        payload = {"items": [{"order_item_id": order["items"][0]["id"], "quantity": 1}], "reason": "wrong_item"}

        response = await client.post(
            f"/api/v1/orders/{order_id}/returns", data={"payload": json.dumps(payload)}, headers=buyer_headers
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_review_flow(self, client: AsyncClient, listing, address, buyer_headers, seller_headers):
        denied = await client.post(
            f"/api/v1/products/{listing.id}/reviews", json={"rating": 5}, headers=buyer_headers
        )
        assert denied.status_code == 403

        order_id = await _checkout(client, buyer_headers, listing.id, address.id)
        await client.post(f"/api/v1/seller/orders/{order_id}/advance", headers=seller_headers)

        created = await client.post(
            f"/api/v1/products/{listing.id}/reviews", json={"rating": 5, "comment": "Juicy"}, headers=buyer_headers
        )
        assert created.status_code == 201

        duplicate = await client.post(
            f"/api/v1/products/{listing.id}/reviews", json={"rating": 4}, headers=buyer_headers
        )
        assert duplicate.status_code == 409

        listed = await client.get(f"/api/v1/products/{listing.id}/reviews", headers=buyer_headers)
        assert listed.json()["has_reviewed"]
        assert len(listed.json()["reviews"]) == 1


class TestAccount:

    @pytest.mark.asyncio
    async def test_profile_addresses_and_wishlist(self, client: AsyncClient, listing, buyer_headers):
        me = await client.patch("/api/v1/me", json={"full_name": "Asha K"}, headers=buyer_headers)
        assert me.json()["full_name"] == "Asha K"

        seller_mode = await client.post("/api/v1/me/mode", json={"mode": "seller"}, headers=buyer_headers)
        assert seller_mode.status_code == 403

        added = await client.post(
            "/api/v1/addresses",
            json={
                "label": "Work", "full_name": "Asha", "phone": "98", "street": "1 Mill Rd",
                "city": "Pune", "pincode": "411001",
            },
            headers=buyer_headers,
        )
        assert added.status_code == 201
        assert added.json()["is_default"]

        toggled = await client.post(f"/api/v1/wishlist/products/{listing.id}/toggle", headers=buyer_headers)
        assert toggled.json()["saved"]
        wishlist = await client.get("/api/v1/wishlist", headers=buyer_headers)
        entry_id = wishlist.json()["products"][0]["id"]

        removed = await client.delete(f"/api/v1/wishlist/product/{entry_id}", headers=buyer_headers)
        assert removed.status_code == 204

    @pytest.mark.asyncio
    async def test_farm(self, client: AsyncClient, users, seller_headers):
        saved = await client.put(
            "/api/v1/seller/farm", json={"name": "Ravi Farms", "crops_growing": ["Tomato"]}, headers=seller_headers
        )
        assert saved.status_code == 200
        assert (await client.get("/api/v1/seller/farm", headers=seller_headers)).json()["name"] == "Ravi Farms"


class TestMessaging:

    @pytest.mark.asyncio
    async def test_chat_round_trip(self, client: AsyncClient, listing, buyer_headers, seller_headers):
        conv = await client.post("/api/v1/conversations", json={"product_id": listing.id}, headers=buyer_headers)
        assert conv.status_code == 200
        conv_id = conv.json()["id"]

        sent = await client.post(
            f"/api/v1/conversations/{conv_id}/messages", json={"content": "Still available?"}, headers=buyer_headers
        )
        assert sent.status_code == 201

        image = await client.post(
            f"/api/v1/conversations/{conv_id}/images",
            files={"image": ("crate.png", b"png", "image/png")},
            headers=buyer_headers,
        )
        assert image.status_code == 201
        assert image.json()["message_type"] == "image"

        read = await client.post(f"/api/v1/conversations/{conv_id}/read", headers=seller_headers)
        assert read.json() == {"marked": 2}

        messages = await client.get(f"/api/v1/conversations/{conv_id}/messages", headers=seller_headers)
        assert len(messages.json()) == 2

        inbox = await client.get("/api/v1/conversations", params={"search": "asha"}, headers=seller_headers)
        assert [c["id"] for c in inbox.json()] == [conv_id]
