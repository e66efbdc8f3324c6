"""API tests for /api/customers"""

import pytest


@pytest.mark.asyncio
class TestCustomerApi:

    async def test_create_and_show(self, client, owner_headers):
        response = await client.post(
            "/api/customers",
            json={"name": "CV Sumber Rejeki", "email": "finance@sumberrejeki.com", "phone": "0812345678"},
            headers=owner_headers,
        )

        assert response.status_code == 201
        customer_id = response.json()["id"]

        shown = await client.get(f"/api/customers/{customer_id}", headers=owner_headers)
        assert shown.json()["email"] == "finance@sumberrejeki.com"

    async def test_duplicate_email_is_rejected(self, client, owner_headers, customer):
        response = await client.post(
            "/api/customers",
            json={"name": "Copycat", "email": "billing@majujaya.co.id"},
            headers=owner_headers,
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "CUSTOMER_EMAIL_TAKEN"

    async def test_invalid_email_is_rejected(self, client, owner_headers):
        response = await client.post(
            "/api/customers", json={"name": "Nobody", "email": "not-an-email"}, headers=owner_headers
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_update_customer(self, client, owner_headers, customer):
        response = await client.put(
            f"/api/customers/{customer.id}",
            json={"name": "PT Maju Jaya Tbk", "email": "billing@majujaya.co.id"},
            headers=owner_headers,
        )

        assert response.status_code == 200
        assert response.json()["name"] == "PT Maju Jaya Tbk"

    async def test_list_customers(self, client, owner_headers, customer):
        response = await client.get("/api/customers", headers=owner_headers)

        assert response.status_code == 200
        assert response.json()["total"] == 1

    async def test_delete_customer_in_use(self, client, owner_headers, customer):
        await client.post(
            "/api/invoices",
            json={
                "customer_id": customer.id,
                "due_date": "2024-02-29",
                "items": [{"item_name": "Service 1", "qty": 1, "price": 10}],
            },
            headers=owner_headers,
        )

        response = await client.delete(f"/api/customers/{customer.id}", headers=owner_headers)

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CUSTOMER_IN_USE"

    async def test_delete_customer(self, client, owner_headers, customer):
        customer_id = customer.id

        response = await client.delete(f"/api/customers/{customer_id}", headers=owner_headers)
        missing = await client.get(f"/api/customers/{customer_id}", headers=owner_headers)

        assert response.json() == {"message": "Customer deleted successfully"}
        assert missing.status_code == 404
