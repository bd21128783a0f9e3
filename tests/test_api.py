"""Tests for API endpoints."""

import pytest


@pytest.mark.asyncio
class TestAPIEndpoints:
    """Test API endpoints."""

    async def test_shorten_url(self, client, sample_urls):
        """Test POST /api/shorten."""
        response = await client.post(
            "/api/shorten",
            json={"url": sample_urls[0]}
        )

        assert response.status_code == 200
        data = response.json()
        assert len(data["short_code"]) == 7
        assert data["original_url"] == sample_urls[0]
        assert data["short_url"] == f"http://testserver/{data['short_code']}"

    async def test_shorten_normalizes(self, client):
        response = await client.post("/api/shorten", json={"url": "example.com"})

        assert response.status_code == 200
        assert response.json()["original_url"] == "https://example.com"

    async def test_shorten_with_custom_code(self, client, sample_urls):
        """Test POST /api/shorten with custom code."""
        response = await client.post(
            "/api/shorten",
            json={
                "url": sample_urls[0],
                "custom_code": "test123"
            }
        )

        assert response.status_code == 200
        data = response.json()
        assert data["short_code"] == "test123"

        redirect = await client.get("/test123", follow_redirects=False)
        assert redirect.status_code == 301
        assert redirect.headers["location"] == sample_urls[0]

    async def test_shorten_invalid_url(self, client, store):
        """Test POST /api/shorten with invalid URL."""
        response = await client.post(
            "/api/shorten",
            json={"url": "not a url"}
        )

        assert response.status_code == 400
        assert "Invalid URL" in response.json()["detail"]
        assert len(store) == 0

    async def test_shorten_empty_url(self, client, store):
        response = await client.post("/api/shorten", json={"url": ""})

        assert response.status_code == 400
        assert response.json()["detail"] == "Missing URL"
        assert len(store) == 0

    @pytest.mark.parametrize("custom_code", ["abc", "x" * 21, "bad code!"])
    async def test_shorten_invalid_custom_code(self, client, store, custom_code):
        response = await client.post(
            "/api/shorten",
            json={"url": "https://example.com", "custom_code": custom_code}
        )

        assert response.status_code == 400
        assert "Invalid short code" in response.json()["detail"]
        assert len(store) == 0

    async def test_shorten_duplicate_custom_code(self, client, sample_urls):
        """Test POST /api/shorten with duplicate custom code."""
        custom_code = "duplicate123"

        await client.post(
            "/api/shorten",
            json={"url": sample_urls[0], "custom_code": custom_code}
        )

        response = await client.post(
            "/api/shorten",
            json={"url": sample_urls[1], "custom_code": custom_code}
        )

        assert response.status_code == 409

    async def test_get_url_info(self, client, sample_urls):
        """Test GET /api/urls/{short_code}."""
        create_response = await client.post(
            "/api/shorten",
            json={"url": sample_urls[0]}
        )
        short_code = create_response.json()["short_code"]

        response = await client.get(f"/api/urls/{short_code}")

        assert response.status_code == 200
        data = response.json()
        assert data["short_code"] == short_code
        assert data["original_url"] == sample_urls[0]
        assert data["created_at"] == create_response.json()["created_at"]

    async def test_get_url_info_not_found(self, client):
        """Test GET /api/urls/{short_code} for nonexistent code."""
        response = await client.get("/api/urls/nonexistent")

        assert response.status_code == 404

    async def test_health_check(self, client):
        """Test GET /api/health."""
        response = await client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["store"] == "healthy"
        assert "timestamp" in data

    async def test_statistics(self, client, sample_urls):
        """Test GET /api/stats."""
        await client.post("/api/shorten", json={"url": sample_urls[0]})

        response = await client.get("/api/stats")

        assert response.status_code == 200
        data = response.json()
        assert data["total_urls"] == 1
        assert data["reserved"] == 0
        assert data["store"] == "memory"
        assert data["custom_codes_enabled"] is True
