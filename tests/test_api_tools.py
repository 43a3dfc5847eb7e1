from conftest import signup


def _unlock(client, headers, tool_id):
    return client.post(f"/api/tools/{tool_id}/unlock", headers=headers)


class TestCatalog:
    def test_list_seeds_catalog(self, client):
        res = client.get("/api/tools")

        assert res.status_code == 200
        tools = res.json()
        assert [t["id"] for t in tools] == ["1", "2", "3", "4", "5", "6"]
        assert tools[0]["rating"] == 0.0

    def test_get_tool(self, client):
        client.get("/api/tools")
        res = client.get("/api/tools/2")
        assert res.status_code == 200
        assert res.json()["title"] == "A/B Test Significance Calculator"

    def test_get_missing_tool(self, client):
        res = client.get("/api/tools/nope")
        assert res.status_code == 404
        assert res.json() == {"error": "Tool not found."}


class TestUnlock:
    def test_unlock_spends_credits(self, client, auth_headers):
        client.get("/api/tools")
        res = _unlock(client, auth_headers, "1")

        assert res.status_code == 200
        body = res.json()
        assert body["user"]["credits"] == 5 - body["tool"]["cost"]
        assert body["user"]["unlocked_tools"] == ["1"]

    def test_unlock_twice(self, client, auth_headers):
        client.get("/api/tools")
        _unlock(client, auth_headers, "1")
        res = _unlock(client, auth_headers, "1")
        assert res.status_code == 400
        assert res.json() == {"error": "Tool already unlocked."}

    def test_not_enough_credits(self, client, auth_headers):
        client.get("/api/tools")
        assert _unlock(client, auth_headers, "1").status_code == 200
        res = _unlock(client, auth_headers, "2")
        assert res.status_code == 400
        assert res.json() == {"error": "Not enough credits."}

    def test_requires_auth(self, client):
        client.get("/api/tools")
        assert _unlock(client, {}, "1").status_code == 401


class TestReviewsApi:
    def test_review_flow(self, client, auth_headers):
        client.get("/api/tools")
        _unlock(client, auth_headers, "1")

        res = client.post(
            "/api/tools/1/reviews",
            headers=auth_headers,
            json={"rating": 5, "comment": "Saved me hours."},
        )
        assert res.status_code == 201
        assert res.json()["rating"] == 5

        reviews = client.get("/api/tools/1/reviews").json()
        assert [r["comment"] for r in reviews] == ["Saved me hours."]

        tool = client.get("/api/tools/1").json()
        assert tool["review_count"] == 1
        assert tool["rating"] == 5.0

        me = client.get("/api/auth/me", headers=auth_headers).json()
        assert me["credits"] == 5 - 3 + 1

    def test_review_without_unlock(self, client, auth_headers):
        client.get("/api/tools")
        res = client.post(
            "/api/tools/1/reviews",
            headers=auth_headers,
            json={"rating": 5, "comment": "Looks nice."},
        )
        assert res.status_code == 403

    def test_review_bad_rating(self, client, auth_headers):
        client.get("/api/tools")
        _unlock(client, auth_headers, "1")
        res = client.post(
            "/api/tools/1/reviews", headers=auth_headers, json={"rating": 9, "comment": "x"}
        )
        assert res.status_code == 400


class TestCredits:
    def test_buy(self, client, auth_headers):
        res = client.post("/api/credits/buy", headers=auth_headers, json={"credits": 10})
        assert res.status_code == 200
        assert res.json()["credits"] == 15

    def test_buy_invalid(self, client, auth_headers):
        res = client.post("/api/credits/buy", headers=auth_headers, json={"credits": 0})
        assert res.status_code == 400
        assert res.json() == {"error": "Invalid number of credits."}

    def test_buy_non_integer(self, client, auth_headers):
        res = client.post("/api/credits/buy", headers=auth_headers, json={"credits": "ten"})
        assert res.status_code == 400
        assert res.json()["error"] == "Validation error"

    def test_balances_are_per_user(self, client, auth_headers):
        other_headers, _ = signup(client, "other@example.com")
        client.post("/api/credits/buy", headers=auth_headers, json={"credits": 10})
        other = client.get("/api/auth/me", headers=other_headers).json()
        assert other["credits"] == 5
