from conftest import signup

CONTRIBUTION = {
    "tool_name": "Landing Page Grader",
    "tool_url": "https://example.com/grader",
    "description": "Scores landing pages against conversion best practices.",
}


def _submit(client, headers):
    res = client.post("/api/contributions", headers=headers, json=CONTRIBUTION)
    assert res.status_code == 201, res.text
    return res.json()


class TestContributions:
    def test_submit_and_list_mine(self, client, auth_headers):
        created = _submit(client, auth_headers)
        assert created["status"] == "pending"
        assert created["user_email"] == "member@example.com"

        mine = client.get("/api/contributions/me", headers=auth_headers).json()
        assert [c["id"] for c in mine] == [created["id"]]

    def test_mine_excludes_others(self, client, auth_headers):
        other_headers, _ = signup(client, "other@example.com")
        _submit(client, other_headers)
        assert client.get("/api/contributions/me", headers=auth_headers).json() == []

    def test_invalid_url(self, client, auth_headers):
        res = client.post(
            "/api/contributions",
            headers=auth_headers,
            json={**CONTRIBUTION, "tool_url": "not a url"},
        )
        assert res.status_code == 400
        assert res.json() == {"error": "Please enter a valid URL."}


class TestAdmin:
    def test_member_is_forbidden(self, client, auth_headers):
        for method, path in [
            ("get", "/api/admin/contributions"),
            ("get", "/api/admin/tools"),
            ("delete", "/api/admin/tools/1"),
        ]:
            res = getattr(client, method)(path, headers=auth_headers)
            assert res.status_code == 403, path
            assert res.json() == {"error": "Forbidden"}

    def test_approve_publishes_tool(self, client, auth_headers, admin_headers):
        created = _submit(client, auth_headers)

        listed = client.get("/api/admin/contributions", headers=admin_headers).json()
        assert [c["id"] for c in listed] == [created["id"]]

        res = client.post(
            f"/api/admin/contributions/{created['id']}/approve", headers=admin_headers
        )
        assert res.status_code == 200
        assert res.json()["status"] == "approved"

        me = client.get("/api/auth/me", headers=auth_headers).json()
        assert me["credits"] == 5 + 10

        tools = client.get("/api/admin/tools", headers=admin_headers).json()
        community = [t for t in tools if t["category"] == "Community"]
        assert len(community) == 1
        assert community[0]["title"] == "Landing Page Grader"
        assert community[0]["cost"] == 2

        again = client.post(
            f"/api/admin/contributions/{created['id']}/reject", headers=admin_headers
        )
        assert again.status_code == 400

    def test_reject(self, client, auth_headers, admin_headers):
        created = _submit(client, auth_headers)
        res = client.post(
            f"/api/admin/contributions/{created['id']}/reject", headers=admin_headers
        )
        assert res.status_code == 200
        assert res.json()["status"] == "rejected"

        me = client.get("/api/auth/me", headers=auth_headers).json()
        assert me["credits"] == 5

    def test_unknown_contribution(self, client, admin_headers):
        res = client.post("/api/admin/contributions/not-a-uuid/approve", headers=admin_headers)
        assert res.status_code == 404

    def test_update_tool(self, client, admin_headers):
        client.get("/api/tools")
        res = client.put(
            "/api/admin/tools/3",
            headers=admin_headers,
            json={"title": "SEO Brief Pro", "cost": 1},
        )
        assert res.status_code == 200
        assert res.json()["title"] == "SEO Brief Pro"
        assert client.get("/api/tools/3").json()["cost"] == 1

    def test_update_tool_rejects_rating(self, client, admin_headers):
        client.get("/api/tools")
        res = client.put("/api/admin/tools/3", headers=admin_headers, json={"rating": 5})
        assert res.status_code == 400

    def test_delete_tool(self, client, admin_headers):
        client.get("/api/tools")
        res = client.delete("/api/admin/tools/4", headers=admin_headers)
        assert res.status_code == 200
        assert res.json() == {"id": "4", "deleted": True}
        assert client.get("/api/tools/4").status_code == 404
        assert client.delete("/api/admin/tools/4", headers=admin_headers).status_code == 404
