import pytest


class TestCalculators:
    def test_requires_auth(self, client):
        res = client.post("/api/tools/test-subject-line", json={"subject_line": "Hi"})
        assert res.status_code == 401

    def test_generate_headline(self, client, auth_headers):
        res = client.post(
            "/api/tools/generate-headline",
            headers=auth_headers,
            json={"topic": "SEO", "tone": "Witty"},
        )
        assert res.status_code == 200
        assert res.json()["headlines"][2] == "Confessions of a SEO Expert"

    def test_generate_headline_missing_tone(self, client, auth_headers):
        res = client.post(
            "/api/tools/generate-headline", headers=auth_headers, json={"topic": "SEO"}
        )
        assert res.status_code == 400
        assert res.json() == {"error": "Topic and tone are required."}

    def test_ab_test(self, client, auth_headers):
        res = client.post(
            "/api/tools/calculate-ab-test",
            headers=auth_headers,
            json={
                "visitors_a": 1000,
                "conversions_a": 100,
                "visitors_b": 1000,
                "conversions_b": 150,
            },
        )
        assert res.status_code == 200
        body = res.json()
        assert body["significant"] is True
        assert body["winner"] == "B"
        assert body["confidence"].endswith("%")

    def test_ab_test_invalid_values(self, client, auth_headers):
        res = client.post(
            "/api/tools/calculate-ab-test",
            headers=auth_headers,
            json={
                "visitors_a": 100,
                "conversions_a": 120,
                "visitors_b": 100,
                "conversions_b": 10,
            },
        )
        assert res.status_code == 400
        assert res.json() == {"error": "Invalid input values."}

    @pytest.mark.parametrize("bad", [10.5, "100", True, None])
    def test_ab_test_rejects_non_integers(self, client, auth_headers, bad):
        res = client.post(
            "/api/tools/calculate-ab-test",
            headers=auth_headers,
            json={
                "visitors_a": bad,
                "conversions_a": 10,
                "visitors_b": 100,
                "conversions_b": 10,
            },
        )
        assert res.status_code == 400

    def test_subject_line(self, client, auth_headers):
        res = client.post(
            "/api/tools/test-subject-line",
            headers=auth_headers,
            json={"subject_line": "Free guide"},
        )
        assert res.status_code == 200
        body = res.json()
        assert body["score"] == 80
        assert [f["type"] for f in body["feedback"]] == ["warning", "success", "info"]

    def test_subject_line_empty(self, client, auth_headers):
        res = client.post(
            "/api/tools/test-subject-line", headers=auth_headers, json={"subject_line": ""}
        )
        assert res.status_code == 400
        assert res.json() == {"error": "Subject line is required."}

    def test_calculators_do_not_need_unlock(self, client, auth_headers):
        """Running a calculator never spends credits."""
        client.post(
            "/api/tools/test-subject-line",
            headers=auth_headers,
            json={"subject_line": "Free guide"},
        )
        me = client.get("/api/auth/me", headers=auth_headers).json()
        assert me["credits"] == 5
        assert me["unlocked_tools"] == []
