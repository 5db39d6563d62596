import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_torre_client
from main import app
from services.torre_client import ProfileNotFoundError, UpstreamError


class FakeTorre:
    def __init__(self):
        self.search_results: dict[str, list[dict]] = {}
        self.stream_rows: list[dict] = []
        self.analysis: dict | Exception = {}
        self.bio: dict | Exception = {}

    async def search_people(self, term, limit, offset=0):
        return self.search_results.get(term, [])

    async def search_stream(self, query, limit):
        if isinstance(self.stream_rows, Exception):
            raise self.stream_rows
        return self.stream_rows

    async def analyze(self, payload):
        if isinstance(self.analysis, Exception):
            raise self.analysis
        return self.analysis

    async def fetch_bio(self, username):
        if isinstance(self.bio, Exception):
            raise self.bio
        return self.bio


@pytest.fixture
def torre():
    fake = FakeTorre()
    app.dependency_overrides[get_torre_client] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


class TestSkillDistribution:
    def test_empty_upstream(self, torre):
        response = client.get("/api/analyze/skill-distribution", params={"skill": "rust"})
        assert response.status_code == 200
        assert response.json() == {
            "skill": "rust",
            "distribution": [],
            "totalProfiles": 0,
            "source": "Torre.ai",
        }

    def test_distribution_shape(self, torre):
        torre.search_results["rust"] = [
            {"name": "Ana", "professionalHeadline": "Senior Rust Engineer", "completion": 0.9, "weight": 1.2},
            {"name": "Bo", "professionalHeadline": "Principal architect, Rust"},
        ]
        response = client.get("/api/analyze/skill-distribution", params={"skill": "rust"})
        assert response.status_code == 200
        data = response.json()
        assert data["totalProfiles"] == 2
        assert data["distribution"] == [
            {"level": "expert", "percentage": 100, "count": 2, "averageExperience": None}
        ]

    def test_missing_skill(self, torre):
        response = client.get("/api/analyze/skill-distribution")
        assert response.status_code == 422

    @pytest.mark.parametrize("skill", ["   ", " rust ", "x" * 300])
    def test_any_skill_gets_a_distribution(self, torre, skill):
        response = client.get("/api/analyze/skill-distribution", params={"skill": skill})
        assert response.status_code == 200
        data = response.json()
        assert data["skill"] == skill
        assert data["totalProfiles"] == 0
        assert data["distribution"] == []


class TestSkillCompensation:
    def test_ok(self, torre):
        torre.analysis = {"total": 40, "result": {"compensation": {"mean": 20, "suggested": 18, "min": 5, "max": 60}}}
        response = client.get("/api/analyze/skill-compensation", params={"skill": "python"})
        assert response.status_code == 200
        data = response.json()
        assert data["skill"] == "python"
        assert data["averageCompensation"] == 40000
        assert data["medianCompensation"] == 36000
        assert data["dataPoints"] == 40
        assert data["periodicity"] == "yearly"

    def test_upstream_failure(self, torre):
        torre.analysis = UpstreamError("Torre.ai API returned status: 503", status_code=503)
        response = client.get("/api/analyze/skill-compensation", params={"skill": "python"})
        assert response.status_code == 500


class TestSearchPeople:
    def test_ok(self, torre):
        torre.stream_rows = [{"ggId": "g1", "name": "Ana", "professionalHeadline": "Dev", "imageUrl": "http://x"}]
        response = client.post("/api/search/people", json={"query": "ana", "limit": 5})
        assert response.status_code == 200
        data = response.json()
        assert data["results"] == [
            {"id": "g1", "name": "Ana", "professionalHeadline": "Dev", "picture": "http://x", "username": "g1"}
        ]
        assert data["pagination"] == {"total": 1, "currentPage": 1, "pageSize": 20, "totalResults": 1}

    @pytest.mark.parametrize("body", [{"query": ""}, {"query": "  "}, {}])
    def test_empty_query(self, torre, body):
        response = client.post("/api/search/people", json=body)
        assert response.status_code == 400
        assert response.json()["detail"] == "Search query cannot be empty."

    def test_upstream_failure(self, torre):
        torre.stream_rows = UpstreamError("Torre API returned error: 500", status_code=500)
        response = client.post("/api/search/people", json={"query": "ana"})
        assert response.status_code == 500
        assert "Error searching people" in response.json()["detail"]["message"]


class TestProfile:
    def test_ok_drops_nulls(self, torre):
        torre.bio = {"person": {"name": "Ana &amp; Co", "publicId": "ana", "picture": None}, "strengths": []}
        response = client.get("/api/profile/ana")
        assert response.status_code == 200
        assert response.json() == {"person": {"name": "Ana & Co", "publicId": "ana"}, "strengths": []}

    def test_not_found(self, torre):
        torre.bio = ProfileNotFoundError("Profile 'ghost' not found", status_code=404)
        assert client.get("/api/profile/ghost").status_code == 404

    def test_upstream_failure(self, torre):
        torre.bio = UpstreamError("boom", status_code=500)
        assert client.get("/api/profile/ana").status_code == 500

    def test_blank_username(self, torre):
        assert client.get("/api/profile/%20").status_code == 400
