# tests/test_learning_api.py
import json

from fastapi.testclient import TestClient


def skill(name, n_resources=2):
    return {
        "name": name,
        "description": f"Working knowledge of {name}.",
        "resources": [{"title": f"{name} {i}", "url": f"https://example.com/{name}/{i}"} for i in range(n_resources)],
    }


class TestLearningPlanAPI:
    def test_generate_plan(self, client: TestClient, fake_llm):
        fake_llm(json.dumps({"learning_plan": "## Concurrency\n- Locks\n- Queues"}))

        response = client.post("/learning/plan", json={
            "role_name": "Backend Engineer",
            "questions": ["What is a race condition?"],
            "weak_areas": "Did not mention locking.",
        })
        assert response.status_code == 200
        assert response.json()["learning_plan"].startswith("## Concurrency")

    def test_plan_failure(self, client: TestClient, fake_llm):
        fake_llm("{}")
        response = client.post("/learning/plan", json={
            "role_name": "Backend Engineer", "questions": [], "weak_areas": "Everything.",
        })
        assert response.status_code == 502
        assert response.json()["detail"] == "Failed to generate learning plan from AI. Please try again."


class TestLearningPathAPI:
    def test_generate_path_with_markdown(self, client: TestClient, fake_llm):
        fake_llm(json.dumps({"skills": [skill("SQL"), skill("Caching", 3)]}))

        response = client.post("/learning/paths", json={
            "role_name": "Backend Engineer", "company_name": "Amazon", "questions": ["Explain indexing."],
        })
        assert response.status_code == 200
        data = response.json()
        assert [s["name"] for s in data["skills"]] == ["SQL", "Caching"]
        assert data["markdown"].startswith("### SQL\nWorking knowledge of SQL.\n*   [SQL 0](https://example.com/SQL/0)")
        assert "\n\n### Caching\n" in data["markdown"]

    def test_path_failure(self, client: TestClient, fake_llm):
        fake_llm(json.dumps({"skills": []}))
        response = client.post("/learning/paths", json={
            "role_name": "Backend Engineer", "company_name": "Amazon", "questions": [],
        })
        assert response.status_code == 502
        assert response.json()["detail"] == "Failed to generate learning path from AI. Please try again."


class TestSkillsAndStudyGuideAPI:
    def test_skills_then_study_guide(self, client: TestClient, fake_llm):
        fake_llm(
            json.dumps({"skills": ["Distributed systems", "Python"]}),
            json.dumps({"study_guide": "# Study Guide\n## Python\n- [Docs](https://docs.python.org)"}),
        )

        skills = client.post("/learning/skills", json={"role_name": "SDE", "company_name": "Amazon"})
        assert skills.status_code == 200
        assert skills.json()["skills"] == ["Distributed systems", "Python"]

        guide = client.post("/learning/study-guide", json={"skills": skills.json()["skills"]})
        assert guide.status_code == 200
        assert guide.json()["study_guide"].startswith("# Study Guide")

    def test_study_guide_needs_skills(self, client: TestClient):
        assert client.post("/learning/study-guide", json={"skills": []}).status_code == 422

    def test_skills_failure(self, client: TestClient, fake_llm):
        fake_llm("not json")
        response = client.post("/learning/skills", json={"role_name": "SDE", "company_name": "Amazon"})
        assert response.status_code == 502
        assert response.json()["detail"] == "Failed to generate skills from AI. Please try again."
