# tests/test_flows.py
import asyncio
import json

import pytest

from interview_prep.models.flows import (
    AssessUserAnswerInput,
    GenerateLearningPathsInput,
    GenerateMcqInput,
    GenerateSkillsInput,
    GenerateStudyGuideInput,
)
from interview_prep.services import flows
from interview_prep.services.prompt_library import PROMPT_LIBRARY, bullet_list, expected_answer_section
from interview_prep.utils.exceptions import FlowError

ASSESS_INPUT = AssessUserAnswerInput(
    question="What is dependency injection?",
    user_answer="Passing collaborators in instead of creating them.",
    role="Backend Engineer",
)


def resource(n):
    return {"title": f"Resource {n}", "url": f"https://example.com/{n}"}


class TestAssessment:
    def test_structured_output_is_parsed(self, fake_llm):
        fake_llm(json.dumps({"score": 85, "strengths": "Precise definition.", "gaps": "No example."}))

        result = asyncio.run(flows.assess_user_answer(ASSESS_INPUT))
        assert result.score == 85
        assert result.strengths == "Precise definition."
        assert result.gaps == "No example."

    def test_fenced_json_is_accepted(self, fake_llm):
        fake_llm('```json\n{"score": 55.6, "strengths": "Some.", "gaps": "Many."}\n```')
        assert asyncio.run(flows.assess_user_answer(ASSESS_INPUT)).score == 56

    def test_out_of_range_score_is_clamped(self, fake_llm):
        fake_llm(json.dumps({"score": 140, "strengths": "s", "gaps": "g"}))
        assert asyncio.run(flows.assess_user_answer(ASSESS_INPUT)).score == 100

    def test_malformed_output_raises_flow_error(self, fake_llm):
        fake_llm("I think the answer is pretty good!")

        with pytest.raises(FlowError) as exc_info:
            asyncio.run(flows.assess_user_answer(ASSESS_INPUT))
        assert exc_info.value.message == flows.ASSESSMENT_FAILED
        assert exc_info.value.details["flow"] == "assess_user_answer"

    def test_missing_configuration_surfaces_as_flow_error(self, unconfigured_provider):
        with pytest.raises(FlowError) as exc_info:
            asyncio.run(flows.assess_user_answer(ASSESS_INPUT))
        assert exc_info.value.message == flows.ASSESSMENT_FAILED


class TestPrompts:
    def test_expected_answer_only_included_when_present(self):
        template = PROMPT_LIBRARY["assess_user_answer"]
        common = dict(role="SRE", question="Q?", user_answer="A.", format_instructions="")

        with_expected = template.format(expected_answer_section=expected_answer_section("Reference answer"), **common)
        without = template.format(expected_answer_section=expected_answer_section(None), **common)

        assert "Here is the expected answer:\nReference answer" in with_expected
        assert "expected answer" not in without

    def test_lists_render_as_bullets(self):
        assert bullet_list(["Python", "SQL"]) == "- Python\n- SQL"


class TestMcq:
    def test_correct_answer_must_be_an_option(self, fake_llm):
        fake_llm(json.dumps({
            "mcq_question": "Which HTTP verb is idempotent?",
            "options": ["POST", "PUT", "PATCH", "CONNECT"],
            "correct_answer": "GET",
        }))
        with pytest.raises(FlowError) as exc_info:
            asyncio.run(flows.generate_mcq(GenerateMcqInput(question="Explain REST.", role="Backend")))
        assert exc_info.value.message == flows.MCQ_FAILED

    def test_whitespace_is_normalised(self, fake_llm):
        fake_llm(json.dumps({
            "mcq_question": "Which HTTP verb is idempotent?",
            "options": [" POST", "PUT ", "PATCH", "CONNECT"],
            "correct_answer": " PUT",
        }))
        mcq = asyncio.run(flows.generate_mcq(GenerateMcqInput(question="Explain REST.", role="Backend")))

        assert mcq.options == ["POST", "PUT", "PATCH", "CONNECT"]
        assert mcq.correct_answer == "PUT"
        assert mcq.is_correct("PUT ")
        assert not mcq.is_correct("POST")


class TestLearningMaterial:
    def test_learning_path_keeps_at_most_three_resources(self, fake_llm):
        fake_llm(json.dumps({"skills": [{
            "name": "System Design",
            "description": "Designing large-scale systems.",
            "resources": [resource(1), resource(2), resource(3), resource(4)],
        }]}))
        path = asyncio.run(flows.generate_learning_paths(GenerateLearningPathsInput(
            role_name="SDE", company_name="Amazon", questions=["Design a URL shortener."],
        )))

        assert len(path.skills[0].resources) == 3
        assert path.to_markdown() == (
            "### System Design\n"
            "Designing large-scale systems.\n"
            "*   [Resource 1](https://example.com/1)\n"
            "*   [Resource 2](https://example.com/2)\n"
            "*   [Resource 3](https://example.com/3)"
        )

    def test_learning_path_needs_two_resources_per_skill(self, fake_llm):
        fake_llm(json.dumps({"skills": [{"name": "SQL", "description": "Queries.", "resources": [resource(1)]}]}))
        with pytest.raises(FlowError):
            asyncio.run(flows.generate_learning_paths(GenerateLearningPathsInput(
                role_name="Analyst", company_name="Acme", questions=[],
            )))

    def test_skills_drop_blank_entries(self, fake_llm):
        fake_llm(json.dumps({"skills": ["Python", "  ", "Communication "]}))
        result = asyncio.run(flows.generate_skills_for_role(GenerateSkillsInput(role_name="SDE", company_name="Acme")))
        assert result.skills == ["Python", "Communication"]

    def test_empty_study_guide_is_malformed(self, fake_llm):
        fake_llm(json.dumps({"study_guide": ""}))
        with pytest.raises(FlowError) as exc_info:
            asyncio.run(flows.generate_study_guide(GenerateStudyGuideInput(skills=["Python"])))
        assert exc_info.value.message == flows.STUDY_GUIDE_FAILED
