# Model-backed flows: each pairs one template from PROMPT_LIBRARY with an output schema
# and runs it through the shared LLM client.
# interview_prep/services/flows.py
from typing import Type, TypeVar

from pydantic import BaseModel
from langchain_core.output_parsers import PydanticOutputParser

from interview_prep.models.flows import (
    AssessUserAnswerInput,
    AssessUserAnswerOutput,
    GenerateLearningPathsInput,
    GenerateLearningPlanInput,
    GenerateLearningPlanOutput,
    GenerateMcqInput,
    GenerateSkillsInput,
    GenerateSkillsOutput,
    GenerateStudyGuideInput,
    GenerateStudyGuideOutput,
    LearningPath,
    Mcq,
)
from interview_prep.services import llm_client
from interview_prep.services.prompt_library import PROMPT_LIBRARY, bullet_list, expected_answer_section
from interview_prep.utils.exceptions import FlowError
from interview_prep.utils.logger import logger

ASSESSMENT_FAILED = "Failed to get assessment from AI. Please try again."
LEARNING_PLAN_FAILED = "Failed to generate learning plan from AI. Please try again."
LEARNING_PATH_FAILED = "Failed to generate learning path from AI. Please try again."
MCQ_FAILED = "Failed to generate multiple-choice question from AI. Please try again."
SKILLS_FAILED = "Failed to generate skills from AI. Please try again."
STUDY_GUIDE_FAILED = "Failed to generate study guide from AI. Please try again."

OutputT = TypeVar("OutputT", bound=BaseModel)


def get_flow_chain(flow_name: str, output_model: Type[OutputT]):
    """Builds ``prompt | llm | parser`` for a flow, with the schema's format instructions baked in."""
    parser = PydanticOutputParser(pydantic_object=output_model)
    prompt = PROMPT_LIBRARY[flow_name].partial(format_instructions=parser.get_format_instructions())
    return prompt | llm_client.get_llm() | parser


async def run_flow(flow_name: str, output_model: Type[OutputT], variables: dict, failure_message: str) -> OutputT:
    logger.info(f"Running flow '{flow_name}'...")
    try:
        chain = get_flow_chain(flow_name, output_model)
        result = await chain.ainvoke(variables)
    except Exception as e:
        logger.exception(f"Flow '{flow_name}' failed: {e}")
        raise FlowError(failure_message, {"flow": flow_name, "error": str(e)}) from e

    if result is None:
        logger.error(f"Flow '{flow_name}' returned no output.")
        raise FlowError(failure_message, {"flow": flow_name, "error": "empty output"})
    logger.debug(f"Flow '{flow_name}' output: {result!r}")
    return result


async def assess_user_answer(flow_input: AssessUserAnswerInput) -> AssessUserAnswerOutput:
    return await run_flow(
        "assess_user_answer",
        AssessUserAnswerOutput,
        {
            "role": flow_input.role,
            "question": flow_input.question,
            "user_answer": flow_input.user_answer,
            "expected_answer_section": expected_answer_section(flow_input.expected_answer),
        },
        ASSESSMENT_FAILED,
    )


async def generate_learning_plan(flow_input: GenerateLearningPlanInput) -> GenerateLearningPlanOutput:
    return await run_flow(
        "generate_learning_plan",
        GenerateLearningPlanOutput,
        {
            "role_name": flow_input.role_name,
            "questions": bullet_list(flow_input.questions),
            "weak_areas": flow_input.weak_areas,
        },
        LEARNING_PLAN_FAILED,
    )


async def generate_learning_paths(flow_input: GenerateLearningPathsInput) -> LearningPath:
    return await run_flow(
        "generate_learning_paths",
        LearningPath,
        {
            "role_name": flow_input.role_name,
            "company_name": flow_input.company_name,
            "questions": bullet_list(flow_input.questions),
        },
        LEARNING_PATH_FAILED,
    )


async def generate_mcq(flow_input: GenerateMcqInput) -> Mcq:
    return await run_flow(
        "generate_mcq",
        Mcq,
        {"role": flow_input.role, "question": flow_input.question},
        MCQ_FAILED,
    )


async def generate_skills_for_role(flow_input: GenerateSkillsInput) -> GenerateSkillsOutput:
    return await run_flow(
        "generate_skills_for_role",
        GenerateSkillsOutput,
        {"role_name": flow_input.role_name, "company_name": flow_input.company_name},
        SKILLS_FAILED,
    )


async def generate_study_guide(flow_input: GenerateStudyGuideInput) -> GenerateStudyGuideOutput:
    return await run_flow(
        "generate_study_guide",
        GenerateStudyGuideOutput,
        {"skills": bullet_list(flow_input.skills)},
        STUDY_GUIDE_FAILED,
    )
