# Endpoints for learning material: weak-area plans, role learning paths, skills and study guides
# interview_prep/endpoints/learning.py
from fastapi import APIRouter

from interview_prep.models.flows import (
    GenerateLearningPathsInput,
    GenerateLearningPlanInput,
    GenerateLearningPlanOutput,
    GenerateSkillsInput,
    GenerateSkillsOutput,
    GenerateStudyGuideInput,
    GenerateStudyGuideOutput,
    LearningPathResponse,
)
from interview_prep.services import flows
from interview_prep.utils.logger import logger

router = APIRouter()


@router.post("/plan", response_model=GenerateLearningPlanOutput)
async def learning_plan(request: GenerateLearningPlanInput):
    logger.info(f"Learning plan requested for role '{request.role_name}'")
    return await flows.generate_learning_plan(request)


@router.post("/paths", response_model=LearningPathResponse)
async def learning_paths(request: GenerateLearningPathsInput):
    logger.info(f"Learning path requested for role '{request.role_name}' at '{request.company_name}'")
    path = await flows.generate_learning_paths(request)
    return LearningPathResponse(skills=path.skills, markdown=path.to_markdown())


@router.post("/skills", response_model=GenerateSkillsOutput)
async def skills_for_role(request: GenerateSkillsInput):
    logger.info(f"Skills requested for role '{request.role_name}' at '{request.company_name}'")
    return await flows.generate_skills_for_role(request)


@router.post("/study-guide", response_model=GenerateStudyGuideOutput)
async def study_guide(request: GenerateStudyGuideInput):
    logger.info(f"Study guide requested for {len(request.skills)} skill(s)")
    return await flows.generate_study_guide(request)
