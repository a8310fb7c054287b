# interview_prep/endpoints/assessment.py
from fastapi import APIRouter

from interview_prep.models.flows import AssessUserAnswerInput, AssessUserAnswerOutput
from interview_prep.services import flows
from interview_prep.utils.logger import logger

router = APIRouter()


@router.post("/", response_model=AssessUserAnswerOutput)
async def assess_answer(request: AssessUserAnswerInput):
    """Grades a free-text answer: score out of 100, strengths and gaps."""
    logger.info(f"Assessment requested for role '{request.role}'")
    return await flows.assess_user_answer(request)
