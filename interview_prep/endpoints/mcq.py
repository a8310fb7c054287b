# interview_prep/endpoints/mcq.py
from fastapi import APIRouter

from interview_prep.models.flows import GenerateMcqInput, Mcq
from interview_prep.services import flows

router = APIRouter()


@router.post("/", response_model=Mcq)
async def generate_mcq(request: GenerateMcqInput):
    """Turns an open interview question into a single multiple-choice question."""
    return await flows.generate_mcq(request)
