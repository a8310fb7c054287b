# interview_prep/endpoints/audio.py
from fastapi import APIRouter

from interview_prep.models.flows import GenerateAudioInput, GenerateAudioOutput
from interview_prep.services import audio_service

router = APIRouter()


@router.post("/", response_model=GenerateAudioOutput)
async def narrate(request: GenerateAudioInput):
    return await audio_service.generate_audio(request)
