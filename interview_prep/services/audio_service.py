# Narrates text with the Gemini text-to-speech model and returns it as a WAV data URI.
# interview_prep/services/audio_service.py
import base64
import io
import threading
import wave

from google import genai
from google.genai import types

from interview_prep.models.flows import GenerateAudioInput, GenerateAudioOutput
from interview_prep.utils.config import settings
from interview_prep.utils.exceptions import FlowError
from interview_prep.utils.logger import logger

AUDIO_FAILED = "Failed to generate audio from AI. Please try again."

_genai_client = None
_init_lock = threading.Lock()


def get_genai_client() -> genai.Client:
    """Returns the GenAI SDK client used for speech synthesis, creating it on first use."""
    global _genai_client
    with _init_lock:
        if _genai_client is None:
            if not settings.google_api_key:
                raise ValueError("GOOGLE_API_KEY is required for audio generation")
            _genai_client = genai.Client(api_key=settings.google_api_key)
            logger.info(f"GenAI client initialised for TTS (model={settings.tts_model_name})")
    return _genai_client


def pcm_to_wav(pcm_data: bytes, channels: int = 1, rate: int = 24000, sample_width: int = 2) -> bytes:
    """Wraps raw little-endian PCM samples in a WAV container."""
    buffer = io.BytesIO()
    with wave.open(buffer, "wb") as wav_file:
        wav_file.setnchannels(channels)
        wav_file.setsampwidth(sample_width)
        wav_file.setframerate(rate)
        wav_file.writeframes(pcm_data)
    return buffer.getvalue()


def _speech_config() -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        response_modalities=["AUDIO"],
        speech_config=types.SpeechConfig(
            voice_config=types.VoiceConfig(
                prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=settings.tts_voice_name),
            ),
        ),
    )


def _extract_pcm(response) -> bytes | None:
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            inline = getattr(part, "inline_data", None)
            if inline is not None and inline.data:
                data = inline.data
                # Older SDK builds hand back base64 text instead of raw bytes.
                return base64.b64decode(data) if isinstance(data, str) else data
    return None


async def generate_audio(flow_input: GenerateAudioInput) -> GenerateAudioOutput:
    logger.info(f"Generating audio for {len(flow_input.text)} characters of text...")
    try:
        client = get_genai_client()
        response = await client.aio.models.generate_content(
            model=settings.tts_model_name,
            contents=flow_input.text,
            config=_speech_config(),
        )
    except Exception as e:
        logger.exception(f"TTS request failed: {e}")
        raise FlowError(AUDIO_FAILED, {"flow": "generate_audio", "error": str(e)}) from e

    pcm = _extract_pcm(response)
    if not pcm:
        logger.error("No media returned from TTS model.")
        raise FlowError(AUDIO_FAILED, {"flow": "generate_audio", "error": "no media"})

    wav_bytes = pcm_to_wav(
        pcm,
        channels=settings.tts_channels,
        rate=settings.tts_sample_rate,
        sample_width=settings.tts_sample_width,
    )
    return GenerateAudioOutput(media="data:audio/wav;base64," + base64.b64encode(wav_bytes).decode("ascii"))
