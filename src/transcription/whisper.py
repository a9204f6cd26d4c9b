"""WhisperTranscriptionClient — OpenAI Whisper speech-to-text backend."""
import io
import logging
import time
from typing import Optional

from openai import APIConnectionError, APIResponseValidationError, APIStatusError, AsyncOpenAI

from src.constants import (
    AUDIO_FILENAME,
    MSG_API_STATUS,
    MSG_OPENAI_KEY_MISSING,
    MSG_TRANSCRIBE_DONE,
    MSG_TRANSCRIBE_START,
    TRANSCRIPTION_RESPONSE_FORMAT,
    WHISPER_MODEL,
)
from src.errors import DeserializationError, RemoteApiError, TransportError
from src.transcription.client import AudioSamples, TranscriptionClient, language_hint, require_api_key
from src.transcription.wav import samples_to_wav

logger = logging.getLogger(__name__)


class WhisperTranscriptionClient(TranscriptionClient):

    def __init__(self, api_key: Optional[str]) -> None:
        self._api_key = api_key

    async def transcribe(self, audio: AudioSamples, language: Optional[str] = None) -> str:
        api_key = require_api_key(self._api_key, MSG_OPENAI_KEY_MISSING)

        start = time.monotonic()
        logger.debug(MSG_TRANSCRIBE_START, "Whisper", len(audio))

        audio_file = io.BytesIO(samples_to_wav(audio))
        audio_file.name = AUDIO_FILENAME
        hint = language_hint(language)
        extra = {} if hint is None else {"language": hint}
        try:
            async with AsyncOpenAI(api_key=api_key, max_retries=0) as client:
                response = await client.audio.transcriptions.create(
                    model=WHISPER_MODEL,
                    file=audio_file,
                    temperature=0,
                    response_format=TRANSCRIPTION_RESPONSE_FORMAT,
                    **extra,
                )
        except APIStatusError as exc:
            logger.warning(MSG_API_STATUS, "OpenAI", exc.status_code)
            raise RemoteApiError(exc.status_code, exc.response.text) from exc
        except APIConnectionError as exc:
            raise TransportError(f"OpenAI request failed: {exc}") from exc
        except APIResponseValidationError as exc:
            raise DeserializationError(f"Unexpected OpenAI response: {exc}") from exc

        match getattr(response, "text", None):
            case str() as text:
                pass
            case _:
                raise DeserializationError("OpenAI response has no string 'text' field")

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.info(MSG_TRANSCRIBE_DONE, "Whisper", elapsed_ms, text)

        return text.strip()
