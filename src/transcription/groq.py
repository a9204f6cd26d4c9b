"""GroqTranscriptionClient — Groq-hosted Whisper over a plain multipart POST."""
import json
import logging
import time
from dataclasses import dataclass
from typing import Optional

import httpx

from src.constants import (
    AUDIO_FILENAME,
    AUDIO_MIME_TYPE,
    GROQ_MODEL,
    GROQ_TRANSCRIPTION_URL,
    MSG_API_STATUS,
    MSG_GROQ_KEY_MISSING,
    MSG_SENDING,
    MSG_TRANSCRIBE_DONE,
    MSG_TRANSCRIBE_START,
    MSG_UNKNOWN_API_ERROR,
    MSG_WAV_READY,
)
from src.errors import DeserializationError, RemoteApiError, TransportError
from src.transcription.client import AudioSamples, TranscriptionClient, form_fields, require_api_key
from src.transcription.wav import samples_to_wav

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranscriptionResponse:
    text: str

    @classmethod
    def from_body(cls, body: bytes) -> "TranscriptionResponse":
        try:
            payload = json.loads(body)
        except ValueError as exc:
            raise DeserializationError(f"Response body is not valid JSON: {exc}") from exc

        match payload:
            case {"text": str() as text}:
                return cls(text=text)
            case _:
                raise DeserializationError("Response JSON has no string 'text' field")


class GroqTranscriptionClient(TranscriptionClient):

    def __init__(
        self,
        api_key: Optional[str],
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._api_key = api_key
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient()

    async def __aenter__(self) -> "GroqTranscriptionClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def transcribe(self, audio: AudioSamples, language: Optional[str] = None) -> str:
        api_key = require_api_key(self._api_key, MSG_GROQ_KEY_MISSING)

        start = time.monotonic()
        logger.debug(MSG_TRANSCRIBE_START, "Groq", len(audio))

        wav_bytes = samples_to_wav(audio)
        logger.debug(MSG_WAV_READY, len(wav_bytes))

        logger.debug(MSG_SENDING, "Groq API")
        try:
            response = await self._http.post(
                GROQ_TRANSCRIPTION_URL,
                headers={"Authorization": f"Bearer {api_key}"},
                data=form_fields(GROQ_MODEL, language),
                files={"file": (AUDIO_FILENAME, wav_bytes, AUDIO_MIME_TYPE)},
            )
        except httpx.RequestError as exc:
            raise TransportError(f"Groq request failed: {exc}") from exc

        if not response.is_success:
            logger.warning(MSG_API_STATUS, "Groq", response.status_code)
            raise RemoteApiError(response.status_code, _error_body(response))

        result = TranscriptionResponse.from_body(response.content)

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.info(MSG_TRANSCRIBE_DONE, "Groq", elapsed_ms, result.text)

        return result.text.strip()


def _error_body(response: httpx.Response) -> str:
    try:
        return response.text
    except (httpx.StreamError, UnicodeDecodeError):
        return MSG_UNKNOWN_API_ERROR
