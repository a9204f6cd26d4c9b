"""TranscriptionClient — abstract base for speech-to-text backends."""
from abc import ABC, abstractmethod
from typing import Optional, Sequence

import numpy as np

from src.constants import (
    LANGUAGE_AUTO,
    MSG_API_KEY_INVALID,
    TRANSCRIPTION_RESPONSE_FORMAT,
    TRANSCRIPTION_TEMPERATURE,
)
from src.errors import ConfigurationError

AudioSamples = Sequence[float] | np.ndarray


class TranscriptionClient(ABC):
    @abstractmethod
    async def transcribe(self, audio: AudioSamples, language: Optional[str] = None) -> str:
        """Convert 16 kHz mono float samples to text. Raises TranscriptionError on failure."""
        ...


def require_api_key(api_key: Optional[str], missing_message: str) -> str:
    match api_key:
        case None | "":
            raise ConfigurationError(missing_message)
        case str() as key if not _is_header_safe(key):
            raise ConfigurationError(f"{MSG_API_KEY_INVALID} {missing_message}")
        case _:
            return api_key


def _is_header_safe(key: str) -> bool:
    return key.isascii() and key.isprintable() and not any(map(str.isspace, key))


def language_hint(language: Optional[str]) -> Optional[str]:
    """Language to forward to the API, or None to let the service auto-detect."""
    match language:
        case None | "":
            return None
        case str() as code if code == LANGUAGE_AUTO:
            return None
        case _:
            return language


def form_fields(model: str, language: Optional[str]) -> dict[str, str]:
    fields = {
        "model": model,
        "temperature": TRANSCRIPTION_TEMPERATURE,
        "response_format": TRANSCRIPTION_RESPONSE_FORMAT,
    }
    hint = language_hint(language)
    return fields if hint is None else {**fields, "language": hint}
