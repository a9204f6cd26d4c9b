"""Typed errors raised by the transcription backends."""


class TranscriptionError(Exception):
    """Base class for every failure surfaced by a TranscriptionClient."""


class ConfigurationError(TranscriptionError):
    """API key missing or unusable. The message says where to get one."""


class EncodingError(TranscriptionError):
    """Samples could not be packed into a WAV container."""


class TransportError(TranscriptionError):
    """The HTTP request never produced a response."""


class RemoteApiError(TranscriptionError):

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Transcription API error {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class DeserializationError(TranscriptionError):
    """Response body is not JSON or has no usable ``text`` field."""
