"""All magic values live here — no inline literals anywhere else."""

# Audio container
SAMPLE_RATE = 16000
CHANNELS = 1
SAMPLE_WIDTH_BYTES = 2
PCM16_MAX = 32767
AUDIO_FILENAME = "audio.wav"
AUDIO_MIME_TYPE = "audio/wav"

# Groq transcription API
GROQ_TRANSCRIPTION_URL = "https://api.groq.com/openai/v1/audio/transcriptions"
GROQ_MODEL = "whisper-large-v3"
GROQ_KEYS_URL = "https://console.groq.com/keys"

# OpenAI transcription API
WHISPER_MODEL = "whisper-1"
OPENAI_KEYS_URL = "https://platform.openai.com/api-keys"

# Form values shared by both backends
TRANSCRIPTION_TEMPERATURE = "0"
TRANSCRIPTION_RESPONSE_FORMAT = "json"
LANGUAGE_AUTO = "auto"

# Log / user-facing messages
MSG_GROQ_KEY_MISSING = (
    "GROQ_API_KEY environment variable not set. "
    "Please set it with your Groq API key from " + GROQ_KEYS_URL
)
MSG_API_KEY_INVALID = "API key contains characters that cannot be sent in an HTTP header."
MSG_OPENAI_KEY_MISSING = (
    "OPENAI_API_KEY environment variable not set. "
    "Please set it with your OpenAI API key from " + OPENAI_KEYS_URL
)
MSG_UNKNOWN_API_ERROR = "Unknown error"
MSG_TRANSCRIBE_START = "Starting %s transcription for %d samples"
MSG_WAV_READY = "Converted samples to WAV: %d bytes"
MSG_SENDING = "Sending request to %s"
MSG_TRANSCRIBE_DONE = "%s transcription completed in %dms: %s"
MSG_API_STATUS = "%s API returned status %d"
MSG_TRANSCRIPTION_FAILED = "Transcription failed: %s"
