"""Float samples → 16-bit PCM WAV bytes."""
import io
import wave
from typing import Sequence

import numpy as np

from src.constants import CHANNELS, PCM16_MAX, SAMPLE_RATE, SAMPLE_WIDTH_BYTES
from src.errors import EncodingError


def samples_to_wav(samples: Sequence[float] | np.ndarray, sample_rate: int = SAMPLE_RATE) -> bytes:
    """Pack mono float samples in [-1.0, 1.0] into an in-memory WAV file.

    Out-of-range values are clamped, then scaled by the 16-bit maximum and
    truncated toward zero. NaN encodes as silence.
    """
    try:
        audio = np.asarray(samples, dtype=np.float32).reshape(-1)
        audio = np.nan_to_num(np.clip(audio, -1.0, 1.0), nan=0.0)
        pcm = (audio * PCM16_MAX).astype("<i2")

        buffer = io.BytesIO()
        with wave.open(buffer, "wb") as wav_file:
            wav_file.setnchannels(CHANNELS)
            wav_file.setsampwidth(SAMPLE_WIDTH_BYTES)
            wav_file.setframerate(sample_rate)
            wav_file.writeframes(pcm.tobytes())
    except (wave.Error, OSError, TypeError, ValueError) as exc:
        raise EncodingError(f"Could not encode audio as WAV: {exc}") from exc

    return buffer.getvalue()


def wav_to_samples(data: bytes) -> np.ndarray:
    """Read a mono 16 kHz 16-bit PCM WAV file back into float32 samples in [-1.0, 1.0]."""
    try:
        with wave.open(io.BytesIO(data), "rb") as wav_file:
            match (wav_file.getnchannels(), wav_file.getsampwidth(), wav_file.getframerate()):
                case (1, 2, rate) if rate == SAMPLE_RATE:
                    frames = wav_file.readframes(wav_file.getnframes())
                case (channels, width, rate):
                    raise EncodingError(
                        f"Expected mono 16-bit PCM at {SAMPLE_RATE} Hz, "
                        f"got {channels} channel(s) at {width * 8}-bit, {rate} Hz"
                    )
    except (wave.Error, EOFError) as exc:
        raise EncodingError(f"Could not read WAV data: {exc}") from exc

    return np.frombuffer(frames, dtype="<i2").astype(np.float32) / PCM16_MAX
