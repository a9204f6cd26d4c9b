"""Entry point — wires Config → TranscriptionClient and transcribes a WAV file."""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

from src.config import Config
from src.constants import MSG_TRANSCRIPTION_FAILED
from src.errors import TranscriptionError
from src.transcription.client import TranscriptionClient
from src.transcription.groq import GroqTranscriptionClient
from src.transcription.wav import wav_to_samples
from src.transcription.whisper import WhisperTranscriptionClient

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_transcriber(config: Config) -> TranscriptionClient:
    match (config.groq_api_key, config.openai_api_key):
        case (str() as k, _):
            return GroqTranscriptionClient(k)
        case (None, str() as k):
            return WhisperTranscriptionClient(k)
        case _:
            return GroqTranscriptionClient(None)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Transcribe a 16 kHz mono WAV file")
    parser.add_argument("wav_file", type=Path, help="Path to a mono 16-bit PCM WAV file.")
    parser.add_argument(
        "--language",
        default=None,
        help="Language code hint (e.g. 'en'). 'auto' lets the service detect it.",
    )
    return parser.parse_args(argv)


async def _run(transcriber: TranscriptionClient, wav_file: Path, language: str) -> str:
    try:
        samples = wav_to_samples(wav_file.read_bytes())
        return await transcriber.transcribe(samples, language)
    finally:
        match transcriber:
            case GroqTranscriptionClient():
                await transcriber.aclose()
            case _:
                pass


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    config = Config.from_env()
    _setup_logging(config.log_level)

    transcriber = build_transcriber(config)
    try:
        text = asyncio.run(_run(transcriber, args.wav_file, args.language or config.language))
    except (TranscriptionError, OSError) as exc:
        logger.error(MSG_TRANSCRIPTION_FAILED, exc)
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
