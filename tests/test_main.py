"""Entry point tests"""
import pytest
from unittest.mock import AsyncMock, patch

from src.config import Config
from src.errors import ConfigurationError
from src.main import build_transcriber, main
from src.transcription.groq import GroqTranscriptionClient
from src.transcription.wav import samples_to_wav
from src.transcription.whisper import WhisperTranscriptionClient


def make_config(*, groq: str | None = None, openai: str | None = None) -> Config:
    return Config(groq_api_key=groq, openai_api_key=openai, log_level="INFO", language="auto")


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr("src.main._setup_logging", lambda level: None)


@pytest.fixture
def wav_file(tmp_path):
    path = tmp_path / "clip.wav"
    path.write_bytes(samples_to_wav([0.0, 0.5, -0.5]))
    return path


def test_build_transcriber_prefers_groq():
    assert isinstance(build_transcriber(make_config(groq="g", openai="o")), GroqTranscriptionClient)


def test_build_transcriber_falls_back_to_whisper():
    assert isinstance(build_transcriber(make_config(openai="o")), WhisperTranscriptionClient)


def test_build_transcriber_without_keys_defers_to_groq():
    assert isinstance(build_transcriber(make_config()), GroqTranscriptionClient)


def test_main_prints_transcription(wav_file, capsys):
    transcriber = AsyncMock()
    transcriber.transcribe = AsyncMock(return_value="hello world")

    with patch("src.main.Config.from_env", return_value=make_config(groq="g")), \
         patch("src.main.build_transcriber", return_value=transcriber):
        code = main([str(wav_file), "--language", "en"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "hello world"
    samples, language = transcriber.transcribe.call_args.args
    assert len(samples) == 3
    assert language == "en"


def test_main_uses_configured_language_by_default(wav_file):
    transcriber = AsyncMock()
    transcriber.transcribe = AsyncMock(return_value="hola")
    config = Config(groq_api_key="g", openai_api_key=None, log_level="INFO", language="es")

    with patch("src.main.Config.from_env", return_value=config), \
         patch("src.main.build_transcriber", return_value=transcriber):
        main([str(wav_file)])

    assert transcriber.transcribe.call_args.args[1] == "es"


def test_main_returns_error_status_on_transcription_error(wav_file, capsys):
    transcriber = AsyncMock()
    transcriber.transcribe = AsyncMock(side_effect=ConfigurationError("GROQ_API_KEY not set"))

    with patch("src.main.Config.from_env", return_value=make_config()), \
         patch("src.main.build_transcriber", return_value=transcriber):
        code = main([str(wav_file)])

    assert code == 1
    assert capsys.readouterr().out == ""


def test_main_returns_error_status_for_missing_file(tmp_path):
    with patch("src.main.Config.from_env", return_value=make_config(groq="g")):
        code = main([str(tmp_path / "missing.wav")])

    assert code == 1
