from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from src.constants import LANGUAGE_AUTO


@dataclass(frozen=True)
class Config:
    groq_api_key: Optional[str]
    openai_api_key: Optional[str]
    log_level: str
    language: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        groq_api_key = os.getenv("GROQ_API_KEY") or None
        openai_api_key = os.getenv("OPENAI_API_KEY") or None
        log_level = os.getenv("LOG_LEVEL", "INFO")
        language = os.getenv("TRANSCRIBE_LANGUAGE", LANGUAGE_AUTO)

        return cls._validate(
            groq_api_key=groq_api_key,
            openai_api_key=openai_api_key,
            log_level=log_level,
            language=language,
        )

    @staticmethod
    def _validate(
        groq_api_key: Optional[str],
        openai_api_key: Optional[str],
        log_level: str,
        language: str,
    ) -> "Config":
        match log_level.strip().upper():
            case "DEBUG" | "INFO" | "WARNING" | "ERROR" | "CRITICAL" as level:
                pass
            case _:
                raise ValueError(f"LOG_LEVEL must be a logging level name, got {log_level!r}")

        return Config(
            groq_api_key=groq_api_key,
            openai_api_key=openai_api_key,
            log_level=level,
            language=language.strip() or LANGUAGE_AUTO,
        )
