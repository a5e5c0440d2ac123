from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import os
from dotenv import load_dotenv

from src.constants import DEFAULT_MODELS, DEFAULT_PROVIDER


@dataclass(frozen=True)
class Config:
    api_key: str
    provider: str
    model: str
    taxonomy_path: Optional[Path]
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = (os.getenv("API_KEY") or "").strip() or None
        provider = os.getenv("INFERENCE_PROVIDER", DEFAULT_PROVIDER).strip().lower()
        model = os.getenv("INFERENCE_MODEL") or None
        taxonomy_path = os.getenv("DISH_TAXONOMY_PATH") or None
        log_level = os.getenv("LOG_LEVEL", "INFO")

        return cls._validate(
            api_key=api_key,
            provider=provider,
            model=model,
            taxonomy_path=Path(taxonomy_path) if taxonomy_path else None,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        api_key: Optional[str],
        provider: str,
        model: Optional[str],
        taxonomy_path: Optional[Path],
        log_level: str,
    ) -> "Config":
        match (api_key or "").strip():
            case "":
                raise ValueError("API_KEY must be set in .env")
            case _:
                pass

        match provider in DEFAULT_MODELS:
            case True:
                pass
            case False:
                raise ValueError(
                    f"INFERENCE_PROVIDER must be one of {', '.join(DEFAULT_MODELS)}"
                )

        return Config(
            api_key=api_key,
            provider=provider,
            model=model or DEFAULT_MODELS[provider],
            taxonomy_path=taxonomy_path,
            log_level=log_level,
        )
