"""Entry point wiring tests"""
import json

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from src.config import Config
from src.constants import MSG_NOT_IDENTIFIED
from src.food import FoodResult, NutritionEstimate
from src.inference.errors import MalformedResponseError
from src.inference.gemini import GeminiInferenceClient
from src.inference.openai import OpenAIInferenceClient
from src.main import build_client, main


def _config(provider: str = "gemini", model: str = "gemini-2.5-flash") -> Config:
    return Config(
        api_key="test-key",
        provider=provider,
        model=model,
        taxonomy_path=None,
        log_level="INFO",
    )


def test_build_client_gemini():
    with patch("src.inference.gemini.genai.Client"):
        client = build_client(_config())

    assert isinstance(client, GeminiInferenceClient)
    assert client.model == "gemini-2.5-flash"
    assert "Empanada de carne" in client.prompt


def test_build_client_openai():
    with patch("src.inference.openai.AsyncOpenAI"):
        client = build_client(_config(provider="openai", model="gpt-4o"))

    assert isinstance(client, OpenAIInferenceClient)
    assert client.model == "gpt-4o"


def test_build_client_unknown_provider():
    with pytest.raises(ValueError, match="llama"):
        build_client(_config(provider="llama"))


@pytest.fixture
def fake_client(monkeypatch):
    client = MagicMock()
    monkeypatch.setattr("src.main.Config.from_env", lambda: _config())
    monkeypatch.setattr("src.main._setup_logging", lambda level: None)
    monkeypatch.setattr("src.main.build_client", lambda config: client)
    return client


def test_main_classify_prints_result_json(fake_client, tmp_path, capsys):
    image = tmp_path / "empanadas.jpg"
    image.write_bytes(b"\xff\xd8fake")
    fake_client.classify_food = AsyncMock(
        return_value=FoodResult(
            name="Empanada de carne",
            portionSize="2 units",
            nutrition=NutritionEstimate(calories=580, protein=24, carbs=52, fat=30),
        )
    )

    code = main(["classify", str(image)])

    assert code == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["name"] == "Empanada de carne"
    assert printed["portionSize"] == "2 units"
    fake_client.classify_food.assert_called_once_with("/9hmYWtl")


def test_main_classify_reports_inference_error(fake_client, tmp_path, capsys):
    image = tmp_path / "wall.jpg"
    image.write_bytes(b"\xff\xd8fake")
    fake_client.classify_food = AsyncMock(side_effect=MalformedResponseError())

    code = main(["classify", str(image)])

    assert code == 1
    assert MSG_NOT_IDENTIFIED in capsys.readouterr().err


def test_main_tip(fake_client, capsys):
    fake_client.get_daily_tip = AsyncMock(return_value="Drink mate, not soda.")

    code = main(["tip"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "Drink mate, not soda."
