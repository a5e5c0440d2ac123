"""InferenceClient — abstract base for hosted food-recognition backends.

Backends implement the two remote round trips; response parsing, error
mapping and the daily-tip fallback are shared here.
"""
import base64
import json
import logging
from abc import ABC, abstractmethod

from pydantic import ValidationError

from src.constants import (
    MSG_CLASSIFY_BAD_JSON,
    MSG_CLASSIFY_INCOMPLETE,
    MSG_CLASSIFY_INVALID,
    MSG_CLASSIFY_REJECTED,
    MSG_CLASSIFY_REMOTE_ERROR,
    MSG_FALLBACK_TIP,
    MSG_TIP_EMPTY,
    MSG_TIP_ERROR,
    TIP_PROMPT,
)
from src.food import FoodResult
from src.inference.errors import (
    MalformedResponseError,
    RemoteCallError,
    UnrecognizedContentError,
)

logger = logging.getLogger(__name__)


def parse_food_response(text: str) -> FoodResult:
    """Turn the model's raw JSON text into a FoodResult or raise InferenceError."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError):
        logger.error(MSG_CLASSIFY_BAD_JSON, text)
        raise MalformedResponseError() from None

    match data:
        case dict():
            pass
        case _:
            logger.error(MSG_CLASSIFY_BAD_JSON, text)
            raise MalformedResponseError()

    match data.get("error"):
        case str() as reason if reason.strip():
            logger.warning(MSG_CLASSIFY_REJECTED, reason)
            raise UnrecognizedContentError(reason.strip())
        case _:
            pass

    match (str(data.get("name") or "").strip(), data.get("nutrition")):
        case ("", _) | (_, None):
            logger.error(MSG_CLASSIFY_INCOMPLETE, data)
            raise MalformedResponseError()
        case _:
            pass

    try:
        return FoodResult.model_validate({**data, "error": None})
    except ValidationError as e:
        logger.error(MSG_CLASSIFY_INVALID, e)
        raise MalformedResponseError() from e


class InferenceClient(ABC):

    def __init__(self, model: str, prompt: str) -> None:
        self._model = model
        self._prompt = prompt

    @property
    def model(self) -> str:
        return self._model

    @property
    def prompt(self) -> str:
        return self._prompt

    @abstractmethod
    async def _request_food_json(self, image_bytes: bytes, prompt: str) -> str:
        """Send image + prompt with the food schema constraint. Raises on failure."""
        ...

    @abstractmethod
    async def _request_text(self, prompt: str) -> str:
        """Send a plain text prompt and return the response text. Raises on failure."""
        ...

    async def classify_food(self, image_base64: str) -> FoodResult:
        try:
            image_bytes = base64.b64decode(image_base64)
            text = await self._request_food_json(image_bytes, self._prompt)
        except Exception as e:
            logger.exception(MSG_CLASSIFY_REMOTE_ERROR, e)
            raise RemoteCallError() from e
        return parse_food_response((text or "").strip())

    async def get_daily_tip(self) -> str:
        try:
            text = await self._request_text(TIP_PROMPT)
        except Exception as e:
            logger.error(MSG_TIP_ERROR, e)
            return MSG_FALLBACK_TIP

        match (text or "").strip():
            case "":
                logger.warning(MSG_TIP_EMPTY)
                return MSG_FALLBACK_TIP
            case tip:
                return tip
