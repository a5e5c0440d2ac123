"""GeminiInferenceClient — Google Gemini backend via google-genai."""
from typing import Optional

from google import genai
from google.genai import types

from src.constants import DEFAULT_MODELS, IMAGE_MIME_TYPE, JSON_MIME_TYPE, PROVIDER_GEMINI
from src.food import FOOD_DETECTION_SCHEMA
from src.inference.client import InferenceClient

RESPONSE_SCHEMA = types.Schema.model_validate(FOOD_DETECTION_SCHEMA)


class GeminiInferenceClient(InferenceClient):

    def __init__(
        self,
        api_key: str,
        prompt: str,
        model: str = DEFAULT_MODELS[PROVIDER_GEMINI],
        client: Optional[genai.Client] = None,
    ) -> None:
        super().__init__(model=model, prompt=prompt)
        self._client = client or genai.Client(api_key=api_key)

    async def _request_food_json(self, image_bytes: bytes, prompt: str) -> str:
        response = await self._client.aio.models.generate_content(
            model=self._model,
            contents=[
                types.Part.from_bytes(data=image_bytes, mime_type=IMAGE_MIME_TYPE),
                types.Part.from_text(text=prompt),
            ],
            config=types.GenerateContentConfig(
                response_mime_type=JSON_MIME_TYPE,
                response_schema=RESPONSE_SCHEMA,
            ),
        )
        return response.text

    async def _request_text(self, prompt: str) -> str:
        response = await self._client.aio.models.generate_content(
            model=self._model,
            contents=prompt,
        )
        return response.text
