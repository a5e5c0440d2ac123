"""OpenAIInferenceClient — OpenAI chat-completions backend."""
import base64
from typing import Optional

from openai import AsyncOpenAI

from src.constants import DEFAULT_MODELS, IMAGE_MIME_TYPE, OPENAI_SCHEMA_NAME, PROVIDER_OPENAI
from src.food import FOOD_DETECTION_SCHEMA
from src.inference.client import InferenceClient

RESPONSE_FORMAT = {
    "type": "json_schema",
    "json_schema": {"name": OPENAI_SCHEMA_NAME, "schema": FOOD_DETECTION_SCHEMA},
}


class OpenAIInferenceClient(InferenceClient):

    def __init__(
        self,
        api_key: str,
        prompt: str,
        model: str = DEFAULT_MODELS[PROVIDER_OPENAI],
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        super().__init__(model=model, prompt=prompt)
        self._client = client or AsyncOpenAI(api_key=api_key)

    async def _request_food_json(self, image_bytes: bytes, prompt: str) -> str:
        image_data = base64.standard_b64encode(image_bytes).decode()
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image_url",
                            "image_url": {"url": f"data:{IMAGE_MIME_TYPE};base64,{image_data}"},
                        },
                        {"type": "text", "text": prompt},
                    ],
                }
            ],
            response_format=RESPONSE_FORMAT,
        )
        return response.choices[0].message.content or ""

    async def _request_text(self, prompt: str) -> str:
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[{"role": "user", "content": prompt}],
        )
        return response.choices[0].message.content or ""
