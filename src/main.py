"""Entry point — wires Config → InferenceClient → command."""
import argparse
import asyncio
import base64
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.logging import RichHandler

from src.config import Config
from src.constants import CMD_CLASSIFY, CMD_TIP, MSG_CLIENT_READY, PROVIDER_GEMINI, PROVIDER_OPENAI
from src.inference.client import InferenceClient
from src.inference.errors import InferenceError
from src.inference.gemini import GeminiInferenceClient
from src.inference.openai import OpenAIInferenceClient
from src.prompt import build_classification_prompt, load_taxonomy

logger = logging.getLogger(__name__)

BACKENDS: dict[str, type[InferenceClient]] = {
    PROVIDER_GEMINI: GeminiInferenceClient,
    PROVIDER_OPENAI: OpenAIInferenceClient,
}


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_client(config: Config) -> InferenceClient:
    prompt = build_classification_prompt(load_taxonomy(config.taxonomy_path))
    match BACKENDS.get(config.provider):
        case None:
            raise ValueError(f"Unknown inference provider: {config.provider}")
        case backend:
            client = backend(config.api_key, prompt, model=config.model)
    logger.info(MSG_CLIENT_READY, config.provider, config.model)
    return client


async def _classify(client: InferenceClient, args: argparse.Namespace) -> int:
    image_base64 = base64.standard_b64encode(args.image.read_bytes()).decode()
    try:
        result = await client.classify_food(image_base64)
    except InferenceError as e:
        print(e, file=sys.stderr)
        return 1
    print(result.to_json())
    return 0


async def _tip(client: InferenceClient, args: argparse.Namespace) -> int:
    print(await client.get_daily_tip())
    return 0


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classify food photos and fetch nutrition tips")
    commands = parser.add_subparsers(dest="command", required=True)

    classify = commands.add_parser(CMD_CLASSIFY, help="identify the dish in a JPEG photo")
    classify.add_argument("image", type=Path, help="path to a JPEG image")
    classify.set_defaults(handler=_classify)

    tip = commands.add_parser(CMD_TIP, help="print today's nutrition tip")
    tip.set_defaults(handler=_tip)

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    config = Config.from_env()
    _setup_logging(config.log_level)
    client = build_client(config)
    return asyncio.run(args.handler(client, args))


if __name__ == "__main__":
    sys.exit(main())
