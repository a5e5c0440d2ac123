"""Classification prompt assembly from the externalized dish taxonomy."""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from string import ascii_uppercase
from typing import Optional

from src.constants import CLASSIFY_PROMPT_INTRO, CLASSIFY_PROMPT_RULES, TAXONOMY_FILENAME

logger = logging.getLogger(__name__)

DEFAULT_TAXONOMY_PATH = Path(__file__).parent / "data" / TAXONOMY_FILENAME


@dataclass(frozen=True)
class TaxonomySection:
    title: str
    items: tuple[str, ...]


def _parse_section(raw: object) -> TaxonomySection:
    match raw:
        case {"title": str() as title, "items": list() as items} if items and all(
            isinstance(i, str) and i.strip() for i in items
        ):
            return TaxonomySection(title=title, items=tuple(i.strip() for i in items))
        case _:
            raise ValueError(f"Invalid taxonomy section: {raw!r}")


def load_taxonomy(path: Optional[Path] = None) -> tuple[TaxonomySection, ...]:
    """Read the dish taxonomy JSON. Raises ValueError on a malformed file."""
    source = path or DEFAULT_TAXONOMY_PATH
    with open(source, encoding="utf-8") as f:
        raw = json.load(f)

    match raw:
        case {"sections": list() as sections} if sections:
            parsed = tuple(map(_parse_section, sections))
        case _:
            raise ValueError(f"{source} must contain a non-empty 'sections' list")

    match len(parsed) > len(ascii_uppercase):
        case True:
            raise ValueError(f"{source} has more than {len(ascii_uppercase)} sections")
        case False:
            pass

    logger.debug(f"Loaded {len(parsed)} taxonomy sections from {source}")
    return parsed


def render_taxonomy(sections: tuple[TaxonomySection, ...]) -> str:
    return "\n".join(
        f"### {letter}. {section.title}\n"
        + "\n".join(map(lambda item: f"- {item}", section.items))
        + "\n"
        for letter, section in zip(ascii_uppercase, sections)
    )


def build_classification_prompt(sections: tuple[TaxonomySection, ...]) -> str:
    return "\n".join(
        (CLASSIFY_PROMPT_INTRO, render_taxonomy(sections), CLASSIFY_PROMPT_RULES)
    )
