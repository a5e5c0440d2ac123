"""TDD: taxonomy loading and prompt assembly tests written FIRST"""
import json

import pytest

from src.prompt import (
    TaxonomySection,
    build_classification_prompt,
    load_taxonomy,
    render_taxonomy,
)


def test_bundled_taxonomy_loads():
    sections = load_taxonomy()

    assert len(sections) == 6
    assert sections[0].items[0] == "Empanada de carne"
    assert "Mate" in sections[-1].items


def test_render_taxonomy_letters_sections():
    sections = (
        TaxonomySection(title="Mains", items=("Locro", "Provoleta")),
        TaxonomySection(title="Drinks", items=("Mate",)),
    )

    rendered = render_taxonomy(sections)

    assert "### A. Mains\n- Locro\n- Provoleta" in rendered
    assert "### B. Drinks\n- Mate" in rendered


def test_prompt_contains_taxonomy_and_rules():
    prompt = build_classification_prompt(load_taxonomy())

    assert "### A. Argentine main dishes" in prompt
    assert "- Empanada de carne" in prompt
    assert "### Behavior rules" in prompt
    assert prompt.index("### F.") < prompt.index("### Behavior rules")
    assert '"portionSize": string' in prompt


def test_custom_taxonomy_file(tmp_path):
    path = tmp_path / "dishes.json"
    path.write_text(json.dumps({"sections": [{"title": "Sushi", "items": [" Nigiri ", "Maki"]}]}))

    sections = load_taxonomy(path)

    assert sections == (TaxonomySection(title="Sushi", items=("Nigiri", "Maki")),)


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"sections": []},
        {"sections": [{"title": "Empty", "items": []}]},
        {"sections": [{"title": "Bad", "items": [1, 2]}]},
        {"sections": [{"items": ["Locro"]}]},
    ],
)
def test_malformed_taxonomy_raises(tmp_path, raw):
    path = tmp_path / "dishes.json"
    path.write_text(json.dumps(raw))

    with pytest.raises(ValueError):
        load_taxonomy(path)


def test_missing_taxonomy_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_taxonomy(tmp_path / "nope.json")
