from __future__ import annotations

import json
import sys
from pathlib import Path

import show_request
from apimodel.models import ISO15924, LanguageCode, TransliterationScheme

EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "examples"


def test_load_requests_reads_example_file() -> None:
    requests = show_request.load_requests(EXAMPLES_DIR / "requests.json")

    assert len(requests) == 3
    assert requests[0].source_language_of_use is LanguageCode.GERMAN
    assert requests[1].target_scheme is TransliterationScheme.BGN
    assert requests[2].target_script is ISO15924.Latn


def test_main_prints_payload_from_arguments(monkeypatch, capsys) -> None:
    monkeypatch.setattr(
        sys,
        "argv",
        ["show_request.py", "Müller", "eng", "--source-language-of-use", "deu"],
    )

    assert show_request.main() == 0

    out = capsys.readouterr().out
    body = out[out.index("{"):]
    assert json.loads(body) == {
        "name": "Müller",
        "sourceLanguageOfUse": "deu",
        "targetLanguage": "eng",
    }


def test_main_applies_configured_defaults(monkeypatch, capsys) -> None:
    monkeypatch.setattr(
        sys,
        "argv",
        ["show_request.py", "Иван", "rus", "--defaults", "--entity-type", "PERSON"],
    )

    assert show_request.main() == 0

    out = capsys.readouterr().out
    body = json.loads(out[out.index("{"):])
    assert body["targetScript"] == "Cyrl"
    assert body["entityType"] == "PERSON"
