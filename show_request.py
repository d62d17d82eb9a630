#!/usr/bin/env python3
"""
Name translation request preview script

Builds NameTranslationRequest objects and prints the wire payload that
would be sent to the service.

Usage:
    python show_request.py "Müller" eng --source-language-of-use deu
    python show_request.py "Путин" eng --defaults
    python show_request.py --input examples/requests.json

Options:
    --input FILE        JSON file with a list of requests (wire or python keys)
    --defaults          Seed optional fields from config/request_defaults.yaml
    --debug             Enable DEBUG logging
"""

# =============================================================================
# Dependencies
# =============================================================================
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from apimodel.models import NameTranslationRequest, NameTranslationRequestBuilder

# =============================================================================
# Settings
# =============================================================================
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================
def print_json_block(title: str, data: dict) -> None:
    """Print a JSON block framed by separator lines"""
    print(f"\n{'='*60}")
    print(title)
    print("="*60)
    print(json.dumps(data, ensure_ascii=False, indent=2))


def load_requests(json_path: Path) -> List[NameTranslationRequest]:
    """Load requests from a JSON list"""
    with open(json_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return [NameTranslationRequest.model_validate(item) for item in data]


def request_from_args(args: argparse.Namespace) -> NameTranslationRequest:
    """Build a single request from command-line options"""
    if args.defaults:
        builder = NameTranslationRequestBuilder.from_config(args.name, args.target_language)
    else:
        builder = NameTranslationRequestBuilder(args.name, args.target_language)

    setters = {
        "entity_type": builder.entity_type,
        "source_script": builder.source_script,
        "source_language_of_origin": builder.source_language_of_origin,
        "source_language_of_use": builder.source_language_of_use,
        "target_script": builder.target_script,
        "target_scheme": builder.target_scheme,
    }
    for field, setter in setters.items():
        value = getattr(args, field)
        if value is not None:
            setter(value)

    return builder.build()


# =============================================================================
# Main entry point
# =============================================================================
def main() -> int:
    """Parse command-line arguments and print request payloads"""
    parser = argparse.ArgumentParser(description="Preview name translation request payloads")
    parser.add_argument("name", nargs="?", help="Name to translate")
    parser.add_argument("target_language", nargs="?", help="Target language code (e.g., eng)")
    parser.add_argument("--input", type=str, help="Input JSON file path")
    parser.add_argument("--defaults", action="store_true", help="Apply configured defaults")
    parser.add_argument("--entity-type", dest="entity_type", help="PERSON, ORGANIZATION, LOCATION")
    parser.add_argument("--source-script", dest="source_script", help="ISO 15924 code (e.g., Cyrl)")
    parser.add_argument("--source-language-of-origin", dest="source_language_of_origin")
    parser.add_argument("--source-language-of-use", dest="source_language_of_use")
    parser.add_argument("--target-script", dest="target_script", help="ISO 15924 code (e.g., Latn)")
    parser.add_argument("--target-scheme", dest="target_scheme", help="Transliteration scheme (e.g., bgn)")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG log level")
    args = parser.parse_args()

    if args.debug:
        logging.getLogger("apimodel").setLevel(logging.DEBUG)

    if args.input:
        requests = load_requests(Path(args.input))
    elif args.name and args.target_language:
        requests = [request_from_args(args)]
    else:
        parser.error("either --input or both name and target_language are required")

    logger.info(f"Requests: {len(requests)}")
    for i, request in enumerate(requests, start=1):
        print_json_block(f"Request {i}/{len(requests)}", request.to_payload())

    return 0


if __name__ == "__main__":
    sys.exit(main())
