#!/usr/bin/env python3
"""
Main entry point for the techscreen pipelines.
Allows running the package with: python -m techscreen

    python -m techscreen parse-resume PATH [--type=MIME]
    python -m techscreen questions --role=ROLE [--context=TEXT]
"""
import base64
import json
import mimetypes
import os
import sys

from .config import get_config
from .errors import ModelServiceError
from .interview.services import ResumeExtractionService, QuestionGenerationService, build_llm_client
from .utils import setup_logging

USAGE = (
    "Usage:\n"
    "  python -m techscreen parse-resume PATH [--type=MIME]\n"
    "  python -m techscreen questions --role=ROLE [--context=TEXT]"
)


def _option(args, name, default=""):
    prefix = f"--{name}="
    for arg in args:
        if arg.startswith(prefix):
            return arg[len(prefix):]
    return default


def _read_upload(path: str, declared_type: str):
    """Text files are passed as-is, anything else is base64-encoded like a browser upload."""
    if declared_type.startswith("text/"):
        with open(path, encoding="utf-8", errors="replace") as f:
            return f.read(), False
    with open(path, "rb") as f:
        return base64.b64encode(f.read()).decode("ascii"), True


def main():
    """Command-line interface for the extraction and question pipelines."""
    args = sys.argv[1:]
    if not args or args[0] in ("-h", "--help"):
        print(USAGE)
        sys.exit(0 if args else 1)

    try:
        config = get_config()
    except ValueError as e:
        print(f"❌ Configuration Error: {e}")
        sys.exit(1)

    log_file = setup_logging(config.log_file, config.log_level)
    llm_client = build_llm_client(config)
    command = args[0]

    try:
        if command == "parse-resume":
            paths = [a for a in args[1:] if not a.startswith("--")]
            if not paths or not os.path.isfile(paths[0]):
                print(f"❌ Resume file not found\n{USAGE}")
                sys.exit(1)
            path = paths[0]
            declared_type = _option(args, "type") or mimetypes.guess_type(path)[0] or "text/plain"
            content, is_encoded = _read_upload(path, declared_type)
            result = ResumeExtractionService(llm_client).extract(
                content, declared_type=declared_type, is_encoded=is_encoded, file_name=os.path.basename(path),
            )
            payload = result.to_dict()
            if result.model_error:
                print(f"⚠️  Model extraction unavailable, please complete the form manually: {result.model_error}")

        elif command == "questions":
            role = _option(args, "role")
            question_set = QuestionGenerationService(llm_client).generate(role, _option(args, "context"))
            payload = {
                "questions": [dict(q.to_dict(), time_limit=q.time_limit) for q in question_set]
            }

        else:
            print(f"❌ Unknown command: {command}\n{USAGE}")
            sys.exit(1)

    except ModelServiceError as e:
        print(f"❌ Model service error: {e}")
        print(f"   (details in {log_file})")
        sys.exit(1)

    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
