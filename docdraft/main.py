import argparse
import json
import sys
from pathlib import Path

from docdraft.config.settings import Settings
from docdraft.extraction.file_types import supported_file_types, validate_upload
from docdraft.logging.logger import Log
from docdraft.processor.exceptions import user_message
from docdraft.processor.orchestrator import build_transformer
from docdraft.processor.uploads import stage_upload


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docdraft",
        description="Transform a document into a Markdown draft using a language model.",
    )
    parser.add_argument("file", type=Path, nargs="?", help="document to process")
    parser.add_argument("instructions", nargs="?", help="how the document should be transformed")
    parser.add_argument(
        "--list-types",
        action="store_true",
        help="print the accepted file types and size limit, then exit",
    )
    args = parser.parse_args(argv)
    if args.file is None and not args.list_types:
        parser.error("the following arguments are required: file")
    return args


def main(argv: list[str] | None = None) -> int:
    """Entry point: validate -> stage a temp copy of the file -> transform -> print draft JSON."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    if args.list_types:
        print(json.dumps(supported_file_types(settings.max_upload_size_bytes), indent=2))
        return 0

    try:
        transformer = build_transformer(settings)
        data = args.file.read_bytes()
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    problems = validate_upload(args.file.name, len(data), settings.max_upload_size_bytes)
    if problems:
        Log.warning("Upload rejected", filename=args.file.name, problems=problems)
        print(f"error: {'; '.join(problems)}", file=sys.stderr)
        return 1

    upload = stage_upload(data, args.file.name, settings.upload_dir)
    try:
        draft = transformer.transform(upload, args.instructions)
    except Exception as exc:
        print(f"error: {user_message(exc)}", file=sys.stderr)
        return 1

    print(json.dumps(draft.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
