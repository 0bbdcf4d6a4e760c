"""
Export the OpenAPI document for the todo API to a JSON file.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from mdtodo.app import create_app

logger = logging.getLogger(__name__)


def write_openapi(path: str | Path) -> Path:
    output = Path(path)
    schema = create_app().openapi()
    output.write_text(json.dumps(schema, indent=2) + "\n", encoding="utf-8")
    return output


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Write the OpenAPI specification")
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default="openapi.json",
        help="Destination file for the OpenAPI JSON",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(message)s")
    output = write_openapi(args.output)
    logger.info("OpenAPI specification has been written to %s", output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
