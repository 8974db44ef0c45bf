from __future__ import annotations

import argparse
import os
import sys
from dataclasses import replace
from pathlib import Path

from .errors import TsgenError
from .generation import GenerationProfile
from .generator import OutputSpec, write_declarations
from .loader import load_catalog
from .log import configure_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tsgen", description="Generate TypeScript declarations from an API catalog.")
    parser.add_argument("catalog", type=Path, help="Path to the type catalog (JSON/YAML)")
    parser.add_argument("-o", "--output", type=Path, required=True, help="Output .ts file")
    parser.add_argument("--namespace", default="T", help="Name of the wrapping namespace")
    parser.add_argument(
        "--enum-as-union",
        action="store_true",
        help="Render enums as string literal unions (also enabled by ENUM_AS_UNION)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON lines")

    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, log_json=args.log_json)

    try:
        catalog = load_catalog(args.catalog)
        profile = GenerationProfile.from_env(os.environ, namespace=args.namespace)
        if args.enum_as_union:
            profile = replace(profile, enum_as_union=True)
        write_declarations(OutputSpec(output_path=args.output), catalog, profile)
    except TsgenError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
