"""
Command line entry point.

Usage:
    javax-bridge script2class src/main/java/com/acme/Report.javax --source-root src/main/java
    javax-bridge class2script src/main/java/com/acme/Report.java
    javax-bridge class2script Report.java --stdout
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from javax_bridge.config import settings
from javax_bridge.services.transform import (
    ConversionError,
    class_to_script,
    script_to_class,
)
from javax_bridge.services.workspace import (
    convert_class_file,
    convert_script_file,
    package_name_for,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="javax-bridge",
        description="Convert between placeholder scripts and runnable Java classes"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    s2c = subparsers.add_parser("script2class", help="Generate a Java class from a script")
    s2c.add_argument("file", help="Script file to convert")
    s2c.add_argument(
        "--source-root",
        default=None,
        help="Root of the Java source tree (defaults to the script's directory)"
    )
    s2c.add_argument("--class-name", default=None, help="Class name (defaults to the file name)")
    s2c.add_argument("--stdout", action="store_true", help="Print the class instead of writing files")

    c2s = subparsers.add_parser("class2script", help="Generate a script from a Java class")
    c2s.add_argument("file", help="Java file containing a public static run method")
    c2s.add_argument("--stdout", action="store_true", help="Print the script instead of writing files")

    return parser


def _script2class(args: argparse.Namespace) -> None:
    script_path = Path(args.file)
    source_root = Path(args.source_root) if args.source_root else script_path.parent
    if args.stdout:
        code = script_path.read_text(encoding="utf-8")
        print(script_to_class(
            code,
            package_name=package_name_for(script_path, source_root),
            class_name=args.class_name or script_path.stem,
        ))
        return
    written = convert_script_file(script_path, source_root, class_name=args.class_name)
    print(f"Generated {written}")


def _class2script(args: argparse.Namespace) -> None:
    class_path = Path(args.file)
    if args.stdout:
        print(class_to_script(class_path.read_text(encoding="utf-8")))
        return
    written = convert_class_file(class_path)
    print(f"Generated {written}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    handlers = {
        "script2class": _script2class,
        "class2script": _class2script,
    }
    try:
        handlers[args.command](args)
    except ConversionError as e:
        print(f"{e.kind}: {e.message}", file=sys.stderr)
        return 1
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
