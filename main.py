"""
main.py — Tibetan syllable composer entry point.

Composes one syllable from the command line, lists the consonant table,
or starts the web composer.

Examples::

    python main.py --root ག --superscript ས --subscript ར --suffix ལ
    python main.py --list
    python main.py --web --port 8080
"""

from __future__ import annotations

import argparse
import sys

from core.config import load_config
from core import logger as log_setup


# ──────────────────────────────────────────────────────────────
# Argument parsing
# ──────────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tibetan-syllable",
        description="Compose a Tibetan syllable and its phonetic transliteration",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("--root", default=None, help="Root consonant (required to compose)")
    p.add_argument("--prefix", default=None, help="Prefix letter")
    p.add_argument("--superscript", default=None, help="Superscript letter")
    p.add_argument("--subscript", default=None, help="Subscript letter (ར, ལ or ཡ)")
    p.add_argument("--suffix", default=None, help="First suffix letter")
    p.add_argument("--second-suffix", default=None, help="Second suffix letter")
    p.add_argument(
        "--list",
        action="store_true",
        help="Print the consonant table and exit",
    )
    p.add_argument(
        "--web",
        action="store_true",
        help="Start the FastAPI web composer",
    )
    p.add_argument("--host", default=None, help="Bind address for --web (overrides config)")
    p.add_argument("--port", type=int, default=None, help="Port for --web (overrides config)")
    p.add_argument("--config", default=None, help="Path to tibetan.yaml; auto-discovers if omitted")
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARN"],
        default=None,
        help="Minimum log level for stderr and JSONL output (overrides config)",
    )
    return p


# ──────────────────────────────────────────────────────────────
# Commands
# ──────────────────────────────────────────────────────────────

def _print_table() -> int:
    from registry.characters import all_characters

    for c in all_characters():
        subscripts = " ".join(c.available_subscripts()) or "-"
        print(
            f"{c.tibetan}  {c.phonetic:<5} {c.column.value:<7} "
            f"override={c.phonetic_third_column or '-':<4} "
            f"suffix={c.phonetic_as_suffix or '-':<3} subscripts={subscripts}"
        )
    return 0


def _compose(args: argparse.Namespace) -> int:
    from core.logger import get_logger
    from engine import build_syllable, render

    syllable = build_syllable(
        root=args.root,
        prefix=args.prefix,
        superscript=args.superscript,
        subscript=args.subscript,
        suffix=args.suffix,
        second_suffix=args.second_suffix,
    )
    if syllable is None:
        get_logger().warn("cli", "no_root", {"root": args.root or ""})
        print("[ERROR] A known root character is required (use --root)", file=sys.stderr)
        return 2

    rendering = render(syllable)
    get_logger().info("cli", "compose", {"tibetan": rendering.tibetan, "phonetic": rendering.phonetic})
    print(rendering.tibetan)
    print(rendering.phonetic)
    return 0


# ──────────────────────────────────────────────────────────────
# Entry point
# ──────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (ValueError, FileNotFoundError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    level = args.log_level or config.logging.level
    log_setup.configure(
        log_dir=config.logging.resolved_log_dir,
        enabled=config.logging.jsonl,
        level=level,
    )
    log_setup.set_stderr_level(level)

    if args.list:
        return _print_table()
    if args.web:
        from ui.web_app import start_web_server

        start_web_server(config, host=args.host, port=args.port)
        return 0
    return _compose(args)


if __name__ == "__main__":
    sys.exit(main())
