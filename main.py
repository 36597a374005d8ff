#!/usr/bin/env python3
"""SiteSmith - generate website page components from a plain-English description.

Usage:
    python main.py generate --prompt "a bakery landing page with a menu"
    python main.py generate --prompt "..." --style creative --output page.tsx
    python main.py component --name Navbar --description "sticky top nav"
    python main.py refine --file page.tsx --feedback "make the hero darker"
"""

import argparse
import logging
import sys

from core.errors import GenerationError
from core.orchestrator import build_orchestrator
from core.state import STYLES, GenerationRequest
from config.defaults import DEFAULTS


def _write_or_print(code, output):
    if output:
        with open(output, "w") as fp:
            fp.write(code)
        print(f"Wrote {output}")
    else:
        print(code)


def cmd_generate(args):
    """Run the full generation pipeline."""
    min_len = DEFAULTS["min_prompt_length"]
    if len(args.prompt.strip()) < min_len:
        print(f"Error: prompt must be at least {min_len} characters", file=sys.stderr)
        return 1

    orchestrator = build_orchestrator()
    result = orchestrator.generate_website(
        GenerationRequest(prompt=args.prompt, style=args.style)
    )
    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    page = result.pages[0]
    if args.verbose:
        print(f"Page:  {page.name} ({page.path})")
        print(f"Title: {page.seo_title}")
        for warning in result.warnings:
            print(f"  [WARN] {warning}")
        if result.repair_failed:
            print("  [WARN] Automatic repair failed; code may still have errors")
    _write_or_print(page.code, args.output)
    return 0


def cmd_component(args):
    orchestrator = build_orchestrator()
    try:
        code = orchestrator.generate_component(args.name, args.description, args.style)
    except GenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    _write_or_print(code, args.output)
    return 0


def cmd_refine(args):
    try:
        with open(args.file) as fp:
            code = fp.read()
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    orchestrator = build_orchestrator()
    try:
        refined = orchestrator.refine_code(code, args.feedback)
    except GenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    _write_or_print(refined, args.output)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="sitesmith",
        description="AI website page generator",
    )
    parser.add_argument("--log-level", default="WARNING",
                        help="Logging level (default: WARNING)")
    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser("generate", help="Generate a page from a description")
    gen_parser.add_argument("--prompt", required=True, help="Natural language description")
    gen_parser.add_argument("--style", choices=STYLES, help="Design style (default: modern)")
    gen_parser.add_argument("--output", help="Write the page code to this file")
    gen_parser.add_argument("--verbose", action="store_true",
                            help="Show page metadata and validation warnings")

    comp_parser = subparsers.add_parser("component", help="Generate a single component")
    comp_parser.add_argument("--name", required=True)
    comp_parser.add_argument("--description", required=True)
    comp_parser.add_argument("--style", choices=STYLES)
    comp_parser.add_argument("--output")

    refine_parser = subparsers.add_parser("refine", help="Refine existing code with feedback")
    refine_parser.add_argument("--file", required=True, help="File holding the current code")
    refine_parser.add_argument("--feedback", required=True)
    refine_parser.add_argument("--output")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    commands = {"generate": cmd_generate, "component": cmd_component, "refine": cmd_refine}
    if args.command not in commands:
        parser.print_help()
        return 1
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
