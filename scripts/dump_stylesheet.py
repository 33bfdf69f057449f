#!/usr/bin/env python
from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from modsheet.modifiers import dump_modifier
from modsheet.stylesheet import CompilerOptions, StyleRule, compile_stylesheet_result


def format_rule(idx: int, rule: StyleRule) -> str:
    lines = [f"[{idx}] {rule.selector} line={rule.line} span={rule.range.as_tuple()}"]
    for modifier in rule.modifiers:
        lines.append(f"    {dump_modifier(modifier)}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compile a stylesheet and print its rules and diagnostics.")
    parser.add_argument("input", type=Path, help="Stylesheet source file.")
    parser.add_argument("--out", type=Path, default=None, help="Write the dump here instead of stdout.")
    parser.add_argument("--module", default=None, help="Module name recorded in modifier annotations.")
    parser.add_argument("--source-line", type=int, default=1, help="Line of the file the stylesheet starts on.")
    parser.add_argument("--no-annotations", action="store_true", help="Compile without source annotations.")
    parser.add_argument(
        "--resolve",
        nargs="+",
        default=[],
        metavar="CLASS",
        help="Class names to resolve against the compiled stylesheet.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show compiler debug logging.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    text = args.input.read_text(encoding="utf-8")
    options = CompilerOptions.for_file(
        str(args.input),
        module=args.module,
        source_line=args.source_line,
        annotations=not args.no_annotations,
    )
    result = compile_stylesheet_result(text, options)

    out: list[str] = []
    if result.stylesheet is not None:
        for idx, rule in enumerate(result.stylesheet):
            out.append(format_rule(idx, rule))
        for class_name in args.resolve:
            resolved = result.stylesheet.resolve(class_name)
            if resolved is None:
                out.append(f"{class_name}: no matching rule")
                continue
            out.append(f"{class_name}:")
            out.extend(f"    {dump_modifier(modifier)}" for modifier in resolved)
    for diagnostic in result.diagnostics:
        out.append(diagnostic.render(text, file=str(args.input)))

    if args.out is None:
        print("\n".join(out))
    else:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text("\n".join(out) + "\n", encoding="utf-8")
        print(f"Wrote {len(out)} lines to {args.out}")

    if result.has_errors:
        print(f"Failed to compile {args.input}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
