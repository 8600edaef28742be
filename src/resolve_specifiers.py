"""Resolve module specifiers from the command line.

Example:
    python -m src.resolve_specifiers /pages/index.tsx react ../components/logo.tsx \
        --import react=https://esm.sh/react --config resolver.yml
"""

import argparse
import logging

from src.compute_config_hash import compute_config_hash
from src.dependency_report import DependencyReport
from src.import_map import ImportMap
from src.load_config import load_config
from src.malformed_specifier_error import MalformedSpecifierError
from src.resolution_session import ResolutionSession
from src.resolver_config import ResolverConfig


def _parse_import(entry: str) -> tuple[str, str]:
    key, sep, value = entry.partition("=")
    if not sep or not key or not value:
        msg = f"Expected KEY=VALUE, got: {entry!r}"
        raise argparse.ArgumentTypeError(msg)
    return key, value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the resolver CLI."""
    ap = argparse.ArgumentParser(
        description="Resolve import/export specifiers the way the bundler rewrites them.",
    )
    ap.add_argument("importer", help="Specifier of the file being processed")
    ap.add_argument("specifiers", nargs="+", help="Specifiers found in that file")
    ap.add_argument("--config", help="Path to a YAML resolver configuration file")
    ap.add_argument(
        "--import",
        dest="imports",
        action="append",
        default=[],
        type=_parse_import,
        metavar="KEY=VALUE",
        help="Import map entry (repeatable)",
    )
    ap.add_argument(
        "--dynamic",
        action="store_true",
        help="Record the specifiers as dynamic imports",
    )
    ap.add_argument("--report", help="Write a JSON dependency report to this path")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return ap


def run_resolution(args: argparse.Namespace) -> int:
    """Resolve every specifier and print one line per result."""
    raw_config = load_config(args.config)
    config = ResolverConfig.from_dict(raw_config)
    session = ResolutionSession(args.importer, ImportMap(dict(args.imports)), config)

    for specifier in args.specifiers:
        try:
            output_path, fixed_url = session.resolve(specifier, args.dynamic)
        except MalformedSpecifierError as e:
            raise SystemExit(str(e)) from e
        print(f"{specifier} -> {output_path} ({fixed_url})")

    if args.report:
        report = DependencyReport(compute_config_hash(raw_config))
        report.add_file(session.specifier, session.dependencies)
        report.generate_report(args.report)
        print(f"Dependency report written to {args.report}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the resolver CLI."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_resolution(args)


if __name__ == "__main__":
    raise SystemExit(main())
