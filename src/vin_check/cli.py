#!/usr/bin/env python3
"""
VIN Check CLI - Command Line Interface
======================================

Main CLI entry point for VIN check operations.

Usage:
    vin-check digit <vin>...             Compute check digits
    vin-check check <vin>...             Validate VINs
    vin-check extract [text...]          Extract a VIN from text, a file or stdin
    vin-check batch <file>               Extract a VIN from every line of a file
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from . import __version__
from .batch import extract_from_file, read_text
from .config import CheckConfig, get_config, set_config
from .core import (
    VIN_LENGTH,
    compute_check_digit,
    extract_vin,
    find_vins,
    is_valid_vin,
    validate_vin,
)
from .errors import VINCheckError

logger = logging.getLogger(__name__)


def _use_json(args, config: CheckConfig) -> bool:
    return args.json or config.output.json_output


def _print_json(payload: Any, config: CheckConfig) -> None:
    print(json.dumps(payload, indent=config.output.json_indent))


def cmd_digit(args, config: CheckConfig) -> int:
    """Compute the check digit of each VIN."""
    results = []
    exit_code = 0

    for raw in args.vins:
        vin = raw.strip().upper()
        if len(vin) != VIN_LENGTH:
            print(f"Error: {raw!r} is {len(vin)} characters, expected {VIN_LENGTH}", file=sys.stderr)
            results.append({'vin': vin, 'check_digit': None})
            exit_code = 1
            continue
        results.append({'vin': vin, 'check_digit': compute_check_digit(vin)})

    if _use_json(args, config):
        _print_json(results, config)
    else:
        for entry in results:
            if entry['check_digit'] is not None:
                print(f"{entry['vin']}: {entry['check_digit']}")

    return exit_code


def cmd_check(args, config: CheckConfig) -> int:
    """Validate each VIN; exit 0 only if all are valid."""
    results = []
    for raw in args.vins:
        entry = validate_vin(raw).to_dict()
        entry['input'] = raw
        entry['valid'] = is_valid_vin(raw)
        results.append(entry)

    if _use_json(args, config):
        _print_json(results, config)
    else:
        for entry in results:
            status = "VALID" if entry['valid'] else "INVALID"
            print(f"{entry['vin'] or entry['input']}: {status}")
            if args.explain:
                print(f"  Length OK:      {entry['is_valid_length']}")
                print(f"  Characters OK:  {entry['has_valid_chars']}")
                if entry['invalid_chars']:
                    print(f"  Invalid chars:  {''.join(entry['invalid_chars'])}")
                print(f"  Expected check: {entry['expected_check_digit'] or '-'}")
                print(f"  Checksum OK:    {entry['checksum_valid']}")

    return 0 if all(entry['valid'] for entry in results) else 1


def cmd_extract(args, config: CheckConfig) -> int:
    """Extract a VIN from text arguments, a file, or stdin."""
    if args.file:
        text = read_text(args.file)
    elif args.text:
        text = ' '.join(args.text)
    else:
        text = sys.stdin.read()

    if args.all:
        vins = find_vins(text)
    else:
        vin = extract_vin(text)
        vins = [vin] if vin is not None else []

    if _use_json(args, config):
        _print_json({'found': bool(vins), 'vins': vins}, config)
    elif vins:
        for vin in vins:
            print(vin)
    else:
        print("No VIN found", file=sys.stderr)

    return 0 if vins else 1


def cmd_batch(args, config: CheckConfig) -> int:
    """Extract a VIN from every line of a file."""
    report = extract_from_file(args.file)

    if _use_json(args, config):
        _print_json(report.to_dict(), config)
    else:
        for result in report.results:
            print(f"  {result.source}: {result.vin or '-'}")
        summary = report.summary
        print(f"Found {summary.found}/{summary.total} ({summary.hit_rate:.1%})")

    if args.output:
        report.save(args.output, indent=config.output.json_indent)
        # stdout carries only the JSON document in JSON mode
        stream = sys.stderr if _use_json(args, config) else sys.stdout
        print(f"Results saved to: {args.output}", file=stream)

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='vin-check',
        description='VIN Check - Validate and extract Vehicle Identification Numbers',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--config', '-c', help='Path to YAML or JSON config file')
    parser.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Digit command
    digit_parser = subparsers.add_parser('digit', help='Compute check digits')
    digit_parser.add_argument('vins', nargs='+', metavar='VIN', help='17-character VIN(s)')

    # Check command
    check_parser = subparsers.add_parser('check', help='Validate VINs')
    check_parser.add_argument('vins', nargs='+', metavar='VIN', help='Candidate VIN(s)')
    check_parser.add_argument('--explain', '-e', action='store_true',
                              help='Show which validation step failed')

    # Extract command
    extract_parser = subparsers.add_parser('extract', help='Extract a VIN from scanned text')
    extract_parser.add_argument('text', nargs='*', help='Text to search (stdin if omitted)')
    extract_parser.add_argument('--file', '-f', help='Read text from file')
    extract_parser.add_argument('--all', '-a', action='store_true',
                                help='Print every valid window, not just the first')

    # Batch command
    batch_parser = subparsers.add_parser('batch', help='Extract a VIN from each line of a file')
    batch_parser.add_argument('file', help='Text file, one scan per line')
    batch_parser.add_argument('--output', '-o', help='Output JSON file')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == 'extract' and args.file and args.text:
        parser.error("extract: give TEXT arguments or --file, not both")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        'digit': cmd_digit,
        'check': cmd_check,
        'extract': cmd_extract,
        'batch': cmd_batch,
    }

    try:
        if args.config:
            config = set_config(CheckConfig.load(args.config))
        else:
            config = get_config()
        if args.verbose:
            config.logging.level = 'DEBUG'
            set_config(config)

        return commands[args.command](args, config)
    except VINCheckError as e:
        logger.error(f"{e.error_code}: {e.message}")
        print(f"Error: {e.message}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
