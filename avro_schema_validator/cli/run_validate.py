#!/usr/bin/env python3
# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for validating datum files against an Avro schema."""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from ..config import validator_config
from ..datum_loader import load_datum, load_schema_reference
from ..exceptions import DatumLoadError, SchemaReferenceError
from ..result import ValidationResult
from ..schema_validator import SchemaValidator

logger = logging.getLogger(__name__)


class FileReport:
    """Outcome of validating one datum file."""

    def __init__(self, file_path: Path):
        self.file_path = file_path
        self.load_error: Optional[str] = None
        self.result: Optional[ValidationResult] = None

    @property
    def errors(self) -> List[str]:
        if self.load_error is not None:
            return [self.load_error]
        return self.result.errors


def validate_files(schema, file_paths: List[Path], *, root_identifier: str, fail_on_extra_fields: bool) -> List[FileReport]:
    """Validate every file against the schema, one report per file."""
    reports = []
    for file_path in file_paths:
        report = FileReport(file_path)
        try:
            datum = load_datum(file_path)
        except DatumLoadError as e:
            logger.error(str(e))
            report.load_error = str(e)
            reports.append(report)
            continue

        result = SchemaValidator.check(
            schema,
            datum,
            root_identifier=root_identifier,
            fail_on_extra_fields=fail_on_extra_fields,
        )
        report.result = result
        reports.append(report)
    return reports


def _print_reports(reports: List[FileReport], output_format: str) -> None:
    if output_format == 'json':
        output = {
            'files': len(reports),
            'errors': sum(len(r.errors) for r in reports),
            'results': [
                {
                    'file': str(r.file_path),
                    'load_error': r.load_error,
                    'errors': r.result.path_errors if r.result is not None else {},
                }
                for r in reports
            ]
        }
        print(json.dumps(output, indent=2))
    elif output_format == 'github-actions':
        for report in reports:
            for error in report.errors:
                print(f"::error file={report.file_path}::{error}")
    else:  # human-readable
        for report in reports:
            if report.errors:
                print(f"\n{report.file_path}:")
                for error in report.errors:
                    print(f"  ERROR: {error}")


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the validator CLI."""
    parser = argparse.ArgumentParser(
        description='Validate YAML/JSON datum files against an Avro schema',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='+',
        help='Datum files to validate',
    )
    parser.add_argument(
        '--schema',
        required=True,
        help="Schema object to validate against, as 'module.path:ATTRIBUTE'",
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--root-identifier',
        default=None,
        help=f"Path label of each datum's root (default: {validator_config.root_identifier!r})",
    )
    parser.add_argument(
        '--fail-on-extra-fields',
        action='store_true',
        default=None,
        help='Report record keys that are not declared in the schema',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help=f'Logging level (default: {validator_config.log_level})',
    )

    args = parser.parse_args(argv)

    config = replace(validator_config)
    if args.root_identifier is not None:
        config.root_identifier = args.root_identifier
    if args.fail_on_extra_fields is not None:
        config.fail_on_extra_fields = args.fail_on_extra_fields
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.format == 'json':
        # stdout carries only the JSON document
        config.print_level = 'DEBUG'
    config.set_logging()

    try:
        schema = load_schema_reference(args.schema)
    except SchemaReferenceError as e:
        logger.error(str(e))
        sys.exit(2)

    file_paths = [Path(p) for p in args.paths]
    logger.debug(f"Validating {len(file_paths)} file(s) against '{args.schema}'")
    reports = validate_files(
        schema,
        file_paths,
        root_identifier=config.root_identifier,
        fail_on_extra_fields=config.fail_on_extra_fields,
    )

    _print_reports(reports, args.format)

    # Exit with error code if any errors found
    failed = [r for r in reports if r.errors]
    if failed:
        logger.error(f"{len(failed)} of {len(reports)} file(s) failed validation")
        sys.exit(1)
    if args.format == 'human':
        print("Validation succeeded with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
