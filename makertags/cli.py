# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Command-line interface for makertags

Lists the known MakerNote tags of a directory and formats values typed on
the command line, e.g.:

    python -m makertags list Samsung2 --format csv
    python -m makertags print Samsung2 LensType SHORT 7
    python -m makertags print Samsung2 0x0021 SHORT "1 65535 6 4 5"

Copyright 2025 DNAi inc.
"""

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from makertags import __version__
from makertags.exceptions import MakerTagsError
from makertags.registry import (
    REGISTRIES,
    exif_key,
    expand_composite,
    format_tag,
    ifd_id_from_group,
    tag_info,
    tag_info_by_name,
    tag_list,
)
from makertags.value import TypeId, Value

OUTPUT_FORMATS = ('text', 'json', 'csv')


def format_output(rows: List[Dict[str, str]], format_type: str = "text") -> str:
    """
    Format result rows based on format type.

    Args:
        rows: List of rows, each a dictionary of column name to value
        format_type: Output format ('text', 'json', 'csv')

    Returns:
        Formatted output string
    """
    if format_type == "json":
        return json.dumps(rows, indent=2, ensure_ascii=False)
    if not rows:
        return ""
    columns = list(rows[0])
    if format_type == "csv":
        lines = [",".join(columns)]
        for row in rows:
            # Escape quotes in CSV
            cells = [str(row[column]).replace('"', '""') for column in columns]
            lines.append(",".join(f'"{cell}"' for cell in cells))
        return "\n".join(lines)
    # text format (default)
    return "\n".join("  ".join(str(row[column]) for column in columns) for row in rows)


def list_tags(group: Optional[str] = None, format_type: str = "text") -> str:
    """List the descriptors of one directory, or of every supported directory."""
    ifd_ids = [ifd_id_from_group(group)] if group else list(REGISTRIES)
    rows = []
    for ifd_id in ifd_ids:
        for info in tag_list(ifd_id):
            row = {
                "key": exif_key(info),
                "tag": f"0x{info.tag:04x}",
                "type": info.type_id.name,
                "count": str(info.count),
                "title": info.title,
            }
            if format_type != "text":
                row["description"] = info.description
            rows.append(row)
    return format_output(rows, format_type)


def describe_value(group: str, tag: str, type_name: str, values: List[str], format_type: str = "text") -> str:
    """
    Format a value given as text.

    Args:
        group: Group name of the directory (e.g. "Samsung2")
        tag: Tag id (decimal or 0x hex) or tag name
        type_name: TIFF type name (e.g. "SHORT")
        values: Value elements as text
        format_type: Output format

    Returns:
        Formatted output string; composite tags add one row per nested field
    """
    ifd_id = ifd_id_from_group(group)
    try:
        tag_id = int(tag, 0)
    except ValueError:
        tag_id = tag_info_by_name(tag, ifd_id).tag
    value = Value.from_string(type_name, " ".join(values))

    info = tag_info(tag_id, ifd_id)
    rows = [{"key": exif_key(info), "value": format_tag(tag_id, ifd_id, value)}]
    for nested_info, nested_value in expand_composite(ifd_id, tag_id, value):
        rows.append({"key": exif_key(nested_info), "value": nested_info.print_fct(nested_value)})

    if format_type == "text":
        return "\n".join(f"{row['key']}: {row['value']}" for row in rows)
    return format_output(rows, format_type)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="makertags",
        description="MakerNote tag registry and value formatting",
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    list_parser = subparsers.add_parser('list', help='List known tags')
    list_parser.add_argument('group', nargs='?', help='Group name, e.g. Samsung2 (default: all)')
    list_parser.add_argument('-f', '--format', choices=OUTPUT_FORMATS, default='text', dest='format_type')

    print_parser = subparsers.add_parser('print', help='Format a tag value')
    print_parser.add_argument('group', help='Group name, e.g. Samsung2')
    print_parser.add_argument('tag', help='Tag id (e.g. 0xa003) or name (e.g. LensType)')
    print_parser.add_argument('type', choices=[t.name for t in TypeId], type=str.upper, help='TIFF type')
    print_parser.add_argument('values', nargs='+', help='Value elements (rationals as num/den)')
    print_parser.add_argument('-f', '--format', choices=OUTPUT_FORMATS, default='text', dest='format_type')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        if args.command == 'list':
            output = list_tags(args.group, args.format_type)
        else:
            output = describe_value(args.group, args.tag, args.type, args.values, args.format_type)
    except MakerTagsError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        return 1

    print(output)
    return 0
