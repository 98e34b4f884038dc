#!/usr/bin/env python3
"""
CLI workflow runner for finding-aid conversion.

Reads a JSON archival description, converts it into a full or sparse node
list and writes the result as JSON.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from api.schemas import DescriptionSchema
from config.settings import settings
from core.constants import DEFAULT_OUTPUT_PARAMS, FIDELITY_FULL, FIDELITY_SPARSE
from core.errors import MarkupSerializationError
from findingaid import build
from utils.tree_utils import calculate_tree_depth

logger = logging.getLogger(__name__)


def load_description(input_path: Path):
    """Load and validate a JSON description from disk."""
    with open(input_path, 'r', encoding='utf-8') as f:
        schema = DescriptionSchema.model_validate_json(f.read())
    return schema.to_model()


def convert_file(input_path: Path, sparse: bool, inventory_id_types=None):
    """
    Convert a JSON description file.

    Args:
        input_path: Path to the JSON description
        sparse: Produce the sparse node list
        inventory_id_types: Override of the inventory identifier types

    Returns:
        Tuple of (container, total_node_count)
    """
    description = load_description(input_path)
    if inventory_id_types is None:
        inventory_id_types = settings.inventory_id_types
    return build(description, sparse=sparse, inventory_id_types=inventory_id_types)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert archival descriptions into node lists"
    )
    parser.add_argument('input', help="JSON description file")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--sparse', dest='sparse', action='store_true', help="Build the sparse node list")
    mode.add_argument('--full', dest='sparse', action='store_false', help="Build the full node list")
    parser.set_defaults(sparse=settings.sparse_by_default)

    parser.add_argument('--output', '-o', help="Output file (default: stdout)")
    parser.add_argument('--indent', type=int, default=settings.output_indent, help="JSON indentation")
    parser.add_argument('--stats', action='store_true', help="Print node count and depth")
    return parser


def main(argv=None) -> int:
    """Run the CLI; returns the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"❌ Error: File not found: {input_path}", file=sys.stderr)
        return 2

    try:
        container, total = convert_file(input_path, args.sparse)
    except ValidationError as e:
        print(f"❌ Invalid description: {e}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"❌ Unable to read description: {e}", file=sys.stderr)
        return 1
    except MarkupSerializationError as e:
        print(f"❌ Conversion failed: {e}", file=sys.stderr)
        return 1

    output = json.dumps(
        container.to_dict(),
        indent=args.indent,
        ensure_ascii=DEFAULT_OUTPUT_PARAMS['ensure_ascii']
    )

    if args.output:
        Path(args.output).write_text(output + '\n', encoding='utf-8')
        logger.info(f"Wrote {total} nodes to {args.output}")
    else:
        print(output)

    if args.stats:
        mode = FIDELITY_SPARSE if args.sparse else FIDELITY_FULL
        print(f"✓ Nodes: {total}", file=sys.stderr)
        print(f"✓ Max depth: {calculate_tree_depth(container.roots)}", file=sys.stderr)
        print(f"✓ Mode: {mode}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
