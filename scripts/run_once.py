#!/usr/bin/env python3
"""
One-off code generation script.

Usage:
    python scripts/run_once.py --description "Create a for loop in Rust"
    echo "Create a struct with two fields" | python scripts/run_once.py
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ia_coding.chat_cli import CodeGenCLI
from ia_coding.config import config
from ia_coding.generator import CodeGenerationError, generate_code


def main():
    """Main entry point for one-off code generation."""
    parser = argparse.ArgumentParser(
        description="Generate code from a natural language description",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/run_once.py --description "Create a for loop in Rust"
  echo "Parse a CSV file into structs" | python scripts/run_once.py
        """,
    )

    parser.add_argument(
        "--description",
        type=str,
        default=None,
        help="The description to generate from (if not provided, reads from stdin)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else getattr(
        logging, config.LOG_LEVEL, logging.WARNING
    )
    logging.basicConfig(
        level=log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger = logging.getLogger(__name__)

    # Get description from args or stdin
    if args.description is not None:
        description = args.description
    else:
        if sys.stdin.isatty():
            parser.error("No description provided. Use --description or pipe input via stdin")
        try:
            description = sys.stdin.read()
        except (OSError, ValueError) as e:
            # ValueError covers decode errors and reads from a closed stream
            logger.error(f"Input stream failure: {e}")
            print(f"Error: Failed to read input: {e}", file=sys.stderr)
            sys.exit(1)

    description = description.strip()
    logger.info(
        f"Description: {description[:100]}{'...' if len(description) > 100 else ''}"
    )

    try:
        code = generate_code(description)
    except CodeGenerationError as e:
        logger.debug(f"Generation failed: {type(e).__name__}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    CodeGenCLI().print_generated_code(code)


if __name__ == "__main__":
    main()
