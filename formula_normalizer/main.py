"""
Main entry point for the Formula Normalizer

Normalizes a single formula image or every image in a directory.
"""

import argparse
import logging
import sys
from pathlib import Path
from formula_normalizer.utils.config_manager import ConfigManager
from formula_normalizer.pipeline import process_image_file
from formula_normalizer.batch import process_directory, process_directory_sequential


EXIT_CODES_HELP = """exit codes:
  0  all images normalized
  1  configuration error, missing input, or the single input file failed
  2  a directory batch finished with failed images; argparse also exits
     with 2 on command-line usage errors
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Normalize images of mathematical formulas for recognition models",
        epilog=EXIT_CODES_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "input",
        type=str,
        help="Image file or directory of png/jpg/jpeg images"
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        default="processed-formulas",
        help="Output directory for normalized images"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration file"
    )

    parser.add_argument("--width", type=int, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, help="Canvas height in pixels")
    parser.add_argument("--border", type=int, help="Border thickness in pixels")

    parser.add_argument(
        "--workers",
        type=int,
        help="Maximum number of images processed concurrently"
    )

    parser.add_argument(
        "--sequential",
        action="store_true",
        help="Process directory images one at a time"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def main(argv=None):
    """Main entry point for the formula normalizer."""
    args = build_parser().parse_args(argv)

    # Load configuration
    try:
        config = ConfigManager(args.config)
        config.update({
            'canvas.width': args.width,
            'canvas.height': args.height,
            'canvas.border': args.border,
            'batch.max_workers': args.workers,
        })
        processing_config = config.to_processing_config()
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    level = logging.DEBUG if args.verbose else config.get_log_level()
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    input_path = Path(args.input)
    output_path = Path(args.output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    if input_path.is_file():
        print(f"Processing single file: {input_path}")
        try:
            process_image_file(input_path, output_path / input_path.name, processing_config)
        except Exception as e:
            print(f"Error processing file {input_path}: {e}", file=sys.stderr)
            return 1
    elif input_path.is_dir():
        print(f"Processing directory: {input_path}")
        extensions = config.get('batch.extensions', ['png', 'jpg', 'jpeg'])
        if args.sequential:
            results = process_directory_sequential(input_path, output_path, processing_config,
                                                   extensions=extensions)
        else:
            results = process_directory(input_path, output_path, processing_config,
                                        max_workers=config.get('batch.max_workers'),
                                        extensions=extensions)
        print(f"Normalized {results.processed}/{results.total} images")
        if results.failed:
            for failure in results.failures:
                print(f"  FAILED {failure.input_path}: {failure.error}", file=sys.stderr)
            return 2
    else:
        print(f"Error: {args.input} is neither a file nor a directory.", file=sys.stderr)
        return 1

    print(f"Processing completed. Output saved in {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
