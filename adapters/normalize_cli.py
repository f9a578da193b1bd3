"""
Command-line interface adapter.

This module provides the CLI adapter for normalizing MODS XML files.
"""

import argparse
import logging
import os
from typing import List, Optional

from opentelemetry import trace

from application.normalization_service import DocumentNormalizationService

# Get logger for this module
logger = logging.getLogger(__name__)

# Get tracer for this module
tracer = trace.get_tracer(__name__)


def setup_argument_parser() -> argparse.ArgumentParser:
    """Configure and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mods-normalizer normalize",
        description="Normalize whitespace, empty elements and linefeeds in a MODS XML file.",
    )
    parser.add_argument(
        "-in",
        "--input-file",
        dest="input_file",
        help="Path to the input XML file",
        required=True,
    )
    parser.add_argument(
        "-out",
        "--output-file",
        dest="output_file",
        help="Path to the output XML file (default: output/<input_filename>-normalized.xml)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Increase logging verbosity"
    )
    return parser


class NormalizeCLI:
    """Command-line interface for MODS normalization."""

    def __init__(self, service: Optional[DocumentNormalizationService] = None) -> None:
        self.parser = setup_argument_parser()
        self.service = service or DocumentNormalizationService()
        self.script_dir = os.path.dirname(os.path.abspath(__file__))

    def resolve_output_path(self, input_file: str, output_file: Optional[str]) -> str:
        """
        Determine the output file path.

        Args:
            input_file: The input file path
            output_file: Optional explicit output file path

        Returns:
            The resolved output file path
        """
        if output_file:
            logger.debug("Using explicit output file: %s", output_file)
            return output_file

        input_name, _ = os.path.splitext(os.path.basename(input_file))
        output_filename = f"{input_name}-normalized.xml"

        # Get the project root directory (parent of adapters)
        project_root = os.path.dirname(self.script_dir)
        output_dir = os.path.join(project_root, "output")
        os.makedirs(output_dir, exist_ok=True)
        logger.debug("Created/verified output directory: %s", output_dir)

        output_path = os.path.join(output_dir, output_filename)
        logger.debug("Resolved output path: %s", output_path)
        return output_path

    def save_xml(self, xml_content: str, output_path: str) -> None:
        """Write the normalized document to a file."""
        logger.debug("Writing XML to file: %s", output_path)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(xml_content)
        logger.debug("Successfully wrote XML file")

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run the CLI application.

        Args:
            args: Optional arguments list (defaults to sys.argv)

        Returns:
            Exit code (0 for success, 1 for error)
        """
        with tracer.start_as_current_span("normalize_cli.run") as span:
            parsed_args = self.parser.parse_args(args)

            if parsed_args.verbose:
                logging.getLogger().setLevel(logging.DEBUG)

            logger.debug(
                "CLI arguments: input_file=%s, output_file=%s",
                parsed_args.input_file,
                parsed_args.output_file,
            )
            span.set_attribute("input.file", parsed_args.input_file)
            if parsed_args.output_file:
                span.set_attribute("output.file", parsed_args.output_file)

            try:
                normalized = self.service.normalize_file(parsed_args.input_file)

                output_path = self.resolve_output_path(
                    parsed_args.input_file, parsed_args.output_file
                )
                span.set_attribute("output.resolved_path", output_path)

                with tracer.start_as_current_span("save_xml") as save_span:
                    save_span.set_attribute("output.path", output_path)
                    save_span.set_attribute("output.size_bytes", len(normalized))
                    self.save_xml(normalized, output_path)

                summary = self.service.last_summary
                if summary is not None:
                    logger.info("Normalization summary: %s", summary)
                logger.info("Normalized %s to %s", parsed_args.input_file, output_path)
                span.set_attribute("success", True)
                span.set_attribute("exit_code", 0)
                return 0

            except FileNotFoundError:
                logger.error("Input file '%s' not found", parsed_args.input_file)
                span.set_attribute("success", False)
                span.set_attribute("error.type", "FileNotFoundError")
                span.set_attribute(
                    "error.message", f"Input file '{parsed_args.input_file}' not found"
                )
                span.set_attribute("exit_code", 1)
                return 1
            except Exception as e:
                logger.error("Unexpected error: %s", str(e))
                span.set_attribute("success", False)
                span.set_attribute("error.type", type(e).__name__)
                span.set_attribute("error.message", str(e))
                span.set_attribute("exit_code", 1)
                return 1
