#!/usr/bin/env python3
"""
Business Document Generator - Main Entry Point.

Generates a receipt, invoice or internal memo from a YAML form, optionally
stamps it and gives it a background, and exports it as a single-page PDF.
When the PDF export fails the document can be sent to the browser's print
dialog instead.

Usage:
    Command Line:
        python main.py --type invoice --input invoice.yaml
        python main.py --type receipt --input receipt.yaml \\
            --stamp-variant official --stamp-main "ACME" --stamp-color green
        python main.py --type note --input memo.yaml --background classic --html

    Python:
        from main import run_generation
        result = asyncio.run(run_generation(DocumentType.INVOICE, form))

Author: Document Tools Team
Version: 1.0.0
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

# Import project modules
from config import ConfigurationManager, get_config
from docgen.utils.logger import LOGGER_NAMESPACE, setup_logger_from_config, get_logger
from docgen.utils.helpers import ensure_directory
from docgen.utils.exceptions import (
    DocumentGeneratorError,
    FormError,
    ThemeError,
)
from docgen.form_extractor.models import DocumentType
from docgen.themes.stamp import ColorTheme, SizeClass, StampVariant
from docgen.themes.background import BackgroundTheme
from docgen.composer.composer import render_page
from docgen.export.pipeline import ExportResult, ExportStatus
from docgen.export.writer import export_filename
from docgen.generator.generator import DocumentGenerator

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INVALID = 2
EXIT_INTERRUPTED = 130

STAMP_OPTIONS = {
    "stamp_variant": "variant",
    "stamp_main": "main_text",
    "stamp_sub": "sub_text",
    "stamp_status": "status_text",
    "stamp_color": "color",
    "stamp_size": "size",
}


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="Business Document Generator (kwitansi, faktur, nota dinas)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Export an invoice:
        python main.py --type invoice --input invoice.yaml

    Stamped receipt:
        python main.py --type receipt --input receipt.yaml --stamp-variant starred --stamp-main ACME

    Memo preview as HTML:
        python main.py --type note --input memo.yaml --background classic --html
        """
    )

    # Document arguments
    parser.add_argument(
        "--type", "-t",
        choices=[document_type.value for document_type in DocumentType],
        required=True,
        help="Document type to generate"
    )

    parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="YAML file with the form values"
    )

    # Stamp options
    stamp = parser.add_argument_group("stamp")
    stamp.add_argument(
        "--stamp-variant",
        choices=[variant.value for variant in StampVariant],
        help="Stamp shape (enables the stamp)"
    )
    stamp.add_argument("--stamp-main", help="Stamp main text (enables the stamp)")
    stamp.add_argument("--stamp-sub", help="Stamp sub text")
    stamp.add_argument("--stamp-status", help="Stamp status text")
    stamp.add_argument(
        "--stamp-color",
        choices=[color.value for color in ColorTheme],
        help="Stamp colour theme"
    )
    stamp.add_argument(
        "--stamp-size",
        choices=[size.value for size in SizeClass],
        help="Stamp size class"
    )

    parser.add_argument(
        "--background", "-b",
        choices=[theme.value for theme in BackgroundTheme],
        default=None,
        help="Background theme"
    )

    # Output options
    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default=None,
        help="Directory for the exported files (default: paths.output_dir)"
    )

    parser.add_argument(
        "--html",
        action="store_true",
        help="Write the finished document as HTML instead of exporting a PDF"
    )

    parser.add_argument(
        "--on-failure",
        choices=["ask", "print", "abort"],
        default="ask",
        help="What to do when the PDF export fails (default: ask)"
    )

    # Processing options
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to custom configuration file"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    return parser.parse_args(argv)


def initialize_system(args: argparse.Namespace) -> ConfigurationManager:
    """
    Initialize configuration and logging.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Initialized configuration manager.
    """
    config = ConfigurationManager(args.config)

    logger = setup_logger_from_config()

    if args.debug:
        import logging
        logging.getLogger(LOGGER_NAMESPACE).setLevel(logging.DEBUG)

    logger.info("=" * 60)
    logger.info("BUSINESS DOCUMENT GENERATOR")
    logger.info("=" * 60)
    logger.info(f"Version: {config.get('project.version', '1.0.0')}")
    logger.info(f"Document: {args.type}")
    logger.info(f"Input: {args.input}")

    return config


def load_form(input_path: str) -> Dict[str, Any]:
    """
    Read form values from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file does not hold a mapping.
    """
    path = Path(input_path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        form = yaml.safe_load(f)

    if not isinstance(form, dict):
        raise ValueError(f"Form file must contain a mapping of fields: {path}")

    return form


def stamp_options(args: argparse.Namespace) -> Optional[Dict[str, Any]]:
    """
    Collect the stamp options given on the command line.

    Returns:
        Loose stamp values, or None when no stamp was requested. A stamp is
        requested by giving a variant or a main text.
    """
    if args.stamp_variant is None and args.stamp_main is None:
        return None

    return {
        key: getattr(args, option)
        for option, key in STAMP_OPTIONS.items()
        if getattr(args, option) is not None
    }


def ask_print_fallback(prompt: str) -> bool:
    """Ask the user whether to print instead; anything but yes means no."""
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes", "ya")


async def run_generation(
    document_type: DocumentType,
    form: Dict[str, Any],
    stamp: Optional[Dict[str, Any]] = None,
    background: Optional[str] = None,
    output_dir: Optional[str] = None,
    html_only: bool = False,
    on_failure: str = "abort",
    confirm: Callable[[str], bool] = ask_print_fallback,
    generator: Optional[DocumentGenerator] = None
) -> ExportResult:
    """
    Generate one document and export it.

    This is the main programmatic entry point of the system.

    Args:
        document_type: Document to generate.
        form: Raw form values.
        stamp: Loose stamp values, None for no stamp.
        background: Background theme, None for none.
        output_dir: Directory for the output files.
        html_only: Write the page HTML instead of a PDF.
        on_failure: "ask", "print" or "abort" when the PDF export fails.
        confirm: Asks the user, used when on_failure is "ask".
        generator: Generator to use; a new one by default.

    Returns:
        ExportResult of the export (a SUCCESS result pointing at the HTML
        file when html_only is set).

    Raises:
        ValidationError: If the form is invalid.
        PrintError: If the print fallback cannot be opened.

    Example:
        >>> result = asyncio.run(run_generation(DocumentType.INVOICE, form))
        >>> result.path.name
        'faktur-INV-001.pdf'
    """
    logger = get_logger(__name__)

    generator = generator or DocumentGenerator(output_dir=output_dir)

    # Themes first so that the document is composed once
    if stamp is not None:
        generator.apply_stamp(document_type, stamp)
    if background is not None:
        generator.apply_background(document_type, background)

    fragment = generator.generate(document_type, form)

    if html_only:
        record = generator.session.record_for(document_type)
        filename = Path(export_filename(document_type, record.number)).with_suffix(".html")
        directory = ensure_directory(output_dir or get_config("paths.output_dir", "outputs"))
        html_path = directory / filename.name
        html_path.write_text(render_page(fragment, title=document_type.title), encoding="utf-8")
        logger.info(f"HTML saved: {html_path}")
        return ExportResult.success(document_type.surface_id, html_path)

    result = await generator.export(document_type)

    if result.status is ExportStatus.CAPTURE_FAILED:
        logger.error(get_config(
            "export.messages.failure_notice",
            "Terjadi kesalahan saat membuat PDF. Silakan coba lagi."
        ))

        use_print = on_failure == "print" or (
            on_failure == "ask" and confirm(result.message)
        )
        if use_print:
            print_path = generator.print_fallback(document_type)
            logger.info(f"Print page opened: {print_path}")

    return result


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function - entry point for command-line execution.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        # Parse command-line arguments
        args = parse_arguments(argv)

        # Initialize system
        initialize_system(args)
        logger = get_logger(__name__)

        form = load_form(args.input)

        result = asyncio.run(run_generation(
            document_type=DocumentType(args.type),
            form=form,
            stamp=stamp_options(args),
            background=args.background,
            output_dir=args.output_dir,
            html_only=args.html,
            on_failure=args.on_failure,
        ))

        if result.status is ExportStatus.EMPTY_SURFACE:
            logger.error(result.message)
            return EXIT_INVALID

        if result.status is ExportStatus.CAPTURE_FAILED:
            return EXIT_FAILURE

        logger.info("=" * 60)
        logger.info(f"Document saved: {result.path}")
        logger.info("=" * 60)

        return EXIT_SUCCESS

    except (FormError, ThemeError) as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return EXIT_INVALID

    except DocumentGeneratorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    except (ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return EXIT_INTERRUPTED

    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        if "--debug" in sys.argv:
            import traceback
            traceback.print_exc()
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
