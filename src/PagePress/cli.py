from __future__ import annotations

import argparse
import logging
from datetime import datetime
from pathlib import Path

from . import assembler, markdown_parser
from .config import FooterPlacement, RenderConfig, load_config
from .utils import configure_logging, read_markdown, resolve_output_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagepress",
        description="Lay out a Markdown answer as a paginated PDF.",
    )
    parser.add_argument("input", type=str, help="Path to Markdown file")
    parser.add_argument("-o", "--output", type=str, help="Output PDF path or directory")
    parser.add_argument("--model", type=str, default="", help="Model identifier shown in the attribution line, e.g. org/model")
    parser.add_argument("--config", type=str, help="YAML file with layout settings")
    parser.add_argument("--title", type=str, help="Title line drawn at the top of the first page")
    parser.add_argument(
        "--footer",
        choices=[placement.value for placement in FooterPlacement],
        help="Stamp the timestamp on the last page only or on every page",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    config = load_config(Path(args.config).expanduser()) if args.config else RenderConfig()
    config = config.with_overrides(title=args.title, footer=args.footer)
    now = datetime.now()
    output_path = resolve_output_path(input_path, args.output, now, prefix=config.artifact_prefix)

    logging.info("Reading %s", input_path)
    markdown_text = read_markdown(input_path)
    logging.debug("Markdown length: %d chars", len(markdown_text))

    logging.info("Parsing markdown...")
    document = markdown_parser.parse_markdown(markdown_text)
    logging.debug("Parsed %d block(s)", len(document.blocks))

    logging.info("Rendering PDF to %s", output_path)
    assembler.export_pdf(document, output_path, identifier=args.model or input_path.stem, config=config, now=now)

    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
