"""Command line entry point for atlas2html."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from atlas2html.exceptions import Atlas2htmlError
from atlas2html.pipeline import SiteOptions, build_site
from atlas2html.schemas import DEFAULT_TEMPLATE, HtmlTemplate
from atlas2html.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atlas2html",
        description="Generate cross-linked destination pages from taxonomy and destinations XML.",
    )
    parser.add_argument("taxonomy", help="Taxonomy XML file")
    parser.add_argument("destinations", help="Destinations XML file")
    parser.add_argument("output_dir", help="Directory to write lp_<id>.html pages into")
    parser.add_argument(
        "sections",
        nargs="*",
        help='Destination sections to include (default: "overview")',
    )
    parser.add_argument("--template", help="Template file with {{...}} insertion points")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(
    taxonomy_file: str | Path,
    destinations_file: str | Path,
    output_dir: str | Path,
    *section_names: str,
    template: HtmlTemplate | str | Path | None = None,
) -> int:
    """Build the site and return a process exit status."""
    try:
        if template is None:
            page_template = DEFAULT_TEMPLATE
        elif isinstance(template, HtmlTemplate):
            page_template = template
        else:
            page_template = HtmlTemplate.from_file(template)
        build_site(
            taxonomy_path=taxonomy_file,
            destinations_path=destinations_file,
            output_dir=output_dir,
            options=SiteOptions(sections=list(section_names), template=page_template),
        )
    except Atlas2htmlError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except Exception:
        logger.exception("Unexpected failure")
        print("Error: unexpected failure", file=sys.stderr)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)
    return run(
        args.taxonomy,
        args.destinations,
        args.output_dir,
        *args.sections,
        template=args.template,
    )


if __name__ == "__main__":
    sys.exit(main())
