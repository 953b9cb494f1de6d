"""Command-line interface for ingredient-lens."""

import argparse
import json
import sys

from ingredient_lens import __version__, fetch_all
from ingredient_lens.exceptions import EmptyQueryError, IngredientLensError


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="ingredient-lens",
        description="Look up nutrition, regulatory and hazard data for an ingredient",
    )
    parser.add_argument("query", help="Ingredient name (Korean, Japanese or English)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the API payload as JSON",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"ingredient-lens {__version__}",
    )

    args = parser.parse_args(argv)

    try:
        outcome = fetch_all(args.query)
    except EmptyQueryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except IngredientLensError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(outcome.to_payload(), ensure_ascii=False, indent=2))
    else:
        for result in outcome.results:
            _print_formatted(result)

    return 0


def _print_formatted(result) -> None:
    """Print one result in human-readable format."""
    print()
    print(f"  {result.name}")
    print()

    fields = [
        ("Description", result.description),
        ("FDC ID", result.fdcId),
        ("Source", result.dataSource),
        ("Insight", result.insight),
        ("MFDS", result.compliance.MFDS),
        ("USDA", result.compliance.USDA),
        ("MHLW", result.compliance.MHLW),
        ("Nutrients", _format_list(result.handling)),
        ("Hazard Class", result.hazards.category.value if result.hazards else None),
    ]

    for label, value in fields:
        display = value if value else "-"
        print(f"  {label + ':':<14} {display}")

    if result.hazards:
        for title, entries in (
            ("Microbial", result.hazards.microbial),
            ("Chemical", result.hazards.chemical),
            ("Physical", result.hazards.physical),
        ):
            print(f"  {title + ':':<14} {_format_hazards(entries)}")

    print()


def _format_list(items: list[str] | None) -> str | None:
    """Format list as comma-separated string."""
    if not items:
        return None
    return ", ".join(items)


def _format_hazards(entries) -> str:
    return ", ".join(f"{entry.name} ({entry.risk_level})" for entry in entries) or "-"


if __name__ == "__main__":
    sys.exit(main())
