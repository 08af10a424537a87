"""
Main entry point for generating word grid puzzles.

Usage:
    python -m src.main --theme Animals --difficulty easy
    python -m src.main config.yaml --output puzzles/animals.json --verbose
    python -m src.main --theme random --seed 42 --fallback
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as OptionsError

from .puzzle import (
    GeneratedPuzzle,
    GenerationOptions,
    GenerationExhaustedError,
    PuzzleGenerationError,
    generate_puzzle,
    generate_fallback_puzzle,
    make_random_source,
    render_grid,
)
from .themes import DEFAULT_REGISTRY, ThemeRegistry, load_themes
from .verifiers import (
    filter_cascading_errors,
    validate_advanced_solvability,
    validate_puzzle_completeness,
    validate_theme,
)


def load_options(config_path: str) -> GenerationOptions:
    """Load generation options from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GenerationOptions(**data)


def apply_overrides(options: GenerationOptions, args: argparse.Namespace) -> GenerationOptions:
    """Layer command-line flags over the loaded options."""
    overrides: Dict[str, Any] = {
        "grid_size": args.grid_size,
        "target_word_count": args.targets,
        "distractor_word_count": args.distractors,
        "difficulty": args.difficulty,
        "max_attempts": args.max_attempts,
        "seed": args.seed,
    }
    if args.allow_overlaps:
        overrides["allow_word_overlaps"] = True

    data = options.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    return GenerationOptions(**data)


def print_puzzle(puzzle: GeneratedPuzzle) -> None:
    print(f"Theme: {puzzle.theme.name} ({puzzle.theme.category})")
    print()
    print(render_grid(puzzle.grid, highlight_words=True))
    print()
    for word in puzzle.all_words:
        kind = "target" if word.is_target else "distractor"
        start = word.positions[0] if word.positions else None
        where = f"({start.x}, {start.y})" if start else "(unplaced)"
        print(f"  {word.text:<8} {kind:<10} {word.orientation:<14} from {where}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a themed word grid puzzle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  grid_size: 6
  target_word_count: 3
  distractor_word_count: 2
  difficulty: easy
  max_attempts: 100
  seed: 42
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML generation options"
    )
    parser.add_argument(
        "--theme", "-t",
        default="random",
        help="Theme name, or 'random' for a random valid theme (default: random)"
    )
    parser.add_argument("--difficulty", "-d", choices=["easy", "medium", "hard"])
    parser.add_argument("--grid-size", type=int)
    parser.add_argument("--targets", type=int, help="Number of target words")
    parser.add_argument("--distractors", type=int, help="Number of distractor words")
    parser.add_argument("--max-attempts", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument(
        "--allow-overlaps",
        action="store_true",
        help="Let words share cells holding the same letter"
    )
    parser.add_argument(
        "--themes-file",
        help="YAML file with themes to use instead of the built-in ones"
    )
    parser.add_argument(
        "--fallback",
        action="store_true",
        help="Build a simple fallback puzzle if generation is exhausted"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the puzzle JSON"
    )
    parser.add_argument(
        "--list-themes",
        action="store_true",
        help="List available themes and exit"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        registry: ThemeRegistry = load_themes(args.themes_file) if args.themes_file else DEFAULT_REGISTRY
    except Exception as e:
        print(f"Error loading themes from {args.themes_file}: {e}", file=sys.stderr)
        return 1

    if args.list_themes:
        for name in registry.names():
            status = "✓" if validate_theme(registry.require(name)).valid else "✗"
            print(f"{status} {name}")
        return 0

    try:
        options = load_options(args.config) if args.config else GenerationOptions()
        options = apply_overrides(options, args)
    except (FileNotFoundError, OptionsError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    rng = make_random_source(options.seed)

    try:
        if args.theme == "random":
            theme = registry.random_valid_theme(rng)
        else:
            theme = registry.require(args.theme)
    except PuzzleGenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Theme: {theme.name}")
        print(f"Options: {options.model_dump()}")
        print("-" * 40)

    try:
        try:
            puzzle = generate_puzzle(theme, options, rng)
        except GenerationExhaustedError as e:
            if not args.fallback:
                raise
            if args.verbose:
                print(f"{e}; building fallback puzzle")
            puzzle = generate_fallback_puzzle(theme, options.grid_size, rng)
    except PuzzleGenerationError as e:
        print(f"Error generating puzzle: {e}", file=sys.stderr)
        return 1

    validation = validate_puzzle_completeness(puzzle)
    solvability = validate_advanced_solvability(puzzle)

    print_puzzle(puzzle)
    print()

    stats = puzzle.generation_stats
    if args.verbose:
        print(
            f"Attempts: {stats.attempts}, placed: {stats.placed_words}, "
            f"failed: {stats.failed_placements}, filler letters: {stats.fill_letters}"
        )

    if validation.is_valid:
        print("✓ Puzzle is valid")
    else:
        print(f"✗ Puzzle has {len(validation.errors)} errors:")
        for err in filter_cascading_errors(validation.errors):
            print(f"  - {err.message}")

    if args.verbose:
        for warn in validation.warnings:
            print(f"⚠ {warn.message}")
        for rec in solvability.recommendations:
            print(f"→ {rec.message}")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            json.dump(puzzle.to_payload(), f, indent=2)
        if args.verbose:
            print(f"Puzzle saved to: {output_path}")

    return 0 if validation.is_valid else 1


if __name__ == "__main__":
    sys.exit(main())
