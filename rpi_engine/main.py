"""Main CLI interface for the RPI engine."""

import argparse
import json
import logging
import sys

from .analysis.comparison import compare_rankings, rank_movements
from .analysis.tables import format_results_table
from .config.sports import SPORT_CONFIGS, DEFAULT_SPORT_CONFIG, resolve_sport
from .data.loader import DataLoader, DatasetError, dataset_stats
from .data.validators import validate_teams
from .models.coefficients import Coefficients
from .rating.engine import rank_all
from .rating.suggestions import suggest_coefficients

logger = logging.getLogger(__name__)


def load_teams(args):
    """Load teams from a JSON dataset or a match table CSV."""
    if getattr(args, "matches", None):
        return DataLoader.load_matches_from_csv(args.matches, args.teams_csv)
    return DataLoader.load_teams_from_json(args.input)


def resolve_coefficients(args) -> Coefficients:
    """
    Build coefficients from the selected sport preset plus JSON overrides.

    Args:
        args: Parsed CLI arguments with ``sport`` and ``coefficients``

    Returns:
        Coefficients for the run
    """
    sport = resolve_sport(args.sport)
    coeffs = sport.coefficients
    if getattr(args, "coefficients", None):
        with open(args.coefficients, 'r') as f:
            coeffs = Coefficients.from_dict(json.load(f), base=coeffs)
    return coeffs


def report_warnings(teams) -> None:
    warnings = validate_teams(teams)
    for warning in warnings[:20]:
        logger.warning(warning)
    if len(warnings) > 20:
        logger.warning("... %d more data-quality warnings", len(warnings) - 20)


def rank_teams(args):
    """Rank teams and print/save the results."""
    try:
        teams = load_teams(args)
        coeffs = resolve_coefficients(args)
    except (DatasetError, ValueError, OSError) as e:
        print(f"Error loading data: {e}")
        return 1

    stats = dataset_stats(teams)
    print(f"Loaded {stats['team_count']} teams ({stats['total_game_records']} game records)")
    report_warnings(teams)

    results = rank_all(teams, coeffs, workers=args.workers)

    print(f"\n{'='*60}")
    print(f"RPI RANKINGS - {resolve_sport(args.sport).display_name.upper()}")
    print(f"{'='*60}\n")
    min_games = coeffs.min_games if args.min_games else None
    print(format_results_table(results, top=args.top, min_games=min_games))
    print("\n* domination penalty applied")

    if args.output:
        DataLoader.save_results_to_json(results, args.output, coeffs)
        print(f"\nSaved rankings to {args.output}")

    return 0


def create_sample(args):
    """Create sample data file."""
    print(f"Creating sample data at {args.output}...")
    teams = DataLoader.create_sample_data(args.output)
    print(f"✓ Sample data created ({len(teams)} teams)")
    print(f"\nYou can now rank it with:")
    print(f"  python -m rpi_engine.main rank --input {args.output}")
    return 0


def list_presets(args):
    """Print every sport preset."""
    for config in [DEFAULT_SPORT_CONFIG, *SPORT_CONFIGS.values()]:
        c = config.coefficients
        print(
            f"{config.id:>2}  {config.name:<12} "
            f"clwp={c.clwp_coeff:.2f} oclwp={c.oclwp_coeff:.2f} ooclwp={c.ooclwp_coeff:.2f} "
            f"diff={c.diff_coeff:.2f} dom={c.domination_coeff:.2f} "
            f"clgw={c.clgw_step:.2f} clgl={c.clgl_step:.2f} min_games={c.min_games}"
        )
    return 0


def suggest(args):
    """Print coefficients suggested for one team."""
    try:
        teams = load_teams(args)
        coeffs = resolve_coefficients(args)
    except (DatasetError, ValueError, OSError) as e:
        print(f"Error loading data: {e}")
        return 1

    results = rank_all(teams, coeffs)
    selected = next((r for r in results if r.team_id == args.team_id), None)
    if selected is None:
        print(f"Error: team {args.team_id} not found")
        return 1

    suggested = suggest_coefficients(selected, base=coeffs)
    print(f"Suggested coefficients for {selected.team_name}:")
    print(json.dumps(suggested.to_dict(), indent=2))
    return 0


def compare(args):
    """Compare rankings produced by two sport presets."""
    try:
        teams = load_teams(args)
        baseline_sport = resolve_sport(args.baseline)
        candidate_sport = resolve_sport(args.candidate)
    except (DatasetError, ValueError, OSError) as e:
        print(f"Error loading data: {e}")
        return 1

    baseline = rank_all(teams, baseline_sport.coefficients)
    candidate = rank_all(teams, candidate_sport.coefficients)
    metrics = compare_rankings(baseline, candidate)

    print(f"{baseline_sport.display_name} vs {candidate_sport.display_name} ({metrics['n_teams']} teams)")
    print(f"  Spearman rho:         {metrics['spearman']:.4f}")
    print(f"  Kendall tau:          {metrics['kendall']:.4f}")
    print(f"  Mean |rank change|:   {metrics['mean_abs_rank_change']:.2f}")
    print(f"  Max |rank change|:    {metrics['max_rank_change']}")

    moves = rank_movements(baseline, candidate).head(args.top)
    if len(moves):
        print("\nBiggest movers:")
        print(moves.to_string(index=False, float_format=lambda v: f"{v:.4f}"))
    return 0


def add_input_arguments(parser):
    parser.add_argument("--input", "-i", help="Team dataset JSON")
    parser.add_argument("--matches", default=None, help="Match table CSV (alternative to --input)")
    parser.add_argument("--teams-csv", default=None, help="Team table CSV with names and competitive levels")


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="RPI Engine - competitive-level adjusted team rankings"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Rank command
    rank_parser = subparsers.add_parser("rank", help="Rank teams by RPI")
    add_input_arguments(rank_parser)
    rank_parser.add_argument("--sport", "-s", default=None, help="Sport preset name or id (default: built-in defaults)")
    rank_parser.add_argument("--coefficients", "-c", default=None, help="JSON file of coefficient overrides")
    rank_parser.add_argument("--output", "-o", default=None, help="Output JSON file for rankings")
    rank_parser.add_argument("--top", type=int, default=None, help="Only print the top N teams")
    rank_parser.add_argument("--workers", type=int, default=1, help="Threads for per-team evaluation (default: 1)")
    rank_parser.add_argument(
        "--min-games",
        action="store_true",
        help="Hide teams below the preset's advisory minimum game count in the printed table",
    )

    # Sample command
    sample_parser = subparsers.add_parser("sample", help="Create sample team data")
    sample_parser.add_argument(
        "--output", "-o",
        default="sample_teams.json",
        help="Output file for sample data (default: sample_teams.json)"
    )

    subparsers.add_parser("presets", help="List sport coefficient presets")

    suggest_parser = subparsers.add_parser("suggest", help="Suggest coefficients tailored to one team")
    add_input_arguments(suggest_parser)
    suggest_parser.add_argument("--team-id", type=int, required=True, help="Team to tailor coefficients to")
    suggest_parser.add_argument("--sport", "-s", default=None, help="Base sport preset")
    suggest_parser.add_argument("--coefficients", "-c", default=None, help="JSON file of coefficient overrides")

    compare_parser = subparsers.add_parser("compare", help="Compare rankings under two sport presets")
    add_input_arguments(compare_parser)
    compare_parser.add_argument("--baseline", default="default", help="Baseline preset (default: default)")
    compare_parser.add_argument("--candidate", required=True, help="Candidate preset")
    compare_parser.add_argument("--top", type=int, default=10, help="Number of movers to show")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command in ("rank", "suggest", "compare") and not (args.input or args.matches):
        parser.error("one of --input or --matches is required")

    if args.command == "rank":
        return rank_teams(args)
    elif args.command == "sample":
        return create_sample(args)
    elif args.command == "presets":
        return list_presets(args)
    elif args.command == "suggest":
        return suggest(args)
    elif args.command == "compare":
        return compare(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
