"""
Starforge - Main Entry Point

Generates a complete star system from a handful of seed parameters and
prints it as JSON. Nothing is read from or written to disk.
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from typing import Optional

from starforge.data_models import StarClass
from starforge.dice import DiceRoller
from starforge.errors import StarforgeError
from starforge.system import GenerationParams, generate_star_system
from starforge.tables.habitability import TECH_LEVEL_BASELINE
from starforge.worlds import DEFAULT_ORBIT_POSITION


# Configure logging
def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class GeneratorConfig:
    """Configuration for one generation run."""
    seed: Optional[int] = None
    star_system_id: str = "system"
    tech_level: int = TECH_LEVEL_BASELINE
    star_class: Optional[str] = None
    grade: Optional[int] = None
    star_name: Optional[str] = None
    world_name: Optional[str] = None
    orbit_position: int = DEFAULT_ORBIT_POSITION
    brown_dwarfs: int = 0
    no_secondary: bool = False
    verbose: bool = False
    indent: Optional[int] = 2

    def to_params(self) -> GenerationParams:
        return GenerationParams(
            star_system_id=self.star_system_id,
            tech_level=self.tech_level,
            star_class=self.star_class,
            grade=self.grade,
            star_name=self.star_name,
            world_name=self.world_name,
            orbit_position=self.orbit_position,
            brown_dwarf_count=self.brown_dwarfs,
            include_secondary_bodies=not self.no_secondary,
        )


def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Starforge - procedural star system generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m starforge.main                        # Random system
  python -m starforge.main --seed 42              # Reproducible system
  python -m starforge.main --star-class G --grade 2 --tech-level 12
  python -m starforge.main --brown-dwarfs 1 --compact
        """
    )

    # General options
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed; the same seed and options give the same system",
    )
    parser.add_argument(
        "--system-id",
        type=str,
        default="system",
        help="Star system id used to build record ids (default: system)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (every dice roll)",
    )

    # Star options
    star_group = parser.add_argument_group("Star Options")
    star_group.add_argument(
        "--star-class",
        type=str.upper,
        choices=[c.value for c in StarClass],
        help="Primary star class instead of rolling it",
    )
    star_group.add_argument(
        "--grade",
        type=int,
        choices=range(10),
        metavar="{0-9}",
        help="Primary star grade instead of rolling it",
    )
    star_group.add_argument(
        "--star-name",
        type=str,
        help="Primary star name",
    )

    # World options
    world_group = parser.add_argument_group("World Options")
    world_group.add_argument(
        "--tech-level",
        type=int,
        default=TECH_LEVEL_BASELINE,
        help=f"Primary world tech level, 0-20 (default: {TECH_LEVEL_BASELINE})",
    )
    world_group.add_argument(
        "--world-name",
        type=str,
        help="Primary world name",
    )
    world_group.add_argument(
        "--orbit",
        type=int,
        default=DEFAULT_ORBIT_POSITION,
        help=f"Primary world orbit slot, 1-20 (default: {DEFAULT_ORBIT_POSITION})",
    )

    # Secondary body options
    body_group = parser.add_argument_group("Secondary Body Options")
    body_group.add_argument(
        "--brown-dwarfs",
        type=int,
        default=0,
        help="Number of brown dwarfs to place (default: 0)",
    )
    body_group.add_argument(
        "--no-secondary",
        action="store_true",
        help="Skip disks, planets, moons and brown dwarfs",
    )

    # Output options
    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--compact",
        action="store_true",
        help="Print JSON on a single line",
    )

    return parser.parse_args(argv)


def create_config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    """Create GeneratorConfig from parsed arguments."""
    return GeneratorConfig(
        seed=args.seed,
        star_system_id=args.system_id,
        tech_level=args.tech_level,
        star_class=args.star_class,
        grade=args.grade,
        star_name=args.star_name,
        world_name=args.world_name,
        orbit_position=args.orbit,
        brown_dwarfs=args.brown_dwarfs,
        no_secondary=args.no_secondary,
        verbose=args.verbose,
        indent=None if args.compact else 2,
    )


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI usage."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)
    config = create_config_from_args(args)

    dice = DiceRoller(seed=config.seed)
    try:
        system = generate_star_system(config.to_params(), dice)
    except StarforgeError as e:
        logger.error(f"Generation failed: {e}")
        return 1

    print(json.dumps(system.to_dict(), indent=config.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
