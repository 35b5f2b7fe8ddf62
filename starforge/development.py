"""
Development resolver.

Development depends only on tech level + max(0, habitability score); a
hostile world is never pushed below what its technology supports.
"""

from typing import Union

from starforge.data_models import DevelopmentLevel
from starforge.errors import InvalidParameterError
from starforge.tables.habitability import DEVELOPMENT_INFO, DEVELOPMENT_LEVELS, DevelopmentInfo


def development_score(tech_level: int, habitability_score: float) -> float:
    return tech_level + max(0, habitability_score)


def determine_world_development(tech_level: int, habitability_score: float) -> DevelopmentLevel:
    """
    Map tech level and habitability to a development level.

    Thresholds on the development score: >= 20 very developed, >= 16 well
    developed, >= 12 developed, >= 9 mature, >= 6 developing, otherwise
    underdeveloped.
    """
    score = development_score(tech_level, habitability_score)
    for info in DEVELOPMENT_LEVELS:
        if info.min_score is None or score >= info.min_score:
            return info.level
    return DevelopmentLevel.UNDERDEVELOPED


def development_info(level: Union[str, DevelopmentLevel]) -> DevelopmentInfo:
    try:
        return DEVELOPMENT_INFO[DevelopmentLevel(level)]
    except ValueError:
        raise InvalidParameterError("development_level", level) from None


def development_modifier_for_pvs(level: Union[str, DevelopmentLevel]) -> int:
    """Port Value Score contribution, -2 (underdeveloped) to +3 (very developed)."""
    return development_info(level).pvs_modifier


def port_fee_multiplier(level: Union[str, DevelopmentLevel]) -> float:
    return development_info(level).port_fee_multiplier
