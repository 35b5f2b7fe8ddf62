"""
Inhabitant tables: wealth, power structure, governance and source of power.

Each is an independent 2d6 table. Wealth entries carry the numeric wealth
value, which doubles as the social standing (SOC) modifier.
"""

from typing import Mapping

from starforge.data_models import Governance, PowerStructure, SourceOfPower
from starforge.tables.table_types import ModifierEntry, build_roll_table

# value = wealth level, modifier = SOC modifier
WEALTH_TABLE: Mapping[int, ModifierEntry] = build_roll_table([
    (2, 2, ModifierEntry(-2, "Destitute", "Extreme poverty", -2)),
    (3, 3, ModifierEntry(-1, "Very Poor", "Struggling economy", -1)),
    (4, 5, ModifierEntry(0, "Poor", "Below average wealth", 0)),
    (6, 7, ModifierEntry(1, "Moderate", "Average wealth", 1)),
    (8, 9, ModifierEntry(2, "Comfortable", "Above average wealth", 2)),
    (10, 10, ModifierEntry(3, "Prosperous", "Well-off", 3)),
    (11, 11, ModifierEntry(4, "Rich", "Wealthy world", 4)),
    (12, 12, ModifierEntry(5, "Very Rich", "Extremely wealthy", 5)),
])

POWER_STRUCTURE_TABLE: Mapping[int, ModifierEntry] = build_roll_table([
    (2, 2, ModifierEntry(PowerStructure.ANARCHY, "Anarchy", "No central authority")),
    (3, 3, ModifierEntry(PowerStructure.FEUDAL, "Feudal", "Local lords and vassals")),
    (4, 4, ModifierEntry(PowerStructure.AUTOCRACY, "Autocracy", "Single ruler with absolute power")),
    (5, 6, ModifierEntry(PowerStructure.OLIGARCHY, "Oligarchy", "Rule by elite few")),
    (7, 8, ModifierEntry(PowerStructure.REPRESENTATIVE, "Representative", "Elected representatives")),
    (9, 9, ModifierEntry(PowerStructure.DEMOCRACY, "Democracy", "Direct democratic rule")),
    (10, 10, ModifierEntry(PowerStructure.MERITOCRACY, "Meritocracy", "Rule by the most capable")),
    (11, 11, ModifierEntry(PowerStructure.TECHNOCRACY, "Technocracy", "Rule by technical experts")),
    (12, 12, ModifierEntry(PowerStructure.AI_SYNTHETIC, "AI/Synthetic", "Governed by artificial intelligence")),
])

# modifier column holds the dice modifier label for governance checks
GOVERNANCE_TABLE: Mapping[int, ModifierEntry] = build_roll_table([
    (2, 3, ModifierEntry(Governance.CHAOTIC, "Chaotic", "Collapsed or ineffective", "Dis+2")),
    (4, 5, ModifierEntry(Governance.WEAK, "Weak", "Corrupt or incompetent", "Dis+1")),
    (6, 8, ModifierEntry(Governance.MODERATE, "Moderate", "Functional but flawed", "Standard")),
    (9, 10, ModifierEntry(Governance.STRONG, "Strong", "Effective and fair", "Adv+1")),
    (11, 12, ModifierEntry(Governance.TOTALITARIAN, "Totalitarian", "Highly efficient but oppressive", "Adv+2")),
])

SOURCE_OF_POWER_TABLE: Mapping[int, ModifierEntry] = build_roll_table([
    (2, 3, ModifierEntry(SourceOfPower.MILITARY, "Military", "Armed forces hold power")),
    (4, 5, ModifierEntry(SourceOfPower.RELIGIOUS, "Religious", "Faith-based authority")),
    (6, 6, ModifierEntry(SourceOfPower.CORPORATE, "Corporate", "Megacorporation control")),
    (7, 8, ModifierEntry(SourceOfPower.POPULAR, "Popular", "Will of the people")),
    (9, 9, ModifierEntry(SourceOfPower.HEREDITARY, "Hereditary", "Inherited positions")),
    (10, 10, ModifierEntry(SourceOfPower.BUREAUCRATIC, "Bureaucratic", "Civil service power")),
    (11, 11, ModifierEntry(SourceOfPower.ACADEMIC, "Academic", "Educational institutions")),
    (12, 12, ModifierEntry(SourceOfPower.OTHER, "Other", "Unusual power source")),
])

# Population of non-habitat worlds: mass x habitability factor x 10^(TL-7) x this
POPULATION_SCALE = 1_000_000
MIN_HABITABILITY_FACTOR = 0.1
