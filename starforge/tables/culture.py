"""
d66 culture tables: social values, economic focus and technological attitude.

Each table maps every code "11".."66" to exactly one (trait, description).
"""

from types import MappingProxyType
from typing import Mapping

from starforge.data_models import CultureCategory


def _d66_table(rows: list[tuple[str, str, str]]) -> Mapping[str, tuple[str, str]]:
    table = {code: (trait, description) for code, trait, description in rows}
    expected = {f"{tens}{units}" for tens in range(1, 7) for units in range(1, 7)}
    if len(rows) != len(table) or set(table) != expected:
        raise ValueError("d66 table must cover codes 11-66 exactly once")
    return MappingProxyType(table)


SOCIAL_VALUES_TABLE: Mapping[str, tuple[str, str]] = _d66_table([
    ("11", "Individualistic", "Personal freedom and autonomy highly valued"),
    ("12", "Collectivist", "Group harmony and consensus prioritized"),
    ("13", "Hierarchical", "Strict social order and respect for authority"),
    ("14", "Egalitarian", "Equality and fairness emphasized"),
    ("15", "Meritocratic", "Achievement and capability determine status"),
    ("16", "Traditional", "Ancient customs and heritage preserved"),
    ("21", "Progressive", "Innovation and change embraced"),
    ("22", "Religious", "Faith and spirituality central to life"),
    ("23", "Secular", "Reason and science guide decisions"),
    ("24", "Militaristic", "Martial prowess and discipline honored"),
    ("25", "Pacifistic", "Non-violence and diplomacy preferred"),
    ("26", "Pragmatic", "Practical solutions over ideals"),
    ("31", "Idealistic", "High principles and moral standards"),
    ("32", "Competitive", "Rivalry and striving for excellence"),
    ("33", "Cooperative", "Mutual aid and collaboration valued"),
    ("34", "Isolationist", "Self-sufficiency and privacy preferred"),
    ("35", "Cosmopolitan", "Diversity and external contact welcomed"),
    ("36", "Xenophobic", "Outsiders viewed with suspicion"),
    ("41", "Hospitable", "Strangers treated with warmth"),
    ("42", "Scholarly", "Knowledge and learning revered"),
    ("43", "Anti-intellectual", "Practical skills over book learning"),
    ("44", "Artistic", "Creative expression celebrated"),
    ("45", "Utilitarian", "Function over form"),
    ("46", "Hedonistic", "Pleasure and enjoyment prioritized"),
    ("51", "Ascetic", "Simplicity and self-denial practiced"),
    ("52", "Materialistic", "Wealth and possessions valued"),
    ("53", "Environmentalist", "Nature and ecology protected"),
    ("54", "Expansionist", "Growth and territorial ambition"),
    ("55", "Fatalistic", "Acceptance of destiny and fate"),
    ("56", "Ambitious", "Drive to improve and advance"),
    ("61", "Conservative", "Cautious and risk-averse"),
    ("62", "Adventurous", "Bold and willing to take chances"),
    ("63", "Communitarian", "Strong community bonds"),
    ("64", "Nomadic", "Mobile and adaptable lifestyle"),
    ("65", "Settled", "Attachment to place and roots"),
    ("66", "Syncretic", "Blending multiple traditions"),
])

ECONOMIC_FOCUS_TABLE: Mapping[str, tuple[str, str]] = _d66_table([
    ("11", "Agricultural", "Farming and food production"),
    ("12", "Industrial", "Manufacturing and production"),
    ("13", "Post-Industrial", "Services and information"),
    ("14", "Resource Extraction", "Mining and harvesting"),
    ("15", "Trading Hub", "Commerce and exchange"),
    ("16", "Financial", "Banking and investment"),
    ("21", "Technology Sector", "Innovation and R&D"),
    ("22", "Tourism", "Hospitality and entertainment"),
    ("23", "Military-Industrial", "Defense production"),
    ("24", "Subsistence", "Basic needs only"),
    ("25", "Artisanal", "Crafts and specialty goods"),
    ("26", "Intellectual Property", "Ideas and patents"),
    ("31", "Energy Production", "Power generation"),
    ("32", "Pharmaceutical", "Medicine and biotech"),
    ("33", "Entertainment", "Media and arts"),
    ("34", "Education", "Training and knowledge"),
    ("35", "Transportation", "Shipping and logistics"),
    ("36", "Communication", "Networks and data"),
    ("41", "Construction", "Building and infrastructure"),
    ("42", "Recycling", "Waste processing"),
    ("43", "Luxury Goods", "High-end products"),
    ("44", "Food Processing", "Cuisine and beverages"),
    ("45", "Textile", "Clothing and fabrics"),
    ("46", "Shipbuilding", "Spacecraft construction"),
    ("51", "Research", "Scientific exploration"),
    ("52", "Healthcare", "Medical services"),
    ("53", "Legal Services", "Law and justice"),
    ("54", "Security", "Protection and defense"),
    ("55", "Gambling", "Gaming and chance"),
    ("56", "Black Market", "Underground economy"),
    ("61", "Religious Services", "Faith-based activities"),
    ("62", "Genetic Engineering", "Biological modification"),
    ("63", "Cybernetics", "Human-machine integration"),
    ("64", "Virtual Reality", "Simulated environments"),
    ("65", "Terraforming", "World modification"),
    ("66", "Mixed Economy", "Diversified activities"),
])

TECH_ATTITUDE_TABLE: Mapping[str, tuple[str, str]] = _d66_table([
    ("11", "Technophile", "Embraces all new technology"),
    ("12", "Technophobe", "Rejects modern technology"),
    ("13", "Balanced", "Pragmatic tech adoption"),
    ("14", "Selective", "Careful technology choices"),
    ("15", "Traditional Methods", "Prefers old ways"),
    ("16", "Cutting Edge", "Always seeks latest tech"),
    ("21", "Bio-focused", "Biological over mechanical"),
    ("22", "Cyber-focused", "Digital and robotic preference"),
    ("23", "Regulated", "Strict tech controls"),
    ("24", "Laissez-faire", "Minimal tech restrictions"),
    ("25", "Militarized", "Tech for defense priority"),
    ("26", "Medical Priority", "Health tech emphasized"),
    ("31", "Environmental Tech", "Eco-friendly solutions"),
    ("32", "Exploitative", "Tech without regard for cost"),
    ("33", "Artisanal Tech", "Handcrafted devices"),
    ("34", "Mass Production", "Standardized tech"),
    ("35", "Open Source", "Shared technology"),
    ("36", "Proprietary", "Protected tech secrets"),
    ("41", "AI Integration", "Artificial intelligence common"),
    ("42", "AI Prohibition", "No artificial minds"),
    ("43", "Augmentation", "Human enhancement accepted"),
    ("44", "Purist", "Unmodified biology valued"),
    ("45", "Automation", "Robots do most work"),
    ("46", "Manual Labor", "Human work preferred"),
    ("51", "Nanotech", "Molecular-scale engineering"),
    ("52", "Quantum Tech", "Quantum computing focus"),
    ("53", "Psionic", "Mental powers developed"),
    ("54", "Anti-Psionic", "Mental powers forbidden"),
    ("55", "Fusion Power", "Clean energy abundant"),
    ("56", "Renewable Focus", "Sustainable energy only"),
    ("61", "Archeotech", "Ancient technology revered"),
    ("62", "Experimental", "Risky tech testing"),
    ("63", "Conservative Tech", "Proven methods only"),
    ("64", "Scavenged", "Salvaged and repurposed"),
    ("65", "Imported", "Tech from off-world"),
    ("66", "Indigenous", "Locally developed tech"),
])

CULTURE_TABLES: Mapping[CultureCategory, Mapping[str, tuple[str, str]]] = MappingProxyType({
    CultureCategory.SOCIAL: SOCIAL_VALUES_TABLE,
    CultureCategory.ECONOMIC: ECONOMIC_FOCUS_TABLE,
    CultureCategory.TECHNOLOGICAL: TECH_ATTITUDE_TABLE,
})
