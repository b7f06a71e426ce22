from src.showdown_predictor.enums import Type

# =============================================================================
# TYPE-BOOSTING HELD ITEMS (x1.2 to moves of the matching type)
# =============================================================================
TYPE_BOOST_ITEMS = {
    "Silk Scarf": Type.NORMAL,
    "Charcoal": Type.FIRE,
    "Mystic Water": Type.WATER,
    "Magnet": Type.ELECTRIC,
    "Miracle Seed": Type.GRASS,
    "Never-Melt Ice": Type.ICE,
    "Black Belt": Type.FIGHTING,
    "Poison Barb": Type.POISON,
    "Soft Sand": Type.GROUND,
    "Sharp Beak": Type.FLYING,
    "Twisted Spoon": Type.PSYCHIC,
    "Silver Powder": Type.BUG,
    "Hard Stone": Type.ROCK,
    "Spell Tag": Type.GHOST,
    "Dragon Fang": Type.DRAGON,
    "Black Glasses": Type.DARK,
    "Metal Coat": Type.STEEL,
    "Fairy Feather": Type.FAIRY,
    # Plates
    "Flame Plate": Type.FIRE,
    "Splash Plate": Type.WATER,
    "Zap Plate": Type.ELECTRIC,
    "Meadow Plate": Type.GRASS,
    "Icicle Plate": Type.ICE,
    "Fist Plate": Type.FIGHTING,
    "Toxic Plate": Type.POISON,
    "Earth Plate": Type.GROUND,
    "Sky Plate": Type.FLYING,
    "Mind Plate": Type.PSYCHIC,
    "Insect Plate": Type.BUG,
    "Stone Plate": Type.ROCK,
    "Spooky Plate": Type.GHOST,
    "Draco Plate": Type.DRAGON,
    "Dread Plate": Type.DARK,
    "Iron Plate": Type.STEEL,
    "Pixie Plate": Type.FAIRY,
}
TYPE_BOOST_MULTIPLIER = 1.2

# =============================================================================
# ATTACKER ITEMS
# =============================================================================
CHOICE_BAND = "Choice Band"
CHOICE_SPECS = "Choice Specs"
LIFE_ORB = "Life Orb"
EXPERT_BELT = "Expert Belt"

# =============================================================================
# DEFENDER ITEMS
# =============================================================================
EVIOLITE = "Eviolite"
ASSAULT_VEST = "Assault Vest"

