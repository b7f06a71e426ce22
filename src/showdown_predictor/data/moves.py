from src.showdown_predictor.enums import MoveCategory, MoveFlag, Type
from src.showdown_predictor.schema.battle_move import MoveSpec

# Move records keyed by display name. Variable-power moves (Low Kick, Seismic Toss)
# carry power 0 here; the damage calculator resolves their power per matchup.
MOVE_DATA: dict[str, MoveSpec] = {
    "Earthquake": MoveSpec(name="Earthquake", power=100, type=Type.GROUND, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Close Combat": MoveSpec(name="Close Combat", power=120, type=Type.FIGHTING, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Knock Off": MoveSpec(name="Knock Off", power=65, type=Type.DARK, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "U-turn": MoveSpec(name="U-turn", power=70, type=Type.BUG, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.PIVOT),
    "Flip Turn": MoveSpec(name="Flip Turn", power=60, type=Type.WATER, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.PIVOT),
    "Stone Edge": MoveSpec(name="Stone Edge", power=100, type=Type.ROCK, category=MoveCategory.PHYSICAL, priority=0, accuracy=80, flags=MoveFlag.CONTACT),
    "Iron Head": MoveSpec(name="Iron Head", power=80, type=Type.STEEL, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Dragon Claw": MoveSpec(name="Dragon Claw", power=80, type=Type.DRAGON, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Outrage": MoveSpec(name="Outrage", power=120, type=Type.DRAGON, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Play Rough": MoveSpec(name="Play Rough", power=90, type=Type.FAIRY, category=MoveCategory.PHYSICAL, priority=0, accuracy=90, flags=MoveFlag.CONTACT),
    "Crunch": MoveSpec(name="Crunch", power=80, type=Type.DARK, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Brave Bird": MoveSpec(name="Brave Bird", power=120, type=Type.FLYING, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Flare Blitz": MoveSpec(name="Flare Blitz", power=120, type=Type.FIRE, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Waterfall": MoveSpec(name="Waterfall", power=80, type=Type.WATER, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Liquidation": MoveSpec(name="Liquidation", power=85, type=Type.WATER, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Power Whip": MoveSpec(name="Power Whip", power=120, type=Type.GRASS, category=MoveCategory.PHYSICAL, priority=0, accuracy=85, flags=MoveFlag.CONTACT),
    "Ice Spinner": MoveSpec(name="Ice Spinner", power=80, type=Type.ICE, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Triple Axel": MoveSpec(name="Triple Axel", power=40, type=Type.ICE, category=MoveCategory.PHYSICAL, priority=0, accuracy=90, flags=MoveFlag.CONTACT),
    "Wicked Blow": MoveSpec(name="Wicked Blow", power=75, type=Type.DARK, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Surging Strikes": MoveSpec(name="Surging Strikes", power=25, type=Type.WATER, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Kowtow Cleave": MoveSpec(name="Kowtow Cleave", power=85, type=Type.DARK, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.SLICING),
    "Dragon Darts": MoveSpec(name="Dragon Darts", power=50, type=Type.DRAGON, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Fire Punch": MoveSpec(name="Fire Punch", power=75, type=Type.FIRE, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.PUNCH),
    "Ice Punch": MoveSpec(name="Ice Punch", power=75, type=Type.ICE, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.PUNCH),
    "Thunder Punch": MoveSpec(name="Thunder Punch", power=75, type=Type.ELECTRIC, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.PUNCH),
    "Drain Punch": MoveSpec(name="Drain Punch", power=75, type=Type.FIGHTING, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.PUNCH),
    "Superpower": MoveSpec(name="Superpower", power=120, type=Type.FIGHTING, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Low Kick": MoveSpec(name="Low Kick", power=0, type=Type.FIGHTING, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Body Press": MoveSpec(name="Body Press", power=80, type=Type.FIGHTING, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Sacred Sword": MoveSpec(name="Sacred Sword", power=90, type=Type.FIGHTING, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.SLICING),
    "Facade": MoveSpec(name="Facade", power=70, type=Type.NORMAL, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Headlong Rush": MoveSpec(name="Headlong Rush", power=120, type=Type.GROUND, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Rage Fist": MoveSpec(name="Rage Fist", power=50, type=Type.GHOST, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Bitter Blade": MoveSpec(name="Bitter Blade", power=90, type=Type.FIRE, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.SLICING),
    "Shadow Claw": MoveSpec(name="Shadow Claw", power=70, type=Type.GHOST, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Phantom Force": MoveSpec(name="Phantom Force", power=90, type=Type.GHOST, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Grassy Glide": MoveSpec(name="Grassy Glide", power=55, type=Type.GRASS, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Wood Hammer": MoveSpec(name="Wood Hammer", power=120, type=Type.GRASS, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Horn Leech": MoveSpec(name="Horn Leech", power=75, type=Type.GRASS, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Flower Trick": MoveSpec(name="Flower Trick", power=70, type=Type.GRASS, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Pyro Ball": MoveSpec(name="Pyro Ball", power=120, type=Type.FIRE, category=MoveCategory.PHYSICAL, priority=0, accuracy=90, flags=MoveFlag.NONE),
    "High Jump Kick": MoveSpec(name="High Jump Kick", power=130, type=Type.FIGHTING, category=MoveCategory.PHYSICAL, priority=0, accuracy=90, flags=MoveFlag.CONTACT),
    "Aqua Step": MoveSpec(name="Aqua Step", power=80, type=Type.WATER, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Ivy Cudgel": MoveSpec(name="Ivy Cudgel", power=100, type=Type.GRASS, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Gigaton Hammer": MoveSpec(name="Gigaton Hammer", power=160, type=Type.STEEL, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Wave Crash": MoveSpec(name="Wave Crash", power=120, type=Type.WATER, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Ceaseless Edge": MoveSpec(name="Ceaseless Edge", power=65, type=Type.DARK, category=MoveCategory.PHYSICAL, priority=0, accuracy=90, flags=MoveFlag.CONTACT | MoveFlag.SLICING),
    "Salt Cure": MoveSpec(name="Salt Cure", power=40, type=Type.ROCK, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Dual Wingbeat": MoveSpec(name="Dual Wingbeat", power=40, type=Type.FLYING, category=MoveCategory.PHYSICAL, priority=0, accuracy=90, flags=MoveFlag.CONTACT),
    "Acrobatics": MoveSpec(name="Acrobatics", power=55, type=Type.FLYING, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Razor Shell": MoveSpec(name="Razor Shell", power=75, type=Type.WATER, category=MoveCategory.PHYSICAL, priority=0, accuracy=95, flags=MoveFlag.CONTACT | MoveFlag.SLICING),
    "Psychic Fangs": MoveSpec(name="Psychic Fangs", power=85, type=Type.PSYCHIC, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Bounce": MoveSpec(name="Bounce", power=85, type=Type.FLYING, category=MoveCategory.PHYSICAL, priority=0, accuracy=85, flags=MoveFlag.CONTACT),
    "Shadow Ball": MoveSpec(name="Shadow Ball", power=80, type=Type.GHOST, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Draco Meteor": MoveSpec(name="Draco Meteor", power=130, type=Type.DRAGON, category=MoveCategory.SPECIAL, priority=0, accuracy=90, flags=MoveFlag.NONE),
    "Moonblast": MoveSpec(name="Moonblast", power=95, type=Type.FAIRY, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Flamethrower": MoveSpec(name="Flamethrower", power=90, type=Type.FIRE, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Overheat": MoveSpec(name="Overheat", power=130, type=Type.FIRE, category=MoveCategory.SPECIAL, priority=0, accuracy=90, flags=MoveFlag.NONE),
    "Thunderbolt": MoveSpec(name="Thunderbolt", power=90, type=Type.ELECTRIC, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Volt Switch": MoveSpec(name="Volt Switch", power=70, type=Type.ELECTRIC, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.PIVOT),
    "Ice Beam": MoveSpec(name="Ice Beam", power=90, type=Type.ICE, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Hydro Pump": MoveSpec(name="Hydro Pump", power=110, type=Type.WATER, category=MoveCategory.SPECIAL, priority=0, accuracy=80, flags=MoveFlag.NONE),
    "Scald": MoveSpec(name="Scald", power=80, type=Type.WATER, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Focus Blast": MoveSpec(name="Focus Blast", power=120, type=Type.FIGHTING, category=MoveCategory.SPECIAL, priority=0, accuracy=70, flags=MoveFlag.NONE),
    "Psychic": MoveSpec(name="Psychic", power=90, type=Type.PSYCHIC, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Psyshock": MoveSpec(name="Psyshock", power=80, type=Type.PSYCHIC, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Dark Pulse": MoveSpec(name="Dark Pulse", power=80, type=Type.DARK, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Sludge Bomb": MoveSpec(name="Sludge Bomb", power=90, type=Type.POISON, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Sludge Wave": MoveSpec(name="Sludge Wave", power=95, type=Type.POISON, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Flash Cannon": MoveSpec(name="Flash Cannon", power=80, type=Type.STEEL, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Energy Ball": MoveSpec(name="Energy Ball", power=90, type=Type.GRASS, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Giga Drain": MoveSpec(name="Giga Drain", power=75, type=Type.GRASS, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Earth Power": MoveSpec(name="Earth Power", power=90, type=Type.GROUND, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Air Slash": MoveSpec(name="Air Slash", power=75, type=Type.FLYING, category=MoveCategory.SPECIAL, priority=0, accuracy=95, flags=MoveFlag.NONE),
    "Hurricane": MoveSpec(name="Hurricane", power=110, type=Type.FLYING, category=MoveCategory.SPECIAL, priority=0, accuracy=70, flags=MoveFlag.NONE),
    "Make It Rain": MoveSpec(name="Make It Rain", power=120, type=Type.STEEL, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Bug Buzz": MoveSpec(name="Bug Buzz", power=90, type=Type.BUG, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Magma Storm": MoveSpec(name="Magma Storm", power=100, type=Type.FIRE, category=MoveCategory.SPECIAL, priority=0, accuracy=75, flags=MoveFlag.NONE),
    "Fiery Dance": MoveSpec(name="Fiery Dance", power=80, type=Type.FIRE, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Torch Song": MoveSpec(name="Torch Song", power=80, type=Type.FIRE, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Freeze-Dry": MoveSpec(name="Freeze-Dry", power=70, type=Type.ICE, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Overdrive": MoveSpec(name="Overdrive", power=80, type=Type.ELECTRIC, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.SOUND),
    "Boomburst": MoveSpec(name="Boomburst", power=140, type=Type.NORMAL, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.SOUND),
    "Scorching Sands": MoveSpec(name="Scorching Sands", power=70, type=Type.GROUND, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Future Sight": MoveSpec(name="Future Sight", power=120, type=Type.PSYCHIC, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Ruination": MoveSpec(name="Ruination", power=0, type=Type.DARK, category=MoveCategory.SPECIAL, priority=0, accuracy=90, flags=MoveFlag.NONE),
    "Mystical Fire": MoveSpec(name="Mystical Fire", power=75, type=Type.FIRE, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Hex": MoveSpec(name="Hex", power=65, type=Type.GHOST, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Bullet Punch": MoveSpec(name="Bullet Punch", power=40, type=Type.STEEL, category=MoveCategory.PHYSICAL, priority=1, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.PRIORITY | MoveFlag.PUNCH),
    "Mach Punch": MoveSpec(name="Mach Punch", power=40, type=Type.FIGHTING, category=MoveCategory.PHYSICAL, priority=1, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.PRIORITY | MoveFlag.PUNCH),
    "Aqua Jet": MoveSpec(name="Aqua Jet", power=40, type=Type.WATER, category=MoveCategory.PHYSICAL, priority=1, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.PRIORITY),
    "Ice Shard": MoveSpec(name="Ice Shard", power=40, type=Type.ICE, category=MoveCategory.PHYSICAL, priority=1, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.PRIORITY),
    "Shadow Sneak": MoveSpec(name="Shadow Sneak", power=40, type=Type.GHOST, category=MoveCategory.PHYSICAL, priority=1, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.PRIORITY),
    "Sucker Punch": MoveSpec(name="Sucker Punch", power=70, type=Type.DARK, category=MoveCategory.PHYSICAL, priority=1, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.PRIORITY),
    "Extreme Speed": MoveSpec(name="Extreme Speed", power=80, type=Type.NORMAL, category=MoveCategory.PHYSICAL, priority=2, accuracy=100, flags=MoveFlag.CONTACT | MoveFlag.PRIORITY),
    "Swords Dance": MoveSpec(name="Swords Dance", power=0, type=Type.NORMAL, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.SETUP),
    "Dragon Dance": MoveSpec(name="Dragon Dance", power=0, type=Type.DRAGON, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.SETUP),
    "Nasty Plot": MoveSpec(name="Nasty Plot", power=0, type=Type.DARK, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.SETUP),
    "Calm Mind": MoveSpec(name="Calm Mind", power=0, type=Type.PSYCHIC, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.SETUP),
    "Quiver Dance": MoveSpec(name="Quiver Dance", power=0, type=Type.BUG, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.SETUP),
    "Iron Defense": MoveSpec(name="Iron Defense", power=0, type=Type.STEEL, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.SETUP),
    "Bulk Up": MoveSpec(name="Bulk Up", power=0, type=Type.FIGHTING, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.SETUP),
    "Curse": MoveSpec(name="Curse", power=0, type=Type.GHOST, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.SETUP),
    "Belly Drum": MoveSpec(name="Belly Drum", power=0, type=Type.NORMAL, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.SETUP),
    "Howl": MoveSpec(name="Howl", power=0, type=Type.NORMAL, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.SETUP),
    "Recover": MoveSpec(name="Recover", power=0, type=Type.NORMAL, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.RECOVERY),
    "Roost": MoveSpec(name="Roost", power=0, type=Type.FLYING, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.RECOVERY),
    "Soft-Boiled": MoveSpec(name="Soft-Boiled", power=0, type=Type.NORMAL, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.RECOVERY),
    "Slack Off": MoveSpec(name="Slack Off", power=0, type=Type.NORMAL, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.RECOVERY),
    "Rest": MoveSpec(name="Rest", power=0, type=Type.PSYCHIC, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.RECOVERY),
    "Wish": MoveSpec(name="Wish", power=0, type=Type.NORMAL, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.RECOVERY),
    "Pain Split": MoveSpec(name="Pain Split", power=0, type=Type.NORMAL, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.RECOVERY),
    "Stealth Rock": MoveSpec(name="Stealth Rock", power=0, type=Type.ROCK, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.HAZARD),
    "Spikes": MoveSpec(name="Spikes", power=0, type=Type.GROUND, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.HAZARD),
    "Toxic Spikes": MoveSpec(name="Toxic Spikes", power=0, type=Type.POISON, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.HAZARD),
    "Rapid Spin": MoveSpec(name="Rapid Spin", power=50, type=Type.NORMAL, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Defog": MoveSpec(name="Defog", power=0, type=Type.FLYING, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Toxic": MoveSpec(name="Toxic", power=0, type=Type.POISON, category=MoveCategory.STATUS, priority=0, accuracy=90, flags=MoveFlag.STATUS),
    "Will-O-Wisp": MoveSpec(name="Will-O-Wisp", power=0, type=Type.FIRE, category=MoveCategory.STATUS, priority=0, accuracy=85, flags=MoveFlag.STATUS),
    "Thunder Wave": MoveSpec(name="Thunder Wave", power=0, type=Type.ELECTRIC, category=MoveCategory.STATUS, priority=0, accuracy=90, flags=MoveFlag.STATUS),
    "Spore": MoveSpec(name="Spore", power=0, type=Type.GRASS, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.STATUS),
    "Dark Void": MoveSpec(name="Dark Void", power=0, type=Type.DARK, category=MoveCategory.STATUS, priority=0, accuracy=50, flags=MoveFlag.STATUS),
    "Taunt": MoveSpec(name="Taunt", power=0, type=Type.DARK, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Encore": MoveSpec(name="Encore", power=0, type=Type.NORMAL, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Protect": MoveSpec(name="Protect", power=0, type=Type.NORMAL, category=MoveCategory.STATUS, priority=4, accuracy=100, flags=MoveFlag.PRIORITY),
    "Haze": MoveSpec(name="Haze", power=0, type=Type.ICE, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Clear Smog": MoveSpec(name="Clear Smog", power=50, type=Type.POISON, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Whirlwind": MoveSpec(name="Whirlwind", power=0, type=Type.NORMAL, category=MoveCategory.STATUS, priority=-6, accuracy=100, flags=MoveFlag.NONE),
    "Leech Seed": MoveSpec(name="Leech Seed", power=0, type=Type.GRASS, category=MoveCategory.STATUS, priority=0, accuracy=90, flags=MoveFlag.NONE),
    "Teleport": MoveSpec(name="Teleport", power=0, type=Type.PSYCHIC, category=MoveCategory.STATUS, priority=-6, accuracy=100, flags=MoveFlag.PIVOT),
    "Trick": MoveSpec(name="Trick", power=0, type=Type.PSYCHIC, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Seismic Toss": MoveSpec(name="Seismic Toss", power=0, type=Type.FIGHTING, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Transform": MoveSpec(name="Transform", power=0, type=Type.NORMAL, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Meteor Beam": MoveSpec(name="Meteor Beam", power=120, type=Type.ROCK, category=MoveCategory.SPECIAL, priority=0, accuracy=90, flags=MoveFlag.SETUP),
    "Leech Life": MoveSpec(name="Leech Life", power=80, type=Type.BUG, category=MoveCategory.PHYSICAL, priority=0, accuracy=100, flags=MoveFlag.CONTACT),
    "Leaf Storm": MoveSpec(name="Leaf Storm", power=130, type=Type.GRASS, category=MoveCategory.SPECIAL, priority=0, accuracy=90, flags=MoveFlag.NONE),
    "Gunk Shot": MoveSpec(name="Gunk Shot", power=120, type=Type.POISON, category=MoveCategory.PHYSICAL, priority=0, accuracy=80, flags=MoveFlag.NONE),
    "Tera Blast": MoveSpec(name="Tera Blast", power=80, type=Type.NORMAL, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Substitute": MoveSpec(name="Substitute", power=0, type=Type.NORMAL, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.SETUP),
    "Fire Blast": MoveSpec(name="Fire Blast", power=110, type=Type.FIRE, category=MoveCategory.SPECIAL, priority=0, accuracy=85, flags=MoveFlag.NONE),
    "Blizzard": MoveSpec(name="Blizzard", power=110, type=Type.ICE, category=MoveCategory.SPECIAL, priority=0, accuracy=70, flags=MoveFlag.NONE),
    "Thunder": MoveSpec(name="Thunder", power=110, type=Type.ELECTRIC, category=MoveCategory.SPECIAL, priority=0, accuracy=70, flags=MoveFlag.NONE),
    "Morning Sun": MoveSpec(name="Morning Sun", power=0, type=Type.NORMAL, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.RECOVERY),
    "Synthesis": MoveSpec(name="Synthesis", power=0, type=Type.GRASS, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.RECOVERY),
    "Moonlight": MoveSpec(name="Moonlight", power=0, type=Type.FAIRY, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.RECOVERY),
    "Shore Up": MoveSpec(name="Shore Up", power=0, type=Type.GROUND, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.RECOVERY),
    "Strength Sap": MoveSpec(name="Strength Sap", power=0, type=Type.GRASS, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.RECOVERY),
    "Reflect": MoveSpec(name="Reflect", power=0, type=Type.PSYCHIC, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.SETUP),
    "Light Screen": MoveSpec(name="Light Screen", power=0, type=Type.PSYCHIC, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.SETUP),
    "Aurora Veil": MoveSpec(name="Aurora Veil", power=0, type=Type.ICE, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.SETUP),
    "Fire Fang": MoveSpec(name="Fire Fang", power=65, type=Type.FIRE, category=MoveCategory.PHYSICAL, priority=0, accuracy=95, flags=MoveFlag.CONTACT),
    "Dazzling Gleam": MoveSpec(name="Dazzling Gleam", power=80, type=Type.FAIRY, category=MoveCategory.SPECIAL, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Parting Shot": MoveSpec(name="Parting Shot", power=0, type=Type.DARK, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.PIVOT | MoveFlag.SOUND),
    "Chilly Reception": MoveSpec(name="Chilly Reception", power=0, type=Type.ICE, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.PIVOT | MoveFlag.WEATHER),
    "Sticky Web": MoveSpec(name="Sticky Web", power=0, type=Type.BUG, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.HAZARD),
    "Trick Room": MoveSpec(name="Trick Room", power=0, type=Type.PSYCHIC, category=MoveCategory.STATUS, priority=-7, accuracy=100, flags=MoveFlag.NONE),
    "Tailwind": MoveSpec(name="Tailwind", power=0, type=Type.FLYING, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.NONE),
    "Rain Dance": MoveSpec(name="Rain Dance", power=0, type=Type.WATER, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.WEATHER),
    "Sunny Day": MoveSpec(name="Sunny Day", power=0, type=Type.FIRE, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.WEATHER),
    "Electric Terrain": MoveSpec(name="Electric Terrain", power=0, type=Type.ELECTRIC, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.TERRAIN),
    "Grassy Terrain": MoveSpec(name="Grassy Terrain", power=0, type=Type.GRASS, category=MoveCategory.STATUS, priority=0, accuracy=100, flags=MoveFlag.TERRAIN),
}
