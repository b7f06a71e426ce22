from src.showdown_predictor.enums import Type
from src.showdown_predictor.schema.species_info import CommonSet, SpeciesInfo

# Species records for the current singles metagame - base stats, typing, abilities
# and the sets most commonly seen on the ladder. Keyed by canonical name.
SPECIES_INFOS: dict[str, SpeciesInfo] = {
    "Dragapult": SpeciesInfo(
        name="Dragapult",
        types=[Type.DRAGON, Type.GHOST],
        baseHP=88, baseAttack=120, baseDefense=75, baseSpAttack=100, baseSpDefense=75, baseSpeed=142,
        abilities=["Clear Body", "Infiltrator", "Cursed Body"],
        commonSets=[
            CommonSet(item="Choice Specs", nature="Timid", moves=["Shadow Ball", "Draco Meteor", "Flamethrower", "U-turn"]),
            CommonSet(item="Choice Band", nature="Jolly", moves=["Dragon Darts", "Phantom Force", "U-turn", "Sucker Punch"]),
        ],
    ),
    "Gholdengo": SpeciesInfo(
        name="Gholdengo",
        types=[Type.STEEL, Type.GHOST],
        baseHP=87, baseAttack=60, baseDefense=95, baseSpAttack=133, baseSpDefense=91, baseSpeed=84,
        abilities=["Good as Gold"],
        commonSets=[
            CommonSet(item="Air Balloon", nature="Timid", moves=["Make It Rain", "Shadow Ball", "Nasty Plot", "Recover"]),
            CommonSet(item="Choice Scarf", nature="Timid", moves=["Make It Rain", "Shadow Ball", "Trick", "Thunderbolt"]),
        ],
    ),
    "Great Tusk": SpeciesInfo(
        name="Great Tusk",
        types=[Type.GROUND, Type.FIGHTING],
        baseHP=115, baseAttack=131, baseDefense=131, baseSpAttack=53, baseSpDefense=53, baseSpeed=87,
        abilities=["Protosynthesis"],
        commonSets=[
            CommonSet(item="Booster Energy", nature="Jolly", moves=["Headlong Rush", "Close Combat", "Ice Spinner", "Rapid Spin"]),
            CommonSet(item="Leftovers", nature="Impish", moves=["Stealth Rock", "Earthquake", "Rapid Spin", "Ice Spinner"]),
        ],
    ),
    "Iron Valiant": SpeciesInfo(
        name="Iron Valiant",
        types=[Type.FAIRY, Type.FIGHTING],
        baseHP=74, baseAttack=130, baseDefense=90, baseSpAttack=120, baseSpDefense=60, baseSpeed=116,
        abilities=["Quark Drive"],
        commonSets=[
            CommonSet(item="Booster Energy", nature="Naive", moves=["Moonblast", "Close Combat", "Knock Off", "Swords Dance"]),
            CommonSet(item="Choice Specs", nature="Timid", moves=["Moonblast", "Focus Blast", "Thunderbolt", "Psyshock"]),
        ],
    ),
    "Kingambit": SpeciesInfo(
        name="Kingambit",
        types=[Type.DARK, Type.STEEL],
        baseHP=100, baseAttack=135, baseDefense=120, baseSpAttack=60, baseSpDefense=85, baseSpeed=50,
        abilities=["Supreme Overlord", "Defiant"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Adamant", moves=["Kowtow Cleave", "Iron Head", "Sucker Punch", "Swords Dance"]),
            CommonSet(item="Black Glasses", nature="Adamant", moves=["Kowtow Cleave", "Sucker Punch", "Iron Head", "Low Kick"]),
        ],
    ),
    "Darkrai": SpeciesInfo(
        name="Darkrai",
        types=[Type.DARK],
        baseHP=70, baseAttack=90, baseDefense=90, baseSpAttack=135, baseSpDefense=90, baseSpeed=125,
        abilities=["Bad Dreams"],
        commonSets=[
            CommonSet(item="Focus Sash", nature="Timid", moves=["Dark Void", "Dark Pulse", "Nasty Plot", "Sludge Bomb"]),
        ],
    ),
    "Landorus-Therian": SpeciesInfo(
        name="Landorus-Therian",
        types=[Type.GROUND, Type.FLYING],
        baseHP=89, baseAttack=145, baseDefense=90, baseSpAttack=105, baseSpDefense=80, baseSpeed=91,
        abilities=["Intimidate"],
        commonSets=[
            CommonSet(item="Rocky Helmet", nature="Impish", moves=["Earthquake", "U-turn", "Stealth Rock", "Toxic"]),
            CommonSet(item="Choice Scarf", nature="Jolly", moves=["Earthquake", "U-turn", "Stone Edge", "Superpower"]),
            CommonSet(item="Leftovers", nature="Jolly", moves=["Earthquake", "U-turn", "Stealth Rock", "Knock Off"]),
        ],
    ),
    "Heatran": SpeciesInfo(
        name="Heatran",
        types=[Type.FIRE, Type.STEEL],
        baseHP=91, baseAttack=90, baseDefense=106, baseSpAttack=130, baseSpDefense=106, baseSpeed=77,
        abilities=["Flash Fire", "Flame Body"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Calm", moves=["Magma Storm", "Earth Power", "Stealth Rock", "Toxic"]),
            CommonSet(item="Choice Specs", nature="Modest", moves=["Magma Storm", "Flash Cannon", "Earth Power", "Flamethrower"]),
        ],
    ),
    "Toxapex": SpeciesInfo(
        name="Toxapex",
        types=[Type.POISON, Type.WATER],
        baseHP=50, baseAttack=63, baseDefense=152, baseSpAttack=53, baseSpDefense=142, baseSpeed=35,
        abilities=["Regenerator", "Merciless"],
        commonSets=[
            CommonSet(item="Rocky Helmet", nature="Bold", moves=["Scald", "Recover", "Toxic Spikes", "Haze"]),
        ],
    ),
    "Clefable": SpeciesInfo(
        name="Clefable",
        types=[Type.FAIRY],
        baseHP=95, baseAttack=70, baseDefense=73, baseSpAttack=95, baseSpDefense=90, baseSpeed=60,
        abilities=["Magic Guard", "Unaware"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Bold", moves=["Moonblast", "Soft-Boiled", "Calm Mind", "Flamethrower"]),
            CommonSet(item="Life Orb", nature="Modest", moves=["Moonblast", "Focus Blast", "Thunderbolt", "Soft-Boiled"]),
        ],
    ),
    "Garchomp": SpeciesInfo(
        name="Garchomp",
        types=[Type.DRAGON, Type.GROUND],
        baseHP=108, baseAttack=130, baseDefense=95, baseSpAttack=80, baseSpDefense=85, baseSpeed=102,
        abilities=["Rough Skin", "Sand Veil"],
        commonSets=[
            CommonSet(item="Rocky Helmet", nature="Jolly", moves=["Earthquake", "Dragon Claw", "Stealth Rock", "Toxic"]),
            CommonSet(item="Choice Scarf", nature="Jolly", moves=["Earthquake", "Outrage", "Stone Edge", "Fire Fang"]),
        ],
    ),
    "Ferrothorn": SpeciesInfo(
        name="Ferrothorn",
        types=[Type.GRASS, Type.STEEL],
        baseHP=74, baseAttack=94, baseDefense=131, baseSpAttack=54, baseSpDefense=116, baseSpeed=20,
        abilities=["Iron Barbs"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Relaxed", moves=["Stealth Rock", "Leech Seed", "Power Whip", "Knock Off"]),
            CommonSet(item="Rocky Helmet", nature="Impish", moves=["Spikes", "Leech Seed", "Power Whip", "Protect"]),
        ],
    ),
    "Corviknight": SpeciesInfo(
        name="Corviknight",
        types=[Type.FLYING, Type.STEEL],
        baseHP=98, baseAttack=87, baseDefense=105, baseSpAttack=53, baseSpDefense=85, baseSpeed=67,
        abilities=["Pressure", "Mirror Armor"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Impish", moves=["Roost", "Defog", "Brave Bird", "U-turn"]),
            CommonSet(item="Rocky Helmet", nature="Impish", moves=["Roost", "Body Press", "Iron Defense", "Brave Bird"]),
        ],
    ),
    "Rotom-Wash": SpeciesInfo(
        name="Rotom-Wash",
        types=[Type.ELECTRIC, Type.WATER],
        baseHP=50, baseAttack=65, baseDefense=107, baseSpAttack=105, baseSpDefense=107, baseSpeed=86,
        abilities=["Levitate"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Bold", moves=["Volt Switch", "Hydro Pump", "Will-O-Wisp", "Pain Split"]),
        ],
    ),
    "Weavile": SpeciesInfo(
        name="Weavile",
        types=[Type.DARK, Type.ICE],
        baseHP=70, baseAttack=120, baseDefense=65, baseSpAttack=45, baseSpDefense=85, baseSpeed=125,
        abilities=["Pressure", "Pickpocket"],
        commonSets=[
            CommonSet(item="Choice Band", nature="Jolly", moves=["Triple Axel", "Knock Off", "Ice Shard", "Low Kick"]),
        ],
    ),
    "Dragonite": SpeciesInfo(
        name="Dragonite",
        types=[Type.DRAGON, Type.FLYING],
        baseHP=91, baseAttack=134, baseDefense=95, baseSpAttack=100, baseSpDefense=100, baseSpeed=80,
        abilities=["Multiscale", "Inner Focus"],
        commonSets=[
            CommonSet(item="Heavy-Duty Boots", nature="Adamant", moves=["Dragon Dance", "Dual Wingbeat", "Earthquake", "Roost"]),
            CommonSet(item="Choice Band", nature="Adamant", moves=["Outrage", "Extreme Speed", "Earthquake", "Fire Punch"]),
        ],
    ),
    "Volcarona": SpeciesInfo(
        name="Volcarona",
        types=[Type.BUG, Type.FIRE],
        baseHP=85, baseAttack=60, baseDefense=65, baseSpAttack=135, baseSpDefense=105, baseSpeed=100,
        abilities=["Flame Body", "Swarm"],
        commonSets=[
            CommonSet(item="Heavy-Duty Boots", nature="Timid", moves=["Quiver Dance", "Flamethrower", "Bug Buzz", "Giga Drain"]),
        ],
    ),
    "Tyranitar": SpeciesInfo(
        name="Tyranitar",
        types=[Type.ROCK, Type.DARK],
        baseHP=100, baseAttack=134, baseDefense=110, baseSpAttack=95, baseSpDefense=100, baseSpeed=61,
        abilities=["Sand Stream", "Unnerve"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Careful", moves=["Stealth Rock", "Stone Edge", "Crunch", "Ice Punch"]),
            CommonSet(item="Choice Band", nature="Adamant", moves=["Stone Edge", "Crunch", "Earthquake", "Ice Punch"]),
        ],
    ),
    "Skeledirge": SpeciesInfo(
        name="Skeledirge",
        types=[Type.FIRE, Type.GHOST],
        baseHP=104, baseAttack=75, baseDefense=100, baseSpAttack=110, baseSpDefense=75, baseSpeed=66,
        abilities=["Unaware", "Blaze"],
        commonSets=[
            CommonSet(item="Heavy-Duty Boots", nature="Bold", moves=["Torch Song", "Hex", "Will-O-Wisp", "Slack Off"]),
        ],
    ),
    "Cinderace": SpeciesInfo(
        name="Cinderace",
        types=[Type.FIRE],
        baseHP=80, baseAttack=116, baseDefense=75, baseSpAttack=65, baseSpDefense=75, baseSpeed=119,
        abilities=["Libero", "Blaze"],
        commonSets=[
            CommonSet(item="Heavy-Duty Boots", nature="Jolly", moves=["Pyro Ball", "High Jump Kick", "U-turn", "Sucker Punch"]),
        ],
    ),
    "Iron Moth": SpeciesInfo(
        name="Iron Moth",
        types=[Type.FIRE, Type.POISON],
        baseHP=80, baseAttack=70, baseDefense=60, baseSpAttack=140, baseSpDefense=110, baseSpeed=110,
        abilities=["Quark Drive"],
        commonSets=[
            CommonSet(item="Booster Energy", nature="Timid", moves=["Fiery Dance", "Sludge Wave", "Energy Ball", "Psychic"]),
        ],
    ),
    "Iron Treads": SpeciesInfo(
        name="Iron Treads",
        types=[Type.GROUND, Type.STEEL],
        baseHP=90, baseAttack=112, baseDefense=120, baseSpAttack=72, baseSpDefense=70, baseSpeed=106,
        abilities=["Quark Drive"],
        commonSets=[
            CommonSet(item="Booster Energy", nature="Jolly", moves=["Earthquake", "Iron Head", "Rapid Spin", "Stealth Rock"]),
        ],
    ),
    "Meowscarada": SpeciesInfo(
        name="Meowscarada",
        types=[Type.GRASS, Type.DARK],
        baseHP=76, baseAttack=110, baseDefense=70, baseSpAttack=81, baseSpDefense=70, baseSpeed=123,
        abilities=["Overgrow", "Protean"],
        commonSets=[
            CommonSet(item="Choice Band", nature="Jolly", moves=["Flower Trick", "Knock Off", "U-turn", "Triple Axel"]),
        ],
    ),
    "Zamazenta": SpeciesInfo(
        name="Zamazenta",
        types=[Type.FIGHTING],
        baseHP=92, baseAttack=130, baseDefense=115, baseSpAttack=80, baseSpDefense=115, baseSpeed=138,
        abilities=["Dauntless Shield"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Jolly", moves=["Close Combat", "Crunch", "Psychic Fangs", "Howl"]),
        ],
    ),
    "Rillaboom": SpeciesInfo(
        name="Rillaboom",
        types=[Type.GRASS],
        baseHP=100, baseAttack=125, baseDefense=90, baseSpAttack=60, baseSpDefense=70, baseSpeed=85,
        abilities=["Grassy Surge", "Overgrow"],
        commonSets=[
            CommonSet(item="Choice Band", nature="Adamant", moves=["Grassy Glide", "Wood Hammer", "Knock Off", "U-turn"]),
            CommonSet(item="Leftovers", nature="Adamant", moves=["Grassy Glide", "Knock Off", "Swords Dance", "Drain Punch"]),
        ],
    ),
    "Slowking-Galar": SpeciesInfo(
        name="Slowking-Galar",
        types=[Type.POISON, Type.PSYCHIC],
        baseHP=95, baseAttack=65, baseDefense=80, baseSpAttack=110, baseSpDefense=110, baseSpeed=30,
        abilities=["Regenerator", "Curious Medicine"],
        commonSets=[
            CommonSet(item="Assault Vest", nature="Quiet", moves=["Future Sight", "Sludge Bomb", "Flamethrower", "Scald"]),
        ],
    ),
    "Tapu Lele": SpeciesInfo(
        name="Tapu Lele",
        types=[Type.PSYCHIC, Type.FAIRY],
        baseHP=70, baseAttack=85, baseDefense=75, baseSpAttack=130, baseSpDefense=115, baseSpeed=95,
        abilities=["Psychic Surge"],
        commonSets=[
            CommonSet(item="Choice Scarf", nature="Timid", moves=["Psychic", "Moonblast", "Focus Blast", "Psyshock"]),
        ],
    ),
    "Tapu Koko": SpeciesInfo(
        name="Tapu Koko",
        types=[Type.ELECTRIC, Type.FAIRY],
        baseHP=70, baseAttack=115, baseDefense=85, baseSpAttack=95, baseSpDefense=75, baseSpeed=130,
        abilities=["Electric Surge"],
        commonSets=[
            CommonSet(item="Heavy-Duty Boots", nature="Timid", moves=["Thunderbolt", "Dazzling Gleam", "U-turn", "Roost"]),
        ],
    ),
    "Blissey": SpeciesInfo(
        name="Blissey",
        types=[Type.NORMAL],
        baseHP=255, baseAttack=10, baseDefense=10, baseSpAttack=75, baseSpDefense=135, baseSpeed=55,
        abilities=["Natural Cure", "Serene Grace"],
        commonSets=[
            CommonSet(item="Heavy-Duty Boots", nature="Bold", moves=["Soft-Boiled", "Seismic Toss", "Stealth Rock", "Toxic"]),
        ],
    ),
    "Chansey": SpeciesInfo(
        name="Chansey",
        types=[Type.NORMAL],
        baseHP=250, baseAttack=5, baseDefense=5, baseSpAttack=35, baseSpDefense=105, baseSpeed=50,
        abilities=["Natural Cure", "Serene Grace"],
        commonSets=[
            CommonSet(item="Eviolite", nature="Bold", moves=["Soft-Boiled", "Seismic Toss", "Stealth Rock", "Thunder Wave"]),
        ],
    ),
    "Gliscor": SpeciesInfo(
        name="Gliscor",
        types=[Type.GROUND, Type.FLYING],
        baseHP=75, baseAttack=95, baseDefense=125, baseSpAttack=45, baseSpDefense=75, baseSpeed=95,
        abilities=["Poison Heal", "Hyper Cutter"],
        commonSets=[
            CommonSet(item="Toxic Orb", nature="Jolly", moves=["Earthquake", "Facade", "Swords Dance", "Roost"]),
        ],
    ),
    "Scizor": SpeciesInfo(
        name="Scizor",
        types=[Type.BUG, Type.STEEL],
        baseHP=70, baseAttack=130, baseDefense=100, baseSpAttack=55, baseSpDefense=80, baseSpeed=65,
        abilities=["Technician", "Light Metal"],
        commonSets=[
            CommonSet(item="Choice Band", nature="Adamant", moves=["Bullet Punch", "U-turn", "Close Combat", "Knock Off"]),
            CommonSet(item="Leftovers", nature="Adamant", moves=["Bullet Punch", "U-turn", "Swords Dance", "Roost"]),
        ],
    ),
    "Magnezone": SpeciesInfo(
        name="Magnezone",
        types=[Type.ELECTRIC, Type.STEEL],
        baseHP=70, baseAttack=70, baseDefense=115, baseSpAttack=130, baseSpDefense=90, baseSpeed=60,
        abilities=["Magnet Pull", "Sturdy", "Analytic"],
        commonSets=[
            CommonSet(item="Choice Specs", nature="Modest", moves=["Thunderbolt", "Flash Cannon", "Volt Switch", "Body Press"]),
        ],
    ),
    "Pelipper": SpeciesInfo(
        name="Pelipper",
        types=[Type.WATER, Type.FLYING],
        baseHP=60, baseAttack=50, baseDefense=100, baseSpAttack=95, baseSpDefense=70, baseSpeed=65,
        abilities=["Drizzle", "Keen Eye"],
        commonSets=[
            CommonSet(item="Damp Rock", nature="Bold", moves=["Scald", "Hurricane", "U-turn", "Roost"]),
        ],
    ),
    "Barraskewda": SpeciesInfo(
        name="Barraskewda",
        types=[Type.WATER],
        baseHP=61, baseAttack=123, baseDefense=60, baseSpAttack=60, baseSpDefense=50, baseSpeed=136,
        abilities=["Swift Swim", "Propeller Tail"],
        commonSets=[
            CommonSet(item="Choice Band", nature="Adamant", moves=["Liquidation", "Flip Turn", "Close Combat", "Psychic Fangs"]),
        ],
    ),
    "Tornadus-Therian": SpeciesInfo(
        name="Tornadus-Therian",
        types=[Type.FLYING],
        baseHP=79, baseAttack=100, baseDefense=80, baseSpAttack=110, baseSpDefense=90, baseSpeed=121,
        abilities=["Regenerator"],
        commonSets=[
            CommonSet(item="Heavy-Duty Boots", nature="Timid", moves=["Hurricane", "Knock Off", "U-turn", "Nasty Plot"]),
        ],
    ),
    "Urshifu-Rapid-Strike": SpeciesInfo(
        name="Urshifu-Rapid-Strike",
        types=[Type.FIGHTING, Type.WATER],
        baseHP=100, baseAttack=130, baseDefense=100, baseSpAttack=63, baseSpDefense=60, baseSpeed=97,
        abilities=["Unseen Fist"],
        commonSets=[
            CommonSet(item="Choice Band", nature="Jolly", moves=["Surging Strikes", "Close Combat", "Aqua Jet", "U-turn"]),
        ],
    ),
    "Urshifu": SpeciesInfo(
        name="Urshifu",
        types=[Type.FIGHTING, Type.DARK],
        baseHP=100, baseAttack=130, baseDefense=100, baseSpAttack=63, baseSpDefense=60, baseSpeed=97,
        abilities=["Unseen Fist"],
        commonSets=[
            CommonSet(item="Choice Band", nature="Jolly", moves=["Wicked Blow", "Close Combat", "Sucker Punch", "U-turn"]),
        ],
    ),
    "Annihilape": SpeciesInfo(
        name="Annihilape",
        types=[Type.FIGHTING, Type.GHOST],
        baseHP=110, baseAttack=115, baseDefense=80, baseSpAttack=50, baseSpDefense=90, baseSpeed=90,
        abilities=["Vital Spirit", "Defiant"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Careful", moves=["Rage Fist", "Drain Punch", "Bulk Up", "Taunt"]),
        ],
    ),
    "Ceruledge": SpeciesInfo(
        name="Ceruledge",
        types=[Type.FIRE, Type.GHOST],
        baseHP=75, baseAttack=125, baseDefense=80, baseSpAttack=60, baseSpDefense=100, baseSpeed=85,
        abilities=["Flash Fire", "Weak Armor"],
        commonSets=[
            CommonSet(item="Heavy-Duty Boots", nature="Adamant", moves=["Bitter Blade", "Shadow Claw", "Swords Dance", "Close Combat"]),
        ],
    ),
    "Chi-Yu": SpeciesInfo(
        name="Chi-Yu",
        types=[Type.DARK, Type.FIRE],
        baseHP=55, baseAttack=80, baseDefense=80, baseSpAttack=135, baseSpDefense=120, baseSpeed=100,
        abilities=["Beads of Ruin"],
        commonSets=[
            CommonSet(item="Choice Specs", nature="Timid", moves=["Dark Pulse", "Overheat", "Flamethrower", "Psychic"]),
        ],
    ),
    "Ting-Lu": SpeciesInfo(
        name="Ting-Lu",
        types=[Type.DARK, Type.GROUND],
        baseHP=155, baseAttack=110, baseDefense=125, baseSpAttack=55, baseSpDefense=80, baseSpeed=45,
        abilities=["Vessel of Ruin"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Impish", moves=["Earthquake", "Stealth Rock", "Whirlwind", "Ruination"]),
        ],
    ),
    "Chien-Pao": SpeciesInfo(
        name="Chien-Pao",
        types=[Type.DARK, Type.ICE],
        baseHP=80, baseAttack=120, baseDefense=80, baseSpAttack=90, baseSpDefense=65, baseSpeed=135,
        abilities=["Sword of Ruin"],
        commonSets=[
            CommonSet(item="Heavy-Duty Boots", nature="Jolly", moves=["Ice Spinner", "Crunch", "Sacred Sword", "Sucker Punch"]),
        ],
    ),
    "Wo-Chien": SpeciesInfo(
        name="Wo-Chien",
        types=[Type.DARK, Type.GRASS],
        baseHP=85, baseAttack=85, baseDefense=100, baseSpAttack=95, baseSpDefense=135, baseSpeed=70,
        abilities=["Tablets of Ruin"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Calm", moves=["Giga Drain", "Dark Pulse", "Leech Seed", "Protect"]),
        ],
    ),
    "Quaquaval": SpeciesInfo(
        name="Quaquaval",
        types=[Type.WATER, Type.FIGHTING],
        baseHP=85, baseAttack=120, baseDefense=80, baseSpAttack=85, baseSpDefense=75, baseSpeed=85,
        abilities=["Moxie", "Torrent"],
        commonSets=[
            CommonSet(item="Life Orb", nature="Jolly", moves=["Aqua Step", "Close Combat", "Swords Dance", "Ice Spinner"]),
        ],
    ),
    "Garganacl": SpeciesInfo(
        name="Garganacl",
        types=[Type.ROCK],
        baseHP=100, baseAttack=100, baseDefense=130, baseSpAttack=45, baseSpDefense=90, baseSpeed=35,
        abilities=["Purifying Salt"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Impish", moves=["Salt Cure", "Recover", "Stealth Rock", "Body Press"]),
        ],
    ),
    "Tinkaton": SpeciesInfo(
        name="Tinkaton",
        types=[Type.FAIRY, Type.STEEL],
        baseHP=85, baseAttack=75, baseDefense=77, baseSpAttack=70, baseSpDefense=105, baseSpeed=94,
        abilities=["Mold Breaker", "Own Tempo"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Careful", moves=["Stealth Rock", "Knock Off", "Gigaton Hammer", "Encore"]),
        ],
    ),
    "Roaring Moon": SpeciesInfo(
        name="Roaring Moon",
        types=[Type.DRAGON, Type.DARK],
        baseHP=105, baseAttack=139, baseDefense=71, baseSpAttack=55, baseSpDefense=101, baseSpeed=119,
        abilities=["Protosynthesis"],
        commonSets=[
            CommonSet(item="Booster Energy", nature="Jolly", moves=["Dragon Dance", "Acrobatics", "Crunch", "Earthquake"]),
        ],
    ),
    "Flutter Mane": SpeciesInfo(
        name="Flutter Mane",
        types=[Type.GHOST, Type.FAIRY],
        baseHP=55, baseAttack=55, baseDefense=55, baseSpAttack=135, baseSpDefense=135, baseSpeed=135,
        abilities=["Protosynthesis"],
        commonSets=[
            CommonSet(item="Choice Specs", nature="Timid", moves=["Shadow Ball", "Moonblast", "Mystical Fire", "Thunderbolt"]),
        ],
    ),
    "Iron Bundle": SpeciesInfo(
        name="Iron Bundle",
        types=[Type.ICE, Type.WATER],
        baseHP=56, baseAttack=80, baseDefense=114, baseSpAttack=124, baseSpDefense=60, baseSpeed=136,
        abilities=["Quark Drive"],
        commonSets=[
            CommonSet(item="Heavy-Duty Boots", nature="Timid", moves=["Freeze-Dry", "Hydro Pump", "Flip Turn", "Ice Beam"]),
        ],
    ),
    "Samurott-Hisui": SpeciesInfo(
        name="Samurott-Hisui",
        types=[Type.WATER, Type.DARK],
        baseHP=90, baseAttack=108, baseDefense=80, baseSpAttack=100, baseSpDefense=65, baseSpeed=85,
        abilities=["Sharpness"],
        commonSets=[
            CommonSet(item="Focus Sash", nature="Jolly", moves=["Ceaseless Edge", "Razor Shell", "Aqua Jet", "Sacred Sword"]),
        ],
    ),
    "Blaziken": SpeciesInfo(
        name="Blaziken",
        types=[Type.FIRE, Type.FIGHTING],
        baseHP=80, baseAttack=120, baseDefense=70, baseSpAttack=110, baseSpDefense=70, baseSpeed=80,
        abilities=["Speed Boost", "Blaze"],
        commonSets=[
            CommonSet(item="Life Orb", nature="Adamant", moves=["Flare Blitz", "Close Combat", "Swords Dance", "Protect"]),
        ],
    ),
    "Greninja": SpeciesInfo(
        name="Greninja",
        types=[Type.WATER, Type.DARK],
        baseHP=72, baseAttack=95, baseDefense=67, baseSpAttack=103, baseSpDefense=71, baseSpeed=122,
        abilities=["Protean", "Battle Bond", "Torrent"],
        commonSets=[
            CommonSet(item="Choice Specs", nature="Timid", moves=["Hydro Pump", "Dark Pulse", "Ice Beam", "Spikes"]),
        ],
    ),
    "Excadrill": SpeciesInfo(
        name="Excadrill",
        types=[Type.GROUND, Type.STEEL],
        baseHP=110, baseAttack=135, baseDefense=60, baseSpAttack=50, baseSpDefense=65, baseSpeed=88,
        abilities=["Sand Rush", "Mold Breaker", "Sand Force"],
        commonSets=[
            CommonSet(item="Air Balloon", nature="Jolly", moves=["Earthquake", "Iron Head", "Rapid Spin", "Swords Dance"]),
        ],
    ),
    "Amoonguss": SpeciesInfo(
        name="Amoonguss",
        types=[Type.GRASS, Type.POISON],
        baseHP=114, baseAttack=85, baseDefense=70, baseSpAttack=85, baseSpDefense=80, baseSpeed=30,
        abilities=["Regenerator", "Effect Spore"],
        commonSets=[
            CommonSet(item="Rocky Helmet", nature="Bold", moves=["Spore", "Giga Drain", "Sludge Bomb", "Clear Smog"]),
        ],
    ),
    "Gengar": SpeciesInfo(
        name="Gengar",
        types=[Type.GHOST, Type.POISON],
        baseHP=60, baseAttack=65, baseDefense=60, baseSpAttack=130, baseSpDefense=75, baseSpeed=110,
        abilities=["Cursed Body"],
        commonSets=[
            CommonSet(item="Choice Specs", nature="Timid", moves=["Shadow Ball", "Sludge Wave", "Focus Blast", "Trick"]),
        ],
    ),
    "Mimikyu": SpeciesInfo(
        name="Mimikyu",
        types=[Type.GHOST, Type.FAIRY],
        baseHP=55, baseAttack=90, baseDefense=80, baseSpAttack=50, baseSpDefense=105, baseSpeed=96,
        abilities=["Disguise"],
        commonSets=[
            CommonSet(item="Life Orb", nature="Adamant", moves=["Play Rough", "Shadow Sneak", "Swords Dance", "Shadow Claw"]),
        ],
    ),
    "Gyarados": SpeciesInfo(
        name="Gyarados",
        types=[Type.WATER, Type.FLYING],
        baseHP=95, baseAttack=125, baseDefense=79, baseSpAttack=60, baseSpDefense=100, baseSpeed=81,
        abilities=["Intimidate", "Moxie"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Jolly", moves=["Dragon Dance", "Waterfall", "Bounce", "Earthquake"]),
        ],
    ),
    "Lucario": SpeciesInfo(
        name="Lucario",
        types=[Type.FIGHTING, Type.STEEL],
        baseHP=70, baseAttack=110, baseDefense=70, baseSpAttack=115, baseSpDefense=70, baseSpeed=90,
        abilities=["Inner Focus", "Justified"],
        commonSets=[
            CommonSet(item="Life Orb", nature="Adamant", moves=["Swords Dance", "Close Combat", "Bullet Punch", "Extreme Speed"]),
        ],
    ),
    "Infernape": SpeciesInfo(
        name="Infernape",
        types=[Type.FIRE, Type.FIGHTING],
        baseHP=76, baseAttack=104, baseDefense=71, baseSpAttack=104, baseSpDefense=71, baseSpeed=108,
        abilities=["Iron Fist", "Blaze"],
        commonSets=[
            CommonSet(item="Life Orb", nature="Jolly", moves=["Close Combat", "Flare Blitz", "U-turn", "Mach Punch"]),
        ],
    ),
    "Alakazam": SpeciesInfo(
        name="Alakazam",
        types=[Type.PSYCHIC],
        baseHP=55, baseAttack=50, baseDefense=45, baseSpAttack=135, baseSpDefense=95, baseSpeed=120,
        abilities=["Magic Guard", "Inner Focus"],
        commonSets=[
            CommonSet(item="Focus Sash", nature="Timid", moves=["Psychic", "Focus Blast", "Shadow Ball", "Nasty Plot"]),
        ],
    ),
    "Azumarill": SpeciesInfo(
        name="Azumarill",
        types=[Type.WATER, Type.FAIRY],
        baseHP=100, baseAttack=50, baseDefense=80, baseSpAttack=60, baseSpDefense=80, baseSpeed=50,
        abilities=["Huge Power", "Thick Fat"],
        commonSets=[
            CommonSet(item="Sitrus Berry", nature="Adamant", moves=["Belly Drum", "Aqua Jet", "Play Rough", "Knock Off"]),
        ],
    ),
    "Bisharp": SpeciesInfo(
        name="Bisharp",
        types=[Type.DARK, Type.STEEL],
        baseHP=65, baseAttack=125, baseDefense=100, baseSpAttack=60, baseSpDefense=70, baseSpeed=70,
        abilities=["Defiant", "Inner Focus"],
        commonSets=[
            CommonSet(item="Eviolite", nature="Adamant", moves=["Swords Dance", "Knock Off", "Iron Head", "Sucker Punch"]),
        ],
    ),
    "Swampert": SpeciesInfo(
        name="Swampert",
        types=[Type.WATER, Type.GROUND],
        baseHP=100, baseAttack=110, baseDefense=90, baseSpAttack=85, baseSpDefense=90, baseSpeed=60,
        abilities=["Torrent", "Damp"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Relaxed", moves=["Stealth Rock", "Earthquake", "Scald", "Flip Turn"]),
        ],
    ),
    "Toxtricity": SpeciesInfo(
        name="Toxtricity",
        types=[Type.ELECTRIC, Type.POISON],
        baseHP=75, baseAttack=98, baseDefense=70, baseSpAttack=114, baseSpDefense=70, baseSpeed=75,
        abilities=["Punk Rock", "Technician"],
        commonSets=[
            CommonSet(item="Choice Specs", nature="Modest", moves=["Overdrive", "Boomburst", "Volt Switch", "Sludge Wave"]),
        ],
    ),
    "Ditto": SpeciesInfo(
        name="Ditto",
        types=[Type.NORMAL],
        baseHP=48, baseAttack=48, baseDefense=48, baseSpAttack=48, baseSpDefense=48, baseSpeed=48,
        abilities=["Imposter", "Limber"],
        commonSets=[
            CommonSet(item="Choice Scarf", nature="Relaxed", moves=["Transform"]),
        ],
    ),
    "Slowbro": SpeciesInfo(
        name="Slowbro",
        types=[Type.WATER, Type.PSYCHIC],
        baseHP=95, baseAttack=75, baseDefense=110, baseSpAttack=100, baseSpDefense=80, baseSpeed=30,
        abilities=["Regenerator", "Own Tempo", "Oblivious"],
        commonSets=[
            CommonSet(item="Heavy-Duty Boots", nature="Bold", moves=["Scald", "Psyshock", "Slack Off", "Teleport"]),
        ],
    ),
    "Hippowdon": SpeciesInfo(
        name="Hippowdon",
        types=[Type.GROUND],
        baseHP=108, baseAttack=112, baseDefense=118, baseSpAttack=68, baseSpDefense=72, baseSpeed=47,
        abilities=["Sand Stream", "Sand Force"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Impish", moves=["Earthquake", "Stealth Rock", "Slack Off", "Whirlwind"]),
        ],
    ),
    "Zapdos": SpeciesInfo(
        name="Zapdos",
        types=[Type.ELECTRIC, Type.FLYING],
        baseHP=90, baseAttack=90, baseDefense=85, baseSpAttack=125, baseSpDefense=90, baseSpeed=100,
        abilities=["Pressure", "Static"],
        commonSets=[
            CommonSet(item="Heavy-Duty Boots", nature="Timid", moves=["Thunderbolt", "Hurricane", "Roost", "Volt Switch"]),
        ],
    ),
    "Moltres": SpeciesInfo(
        name="Moltres",
        types=[Type.FIRE, Type.FLYING],
        baseHP=90, baseAttack=100, baseDefense=90, baseSpAttack=125, baseSpDefense=85, baseSpeed=90,
        abilities=["Pressure", "Flame Body"],
        commonSets=[
            CommonSet(item="Heavy-Duty Boots", nature="Timid", moves=["Flamethrower", "Scorching Sands", "Roost", "Will-O-Wisp"]),
        ],
    ),
    "Skarmory": SpeciesInfo(
        name="Skarmory",
        types=[Type.STEEL, Type.FLYING],
        baseHP=65, baseAttack=80, baseDefense=140, baseSpAttack=40, baseSpDefense=70, baseSpeed=70,
        abilities=["Sturdy", "Keen Eye"],
        commonSets=[
            CommonSet(item="Rocky Helmet", nature="Impish", moves=["Spikes", "Roost", "Body Press", "Iron Defense"]),
        ],
    ),
    "Clodsire": SpeciesInfo(
        name="Clodsire",
        types=[Type.POISON, Type.GROUND],
        baseHP=130, baseAttack=75, baseDefense=60, baseSpAttack=45, baseSpDefense=100, baseSpeed=20,
        abilities=["Unaware", "Water Absorb", "Poison Point"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Careful", moves=["Earthquake", "Recover", "Toxic", "Stealth Rock"]),
        ],
    ),
    "Dondozo": SpeciesInfo(
        name="Dondozo",
        types=[Type.WATER],
        baseHP=150, baseAttack=100, baseDefense=115, baseSpAttack=65, baseSpDefense=65, baseSpeed=35,
        abilities=["Unaware", "Oblivious"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Impish", moves=["Wave Crash", "Earthquake", "Curse", "Rest"]),
        ],
    ),
    "Ogerpon": SpeciesInfo(
        name="Ogerpon",
        types=[Type.GRASS],
        baseHP=80, baseAttack=120, baseDefense=84, baseSpAttack=60, baseSpDefense=96, baseSpeed=110,
        abilities=["Defiant"],
        commonSets=[
            CommonSet(item="Leftovers", nature="Jolly", moves=["Ivy Cudgel", "Horn Leech", "Knock Off", "Swords Dance"]),
        ],
    ),
    "Shedinja": SpeciesInfo(
        name="Shedinja",
        types=[Type.BUG, Type.GHOST],
        baseHP=1, baseAttack=90, baseDefense=45, baseSpAttack=30, baseSpDefense=30, baseSpeed=40,
        abilities=["Wonder Guard"],
        commonSets=[
            CommonSet(item="Focus Sash", nature="Adamant", moves=["Shadow Sneak", "Leech Life", "Swords Dance", "Will-O-Wisp"]),
        ],
    ),
}
