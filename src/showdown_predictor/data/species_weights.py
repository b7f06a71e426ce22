from typing import Optional

# Species weight in kilograms - drives weight-based move power (Low Kick)
SPECIES_WEIGHTS_KG: dict[str, float] = {
    "Alakazam": 48.0,
    "Amoonguss": 10.5,
    "Annihilape": 56.0,
    "Azumarill": 28.5,
    "Barraskewda": 30.0,
    "Bisharp": 70.0,
    "Blaziken": 52.0,
    "Blissey": 46.8,
    "Ceruledge": 62.0,
    "Chansey": 34.6,
    "Chi-Yu": 4.9,
    "Chien-Pao": 152.2,
    "Cinderace": 33.0,
    "Clefable": 40.0,
    "Clodsire": 223.0,
    "Corviknight": 75.0,
    "Darkrai": 50.5,
    "Ditto": 4.0,
    "Dondozo": 220.0,
    "Dragapult": 50.0,
    "Dragonite": 210.0,
    "Excadrill": 40.4,
    "Ferrothorn": 110.0,
    "Flutter Mane": 4.0,
    "Garchomp": 95.0,
    "Garganacl": 240.0,
    "Gengar": 40.5,
    "Gholdengo": 30.0,
    "Gliscor": 42.5,
    "Great Tusk": 320.0,
    "Greninja": 40.0,
    "Gyarados": 235.0,
    "Heatran": 430.0,
    "Hippowdon": 300.0,
    "Infernape": 55.0,
    "Iron Bundle": 11.0,
    "Iron Moth": 36.0,
    "Iron Treads": 240.0,
    "Iron Valiant": 35.0,
    "Kingambit": 120.0,
    "Landorus-Therian": 68.0,
    "Lucario": 54.0,
    "Magnezone": 180.0,
    "Meowscarada": 31.2,
    "Mimikyu": 0.7,
    "Moltres": 60.0,
    "Ogerpon": 39.8,
    "Pelipper": 28.0,
    "Quaquaval": 61.9,
    "Rillaboom": 90.0,
    "Roaring Moon": 380.0,
    "Rotom-Wash": 0.3,
    "Samurott-Hisui": 58.2,
    "Scizor": 118.0,
    "Shedinja": 1.2,
    "Skarmory": 50.5,
    "Skeledirge": 326.5,
    "Slowbro": 78.5,
    "Slowking-Galar": 79.5,
    "Swampert": 81.9,
    "Tapu Koko": 20.5,
    "Tapu Lele": 18.6,
    "Ting-Lu": 699.7,
    "Tinkaton": 112.8,
    "Tornadus-Therian": 63.0,
    "Toxapex": 14.5,
    "Toxtricity": 40.0,
    "Tyranitar": 202.0,
    "Urshifu": 105.0,
    "Urshifu-Rapid-Strike": 105.0,
    "Volcarona": 46.0,
    "Weavile": 34.0,
    "Wo-Chien": 74.2,
    "Zamazenta": 210.0,
    "Zapdos": 52.6,
}


def get_weight_kg(species_name: str) -> Optional[float]:
    """Weight for a canonical species name, None when not recorded"""
    return SPECIES_WEIGHTS_KG.get(species_name)
