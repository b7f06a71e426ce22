from src.showdown_predictor.name_canonicalizer import base_species, is_more_specific, normalize, regional_suffix, same


def test_plain_name_is_unchanged():
    assert normalize("Garchomp") == "Garchomp"


def test_owner_prefix_and_whitespace_are_stripped():
    assert normalize("  the opposing   Heatran ") == "Heatran"


def test_status_keyword_alone_is_rejected():
    assert normalize("tox") == ""
    assert normalize("BRN") == ""


def test_ui_tokens_are_rejected():
    assert normalize("Tera Type") == ""
    assert normalize("Switch") == ""
    assert normalize("Not revealed") == ""
    assert normalize("Heatran lost 30% of its health") == ""


def test_empty_and_short_inputs_are_rejected():
    assert normalize("") == ""
    assert normalize(None) == ""
    assert normalize("Mr") == ""


def test_nickname_parenthetical_prefers_species():
    assert normalize("Sparky (Raichu)") == "Raichu"
    assert normalize("Sparky (Raichu) ♂") == "Raichu"


def test_parenthetical_gender_keeps_outer_name():
    assert normalize("Garchomp (M)") == "Garchomp"


def test_gender_level_and_status_suffixes_are_stripped():
    assert normalize("Garchomp ♀ L84") == "Garchomp"
    assert normalize("Toxapex tox") == "Toxapex"


def test_regional_spellings_collapse():
    assert normalize("Ninetales (Alolan)") == "Ninetales-Alola"
    assert normalize("Alolan Ninetales") == "Ninetales-Alola"
    assert normalize("Samurott-Hisuian") == "Samurott-Hisui"


def test_cosmetic_suffix_merges_into_base():
    assert normalize("Gastrodon-East") == normalize("Gastrodon")
    assert normalize("Vivillon-Pokeball") == "Vivillon"
    assert normalize("Pikachu-Totem") == "Pikachu"


def test_distinct_suffix_is_kept():
    assert normalize("Landorus-Therian") == "Landorus-Therian"
    assert normalize("Charizard-Mega-X") == "Charizard-Mega-X"
    assert normalize("Urshifu-Rapid-Strike") == "Urshifu-Rapid-Strike"


def test_hyphenated_species_is_a_base_name():
    assert base_species("Porygon-Z") == "Porygon-Z"
    assert base_species("Chi-Yu") == "Chi-Yu"


def test_regional_suffix_lookup():
    assert regional_suffix("Slowking-Galar") == "Galar"
    assert regional_suffix("Slowking") is None
    assert regional_suffix("Tauros-Paldea-Aqua") == "Paldea"


def test_regional_mismatch_is_a_different_creature():
    assert not same("Slowking", "Slowking-Galar")
    assert not same("Ninetales-Alola", "Ninetales")
    assert not same("Samurott-Hisui", "Samurott")


def test_form_changes_are_the_same_creature():
    assert same("Palafin", "Palafin-Hero")
    assert same("Landorus", "Landorus-Therian")
    assert same("the opposing Gastrodon-East", "Gastrodon")


def test_different_species_are_not_same():
    assert not same("Garchomp", "Gabite")
    assert not same("", "Garchomp")


def test_more_specific_form():
    assert is_more_specific("Palafin-Hero", "Palafin")
    assert not is_more_specific("Palafin", "Palafin-Hero")
    assert not is_more_specific("Palafin", "Palafin")
    assert not is_more_specific("Slowking-Galar", "Slowking")
