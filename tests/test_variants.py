from calles.services.normalizer import normalize_street_name
from calles.services.variants import name_variants


def test_surname_first_names_add_reordered_and_surname_keys() -> None:
    variants = name_variants("Acevedo, Eduardo")
    assert normalize_street_name("Eduardo Acevedo") in variants
    assert normalize_street_name("Acevedo") in variants
    assert variants == {"ACEVEDO EDUARDO", "EDUARDO ACEVEDO", "ACEVEDO"}


def test_plain_names_have_single_variant() -> None:
    assert name_variants("Rivadavia") == {"RIVADAVIA"}


def test_only_first_separator_splits() -> None:
    variants = name_variants("Paz, José C., General")
    assert variants == {"PAZ JOSE C GENERAL", "JOSE C PAZ", "PAZ"}


def test_comma_without_space_is_not_a_separator() -> None:
    assert name_variants("Acevedo,Eduardo") == {"ACEVEDOEDUARDO"}


def test_variants_always_contain_plain_key() -> None:
    for raw in ("", "Av. Corrientes", "Saavedra, Cornelio", "Coronel Díaz"):
        assert normalize_street_name(raw) in name_variants(raw)
