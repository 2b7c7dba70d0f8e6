import pytest

from change_scribe.casing import CLASSIFIERS, Casing, is_case


@pytest.mark.parametrize(
    "value, casing, expected",
    [
        ("kebab-case", Casing.KEBAB, True),
        ("fix", Casing.KEBAB, True),
        ("v2-api", Casing.KEBAB, True),
        ("Kebab-case", Casing.KEBAB, False),
        ("-leading", Casing.KEBAB, False),
        ("trailing-", Casing.KEBAB, False),
        ("double--hyphen", Casing.KEBAB, False),
        ("snake_case", Casing.KEBAB, False),
        ("snake_case", Casing.SNAKE, True),
        ("snake__case", Casing.SNAKE, False),
        ("_snake", Casing.SNAKE, False),
        ("kebab-case", Casing.SNAKE, False),
        ("camelCase", Casing.CAMEL, True),
        ("camel", Casing.CAMEL, True),
        ("camelCaseHTTP", Casing.CAMEL, False),
        ("CamelCase", Casing.CAMEL, False),
        ("camel-case", Casing.CAMEL, False),
        ("PascalCase", Casing.PASCAL, True),
        ("Feature", Casing.PASCAL, True),
        ("pascalCase", Casing.PASCAL, False),
        ("Pascal_Case", Casing.PASCAL, False),
        ("", Casing.KEBAB, False),
        ("", Casing.PASCAL, False),
    ],
)
def test_is_case(value: str, casing: Casing, expected: bool) -> None:
    assert is_case(value, casing) is expected


def test_every_casing_has_a_classifier() -> None:
    assert set(CLASSIFIERS) == set(Casing)


def test_parse_casing_names() -> None:
    assert Casing.parse("kebab") is Casing.KEBAB
    assert Casing.parse(" Pascal ") is Casing.PASCAL
    with pytest.raises(ValueError, match="unknown casing"):
        Casing.parse("screaming")


def test_display_names() -> None:
    assert Casing.KEBAB.display_name == "kebab-case"
    assert Casing.CAMEL.display_name == "camelCase"
