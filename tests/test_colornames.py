import pytest

from cub3d.colornames import color_by_name


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray", 0xBEBEBE),
        ("thistle4", 0x8B7B8B),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert color_by_name(name) == expected


def test_none_is_transparent():
    assert color_by_name("none") == -1


@pytest.mark.parametrize("name", ["SNOW", "Snow", "sNoW", "Ghost White"])
def test_lookup_ignores_case(name):
    assert color_by_name(name) == color_by_name(name.lower())


def test_first_occurrence_wins_for_duplicates():
    assert color_by_name("dark slate") == 0x2F4F4F
    assert color_by_name("light slate") == 0x778899
    assert color_by_name("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_spellings_agree(level):
    assert color_by_name(f"gray{level}") == color_by_name(f"grey{level}")


@pytest.mark.parametrize(
    ("spaced", "joined"),
    [
        ("ghost white", "ghostwhite"),
        ("misty rose", "mistyrose"),
        ("dark orange", "darkorange"),
        ("light sea", "lightseagreen"),
        ("navy blue", "navyblue"),
    ],
)
def test_spaced_aliases_match_joined(spaced, joined):
    assert color_by_name(spaced) == color_by_name(joined)


def test_extremes_of_gray_ramp():
    assert color_by_name("gray0") == color_by_name("black")
    assert color_by_name("gray100") == color_by_name("white")


def test_values_fit_in_24_bits():
    for name in ("snow", "purple", "gold4", "grey50", "cyan"):
        assert 0 <= color_by_name(name) <= 0xFFFFFF


@pytest.mark.parametrize("name", ["", "notacolour", "gray101", "snow5"])
def test_unknown_name_raises(name):
    with pytest.raises(KeyError):
        color_by_name(name)