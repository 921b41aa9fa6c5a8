import pytest

from solong.rgb_names import color_names, lookup_color


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("black", 0x0),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("ReD") == lookup_color("red")
    assert lookup_color("GHOST WHITE") == lookup_color("ghost white")


def test_none_is_transparent():
    assert lookup_color("none") == -1
    assert lookup_color("NONE") == -1


def test_duplicate_name_uses_first_entry():
    # "dark slate" is listed for several colours; the first one wins.
    assert lookup_color("dark slate") == lookup_color("darkslategray")
    assert lookup_color("light slate") == lookup_color("lightslategray")
    assert lookup_color("light goldenrod") == lookup_color("lightgoldenrodyellow")


def test_unknown_name_raises_key_error():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_non_string_raises_type_error():
    with pytest.raises(TypeError):
        lookup_color(0xFF0000)


def test_color_names_unique_and_ordered():
    names = color_names()
    assert names[0] == "snow"
    assert names[-1] == "none"
    assert len(names) == len(set(names))


def test_every_name_resolves_within_rgb_range():
    for name in color_names():
        value = lookup_color(name)
        if name == "none":
            assert value == -1
        else:
            assert 0 <= value <= 0xFFFFFF


def test_gray_and_grey_spellings_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")