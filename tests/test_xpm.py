import pytest

from solong.xpm import (
    XpmError,
    color_key,
    parse_xpm,
    quoted_lines,
    read_xpm_file,
    strip_comments,
    text_rgb,
    xpm_from_data,
)

SAMPLE = [
    "2 2 2 1",
    ". c #FF0000",
    "# c None",
    ".#",
    "#.",
]

SAMPLE_FILE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
". c #FF0000", // red
"# c None",
/* pixels */
".#",
"#."
};
"""


def test_strip_comments_blanks_block_comment_and_keeps_length():
    text = 'a /* x */ "b"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "/*" not in result
    assert result.strip().endswith('"b"')


def test_strip_comments_ignores_markers_inside_quotes():
    text = '"/* kept */"'
    assert strip_comments(text) == text


def test_strip_comments_line_comment():
    result = strip_comments('"a" // note\n"b"')
    assert list(quoted_lines(result)) == ["a", "b"]
    assert "note" not in result


def test_quoted_lines_extracts_strings():
    assert list(quoted_lines('x "one", "two" "three')) == ["one", "two"]


def test_text_rgb_hex():
    assert text_rgb("#FF0000") == 0xFF0000


def test_text_rgb_named_and_two_words():
    assert text_rgb("red") == 0xFF0000
    assert text_rgb("RED") == text_rgb("red")
    assert text_rgb("light", "grey") == text_rgb("light grey")


def test_text_rgb_none_and_unknown():
    assert text_rgb("None") == -1
    assert text_rgb("no-such-colour") == 0


def test_color_key_single_and_pair():
    assert color_key("a") == ord("a")
    assert color_key("ab") == 0x6162


def test_xpm_from_data_pixels():
    image = xpm_from_data(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == 0xFF000000
    assert image.get_pixel(1, 1) == 0xFF0000


def test_byte_order_controls_layout():
    little = xpm_from_data(SAMPLE, 0)
    big = xpm_from_data(SAMPLE, 1)
    assert little.row(0)[:4] == (0xFF0000).to_bytes(4, "little")
    assert big.row(0)[:4] == (0xFF0000).to_bytes(4, "big")
    assert big.get_pixel(0, 0) == little.get_pixel(0, 0)


def test_two_chars_per_pixel():
    data = ["2 1 2 2", "aa c #00FF00", "bb c black", "aabb"]
    image = parse_xpm(data)
    assert image.get_pixel(0, 0) == 0x00FF00
    assert image.get_pixel(1, 0) == 0


def test_read_xpm_file_matches_data(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE_FILE)
    from_file = read_xpm_file(path)
    from_data = xpm_from_data(SAMPLE)
    assert from_file.data == from_data.data


def test_missing_file_raises(tmp_path):
    with pytest.raises(XpmError):
        read_xpm_file(tmp_path / "absent.xpm")


@pytest.mark.parametrize(
    "data",
    [
        [],
        ["0 2 1 1", ". c red", ".", "."],
        ["2 2 1"],
        ["1 1 1 1", ". red", "."],
        ["1 1 1 1", ". c", "."],
        ["1 2 1 1", ". c red", "."],
        ["1 1 2 1", ". c red"],
    ],
)
def test_malformed_data_raises(data):
    with pytest.raises(XpmError):
        xpm_from_data(data)


def test_xpm_error_is_value_error():
    with pytest.raises(ValueError):
        xpm_from_data(["bad"])