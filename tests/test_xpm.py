import pytest

from cub3d.xpm import (
    XpmError,
    load_xpm,
    parse_xpm,
    quoted_lines,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
"a c #FF0000",
". c None",
// pixels
"a.",
".a"
};
"""


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_quotes():
    text = '"x /* kept */" /* gone */ "y" // tail\n"z"'
    cleaned = strip_comments(text)
    assert len(cleaned) == len(text)
    assert "gone" not in cleaned
    assert "tail" not in cleaned
    assert list(quoted_lines(cleaned)) == ["x /* kept */", "y", "z"]


def test_strip_unterminated_comment_blanks_rest():
    cleaned = strip_comments('"a" /* never closed "b"')
    assert list(quoted_lines(cleaned)) == ["a"]


def test_quoted_lines_pairs_quotes():
    assert list(quoted_lines('"one", "two" "three')) == ["one", "two"]


def test_text_to_rgb_hex_and_names():
    assert text_to_rgb("#FF0000", None) == 0xFF0000
    assert text_to_rgb("red", None) == 0xFF0000
    assert text_to_rgb("RED", None) == 0xFF0000
    assert text_to_rgb("dark", "red") == 0x8B0000
    assert text_to_rgb("None", None) == -1


def test_text_to_rgb_unknown_is_zero():
    assert text_to_rgb("no-such-colour", None) == 0
    assert text_to_rgb("#", None) == 0


def test_parse_xpm_pixels():
    img = parse_xpm(["2 2 2 1", "a c #FF0000", ". c None", "a.", ".a"])
    assert (img.width, img.height) == (2, 2)
    assert img.get_pixel(0, 0) == 0xFF0000
    assert img.get_pixel(1, 1) == 0xFF0000
    assert img.get_pixel(1, 0) == 0xFF000000
    assert img.get_pixel(0, 1) == 0xFF000000


def test_parse_xpm_two_chars_per_pixel():
    img = parse_xpm(["2 1 2 2", "aa c blue", "bb c green", "bbaa"])
    assert img.get_pixel(0, 0) == 0xFF00
    assert img.get_pixel(1, 0) == 0xFF


def test_parse_xpm_unknown_pixel_key_is_black():
    img = parse_xpm(["1 1 1 1", "a c white", "z"])
    assert img.get_pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 2 1"],
        ["0 2 1 1", "a c red", "a", "a"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["1 1 2 1", "a c red"],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_load_xpm_from_file(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    img = load_xpm(path)
    assert (img.width, img.height) == (2, 2)
    assert img.get_pixel(0, 0) == 0xFF0000
    assert img.get_pixel(1, 0) == 0xFF000000


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")