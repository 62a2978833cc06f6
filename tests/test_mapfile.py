import pytest

from sheepgame.mapfile import load_map, parse_map, split_rows
from sheepgame.validation import MapError

VALID_ROWS = [
    "1111111",
    "1P0C0E1",
    "1111111",
]
VALID_TEXT = "\n".join(VALID_ROWS) + "\n"

BONUS_ROWS = [
    "11111111",
    "1P0C0E01",
    "10000K01",
    "11111111",
]


def test_split_rows_drops_final_newline_only():
    assert split_rows("ab\ncd\n") == ["ab", "cd"]


def test_split_rows_without_final_newline():
    assert split_rows("ab\ncd") == ["ab", "cd"]


def test_split_rows_keeps_blank_line():
    assert split_rows("ab\n\ncd\n") == ["ab", "", "cd"]


def test_split_rows_empty_text():
    assert split_rows("") == []


def test_split_rows_keeps_carriage_return():
    assert split_rows("ab\r\ncd\r\n") == ["ab\r", "cd\r"]


def test_split_rows_round_trip():
    assert "\n".join(split_rows(VALID_TEXT)) + "\n" == VALID_TEXT


def test_parse_map_returns_rows():
    assert parse_map(VALID_TEXT) == VALID_ROWS


def test_parse_map_without_trailing_newline():
    assert parse_map("\n".join(VALID_ROWS)) == VALID_ROWS


def test_parse_map_empty_text():
    with pytest.raises(MapError, match="You need to provide a valid map file."):
        parse_map("")


def test_parse_map_trailing_blank_line_is_not_rectangular():
    with pytest.raises(MapError, match="Map is not rectangular"):
        parse_map(VALID_TEXT + "\n")


def test_parse_map_rejects_enemy_without_bonus():
    with pytest.raises(MapError, match="Invalid character 'K'"):
        parse_map("\n".join(BONUS_ROWS))


def test_parse_map_accepts_enemy_with_bonus():
    assert parse_map("\n".join(BONUS_ROWS), bonus=True) == BONUS_ROWS


def test_parse_map_missing_wall():
    rows = ["1111111", "1P0C0E0", "1111111"]
    with pytest.raises(MapError, match="Wall missing at row"):
        parse_map("\n".join(rows))


def test_parse_map_no_path():
    rows = ["1111111", "1P01CE1", "1111111"]
    with pytest.raises(MapError, match="No valid path"):
        parse_map("\n".join(rows))


def test_parse_map_windows_line_endings_rejected():
    with pytest.raises(MapError, match="Invalid character"):
        parse_map("\r\n".join(VALID_ROWS) + "\r\n")


def test_load_map_reads_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID_TEXT)
    assert load_map(path) == VALID_ROWS


def test_load_map_accepts_string_path(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("\n".join(BONUS_ROWS) + "\n")
    assert load_map(str(path), bonus=True) == BONUS_ROWS


def test_load_map_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_map(tmp_path / "missing.ber")


def test_load_map_bad_extension(tmp_path):
    path = tmp_path / "level.txt"
    path.write_text(VALID_TEXT)
    with pytest.raises(MapError, match="Invalid file name"):
        load_map(path)


def test_load_map_hidden_ber_name(tmp_path):
    path = tmp_path / ".ber"
    path.write_text(VALID_TEXT)
    with pytest.raises(MapError, match="Invalid file name"):
        load_map(path)


def test_load_map_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    with pytest.raises(MapError, match="You need to provide a valid map file."):
        load_map(path)


def test_load_map_non_ascii_byte_is_invalid(tmp_path):
    path = tmp_path / "odd.ber"
    path.write_bytes(b"1111111\n1P0C0E1\n111\xff111\n")
    with pytest.raises(MapError, match="Invalid character"):
        load_map(path)