from bootup import cli as cli_mod


def test_format_table_clips_and_aligns() -> None:
    table = cli_mod._format_table(
        ["H1", "H2"], [["abc", "1"], ["defghi", "2"]], max_col_width=5
    )
    assert "H1" in table and "H2" in table
    assert "de..." in table
    lines = table.splitlines()
    assert len(lines) == 4
    assert set(lines[1].strip()) <= {"-", "+"}


def test_format_table_empty_rows() -> None:
    assert cli_mod._format_table(["URL"], []) == ""


def test_format_duration() -> None:
    assert cli_mod._format_duration(0.123) == "123.0 ms"
    assert cli_mod._format_duration(1.234) == "1.23 s"
    assert cli_mod._format_duration(75.2) == "1m 15.2s"
