import io
import sys

import pytest

from smalltools.minicat import CatOptions, Formatter, UsageError, main, parse_args


def _fmt(data, **switches):
    return Formatter(CatOptions(**switches)).format(data)


@pytest.mark.parametrize("data", [b"", b"abc", b"a\n\n\n\nb\n", b"\t\x01x\n"])
def test_no_switches_is_identity(data):
    assert _fmt(data) == data


def test_number_every_line():
    assert _fmt(b"a\nb\n", number=True) == b"     1  a\n     2  b\n"


def test_show_ends():
    assert _fmt(b"a\n", show_ends=True) == b"a$\n"


def test_show_nonprinting_controls_only():
    assert _fmt(b"\x01\x7f", show_nonprinting=True) == b"^A\x7f"


def test_show_nonprinting_leaves_no_controls():
    data = bytes(range(32)) + b"text"
    result = _fmt(data, show_nonprinting=True)
    assert all(b >= 0x20 or b in (0x09, 0x0A) for b in result)
    assert result.endswith(b"text")


def test_show_tabs_replaces_every_tab():
    data = b"a\tb\t\tc\n"
    result = _fmt(data, show_tabs=True)
    assert b"\t" not in result
    assert result.count(b"^I") == data.count(b"\t")


def test_squeeze_keeps_at_most_two_newlines_in_a_row():
    result = _fmt(b"a\n\n\n\n\nb", squeeze_blank=True)
    assert b"\n\n\n" not in result
    assert result.startswith(b"a\n\n")
    assert result.endswith(b"b")


def test_number_nonblank_skips_empty_lines():
    data = b"one\n\ntwo\n\n\nthree\n"
    lines = _fmt(data, number_nonblank=True).split(b"\n")
    original = data.split(b"\n")
    assert [line == b"" for line in lines] == [line == b"" for line in original]
    numbered = [int(line.split()[0]) for line in lines if line]
    assert numbered == list(range(1, len(numbered) + 1))


def test_numbering_continues_across_inputs():
    formatter = Formatter(CatOptions(number=True))
    first = formatter.format(b"x\ny\n")
    second = formatter.format(b"z\n")
    assert int(second.split()[0]) == len(first.splitlines()) + 1


def test_parse_all_switch_sets_three_flags():
    options = parse_args(["-A", "file"])
    assert (options.show_nonprinting, options.show_ends, options.show_tabs) == (True, True, True)
    assert options.files == ["file"]


def test_parse_combined_switches():
    options = parse_args(["-nsT"])
    assert options.number and options.squeeze_blank and options.show_tabs
    assert not options.show_ends


def test_double_dash_makes_later_args_files():
    options = parse_args(["--", "-n", "-"])
    assert options.files == ["-n", "-"]
    assert not options.any_switch


def test_double_dash_after_switch_is_rejected():
    with pytest.raises(UsageError):
        parse_args(["-n", "--"])


def test_unknown_switch_reports_rest_of_argument():
    with pytest.raises(UsageError) as excinfo:
        parse_args(["-nxz"])
    assert excinfo.value.option == "xz"


@pytest.mark.parametrize("arg", ["---", "--x", "-h"])
def test_bad_long_forms(arg):
    with pytest.raises(UsageError):
        parse_args([arg])


def test_help_and_version_info():
    assert parse_args(["--help"]).info == "cat_help"
    assert parse_args(["--version", "-x"]).info == "cat_version"


def test_main_numbers_across_files(tmp_path, capsysbinary):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.write_bytes(b"x\n")
    second.write_bytes(b"y\n")
    assert main(["-n", str(first), str(second)]) == 0
    out = capsysbinary.readouterr().out
    assert [int(line.split()[0]) for line in out.splitlines()] == [1, 2]
    assert out.endswith(b"y\n")


def test_main_copies_stdin_without_args(monkeypatch, capsysbinary):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"raw\x01")))
    assert main([]) == 0
    assert capsysbinary.readouterr().out == b"raw\x01"


def test_main_formats_stdin_with_switch(monkeypatch, capsysbinary):
    data = b"a\x02\n"
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
    assert main(["-v"]) == 0
    assert capsysbinary.readouterr().out == _fmt(data, show_nonprinting=True)


def test_main_invalid_option(capsys):
    assert main(["-q"]) == 1
    assert "Invalid option: q" in capsys.readouterr().out


def test_main_help_prints_help_file(tmp_path, monkeypatch, capsysbinary):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "cat_help").write_bytes(b"usage text\n")
    assert main(["--help"]) == 0
    assert capsysbinary.readouterr().out == b"usage text\n"