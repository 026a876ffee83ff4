import pytest

from int_fixtures import cli
from int_fixtures.__about__ import COPYRIGHT

USAGE = "usage: write-ints [8|16|32|64]\n"


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["0"],
        ["7"],
        ["128"],
        ["abc"],
        [""],
        ["08"],
        [" 8"],
        ["-8"],
        ["32", "--window", "0"],
        ["32", "--window", "x"],
        ["64", "--style", "json"],
        ["-h"],
        ["--help"],
    ],
)
def test_usage_error(capsys, argv):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err == USAGE

@pytest.mark.parametrize("width,entries", [("8", 256), ("16", 65536), ("32", 3073), ("64", 3073)])
def test_writes_document(capsys, width, entries):
    assert cli.main([width]) == 0
    out, err = capsys.readouterr()
    lines = out.splitlines()
    assert lines[0] == "export default {"
    assert lines[-1] == "};"
    assert len(lines) == entries + 2
    assert err == ""

def test_same_output_twice(capsys):
    cli.main(["32"])
    first = capsys.readouterr().out
    cli.main(["32"])
    assert capsys.readouterr().out == first

def test_output_file_matches_stdout(tmp_path, capsys):
    target = tmp_path / "int16.mjs"
    assert cli.main(["16", "-o", str(target)]) == 0
    assert capsys.readouterr().out == ""
    cli.main(["16"])
    assert target.read_text(encoding="utf-8") == capsys.readouterr().out

def test_output_file_not_created_on_error(tmp_path, capsys):
    target = tmp_path / "int32.mjs"
    with pytest.raises(SystemExit):
        cli.main(["32", "--window", "0", "-o", str(target)])
    assert not target.exists()

def test_window_option(capsys):
    assert cli.main(["64", "--window", "4"]) == 0
    out = capsys.readouterr().out
    assert len(out.splitlines()) == 3 * 4 + 1 + 2

def test_extra_arguments_are_ignored(capsys, caplog):
    assert cli.main(["8", "16"]) == 0
    out, _ = capsys.readouterr()
    assert out.splitlines()[1] == "\t0x80: -128,"
    assert "ignoring extra arguments: 16" in caplog.text

def test_verbose_logs_entry_count(capsys):
    assert cli.main(["8", "-v"]) == 0
    _, err = capsys.readouterr()
    assert "wrote 256 entries" in err

def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--version"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert out.startswith("write-ints 0.1.0\n")
    assert out.rstrip().endswith(COPYRIGHT)

def test_unwritable_output_file(tmp_path, capsys):
    target = tmp_path / "missing" / "int8.mjs"
    assert cli.main(["8", "-o", str(target)]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "cannot write" in err
    assert "Traceback" not in err
    assert not target.exists()
