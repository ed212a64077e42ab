import pytest

from renamer.main import REQUIRED_MSG, main


@pytest.mark.parametrize("argv", [
    [],
    ["--old", "com.old", "--new", "com.new"],
    ["--dir", "DIR", "--new", "com.new"],
    ["--dir", "DIR", "--old", "com.old"],
    ["--dir", "DIR", "--old", "", "--new", "com.new"],
])
def test_missing_flag_is_fatal_and_touches_nothing(argv, java_project, capsys):
    argv = [str(java_project) if a == "DIR" else a for a in argv]
    before = (java_project / "pom.xml").read_text(encoding="utf-8")

    assert main(argv) == 1

    err = capsys.readouterr().err
    assert "usage:" in err
    assert REQUIRED_MSG in err
    assert (java_project / "pom.xml").read_text(encoding="utf-8") == before
    assert (java_project / "src" / "main" / "java" / "com" / "old" / "App.java").exists()


def test_blank_name_rejected_by_validation(java_project, capsys):
    assert main(["--dir", str(java_project), "--old", "   ", "--new", "com.new"]) == 1
    assert "Invalid arguments" in capsys.readouterr().err


def test_missing_directory_is_fatal(tmp_path, capsys):
    assert main(["--dir", str(tmp_path / "nope"), "--old", "com.old", "--new", "com.new"]) == 1
    assert "Project directory does not exist" in capsys.readouterr().err


def test_successful_run(java_project, capsys):
    assert main(["--dir", str(java_project), "--old", "com.old", "--new", "com.new"]) == 0

    out = capsys.readouterr().out
    assert out.startswith(f"Renaming Java project in {java_project} from 'com.old' to 'com.new'\n")
    assert "Renamed file from" in out
    assert "Renaming complete. Please verify the changes and rebuild your Java project." in out
    assert "2 file(s) moved" in out
    assert (java_project / "src" / "main" / "java" / "com" / "new" / "App.java").exists()


def test_prune_flag(java_project):
    assert main(["--dir", str(java_project), "--old", "com.old", "--new", "com.new", "--prune-empty"]) == 0
    assert not (java_project / "src" / "main" / "java" / "com" / "old").exists()


def test_io_error_exits_nonzero(java_project, capsys):
    (java_project / "src" / "Broken.java").symlink_to(java_project / "missing.java")

    assert main(["--dir", str(java_project), "--old", "com.old", "--new", "com.new"]) == 1

    err = capsys.readouterr().err
    assert err.startswith("Error walking the directory: failed to read file")
