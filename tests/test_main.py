import subprocess
import sys

import pytest

from oop_studying.main import main


def test_no_arguments_runs_nothing(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_single_demo(capsys):
    assert main(["--demo", "overriding"]) == 0
    assert capsys.readouterr().out == "--- Overriding ---\nCustomer\n"


def test_demos_run_in_requested_order(capsys):
    assert main(["--demo", "interface", "--demo", "Overloading"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "--- Interface ---",
        "Hello, Peter!",
        "100",
        "--- Overloading ---",
        "Name: Peter Emil",
    ]


def test_all_runs_every_demo(capsys):
    assert main(["--all"]) == 0
    banners = [line for line in capsys.readouterr().out.splitlines() if line.startswith("---")]
    assert banners == [
        "--- Overriding ---",
        "--- Overloading ---",
        "--- Abstract ---",
        "--- Interface ---",
        "--- Scope ---",
    ]


def test_unknown_demo_runs_nothing(capsys):
    assert main(["--demo", "overriding", "--demo", "nope"]) == 1
    assert capsys.readouterr().out == "❌ Error: Unknown demo: nope\n"


def test_summary(capsys):
    assert main(["--summary"]) == 0
    out = capsys.readouterr().out
    assert "--- Dispatch Table ---" in out
    assert "AbstractTestChild" in out


def test_bad_flag_exits_with_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["--bogus"])
    assert exc.value.code == 2


def test_module_entry_point():
    cp = subprocess.run(
        [sys.executable, "-m", "oop_studying", "--demo", "scope"],
        capture_output=True, text=True, encoding="utf-8",
    )
    assert cp.returncode == 0, cp.stderr
    assert "display() is not available on Person" in cp.stdout


def test_summary_follows_demos(capsys):
    assert main(["--summary", "--demo", "overriding"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("--- Overriding ---\nCustomer\n")
    assert out.index("--- Overriding ---") < out.index("--- Dispatch Table ---")


def test_all_wins_over_demo(capsys):
    assert main(["--demo", "scope", "--all"]) == 0
    banners = [line for line in capsys.readouterr().out.splitlines() if line.startswith("---")]
    assert banners[0] == "--- Overriding ---"
    assert len(banners) == 5


def test_unknown_demo_with_all_runs_nothing(capsys):
    assert main(["--all", "--demo", "nope"]) == 1
    assert capsys.readouterr().out == "❌ Error: Unknown demo: nope\n"


def test_banner_uses_normalized_name(capsys):
    assert main(["--demo", "  SCOPE "]) == 0
    assert capsys.readouterr().out.startswith("--- Scope ---\n")
