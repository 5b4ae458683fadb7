from __future__ import annotations

import json
from pathlib import Path

from leadrecon.cli import main
from leadrecon.ingestion.reader import read_dataset


def test_compare_writes_run_outputs(fixtures_dir: Path, tmp_path: Path):
    code = main([
        "compare",
        str(fixtures_dir / "facebook_leads.csv"),
        str(fixtures_dir / "highlevel_leads.csv"),
        "--out-dir", str(tmp_path),
        "--run-id", "run1",
    ])
    assert code == 0
    run_dir = tmp_path / "run1"
    meta = json.loads((run_dir / "run_meta.json").read_text(encoding="utf-8"))
    assert meta["counts"] == {"source": 3, "reference": 2, "missing": 2, "combined": 4}

    missing = read_dataset(run_dir / "missing_facebook_leads.csv")
    assert [r["full_name"] for r in missing] == ["Kim Lee", "Nobody Here"]

    combined = read_dataset(run_dir / "combined_leads.csv")
    assert combined[2] == {
        "First Name": "Kim",
        "Last Name": "Lee",
        "Email": "k@y.com",
        "Phone": "(555) 999-8888",
        "Tags": "Facebook Lead",
    }
    assert combined[3]["First Name"] == "Nobody"


def test_compare_with_config(fixtures_dir: Path, tmp_path: Path):
    code = main([
        "compare",
        str(fixtures_dir / "facebook_leads.csv"),
        str(fixtures_dir / "highlevel_leads.csv"),
        "--config", str(fixtures_dir / "config.valid.yml"),
        "--out-dir", str(tmp_path),
        "--run-id", "run2",
    ])
    assert code == 0
    combined = read_dataset(tmp_path / "run2" / "combined_leads.csv")
    assert combined[-1]["Tags"] == "Ad Lead"
    assert (tmp_path / "run2" / "missing.csv").exists()


def test_compare_no_write(fixtures_dir: Path, tmp_path: Path):
    code = main([
        "compare",
        str(fixtures_dir / "facebook_leads.csv"),
        str(fixtures_dir / "highlevel_leads.csv"),
        "--out-dir", str(tmp_path),
        "--search", "kim",
        "--no-write",
    ])
    assert code == 0
    assert list(tmp_path.iterdir()) == []


def test_compare_missing_input(tmp_path: Path):
    code = main(["compare", str(tmp_path / "a.csv"), str(tmp_path / "b.csv"), "--no-write"])
    assert code == 2


def test_diff_command(tmp_path: Path):
    a = tmp_path / "a.csv"
    b = tmp_path / "b.csv"
    a.write_text("x,y\n1,2\n3,4\n", encoding="utf-8")
    b.write_text("x,y\n1,2\n3,5\n", encoding="utf-8")
    assert main(["diff", str(a), str(b)]) == 0
    assert main(["diff", str(a), str(a)]) == 0


def test_compare_prints_bracketed_values_literally(tmp_path: Path, capsys):
    source = tmp_path / "s.csv"
    reference = tmp_path / "r.csv"
    source.write_text("email,phone_number,full_name\nk@y.com,1,Kim [/b] Lee\n", encoding="utf-8")
    reference.write_text("Email,Phone,[red]\nj@x.com,2,[/red]\n", encoding="utf-8")
    code = main(["compare", str(source), str(reference), "--search", "[/b]", "--no-write"])
    assert code == 0
    out = capsys.readouterr().out
    assert "[/b]" in out


def test_diff_prints_bracketed_values_literally(tmp_path: Path, capsys):
    a = tmp_path / "a.csv"
    b = tmp_path / "b.csv"
    a.write_text("x\n[/red]\n", encoding="utf-8")
    b.write_text("x\n[bold]\n", encoding="utf-8")
    assert main(["diff", str(a), str(b)]) == 0
    out = capsys.readouterr().out
    assert "x: [/red]" in out
    assert "x: [bold]" in out
