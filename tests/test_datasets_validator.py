from pathlib import Path
from dailyword.datasets import validate_wordlists, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    tgt = tmp_path / "targets_5.txt"
    dic = tmp_path / "dictionary_5.txt"
    _write(tgt, ["crane", "raise", "stare"])
    _write(dic, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlists(5, str(tgt), str(dic))
    assert rep["passed"] is True
    assert rep["targets_subset_dictionary"] is True
    assert rep["targets"]["count"] == 3
    s = pretty_summary(rep)
    assert "N=5" in s and "targets⊆dictionary=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    tgt = tmp_path / "targets_5.txt"
    dic = tmp_path / "dictionary_5.txt"
    tgt.write_text("crane\ncranes\n???\n", encoding="utf-8")
    dic.write_text("crane\nCRANE\n", encoding="utf-8")

    rep = validate_wordlists(5, str(tgt), str(dic))
    assert rep["passed"] is False
    assert rep["targets"]["invalid_lines"] == 2
    assert rep["dictionary"]["invalid_lines"] == 1
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    tgt = tmp_path / "targets_5.txt"
    dic = tmp_path / "dictionary_5.txt"
    _write(tgt, ["crane", "raise", "stare"])
    _write(dic, ["crane", "stare"])

    rep = validate_wordlists(5, str(tgt), str(dic))
    assert rep["passed"] is False
    assert rep["targets_subset_dictionary"] is False
    assert any("subset" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    dic = tmp_path / "dictionary_5.txt"
    _write(dic, ["crane"])
    rep = validate_wordlists(5, str(tmp_path / "nope.txt"), str(dic))
    assert rep["passed"] is False
    assert rep["targets"]["exists"] is False
    assert any("not found" in msg for msg in rep["issues"])
    assert "FAIL" in pretty_summary(rep)


def test_bundled_lists_pass():
    from dailyword.datasets import default_paths
    dictionary, targets = default_paths(5)
    rep = validate_wordlists(5, str(targets), str(dictionary))
    assert rep["passed"] is True, rep["issues"]


def test_merge_wordlists_script(tmp_path: Path, monkeypatch, capsys):
    import sys
    from script import merge_wordlists

    tgt = tmp_path / "targets_5.txt"
    dic = tmp_path / "dictionary_5.txt"
    _write(tgt, ["crane", "slate"])
    _write(dic, ["Train", "crane", "train", ""])
    monkeypatch.setattr(sys, "argv", ["merge_wordlists", "--targets", str(tgt), "--dictionary", str(dic)])
    merge_wordlists.main()

    assert dic.read_text(encoding="utf-8").split() == ["crane", "slate", "train"]
    assert "1 targets added" in capsys.readouterr().out
    rep = validate_wordlists(5, str(tgt), str(dic))
    assert rep["passed"] is True
