import csv

from dailyword.harness import run_batch, run_case, sample_targets, write_csv


def test_run_case_smoke(catalog):
    r = run_case(["slate", "train", "crane"], "crane", catalog=catalog)
    assert r["success"] is True
    assert r["status"] == "won"
    assert r["history"] == [("slate", "--G-G"), ("train", "-GG-Y"), ("crane", "GGGGG")]


def test_run_case_skips_rejected_guesses(catalog):
    r = run_case(["abc", "xyzzy", "crane"], "crane", catalog=catalog)
    assert r["rejected"] == 2
    assert r["guesses"] == 1 and r["success"] is True


def test_run_case_stops_when_game_ends(catalog):
    r = run_case(["slate", "crane", "train"], "crane", catalog=catalog, max_attempts=1)
    assert r["status"] == "lost"
    assert r["history"] == [("slate", "--G-G")]


def test_run_batch_and_csv(catalog, tmp_path):
    results = run_batch(["slate", "crane"], catalog.targets, catalog=catalog, sample=2)
    assert [r["target"] for r in results] == ["crane", "slate"]
    assert [r["success"] for r in results] == [True, True]

    path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_attempts=6)
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["target"] == "crane"
    assert rows[0]["patt_1"] == "'--G-G"
    assert rows[1]["guess_2"] == ""


def test_sample_targets_takes_first_in_day_order():
    assert sample_targets(["cigar", "rebut", "sissy"], 2) == ["cigar", "rebut"]
    assert sample_targets(["cigar", "rebut"]) == ["cigar", "rebut"]
    assert sample_targets(("cigar",), 5) == ["cigar"]


def test_csv_rows_have_one_column_pair_per_attempt(tmp_path):
    results = [
        {"target": "crane", "status": "lost", "success": False, "guesses": 2, "rejected": 1,
         "time_ms": 1.23456, "history": [("slate", "--G-G"), ("train", "-GG-Y")]},
    ]
    path = write_csv(results, str(tmp_path / "run.csv"), max_attempts=3)
    with open(path, newline="", encoding="utf-8") as f:
        header, row = list(csv.reader(f))
    assert header == ["target", "status", "success", "guesses", "rejected", "time_ms",
                      "guess_1", "patt_1", "guess_2", "patt_2", "guess_3", "patt_3"]
    assert row == ["crane", "lost", "False", "2", "1", "1.235",
                   "slate", "'--G-G", "train", "'-GG-Y", "", ""]
