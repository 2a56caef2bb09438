import random

import pytest

from comma_sort.cases import STRESS_CASE, TEST_CASES, random_line, random_lines
from comma_sort.check import CheckResult, VerificationError, check_line, main, parallel_check, verify
from comma_sort.oracle import expected_output


def test_stress_case_truncates():
    # 18 values in, 16 kept
    assert expected_output(STRESS_CASE) == "-1234, -4, 0, 1, 1, 1, 3, 5, 5, 5, 5, 9, 21, 34, 95, 99999\n"


def test_corpus_matches_oracle():
    for line in TEST_CASES:
        assert check_line(line).ok, line


def test_random_lines_match_oracle():
    for line in random_lines(200, seed=3):
        r = check_line(line)
        assert r.ok, r


def test_random_lines_reproducible():
    assert random_lines(5, seed=9) == random_lines(5, seed=9)


def test_random_line_count():
    line = random_line(random.Random(0), count=4)
    assert len(line.split(",")) == 4


def test_parallel_check_keeps_order():
    lines = TEST_CASES + random_lines(20, seed=1)
    results = parallel_check(lines, processes=2)
    assert [r.line for r in results] == lines
    assert verify(results) == len(lines)


def test_parallel_check_empty():
    assert parallel_check([], processes=2) == []


def test_verify_raises_on_mismatch():
    bad = CheckResult("1,2", "2, 1\n", "1, 2\n")
    with pytest.raises(VerificationError):
        verify([bad])
    with pytest.raises(AssertionError):
        verify([bad])


def test_main(capsys):
    assert main(["--processes", "2", "--random", "10", "--seed", "5"]) == 0
    assert "Checked 19 lines" in capsys.readouterr().out


def test_main_rejects_zero_processes():
    assert main(["--processes", "0"]) == 2


def test_oracle_turns_blank_tokens_into_zero():
    r = check_line("1, ,2\n")
    assert r.expected == "0, 1, 2\n"
    assert r.ok


def test_main_writes_log_file(tmp_path):
    log_file = tmp_path / "check.log"
    assert main(["--processes", "1", "--random", "0", "--verbose", "--log-file", str(log_file)]) == 0
    assert "Checking 9 lines" in log_file.read_text(encoding="utf-8")
