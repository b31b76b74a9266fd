import io
import re

import pytest

from modcrypt.cli import DECRYPTED_FILE, ENCRYPTED_FILE, Task, main


@pytest.fixture
def feed(monkeypatch):
    def _feed(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _feed


def _numbers_after(label, text):
    return [int(value) for value in re.findall(re.escape(label) + r"\s*(-?\d+)", text)]


def test_equation_solver_output_satisfies_equation(feed, capsys):
    feed("")
    assert main(["5"]) == 0
    out = capsys.readouterr().out
    match = re.search(r"1256\*(-?\d+) \+ 847\*(-?\d+) = 119", out)
    assert match is not None
    a, b = int(match.group(1)), int(match.group(2))
    assert 1256 * a + 847 * b == 119


def test_task_number_read_from_stdin(feed, capsys):
    feed("5\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "= 119" in out


def test_task_selected_by_enum_value(feed, capsys):
    feed("")
    assert main([str(int(Task.EQUATION_SOLVER))]) == 0
    assert "= 119" in capsys.readouterr().out


def test_fermat_task_prints_matching_results(feed, capsys):
    feed("3 200 13\n")
    assert main(["1"]) == 0
    out = capsys.readouterr().out
    fermat = _numbers_after("Fermat's theorem:", out)
    binary = _numbers_after("binary expansion:", out)
    assert fermat == binary == [pow(3, 200, 13)]


def test_fermat_task_handles_several_inputs(feed, capsys):
    feed("2 10 13 5 3 7\n")
    main(["1"])
    out = capsys.readouterr().out
    assert _numbers_after("Fermat's theorem:", out) == [pow(2, 10, 13), pow(5, 3, 7)]


def test_fermat_task_rejects_composite_modulus(feed, capsys):
    feed("4 5 8\n")
    main(["1"])
    captured = capsys.readouterr()
    assert "prime" in captured.err
    assert "Fermat's theorem:" not in captured.out


def test_fermat_task_rejects_non_integers(feed, capsys):
    feed("a b c\n")
    main(["1"])
    assert "integers expected" in capsys.readouterr().err


def test_find_d_task_prints_inverse(feed, capsys):
    feed("3 7\n")
    assert main(["2"]) == 0
    (d,) = _numbers_after("d =", capsys.readouterr().out)
    assert 0 <= d < 7
    assert (3 * d) % 7 == 1


def test_find_d_task_reports_non_coprime(feed, capsys):
    feed("4 8\n")
    main(["2"])
    assert "coprime" in capsys.readouterr().err


def test_find_d_task_reports_bad_number(feed, capsys):
    feed("x 8\n")
    main(["2"])
    assert "Input error" in capsys.readouterr().err


def test_modular_inverse_task_is_unavailable(feed, capsys):
    feed("3 7\n")
    assert main(["3"]) == 1
    assert "not available" in capsys.readouterr().err


@pytest.mark.parametrize("task", ["9", "0", "abc"])
def test_unknown_task_does_nothing(feed, capsys, task):
    feed("")
    assert main([task]) == 0
    assert capsys.readouterr().out == ""


def test_elgamal_task_round_trips_file(feed, capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    original = b"Hello, ElGamal!\n"
    source = tmp_path / "original_text.txt"
    source.write_bytes(original)
    feed(f"{source}\n")

    assert main(["4", "--seed", "3"]) == 0

    assert (tmp_path / DECRYPTED_FILE).read_bytes() == original
    encrypted = (tmp_path / ENCRYPTED_FILE).read_text(encoding="ascii")
    pairs = re.findall(r"\((\d+) (\d+)\) ", encrypted)
    assert len(pairs) == len(original)
    assert len({u for u, _ in pairs}) == 1

    captured = capsys.readouterr()
    found = _numbers_after("Found secret key x:", captured.out)
    true = _numbers_after("True secret key x:", captured.out)
    if found:
        assert ("Attack succeeded" in captured.out) == (found == true)
    else:
        assert "coprime" in captured.err


def test_elgamal_task_missing_file(feed, capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    feed("missing.txt\n")
    assert main(["4", "--seed", "1"]) == 0
    captured = capsys.readouterr()
    assert "Cannot open file missing.txt" in captured.err
    assert "invalid data" in captured.err
    assert (tmp_path / DECRYPTED_FILE).read_bytes() == b""