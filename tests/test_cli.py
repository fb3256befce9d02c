import pytest

from textrsa import cli


def test_main_prints_every_step(capsys):
    assert cli.main(["--text", "Hi", "--seed", "7"]) == 0
    lines = capsys.readouterr().out.splitlines()

    labels = [line.split(":")[0] for line in lines]
    assert labels == [
        "Public Key (e, n)",
        "Private Key (d, n)",
        "String to List",
        "List to ASCII",
        "Encrypted List",
        "Decrypted List",
        "ASCII to List",
        "List to String",
    ]
    assert lines[2] == "String to List: ['H', 'i']"
    assert lines[3] == "List to ASCII: [72, 105]"
    assert lines[5] == "Decrypted List: [72, 105]"
    assert lines[-1] == "List to String: Hi"

    e, n = (int(x) for x in lines[0].split(": ")[1].split(", "))
    d, n_priv = (int(x) for x in lines[1].split(": ")[1].split(", "))
    assert n == n_priv


def test_main_is_reproducible_with_seed(capsys):
    cli.main(["--text", "abc", "--seed", "11"])
    first = capsys.readouterr().out
    cli.main(["--text", "abc", "--seed", "11"])
    assert capsys.readouterr().out == first


def test_main_prompts_for_input(monkeypatch, capsys):
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return "Hello"

    monkeypatch.setattr("builtins.input", fake_input)
    assert cli.main(["--seed", "1"]) == 0
    assert prompts == ["Enter a string: "]
    assert capsys.readouterr().out.splitlines()[-1] == "List to String: Hello"


def test_main_binary_flag(capsys):
    cli.main(["--text", "H", "--seed", "2", "--binary"])
    assert "ASCII to Binary: ['1001000']" in capsys.readouterr().out


def test_main_fixed_primes(capsys):
    assert cli.main(["--text", "H", "--min", "101", "--max", "103"]) == 0
    out = capsys.readouterr().out
    assert "Public Key (e, n): 7, 10403" in out
    assert "Private Key (d, n): 4243, 10403" in out
    assert f"Encrypted List: [{pow(72, 7, 10403)}]" in out


def test_main_reports_overflow(capsys):
    assert cli.main(["--text", "\U0001F600", "--min", "101", "--max", "103"]) == 1
    assert "error:" in capsys.readouterr().err


def test_main_reports_prime_free_range(capsys):
    assert cli.main(["--text", "x", "--min", "24", "--max", "28", "--seed", "0"]) == 1
    assert "error: no prime found in [24, 28]" in capsys.readouterr().err


def test_main_rejects_bad_arguments():
    with pytest.raises(SystemExit) as exc:
        cli.main(["--min", "abc"])
    assert exc.value.code == 2


def test_run_returns_recovered_text(capsys):
    assert cli.run("round trip") == "round trip"
