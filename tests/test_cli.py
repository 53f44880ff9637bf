import pytest

from cli import main


@pytest.mark.parametrize(
    "argv,expected",
    [
        (["tip", "--amount", "50", "--percent", "18", "--locale", "en_US"], "Tip Amount: $9.00"),
        (["tip", "--amount", "33.33", "--percent", "20", "--round-up", "--locale", "en_US"], "Tip Amount: $7.00"),
        (["tip", "--amount", "100", "--locale", "en_US"], "Tip Amount: $15.00"),
        (["tip", "--amount", "abc", "--percent", "20", "--locale", "en_US"], "Tip Amount: $0.00"),
        (["tip", "--amount", "50", "--percent", "", "--locale", "en_US"], "Tip Amount: $0.00"),
    ],
)
def test_cli_tip(argv, expected, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out.strip() == expected


def test_cli_uses_env_locale(monkeypatch, capsys):
    monkeypatch.setenv("TIP_LOCALE", "en_GB")
    main(["tip", "--amount", "50", "--percent", "18"])
    assert capsys.readouterr().out.strip() == "Tip Amount: £9.00"


def test_cli_without_command_prints_help(capsys):
    assert main([]) == 0
    assert "tip-calc" in capsys.readouterr().out


def test_cli_requires_amount():
    with pytest.raises(SystemExit):
        main(["tip", "--percent", "18"])
