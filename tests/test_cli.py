import pytest

from dining_philo.cli import main


@pytest.mark.parametrize("argv", [[], ["2", "800", "200"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count_fails_silently(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "argv, message",
    [
        (["0", "800", "200", "200"], "number of philosopher must be at least one"),
        (["251", "800", "200", "200"], "number of philosopher must not be above 250"),
        (["2", "800", "0", "200"], "timers must be over 0"),
        (["2", "800", "200", "200", "-1"], "number of meals to eat must be 0 or above"),
    ],
)
def test_invalid_settings_print_message(argv, message, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out.strip() == message


def test_single_philosopher_run(capsys):
    assert main(["1", "50", "10", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith("1 has taken a fork")
    assert lines[-1].endswith("1 died")


def test_meal_limit_run(capsys):
    assert main(["+2", "800", "30", "30", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "ALL MEALS HAVE BEEN EATEN"
    assert any(line.endswith("2 is eating") for line in lines)