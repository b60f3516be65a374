import pytest

from passgen.collector import Collector, parse_int
from passgen.dto import Criteria
from passgen.prompt import ScriptedInputProvider

LENGTH_ALERT = "Please provide a valid number for your password's length!"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("8", 8),
        ("  42 ", 42),
        ("12abc", 12),
        ("-3", -3),
        ("abc", None),
        ("", None),
        ("4.5", 4),
        ("\u0668", None),
        ("9" * 5000, None),
    ],
)
def test_parse_int(value: str, expected: int | None) -> None:
    assert parse_int(value) == expected


def test_collect_length_reprompts_until_valid() -> None:
    provider = ScriptedInputProvider.from_answers(["abc", "4", "8"])

    assert Collector(provider).collect_length(8, 128) == 8
    assert len(provider.questions) == 3
    assert provider.alerts == [LENGTH_ALERT, LENGTH_ALERT]
    assert "between 8 and 128" in provider.questions[0]


@pytest.mark.parametrize(
    "answer", ["7", "129", "-10", "", "eight", "\u0668", "9" * 5000]
)
def test_collect_length_rejects(answer: str) -> None:
    provider = ScriptedInputProvider.from_answers([answer, "128"])

    assert Collector(provider).collect_length(8, 128) == 128
    assert provider.alerts == [LENGTH_ALERT]


def test_collect_length_accepts_bounds() -> None:
    provider = ScriptedInputProvider.from_answers(["8"])
    assert Collector(provider).collect_length(8, 8) == 8
    assert provider.alerts == []


def test_collect_inclusions(criteria: Criteria) -> None:
    provider = ScriptedInputProvider.from_answers([True, False, True, False])

    Collector(provider).collect_inclusions(criteria.classes)

    assert [cc.included for cc in criteria.classes] == [True, False, True, False]
    assert provider.questions == [
        "Would you like to include lowercase letters?",
        "Would you like to include uppercase letters?",
        "Would you like to include numbers?",
        "Would you like to include special characters?",
    ]


def test_collect_fills_criteria(criteria: Criteria) -> None:
    provider = ScriptedInputProvider.from_answers(["20", False, True, False, False])

    Collector(provider).collect(criteria, 8, 128)

    assert criteria.length == 20
    assert [cc.name for cc in criteria.included_classes()] == ["Uppercase letters"]


def test_scripted_provider_runs_dry() -> None:
    provider = ScriptedInputProvider.from_answers([])

    with pytest.raises(LookupError):
        Collector(provider).collect_length(8, 128)
