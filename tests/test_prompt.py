import click
import pytest

from passgen.prompt import PresetInputProvider, ScriptedInputProvider


def test_preset_answers_length_once() -> None:
    fallback = ScriptedInputProvider.from_answers(["24"])
    provider = PresetInputProvider(fallback=fallback, length=4)

    assert provider.prompt("How many?") == "4"
    # a rejected preset falls back to asking
    assert provider.prompt("How many?") == "24"
    assert fallback.questions == ["How many?"]


def test_preset_inclusions_match_question_subject() -> None:
    fallback = ScriptedInputProvider.from_answers([True])
    provider = PresetInputProvider(
        fallback=fallback,
        inclusions={"Lowercase letters": False, "Numbers": True},
    )

    assert provider.confirm("Would you like to include lowercase letters?") is False
    assert provider.confirm("Would you like to include numbers?") is True
    assert provider.confirm("Would you like to include uppercase letters?") is True
    assert fallback.questions == ["Would you like to include uppercase letters?"]


def test_preset_forwards_alerts() -> None:
    fallback = ScriptedInputProvider.from_answers([])
    PresetInputProvider(fallback=fallback).alert("careful")

    assert fallback.alerts == ["careful"]


def test_click_provider_aborts_without_input() -> None:
    from click.testing import CliRunner

    from passgen.prompt import ClickInputProvider

    @click.command()
    def ask() -> None:
        ClickInputProvider().prompt("Length?")

    result = CliRunner().invoke(ask, input="")

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


@pytest.mark.parametrize("answer, expected", [("y", True), ("n", False), ("", False)])
def test_click_provider_confirm(answer: str, expected: bool) -> None:
    from click.testing import CliRunner

    from passgen.prompt import ClickInputProvider

    @click.command()
    def ask() -> None:
        click.echo(ClickInputProvider().confirm("Include?"))

    result = CliRunner().invoke(ask, input=answer + "\n")

    assert result.exit_code == 0
    assert result.output.splitlines()[-1] == str(expected)
