from logging import getLogger
from typing import NoReturn, Optional, Sequence

import click

from ... import _conf, exc
from ...collector import Collector
from ...dto import Criteria
from ...generator import Generator
from ...prompt import ClickInputProvider, PresetInputProvider
from ...workflow import PasswordWorkflow
from ..exc import CLIError, UnknownCharacterClassError

__all__ = ["generate", "get_settings", "resolve_inclusions"]


logger = getLogger(__name__)


def raise_unexpected_exc(ex: Exception) -> NoReturn:
    logger.debug(ex, exc_info=ex)
    raise CLIError("Unexpected error: %r" % ex, exit_code=128) from ex


def get_settings(ctx: click.Context) -> _conf.Settings:
    if (settings := ctx.find_object(_conf.Settings)) is None:
        settings = _conf.Settings()
    return settings


def resolve_inclusions(
    criteria: Criteria, include: Sequence[str], exclude: Sequence[str]
) -> dict[str, bool]:
    """
    Maps the class names given on the command line to the names of the classes they
    refer to. Exclusions win over inclusions.
    """
    res: dict[str, bool] = {}

    for names, answer in ((include, True), (exclude, False)):
        for name in names:
            try:
                res[criteria.get_class(name).name] = answer
            except KeyError:
                raise UnknownCharacterClassError(
                    name,
                    ctx=UnknownCharacterClassError.Context(
                        choices=[cc.name.split()[0].lower() for cc in criteria.classes]
                    ),
                ) from None

    return res


@click.command()
@click.option(
    "-l",
    "--length",
    type=click.IntRange(min=1),
    help=(
        "Length of the password. Answers the length question up front; an out of "
        "range value is asked again."
    ),
)
@click.option(
    "-i",
    "--include",
    multiple=True,
    help=(
        "Include a character class without asking (can be repeated). One of "
        "lowercase, uppercase, numbers or special."
    ),
)
@click.option(
    "-x",
    "--exclude",
    multiple=True,
    help="Exclude a character class without asking (can be repeated).",
)
@click.option("--seed", type=int, help="Seed a pseudo-random source for this run.")
@click.option(
    "--max-attempts",
    type=click.IntRange(min=1),
    help="Give up after this many rejected candidates. Unlimited by default.",
)
@click.pass_context
def generate(
    ctx: click.Context,
    length: Optional[int],
    include: Sequence[str],
    exclude: Sequence[str],
    seed: Optional[int],
    max_attempts: Optional[int],
) -> None:
    """
    Generate a random password.

    Asks for the password length and, for each character class, whether it should
    be used. Options answer the matching questions ahead of time. The password is
    written to standard output; when no character class is included, an empty line
    is written instead.

    Examples:

    \b
      # Answer every question interactively
      $ passgen generate
    \b
      # 16 characters of letters and numbers, no questions asked
      $ passgen generate -l 16 -i lowercase -i uppercase -i numbers -x special
    """
    settings = get_settings(ctx)
    if seed is not None:
        settings = settings.model_copy(update={"seed": seed})

    criteria = Criteria.default()
    provider = PresetInputProvider(
        fallback=ClickInputProvider(),
        length=length,
        inclusions=resolve_inclusions(criteria, include, exclude),
    )
    workflow = PasswordWorkflow(
        collector=Collector(provider),
        min_length=settings.min_length,
        max_length=settings.max_length,
        generator=Generator(rng=settings.create_rng()),
        max_attempts=max_attempts or settings.max_attempts,
        criteria=criteria,
    )

    try:
        password = workflow.run()
    except (click.Abort, click.ClickException):
        raise
    except exc.ApplicationError as ex:
        raise CLIError(str(ex)) from ex
    except Exception as ex:
        raise_unexpected_exc(ex)

    logger.debug("workflow finished in state %r", workflow.state.value)
    click.echo(password)
