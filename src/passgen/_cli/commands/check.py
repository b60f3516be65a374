from typing import Optional, Sequence

import click
import pydantic

from ...dto import Criteria
from ...util.model import convert_errors, format_errors
from ...validator import Validator
from ..exc import CLIError
from .generate import get_settings, resolve_inclusions

__all__ = ["check"]


@click.command()
@click.argument("password")
@click.option(
    "-l",
    "--length",
    type=click.IntRange(min=1),
    help="Expected length. Defaults to the length of the password itself.",
)
@click.option(
    "-i",
    "--include",
    multiple=True,
    help=(
        "Character class the password must contain (can be repeated). One of "
        "lowercase, uppercase, numbers or special."
    ),
)
@click.pass_context
def check(
    ctx: click.Context,
    password: str,
    length: Optional[int],
    include: Sequence[str],
) -> None:
    """
    Check an existing password against criteria.

    Exits with a non-zero status when the password is out of the configured length
    range, has the wrong length or misses one of the included character classes.

    Examples:

    \b
      $ passgen check 'hunter2hunter2' -i lowercase -i numbers
    """
    settings = get_settings(ctx)

    if not settings.min_length <= len(password) <= settings.max_length:
        raise CLIError(
            "Password must be between %d and %d characters long, got %d."
            % (settings.min_length, settings.max_length, len(password))
        )

    try:
        criteria = Criteria.default(
            length=len(password) if length is None else length
        )
    except pydantic.ValidationError as ex:
        raise CLIError(format_errors(convert_errors(ex))) from ex

    for name, answer in resolve_inclusions(criteria, include, ()).items():
        criteria.get_class(name).included = answer

    if not Validator().is_valid(password, criteria):
        problems = [
            "no %s" % cc.name.lower()
            for cc in criteria.included_classes()
            if not cc.matches(password)
        ]
        if len(password) != criteria.length:
            problems.insert(0, "expected %d characters" % criteria.length)
        raise CLIError(
            "Password does not satisfy the criteria: %s." % ", ".join(problems)
        )

    click.secho("Password satisfies the criteria.", fg="green")
