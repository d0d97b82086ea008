"""ethermaker CLI."""

import click
import pydantic
import rich_click

from . import __version__
from .core.application import Application
from .core.errors import GenerationError
from .core.mac import MacAddress
from .core.paramtypes import MacAddressType, OrganizationType
from .models import GenerationOptions


# Configure rich-click
rich_click.rich_click.USE_RICH_MARKUP = True
rich_click.rich_click.SHOW_ARGUMENTS = True
rich_click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
rich_click.rich_click.USE_MARKDOWN = False
rich_click.rich_click.STYLE_ERRORS_SUGGESTION = "dim italic"
rich_click.rich_click.MAX_WIDTH = 100


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging on stderr.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool):
    """Describe and generate IEEE 802 MAC addresses."""

    app = Application.current()
    app.debug = debug
    app.setup_logging()

    ctx.obj = {"app": app}


@cli.command()
@click.argument("addresses", nargs=-1, type=MacAddressType())
@click.option(
    "--table",
    is_flag=True,
    help="Render each address as a table instead of a single line.",
)
@click.pass_obj
def describe(obj, addresses: tuple[MacAddress, ...], table: bool):
    """Describe MAC addresses.

    Addresses are taken from the arguments, or read one per line from stdin
    when none are given. Lines that cannot be parsed are logged and skipped.
    """

    app: Application = obj["app"]

    if addresses:
        _print_descriptions(app, (app.addresses.describe(address) for address in addresses), table)
        return

    # undecodable bytes turn into U+FFFD and fail to parse like any other bad line
    with click.open_file("-", "r", errors="replace") as stream:
        _print_descriptions(app, app.addresses.describe_lines(stream), table)


def _print_descriptions(app: Application, descriptions, table: bool) -> None:
    for description in descriptions:
        if table:
            description.display(app.console, title=description.address)
        else:
            click.echo(description.to_line())


@cli.command()
@click.option(
    "--organization",
    default=None,
    type=OrganizationType(),
    help="The OUI to use, such as 'C42996'.",
)
@click.option(
    "--local/--no-local",
    default=False,
    show_default=True,
    help="Make the address(es) locally administered.",
)
@click.option(
    "--unicast/--no-unicast",
    default=True,
    show_default=True,
    help="Make the address(es) unicast. Applied after --multicast.",
)
@click.option(
    "--multicast/--no-multicast",
    default=False,
    show_default=True,
    help="Make the address(es) multicast.",
)
@click.option(
    "--count",
    default=1,
    show_default=True,
    type=click.IntRange(min=0),
    help="The number of unique addresses to generate.",
)
@click.option(
    "--max-attempts",
    default=None,
    type=click.IntRange(min=1),
    help="Give up after this many random draws. Unlimited by default.",
)
@click.pass_obj
def generate(
    obj,
    organization: MacAddress | None,
    local: bool,
    unicast: bool,
    multicast: bool,
    count: int,
    max_attempts: int | None,
):
    """Generate unique random MAC addresses."""

    app: Application = obj["app"]

    try:
        options = GenerationOptions(
            count=count,
            organization=organization.organization if organization else None,
            multicast=multicast,
            unicast=unicast,
            local=local,
            max_attempts=max_attempts,
        )
    except pydantic.ValidationError as e:
        raise click.UsageError(str(e)) from e

    try:
        addresses = app.addresses.generate_batch(options)
    except GenerationError as e:
        raise click.ClickException(str(e)) from e

    for address in addresses:
        click.echo(str(address))


@cli.command()
def version():
    """Show the application version."""

    click.echo(f"ethermaker {__version__}")
