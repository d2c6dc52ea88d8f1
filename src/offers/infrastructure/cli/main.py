import click

from offers.domain.exceptions import DomainException
from offers.infrastructure.bootstrap import configure
from offers.infrastructure.cli.offer_commands import offer_compare, offer_price


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML configuration file (defaults to $OFFERS_CONFIG).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None) -> None:
    """Offers — price and confirm sales offers"""
    try:
        ctx.obj = configure(config_path)
    except (DomainException, FileNotFoundError) as exc:
        raise click.ClickException(str(exc))


@cli.group()
def offer() -> None:
    """Price and compare offers."""


# Register subcommands
offer.add_command(offer_price)
offer.add_command(offer_compare)
