"""CLI commands for the Offer aggregate."""

from __future__ import annotations

import click

from offers.application.dto import OfferDTO
from offers.domain.exceptions import DomainException
from offers.infrastructure.bootstrap import confirm_offer_handler, price_offer_handler
from offers.infrastructure.config import AppConfig
from offers.infrastructure.offer_file import load_offer_specs

_FILE = click.Path(exists=True, dir_okay=False)


@click.command("price")
@click.argument("offer_file", type=_FILE)
@click.pass_obj
def offer_price(config: AppConfig, offer_file: str) -> None:
    """Price the items listed in OFFER_FILE."""
    handler = price_offer_handler(config)

    try:
        dto = handler.handle(load_offer_specs(offer_file))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_offer(dto)


@click.command("compare")
@click.argument("seen_file", type=_FILE)
@click.argument("current_file", type=_FILE)
@click.option("--delta", type=float, default=None, help="Tolerated difference in percent.")
@click.pass_obj
def offer_compare(
    config: AppConfig, seen_file: str, current_file: str, delta: float | None
) -> None:
    """Confirm CURRENT_FILE against the offer the customer saw in SEEN_FILE."""
    handler = confirm_offer_handler(config)
    if delta is None:
        delta = config.pricing.tolerance_percent

    try:
        result = handler.handle(
            seen_specs=load_offer_specs(seen_file),
            current_specs=load_offer_specs(current_file),
            delta=delta,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Offer confirmed: {result.current_total} "
        f"(seen {result.seen_total}, tolerance {result.delta}%)"
    )


def _display_offer(dto: OfferDTO) -> None:
    """Shared formatting for displaying an offer."""
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>14} {'Discount':>14} {'Total':>14}")
    click.echo(f"  {'-'*71}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>14} "
            f"{item.discount or '-':>14} {item.total_cost:>14}"
        )
    click.echo(f"  {'-'*71}")
    click.echo(f"  {'Offer Total':<27} {dto.total_cost:>44}")

    if dto.unavailable_items:
        click.echo()
        click.echo("Unavailable:")
        for item in dto.unavailable_items:
            click.echo(f"  {item.product_name} (x{item.quantity})")
