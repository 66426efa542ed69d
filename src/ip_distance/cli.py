"""CLI entrypoint for ip-distance."""

from __future__ import annotations

import asyncio
import logging
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.markup import escape

from ip_distance.clients.ipinfo_client import IpInfoClient
from ip_distance.errors import IpDistanceError
from ip_distance.models import LocationRecord
from ip_distance.resolver import find_distance, resolve

console = Console(highlight=False, soft_wrap=True)

REPORT_FIELDS = [
    ("IP", "ip"),
    ("Hostname", "hostname"),
    ("City", "city"),
    ("Region", "region"),
    ("Postal", "postal"),
    ("Country", "country"),
    ("Coordinates", "loc"),
    ("ISP", "org"),
]

EPILOG = """\b
Examples:
  ipdist                               Location info for your IP address
  ipdist -j                            Location info for your IP as JSON
  ipdist google.com                    Location info for a host
  ipdist distance 8.8.8.8              Distance from your IP to given IP
  ipdist distance triage.net google.com
                                       Distance between two hosts
"""


def _make_client() -> IpInfoClient:
    return IpInfoClient()


async def _lookup(location: Optional[str]) -> LocationRecord:
    async with _make_client() as client:
        return await resolve(location, client)


async def _distance(loc1: str, loc2: Optional[str]) -> float:
    async with _make_client() as client:
        return await find_distance(loc1, loc2, client)


def _fail(exc: IpDistanceError) -> NoReturn:
    console.print(f"[bold red]Error:[/] {escape(str(exc))}")
    raise SystemExit(1)


def format_report(record: LocationRecord) -> str:
    """Render the labeled report lines, '-' for missing fields."""
    return "\n".join(
        f"{label}: {getattr(record, attr) or '-'}" for label, attr in REPORT_FIELDS
    )


class DefaultCommandGroup(click.Group):
    """Group that falls back to the ``report`` command for unknown arguments."""

    default_command = "report"

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if args[:1] and args[0] in ctx.help_option_names:
            return super().parse_args(ctx, args)

        # group options stay in front of the injected command name
        split = 0
        while split < len(args) and args[split] in ("-v", "--verbose"):
            split += 1
        if split >= len(args) or args[split] not in self.commands:
            args = args[:split] + [self.default_command] + args[split:]
        return super().parse_args(ctx, args)


@click.group(
    cls=DefaultCommandGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=EPILOG,
)
@click.option("-v", "--verbose", is_flag=True, help="Log lookups to stderr.")
def cli(verbose: bool):
    """Approximate location of IPs/hostnames and the distance between them."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


@cli.command()
@click.argument("location", required=False)
@click.option("-j", "--json", "as_json", is_flag=True, help="Return data as JSON.")
def report(location: Optional[str], as_json: bool):
    """Show location info for LOCATION (default: your IP)."""
    try:
        record = asyncio.run(_lookup(location))
    except IpDistanceError as exc:
        _fail(exc)

    if as_json:
        click.echo(record.to_json(indent=4))
    else:
        click.echo(format_report(record))


@cli.command()
@click.argument("loc1")
@click.argument("loc2", required=False)
def distance(loc1: str, loc2: Optional[str]):
    """Compute the approx. distance between IPs/hostnames (LOC2 default: your IP)."""
    try:
        km = asyncio.run(_distance(loc1, loc2))
    except IpDistanceError as exc:
        _fail(exc)

    click.echo(f"{km:.2f} km")
