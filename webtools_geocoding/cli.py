#!/usr/bin/env python3
import json
import logging

import click

from webtools_geocoding.geocode.exceptions import GeocodeError
from webtools_geocoding.geocode.provider import WebtoolsGeocoding
from webtools_geocoding.geocode.shapes import SHAPES
from webtools_geocoding.geocode.transport import HttpxTransport


# -----------------------------
# CLI entry point
# -----------------------------
@click.command()
@click.argument("address")
@click.option("--limit", default=None, type=click.IntRange(min=1), help="Maximum number of results")
@click.option("--locale", default=None, help="Preferred result language, e.g. fr or de_DE")
@click.option("--referer", default=None, help="Referer header sent to the service")
@click.option(
    "--shape",
    default=None,
    type=click.Choice(sorted(SHAPES)),
    help="Response layout to expect (defaults to the configured one)",
)
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging")
def main(address, limit, locale, referer, shape, verbose):
    """Geocode ADDRESS with the Webtools service and print one JSON line per match."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    with HttpxTransport() as transport:
        provider = WebtoolsGeocoding(transport, referer, shape=shape)
        try:
            results = provider.geocode(address, limit=limit, locale=locale)
        except GeocodeError as e:
            raise click.ClickException(str(e))

    for result in results:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False))
    if verbose:
        click.echo(f"{len(results)} result(s)", err=True)


if __name__ == "__main__":
    main()
