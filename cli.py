#!/usr/bin/env python3
"""CLI for the Trade-a-Plane scraper."""

import json
import logging
import signal
import sys

import click

from config import (CATEGORY_LEVELS, FRACTIONAL_CHOICES, SORT_KEYS, SORT_ORDERS,
                    TAP_MAX_USER_DISTANCE, TAP_TYPES)
from models import QueryOptions
from scraper import TradeAPlaneScraper

logger = logging.getLogger(__name__)


def _shutdown(signum, frame):
    logger.debug(f"received signal {signum}, exiting")
    sys.exit(1)


@click.group()
@click.version_option("0.1.0", prog_name="tap")
@click.option("--debug", "-d", is_flag=True, help="Debug output")
def cli(debug):
    """Trade-a-Plane"""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )


@cli.command()
@click.option("--type", "-t", "type_", type=click.Choice(TAP_TYPES), default=TAP_TYPES[0],
              show_default=True, help="Category type")
@click.option("--fractional", "-f", type=click.Choice(FRACTIONAL_CHOICES), default="None",
              show_default=True, help="Fractional ownership percentage")
@click.option("--distance", "-d", type=int, default=TAP_MAX_USER_DISTANCE, help="User distance")
@click.option("--make", "-m", help="Make")
@click.option("--model", "-o", help="Model")
@click.option("--model-group", "-g", help="Model group")
@click.option("--year", "-y", help="Year range, e.g. 1990-2005")
@click.option("--price", "-p", help="Price range, e.g. 50000-150000")
@click.option("--total-time", "-l", help="Total time range, e.g. 0-3000")
@click.option("--sort", type=click.Choice(SORT_KEYS), help="Sort key")
@click.option("--sort-order", type=click.Choice(SORT_ORDERS), default="asc", show_default=True)
@click.option("--number", "-n", type=click.IntRange(min=0), help="Number of results")
@click.option("--deep", is_flag=True, help="Deep query mode (fetch each listing's detail page)")
def search(type_, fractional, distance, make, model, model_group, year, price, total_time,
           sort, sort_order, number, deep):
    """Search Trade-a-Plane and print one JSON object per listing."""
    options = QueryOptions(
        type=type_,
        fractional=fractional,
        distance=distance,
        make=make,
        model=model,
        model_group=model_group,
        year=year,
        price=price,
        total_time=total_time,
        sort=sort,
        sort_order=sort_order,
        number=number,
        deep=deep,
    )
    logger.debug(f"search options: {options}")

    scraper = TradeAPlaneScraper()
    for record in scraper.search(options):
        click.echo(json.dumps(record.to_dict()))


@cli.command()
@click.option("--type", "-t", "type_", type=click.Choice(TAP_TYPES), default=TAP_TYPES[0],
              show_default=True, help="Category type")
@click.option("--level", "-l", type=click.Choice(CATEGORY_LEVELS), default="1",
              show_default=True, help="Category level")
def category(type_, level):
    """List the makes/models under a category."""
    options = QueryOptions(type=type_, level=level)
    logger.debug(f"category options: {options}")

    scraper = TradeAPlaneScraper()
    for name in scraper.list_categories(options):
        click.echo(name)


cli.add_command(search, name="s")
cli.add_command(category, name="c")


def main():
    signal.signal(signal.SIGTERM, _shutdown)
    cli()


if __name__ == "__main__":
    main()
