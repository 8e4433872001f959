import sys

import click
from pydantic import ValidationError

from randkit.models.app import AppContext, StreamType
from randkit.models.custom_errors import SamplingError
from randkit.models.request import Distribution, SampleRequest
from randkit.utils.fs import read_config_from_file
from randkit.utils.logger import (
    get_module_logger,
    set_global_log_level,
    verbosity_to_level,
)
from randkit.utils.providers import configure, fast_provider, server_provider
from randkit.utils.rng import rng, server_rng

logger = get_module_logger(__name__)


def stream_options(func):
    '''Options shared by every command that draws from a stream.'''
    options = [
        click.option('--stream', '-s',
            type=click.Choice([x.value for x in StreamType], case_sensitive=False),
            help='Random stream to draw from.', default=StreamType.FAST.value),
        click.option('--seed', type=click.IntRange(min=0), default=None,
            help='Seed the selected stream before drawing.'),
        click.option('--config', '-c', help='Path to randkit YAML config file.', default=None),
        click.option('--param', '-p', multiple=True, default=[],
            help='Additional config parameters in key=value format.'),
        click.option('-v', '--verbose', count=True, help='Increase verbosity of output.'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def prepare_stream(ctx, stream: str, seed, config, param, verbose: int):
    log_level = verbosity_to_level(verbose)
    ctx.obj = AppContext(verbose=log_level)

    # Set global log level so all modules use the correct verbosity
    set_global_log_level(log_level)

    try:
        parsed_config = read_config_from_file(config, param)
    except (ValidationError, SamplingError) as err:
        logger.error("Unable to parse config: %s", err)
        sys.exit(1)
    configure(parsed_config)

    if stream.lower() == StreamType.SERVER.value:
        provider, sampler = server_provider, server_rng
    else:
        provider, sampler = fast_provider, rng

    if seed is not None:
        provider.seed(seed)
    return sampler


@click.group(context_settings={"show_default": True})
def main():
    pass

@main.command(
    help='Draw values from a distribution'
)
@click.argument('distribution',
    type=click.Choice([x.value for x in Distribution], case_sensitive=False))
@click.option('--low', type=float, default=None, help='Lower bound or triangular lower limit.')
@click.option('--high', type=float, default=None, help='Upper bound or triangular upper limit.')
@click.option('--mean', type=float, default=0.0, help='Mean of the normal distribution.')
@click.option('--stddev', type=float, default=1.0, help='Standard deviation of the normal distribution.')
@click.option('--mode', type=float, default=None, help='Mode of the triangular distribution.')
@click.option('--count', '-n', type=click.IntRange(min=1), default=1, help='Number of values to draw.')
@stream_options
@click.pass_context
def sample(ctx,
    distribution: str,
    low: float = None,
    high: float = None,
    mean: float = 0.0,
    stddev: float = 1.0,
    mode: float = None,
    count: int = 1,
    stream: str = 'fast',
    seed: int = None,
    config: str = None,
    param: list[str] = None,
    verbose: int = 0
):
    sampler = prepare_stream(ctx, stream, seed, config, param, verbose)

    try:
        request = SampleRequest(
            distribution=distribution.lower(),
            low=low,
            high=high,
            mean=mean,
            stddev=stddev,
            mode=mode,
        )
    except ValidationError as err:
        logger.error("Invalid sample request: %s", err)
        sys.exit(1)

    logger.debug("Drawing %d value(s) from %s", count, request)
    try:
        for _ in range(count):
            click.echo(request.draw(sampler))
    except SamplingError as err:
        logger.error("%s", err)
        sys.exit(1)


@main.command(
    help='Pick items at random, optionally weighted'
)
@click.argument('items', nargs=-1, required=True)
@click.option('--weight', '-w', type=float, multiple=True, default=[],
    help='Weight of each item, in the same order as the items.')
@click.option('--count', '-n', type=click.IntRange(min=1), default=1, help='Number of picks.')
@stream_options
@click.pass_context
def pick(ctx,
    items: tuple,
    weight: tuple = (),
    count: int = 1,
    stream: str = 'fast',
    seed: int = None,
    config: str = None,
    param: list[str] = None,
    verbose: int = 0
):
    sampler = prepare_stream(ctx, stream, seed, config, param, verbose)

    try:
        for _ in range(count):
            if weight:
                click.echo(sampler.weighted_from(list(weight), items))
            else:
                click.echo(sampler.uniform_from(items))
    except SamplingError as err:
        logger.error("%s", err)
        sys.exit(1)


@main.command(
    help='Print the items in random order'
)
@click.argument('items', nargs=-1, required=True)
@stream_options
@click.pass_context
def shuffle(ctx,
    items: tuple,
    stream: str = 'fast',
    seed: int = None,
    config: str = None,
    param: list[str] = None,
    verbose: int = 0
):
    sampler = prepare_stream(ctx, stream, seed, config, param, verbose)

    items = list(items)
    try:
        sampler.shuffle(items)
    except SamplingError as err:
        logger.error("%s", err)
        sys.exit(1)
    for item in items:
        click.echo(item)
