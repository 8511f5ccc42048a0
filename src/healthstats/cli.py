"""CLI for the healthstats engine."""

import asyncio

import click

from healthstats.config import Backend

EXERCISE_PERIODS = {"weekly": 7, "monthly": 30, "six-week": 42, "six-month": 180}
SLEEP_PERIODS = {"weekly": 7, "monthly": 30}
MOOD_PERIODS = {"daily": 1, "weekly": 7, "monthly": 30}


def _facade(ctx: click.Context):
    from healthstats.facade import build_facade

    return build_facade(ctx.obj["settings"])


@click.group()
@click.option("--backend", "-b", type=click.Choice([b.value for b in Backend]), default=None,
              help="Data source variant (overrides HEALTHSTATS_BACKEND).")
@click.option("--samples", "-s", type=click.Path(), default=None,
              help="Sample export file for the native backend.")
@click.option("--log-level", default=None, help="Log level (overrides HEALTHSTATS_LOG_LEVEL).")
@click.option("--json-logs", is_flag=True, help="Emit JSON log lines.")
@click.pass_context
def main(
    ctx: click.Context,
    backend: str | None,
    samples: str | None,
    log_level: str | None,
    json_logs: bool,
) -> None:
    """healthstats: exercise, sleep and mood statistics."""
    from healthstats.config import get_settings
    from healthstats.log import setup_logging

    overrides = {}
    if backend is not None:
        overrides["backend"] = Backend(backend)
    if samples is not None:
        overrides["samples_path"] = samples
    if log_level is not None:
        overrides["log_level"] = log_level
    if json_logs:
        overrides["log_json"] = True

    settings = get_settings().model_copy(update=overrides)
    setup_logging(settings.log_level, json=settings.log_json)
    ctx.obj = {"settings": settings}


@main.command()
@click.pass_context
def summary(ctx: click.Context) -> None:
    """Print the text health summary."""

    async def _summary() -> str:
        async with _facade(ctx) as facade:
            return await facade.get_health_data_summarized()

    click.echo(asyncio.run(_summary()))


@main.command()
@click.option("--period", "-p", type=click.Choice(list(EXERCISE_PERIODS)), default="weekly")
@click.pass_context
def exercise(ctx: click.Context, period: str) -> None:
    """Print exercise stats as JSON."""

    async def _exercise():
        async with _facade(ctx) as facade:
            return await facade.exercise_stats(EXERCISE_PERIODS[period])

    click.echo(asyncio.run(_exercise()).to_json())


@main.command()
@click.option("--period", "-p", type=click.Choice(list(SLEEP_PERIODS)), default="weekly")
@click.pass_context
def sleep(ctx: click.Context, period: str) -> None:
    """Print sleep stats as JSON."""

    async def _sleep():
        async with _facade(ctx) as facade:
            return await facade.sleep_stats(SLEEP_PERIODS[period])

    click.echo(asyncio.run(_sleep()).to_json())


@main.command()
@click.option("--period", "-p", type=click.Choice(list(MOOD_PERIODS)), default="weekly")
@click.pass_context
def mood(ctx: click.Context, period: str) -> None:
    """Print mood stats as JSON."""

    async def _mood():
        async with _facade(ctx) as facade:
            return await facade.mood_stats(MOOD_PERIODS[period])

    click.echo(asyncio.run(_mood()).to_json())


@main.command()
@click.pass_context
def check(ctx: click.Context) -> None:
    """Report whether the data source is available and readable."""

    async def _check() -> tuple[bool, bool]:
        async with _facade(ctx) as facade:
            return await facade.check_availability(), await facade.request_permissions()

    available, granted = asyncio.run(_check())
    click.echo(f"Backend:     {ctx.obj['settings'].backend.value}")
    click.echo(f"Available:   {'yes' if available else 'no'}")
    click.echo(f"Permission:  {'granted' if granted else 'denied'}")


if __name__ == "__main__":
    main()
