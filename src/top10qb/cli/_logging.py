import logging

from rich.logging import RichHandler

from top10qb.cli._output import err_console

_HTTP_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, verbose: bool = False, show_time: bool = False) -> None:
    """Route log records to the CLI's stderr console.

    One-shot commands log without timestamps; ``watch`` turns them on so
    each refresh can be placed in time. Records show the emitting module,
    which tells a live fetch (``top10qb.fetcher``) from a fallback
    (``top10qb.provider``).
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    handler = RichHandler(
        console=err_console,
        show_time=show_time,
        show_path=False,
        log_time_format="%H:%M:%S",
        markup=False,
        rich_tracebacks=verbose,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)

    for name in _HTTP_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.WARNING)
