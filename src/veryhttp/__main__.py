import asyncio
import logging
import os
import sys
from typing import Optional, Sequence

from veryhttp.args import Arguments, parse_args
from veryhttp.client import Client
from veryhttp.config import ClientConfig
from veryhttp.dispatcher import dispatch
from veryhttp.error import UsageError, VeryhttpError
from veryhttp.render import print_response

logger = logging.getLogger("veryhttp")

_log_handler: Optional[logging.Handler] = None


def setup_logging(verbose: bool):
    global _log_handler

    if not os.getenv("NO_COLOR"):
        logging.addLevelName(logging.WARNING, "\033[1;33mWARN\033[1;0m")
        logging.addLevelName(logging.ERROR, "\033[1;31mERROR\033[1;0m")

    root = logging.getLogger()
    if verbose:
        root.setLevel(logging.DEBUG)
        fmt = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
    else:
        root.setLevel(logging.WARNING)
        fmt = "%(asctime)s [%(levelname)s] %(message)s"
    logging.getLogger("httpx").disabled = not verbose

    # Single handler across calls to main().
    if _log_handler is not None:
        root.removeHandler(_log_handler)

    log_formatter = logging.Formatter(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")
    _log_handler = logging.StreamHandler(sys.stderr)
    _log_handler.setFormatter(log_formatter)
    root.addHandler(_log_handler)


async def execute(args: Arguments, config: ClientConfig, color: bool):
    async with Client(config) as client:
        response = await dispatch(args.command, client)
    print_response(response, color=color)


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        args = parse_args(argv)
    except UsageError as e:
        print(e, file=sys.stderr)
        return e.exit_code
    except VeryhttpError as e:
        print(f"error: {e}", file=sys.stderr)
        return e.exit_code

    setup_logging(args.verbose)
    logger.debug("parsed command: %r", args.command)

    config = ClientConfig()
    color = sys.stdout.isatty() and not os.getenv("NO_COLOR")

    try:
        asyncio.run(execute(args, config, color))
    except VeryhttpError as e:
        logger.debug("request failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        return 130
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
