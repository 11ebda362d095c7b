"""A minimal command-line HTTP client.

Usage:
  veryhttp get <url> [-v | --verbose]
  veryhttp post <url> [<kv>...] [-v | --verbose]
  veryhttp -h | --help
  veryhttp --version

Arguments:
  <url>                   Absolute URL to send the request to.
  <kv>                    Field of the JSON body, written as key=value.

Options:
  -v --verbose            Show verbose details in the log.
  -h --help               Show this help information.
     --version            Show the program version.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

import httpx
from docopt import DocoptExit, docopt

from veryhttp.config import VERSION
from veryhttp.error import InvalidURLError, UsageError
from veryhttp.kv import KeyValuePair, parse_kv_pair


@dataclass(frozen=True)
class Get:
    """GET method."""

    url: str


@dataclass(frozen=True)
class Post:
    """POST method."""

    url: str
    body: Tuple[KeyValuePair, ...] = ()


Command = Union[Get, Post]


@dataclass(frozen=True)
class Arguments:
    command: Command
    verbose: bool = False


def parse_url(s: str) -> str:
    """Validate that s is an absolute URL (scheme and host) and return it
    unchanged.

    Raises:
        InvalidURLError: if s cannot be parsed or is not absolute.
    """
    try:
        url = httpx.URL(s)
    except httpx.InvalidURL as e:
        raise InvalidURLError(s, str(e)) from e

    if not url.scheme:
        raise InvalidURLError(s, "relative URL without a scheme")
    if not url.host:
        raise InvalidURLError(s, "missing host")
    return s


def parse_args(argv: Optional[Sequence[str]] = None) -> Arguments:
    """Parse and validate command-line arguments. No network activity
    happens here.

    Args:
        argv: Arguments to parse, without the program name. Defaults to
            sys.argv[1:].

    Raises:
        UsageError: if the arguments do not match the usage.
        ArgumentError: if the URL or a key=value token is invalid.
    """
    try:
        args = docopt(
            __doc__,
            argv=list(argv) if argv is not None else None,
            version=f"veryhttp {VERSION}",
        )
    except DocoptExit as e:
        raise UsageError(str(e)) from e

    url = parse_url(args["<url>"])

    command: Command
    if args["get"]:
        command = Get(url)
    elif args["post"]:
        pairs: List[KeyValuePair] = [parse_kv_pair(kv) for kv in args["<kv>"]]
        command = Post(url, tuple(pairs))
    else:
        raise UsageError(__doc__)

    return Arguments(command=command, verbose=bool(args["--verbose"]))
