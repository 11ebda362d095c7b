import logging

from veryhttp.args import Command, Get, Post
from veryhttp.client import Client, ResponseView
from veryhttp.kv import fold_body

logger = logging.getLogger(__name__)


async def dispatch(command: Command, client: Client) -> ResponseView:
    """Issue the single request described by command.

    Errors raised by the client are propagated, requests are never retried.
    """
    match command:
        case Get(url=url):
            return await client.get(url)
        case Post(url=url, body=pairs):
            body = fold_body(pairs)
            logger.debug("posting %d field(s) to %s", len(body), url)
            return await client.post(url, body)
        case _:
            raise TypeError(f"unsupported command: {command!r}")
