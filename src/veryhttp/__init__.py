"""A minimal command-line HTTP client."""

from veryhttp.args import Get, Post, parse_args, parse_url
from veryhttp.client import Client, ResponseView
from veryhttp.config import VERSION as __version__
from veryhttp.config import ClientConfig
from veryhttp.dispatcher import dispatch
from veryhttp.error import (
    ArgumentError,
    ClientError,
    InvalidURLError,
    MissingDelimiterError,
    RenderError,
    UsageError,
    VeryhttpError,
)
from veryhttp.kv import KeyValuePair, fold_body, parse_kv_pair
from veryhttp.render import render

__all__ = [
    "ArgumentError",
    "Client",
    "ClientConfig",
    "ClientError",
    "Get",
    "InvalidURLError",
    "KeyValuePair",
    "MissingDelimiterError",
    "Post",
    "RenderError",
    "ResponseView",
    "UsageError",
    "VeryhttpError",
    "dispatch",
    "fold_body",
    "parse_args",
    "parse_kv_pair",
    "parse_url",
    "render",
]
