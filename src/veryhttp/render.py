"""Rendering of HTTP responses for display in a terminal.

A rendered response has three sections separated by blank lines: the status
line, the headers in the order they were received, and the body. JSON bodies
are pretty-printed, other bodies are written verbatim.
"""

import json
import sys
from typing import Iterable, List, Optional, TextIO, Tuple

from veryhttp.client import ResponseView
from veryhttp.error import RenderError

JSON_CONTENT_TYPE = "application/json"

JSON_INDENT = 2

JSON_WHITESPACE = " \t\n\r"

BLUE = "\033[34m"
GREEN = "\033[32m"
CYAN = "\033[36m"
RESET = "\033[0m"


def _paint(text: str, color: str, enabled: bool) -> str:
    if not enabled or not text:
        return text
    return f"{color}{text}{RESET}"


def render_status(view: ResponseView, color: bool = True) -> str:
    return f"{view.http_version} {_paint(str(view.status_code), BLUE, color)}"


def render_headers(headers: Iterable[Tuple[str, str]], color: bool = True) -> str:
    return "\n".join(f"{_paint(k, GREEN, color)}: {v}" for k, v in headers)


def _reject_constant(name: str):
    raise ValueError(f"{name} is not a valid JSON value")


def _string_end(text: str, start: int) -> int:
    i = start + 1
    while text[i] != '"':
        i += 2 if text[i] == "\\" else 1
    return i + 1


def _skip_whitespace(text: str, start: int) -> int:
    i = start
    while i < len(text) and text[i] in JSON_WHITESPACE:
        i += 1
    return i


def pretty_json(text: str, indent: int = JSON_INDENT) -> str:
    """Re-indent a JSON document without decoding its values, so numbers,
    string escapes and duplicate keys are written exactly as received.

    Raises:
        ValueError: if text is not valid JSON. NaN and Infinity are rejected.
    """
    json.loads(text, parse_constant=_reject_constant, object_pairs_hook=list)

    out: List[str] = []
    depth = 0
    i = 0
    while i < len(text):
        c = text[i]
        if c == '"':
            end = _string_end(text, i)
            out.append(text[i:end])
            i = end
            continue
        if c in "{[":
            j = _skip_whitespace(text, i + 1)
            if text[j] in "}]":
                out.append(c + text[j])
                i = j + 1
                continue
            depth += 1
            out.append(c + "\n" + " " * (indent * depth))
        elif c in "}]":
            depth -= 1
            out.append("\n" + " " * (indent * depth) + c)
        elif c == ",":
            out.append(",\n" + " " * (indent * depth))
        elif c == ":":
            out.append(": ")
        elif c not in JSON_WHITESPACE:
            out.append(c)
        i += 1
    return "".join(out)


def render_body(content_type: Optional[str], text: str, color: bool = True) -> str:
    """Render a response body. Bodies are written verbatim unless the content
    type is exactly application/json, without parameters. Empty bodies are
    written as is whatever their content type.

    Raises:
        RenderError: if the body is declared as JSON but is not valid JSON.
    """
    if content_type != JSON_CONTENT_TYPE or not text.strip():
        return text
    try:
        pretty = pretty_json(text)
    except ValueError as e:
        raise RenderError(f"invalid JSON in response body: {e}") from e
    return _paint(pretty, CYAN, color)


def render(view: ResponseView, color: bool = True) -> str:
    """Render the status line, headers and body of a response. The body is
    rendered first so nothing is produced when it fails."""
    body = render_body(view.content_type, view.text, color)
    return "\n\n".join(
        [
            render_status(view, color),
            render_headers(view.headers, color),
            body,
        ]
    )


def print_response(
    view: ResponseView, file: Optional[TextIO] = None, color: Optional[bool] = None
):
    """Write a rendered response to file (stdout by default). Colors default
    to whether file is a terminal."""
    if file is None:
        file = sys.stdout
    if color is None:
        color = file.isatty()
    print(render(view, color), file=file)
