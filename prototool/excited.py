"""The example ExcitedService behaviour."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def exclamation(value: str) -> str:
    """Return the value with an exclamation mark appended."""
    return value + "!"


def exclamation_client_stream(values: Iterable[str]) -> str:
    """Join all received values and append an exclamation mark."""
    return "".join(values) + "!"


def exclamation_server_stream(value: str) -> Iterator[str]:
    """Yield each character of the value, then an exclamation mark."""
    yield from value
    yield "!"


def exclamation_bidi_stream(values: Iterable[str]) -> Iterator[str]:
    """Yield each received value with an exclamation mark appended."""
    for value in values:
        yield value + "!"