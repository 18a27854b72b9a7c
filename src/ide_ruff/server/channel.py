# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Minimal JSON-RPC writer for a ruff server's stdin.

Stream failures are classified here, where they happen. Broken pipes, reset
connections and writes to a closed stream are normal while a server is going
away, so they are raised as :class:`TransportError` with
``expected_during_shutdown=True`` and callers never need to inspect messages.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import IO, Any, Final

from ..errors import TransportError

JSONRPC_VERSION: Final[str] = "2.0"
_EXPECTED_STREAM_ERRORS: Final[tuple[type[OSError], ...]] = (BrokenPipeError, ConnectionResetError)


def encode_message(message: Mapping[str, Any]) -> bytes:
    """Return ``message`` framed with a ``Content-Length`` header."""

    body = json.dumps(message, separators=(",", ":")).encode("utf-8")
    header = f"Content-Length: {len(body)}\r\n\r\n".encode("ascii")
    return header + body


class ServerChannel:
    """Write JSON-RPC messages to a language server's stdin."""

    def __init__(self, stream: IO[bytes] | None) -> None:
        self._stream = stream

    def send(self, message: Mapping[str, Any]) -> None:
        """Frame and write ``message``.

        Raises:
            TransportError: If the stream is gone or the write fails.
        """

        if self._stream is None or self._stream.closed:
            raise TransportError("server stdin is closed", expected_during_shutdown=True)
        try:
            self._stream.write(encode_message(message))
            self._stream.flush()
        except _EXPECTED_STREAM_ERRORS as exc:
            raise TransportError(f"server stream closed: {exc}", expected_during_shutdown=True) from exc
        except ValueError as exc:
            # Raised by file objects for I/O on a closed file.
            raise TransportError(f"server stream closed: {exc}", expected_during_shutdown=True) from exc
        except OSError as exc:
            raise TransportError(f"server stream failed: {exc}", expected_during_shutdown=False) from exc

    def notify(self, method: str, params: Mapping[str, Any] | None = None) -> None:
        """Send a JSON-RPC notification."""

        message: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION, "method": method}
        if params is not None:
            message["params"] = dict(params)
        self.send(message)


__all__ = ["JSONRPC_VERSION", "ServerChannel", "encode_message"]
