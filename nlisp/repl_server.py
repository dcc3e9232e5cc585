"""Line-oriented JSON REPL over TCP.

Each request line is a JSON object `{"cmd": "eval", "code": "..."}`. Each reply
line is `{"ok": true, "result": <printed results>}` or
`{"ok": false, "error": <message>}`. Definitions persist across requests and
across clients, since every connection shares one Interpreter.
"""

from __future__ import annotations

import json
import logging
import socket
import threading
from typing import Any

from nlisp.errors import NlispError
from nlisp.interpreter import Interpreter


HOST = "127.0.0.1"
PORT = 8765

logger = logging.getLogger(__name__)


def handle_request(interp: Interpreter, line: bytes | str) -> dict[str, Any]:
    """Decode one request line and evaluate it against `interp`."""
    try:
        if isinstance(line, bytes):
            line = line.decode("utf-8")
        req = json.loads(line)
    except (UnicodeDecodeError, json.JSONDecodeError) as ex:
        return {"ok": False, "error": f"Invalid request: {ex}"}
    if not isinstance(req, dict):
        return {"ok": False, "error": "Invalid request: expected a JSON object"}

    if req.get("cmd") != "eval":
        return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}
    code = req.get("code", "")
    if not isinstance(code, str):
        return {"ok": False, "error": "Invalid request: code must be a string"}
    try:
        return {"ok": True, "result": interp.rep(code)}
    except NlispError as ex:
        return {"ok": False, "error": str(ex)}
    except RecursionError:
        return {"ok": False, "error": "maximum recursion depth exceeded"}


class ReplServer:
    """One Interpreter session served to every client, one request at a time."""

    def __init__(self, host: str = HOST, port: int = PORT):
        self.address = (host, port)
        self.interp = Interpreter()
        self._lock = threading.Lock()

    def serve_forever(self) -> None:
        with socket.create_server(self.address) as listener:
            logger.info("nlisp REPL server listening on %s:%d", *self.address)
            while True:
                conn, peer = listener.accept()
                worker = threading.Thread(target=self._handle_client, args=(conn, peer), daemon=True)
                worker.start()

    def _handle_client(self, conn: socket.socket, peer: Any) -> None:
        """Answer each request line on `conn` until the client closes its side."""
        logger.info("client connected: %s", peer)
        with conn, conn.makefile("rb") as requests:
            for line in requests:
                if not line.strip():
                    continue
                with self._lock:
                    reply = handle_request(self.interp, line)
                conn.sendall(json.dumps(reply).encode("utf-8") + b"\n")
        logger.info("client disconnected: %s", peer)


if __name__ == "__main__":
    from nlisp.config import setup_logging

    setup_logging()
    ReplServer().serve_forever()
