"""Local RPC server: length-prefixed JSON commands over TCP."""

from __future__ import annotations

import json
import logging
import socket
import socketserver
import threading
from typing import Callable, Optional, Union

log = logging.getLogger(__name__)

_SIZE_OCTETS = 2
_MAX_FRAME_PAYLOAD = 0xFFFF

RpcFunction = Callable[[str], str]


def encode_frame(payload: Union[str, bytes]) -> bytes:
    """Prefix payload with its length as two big-endian octets."""
    raw = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
    if len(raw) > _MAX_FRAME_PAYLOAD:
        raise ValueError(f"RPC message too long: {len(raw)} octets")
    return len(raw).to_bytes(_SIZE_OCTETS, "big") + raw


def _recv_exact(sock: socket.socket, size: int) -> Optional[bytes]:
    chunks = bytearray()
    while len(chunks) < size:
        chunk = sock.recv(size - len(chunks))
        if not chunk:
            return None
        chunks += chunk
    return bytes(chunks)


class _SessionHandler(socketserver.BaseRequestHandler):
    server: "_TcpServer"

    def handle(self) -> None:
        rpc = self.server.rpc
        sock: socket.socket = self.request
        rpc._register_session(sock)
        try:
            while True:
                header = _recv_exact(sock, _SIZE_OCTETS)
                if header is None:
                    return
                body = _recv_exact(sock, int.from_bytes(header, "big"))
                if body is None:
                    return
                try:
                    response = rpc.execute_command(body.decode("utf-8"))
                    frame = encode_frame(response)
                except Exception as exc:  # any bad command closes the session
                    log.warning("exception in execute_rpc_command %s; close connection", exc)
                    return
                sock.sendall(frame)
        except OSError as exc:
            log.debug("RPC session error: %s", exc)
        finally:
            rpc._unregister_session(sock)


class _TcpServer(socketserver.ThreadingTCPServer):
    daemon_threads = True
    allow_reuse_address = True

    def __init__(self, address: tuple[str, int], rpc: "RpcServer") -> None:
        self.rpc = rpc
        super().__init__(address, _SessionHandler)


class RpcServer:
    """Serves registered functions to clients; functions are called from worker threads."""

    def __init__(self, port: int, host: str = "0.0.0.0") -> None:
        self._host = host
        self._port = port
        self._functions: dict[str, RpcFunction] = {}
        self._lock = threading.Lock()
        self._sessions: set[socket.socket] = set()
        self._server: Optional[_TcpServer] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def address(self) -> tuple[str, int]:
        """Address the server listens on; valid once started."""
        if self._server is None:
            raise RuntimeError("RPC server is not running")
        host, port = self._server.server_address[:2]
        return str(host), int(port)

    def add_rpc_function(self, name: str, function: RpcFunction) -> None:
        """Register function under name; a name already registered keeps its function."""
        with self._lock:
            self._functions.setdefault(name, function)

    def execute_command(self, message: str) -> str:
        """Run the command named in a JSON message and return its response.

        The command name is the value under the smallest key of a JSON object,
        or the first element of a JSON array. The function receives the whole message.
        """
        parsed = json.loads(message)
        if isinstance(parsed, dict) and parsed:
            cmd_name = parsed[min(parsed)]
        elif isinstance(parsed, list) and parsed:
            cmd_name = parsed[0]
        else:
            raise ValueError("RPC message holds no command name")
        if not isinstance(cmd_name, str):
            raise ValueError(f"RPC command name must be a string, got {cmd_name!r}")
        log.debug("cmd name %s", cmd_name)
        with self._lock:
            function = self._functions.get(cmd_name)
        if function is None:
            raise KeyError(f"Unknown RPC command {cmd_name!r}")
        return function(message)

    def _register_session(self, sock: socket.socket) -> None:
        with self._lock:
            self._sessions.add(sock)

    def _unregister_session(self, sock: socket.socket) -> None:
        with self._lock:
            self._sessions.discard(sock)

    def start(self) -> None:
        """Bind the port and start serving in a background thread."""
        if self._server is not None:
            raise RuntimeError("RPC server is already running")
        self._server = _TcpServer((self._host, self._port), self)
        self._thread = threading.Thread(
            target=self._server.serve_forever, name="rpc-server", daemon=True
        )
        self._thread.start()
        log.debug("Starting RPC server thread")

    def stop(self) -> None:
        """Stop serving and close all open sessions."""
        server, thread = self._server, self._thread
        if server is None:
            return
        with self._lock:
            sessions = list(self._sessions)
        for sock in sessions:
            try:
                sock.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass
        server.shutdown()
        server.server_close()
        if thread is not None:
            thread.join()
        self._server = None
        self._thread = None
        log.debug("RPC thread stop")

    def __enter__(self) -> "RpcServer":
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()