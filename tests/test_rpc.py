import json
import socket

import pytest

from hashmesh.rpc import RpcServer, encode_frame


def _recv_exact(sock, size):
    data = b""
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            return data
        data += chunk
    return data


def _call(sock, message):
    sock.sendall(encode_frame(message))
    header = _recv_exact(sock, 2)
    if len(header) < 2:
        return None
    return _recv_exact(sock, int.from_bytes(header, "big")).decode("utf-8")


def test_encode_frame_prefix():
    assert encode_frame("abc") == b"\x00\x03abc"
    assert encode_frame(b"") == b"\x00\x00"


def test_encode_frame_length_round_trip():
    payload = "x" * 300
    frame = encode_frame(payload)
    assert int.from_bytes(frame[:2], "big") == len(payload)
    assert frame[2:] == payload.encode()


def test_encode_frame_too_long():
    with pytest.raises(ValueError):
        encode_frame(b"a" * 65536)


def test_execute_command_passes_whole_message():
    server = RpcServer(0)
    server.add_rpc_function("echo", lambda msg: "got " + msg)
    message = json.dumps({"cmd": "echo", "x": 1})
    assert server.execute_command(message) == "got " + message


def test_command_name_is_smallest_key():
    server = RpcServer(0)
    server.add_rpc_function("first", lambda msg: "first")
    server.add_rpc_function("second", lambda msg: "second")
    assert server.execute_command('{"b": "second", "a": "first"}') == "first"


def test_command_name_from_array():
    server = RpcServer(0)
    server.add_rpc_function("list", lambda msg: "ok")
    assert server.execute_command('["list", 2]') == "ok"


def test_existing_name_keeps_first_function():
    server = RpcServer(0)
    server.add_rpc_function("f", lambda msg: "one")
    server.add_rpc_function("f", lambda msg: "two")
    assert server.execute_command('{"cmd": "f"}') == "one"


def test_unknown_command():
    server = RpcServer(0)
    with pytest.raises(KeyError):
        server.execute_command('{"cmd": "nope"}')


@pytest.mark.parametrize("message", ["", "not json", "{}", "[]", '{"cmd": 5}'])
def test_bad_messages(message):
    server = RpcServer(0)
    with pytest.raises(ValueError):
        server.execute_command(message)


def test_address_requires_running_server():
    with pytest.raises(RuntimeError):
        RpcServer(0).address


def test_round_trip_over_tcp():
    server = RpcServer(0, host="127.0.0.1")
    server.add_rpc_function("upper", lambda msg: json.loads(msg)["text"].upper())
    with server:
        with socket.create_connection(server.address, timeout=5) as sock:
            first = _call(sock, json.dumps({"cmd": "upper", "text": "hello"}))
            second = _call(sock, json.dumps({"cmd": "upper", "text": "again"}))
    assert first == "HELLO"
    assert second == "AGAIN"


def test_unknown_command_closes_connection():
    with RpcServer(0, host="127.0.0.1") as server:
        with socket.create_connection(server.address, timeout=5) as sock:
            assert _call(sock, '{"cmd": "missing"}') is None


def test_start_twice_raises():
    server = RpcServer(0, host="127.0.0.1")
    with server:
        with pytest.raises(RuntimeError):
            server.start()
    with pytest.raises(RuntimeError):
        server.address