"""Shared fixtures for socket-backed tests."""

import socket

import pytest


class PeerSocket:
    """Server side of a socketpair with line-oriented helpers."""

    def __init__(self, sock: socket.socket) -> None:
        self.sock = sock
        self.sock.settimeout(5.0)
        self._buffer = b""

    def send(self, data: str) -> None:
        self.sock.sendall(data.encode("utf-8"))

    def recv_lines(self, count: int) -> list[str]:
        while self._buffer.count(b"\r\n") < count:
            chunk = self.sock.recv(4096)
            if not chunk:
                break
            self._buffer += chunk
        lines = self._buffer.split(b"\r\n")
        taken, rest = lines[:count], lines[count:]
        self._buffer = b"\r\n".join(rest)
        return [line.decode("utf-8") for line in taken]

    def recv_all(self) -> bytes:
        """Read until the client closes its end."""
        data = self._buffer
        while chunk := self.sock.recv(4096):
            data += chunk
        self._buffer = b""
        return data

    def close(self) -> None:
        self.sock.close()


@pytest.fixture
def socket_pair():
    """A connected (client, PeerSocket) pair, closed after the test."""
    client, server = socket.socketpair()
    peer = PeerSocket(server)
    yield client, peer
    peer.close()
    client.close()
