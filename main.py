import errno
import logging
import socket
import sys

import uvicorn

from podinfo.config import resolve_port
from podinfo.main import app


# Listen on all interfaces inside the pod, IPv6 and IPv4 where the kernel allows it
HOST_V6 = "::"
HOST_V4 = "0.0.0.0"

logger = logging.getLogger("podinfo")


def configure_logging() -> None:
    # INFO and below to stdout, warnings and errors to stderr
    out = logging.StreamHandler(sys.stdout)
    out.addFilter(lambda record: record.levelno < logging.WARNING)
    err = logging.StreamHandler(sys.stderr)
    err.setLevel(logging.WARNING)
    logging.basicConfig(level=logging.INFO, format="%(message)s", handlers=[out, err])


def _listen(family: int, host: str, port: int) -> socket.socket:
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        if family == socket.AF_INET6:
            sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 0)
        sock.bind((host, port))
        sock.listen(128)
    except OSError:
        sock.close()
        raise
    return sock


def bind_socket(port: int) -> socket.socket:
    """Bind a dual-stack listening socket, or IPv4 only when IPv6 is unavailable."""
    if socket.has_ipv6:
        try:
            return _listen(socket.AF_INET6, HOST_V6, port)
        except OSError as exc:
            if exc.errno not in (errno.EAFNOSUPPORT, errno.EADDRNOTAVAIL):
                raise
    return _listen(socket.AF_INET, HOST_V4, port)


def run() -> None:
    configure_logging()
    port = resolve_port()
    try:
        sock = bind_socket(port)
    except OSError as exc:
        logger.error("Cannot listen on port %s: %s", port, exc)
        sys.exit(1)

    logger.info("Server started! Listen Port = %s", sock.getsockname()[1])
    server = uvicorn.Server(uvicorn.Config(app, log_level="warning", access_log=False))
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


if __name__ == "__main__":
    run()
