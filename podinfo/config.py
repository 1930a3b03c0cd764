from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


DEFAULT_PORT = 4444
PORT_ENV = "MY_PORT"

NODE_NAME_ENV = "MY_NODE_NAME"
POD_NAME_ENV = "MY_POD_NAME"
POD_NAMESPACE_ENV = "MY_POD_NAMESPACE"
POD_IP_ENV = "MY_POD_IP"
POD_SERVICE_ACCOUNT_ENV = "MY_POD_SERVICE_ACCOUNT"


@dataclass(frozen=True)
class PodEnvironment:
    """Read-only snapshot of the pod identity variables.

    Usually populated through the downward API of the pod spec. Unset
    variables are stored as empty strings.
    """

    node_name: str = ""
    pod_name: str = ""
    pod_namespace: str = ""
    pod_ip: str = ""
    pod_service_account: str = ""

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "PodEnvironment":
        env = os.environ if environ is None else environ
        return cls(
            node_name=env.get(NODE_NAME_ENV, ""),
            pod_name=env.get(POD_NAME_ENV, ""),
            pod_namespace=env.get(POD_NAMESPACE_ENV, ""),
            pod_ip=env.get(POD_IP_ENV, ""),
            pod_service_account=env.get(POD_SERVICE_ACCOUNT_ENV, ""),
        )


def resolve_port(environ: Optional[Mapping[str, str]] = None) -> int:
    """Return the listen port from ``MY_PORT`` or ``DEFAULT_PORT``.

    Only a plain decimal number within the TCP port range is accepted;
    anything else falls back to the default.
    """
    env = os.environ if environ is None else environ
    raw = (env.get(PORT_ENV) or "").strip()
    if not raw.isascii() or not raw.isdigit():
        return DEFAULT_PORT
    port = int(raw)
    if port > 65535:
        return DEFAULT_PORT
    return port
