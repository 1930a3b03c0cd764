import pytest

from podinfo.config import DEFAULT_PORT, PodEnvironment, resolve_port


def test_from_environ_reads_identity_variables():
    env = PodEnvironment.from_environ(
        {
            "MY_NODE_NAME": "node-a",
            "MY_POD_NAME": "pod-123",
            "MY_POD_NAMESPACE": "team",
            "MY_POD_IP": "10.0.0.5",
            "MY_POD_SERVICE_ACCOUNT": "builder",
            "UNRELATED": "ignored",
        }
    )
    assert env == PodEnvironment("node-a", "pod-123", "team", "10.0.0.5", "builder")


def test_from_environ_missing_variables_are_empty():
    assert PodEnvironment.from_environ({}) == PodEnvironment()
    assert PodEnvironment.from_environ({"MY_POD_IP": ""}).pod_ip == ""


def test_from_environ_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("MY_POD_NAMESPACE", "kube-system")
    assert PodEnvironment.from_environ().pod_namespace == "kube-system"


def test_port_default_when_unset():
    assert resolve_port({}) == DEFAULT_PORT == 4444


def test_port_from_environment():
    assert resolve_port({"MY_PORT": "8080"}) == 8080
    assert resolve_port({"MY_PORT": " 9090 "}) == 9090
    assert resolve_port({"MY_PORT": "0"}) == 0


@pytest.mark.parametrize("raw", ["", "abc", "80a", "-1", "65536", "8080.5", "٣٣"])
def test_port_invalid_falls_back(raw):
    assert resolve_port({"MY_PORT": raw}) == DEFAULT_PORT


def test_port_reads_process_environment(monkeypatch):
    monkeypatch.setenv("MY_PORT", "5555")
    assert resolve_port() == 5555
    monkeypatch.delenv("MY_PORT")
    assert resolve_port() == DEFAULT_PORT
