import threading

from varnish_agent.core.ports import ArtifactLog
from varnish_agent.core.registry import ArtifactRegistry
from varnish_agent.core.state_machine import RegistryState


def test_latest_on_empty_registry_is_none():
    registry = ArtifactRegistry()
    assert registry.latest() is None
    assert len(registry) == 0
    assert registry.state == RegistryState.EMPTY


def test_latest_returns_last_appended():
    registry = ArtifactRegistry()
    registry.append("a.vcl")
    registry.append("b.vcl")
    assert registry.latest() == "b.vcl"
    assert registry.state == RegistryState.NON_EMPTY


def test_duplicates_keep_insertion_order():
    registry = ArtifactRegistry()
    for name in ["a.vcl", "b.vcl", "a.vcl"]:
        registry.append(name)

    assert registry.history() == ("a.vcl", "b.vcl", "a.vcl")
    assert list(registry) == ["a.vcl", "b.vcl", "a.vcl"]
    assert registry.latest() == "a.vcl"


def test_latest_does_not_mutate():
    registry = ArtifactRegistry()
    registry.append("a.vcl")
    assert registry.latest() == "a.vcl"
    assert registry.latest() == "a.vcl"
    assert len(registry) == 1


def test_concurrent_appends_are_all_kept():
    registry = ArtifactRegistry()

    def worker(n):
        for i in range(200):
            registry.append(f"{n}-{i}.vcl")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(registry) == 800
    assert registry.latest() == registry.history()[-1]


def test_registry_satisfies_artifact_log_port():
    assert isinstance(ArtifactRegistry(), ArtifactLog)


def test_len_waits_for_the_lock():
    registry = ArtifactRegistry()
    registry.append("a.vcl")
    results = []

    with registry._lock:
        reader = threading.Thread(target=lambda: results.append(len(registry)))
        reader.start()
        reader.join(timeout=0.05)
        assert reader.is_alive()

    reader.join()
    assert results == [1]
