"""Tests for the per-namespace PID store."""

from scapy_rdm.registry import NamespaceStore, ParameterDescriptor


def _pid(name: str, value: int) -> ParameterDescriptor:
    return ParameterDescriptor(name=name, value=value)


def test_uncontested_lookups() -> None:
    pids = [_pid("DEVICE_INFO", 0x0060), _pid("DEVICE_LABEL", 0x0082), _pid("IDENTIFY_DEVICE", 0x1000)]
    store = NamespaceStore(pids)

    assert store.count() == 3
    assert len(store) == 3
    for pid in pids:
        assert store.lookup_by_value(pid.value) is pid
        assert store.lookup_by_name(pid.name) is pid


def test_misses_return_none() -> None:
    store = NamespaceStore([_pid("DEVICE_INFO", 0x0060)])

    assert store.lookup_by_value(0x0061) is None
    assert store.lookup_by_value(-1) is None
    assert store.lookup_by_name("DEVICE_LABEL") is None
    assert store.lookup_by_value([0x0060]) is None
    assert store.lookup_by_value("0x0060") is None
    assert store.lookup_by_name(["DEVICE_INFO"]) is None
    assert store.lookup_by_name(0x0060) is None


def test_name_lookup_is_case_sensitive() -> None:
    store = NamespaceStore([_pid("DEVICE_INFO", 0x0060)])

    assert store.lookup_by_name("device_info") is None
    assert store.lookup_by_name("DEVICE_INFO ") is None


def test_value_collision_evicts_earlier_descriptor() -> None:
    first = _pid("X", 5)
    second = _pid("Y", 5)
    store = NamespaceStore([first, second])

    assert store.count() == 1
    assert store.lookup_by_value(5) is second
    assert store.lookup_by_name("Y") is second
    assert store.lookup_by_name("X") is None
    assert store.all() == (second,)


def test_name_collision_evicts_earlier_descriptor() -> None:
    first = _pid("DEVICE_LABEL", 0x0082)
    second = _pid("DEVICE_LABEL", 0x8082)
    store = NamespaceStore([first, second])

    assert store.count() == 1
    assert store.lookup_by_name("DEVICE_LABEL") is second
    assert store.lookup_by_value(0x8082) is second
    assert store.lookup_by_value(0x0082) is None


def test_collision_with_two_existing_descriptors() -> None:
    a = _pid("A", 1)
    b = _pid("B", 2)
    c = _pid("B", 1)
    store = NamespaceStore([a, b, c])

    assert store.count() == 1
    assert store.all() == (c,)
    assert store.lookup_by_name("A") is None
    assert store.lookup_by_value(2) is None


def test_count_reflects_surviving_values() -> None:
    store = NamespaceStore([_pid("A", 1), _pid("B", 2), _pid("C", 1), _pid("D", 3), _pid("E", 3)])

    assert store.count() == 3
    assert {pid.name for pid in store.all()} == {"B", "C", "E"}


def test_all_is_stable_and_ordered_by_value() -> None:
    pids = [_pid("C", 0x1000), _pid("A", 0x0060), _pid("B", 0x0082)]
    store = NamespaceStore(pids)

    assert [pid.value for pid in store.all()] == [0x0060, 0x0082, 0x1000]
    assert store.all() == store.all()
    assert list(store) == list(store.all())


def test_empty_store() -> None:
    store = NamespaceStore()

    assert store.count() == 0
    assert store.all() == ()
    assert store.lookup_by_value(0) is None


def test_store_consumes_generators() -> None:
    store = NamespaceStore(_pid(f"PID_{value}", value) for value in range(10))

    assert store.count() == 10
    assert store.lookup_by_name("PID_7").value == 7
