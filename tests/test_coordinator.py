"""
Тесты координатора сканирования
"""

import pytest

from range_pinger.config import AdapterInfo, ScannerConfig, ScanResult
from range_pinger.coordinator import ScanCoordinator
from range_pinger.exceptions import InvalidAdapterError, RangeTooLargeError, ConfigurationError
from range_pinger.prober import ConcurrentProber
from tests.conftest import StubProbe


def make_coordinator(probe, **config):
    return ScanCoordinator(ScannerConfig(**config), ConcurrentProber(probe))


def test_slash_30_example():
    probe = StubProbe(lambda address: address == "0.0.0.11")
    adapter = AdapterInfo(name="test", display_address="0.0.0.10", prefix_length=30, address_value=10)

    result = make_coordinator(probe).run_scan(adapter)

    assert isinstance(result, ScanResult)
    assert result.addresses == ["0.0.0.11"]
    assert list(result) == ["0.0.0.11"]
    assert result.hosts_scanned == 3
    assert result.adapter_name == "test"
    assert sorted(address for address, _ in probe.calls) == ["0.0.0.10", "0.0.0.11", "0.0.0.12"]


def test_timeout_from_config(adapter):
    probe = StubProbe(lambda address: False)
    make_coordinator(probe, timeout=0.5).run_scan(
        AdapterInfo(adapter.name, adapter.display_address, 31, adapter.address_value)
    )
    assert probe.calls == [("192.168.1.1", 0.5)]


def test_full_slash_24(adapter, always_up):
    result = make_coordinator(always_up).run_scan(adapter)
    assert len(result) == 255
    assert result.addresses[0] == "192.168.1.1"
    # формула с -1 оставляет широковещательный адрес в диапазоне
    assert result.addresses[-1] == "192.168.1.255"


def test_prefix_32_is_empty_scan(always_up):
    adapter = AdapterInfo("host", "10.0.0.10", 32, 0x0A00000A)
    result = make_coordinator(always_up).run_scan(adapter)
    assert result.addresses == []
    assert result.hosts_scanned == 0
    assert always_up.calls == []


@pytest.mark.parametrize("prefix", [-1, 33])
def test_invalid_prefix_raises_before_probing(prefix, always_up):
    adapter = AdapterInfo("bad0", "10.0.0.1", prefix, 0x0A000001)
    with pytest.raises(InvalidAdapterError) as exc_info:
        make_coordinator(always_up).run_scan(adapter)
    assert exc_info.value.adapter_name == "bad0"
    assert isinstance(exc_info.value, ConfigurationError)
    assert always_up.calls == []


def test_slash_0_is_refused(always_up):
    adapter = AdapterInfo("any", "0.0.0.0", 0, 1)
    with pytest.raises(RangeTooLargeError):
        make_coordinator(always_up).run_scan(adapter)
    assert always_up.calls == []


def test_max_hosts_is_configurable(always_up):
    adapter = AdapterInfo("eth1", "10.1.0.5", 20, 0x0A010001)
    with pytest.raises(RangeTooLargeError):
        make_coordinator(always_up, max_hosts=1000).run_scan(adapter)

    result = make_coordinator(always_up, max_hosts=4095).run_scan(adapter)
    assert result.hosts_scanned == 4095


def test_default_construction():
    coordinator = ScanCoordinator()
    assert coordinator.config.timeout == 5.0
    assert isinstance(coordinator.prober, ConcurrentProber)


def test_range_past_last_address_is_rejected(always_up):
    adapter = AdapterInfo("edge", "255.255.255.250", 29, 0xFFFFFFFA)
    with pytest.raises(InvalidAdapterError):
        make_coordinator(always_up).run_scan(adapter)
    assert always_up.calls == []


def test_range_ending_on_last_address(always_up):
    adapter = AdapterInfo("edge", "255.255.255.249", 29, 0xFFFFFFF9)
    result = make_coordinator(always_up).run_scan(adapter)
    assert result.addresses[-1] == "255.255.255.255"
    assert "0.0.0.0" not in result.addresses
    assert len(result) == 7


@pytest.mark.parametrize("value", [-1, 1 << 32])
def test_address_value_outside_ipv4(value, always_up):
    adapter = AdapterInfo("bad1", "0.0.0.0", 32, value)
    with pytest.raises(InvalidAdapterError):
        make_coordinator(always_up).run_scan(adapter)


def test_range_computed_once_per_scan(adapter, always_up, monkeypatch):
    coordinator = make_coordinator(always_up)
    calls = []
    original = coordinator.host_range

    def counting(info):
        calls.append(info)
        return original(info)

    monkeypatch.setattr(coordinator, "host_range", counting)
    coordinator.run_scan(adapter)
    assert calls == [adapter]
