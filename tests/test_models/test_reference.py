"""Tests for host reference and connection parameter models."""

import pytest

from remote_oss.models import ConnectionParams, HostKind, HostReference


def test_transient_reference_carries_port():
    """Transient references keep host and port."""
    ref = HostReference.transient("example.com", 22)
    assert ref.kind is HostKind.TRANSIENT
    assert ref.host == "example.com"
    assert ref.port == 22


def test_configured_reference_has_no_port():
    """Configured references only carry the display name."""
    ref = HostReference.configured("dev-box")
    assert ref.kind is HostKind.CONFIGURED
    assert ref.port is None


def test_transient_reference_without_port_rejected():
    """A transient reference must have a port."""
    with pytest.raises(ValueError, match="requires a port"):
        HostReference(kind=HostKind.TRANSIENT, host="example.com")


def test_configured_reference_with_port_rejected():
    """A configured reference never carries a port."""
    with pytest.raises(ValueError, match="cannot carry a port"):
        HostReference(kind=HostKind.CONFIGURED, host="dev-box", port=22)


def test_references_compare_by_value():
    """Equal fields mean equal references."""
    assert HostReference.configured("a") == HostReference.configured("a")
    assert HostReference.transient("a", 1) != HostReference.transient("a", 2)


def test_host_kind_values_match_wire_format():
    """Kind values are the strings used in encoded tokens."""
    assert HostKind.TRANSIENT.value == "transient"
    assert HostKind.CONFIGURED.value == "configured"


def test_connection_params_to_dict():
    """to_dict exposes host, port and token."""
    params = ConnectionParams(host="1.2.3.4", port=22, token="secret")
    assert params.to_dict() == {"host": "1.2.3.4", "port": 22, "token": "secret"}


def test_connection_params_to_dict_redacts_token():
    """Redacted dicts hide the token value."""
    params = ConnectionParams(host="1.2.3.4", port=22, token="secret")
    assert params.to_dict(redact=True)["token"] == "***"


def test_connection_params_redact_keeps_missing_token():
    """An absent token stays None when redacting."""
    params = ConnectionParams(host="1.2.3.4", port=22)
    assert params.to_dict(redact=True)["token"] is None


@pytest.mark.parametrize(
    "kind,host,port",
    [
        (HostKind.CONFIGURED, "", None),
        (HostKind.TRANSIENT, "", 22),
        (HostKind.TRANSIENT, "example.com", True),
        (HostKind.TRANSIENT, "example.com", "22"),
    ],
)
def test_reference_rejects_values_tokens_cannot_carry(kind, host, port):
    """Empty hosts and non-int ports never make it into a reference."""
    with pytest.raises(ValueError):
        HostReference(kind=kind, host=host, port=port)
