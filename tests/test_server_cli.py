import pytest

from clockify_mcp_server.clockify_mcp_server import parse_args


def test_defaults():
    args = parse_args([])

    assert args.transport == "stdio"
    assert args.host is None
    assert args.port is None


def test_http_transport_with_port():
    args = parse_args(["--transport", "streamable-http", "--host", "0.0.0.0", "--port", "8080"])

    assert args.transport == "streamable-http"
    assert args.host == "0.0.0.0"
    assert args.port == 8080


@pytest.mark.parametrize("port", ["0", "65536", "-1", "http"])
def test_out_of_range_port_is_rejected(port):
    with pytest.raises(SystemExit):
        parse_args(["--port", port])
