import pytest

from libs.net.ip import filter_ips_by_family, ip_family
from libs.net.stack import IPFamily


@pytest.mark.parametrize(
    "ips, expected_ipv4s, expected_ipv6s",
    [
        pytest.param(None, [], [], id="none"),
        pytest.param([], [], [], id="empty"),
        pytest.param(["192.168.1.1", "10.0.0.1"], ["192.168.1.1", "10.0.0.1"], [], id="only-ipv4"),
        pytest.param(["2001:db8::1", "fe80::1"], [], ["2001:db8::1", "fe80::1"], id="only-ipv6"),
        pytest.param(
            ["192.168.1.1", "2001:db8::1", "10.0.0.1", "fe80::1"],
            ["192.168.1.1", "10.0.0.1"],
            ["2001:db8::1", "fe80::1"],
            id="mixed",
        ),
        pytest.param(
            ["192.168.1.1", "not-an-ip", "10.0.0.1", "2001:db8::1"],
            ["192.168.1.1", "10.0.0.1"],
            ["2001:db8::1"],
            id="with-invalid",
        ),
        pytest.param(
            ["", "10.0.0.256", "10.0.0.0/24", "2001:db8::/64", "2001:db8:::1"],
            [],
            [],
            id="all-invalid",
        ),
    ],
)
def test_filter_ips_by_family(ips, expected_ipv4s, expected_ipv6s):
    ipv4s, ipv6s = filter_ips_by_family(ips=ips)
    assert ipv4s == expected_ipv4s
    assert ipv6s == expected_ipv6s


def test_filter_ips_by_family_never_grows():
    ips = ["10.0.0.1", "bogus", "2001:db8::1", "10.0.0.1"]
    ipv4s, ipv6s = filter_ips_by_family(ips=ips)
    assert len(ipv4s) + len(ipv6s) == 3
    assert ipv4s == ["10.0.0.1", "10.0.0.1"]


@pytest.mark.parametrize(
    "address, expected_family",
    [
        pytest.param("10.0.0.5", IPFamily.IPV4, id="ipv4"),
        pytest.param("2001:db8::1", IPFamily.IPV6, id="ipv6"),
        pytest.param("::ffff:10.0.0.5", IPFamily.IPV4, id="ipv4-mapped-ipv6"),
        pytest.param("1.2", None, id="short-ipv4"),
        pytest.param("", None, id="empty"),
        pytest.param("node-1.example.com", None, id="hostname"),
    ],
)
def test_ip_family(address, expected_family):
    assert ip_family(address=address) == expected_family
