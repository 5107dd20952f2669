import ipaddress

import pytest

from hashmesh.haship import HASHIP_ADDR_SIZE, HashipAddr, addr_is_galaxy

PEER_ADDR = "fd42:10a9:4318:509b:80ab:8042:6275:609b"


def test_default_is_all_zero():
    assert bytes(HashipAddr()) == bytes(HASHIP_ADDR_SIZE)


def test_from_dot_matches_packed_form():
    addr = HashipAddr.from_dot(PEER_ADDR)
    assert bytes(addr) == ipaddress.IPv6Address(PEER_ADDR).packed


def test_from_dot_rejects_garbage():
    with pytest.raises(ValueError, match="looks invalid"):
        HashipAddr.from_dot("not-an-address")


def test_bin_round_trip():
    addr = HashipAddr.from_dot(PEER_ADDR)
    assert HashipAddr.from_bin(bytes(addr)) == addr


@pytest.mark.parametrize("size", [0, 15, 17])
def test_from_bin_wrong_size(size):
    with pytest.raises(ValueError, match="binary data"):
        HashipAddr.from_bin(b"\x01" * size)


def test_hip_string_without_dots_is_hex():
    addr = HashipAddr.from_dot(PEER_ADDR)
    assert addr.get_hip_as_string(False) == bytes(addr).hex()


def test_hip_string_with_dots_matches_full_notation():
    addr = HashipAddr.from_dot(PEER_ADDR)
    assert addr.get_hip_as_string(True) == PEER_ADDR


def test_hip_string_groups():
    addr = HashipAddr.from_dot("fd42::1")
    groups = addr.get_hip_as_string(True).split(":")
    assert len(groups) == 8
    assert all(len(g) == 4 for g in groups)
    assert "".join(groups) == addr.get_hip_as_string(False)


def test_str_has_hip_prefix():
    addr = HashipAddr.from_dot(PEER_ADDR)
    assert str(addr) == "hip:" + addr.get_hip_as_string(False)


def test_addr_is_galaxy():
    assert addr_is_galaxy(HashipAddr.from_dot(PEER_ADDR))
    assert not addr_is_galaxy(HashipAddr.from_dot("fc00::1"))
    assert not addr_is_galaxy(HashipAddr())


def test_usable_as_dict_key_and_ordered():
    a = HashipAddr.from_dot("fd42::1")
    b = HashipAddr.from_dot("fd42::2")
    assert {a: "x"}[HashipAddr.from_dot("fd42::1")] == "x"
    assert sorted([b, a]) == [a, b]