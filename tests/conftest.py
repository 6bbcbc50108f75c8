import json
import logging

import pytest

from ethaddr.address import Address

# Reference vectors from EIP-55
CHECKSUMMED_ADDRESSES = [
    # All caps
    "0x52908400098527886E0F7030069857D2E4169EE7",
    "0x8617E340B3D01FA5F11F306F4090FD50E238070D",
    # All lower
    "0xde709f2102306220921060314715629080e2fb77",
    "0x27b1fdb04752bbc536007a920d24acb045561c26",
    # Normal
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
    "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
    "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
    "0x90F8bf6A479f320ead074411a4B0e7944Ea8c9C1",
    "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE",
]

# Reduce logspew
logging.getLogger("ethaddr").setLevel(logging.INFO)


@pytest.fixture(params=CHECKSUMMED_ADDRESSES)
def checksummed(request) -> str:
    return request.param


@pytest.fixture()
def our_address() -> Address:
    return Address.from_bytes(bytes.fromhex("5aaeb6053f3e94c9b9a09f33669435e7ef1beaed"))


@pytest.fixture()
def ee_address() -> Address:
    return Address.from_bytes(b"\xee" * 20)


@pytest.fixture()
def address_book(tmp_path):
    def write(constants) -> str:
        path = tmp_path / "addresses.json"
        path.write_text(json.dumps(constants))
        return str(path)

    return write
