# This file is part of ethaddr.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# Serialization helpers for Address.
#
# Human readable formats (JSON) use the 0x-prefixed checksummed string, binary
# formats use the raw 20 bytes. Contract calls use the 32 byte ABI word.
#
# Functions:
# - to_json_value: Checksummed string for JSON documents.
# - to_binary: Raw 20 bytes.
# - deserialize: Accept either of the above.
# - encode_abi / decode_abi: ABI `address` encoding via eth_abi.
#
# Example:
# json.dumps({'hat': address}, cls=AddressJSONEncoder)

import json

import eth_abi
from hexbytes import HexBytes

from ethaddr.address import Address


def to_json_value(address: Address) -> str:
    assert isinstance(address, Address)
    return str(address)


def to_binary(address: Address) -> bytes:
    assert isinstance(address, Address)
    return bytes(address)


def deserialize(value) -> Address:
    """Rebuild an `Address` from its string or binary representation.

    Strings go through `Address.parse` with checksum verification, bytes-like
    values through `Address.from_bytes`.
    """
    if isinstance(value, Address):
        return value
    if isinstance(value, str):
        return Address.parse(value, checksum=True)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Address.from_bytes(value)
    raise TypeError(f"Unable to deserialize address from {type(value).__name__}")


def encode_abi(address: Address) -> HexBytes:
    """Encode as a single left-padded 32 byte ABI `address` word."""
    assert isinstance(address, Address)
    return HexBytes(eth_abi.encode(["address"], [bytes(address)]))


def decode_abi(data: bytes) -> Address:
    (value,) = eth_abi.decode(["address"], bytes(data))
    return Address.parse(value)


class AddressJSONEncoder(json.JSONEncoder):
    """JSON encoder writing `Address` values as checksummed strings."""

    def default(self, o):
        if isinstance(o, Address):
            return to_json_value(o)
        return super().default(o)
