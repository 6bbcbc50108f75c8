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

# This module provides the Address class, an immutable 20 byte Ethereum public
# address. Addresses compare and sort byte-wise and print with EIP-55 checksum
# casing by default.
#
# Class:
# - Address: 20 byte value type.
#
# Methods:
# - from_bytes: Build an address from exactly 20 raw bytes.
# - parse: Parse a hex string, optionally verifying mixed-case checksums.
# - from_str_checksum: Parse a hex string that must carry the exact checksum casing.
# - to_bytes: The raw bytes.
# - to_hex: Render as hex (checksummed, lowercase or uppercase, with or without 0x).
#
# Example:
# address = Address.parse('0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed', checksum=True)
# print(address)  # 0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed
# format(address, 'x')  # '5aaeb6053f3e94c9b9a09f33669435e7ef1beaed'

import functools
from typing import Optional

from eth_typing import ChecksumAddress, HexAddress, HexStr
from hexbytes import HexBytes

from ethaddr.checksum import checksum_encode, verify, verify_mixed_case
from ethaddr.errors import ChecksumUnavailable
from ethaddr.hash import DEFAULT_HASHER, HashProvider
from ethaddr.utils.hex import ADDRESS_SIZE, LOWER, UPPER, decode, encode


@functools.total_ordering
class Address:
    """Represents an Ethereum public address.

    Any 20 byte value is a valid address. Instances are immutable, hashable and
    compare equal to other addresses (or raw 20 byte values) holding the same bytes.

    Args:
        value: Another `Address`, 20 raw bytes, or a hex string with or without
            the `0x` prefix. Mixed-case strings must carry a valid checksum.
        hasher: Hash provider used to verify checksums of mixed-case strings,
            `None` to skip verification.
    """
    __slots__ = ("_bytes",)

    def __init__(self, value, hasher: Optional[HashProvider] = DEFAULT_HASHER):
        if isinstance(value, Address):
            raw = value._bytes
        elif isinstance(value, str):
            raw = decode(value)
            if hasher is not None:
                verify_mixed_case(raw, value, hasher)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            raw = bytes(value)
            if len(raw) != ADDRESS_SIZE:
                raise ValueError(f"Address must be {ADDRESS_SIZE} bytes long, got {len(raw)}")
        else:
            raise TypeError(f"Unable to create address from '{value!r}'")

        object.__setattr__(self, "_bytes", raw)

    @classmethod
    def from_bytes(cls, value) -> "Address":
        """Create an address from exactly 20 bytes."""
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"Unable to create address from {type(value).__name__}")
        return cls(value)

    @classmethod
    def parse(cls, text: str, checksum: bool = False, hasher: Optional[HashProvider] = DEFAULT_HASHER) -> "Address":
        """Parse an address from a hex string.

        The `0x`/`0X` prefix is optional and hex digits are case-insensitive. With
        `checksum=True`, strings mixing upper and lower case letters must match the
        EIP-55 casing of the address; single-case strings are accepted as is.

        :raises InvalidLength: the hex body is not 40 characters long
        :raises InvalidHexCharacter: a non-hex character was found
        :raises ChecksumMismatch: the letter casing does not match the checksum
        """
        raw = decode(text)
        if checksum:
            if hasher is None:
                raise ChecksumUnavailable("Checksum verification requires a hash provider")
            verify_mixed_case(raw, text, hasher)
        return cls(raw)

    @classmethod
    def from_str_checksum(cls, text: str, hasher: Optional[HashProvider] = DEFAULT_HASHER) -> "Address":
        """Parse an address whose casing must be exactly the EIP-55 checksum casing."""
        raw = decode(text)
        verify(raw, text, hasher)
        return cls(raw)

    @classmethod
    def zero(cls) -> "Address":
        return cls(bytes(ADDRESS_SIZE))

    def to_bytes(self) -> HexBytes:
        return HexBytes(self._bytes)

    def to_hex(self, checksum: bool = False, prefix: bool = True, upper: bool = False,
               hasher: Optional[HashProvider] = DEFAULT_HASHER) -> str:
        """Render as hex. `checksum` and `upper` select conflicting casings and
        can not be combined."""
        if checksum and upper:
            raise ValueError("Checksummed addresses can not be rendered uppercase")
        if checksum:
            return checksum_encode(self._bytes, hasher, prefix=prefix)
        return encode(self._bytes, UPPER if upper else LOWER, prefix=prefix)

    def checksum(self, hasher: Optional[HashProvider] = DEFAULT_HASHER) -> ChecksumAddress:
        return ChecksumAddress(HexAddress(HexStr(checksum_encode(self._bytes, hasher))))

    @property
    def address(self) -> ChecksumAddress:
        """Checksummed string form, as accepted by web3.py."""
        return self.checksum()

    def is_zero(self) -> bool:
        return not any(self._bytes)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._bytes,))

    def __bytes__(self):
        return self._bytes

    def __len__(self):
        return ADDRESS_SIZE

    def __iter__(self):
        return iter(self._bytes)

    def __getitem__(self, item):
        return self._bytes[item]

    def __format__(self, format_spec: str) -> str:
        if format_spec == "":
            return str(self)
        if format_spec in ("x", "#x", "X", "#X"):
            return self.to_hex(prefix=format_spec.startswith("#"), upper=format_spec.endswith("X"))
        raise ValueError(f"Unknown format code '{format_spec}' for Address")

    def __str__(self):
        return self.to_hex(checksum=True)

    def __repr__(self):
        return f"Address('{self}')"

    def __hash__(self):
        return hash(self._bytes)

    def __eq__(self, other):
        if isinstance(other, Address):
            return self._bytes == other._bytes
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._bytes == bytes(other)
        return NotImplemented

    def __lt__(self, other):
        if not isinstance(other, Address):
            return NotImplemented
        return self._bytes < other._bytes


ZERO_ADDRESS = Address.zero()
