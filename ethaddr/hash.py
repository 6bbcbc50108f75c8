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

# Hash providers used for EIP-55 checksum casing.
#
# A hash provider is any callable taking bytes and returning a 32 byte
# digest. The default one is Keccak-256 from eth_utils, whose backend can be
# selected with the ETH_HASH_BACKEND environment variable (see eth-hash).
# Passing `None` wherever a `hasher` is accepted selects the minimal
# configuration: addresses render lowercase and checksums can not be verified.

from typing import Callable, Optional

import eth_utils

HashProvider = Callable[[bytes], bytes]

DIGEST_SIZE = 32


def keccak256(data: bytes) -> bytes:
    """Keccak-256 digest of `data` (the pre-standard SHA-3 used by Ethereum)."""
    return eth_utils.keccak(primitive=bytes(data))


DEFAULT_HASHER: Optional[HashProvider] = keccak256


def digest(hasher: HashProvider, data: bytes) -> bytes:
    result = hasher(data)
    assert isinstance(result, (bytes, bytearray))
    if len(result) != DIGEST_SIZE:
        raise ValueError(f"Hash provider returned {len(result)} bytes, expected {DIGEST_SIZE}")
    return bytes(result)
