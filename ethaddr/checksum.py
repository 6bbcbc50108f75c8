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

# EIP-55 mixed-case checksum encoding.
#
# The lowercase hex form of the address (no prefix) is hashed with Keccak-256.
# Hex letter `i` of the address is uppercased when nibble `i` of the digest
# (high nibble of byte i // 2 for even i, low nibble for odd i) is 8 or more.
#
# Functions:
# - checksum_encode: Render 20 bytes as a checksummed hex string.
# - verify: Strict check, the casing must match exactly.
# - verify_mixed_case: Only checks strings mixing upper and lower case letters.
# - is_mixed_case: True if a string has both upper and lower case hex letters.
#
# Example:
# checksum_encode(bytes.fromhex('5aaeb6053f3e94c9b9a09f33669435e7ef1beaed'))
# '0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed'

import logging
from typing import Optional

from ethaddr.errors import ChecksumMismatch, ChecksumUnavailable
from ethaddr.hash import DEFAULT_HASHER, HashProvider, digest
from ethaddr.utils.hex import LOWER, encode, strip_prefix

logger = logging.getLogger(__name__)


def checksum_encode(value: bytes, hasher: Optional[HashProvider] = DEFAULT_HASHER, prefix: bool = True) -> str:
    assert isinstance(value, (bytes, bytearray))

    lower = encode(value, LOWER, prefix=False)
    if hasher is None:
        return "0x" + lower if prefix else lower

    hashed = digest(hasher, lower.encode("ascii"))

    chars = []
    for i, char in enumerate(lower):
        byte = hashed[i // 2]
        nibble = (byte >> 4) if i % 2 == 0 else (byte & 0xf)
        chars.append(char.upper() if nibble >= 8 else char)

    body = "".join(chars)
    return "0x" + body if prefix else body


def is_mixed_case(value: str) -> bool:
    body, _ = strip_prefix(value)
    return any(c.islower() for c in body) and any(c.isupper() for c in body)


def verify(value: bytes, text: str, hasher: Optional[HashProvider] = DEFAULT_HASHER) -> str:
    """Check that `text` carries the exact checksum casing of `value`.

    Returns the expected checksummed string, raises `ChecksumMismatch` otherwise.
    """
    if hasher is None:
        raise ChecksumUnavailable("Checksum verification requires a hash provider")

    expected = checksum_encode(value, hasher)
    body, _ = strip_prefix(text)
    if body != expected[2:]:
        logger.debug(f"Checksum mismatch for {text}, expected {expected}")
        raise ChecksumMismatch(expected)
    return expected


def verify_mixed_case(value: bytes, text: str, hasher: Optional[HashProvider] = DEFAULT_HASHER) -> None:
    """Verify the checksum only when `text` mixes upper and lower case letters.

    All-lowercase and all-uppercase strings carry no checksum and are accepted.
    """
    if is_mixed_case(text):
        verify(value, text, hasher)
