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

import string

from ethaddr.errors import InvalidHexCharacter, InvalidLength

ADDRESS_SIZE = 20
ADDRESS_HEX_LENGTH = ADDRESS_SIZE * 2

LOWER = "0123456789abcdef"
UPPER = "0123456789ABCDEF"

_HEX_DIGITS = frozenset(string.hexdigits)


def strip_prefix(value: str):
    """Split off an optional `0x`/`0X` prefix.

    Returns the remaining text and the number of characters removed.
    """
    if value[:2] in ("0x", "0X"):
        return value[2:], 2
    return value, 0


def decode(value: str) -> bytes:
    """Decode a 40 digit hex string, with or without a `0x` prefix, into 20 bytes.

    Characters are checked left to right and the first non-hex one is reported
    with its position in `value`. Length is counted in characters, not encoded
    bytes, so a 40 character body holding a non-ASCII character fails with
    `InvalidHexCharacter` rather than `InvalidLength`.
    """
    if not isinstance(value, str):
        raise TypeError(f"Unable to parse address from {type(value).__name__}")

    body, offset = strip_prefix(value)
    if len(body) != ADDRESS_HEX_LENGTH:
        raise InvalidLength()

    for index, char in enumerate(body):
        if char not in _HEX_DIGITS:
            raise InvalidHexCharacter(char, index + offset)

    return bytes.fromhex(body)


def encode(value: bytes, alphabet: str = LOWER, prefix: bool = True) -> str:
    """Render bytes as fixed-width hex using the given nibble alphabet."""
    assert isinstance(value, (bytes, bytearray))
    assert alphabet in (LOWER, UPPER)

    body = "".join(alphabet[b >> 4] + alphabet[b & 0xf] for b in value)
    return "0x" + body if prefix else body
