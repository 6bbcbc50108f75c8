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


class ParseAddressError(ValueError):
    """Raised when a string can not be parsed into an `Address`."""


class InvalidLength(ParseAddressError):
    def __init__(self):
        super().__init__("invalid hex string length")


class InvalidHexCharacter(ParseAddressError):
    """A non-hexadecimal character was found.

    Attributes:
        char: The offending character.
        index: Position of the character in the input string, `0x` prefix included.
    """
    def __init__(self, char: str, index: int):
        super().__init__(f"invalid character {char!r} at position {index}")
        self.char = char
        self.index = index


class ChecksumMismatch(ParseAddressError):
    """The case of the hex letters does not match the EIP-55 checksum.

    Attributes:
        expected: The correctly checksummed address string.
    """
    def __init__(self, expected: str):
        super().__init__("address checksum does not match")
        self.expected = expected


class ChecksumUnavailable(RuntimeError):
    """Checksum verification was requested without a hash provider."""


class AddressLiteralError(ValueError):
    """Diagnostic for an address literal that failed validation."""
