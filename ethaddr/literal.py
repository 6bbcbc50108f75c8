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

# Validation of address literals ahead of run time.
#
# Literals go through the same rules as Address.parse. Mixed-case literals must
# carry a valid checksum; in strict mode every literal must. A leading `~`
# turns checksum verification off for a single literal.
#
# Functions:
# - address: Validate one literal and return the Address.
# - generate_module: Validate a mapping of names to literals and emit Python
#   source binding each name to a constant built from raw bytes.
#
# Example:
# DAI = address('0x6B175474E89094C44Da98b954EedeAC495271d0F')
# WETH = address('~0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2')

import keyword
import logging
from typing import Dict, Optional

from ethaddr.address import Address
from ethaddr.checksum import verify, verify_mixed_case
from ethaddr.errors import AddressLiteralError, ChecksumMismatch, ParseAddressError
from ethaddr.utils.hex import decode

logger = logging.getLogger(__name__)

UNCHECKED_MARKER = "~"


def address(literal: str, strict: bool = False) -> Address:
    """Validate an address literal.

    :param literal: hex string, optionally prefixed with `~` to skip checksum verification
    :param strict: require exact checksum casing, even for single-case literals
    :raises AddressLiteralError: with a diagnostic describing what is wrong
    """
    if not isinstance(literal, str):
        raise AddressLiteralError(f"expected string literal but found {type(literal).__name__}")

    checked = not literal.startswith(UNCHECKED_MARKER)
    value = literal if checked else literal[len(UNCHECKED_MARKER):]

    try:
        raw = decode(value)
    except ParseAddressError as e:
        raise AddressLiteralError(f"invalid address literal: {e}") from e

    if checked:
        try:
            if strict:
                verify(raw, value)
            else:
                verify_mixed_case(raw, value)
        except ChecksumMismatch as e:
            suggestion = e.expected if value[:2] in ("0x", "0X") else e.expected[2:]
            raise AddressLiteralError(f"invalid address checksum; did you mean '{suggestion}'?") from e

    return Address.from_bytes(raw)


def _bytes_literal(value: Address) -> str:
    return 'b"' + "".join(f"\\x{b:02x}" for b in value) + '"'


def generate_module(constants: Dict[str, str], strict: bool = False, source: Optional[str] = None) -> str:
    """Generate Python source for a module of validated address constants.

    Each constant is bound with `Address.from_bytes`, so importing the generated
    module does no hex parsing or checksum hashing. The first invalid entry
    raises `AddressLiteralError` naming the offending constant.
    """
    assert isinstance(constants, dict)

    lines = []
    for name, literal in constants.items():
        if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
            raise AddressLiteralError(f"invalid constant name {name!r}")
        try:
            value = address(literal, strict=strict)
        except AddressLiteralError as e:
            raise AddressLiteralError(f"{name}: {e}") from e

        logger.debug(f"{name} = {value}")
        lines.append(f"{name} = Address.from_bytes({_bytes_literal(value)})  # {value}")

    origin = f" from {source}" if source else ""
    header = [
        f"# Generated by ethaddr-codegen{origin}. Do not edit.",
        "",
        "from ethaddr.address import Address",
        "",
    ]
    return "\n".join(header + lines) + "\n"
