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

import argparse
import json
import logging
import os
import sys

from ethaddr.errors import AddressLiteralError
from ethaddr.literal import generate_module


class ExitOnCritical(logging.StreamHandler):
    """Custom class to terminate script execution once
    log records with severity level ERROR or higher occurred"""

    def emit(self, record):
        super().emit(record)
        if record.levelno > logging.ERROR:
            sys.exit(1)


def setup_logging(debug: bool = False):
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
        force=True,
        handlers=[ExitOnCritical()],
    )
    log_level = logging.DEBUG if debug else logging.getLevelName(os.environ.get("LOG_LEVEL") or "INFO")
    logging.getLogger().setLevel(log_level)


class AddressCodegen:
    """Build step that validates an address book and writes it out as Python constants"""

    logger = logging.getLogger(__name__)

    def __init__(self, args: list):
        parser = argparse.ArgumentParser("ethaddr-codegen")

        parser.add_argument("--input", type=str, required=True, help="JSON object mapping constant names to addresses (e.g. /Full/Path/To/addresses.json)")
        parser.add_argument("--output", type=str, required=True, help="Python module to write the constants to")
        parser.add_argument("--strict", dest="strict", action="store_true", help="Require EIP-55 checksum casing on every address")
        parser.add_argument("--debug", dest="debug", action="store_true", help="Enable debug output")

        self.arguments = parser.parse_args(args)

        setup_logging(self.arguments.debug)
        self.print_arguments()

    def print_arguments(self):
        """Print all the arguments passed to the script."""
        for arg in vars(self.arguments):
            self.logger.info(f"{arg}: {getattr(self.arguments, arg)}")

    def load_constants(self) -> dict:
        with open(self.arguments.input, "r") as f:
            constants = json.load(f)

        if not isinstance(constants, dict):
            raise AddressLiteralError(f"expected a JSON object in {self.arguments.input}")
        return constants

    def main(self) -> int:
        """Generate the module. Returns the process exit status."""
        try:
            constants = self.load_constants()
            source = generate_module(constants, strict=self.arguments.strict,
                                     source=os.path.basename(self.arguments.input))
        except (AddressLiteralError, OSError, json.JSONDecodeError) as e:
            self.logger.error(f"Error generating address constants: {e}")
            return 1

        try:
            with open(self.arguments.output, "w") as f:
                f.write(source)
        except OSError as e:
            self.logger.error(f"Error writing address constants: {e}")
            return 1

        self.logger.info(f"Wrote {len(constants)} address constants to {self.arguments.output}")
        return 0


def main():
    sys.exit(AddressCodegen(sys.argv[1:]).main())


if __name__ == "__main__":
    main()
