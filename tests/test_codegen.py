import pytest

from ethaddr.address import Address
from ethaddr.codegen import AddressCodegen, main

EE_CHECKSUM = "0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"


def print_out(testName: str):
    print("")
    print(f"{testName}")
    print("")


class TestAddressCodegen:
    def test_writes_module(self, address_book, tmp_path):
        print_out("test_writes_module")
        book = address_book({"DS_CHIEF": EE_CHECKSUM, "ZERO": "0x" + "00" * 20})
        output = tmp_path / "constants.py"

        codegen = AddressCodegen(["--input", book, "--output", str(output)])

        assert codegen.main() == 0

        namespace = {}
        exec(output.read_text(), namespace)
        assert namespace["DS_CHIEF"] == Address.from_bytes(b"\xee" * 20)
        assert namespace["ZERO"].is_zero()

    def test_invalid_address_fails(self, address_book, tmp_path):
        print_out("test_invalid_address_fails")
        book = address_book({"DS_CHIEF": "0xeEeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"})
        output = tmp_path / "constants.py"

        assert AddressCodegen(["--input", book, "--output", str(output)]).main() == 1
        assert not output.exists()

    def test_strict(self, address_book, tmp_path):
        print_out("test_strict")
        book = address_book({"DS_CHIEF": "0x" + "ee" * 20})
        output = tmp_path / "constants.py"

        assert AddressCodegen(["--input", book, "--output", str(output)]).main() == 0
        assert AddressCodegen(["--input", book, "--output", str(output), "--strict"]).main() == 1

    def test_not_an_object(self, tmp_path):
        book = tmp_path / "addresses.json"
        book.write_text('["0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE"]')

        assert AddressCodegen(["--input", str(book), "--output", str(tmp_path / "out.py")]).main() == 1

    def test_missing_input(self, tmp_path):
        assert AddressCodegen(["--input", str(tmp_path / "missing.json"),
                               "--output", str(tmp_path / "out.py")]).main() == 1

    def test_unwritable_output(self, address_book, tmp_path):
        print_out("test_unwritable_output")
        book = address_book({"DS_CHIEF": EE_CHECKSUM})
        output = tmp_path / "missing_dir" / "constants.py"

        assert AddressCodegen(["--input", book, "--output", str(output)]).main() == 1
        assert not output.exists()

    def test_missing_arguments(self):
        with pytest.raises(SystemExit):
            AddressCodegen([])

    def test_entry_point_exit_status(self, address_book, tmp_path, monkeypatch):
        book = address_book({"DS_CHIEF": "0x1234"})
        monkeypatch.setattr("sys.argv", ["ethaddr-codegen", "--input", book, "--output", str(tmp_path / "out.py")])

        with pytest.raises(SystemExit) as excinfo:
            main()

        assert excinfo.value.code == 1
