from pathlib import Path

import pytest

from brcm_firmware import utils
from brcm_firmware.errors import FirmwareVersionError


def test_device_folder_name():
    """device_folder_name zero-pads lowercase hex ids."""
    assert utils.device_folder_name(0x0A5C, 0x21E8) == "0a5c_21e8"
    assert utils.device_folder_name(0x5, 0xF) == "0005_000f"


def test_parse_hex_id():
    assert utils.parse_hex_id("0A5C") == 0x0A5C
    assert utils.parse_hex_id("0a5c") == 0x0A5C
    assert utils.parse_hex_id("0x21e8") == 0x21E8
    with pytest.raises(ValueError):
        utils.parse_hex_id("12345")


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("BCM20702A1_001.002.014.1443.1572.hex", 5668),
        ("BCM20702A0_001.001.024.0156.0204.hex", 4300),
        ("BCM4350C5_003.006.007.0095.1703.hex", 5799),
        ("BCM43142A0_001.001.011.0122.0000.hex", 4096),
    ],
)
def test_firmware_version_from_filename(filename, expected):
    assert utils.firmware_version_from_filename(filename) == expected


def test_firmware_version_falls_back_to_hex_digits():
    assert utils.firmware_version_from_filename("BCM_TEST_00AF.hex") == 0xAF + 4096


def test_firmware_version_rejects_names_without_digits():
    with pytest.raises(FirmwareVersionError):
        utils.firmware_version_from_filename("BCM.hex")


def test_compressed_firmware_name():
    assert (
        utils.compressed_firmware_name("BCM20702A1_001.002.014.1443.1572", 5668)
        == "BCM20702A1_001.002.014.1443.1572_v5668.zhx"
    )


def test_version_from_compressed_name():
    assert utils.version_from_compressed_name("BCM20702A1_001.002.014.1443.1572_v5668.zhx") == 5668
    assert utils.version_from_compressed_name("firmware.zhx") is None


def test_newest_first_orders_by_trailing_version():
    paths = [
        Path("BCM20702A1_001.002.014.1443.1000_v5096.zhx"),
        Path("BCM20702A1_001.002.014.1443.1572_v5668.zhx"),
        Path("BCM20702A1_001.002.014.1443.1201_v5297.zhx"),
    ]

    assert [p.name[-8:-4] for p in utils.newest_first(paths)] == ["5668", "5297", "5096"]
