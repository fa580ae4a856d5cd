import pytest

SAMPLE_INF_LINES = [
    "[Version]",
    'Signature="$WINDOWS NT$"',
    "Class=Bluetooth",
    "",
    "[Broadcom.NTamd64.6.1]",
    r"%BRCM20702.DeviceDesc%=BlueRAMUSB21E8,          USB\VID_0A5C&PID_21E8       ; 20702A1 dongles",
    "",
    "[Broadcom.NTamd64.10.0]",
    r"%BRCM20702.DeviceDesc%=BlueRAMUSB21E8,          USB\VID_0A5C&PID_21E8       ; 20702A1 dongles",
    r"%BRCM20702.DeviceDesc%=RAMUSB21E1,              USB\VID_0a5c&PID_21e1       ; HP Softbank",
    r"%BRCM4350.DeviceDesc%=BlueRAMUSB6412,           USB\VID_0A5C&PID_6412       ; 4350C5 dongle",
    r"%BRCM20702.DeviceDesc%=BlueRAMUSB828D,          USB\VID_0A5C&PID_828D       ; Apple Bluetooth",
    "",
    "[Broadcom.NTamd64.6.3]",
    r"%BRCM20702.DeviceDesc%=BlueRAMUSB21F1,          USB\VID_0A5C&PID_21F1       ; Lenovo",
    "",
    "[ramusb21e8.CopyList]",
    "BCM20702A1_001.002.014.1443.1572.hex",
    "",
    "[RAMUSB21E1.CopyList]",
    "BCM20702A0_001.001.024.0156.0204.hex",
    "BCM20702A0_001.001.024.0156.0999.hex",
    "",
    "[RAMUSB6412.CopyList]",
    "BCM4350C5_003.006.007.0095.1703.hex",
    "",
    "[Strings]",
    'BRCM20702.DeviceDesc="Broadcom Bluetooth"',
    'BRCM4350.DeviceDesc="Broadcom 4350"',
]

SAMPLE_INF = "".join(line + "\r\n" for line in SAMPLE_INF_LINES)

FIRMWARE_21E8 = "BCM20702A1_001.002.014.1443.1572.hex"
FIRMWARE_21E1 = "BCM20702A0_001.001.024.0156.0204.hex"
FIRMWARE_6412 = "BCM4350C5_003.006.007.0095.1703.hex"


def hex_payload(seed: int) -> bytes:
    records = [f":10{seed:04X}00" + "00112233445566778899AABBCCDDEEFF" + "00\n" for _ in range(64)]
    return ("".join(records) + ":00000001FF\n").encode("ascii")


@pytest.fixture
def sample_inf_lines():
    return [line + "\r\n" for line in SAMPLE_INF_LINES]


@pytest.fixture
def firmware_input(tmp_path):
    """An input folder holding bcbtums.inf, two referenced, one known-bad and one stray firmware."""
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    (input_dir / "bcbtums.inf").write_bytes(SAMPLE_INF.encode("cp1252"))
    (input_dir / FIRMWARE_21E8).write_bytes(hex_payload(0x21E8))
    (input_dir / FIRMWARE_21E1).write_bytes(hex_payload(0x21E1))
    (input_dir / FIRMWARE_6412).write_bytes(hex_payload(0x6412))
    (input_dir / "BCM43142A0_001.001.011.0122.0160.hex").write_bytes(hex_payload(1))
    return input_dir
