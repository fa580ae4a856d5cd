import codecs

import pytest

from brcm_firmware.errors import InfNotFoundError
from brcm_firmware.inf_scanner import (
    BlockEnd,
    BlockStart,
    CopyListHeader,
    Declaration,
    DescriptionLine,
    FirmwareLine,
    Unrecognized,
    classify_line,
    iter_inf_lines,
)


def test_iter_inf_lines_keeps_crlf_terminators(tmp_path):
    inf = tmp_path / "bcbtums.inf"
    inf.write_bytes(b"[Version]\r\nClass=Bluetooth\r\n")

    assert list(iter_inf_lines(inf)) == ["[Version]\r\n", "Class=Bluetooth\r\n"]


def test_iter_inf_lines_missing_file_raises_immediately(tmp_path):
    with pytest.raises(InfNotFoundError) as excinfo:
        iter_inf_lines(tmp_path / "missing.inf")
    assert isinstance(excinfo.value, FileNotFoundError)
    assert excinfo.value.path == tmp_path / "missing.inf"


def test_iter_inf_lines_decodes_utf16_with_bom(tmp_path):
    inf = tmp_path / "bcbtums.inf"
    inf.write_bytes(codecs.BOM_UTF16_LE + "[Strings]\r\n".encode("utf-16-le"))

    assert list(iter_inf_lines(inf)) == ["[Strings]\r\n"]


def test_classify_declaration_with_blue_prefix():
    line = r"%BRCM20702.DeviceDesc%=BlueRAMUSB21E8,          USB\VID_0A5C&PID_21E8       ; 20702A1 dongles" + "\r\n"

    assert classify_line(line) == Declaration(
        string_key="BRCM20702.DeviceDesc",
        device_key="RAMUSB21E8",
        vendor_id=0x0A5C,
        product_id=0x21E8,
        comment="20702A1 dongles",
    )


def test_classify_declaration_with_bare_ramusb_token_and_lowercase_hex():
    parsed = classify_line(r"%BRCM20702.DeviceDesc%=RAMUSB21E1, USB\VID_0a5c&PID_21e1 ; HP" + "\n")

    assert isinstance(parsed, Declaration)
    assert parsed.device_key == "RAMUSB21E1"
    assert (parsed.vendor_id, parsed.product_id) == (0x0A5C, 0x21E1)


@pytest.mark.parametrize(
    "line",
    [
        "[Broadcom.NTamd64.10.0]\r\n",
        "[Broadcom.NTx86.10.0]\r\n",
        "[Broadcom.NTarm64.10.0]\r\n",
        "[broadcom.ntamd64.10.0]\r\n",
    ],
)
def test_classify_block_start_accepts_any_architecture(line):
    assert classify_line(line) == BlockStart()


def test_classify_block_end():
    assert classify_line("[Broadcom.NTamd64.6.3]\r\n") == BlockEnd()
    assert classify_line("[Broadcom.NTx86.6.3]\r\n") == BlockEnd()


def test_classify_other_os_sections_are_unrecognized():
    assert isinstance(classify_line("[Broadcom.NTamd64.6.1]\r\n"), Unrecognized)


@pytest.mark.parametrize(
    "line",
    [
        r"%BTHUSB.DeviceDesc%=BTHUSB_Install, USB\VID_0A5C&PID_1234 ; generic" "\r\n",
        r"%BRCM20702.DeviceDesc%=, USB\VID_0A5C&PID_21E8 ; no install section" "\r\n",
    ],
)
def test_classify_declaration_requires_ramusb_install_section(line):
    assert isinstance(classify_line(line), Unrecognized)


def test_classify_copy_list_header_any_case():
    assert classify_line("[ramusb21e8.CopyList]\r\n") == CopyListHeader(device_key="ramusb21e8")
    assert classify_line("[RAMUSB21E8.CopyList]\r\n") == CopyListHeader(device_key="RAMUSB21E8")


def test_classify_firmware_line():
    assert classify_line("BCM20702A1_001.002.014.1443.1572.hex\r\n") == FirmwareLine(
        filename="BCM20702A1_001.002.014.1443.1572.hex"
    )


def test_classify_firmware_line_stops_at_inf_field_separator():
    parsed = classify_line("BCM4350C5_003.006.007.0095.1703.hex,,,0x00004000\r\n")
    assert parsed == FirmwareLine(filename="BCM4350C5_003.006.007.0095.1703.hex")


def test_classify_description_line():
    assert classify_line('BRCM20702.DeviceDesc="Broadcom Bluetooth"\r\n') == DescriptionLine(
        string_key="BRCM20702.DeviceDesc", text="Broadcom Bluetooth"
    )


def test_classify_unrecognized_keeps_text():
    assert classify_line("bcbtums.sys\r\n") == Unrecognized(text="bcbtums.sys\r\n")
