from __future__ import annotations

import pytest

from bmpmif.bitmap import Pixel
from bmpmif.errors import IoError, MifFormatError, UnsupportedDepth
from bmpmif.mif import (
    MifRecord,
    cell_address,
    encode_cells,
    ordered_records,
    pack_color,
    parse_mif,
    quantize_channel,
    read_mif,
    render_mif,
    unpack_color,
    write_mif,
)
from bmpmif.sampling import SampledCell


def test_quantize_extremes_and_monotonic():
    assert quantize_channel(0, 3) == 0
    assert quantize_channel(255, 3) == 7
    codes = [quantize_channel(v, 3) for v in range(256)]
    assert codes == sorted(codes)


@pytest.mark.parametrize("depth,value,code", [(1, 127, 0), (1, 128, 1), (2, 191, 2), (2, 192, 3), (3, 31, 0), (3, 32, 1)])
def test_quantize_is_truncation(depth, value, code):
    assert quantize_channel(value, depth) == code


@pytest.mark.parametrize("depth", [0, 4, 8])
def test_unsupported_depth(depth):
    with pytest.raises(UnsupportedDepth):
        quantize_channel(100, depth)


def test_pack_color_layout():
    assert pack_color(Pixel(255, 0, 0), 3) == 0x1C0
    assert pack_color(Pixel(0, 255, 0), 3) == 0x038
    assert pack_color(Pixel(0, 0, 255), 3) == 0x007
    assert pack_color(Pixel(255, 255, 255), 2) == 0x3F
    assert pack_color(Pixel(200, 0, 130), 1) == 0b101


def test_unpack_color_full_scale():
    assert unpack_color(0x1FF, 3) == Pixel(255, 255, 255)
    assert unpack_color(0x1C0, 3) == Pixel(255, 0, 0)
    assert unpack_color(0b010, 1) == Pixel(0, 255, 0)


def test_address_flips_rows():
    assert cell_address(0, 0, 60, 60) == 59 * 60
    assert cell_address(59, 59, 60, 60) == 59
    assert cell_address(3, 1, 4, 2) == 3


def test_encode_skips_cells_outside_grid():
    cells = [SampledCell(0, 0, Pixel(0, 0, 0)), SampledCell(4, 0, Pixel(0, 0, 0))]
    records = list(encode_cells(cells, 4, 2, 3))
    assert records == [MifRecord(address=4, value=0)]


def test_ordered_records_sorts_by_address():
    records = ordered_records([MifRecord(5, 1), MifRecord(0, 2), MifRecord(3, 3)])
    assert [r.address for r in records] == [0, 3, 5]


def test_render_layout_is_exact():
    text = render_mif([MifRecord(0, 0x7), MifRecord(1, 0x1FF)], depth=3, word_count=4)
    assert text == (
        "WIDTH=9;\n"
        "DEPTH=4;\n"
        "\n"
        "ADDRESS_RADIX=UNS;\n"
        "DATA_RADIX=HEX;\n"
        "\n"
        "CONTENT BEGIN\n"
        "0 : 7;\n"
        "1 : 1FF;\n"
        "END;\n"
    )


def test_render_rejects_bad_depth():
    with pytest.raises(UnsupportedDepth):
        render_mif([], depth=4, word_count=1)


def test_write_and_read_back(tmp_path):
    path = tmp_path / "out.mif"
    write_mif(path, [MifRecord(2, 0x3F), MifRecord(3, 0x0)], depth=2, word_count=4)
    document = read_mif(path)
    assert document.word_width == 6
    assert document.channel_depth == 2
    assert document.depth == 4
    assert document.words == {2: 0x3F, 3: 0}


def test_write_to_missing_directory(tmp_path):
    with pytest.raises(IoError):
        write_mif(tmp_path / "missing" / "out.mif", [], depth=3, word_count=1)


def test_parse_accepts_comments_and_dec_radix():
    document = parse_mif(
        "-- generated\nWIDTH=3;\nDEPTH=2;\nADDRESS_RADIX=DEC;\nDATA_RADIX=HEX;\n"
        "CONTENT BEGIN\n  1 : 5; -- magenta\nEND;\n"
    )
    assert document.words == {1: 5}


@pytest.mark.parametrize(
    "text",
    [
        "WIDTH=9;\nDEPTH=4;\nCONTENT BEGIN\n0 : 7;\n",
        "WIDTH=9;\nDEPTH=4;\nCONTENT BEGIN\n0 = 7;\nEND;\n",
        "WIDTH=9;\nDEPTH=4;\nCONTENT BEGIN\nzero : 7;\nEND;\n",
        "WIDTH=9;\nDEPTH=4;\nCONTENT BEGIN\n4 : 7;\nEND;\n",
        "WIDTH=9;\nDEPTH=4;\nDATA_RADIX=BIN;\nCONTENT BEGIN\nEND;\n",
        "DEPTH=4;\nCONTENT BEGIN\nEND;\n",
        "WIDTH=9\nDEPTH=4;\nbogus\nCONTENT BEGIN\nEND;\n",
    ],
)
def test_parse_rejects_malformed(text):
    with pytest.raises(MifFormatError):
        parse_mif(text)
