"""Tests for the cell helpers built on pytoniq-core."""

from __future__ import annotations

import pytest
from pytoniq_core.boc import CellError

from tonpayload.address import Address
from tonpayload.boc import Cell, begin_cell, end_cell, store_address, to_boc, to_boc_base64
from tonpayload.errors import CellOverflowError

EMPTY_CELL_BOC = "te6cckEBAQEAAgAAAEysuc0="


class _OverfullBuilder:
    def end_cell(self) -> Cell:
        raise CellError("Bits overflow")


class TestStoreAddress:
    def test_null_address(self) -> None:
        cell = end_cell(store_address(begin_cell(), None))
        assert cell.bits.to01() == "00"

    def test_std_address(self) -> None:
        addr = Address(workchain=-1, hash_part=b"\x01" * 32)
        cell = end_cell(store_address(begin_cell(), addr))
        bits = cell.bits.to01()
        assert len(bits) == 267
        # addr_std$10, no anycast, int8 workchain, 256-bit hash
        assert bits[:11] == "100" + "11111111"
        assert bits[11:] == "00000001" * 32


class TestEndCell:
    def test_overflow_becomes_cell_overflow_error(self) -> None:
        with pytest.raises(CellOverflowError) as exc_info:
            end_cell(_OverfullBuilder())  # type: ignore[arg-type]
        assert isinstance(exc_info.value.__cause__, CellError)
        assert exc_info.value.exit_code == 5


class TestToBoc:
    def test_empty_cell(self) -> None:
        cell = begin_cell().end_cell()
        boc = to_boc(cell)
        assert boc[:-4] == bytes.fromhex("b5ee9c72410101010002000000")
        assert to_boc_base64(cell) == EMPTY_CELL_BOC

    def test_parent_precedes_child(self) -> None:
        cell = begin_cell().store_ref(begin_cell().end_cell()).end_cell()
        boc = to_boc(cell)
        assert boc[:-4] == bytes.fromhex("b5ee9c72" "41" "01" "02" "01" "00" "05" "00" "010001" "0000")

    def test_roundtrip(self) -> None:
        child = begin_cell().store_bytes(b"child").end_cell()
        cell = begin_cell().store_uint(0xABC, 12).store_ref(child).end_cell()
        assert Cell.one_from_boc(to_boc(cell)).hash == cell.hash
