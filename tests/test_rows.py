"""Pruebas de halfsize/rows.py."""

from __future__ import annotations

import io
from unittest.mock import MagicMock

import pytest

from halfsize.errors import BadInputFormat, BadOutputFile
from halfsize.rows import (copy_id_field, copy_trailer, new_row, read_exact, read_row,
                           row_width, write_exact, write_row)


def test_row_width_rounds_up_to_even():
    assert [row_width(w) for w in (1, 2, 3, 4, 5)] == [2, 2, 4, 4, 6]
    assert len(new_row(3, 3)) == 12


def test_read_row_even_width():
    f = io.BytesIO(bytes([1, 2, 3, 4, 9]))
    row = new_row(4, 1)
    read_row(f, row, 4, 1)
    assert row == bytearray([1, 2, 3, 4])
    assert f.read() == b"\x09"


def test_read_row_odd_width_duplicates_last_pixel():
    """Con ancho impar el ultimo pixel se copia al relleno."""
    f = io.BytesIO(bytes([10, 11, 20, 21, 30, 31]))
    row = new_row(3, 2)
    read_row(f, row, 3, 2)
    assert row == bytearray([10, 11, 20, 21, 30, 31, 30, 31])


def test_read_row_reuses_buffer_in_place():
    f = io.BytesIO(bytes([1, 2, 3, 7, 8, 9]))
    row = new_row(3, 1)
    primera = read_row(f, row, 3, 1)
    assert primera is row
    read_row(f, row, 3, 1)
    assert row == bytearray([7, 8, 9, 9])


def test_read_row_short_input():
    with pytest.raises(BadInputFormat):
        read_row(io.BytesIO(bytes(5)), new_row(2, 3), 2, 3)


def test_read_exact_handles_partial_reads():
    """readinto puede devolver menos bytes de los pedidos; se sigue leyendo."""
    datos = iter([b"ab", b"c", b"de"])

    def readinto(view):
        trozo = next(datos)
        view[:len(trozo)] = trozo
        return len(trozo)

    f = MagicMock()
    f.readinto.side_effect = readinto
    assert read_exact(f, 5) == b"abcde"


def test_read_exact_os_error():
    f = MagicMock()
    f.readinto.side_effect = OSError("disco")
    with pytest.raises(BadInputFormat):
        read_exact(f, 1)


def test_write_row_short_write(short_writer):
    with pytest.raises(BadOutputFile):
        write_row(short_writer(3), bytearray(4))


def test_write_exact_os_error():
    f = MagicMock()
    f.write.side_effect = OSError("lleno")
    with pytest.raises(BadOutputFile) as exc:
        write_exact(f, b"x")
    assert isinstance(exc.value.__cause__, OSError)


def test_copy_id_field():
    f_in = io.BytesIO(b"hola" + b"pixeles")
    f_out = io.BytesIO()
    copy_id_field(f_in, f_out, 4)
    assert f_out.getvalue() == b"hola"
    assert f_in.read() == b"pixeles"


def test_copy_id_field_truncated():
    with pytest.raises(BadInputFormat):
        copy_id_field(io.BytesIO(b"ab"), io.BytesIO(), 3)


def test_copy_trailer_copies_until_exhausted():
    cola = bytes(range(256)) * 1000
    f_out = io.BytesIO()
    assert copy_trailer(io.BytesIO(cola), f_out) == len(cola)
    assert f_out.getvalue() == cola


def test_copy_trailer_empty():
    f_out = io.BytesIO()
    assert copy_trailer(io.BytesIO(), f_out) == 0
    assert f_out.getvalue() == b""


def test_copy_trailer_write_failure(short_writer):
    with pytest.raises(BadOutputFile):
        copy_trailer(io.BytesIO(b"TRUEVISION-XFILE.\0"), short_writer(4))


def test_copy_id_field_short_write(short_writer):
    with pytest.raises(BadOutputFile):
        copy_id_field(io.BytesIO(b"abcd"), short_writer(2), 4)


def test_copy_trailer_read_error():
    """Un OSError leyendo la cola es entrada mala, no fin de archivo."""
    f_in = MagicMock()
    f_in.read.side_effect = OSError("sector defectuoso")
    f_out = io.BytesIO()
    with pytest.raises(BadInputFormat) as exc:
        copy_trailer(f_in, f_out)
    assert isinstance(exc.value.__cause__, OSError)
    assert f_out.getvalue() == b""
