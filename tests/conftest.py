"""Fixtures compartidas: armado de TGA en memoria y streams que fallan."""

from __future__ import annotations

import io
import random

import pytest

from halfsize.utils import encode_tga


class ShortWriter(io.RawIOBase):
    """Stream de salida que acepta limit bytes y despues no escribe nada."""

    def __init__(self, limit: int):
        self.limit = limit
        self.data = bytearray()

    def writable(self) -> bool:
        return True

    def write(self, b) -> int:
        room = self.limit - len(self.data)
        chunk = bytes(b[:max(0, room)])
        self.data.extend(chunk)
        return len(chunk)


def random_image(w: int, h: int, n: int, seed: int = 0):
    rnd = random.Random(seed)
    return [[tuple(rnd.randrange(256) for _ in range(n)) for _ in range(w)] for _ in range(h)]


@pytest.fixture
def tga_stream():
    """Devuelve una funcion que arma un BytesIO con un TGA valido."""

    def _make(img, **kw):
        return io.BytesIO(encode_tga(img, **kw))

    return _make


@pytest.fixture
def short_writer():
    return ShortWriter


@pytest.fixture
def make_image():
    """Imagen aleatoria reproducible: make_image(w, h, n, seed=0)."""
    return random_image
