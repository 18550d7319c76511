"""
Encabezado TGA de 18 bytes: decodificar, validar, derivar y escribir.

Formato (little-endian, sin relleno):
  0  idLength        u8
  1  colorMapType    u8   0 = sin mapa
  2  imageType       u8   2 = color verdadero, 3 = gris (sin compresion)
  3  cmap offset     u16
  5  cmap size       u16
  7  cmap bpp        u8
  8  xOrigin         u16
  10 yOrigin         u16
  12 width           u16
  14 height          u16
  16 bpp             u8
  17 descriptor      u8   bits 0-3 atributo, 4 reservado, 5 direccion, 6-7 interleave
"""
import logging
import struct
from dataclasses import dataclass, replace

from halfsize.errors import BadInputFormat, UnsupportedInputFormat
from halfsize.rows import read_exact, write_exact

log = logging.getLogger(__name__)

HEADER_SIZE = 18
_LAYOUT = struct.Struct("<BBBHHBHHHHBB")

COLOR_MAP_NONE = 0
TYPE_TRUE_COLOR = 2
TYPE_GRAYSCALE = 3

# bpp -> (componentes por pixel, imageType requerido)
FORMATS = {
    8: (1, TYPE_GRAYSCALE),
    16: (2, TYPE_GRAYSCALE),
    24: (3, TYPE_TRUE_COLOR),
    32: (4, TYPE_TRUE_COLOR),
}


@dataclass(frozen=True)
class Header:
    id_length: int = 0
    color_map_type: int = COLOR_MAP_NONE
    image_type: int = TYPE_GRAYSCALE
    cmap_offset: int = 0
    cmap_size: int = 0
    cmap_bpp: int = 0
    x_origin: int = 0
    y_origin: int = 0
    width: int = 0
    height: int = 0
    bpp: int = 8
    attribute_bits: int = 0
    reserved: int = 0
    direction: int = 0
    interleave: int = 0


def decode_header(data):
    """18 bytes -> Header. El descriptor se separa con shift y mascara."""
    if len(data) != HEADER_SIZE:
        raise BadInputFormat(f"encabezado de {len(data)} bytes, se esperaban {HEADER_SIZE}")
    (id_length, cmap_type, image_type, cmap_offset, cmap_size, cmap_bpp,
     x_origin, y_origin, width, height, bpp, desc) = _LAYOUT.unpack(data)
    return Header(
        id_length=id_length,
        color_map_type=cmap_type,
        image_type=image_type,
        cmap_offset=cmap_offset,
        cmap_size=cmap_size,
        cmap_bpp=cmap_bpp,
        x_origin=x_origin,
        y_origin=y_origin,
        width=width,
        height=height,
        bpp=bpp,
        attribute_bits=desc & 0x0F,
        reserved=(desc >> 4) & 0x01,
        direction=(desc >> 5) & 0x01,
        interleave=(desc >> 6) & 0x03,
    )


def encode_header(h):
    """Header -> 18 bytes."""
    desc = ((h.attribute_bits & 0x0F)
            | (h.reserved & 0x01) << 4
            | (h.direction & 0x01) << 5
            | (h.interleave & 0x03) << 6)
    return _LAYOUT.pack(
        h.id_length, h.color_map_type, h.image_type,
        h.cmap_offset, h.cmap_size, h.cmap_bpp,
        h.x_origin, h.y_origin, h.width, h.height,
        h.bpp, desc,
    )


def parse_header(f):
    h = decode_header(read_exact(f, HEADER_SIZE))
    log.debug("encabezado de entrada %s", h)
    return h


def write_header(h, f):
    write_exact(f, encode_header(h))


def component_count(h):
    """Componentes por pixel segun bpp; el imageType tiene que coincidir."""
    if h.bpp not in FORMATS:
        raise UnsupportedInputFormat(f"bpp {h.bpp}")
    n, tipo = FORMATS[h.bpp]
    if h.image_type != tipo:
        raise UnsupportedInputFormat(f"imageType {h.image_type} con bpp {h.bpp}")
    return n


def validate_header(h):
    """
    Revisa el encabezado en orden fijo; el primer problema decide el error.
    Devuelve el mismo encabezado si todo esta bien.
    """
    if h.color_map_type != COLOR_MAP_NONE:
        raise UnsupportedInputFormat("mapa de color presente")
    if h.cmap_offset != 0 or h.cmap_size != 0 or h.cmap_bpp != 0:
        raise BadInputFormat("especificacion de mapa de color no nula")
    if h.width == 0 or h.height == 0:
        raise BadInputFormat(f"dimensiones {h.width}x{h.height}")
    if h.bpp < 8 or h.bpp > 32 or h.bpp % 8:
        raise UnsupportedInputFormat(f"bpp {h.bpp}")
    if h.attribute_bits not in (0, 8):
        raise UnsupportedInputFormat(f"{h.attribute_bits} bits de atributo")
    if h.reserved != 0:
        raise BadInputFormat("bit reservado del descriptor activo")
    if h.interleave != 0:
        raise UnsupportedInputFormat(f"interleave {h.interleave}")
    component_count(h)
    return h


def derive_output_header(h):
    # dimensiones con techo, origen con piso
    out = replace(
        h,
        width=(h.width + 1) >> 1,
        height=(h.height + 1) >> 1,
        x_origin=h.x_origin >> 1,
        y_origin=h.y_origin >> 1,
    )
    log.debug("encabezado de salida %s", out)
    return out
