"""
Utilidades para trabajar con imagenes TGA completas en memoria.

Solo para herramientas y pruebas; el conversor (convert.py) nunca carga
la imagen entera.

Una imagen es una matriz [fila][columna] de tuplas de componentes, en el
mismo orden en que estan guardadas en el archivo (sin voltear filas ni
reordenar canales).

  encode_tga   | matriz -> bytes TGA
  decode_tga   | bytes TGA -> (encabezado, campo ID, matriz, cola)
  read_tga     | lee un .tga y lo decodifica
  write_tga    | codifica y escribe un .tga
  write_pgm_u8 | guarda el primer componente en PGM para verlo facil
"""
from halfsize.errors import BadInputFormat
from halfsize.tga import (FORMATS, HEADER_SIZE, Header, component_count,
                          decode_header, encode_header, validate_header)

# componentes -> (bpp, imageType)
BY_COMPONENTS = {n: (bpp, tipo) for bpp, (n, tipo) in FORMATS.items()}


def encode_tga(img, id_field=b"", trailer=b"", x_origin=0, y_origin=0,
               direction=0, attribute_bits=None):
    h = len(img)
    w = len(img[0])
    n = len(img[0][0])
    bpp, tipo = BY_COMPONENTS[n]
    if attribute_bits is None:
        # el componente extra de 16 y 32 bpp es alfa
        attribute_bits = 8 if n in (2, 4) else 0
    header = Header(
        id_length=len(id_field),
        image_type=tipo,
        x_origin=x_origin,
        y_origin=y_origin,
        width=w,
        height=h,
        bpp=bpp,
        attribute_bits=attribute_bits,
        direction=direction,
    )
    buf = bytearray(encode_header(header))
    buf.extend(id_field)
    for fila in img:
        for px in fila:
            buf.extend(px)
    buf.extend(trailer)
    return bytes(buf)


def decode_tga(data):
    header = validate_header(decode_header(data[:HEADER_SIZE]))
    n = component_count(header)
    w, h = header.width, header.height
    pos = HEADER_SIZE
    id_field = data[pos:pos + header.id_length]
    pos += header.id_length
    fin = pos + w * h * n
    if len(data) < fin:
        raise BadInputFormat("el tamaño del archivo no alcanza para los pixeles")
    img = []
    for r in range(h):
        fila = []
        for c in range(w):
            i = pos + (r * w + c) * n
            fila.append(tuple(data[i:i + n]))
        img.append(fila)
    return header, id_field, img, data[fin:]


def read_tga(path):
    """Lee un TGA y lo devuelve como (encabezado, campo ID, matriz, cola)."""
    with open(path, "rb") as f:
        return decode_tga(f.read())


def write_tga(path, img, **kw):
    """Escribe una matriz como TGA sin compresion."""
    with open(path, "wb") as f:
        f.write(encode_tga(img, **kw))


def write_pgm_u8(path, img):
    """Guarda el primer componente en PGM binario (P5). Sirve para visualizar rapido."""
    h = len(img)
    w = len(img[0])
    header = f"P5\n{w} {h}\n255\n".encode("ascii")
    body = bytearray()
    for fila in img:
        body.extend(px[0] for px in fila)
    with open(path, "wb") as f:
        f.write(header + body)
