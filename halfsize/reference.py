"""
Modelo de referencia de la reduccion a la mitad con filtro caja 2x2.

Trabaja sobre la imagen entera en memoria, sin filas reusadas ni streaming.
Sirve como oraculo: lo que sale aqui tiene que coincidir byte a byte con
convert.py.

  - columna impar: el ultimo pixel de cada fila se usa dos veces
  - fila impar: la ultima fila se promedia consigo misma
  - redondeo: (suma + 2) >> 2

Ejemplo:
  python3 -m halfsize.reference --in vectors/patterns/grad_33x17.tga \
    --out vectors/golden/grad_33x17_ref.tga \
    --out-pgm vectors/golden/grad_33x17_ref.pgm
"""
import argparse

from halfsize.tga import derive_output_header
from halfsize.utils import encode_tga, read_tga, write_pgm_u8


def halfsize_ref(img):
    """
    img: matriz [fila][columna] de tuplas de componentes 0..255
    Retorna la imagen a la mitad (techo en ancho y alto).
    """
    H, W = len(img), len(img[0])
    n = len(img[0][0])
    out = []
    for yo in range((H + 1) // 2):
        y0 = 2 * yo
        y1 = y0 + 1 if y0 + 1 < H else y0
        fila = []
        for xo in range((W + 1) // 2):
            x0 = 2 * xo
            x1 = x0 + 1 if x0 + 1 < W else x0
            fila.append(tuple(
                (img[y0][x0][c] + img[y0][x1][c] + img[y1][x0][c] + img[y1][x1][c] + 2) >> 2
                for c in range(n)
            ))
        out.append(fila)
    return out


def halfsize_ref_tga(header, id_field, img, trailer):
    """Arma el archivo TGA completo que deberia producir el conversor."""
    out_header = derive_output_header(header)
    return encode_tga(
        halfsize_ref(img),
        id_field=id_field,
        trailer=trailer,
        x_origin=out_header.x_origin,
        y_origin=out_header.y_origin,
        direction=out_header.direction,
        attribute_bits=out_header.attribute_bits,
    )


def main():
    ap = argparse.ArgumentParser(description="Modelo de referencia de halfsize (TGA).")
    ap.add_argument("--in", required=True, help="TGA de entrada")
    ap.add_argument("--out", required=True, help="TGA de salida")
    ap.add_argument("--out-pgm", default=None, help="PGM de salida (primer componente)")
    args = ap.parse_args()

    header, id_field, img, trailer = read_tga(args.__dict__["in"])
    with open(args.out, "wb") as f:
        f.write(halfsize_ref_tga(header, id_field, img, trailer))
    if args.out_pgm:
        write_pgm_u8(args.out_pgm, halfsize_ref(img))
    print("listo modelo ejecutado")


if __name__ == "__main__":
    main()
