"""
Genera imagenes de prueba y las guarda como TGA sin compresion.

Patrones disponibles:
  - grad     gradiente horizontal de 0 a 255 (todos los componentes)
  - checker  damero blanco y negro

Profundidades: 8 y 16 bpp (gris, 16 con alfa), 24 y 32 bpp (color, 32 con alfa).

Ejemplos:
  python3 -m halfsize.img2tga --w 33 --h 17 --bpp 24 --pattern grad --out vectors/patterns/grad_33x17.tga
"""
import argparse

from halfsize.tga import FORMATS
from halfsize.utils import write_tga


def gen_grad(w, h, n=1):
    """Gradiente horizontal de 0 a 255."""
    img = []
    for y in range(h):
        fila = []
        for x in range(w):
            val = int(255 * x / max(1, w-1))
            fila.append((val,) * n)
        img.append(fila)
    return img


def gen_checker(w, h, n=1, sz=8):
    """Damero blanco y negro con tamaño de celda sz."""
    img = []
    for y in range(h):
        fila = []
        for x in range(w):
            c = 255 if ((x//sz + y//sz) % 2) == 0 else 0
            fila.append((c,) * n)
        img.append(fila)
    return img


def main():
    ap = argparse.ArgumentParser(description="Genera un TGA de prueba.")
    ap.add_argument("--w", type=int, required=True, help="ancho de la imagen")
    ap.add_argument("--h", type=int, required=True, help="alto de la imagen")
    ap.add_argument("--bpp", type=int, choices=sorted(FORMATS), default=8, help="bits por pixel")
    ap.add_argument("--pattern", choices=["grad","checker"], default="grad", help="tipo de patrón")
    ap.add_argument("--out", required=True, help="ruta de salida .tga")
    args = ap.parse_args()

    n = FORMATS[args.bpp][0]
    img = gen_grad(args.w, args.h, n) if args.pattern=="grad" else gen_checker(args.w, args.h, n)
    write_tga(args.out, img)
    print("listo imagen TGA generada")


if __name__ == "__main__":
    main()
