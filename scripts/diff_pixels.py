#!/usr/bin/env python3
"""
Muestra los pixeles donde A y B difieren y la diferencia por componente.
Uso:
  python3 scripts/diff_pixels.py --a rutaA.tga --b rutaB.tga
"""

import argparse
import os
import sys

# agregar la carpeta raiz del repo al path para poder importar halfsize
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from halfsize.utils import read_tga

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--a", required=True, help="imagen A TGA (golden)")
    ap.add_argument("--b", required=True, help="imagen B TGA (conversor)")
    args = ap.parse_args()

    hA, _, A, _ = read_tga(args.a)
    hB, _, B, _ = read_tga(args.b)
    if (hA.width, hA.height, hA.bpp) != (hB.width, hB.height, hB.bpp):
        print("las imagenes no tienen el mismo tamaño")
        sys.exit(1)

    diffs = []
    for y in range(hA.height):
        for x in range(hA.width):
            va = A[y][x]
            vb = B[y][x]
            if va != vb:
                diffs.append((y, x, va, vb, tuple(b - a for a, b in zip(va, vb))))

    print(f"total pixeles distintos: {len(diffs)}")
    for y, x, va, vb, d in diffs:
        ga = " ".join(f"{c:02x}" for c in va)
        gb = " ".join(f"{c:02x}" for c in vb)
        print(f"(y={y}, x={x}) golden={ga} conv={gb} diff={d}")

if __name__ == "__main__":
    main()
