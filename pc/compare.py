"""
Compara dos imágenes TGA con el mismo tamaño y profundidad y reporta:
- porcentaje de píxeles iguales
- diferencia máxima en LSB (sobre todos los componentes)
- si el campo ID y la cola coinciden

Ejemplo:
  python3 pc/compare.py --a vectors/golden/grad_33x17_ref.tga \
    --b vectors/out/grad_33x17.tga
"""
import argparse, os, sys
sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from halfsize.utils import read_tga

def stats(a, b):
    h = len(a); w = len(a[0])
    iguales = 0; dif_max = 0
    total = w*h
    for y in range(h):
        for x in range(w):
            d = max(abs(ca - cb) for ca, cb in zip(a[y][x], b[y][x]))
            if d == 0:
                iguales += 1
            if d > dif_max:
                dif_max = d
    return 100.0*iguales/total, dif_max

def main():
    ap = argparse.ArgumentParser(description="Comparador simple de imágenes TGA.")
    ap.add_argument("--a", required=True, help="imagen A TGA")
    ap.add_argument("--b", required=True, help="imagen B TGA")
    args = ap.parse_args()

    hA, idA, A, colaA = read_tga(args.a)
    hB, idB, B, colaB = read_tga(args.b)

    if (hA.width, hA.height, hA.bpp) != (hB.width, hB.height, hB.bpp):
        print(f"tamaños distintos  A {hA.width}x{hA.height}@{hA.bpp}  B {hB.width}x{hB.height}@{hB.bpp}")
        sys.exit(1)

    pct, dmax = stats(A, B)
    print(f"iguales {pct:.2f}%")
    print(f"dif_max {dmax} LSB")
    print(f"encabezado {'igual' if hA == hB else 'distinto'}")
    print(f"id {'igual' if idA == idB else 'distinto'}  cola {'igual' if colaA == colaB else 'distinta'}")
    print("OK" if dmax == 0 and hA == hB and idA == idB and colaA == colaB else "hay diferencias")

if __name__ == "__main__":
    main()
