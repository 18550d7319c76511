#!/usr/bin/env python3
"""
Convierte un PNG (o cualquier imagen que abra Pillow) a TGA sin compresion.
Modos:
  L     gris 8 bpp
  LA    gris con alfa 16 bpp
  RGB   color 24 bpp
  RGBA  color con alfa 32 bpp
Uso:
  python3 scripts/png_to_tga.py input.png output.tga [modo]
"""

import sys
from PIL import Image

MODOS = ("L", "LA", "RGB", "RGBA")

if len(sys.argv) not in (3, 4):
    print("uso: png_to_tga.py input.png output.tga [L|LA|RGB|RGBA]")
    sys.exit(1)

inp = sys.argv[1]
out = sys.argv[2]
modo = sys.argv[3] if len(sys.argv) == 4 else "RGB"
if modo not in MODOS:
    print(f"modo desconocido {modo}")
    sys.exit(1)

with Image.open(inp) as img:
    img = img.convert(modo)
    img.save(out, format="TGA", rle=False)

print(f"listo {out} ({img.width}x{img.height} {modo})")
