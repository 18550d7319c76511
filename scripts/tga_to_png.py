#!/usr/bin/env python3
"""
Convierte un TGA a PNG con Pillow para verlo facil.
Uso:
  python3 scripts/tga_to_png.py salida.tga salida.png
"""

import sys
from PIL import Image

if len(sys.argv) != 3:
    print("uso: tga_to_png.py input.tga output.png")
    sys.exit(1)

with Image.open(sys.argv[1]) as img:
    img.save(sys.argv[2])
    print(f"listo {sys.argv[2]} ({img.width}x{img.height} {img.mode})")
