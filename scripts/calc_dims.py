"""
Lee el encabezado de un TGA y muestra el tamaño de salida (mitad con techo)
y el origen de salida (mitad con piso).

Ejemplo:
  python3 scripts/calc_dims.py --in vectors/patterns/grad_33x17.tga
"""
import argparse, os, sys
sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from halfsize.errors import ConversionError
from halfsize.tga import derive_output_header, parse_header, validate_header

def main():
    ap = argparse.ArgumentParser(description="Calcula W_out H_out de un TGA.")
    ap.add_argument("--in", required=True)
    args = ap.parse_args()
    try:
        with open(args.__dict__["in"], "rb") as f:
            h = validate_header(parse_header(f))
    except (OSError, ConversionError) as e:
        print(f"error leyendo encabezado: {e}")
        sys.exit(1)
    o = derive_output_header(h)
    print(f"{o.width} {o.height}  origen {o.x_origin} {o.y_origin}")
if __name__ == "__main__":
    main()
