"""
Corre el modelo de referencia y el conversor para cada fila de
vectors/manifest.csv y compara las salidas byte a byte.

CSV por fila:
  name,in_path,out_ref,out_conv
"""
import csv, subprocess, sys

def run_model(in_path, out_ref):
    cmd = [sys.executable, "-m", "halfsize.reference", "--in", in_path, "--out", out_ref]
    subprocess.check_call(cmd)

def run_convert(in_path, out_conv):
    cmd = [sys.executable, "-m", "halfsize.convert", in_path, out_conv]
    subprocess.check_call(cmd)

def same_bytes(a, b):
    with open(a, "rb") as fa, open(b, "rb") as fb:
        return fa.read() == fb.read()

def main():
    ok = 0; total = 0
    with open("vectors/manifest.csv", newline="") as f:
        for row in csv.reader(f):
            if not row or row[0].startswith("#"):
                continue
            total += 1
            name, in_path, out_ref, out_conv = row
            print(f"-> procesando {name}")
            run_model(in_path, out_ref)
            run_convert(in_path, out_conv)
            if same_bytes(out_ref, out_conv):
                print(f"listo {name}")
                ok += 1
            else:
                print(f"DIFERENCIAS en {name}")
    print(f"golden coincidentes {ok} de {total}")
    if ok != total:
        sys.exit(1)
if __name__ == "__main__":
    try:
        main()
    except (OSError, subprocess.CalledProcessError) as e:
        print("error al generar golden", e)
        sys.exit(1)
