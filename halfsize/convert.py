"""
Reduce una imagen TGA sin compresion a la mitad de ancho y alto.

Uso:
  python3 -m halfsize.convert entrada.tga salida.tga

Codigos de salida:
  0 ok, 3 argumentos, 4 no abre la entrada, 5 no abre/escribe la salida,
  6 entrada mal formada, 7 formato no soportado

El archivo se procesa en streaming: encabezado, campo ID, pares de filas
y al final la cola del archivo copiada tal cual.
"""
import argparse
import logging
import os
import sys

from halfsize.box_filter import reduce_rows
from halfsize.errors import BadArgs, BadInputFile, BadOutputFile, ConversionError, ExitStatus
from halfsize.rows import copy_id_field, copy_trailer, new_row, read_row, write_row
from halfsize.tga import (component_count, derive_output_header, parse_header,
                          validate_header, write_header)

log = logging.getLogger(__name__)


def convert_rows(f_in, f_out, width, height, n):
    """Todos los pares de filas; con alto impar la ultima fila se promedia consigo misma."""
    fila0 = new_row(width, n)
    fila1 = new_row(width, n)
    salida = bytearray(len(fila0) // 2)

    for _ in range(height >> 1):
        read_row(f_in, fila0, width, n)
        read_row(f_in, fila1, width, n)
        reduce_rows(fila0, fila1, salida, n)
        write_row(f_out, salida)

    if height & 1:
        read_row(f_in, fila0, width, n)
        reduce_rows(fila0, fila0, salida, n)
        write_row(f_out, salida)


def convert_stream(f_in, f_out):
    """Conversion completa entre dos streams binarios ya abiertos."""
    entrada = validate_header(parse_header(f_in))
    salida = derive_output_header(entrada)
    write_header(salida, f_out)

    copy_id_field(f_in, f_out, entrada.id_length)

    n = component_count(entrada)
    log.debug("%d componentes por pixel, %dx%d -> %dx%d",
              n, entrada.width, entrada.height, salida.width, salida.height)
    convert_rows(f_in, f_out, entrada.width, entrada.height, n)

    copy_trailer(f_in, f_out)
    return entrada, salida


def convert(in_path, out_path):
    """Abre los dos archivos y convierte; los cierra siempre, tambien con error."""
    try:
        f_in = open(in_path, "rb")
    except OSError as e:
        raise BadInputFile(str(e)) from e
    with f_in:
        try:
            f_out = open(out_path, "wb")
        except OSError as e:
            raise BadOutputFile(str(e)) from e
        try:
            resultado = convert_stream(f_in, f_out)
        except BaseException:
            # el primer error manda; una falla al cerrar solo se registra
            try:
                f_out.close()
            except OSError:
                log.debug("falla al cerrar la salida tras un error previo", exc_info=True)
            raise
        try:
            f_out.close()
        except OSError as e:
            # flush final al cerrar
            raise BadOutputFile(str(e)) from e
        return resultado


class ArgumentParser(argparse.ArgumentParser):
    """argparse que reporta mal uso como BadArgs en vez de salir con 2."""

    def error(self, message):
        raise BadArgs(message)


def log_level(nombre):
    """Nombre de nivel -> numero; cualquier otra cosa es WARNING."""
    nivel = logging.getLevelName(nombre.upper())
    return nivel if isinstance(nivel, int) else logging.WARNING


def setup_logging():
    logging.basicConfig(
        level=log_level(os.environ.get("HALFSIZE_LOG", "WARNING")),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None):
    setup_logging()
    if argv is None:
        argv = sys.argv[1:]
    ap = ArgumentParser(prog="halfsize", add_help=False,
                        description="Reduce una imagen TGA a la mitad con filtro caja 2x2.")
    ap.add_argument("entrada", help="TGA de entrada")
    ap.add_argument("salida", help="TGA de salida")
    try:
        # todo es posicional, aunque empiece con "-"
        args = ap.parse_args(["--", *argv])
        _, salida = convert(args.entrada, args.salida)
    except ConversionError as e:
        print(e.render(), file=sys.stderr)
        return int(e.status)
    print(f"listo {args.salida} ({salida.width}x{salida.height})")
    return int(ExitStatus.OK)


if __name__ == "__main__":
    sys.exit(main())
