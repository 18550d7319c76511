"""
Lectura y escritura de filas de pixeles, una fila a la vez.

Una fila es un bytearray con los componentes de cada pixel seguidos:
  pixel i -> row[i*n:(i+1)*n]    (n = componentes por pixel)
La fila guardada siempre tiene ancho par; si el ancho real es impar,
el ultimo pixel se repite en la posicion de relleno.

Aca tambien viven las copias de bytes sin interpretar: el campo ID
que sigue al encabezado y la cola del archivo despues de los pixeles.
"""
import logging

from halfsize.errors import BadInputFormat, BadOutputFile

log = logging.getLogger(__name__)

CHUNK = 64 * 1024


def read_into(f, view):
    """Llena view por completo desde f o falla con BadInputFormat."""
    leidos = 0
    total = len(view)
    while leidos < total:
        try:
            n = f.readinto(view[leidos:])
        except OSError as e:
            raise BadInputFormat(str(e)) from e
        if not n:
            raise BadInputFormat(f"faltan {total - leidos} bytes")
        leidos += n


def read_exact(f, count):
    buf = bytearray(count)
    read_into(f, memoryview(buf))
    return bytes(buf)


def write_exact(f, data):
    """Escribe data completo o falla con BadOutputFile."""
    view = memoryview(data)
    escritos = 0
    while escritos < len(view):
        try:
            n = f.write(view[escritos:])
        except OSError as e:
            raise BadOutputFile(str(e)) from e
        if not n:
            raise BadOutputFile(f"escritura corta, faltan {len(view) - escritos} bytes")
        escritos += n


def row_width(width):
    """Ancho guardado: el par siguiente."""
    return (width + 1) & ~1


def new_row(width, n):
    return bytearray(row_width(width) * n)


def read_row(f, row, width, n):
    """
    Lee width pixeles de n componentes sobre row (se reusa, se pisa).
    Con ancho impar duplica el ultimo pixel en el relleno.
    """
    nbytes = width * n
    read_into(f, memoryview(row)[:nbytes])
    if width & 1:
        row[nbytes:nbytes + n] = row[nbytes - n:nbytes]
    return row


def write_row(f, row):
    write_exact(f, row)


def copy_id_field(f_in, f_out, id_length):
    """Copia los id_length bytes del campo de identificacion (0..255)."""
    if id_length:
        write_exact(f_out, read_exact(f_in, id_length))


def copy_trailer(f_in, f_out):
    """Copia todo lo que queda en f_in hasta que se acaba. Devuelve bytes copiados."""
    total = 0
    while True:
        try:
            bloque = f_in.read(CHUNK)
        except OSError as e:
            raise BadInputFormat(str(e)) from e
        if not bloque:
            break
        write_exact(f_out, bloque)
        total += len(bloque)
    log.debug("cola copiada: %d bytes", total)
    return total
