"""
Filtro caja 2x2: dos filas de entrada -> una fila de salida a mitad de ancho.

Cada componente de salida es la suma de los cuatro pixeles del bloque
mas 2 (la mitad del divisor), corrida 2 bits:

    out = (a0 + a1 + b0 + b1 + 2) >> 2

Todo en enteros, redondeo al mas cercano con empates hacia arriba.
"""

BIAS = 2


def reduce_rows(row_a, row_b, out_row, n):
    """
    row_a, row_b: filas de igual largo con cantidad par de pixeles
    out_row: fila de salida con la mitad de pixeles (se pisa)
    n: componentes por pixel
    Para la ultima fila de un alto impar se llama con row_a is row_b.
    """
    assert len(row_a) == len(row_b)
    assert len(row_a) % (2 * n) == 0
    assert len(out_row) * 2 == len(row_a)

    paso = 2 * n
    o = 0
    for i in range(0, len(row_a), paso):
        for c in range(i, i + n):
            acc = BIAS + row_a[c] + row_a[c + n] + row_b[c] + row_b[c + n]
            out_row[o] = acc >> 2
            o += 1
    return out_row
