"""
Errores de la conversion.

Cada tipo de error trae su codigo de salida y su mensaje de una linea.
Solo el punto de entrada (convert.main) los convierte en codigo de proceso.

  codigo | error
  -------+------------------------
     3   | BadArgs
     4   | BadInputFile
     5   | BadOutputFile
     6   | BadInputFormat
     7   | UnsupportedInputFormat
"""
from enum import IntEnum


class ExitStatus(IntEnum):
    OK = 0
    BAD_ARGS = 3
    BAD_INPUT_FILE = 4
    BAD_OUTPUT_FILE = 5
    BAD_INPUT_FORMAT = 6
    UNSUPPORTED_INPUT_FORMAT = 7


class ConversionError(Exception):
    """Base de todos los errores; cada subclase fija status y mensaje."""
    status = None
    mensaje = None

    def __init__(self, detalle=None):
        super().__init__(detalle or self.mensaje)
        self.detalle = detalle

    def render(self):
        """Linea de diagnostico para stderr."""
        if self.detalle:
            return f"{self.mensaje}: {self.detalle}"
        return self.mensaje


class BadArgs(ConversionError):
    status = ExitStatus.BAD_ARGS
    mensaje = "uso: halfsize <entrada.tga> <salida.tga>"


class BadInputFile(ConversionError):
    status = ExitStatus.BAD_INPUT_FILE
    mensaje = "no se pudo abrir el archivo de entrada"


class BadOutputFile(ConversionError):
    status = ExitStatus.BAD_OUTPUT_FILE
    mensaje = "no se pudo abrir o escribir el archivo de salida"


class BadInputFormat(ConversionError):
    status = ExitStatus.BAD_INPUT_FORMAT
    mensaje = "no se pudo leer el archivo de entrada"


class UnsupportedInputFormat(ConversionError):
    status = ExitStatus.UNSUPPORTED_INPUT_FORMAT
    mensaje = "formato de entrada no soportado"
