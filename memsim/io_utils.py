"""Reading and writing process files and other plain-text files."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from memsim.proceso import Proceso

_U32_MAX = 2**32 - 1
_NUMERO = re.compile(r"\+?[0-9]+")


class ErrorArchivoProcesos(Exception):
    """Raised when a process file cannot be opened, read or parsed."""

    def __init__(self, mensaje: str, linea: int | None = None) -> None:
        super().__init__(mensaje)
        self.linea = linea


def _parsear_u32(texto: str) -> int | None:
    if not _NUMERO.fullmatch(texto):
        return None
    valor = int(texto)
    return valor if valor <= _U32_MAX else None


def _parsear_linea(linea: str, numero: int) -> Proceso:
    partes = linea.strip().split(",")
    if len(partes) != 4:
        raise ErrorArchivoProcesos(
            f"Error de formato en la línea {numero}: "
            "se esperaban 4 columnas separadas por comas.",
            numero,
        )
    nombre, arribo_str, duracion_str, memoria_str = partes
    campos = (
        ("el instante de arribo", arribo_str),
        ("la duración", duracion_str),
        ("la memoria requerida", memoria_str),
    )
    valores = []
    for descripcion, texto in campos:
        valor = _parsear_u32(texto)
        if valor is None:
            raise ErrorArchivoProcesos(
                f"Error de formato en la línea {numero}: {descripcion} "
                f"'{texto}' no es un número válido.",
                numero,
            )
        valores.append(valor)
    arribo, duracion, memoria = valores
    return Proceso(nombre, arribo, duracion, memoria)


def leer_archivo_procesos(ruta: str | Path) -> list[Proceso]:
    """Read one process per line: ``nombre,arribo,duracion,memoria``."""
    try:
        archivo = open(ruta, "rb")
    except OSError:
        raise ErrorArchivoProcesos(f"No se pudo abrir el archivo: {ruta}") from None
    procesos = []
    with archivo:
        for numero, crudo in enumerate(archivo, start=1):
            try:
                linea = crudo.decode("utf-8")
            except UnicodeDecodeError:
                raise ErrorArchivoProcesos(
                    f"Error al leer la línea {numero} en el archivo.", numero
                ) from None
            procesos.append(_parsear_linea(linea, numero))
    return procesos


def escribir_archivo_procesos(ruta: str | Path, procesos: Iterable[Proceso]) -> None:
    """Write processes in the format read by ``leer_archivo_procesos``."""
    with open(ruta, "w", encoding="utf-8") as archivo:
        for proceso in procesos:
            archivo.write(
                f"{proceso.nombre},{proceso.arribo},"
                f"{proceso.duracion},{proceso.memoria_requerida}\n"
            )


def agregar_linea(ruta: str | Path, contenido: str) -> None:
    """Append ``contenido`` plus a newline, creating the file if needed."""
    with open(ruta, "a", encoding="utf-8") as archivo:
        archivo.write(f"{contenido}\n")


def listar_archivos(directorio: str | Path) -> list[str]:
    """Names of the regular files in ``directorio``, sorted."""
    return sorted(entrada.name for entrada in Path(directorio).iterdir() if entrada.is_file())