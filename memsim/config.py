"""Simulation settings and the interactive prompts that collect them."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

Lector = Callable[[], str]
Escritor = Callable[[str], None]

_U32_MAX = 2**32 - 1
_NUMERO = re.compile(r"\+?[0-9]+")


class Estrategia(Enum):
    """Partition allocation strategies."""

    FIRST_FIT = "First-Fit"
    BEST_FIT = "Best-Fit"
    WORST_FIT = "Worst-Fit"
    NEXT_FIT = "Next-Fit"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def desde_opcion(cls, opcion: str) -> Estrategia:
        """Map a menu option ("1" to "4") to a strategy."""
        opciones = {
            "1": cls.FIRST_FIT,
            "2": cls.BEST_FIT,
            "3": cls.WORST_FIT,
            "4": cls.NEXT_FIT,
        }
        try:
            return opciones[opcion.strip()]
        except KeyError:
            raise ValueError(f"Opción no válida: {opcion.strip()}") from None

    @classmethod
    def desde_nombre(cls, nombre: str) -> Estrategia:
        """Look a strategy up by name, such as "first-fit"."""
        buscado = nombre.strip().lower()
        for estrategia in cls:
            if estrategia.value.lower() == buscado:
                return estrategia
        raise ValueError(_mensaje_estrategia_invalida(nombre.strip()))


def _mensaje_estrategia_invalida(nombre: object) -> str:
    validas = [e.value.lower() for e in Estrategia]
    return f"Estrategia no válida: {nombre}. Las estrategias válidas son: {validas}"


class ConfiguracionInvalida(ValueError):
    """Raised when simulation settings make no sense."""


@dataclass
class ConfiguracionSimulacion:
    """Memory size, allocation strategy and the overhead times of a run."""

    tamanio_memoria: int
    estrategia: Estrategia
    tiempo_seleccion: int
    tiempo_carga: int
    tiempo_liberacion: int

    def validar(self) -> None:
        """Raise ConfiguracionInvalida if a size or time is zero or the strategy is unknown."""
        if self.tamanio_memoria == 0:
            raise ConfiguracionInvalida("El tamaño de la memoria no puede ser 0.")
        if self.tiempo_seleccion == 0:
            raise ConfiguracionInvalida(
                "El tiempo de selección de partición no puede ser 0."
            )
        if self.tiempo_carga == 0:
            raise ConfiguracionInvalida("El tiempo de carga no puede ser 0.")
        if self.tiempo_liberacion == 0:
            raise ConfiguracionInvalida("El tiempo de liberación no puede ser 0.")
        if not isinstance(self.estrategia, Estrategia):
            raise ConfiguracionInvalida(_mensaje_estrategia_invalida(self.estrategia))

    def resumen(self) -> str:
        """A human-readable summary of the settings."""
        return "\n".join(
            [
                "--- Resumen de la Configuración ---",
                f"Tamaño de la memoria: {self.tamanio_memoria} unidades",
                f"Estrategia seleccionada: {self.estrategia}",
                f"Tiempo de selección de partición: {self.tiempo_seleccion} unidades",
                f"Tiempo de carga: {self.tiempo_carga} unidades",
                f"Tiempo de liberación: {self.tiempo_liberacion} unidades",
                "-----------------------------------",
            ]
        )


def _leer_stdin() -> str:
    return sys.stdin.readline()


def _escribir_stdout(texto: str) -> None:
    sys.stdout.write(texto)
    sys.stdout.flush()


def _leer_linea(leer: Lector) -> str:
    linea = leer()
    if linea == "":
        raise EOFError("Fin de la entrada.")
    return linea.strip()


def capturar_numero(
    mensaje: str, leer: Lector | None = None, escribir: Escritor | None = None
) -> int:
    """Prompt until a non-negative 32-bit integer is entered."""
    leer = leer or _leer_stdin
    escribir = escribir or _escribir_stdout
    while True:
        escribir(f"{mensaje}: ")
        entrada = _leer_linea(leer)
        if _NUMERO.fullmatch(entrada):
            numero = int(entrada)
            if numero <= _U32_MAX:
                return numero
        escribir("Entrada inválida. Por favor, ingrese un número válido.\n")


def capturar_estrategia(
    leer: Lector | None = None, escribir: Escritor | None = None
) -> Estrategia:
    """Prompt until a valid strategy option is chosen."""
    leer = leer or _leer_stdin
    escribir = escribir or _escribir_stdout
    while True:
        escribir("Opción: ")
        entrada = _leer_linea(leer)
        try:
            return Estrategia.desde_opcion(entrada)
        except ValueError:
            escribir("Opción no válida. Intente nuevamente.\n")


def capturar_configuracion(
    leer: Lector | None = None, escribir: Escritor | None = None
) -> ConfiguracionSimulacion:
    """Ask the user for every simulation setting."""
    escribir = escribir or _escribir_stdout

    escribir("Ingrese el tamaño de la memoria física disponible:\n")
    tamanio_memoria = capturar_numero("Tamaño de la memoria", leer, escribir)

    escribir("Seleccione la estrategia de asignación de particiones:\n")
    for opcion, estrategia in enumerate(Estrategia, start=1):
        escribir(f"{opcion}. {estrategia}\n")
    estrategia = capturar_estrategia(leer, escribir)

    escribir("Ingrese el tiempo de selección de partición:\n")
    tiempo_seleccion = capturar_numero("Tiempo de selección", leer, escribir)

    escribir("Ingrese el tiempo de carga promedio:\n")
    tiempo_carga = capturar_numero("Tiempo de carga", leer, escribir)

    escribir("Ingrese el tiempo de liberación de la partición:\n")
    tiempo_liberacion = capturar_numero("Tiempo de liberación", leer, escribir)

    return ConfiguracionSimulacion(
        tamanio_memoria=tamanio_memoria,
        estrategia=estrategia,
        tiempo_seleccion=tiempo_seleccion,
        tiempo_carga=tiempo_carga,
        tiempo_liberacion=tiempo_liberacion,
    )