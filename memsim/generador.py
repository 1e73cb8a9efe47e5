"""Random process files and the saved reports of finished simulations."""

from __future__ import annotations

import random
import re
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from memsim.io_utils import escribir_archivo_procesos
from memsim.proceso import Proceso

if TYPE_CHECKING:
    from memsim.simulacion import Simulacion

_U32_MAX = 2**32 - 1
_DIGITOS = re.compile(r"[0-9]*")

PREFIJO_PROCESOS = "_Procesos("
PREFIJO_SIMULACIONES = "_SimulacionExitosa_"


def generar_procesos_aleatorios(
    cantidad: int, rng: random.Random | None = None
) -> list[Proceso]:
    """Create ``cantidad`` processes named P1, P2, ... with random parameters."""
    rng = rng or random.Random()
    return [
        Proceso(
            nombre=f"P{numero}",
            arribo=rng.randrange(0, 50),
            duracion=rng.randrange(1, 20),
            memoria_requerida=rng.randrange(10, 100),
        )
        for numero in range(1, cantidad + 1)
    ]


def siguiente_numero_archivo(directorio: str | Path, prefijo: str) -> int:
    """One more than the highest leading number among names containing ``prefijo``."""
    maximo = 0
    for entrada in Path(directorio).iterdir():
        nombre = entrada.name
        if prefijo not in nombre:
            continue
        digitos = _DIGITOS.match(nombre).group()
        if digitos and int(digitos) <= _U32_MAX:
            maximo = max(maximo, int(digitos))
    return maximo + 1


def generar_archivo_procesos(
    cantidad: int,
    directorio: str | Path = "Procesos",
    rng: random.Random | None = None,
) -> Path:
    """Write a new ``NN_Procesos(CANTIDAD).txt`` file of random processes."""
    carpeta = Path(directorio)
    carpeta.mkdir(parents=True, exist_ok=True)
    procesos = generar_procesos_aleatorios(cantidad, rng)
    numero = siguiente_numero_archivo(carpeta, PREFIJO_PROCESOS)
    ruta = carpeta / f"{numero:02}_Procesos({cantidad}).txt"
    escribir_archivo_procesos(ruta, procesos)
    print(f"Archivo de procesos '{ruta}' generado exitosamente.")
    return ruta


def guardar_simulacion(
    simulacion: Simulacion,
    directorio: str | Path = "Simulaciones",
    ahora: datetime | None = None,
) -> Path:
    """Save settings, results and event log as ``NN_SimulacionExitosa_(N)_(STRATEGY).txt``."""
    carpeta = Path(directorio)
    carpeta.mkdir(parents=True, exist_ok=True)
    ahora = ahora or datetime.now()

    configuracion = simulacion.configuracion
    numero = siguiente_numero_archivo(carpeta, PREFIJO_SIMULACIONES)
    estrategia = str(configuracion.estrategia)
    ruta = carpeta / (
        f"{numero:02}_SimulacionExitosa_({len(simulacion.procesos)})_({estrategia}).txt"
    )

    lineas = [
        "=== Especificaciones de Configuración ===",
        f"Fecha y Hora: {ahora.strftime('%Y-%m-%d %H:%M:%S')}",
        f"Tamaño de Memoria: {configuracion.tamanio_memoria}",
        f"Estrategia: {estrategia}",
        f"Tiempo de Selección: {configuracion.tiempo_seleccion}",
        f"Tiempo de Carga: {configuracion.tiempo_carga}",
        f"Tiempo de Liberación: {configuracion.tiempo_liberacion}",
        "",
        "=== Procesos Realizados ===",
    ]
    for proceso in simulacion.procesos:
        retorno = proceso.tiempo_retorno()
        if retorno is None:
            lineas.append(f"Proceso {proceso.nombre}: No completado")
        else:
            lineas.append(f"Proceso {proceso.nombre}: Tiempo de Retorno = {retorno}")
    lineas += [
        "",
        "=== Resultados ===",
        f"Tiempo Medio de Retorno: {simulacion.tiempo_medio_retorno():.2f}",
        f"Índice de Fragmentación Externa: {simulacion.fragmentacion_externa():.2f}%",
        "",
        "=== Log de Eventos ===",
        *simulacion.log_eventos,
    ]

    with open(ruta, "w", encoding="utf-8") as archivo:
        archivo.write("\n".join(lineas) + "\n")

    print(f"Archivo de simulación '{ruta}' guardado exitosamente.")
    return ruta