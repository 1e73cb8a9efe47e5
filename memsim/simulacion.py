"""Event-driven simulation of dynamic partition allocation."""

from __future__ import annotations

import heapq
import itertools
import math
from collections.abc import Iterable
from dataclasses import dataclass, replace
from pathlib import Path

from memsim.config import ConfiguracionSimulacion
from memsim.estrategias import crear_estrategia
from memsim.generador import guardar_simulacion
from memsim.particion import Particion
from memsim.proceso import Proceso


@dataclass(eq=False)
class _Llegada:
    proceso: Proceso


@dataclass(eq=False)
class _Fin:
    proceso: Proceso
    particion: Particion
    indice: int


def combinar_particiones(particiones: list[Particion]) -> None:
    """Merge neighbouring free partitions in place."""
    fusionadas: list[Particion] = []
    for particion in particiones:
        if fusionadas and particion.esta_libre() and fusionadas[-1].esta_libre():
            fusionadas[-1].tamano += particion.tamano
        else:
            fusionadas.append(particion)
    particiones[:] = fusionadas


class Simulacion:
    """Runs processes through memory with the configured allocation strategy."""

    def __init__(
        self, configuracion: ConfiguracionSimulacion, procesos: Iterable[Proceso]
    ) -> None:
        self.configuracion = configuracion
        self.procesos = [replace(p) for p in procesos]
        for proceso in self.procesos:
            if proceso.memoria_requerida > configuracion.tamanio_memoria:
                raise ValueError(
                    f"El proceso {proceso.nombre} requiere {proceso.memoria_requerida} "
                    f"unidades y la memoria solo tiene {configuracion.tamanio_memoria}."
                )
        self.particiones = [Particion(0, configuracion.tamanio_memoria)]
        self.estrategia = crear_estrategia(configuracion.estrategia)
        self.tiempo_actual = 0
        self.log_eventos: list[str] = []
        self._secuencia = itertools.count()
        self._eventos: list[tuple[int, int, _Llegada | _Fin]] = []
        for proceso in self.procesos:
            self._programar(proceso.arribo, _Llegada(proceso))

    def _programar(self, tiempo: int, evento: _Llegada | _Fin) -> None:
        heapq.heappush(self._eventos, (tiempo, next(self._secuencia), evento))

    def _log(self, mensaje: str) -> None:
        print(mensaje)
        self.log_eventos.append(mensaje)

    def ejecutar(self) -> None:
        """Process every event in time order until none remain."""
        while self._eventos:
            tiempo, _, evento = heapq.heappop(self._eventos)
            self.tiempo_actual = tiempo
            if isinstance(evento, _Llegada):
                self._llegada(evento.proceso)
            else:
                self._fin(evento)

    def _llegada(self, proceso: Proceso) -> None:
        t = self.tiempo_actual
        self._log(f"Tiempo {t}: Llegada del proceso {proceso.nombre}")
        indice = self.estrategia.asignar(proceso, self.particiones)
        if indice is None:
            self._log(
                f"Tiempo {t}: Proceso {proceso.nombre} no pudo ser asignado (esperando)"
            )
            self._programar(t + 1, _Llegada(proceso))
            return
        self._log(f"Tiempo {t}: Proceso {proceso.nombre} asignado a la partición {indice}")
        proceso.tiempo_inicio = t
        fin = (
            t
            + self.configuracion.tiempo_carga
            + self.configuracion.tiempo_seleccion
            + proceso.duracion
        )
        self._programar(fin, _Fin(proceso, self.particiones[indice], indice))

    def _fin(self, evento: _Fin) -> None:
        t = self.tiempo_actual
        proceso = evento.proceso
        self._log(
            f"Tiempo {t}: Finalización del proceso {proceso.nombre} "
            f"en la partición {evento.indice}"
        )
        evento.particion.liberar()
        combinar_particiones(self.particiones)
        proceso.tiempo_finalizacion = t
        self._log(
            f"Proceso {proceso.nombre} completado. "
            f"Tiempo de retorno: {proceso.tiempo_retorno()}"
        )

    def tiempo_medio_retorno(self) -> float:
        """Mean turnaround time of the finished processes (NaN if none finished)."""
        retornos = [r for p in self.procesos if (r := p.tiempo_retorno()) is not None]
        if not retornos:
            return math.nan
        return sum(retornos) / len(retornos)

    def fragmentacion_externa(self) -> float:
        """Free memory as a percentage of the total memory."""
        libre = sum(p.tamano for p in self.particiones if p.esta_libre())
        total = self.configuracion.tamanio_memoria
        if total == 0:
            return math.nan
        return libre / total * 100.0

    def informe(self) -> str:
        """The results summary shown at the end of a run."""
        lineas = ["=== Resultados de la Simulación ==="]
        for proceso in self.procesos:
            retorno = proceso.tiempo_retorno()
            if retorno is None:
                lineas.append(f"Proceso {proceso.nombre}: No completado")
            else:
                lineas.append(f"Proceso {proceso.nombre}: Tiempo de Retorno = {retorno}")
        lineas.append(f"Tiempo Medio de Retorno: {self.tiempo_medio_retorno():.2f}")
        lineas.append(
            f"Índice de Fragmentación Externa: {self.fragmentacion_externa():.2f}%"
        )
        return "\n".join(lineas)


def ejecutar_simulacion(
    configuracion: ConfiguracionSimulacion,
    procesos: Iterable[Proceso],
    directorio: str | Path = "Simulaciones",
) -> Simulacion:
    """Run a simulation, print its results and save them under ``directorio``."""
    simulacion = Simulacion(configuracion, procesos)
    simulacion.ejecutar()
    print(simulacion.informe())
    try:
        guardar_simulacion(simulacion, directorio)
    except OSError as error:
        print(f"Error al guardar la simulación: {error}")
    return simulacion