"""Dynamic partition allocation strategies: first, best, worst and next fit."""

from __future__ import annotations

from abc import ABC, abstractmethod

from memsim.config import Estrategia
from memsim.particion import Particion
from memsim.proceso import Proceso


class EstrategiaAsignacion(ABC):
    """Places a process into a list of partitions, splitting the chosen one."""

    @abstractmethod
    def asignar(self, proceso: Proceso, particiones: list[Particion]) -> int | None:
        """Allocate ``proceso`` and return the partition index, or None if nothing fits."""

    @staticmethod
    def _cabe(proceso: Proceso, particion: Particion) -> bool:
        return particion.esta_libre() and particion.tamano >= proceso.memoria_requerida

    @staticmethod
    def _ocupar(proceso: Proceso, particiones: list[Particion], indice: int) -> int:
        """Split the partition if it is larger than needed, then occupy it."""
        particion = particiones[indice]
        requerido = proceso.memoria_requerida
        if particion.tamano > requerido:
            resto = Particion(
                particion.direccion_comienzo + requerido,
                particion.tamano - requerido,
            )
            particion.tamano = requerido
            particiones.insert(indice + 1, resto)
        particion.ocupar(proceso.nombre)
        print(f"Proceso {proceso.nombre} asignado a la partición {indice}.")
        return indice

    @staticmethod
    def _sin_lugar(proceso: Proceso) -> None:
        print(f"No hay partición disponible para el proceso {proceso.nombre}.")
        return None


class FirstFit(EstrategiaAsignacion):
    """Take the first free partition that is large enough."""

    def asignar(self, proceso: Proceso, particiones: list[Particion]) -> int | None:
        indice = next(
            (i for i, p in enumerate(particiones) if self._cabe(proceso, p)), None
        )
        if indice is None:
            return self._sin_lugar(proceso)
        return self._ocupar(proceso, particiones, indice)


class BestFit(EstrategiaAsignacion):
    """Take the free partition that leaves the least space over."""

    def asignar(self, proceso: Proceso, particiones: list[Particion]) -> int | None:
        candidatas = [
            (p.tamano - proceso.memoria_requerida, i)
            for i, p in enumerate(particiones)
            if self._cabe(proceso, p)
        ]
        if not candidatas:
            return self._sin_lugar(proceso)
        _, indice = min(candidatas, key=lambda c: c[0])
        return self._ocupar(proceso, particiones, indice)


class WorstFit(EstrategiaAsignacion):
    """Take the largest free partition that can hold the process."""

    def asignar(self, proceso: Proceso, particiones: list[Particion]) -> int | None:
        candidatas = [
            (p.tamano, i)
            for i, p in enumerate(particiones)
            if self._cabe(proceso, p) and p.tamano > 0
        ]
        if not candidatas:
            return self._sin_lugar(proceso)
        _, indice = max(candidatas, key=lambda c: c[0])
        return self._ocupar(proceso, particiones, indice)


class NextFit(EstrategiaAsignacion):
    """Like first fit, but the search starts where the last allocation happened."""

    def __init__(self) -> None:
        self.ultimo_indice = 0

    def asignar(self, proceso: Proceso, particiones: list[Particion]) -> int | None:
        n = len(particiones)
        if n == 0:
            return self._sin_lugar(proceso)
        inicio = self.ultimo_indice % n
        for paso in range(n):
            indice = (inicio + paso) % n
            if self._cabe(proceso, particiones[indice]):
                self._ocupar(proceso, particiones, indice)
                self.ultimo_indice = indice
                return indice
        return self._sin_lugar(proceso)


def crear_estrategia(estrategia: Estrategia) -> EstrategiaAsignacion:
    """Build a fresh allocator for the chosen strategy."""
    fabricas = {
        Estrategia.FIRST_FIT: FirstFit,
        Estrategia.BEST_FIT: BestFit,
        Estrategia.WORST_FIT: WorstFit,
        Estrategia.NEXT_FIT: NextFit,
    }
    try:
        return fabricas[estrategia]()
    except KeyError:
        raise ValueError(f"Estrategia no válida: {estrategia}") from None