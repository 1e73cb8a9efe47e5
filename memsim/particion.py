"""Memory partitions handed out to processes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EstadoParticion(Enum):
    """Whether a partition is free or taken by a process."""

    LIBRE = "Libre"
    OCUPADA = "Ocupada"

    def __str__(self) -> str:
        return self.value


@dataclass
class Particion:
    """A contiguous block of memory starting at ``direccion_comienzo``."""

    direccion_comienzo: int
    tamano: int
    estado: EstadoParticion = EstadoParticion.LIBRE
    nombre_proceso: str | None = None

    def esta_libre(self) -> bool:
        """True when no process occupies the partition."""
        return self.estado is EstadoParticion.LIBRE

    def ocupar(self, nombre_proceso: str) -> None:
        """Mark the partition as taken by the named process."""
        self.estado = EstadoParticion.OCUPADA
        self.nombre_proceso = nombre_proceso

    def liberar(self) -> None:
        """Make the partition available again."""
        self.estado = EstadoParticion.LIBRE
        self.nombre_proceso = None

    def esta_ocupada_por(self, nombre_proceso: str) -> bool:
        """True when the partition is taken by exactly this process."""
        return self.estado is EstadoParticion.OCUPADA and self.nombre_proceso == nombre_proceso