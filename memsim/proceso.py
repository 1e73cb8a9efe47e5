"""Processes that arrive at the simulator and request memory."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Proceso:
    """A job with an arrival time, a duration and a memory requirement."""

    nombre: str
    arribo: int
    duracion: int
    memoria_requerida: int
    tiempo_inicio: int | None = None
    tiempo_finalizacion: int | None = None

    def tiempo_retorno(self) -> int | None:
        """Turnaround time (finish minus arrival), or None until the job has started and finished."""
        if self.tiempo_inicio is None or self.tiempo_finalizacion is None:
            return None
        if self.tiempo_finalizacion < self.arribo:
            raise ValueError(
                f"El proceso {self.nombre} finaliza ({self.tiempo_finalizacion}) "
                f"antes de su arribo ({self.arribo})."
            )
        return self.tiempo_finalizacion - self.arribo