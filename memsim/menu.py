"""Interactive main menu of the memory simulator."""

from __future__ import annotations

import argparse
import random
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

from memsim.config import ConfiguracionSimulacion, Estrategia, capturar_numero
from memsim.generador import generar_archivo_procesos
from memsim.io_utils import ErrorArchivoProcesos, leer_archivo_procesos, listar_archivos
from memsim.simulacion import Simulacion, ejecutar_simulacion

Lector = Callable[[], str]
Escritor = Callable[[str], None]

_ENCABEZADO = (
    "=================================================\n"
    "       MemSim3000 - Sistema de Simulación de Memoria\n"
    "=================================================\n"
    "Bienvenido a MemSim3000, un simulador de gestión de memoria que te permite "
    "probar diferentes estrategias de asignación de memoria dinámica. Con este "
    "software, podrás generar archivos de procesos personalizados, configurar "
    "simulaciones con distintos parámetros y analizar los resultados.\n"
)

_OPCIONES = (
    "\nSeleccione una de las siguientes opciones:\n\n"
    "1. Generar un nuevo archivo de procesos.\n"
    "\t(Aquí podrás crear un archivo de procesos a gusto, para poner a prueba "
    "el simulador.)\n\n"
    "2. Seleccionar un archivo de procesos.\n"
    "\t(Sirve para poder cargar un archivo y poder comenzar la simulación. Sin un "
    "archivo seleccionado no podrás iniciar la configuración de la simulación.)\n\n"
    "3. Configurar y comenzar una simulación.\n"
    "\t(Una vez cargado el archivo, podrás configurar la simulación para poder "
    "comenzar. Las simulaciones serán guardadas.)\n\n"
    "4. Ver simulaciones anteriores.\n"
    "\t(Aquí podrás seleccionar un archivo de simulación y poder verlo en "
    "pantalla.)\n\n"
    "5. Salir\n\n"
)

_CONTINUAR = "Presione Enter para continuar...\n"


def limpiar_pantalla() -> None:
    """Clear the terminal, ignoring any failure to do so."""
    comando = ["cmd", "/C", "cls"] if sys.platform.startswith("win") else ["clear"]
    try:
        subprocess.run(comando, check=False)
    except OSError:
        pass


def _leer_stdin() -> str:
    return sys.stdin.readline()


def _escribir_stdout(texto: str) -> None:
    sys.stdout.write(texto)
    sys.stdout.flush()


class Menu:
    """The main menu loop and the actions behind each option."""

    def __init__(
        self,
        directorio_procesos: str | Path = "Procesos",
        directorio_simulaciones: str | Path = "Simulaciones",
        leer: Lector | None = None,
        escribir: Escritor | None = None,
        limpiar: Callable[[], None] | None = limpiar_pantalla,
        rng: random.Random | None = None,
    ) -> None:
        self.directorio_procesos = Path(directorio_procesos)
        self.directorio_simulaciones = Path(directorio_simulaciones)
        self.leer = leer or _leer_stdin
        self.escribir = escribir or _escribir_stdout
        self.limpiar = limpiar
        self.rng = rng
        self.archivo_seleccionado: str | None = None

    def _linea(self) -> str:
        linea = self.leer()
        if linea == "":
            raise EOFError("Fin de la entrada.")
        return linea.strip()

    def _esperar_enter(self) -> None:
        self._linea()

    def _pausa(self) -> None:
        self.escribir(_CONTINUAR)
        self._esperar_enter()

    def ejecutar(self) -> None:
        """Show the menu repeatedly until the user exits or input ends."""
        acciones = {
            "1": self.generar_nuevo_archivo_procesos,
            "2": self.seleccionar_archivo_procesos,
            "3": self.configurar_y_comenzar_simulacion,
            "4": self.ver_simulaciones_anteriores,
        }
        try:
            while True:
                if self.limpiar is not None:
                    self.limpiar()
                self.escribir(_ENCABEZADO)
                self.escribir(_OPCIONES)
                self.escribir("Seleccione una opción (1-5): ")
                seleccion = self._linea()
                if seleccion == "5":
                    self.escribir("¡Gracias por usar MemSim3000! Hasta luego.\n")
                    return
                accion = acciones.get(seleccion)
                if accion is None:
                    self.escribir(
                        "Opción no válida. Presione Enter para intentar nuevamente.\n"
                    )
                    self._esperar_enter()
                else:
                    accion()
        except EOFError:
            return

    def generar_nuevo_archivo_procesos(self) -> Path | None:
        """Ask how many processes to create and write a new random process file."""
        self.escribir("Ingrese la cantidad de procesos que desea generar:\n")
        cantidad = capturar_numero("Cantidad de procesos", self.leer, self.escribir)
        ruta: Path | None
        try:
            ruta = generar_archivo_procesos(cantidad, self.directorio_procesos, self.rng)
        except OSError as error:
            self.escribir(f"Error al generar el archivo de procesos: {error}\n")
            ruta = None
        else:
            self.escribir(f"Archivo de procesos '{ruta}' generado exitosamente.\n")
        self._pausa()
        return ruta

    def _listar(self, directorio: Path, mensaje_ausente: str) -> None:
        try:
            nombres = listar_archivos(directorio)
        except OSError:
            self.escribir(mensaje_ausente)
            return
        self.escribir(f"Archivos disponibles en '{directorio}':\n")
        for nombre in nombres:
            self.escribir(f"- {nombre}\n")

    def _pedir_nombre(self) -> str | None:
        self.escribir(
            "Ingrese el nombre del archivo (o 'volver' para regresar al menú anterior):\n"
        )
        nombre = self._linea()
        if nombre.lower() == "volver":
            return None
        return nombre

    def seleccionar_archivo_procesos(self) -> str | None:
        """Let the user choose an existing process file; return its name if chosen."""
        self.escribir("Seleccione un archivo de procesos para la simulación:\n")
        self._listar(
            self.directorio_procesos,
            f"No se encontró el directorio '{self.directorio_procesos}'. "
            "Asegúrate de haber generado archivos de procesos primero.\n",
        )
        nombre = self._pedir_nombre()
        if nombre is None:
            return None
        elegido: str | None = None
        if (self.directorio_procesos / nombre).exists():
            self.archivo_seleccionado = nombre
            elegido = nombre
            self.escribir(f"Archivo de procesos '{nombre}' seleccionado correctamente.\n")
        else:
            self.escribir(
                f"El archivo '{nombre}' no existe en la carpeta "
                f"'{self.directorio_procesos}'. Intente nuevamente.\n"
            )
        self._pausa()
        return elegido

    def _capturar_configuracion(self) -> ConfiguracionSimulacion:
        self.escribir("Configure los parámetros de la simulación:\n")
        tamanio_memoria = capturar_numero(
            "Tamaño de memoria (unidades)", self.leer, self.escribir
        )
        self.escribir("Seleccione una estrategia de asignación:\n")
        for opcion, estrategia in enumerate(Estrategia, start=1):
            self.escribir(f"{opcion}. {estrategia}\n")
        while True:
            self.escribir("Ingrese el número de la estrategia (1-4): ")
            try:
                estrategia = Estrategia.desde_opcion(self._linea())
                break
            except ValueError:
                self.escribir(
                    "Opción inválida. Por favor, ingrese un número entre 1 y 4.\n"
                )
        tiempo_seleccion = capturar_numero(
            "Tiempo de selección (unidades de tiempo)", self.leer, self.escribir
        )
        tiempo_carga = capturar_numero(
            "Tiempo de carga (unidades de tiempo)", self.leer, self.escribir
        )
        tiempo_liberacion = capturar_numero(
            "Tiempo de liberación (unidades de tiempo)", self.leer, self.escribir
        )
        return ConfiguracionSimulacion(
            tamanio_memoria=tamanio_memoria,
            estrategia=estrategia,
            tiempo_seleccion=tiempo_seleccion,
            tiempo_carga=tiempo_carga,
            tiempo_liberacion=tiempo_liberacion,
        )

    def configurar_y_comenzar_simulacion(self) -> Simulacion | None:
        """Read the selected process file, ask for the settings and run a simulation."""
        if self.archivo_seleccionado is None:
            self.escribir(
                "No se ha seleccionado un archivo de procesos. "
                "Por favor, selecciona uno antes de continuar.\n"
            )
            self._pausa()
            return None
        ruta = self.directorio_procesos / self.archivo_seleccionado
        try:
            procesos = leer_archivo_procesos(ruta)
        except ErrorArchivoProcesos as error:
            self.escribir(f"Error al leer el archivo de procesos: {error}\n")
            self._pausa()
            return None
        configuracion = self._capturar_configuracion()
        try:
            return ejecutar_simulacion(
                configuracion, procesos, self.directorio_simulaciones
            )
        except ValueError as error:
            self.escribir(f"No se pudo ejecutar la simulación: {error}\n")
            self._pausa()
            return None

    def ver_simulaciones_anteriores(self) -> str | None:
        """Show a saved simulation chosen by name; return its content if shown."""
        self.escribir("Seleccione un archivo de simulación para visualizar:\n")
        self._listar(
            self.directorio_simulaciones,
            f"No se encontró el directorio '{self.directorio_simulaciones}'.\n",
        )
        nombre = self._pedir_nombre()
        if nombre is None:
            return None
        contenido: str | None = None
        ruta = self.directorio_simulaciones / nombre
        if ruta.exists():
            try:
                contenido = ruta.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as error:
                self.escribir(f"Error al leer el archivo '{nombre}': {error}\n")
            else:
                self.escribir(f"Contenido de '{nombre}':\n\n")
                self.escribir(f"{contenido}\n")
        else:
            self.escribir(
                f"El archivo '{nombre}' no existe en la carpeta "
                f"'{self.directorio_simulaciones}'. Intente nuevamente.\n"
            )
        self._pausa()
        return contenido


def _verificar_o_crear_carpetas(carpetas: list[Path]) -> None:
    for carpeta in carpetas:
        if carpeta.exists():
            continue
        try:
            carpeta.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            print(f"Error al crear la carpeta {carpeta}: {error}")
        else:
            print(f"Carpeta creada: {carpeta}")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive simulator."""
    parser = argparse.ArgumentParser(
        prog="memsim", description="Simulador de asignación de particiones dinámicas."
    )
    parser.add_argument("--procesos", default="Procesos", help="carpeta de procesos")
    parser.add_argument(
        "--simulaciones", default="Simulaciones", help="carpeta de simulaciones"
    )
    argumentos = parser.parse_args(argv)
    procesos = Path(argumentos.procesos)
    simulaciones = Path(argumentos.simulaciones)
    _verificar_o_crear_carpetas([simulaciones, procesos])
    Menu(procesos, simulaciones).ejecutar()
    return 0


if __name__ == "__main__":
    sys.exit(main())