# memsim

An interactive console simulator for dynamic memory partition allocation.
It loads a batch of processes, places them in a single block of physical
memory that is split when a process is placed and merged again when
neighbouring partitions become free, and reports each process's turnaround
time, the mean turnaround time and the external fragmentation index.

The program's prompts and reports are in Spanish.

Four placement strategies are available (`memsim.config.Estrategia`):

- **First-Fit**: the first free partition that is large enough.
- **Best-Fit**: the free partition that leaves the least space over.
- **Worst-Fit**: the largest free partition that can hold the process.
- **Next-Fit**: like First-Fit, but the search starts at the partition where
  the last allocation was made.

## Installation

```
pip install .
```

## Usage

Start the menu:

```
memsim
```

On start, the process and simulation folders are created if they do not
exist. Their locations can be changed:

```
memsim --procesos Procesos --simulaciones Simulaciones
```

The menu offers:

1. Generate a new process file. You are asked how many processes to create;
   each gets the name `P1`, `P2`, ..., a random arrival time (0-49), duration
   (1-19) and memory requirement (10-99). The file is saved in the process
   folder as `NN_Procesos(CANTIDAD).txt`, where `NN` is the next free number.
2. Select a process file by typing its name (or `volver` to go back).
3. Configure and run a simulation with the selected file: memory size,
   strategy, selection time, load time and release time. The results are
   printed and saved in the simulation folder as
   `NN_SimulacionExitosa_(CANTIDAD)_(ESTRATEGIA).txt`, together with the
   settings, the date and time, and the event log.
4. View a previous simulation by typing its file name (or `volver`).
5. Exit.

### How a run proceeds

A process is placed when it arrives. If no free partition can hold it, it
tries again one time unit later. A placed process finishes at its start time
plus the load time, the selection time and its duration; its partition is
then freed and merged with free neighbours. Turnaround time is finish time
minus arrival time. The external fragmentation index is free memory as a
percentage of the total memory at the end of the run.

A process that needs more memory than the whole memory is rejected before the
run starts with a `ValueError`.

### Process files

Each line describes one process as four comma-separated fields, the last
three being non-negative integers:

```
Name,Arrival,Duration,RequiredMemory
```

For example:

```
Proceso1,0,5,100
Proceso2,2,3,150
```

`memsim.io_utils.leer_archivo_procesos` reads such a file and raises
`ErrorArchivoProcesos` (with the offending line number in `linea`) when the
file cannot be opened or a line is malformed; `escribir_archivo_procesos`
writes one.

### Using it from Python

```python
from memsim.config import ConfiguracionSimulacion, Estrategia
from memsim.io_utils import leer_archivo_procesos
from memsim.simulacion import Simulacion

procesos = leer_archivo_procesos("Procesos/01_Procesos(5).txt")
config = ConfiguracionSimulacion(
    tamanio_memoria=500,
    estrategia=Estrategia.BEST_FIT,
    tiempo_seleccion=1,
    tiempo_carga=2,
    tiempo_liberacion=1,
)
config.validar()  # raises ConfiguracionInvalida on a zero size or time
simulacion = Simulacion(config, procesos)
simulacion.ejecutar()
print(simulacion.informe())
print(simulacion.tiempo_medio_retorno(), simulacion.fragmentacion_externa())
```

`ejecutar_simulacion(configuracion, procesos, directorio)` in
`memsim.simulacion` runs a simulation, prints its results and saves its
report to a numbered file in `directorio`. `memsim.generador` provides
`generar_procesos_aleatorios`, `generar_archivo_procesos` and
`guardar_simulacion` for doing the same steps by hand.

## Limitations

- The release time is asked for, stored and written to the saved report, but
  it does not affect when a process finishes or when its partition is freed.
- There is no non-interactive command for running a simulation; outside the
  menu, use the Python functions above.

## Running the tests

```
pip install .[test]
pytest
```