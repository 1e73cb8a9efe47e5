import pytest

from memsim.io_utils import (
    ErrorArchivoProcesos,
    agregar_linea,
    escribir_archivo_procesos,
    leer_archivo_procesos,
    listar_archivos,
)
from memsim.proceso import Proceso


def test_read_documented_example(tmp_path):
    ruta = tmp_path / "procesos.txt"
    ruta.write_text("Proceso1,0,5,100\nProceso2,2,3,150\n", encoding="utf-8")
    procesos = leer_archivo_procesos(ruta)
    assert procesos == [
        Proceso("Proceso1", 0, 5, 100),
        Proceso("Proceso2", 2, 3, 150),
    ]


def test_round_trip(tmp_path):
    ruta = tmp_path / "p.txt"
    originales = [Proceso(f"P{i}", i, i + 1, 10 * i + 10) for i in range(6)]
    escribir_archivo_procesos(ruta, originales)
    assert leer_archivo_procesos(ruta) == originales


def test_lines_are_trimmed(tmp_path):
    ruta = tmp_path / "p.txt"
    ruta.write_bytes(b"  P1,1,2,3  \r\nP2,4,5,6")
    assert leer_archivo_procesos(ruta) == [Proceso("P1", 1, 2, 3), Proceso("P2", 4, 5, 6)]


def test_plus_sign_accepted(tmp_path):
    ruta = tmp_path / "p.txt"
    ruta.write_text("P1,+7,2,3\n", encoding="utf-8")
    assert leer_archivo_procesos(ruta)[0].arribo == 7


def test_empty_file(tmp_path):
    ruta = tmp_path / "p.txt"
    ruta.write_text("", encoding="utf-8")
    assert leer_archivo_procesos(ruta) == []


def test_missing_file(tmp_path):
    ruta = tmp_path / "nada.txt"
    with pytest.raises(ErrorArchivoProcesos, match="No se pudo abrir el archivo"):
        leer_archivo_procesos(ruta)


def test_wrong_column_count_reports_line(tmp_path):
    ruta = tmp_path / "p.txt"
    ruta.write_text("P1,1,2,3\nP2,1,2\n", encoding="utf-8")
    with pytest.raises(ErrorArchivoProcesos, match="línea 2: se esperaban 4 columnas") as info:
        leer_archivo_procesos(ruta)
    assert info.value.linea == 2


def test_blank_line_is_an_error(tmp_path):
    ruta = tmp_path / "p.txt"
    ruta.write_text("P1,1,2,3\n\n", encoding="utf-8")
    with pytest.raises(ErrorArchivoProcesos, match="se esperaban 4 columnas"):
        leer_archivo_procesos(ruta)


@pytest.mark.parametrize(
    "linea, fragmento",
    [
        ("P1,x,2,3", "el instante de arribo 'x' no es un número válido"),
        ("P1,1,-2,3", "la duración '-2' no es un número válido"),
        ("P1,1,2,4294967296", "la memoria requerida '4294967296' no es un número válido"),
        ("P1, 1,2,3", "el instante de arribo ' 1' no es un número válido"),
    ],
)
def test_bad_numbers(tmp_path, linea, fragmento):
    ruta = tmp_path / "p.txt"
    ruta.write_text(linea + "\n", encoding="utf-8")
    with pytest.raises(ErrorArchivoProcesos) as info:
        leer_archivo_procesos(ruta)
    assert fragmento in str(info.value)
    assert info.value.linea == 1


def test_invalid_utf8(tmp_path):
    ruta = tmp_path / "p.txt"
    ruta.write_bytes(b"P1,1,2,3\n\xff\xfe,1,2,3\n")
    with pytest.raises(ErrorArchivoProcesos, match="Error al leer la línea 2"):
        leer_archivo_procesos(ruta)


def test_agregar_linea_appends(tmp_path):
    ruta = tmp_path / "log.txt"
    agregar_linea(ruta, "uno")
    agregar_linea(ruta, "dos")
    assert ruta.read_text(encoding="utf-8") == "uno\ndos\n"


def test_listar_archivos_only_files_sorted(tmp_path):
    (tmp_path / "b.txt").write_text("x", encoding="utf-8")
    (tmp_path / "a.txt").write_text("x", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    assert listar_archivos(tmp_path) == ["a.txt", "b.txt"]


def test_listar_archivos_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        listar_archivos(tmp_path / "no_existe")