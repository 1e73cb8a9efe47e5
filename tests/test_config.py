import pytest

from memsim.config import (
    ConfiguracionInvalida,
    ConfiguracionSimulacion,
    Estrategia,
    capturar_configuracion,
    capturar_estrategia,
    capturar_numero,
)


def _entrada(*lineas):
    it = iter(lineas)

    def leer():
        return next(it, "")

    return leer


class _Salida:
    def __init__(self):
        self.partes = []

    def __call__(self, texto):
        self.partes.append(texto)

    @property
    def texto(self):
        return "".join(self.partes)


def _config(**cambios):
    valores = dict(
        tamanio_memoria=1024,
        estrategia=Estrategia.FIRST_FIT,
        tiempo_seleccion=1,
        tiempo_carga=2,
        tiempo_liberacion=3,
    )
    valores.update(cambios)
    return ConfiguracionSimulacion(**valores)


@pytest.mark.parametrize(
    "opcion, esperada",
    [
        ("1", Estrategia.FIRST_FIT),
        ("2", Estrategia.BEST_FIT),
        ("3", Estrategia.WORST_FIT),
        ("4", Estrategia.NEXT_FIT),
    ],
)
def test_option_mapping(opcion, esperada):
    assert Estrategia.desde_opcion(opcion) is esperada


@pytest.mark.parametrize("opcion", ["0", "5", "", "uno"])
def test_invalid_option(opcion):
    with pytest.raises(ValueError):
        Estrategia.desde_opcion(opcion)


@pytest.mark.parametrize(
    "nombre, esperada",
    [
        ("first-fit", Estrategia.FIRST_FIT),
        ("best-fit", Estrategia.BEST_FIT),
        ("next-fit", Estrategia.NEXT_FIT),
        ("worst-fit", Estrategia.WORST_FIT),
        ("Best-Fit", Estrategia.BEST_FIT),
    ],
)
def test_name_lookup(nombre, esperada):
    assert Estrategia.desde_nombre(nombre) is esperada


def test_unknown_name_message():
    with pytest.raises(ValueError, match="Estrategia no válida: quick-fit"):
        Estrategia.desde_nombre("quick-fit")


def test_display_names():
    nombres = [str(Estrategia.desde_opcion(opcion)) for opcion in "1234"]
    assert nombres == [
        "First-Fit",
        "Best-Fit",
        "Worst-Fit",
        "Next-Fit",
    ]


def test_valid_configuration_passes_and_is_unchanged():
    config = _config()
    config.validar()
    assert config == _config()


@pytest.mark.parametrize(
    "campo, mensaje",
    [
        ("tamanio_memoria", "El tamaño de la memoria no puede ser 0."),
        ("tiempo_seleccion", "El tiempo de selección de partición no puede ser 0."),
        ("tiempo_carga", "El tiempo de carga no puede ser 0."),
        ("tiempo_liberacion", "El tiempo de liberación no puede ser 0."),
    ],
)
def test_zero_values_rejected(campo, mensaje):
    with pytest.raises(ConfiguracionInvalida) as info:
        _config(**{campo: 0}).validar()
    assert str(info.value) == mensaje


def test_memory_checked_before_times():
    config = _config(tamanio_memoria=0, tiempo_carga=0)
    with pytest.raises(ConfiguracionInvalida, match="memoria"):
        config.validar()


def test_unknown_strategy_rejected():
    with pytest.raises(ConfiguracionInvalida, match="Estrategia no válida"):
        _config(estrategia="quick-fit").validar()


def test_invalid_configuration_is_value_error():
    with pytest.raises(ValueError):
        _config(tiempo_carga=0).validar()


def test_summary_lists_settings():
    resumen = _config(estrategia=Estrategia.WORST_FIT).resumen()
    lineas = resumen.splitlines()
    assert lineas[0] == "--- Resumen de la Configuración ---"
    assert "Tamaño de la memoria: 1024 unidades" in lineas
    assert "Estrategia seleccionada: Worst-Fit" in lineas
    assert "Tiempo de carga: 2 unidades" in lineas


def test_number_prompt_accepts_valid_input():
    salida = _Salida()
    assert capturar_numero("Tamaño", _entrada("512\n"), salida) == 512
    assert salida.texto == "Tamaño: "


def test_number_prompt_retries_on_invalid_input():
    salida = _Salida()
    numero = capturar_numero("Tamaño", _entrada("abc\n", "-3\n", " 42 \n"), salida)
    assert numero == 42
    assert salida.texto.count("Entrada inválida") == 2


def test_number_prompt_rejects_out_of_range():
    salida = _Salida()
    numero = capturar_numero("N", _entrada("4294967296\n", "4294967295\n"), salida)
    assert numero == 4294967295
    assert salida.texto.count("Entrada inválida") == 1


def test_number_prompt_end_of_input():
    with pytest.raises(EOFError):
        capturar_numero("N", _entrada(), _Salida())


def test_strategy_prompt_retries():
    salida = _Salida()
    estrategia = capturar_estrategia(_entrada("9\n", "2\n"), salida)
    assert estrategia is Estrategia.BEST_FIT
    assert "Opción no válida. Intente nuevamente." in salida.texto


def test_capture_full_configuration():
    salida = _Salida()
    config = capturar_configuracion(
        _entrada("2048\n", "4\n", "1\n", "2\n", "3\n"), salida
    )
    assert config == ConfiguracionSimulacion(2048, Estrategia.NEXT_FIT, 1, 2, 3)
    assert "4. Next-Fit" in salida.texto
    config.validar()
    assert config.resumen().count("unidades") == 4