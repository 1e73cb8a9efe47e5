from memsim.particion import EstadoParticion, Particion


def test_new_partition_is_free():
    particion = Particion(0, 1024)
    assert particion.esta_libre()
    assert particion.estado is EstadoParticion.LIBRE
    assert particion.nombre_proceso is None
    assert particion.direccion_comienzo == 0
    assert particion.tamano == 1024


def test_occupy_records_process():
    particion = Particion(100, 50)
    particion.ocupar("P1")
    assert not particion.esta_libre()
    assert particion.estado is EstadoParticion.OCUPADA
    assert particion.nombre_proceso == "P1"


def test_occupied_by_matches_only_owner():
    particion = Particion(0, 50)
    particion.ocupar("P1")
    assert particion.esta_ocupada_por("P1")
    assert not particion.esta_ocupada_por("P2")


def test_free_partition_is_not_occupied_by_anyone():
    particion = Particion(0, 50)
    assert not particion.esta_ocupada_por("P1")


def test_release_clears_owner():
    particion = Particion(0, 50)
    particion.ocupar("P1")
    particion.liberar()
    assert particion.esta_libre()
    assert particion.nombre_proceso is None
    assert not particion.esta_ocupada_por("P1")


def test_state_text():
    particion = Particion(0, 50)
    assert str(particion.estado) == "Libre"
    particion.ocupar("P1")
    assert str(particion.estado) == "Ocupada"
    particion.liberar()
    assert str(particion.estado) == "Libre"