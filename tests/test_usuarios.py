import pytest

from srcm.usuarios import (
    MAX_USUARIOS,
    User,
    UserLimitError,
    UserNotFoundError,
    UserRegistry,
    format_user_line,
    parse_user_line,
)

PASSWORD = "password"
WRONG_PASSWORD = "secret"


@pytest.fixture
def registry(tmp_path):
    return UserRegistry(tmp_path / "usuarios.txt")


def _register(registry, name, kind="Paciente"):
    return registry.register(name, PASSWORD, kind, f"{name.lower()}@example.com", "ext-1", "Calle Uno", "2024-01-15")


def test_line_round_trip():
    user = User(1, "Ana", "Paciente", PASSWORD, "ana@example.com", "ext-1", "Calle Uno", "2024-01-15")
    assert parse_user_line(format_user_line(user)) == user


@pytest.mark.parametrize(
    "line",
    ["", "1,Ana,Paciente\n", "x,Ana,Paciente,p,e,t,d,f\n", "1,,Paciente,p,e,t,d,f\n"],
)
def test_parse_rejects_malformed(line):
    with pytest.raises(ValueError):
        parse_user_line(line)


def test_register_assigns_sequential_ids(registry):
    ana = _register(registry, "Ana")
    luis = _register(registry, "Luis", "Medico")
    assert (ana.id, luis.id) == (1, 2)
    assert len(registry) == 2


def test_register_truncates_fields(registry):
    user = registry.register("n" * 60, PASSWORD, "k" * 30, "e@example.com", "9" * 20, "a" * 120, "2024-01-15")
    assert len(user.name) == 49
    assert len(user.kind) == 19
    assert len(user.phone) == 14
    assert len(user.address) == 99


def test_save_load_round_trip(registry, tmp_path):
    _register(registry, "Ana")
    _register(registry, "Luis", "Medico")
    reloaded = UserRegistry(tmp_path / "usuarios.txt")
    reloaded.load()
    assert list(reloaded) == list(registry)


def test_load_stops_at_bad_line(registry, tmp_path):
    ana = _register(registry, "Ana")
    path = tmp_path / "usuarios.txt"
    path.write_text(format_user_line(ana) + "not,a,user\n" + format_user_line(ana), encoding="utf-8")
    reloaded = UserRegistry(path)
    reloaded.load()
    assert list(reloaded) == [ana]


def test_authenticate(registry):
    ana = _register(registry, "Ana")
    assert registry.authenticate("Ana", PASSWORD) == ana
    assert registry.authenticate("Ana", WRONG_PASSWORD) is None
    assert registry.authenticate("Nadie", PASSWORD) is None


def test_limit(registry):
    for i in range(MAX_USUARIOS):
        _register(registry, f"U{i}")
    with pytest.raises(UserLimitError):
        _register(registry, "Extra")
    assert len(registry) == MAX_USUARIOS


def test_update_persists(registry, tmp_path):
    _register(registry, "Ana")
    new_password = "token"
    registry.update(1, "Ana Maria", "Admin", "am@example.com", "ext-2", "Calle Dos", new_password)
    reloaded = UserRegistry(tmp_path / "usuarios.txt")
    reloaded.load()
    user = reloaded.get(1)
    assert (user.name, user.kind, user.password) == ("Ana Maria", "Admin", new_password)
    assert user.registered_on == "2024-01-15"


def test_update_missing_raises(registry):
    with pytest.raises(UserNotFoundError):
        registry.update(5, "x", "y", "z@example.com", "p", "a", PASSWORD)


def test_remove(registry):
    _register(registry, "Ana")
    _register(registry, "Luis")
    removed = registry.remove(1)
    assert removed.name == "Ana"
    assert [user.name for user in registry] == ["Luis"]
    with pytest.raises(UserNotFoundError):
        registry.get(1)


def test_remove_missing_raises(registry):
    with pytest.raises(UserNotFoundError):
        registry.remove(3)


def test_doctors_and_listing(registry):
    _register(registry, "Ana")
    _register(registry, "Luis", "Medico")
    assert [user.name for user in registry.doctors()] == ["Luis"]
    text = registry.format_doctors()
    assert "ID: 2, Nombre: Luis\n" in text
    assert "Ana" not in text


def test_listing_empty(registry):
    assert registry.format_listing() == "No hay usuarios registrados.\n"


def test_listing_hides_password(registry):
    _register(registry, "Ana")
    text = registry.format_listing()
    assert text.startswith("======= LISTADO DE USUARIOS =======\n")
    assert "Nombre: Ana\n" in text
    assert PASSWORD not in text


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        UserRegistry(tmp_path / "none.txt").load()