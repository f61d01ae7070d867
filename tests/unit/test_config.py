import config


def test_database_uri_defaults_to_instance_sqlite(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert config._get_database_uri() == "sqlite:///petclinic.db"


def test_database_uri_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://clinic@localhost/petclinic")
    assert config._get_database_uri() == "postgresql://clinic@localhost/petclinic"


def test_empty_database_url_falls_back(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "")
    assert config._get_database_uri() == "sqlite:///petclinic.db"
