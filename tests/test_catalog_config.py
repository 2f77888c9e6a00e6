import boto3

from catalog import get_registrar
from catalog.config import DEFAULT_TABLE_LOCATION, RegistrarConfig, load_config
from catalog.registrar import TableRegistrar
from catalog.schema import EVENTS_SCHEMA


def test_load_config_defaults(monkeypatch):
    for name in (
        "CATALOG_DATABASE",
        "CATALOG_TABLE_NAME",
        "CATALOG_TABLE_LOCATION",
        "CATALOG_LEGACY_TABLE_TYPE",
        "AWS_DEFAULT_REGION",
        "GLUE_ENDPOINT_URL",
    ):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.database == "ally_security"
    assert config.table_name == "events"
    assert config.location == DEFAULT_TABLE_LOCATION
    assert config.legacy_table_type is True
    assert config.region_name is None
    assert config.endpoint_url is None
    assert config.schema == EVENTS_SCHEMA


def test_load_config_from_env(monkeypatch):
    monkeypatch.setenv("CATALOG_DATABASE", "analytics")
    monkeypatch.setenv("CATALOG_TABLE_NAME", "audit")
    monkeypatch.setenv("CATALOG_TABLE_LOCATION", "s3://audit-bucket/delta/audit")
    monkeypatch.setenv("CATALOG_LEGACY_TABLE_TYPE", "false")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")
    monkeypatch.setenv("GLUE_ENDPOINT_URL", "http://localhost:5000")

    config = load_config()

    assert config.database == "analytics"
    assert config.table_name == "audit"
    assert config.location == "s3://audit-bucket/delta/audit"
    assert config.legacy_table_type is False
    assert config.region_name == "eu-west-1"
    assert config.endpoint_url == "http://localhost:5000"


def test_legacy_flag_accepts_truthy_values(monkeypatch):
    for value in ("1", "TRUE", "yes"):
        monkeypatch.setenv("CATALOG_LEGACY_TABLE_TYPE", value)
        assert load_config().legacy_table_type is True
    monkeypatch.setenv("CATALOG_LEGACY_TABLE_TYPE", "")
    assert load_config().legacy_table_type is True


def test_schema_default_is_a_copy():
    config = RegistrarConfig()
    config.schema["extra"] = "string"
    assert "extra" not in EVENTS_SCHEMA


def test_get_registrar_uses_env(monkeypatch):
    monkeypatch.setenv("CATALOG_TABLE_NAME", "audit")
    monkeypatch.setattr("catalog.registrar.create_glue_client", lambda config: object())

    registrar = get_registrar()

    assert registrar.config.table_name == "audit"


def test_profile_region_is_used_when_env_is_unset(monkeypatch, tmp_path):
    config_file = tmp_path / "aws_config"
    config_file.write_text("[default]\nregion = eu-west-1\n", encoding="utf-8")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(config_file))
    for name in ("AWS_DEFAULT_REGION", "AWS_REGION", "AWS_PROFILE", "GLUE_ENDPOINT_URL"):
        monkeypatch.delenv(name, raising=False)
    # Force boto3 to build a fresh session that reads the config file above.
    monkeypatch.setattr(boto3, "DEFAULT_SESSION", None)

    registrar = TableRegistrar(config=load_config())

    assert registrar.config.region_name is None
    assert registrar.client.meta.region_name == "eu-west-1"
