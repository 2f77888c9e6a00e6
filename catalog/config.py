import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from .schema import EVENTS_SCHEMA

DEFAULT_DATABASE = "ally_security"
DEFAULT_TABLE_NAME = "events"
DEFAULT_TABLE_LOCATION = "s3://ally-security-development-events/delta/events"


@dataclass(frozen=True)
class RegistrarConfig:
    """
    Everything needed to register one table: where it lives, what it looks like,
    and which Glue endpoint to talk to.
    """

    database: str = DEFAULT_DATABASE
    table_name: str = DEFAULT_TABLE_NAME
    location: str = DEFAULT_TABLE_LOCATION
    schema: Dict[str, str] = field(default_factory=lambda: dict(EVENTS_SCHEMA))
    # Athena only reads the Delta table when the discouraged `table_type` key is
    # set; the documented `spark.sql.sources.provider` key makes queries fail.
    legacy_table_type: bool = True
    extra_parameters: Dict[str, str] = field(default_factory=dict)
    # None lets boto3 resolve the region from AWS_REGION or the profile.
    region_name: Optional[str] = None
    endpoint_url: Optional[str] = None


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes"}


def load_config() -> RegistrarConfig:
    """
    Build the registrar configuration from the environment.
    Unset variables fall back to the events table defaults.
    """
    return RegistrarConfig(
        database=os.getenv("CATALOG_DATABASE", DEFAULT_DATABASE),
        table_name=os.getenv("CATALOG_TABLE_NAME", DEFAULT_TABLE_NAME),
        location=os.getenv("CATALOG_TABLE_LOCATION", DEFAULT_TABLE_LOCATION),
        legacy_table_type=_env_flag("CATALOG_LEGACY_TABLE_TYPE", True),
        region_name=os.getenv("AWS_DEFAULT_REGION") or None,
        endpoint_url=os.getenv("GLUE_ENDPOINT_URL") or None,
    )
