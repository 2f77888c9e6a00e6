import argparse
import dataclasses
import logging
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .config import RegistrarConfig, load_config
from .descriptor import TableDescriptor, build_descriptor, to_table_input
from .errors import translate_error

logger = logging.getLogger(__name__)


def create_glue_client(config: RegistrarConfig) -> Any:
    # Credentials come from the ambient boto3 chain (env, profile, instance role).
    return boto3.client(
        "glue",
        region_name=config.region_name,
        endpoint_url=config.endpoint_url,
    )


class TableRegistrar:
    """
    Submits table definitions to the Glue Data Catalog, one create_table call each.
    """

    def __init__(self, client: Optional[Any] = None, config: Optional[RegistrarConfig] = None):
        self.config = config or RegistrarConfig()
        self.client = client or create_glue_client(self.config)

    def register(self, descriptor: TableDescriptor) -> None:
        """
        Create the table described by descriptor.

        There is no existence check and no retry: a table that already exists
        surfaces as TableAlreadyExistsError.

        Raises:
            CatalogError: on any transport or service failure.
        """
        table_input = to_table_input(descriptor)
        logger.debug("Submitting create_table for %s: %s", descriptor.qualified_name, table_input)
        try:
            self.client.create_table(DatabaseName=descriptor.database, TableInput=table_input)
        except (BotoCoreError, ClientError) as exc:
            raise translate_error(exc, descriptor.qualified_name) from exc

        logger.info(
            "Created table %s.%s in AWS Glue",
            descriptor.database,
            descriptor.name,
            extra={"table_name": descriptor.name, "database": descriptor.database},
        )

    def register_configured(self) -> TableDescriptor:
        descriptor = build_descriptor(self.config)
        self.register(descriptor)
        return descriptor


def main(argv=None):
    parser = argparse.ArgumentParser(description="Register a Delta table in the AWS Glue Data Catalog.")
    parser.add_argument("--database", help="Glue database (defaults to CATALOG_DATABASE).")
    parser.add_argument("--table-name", help="Table name (defaults to CATALOG_TABLE_NAME).")
    parser.add_argument("--location", help="S3 URI of the table data (defaults to CATALOG_TABLE_LOCATION).")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = load_config()
    overrides = {
        "database": args.database,
        "table_name": args.table_name,
        "location": args.location,
    }
    config = dataclasses.replace(config, **{k: v for k, v in overrides.items() if v})

    # Errors propagate so the process exits non-zero with the traceback.
    TableRegistrar(config=config).register_configured()


if __name__ == "__main__":
    main()
