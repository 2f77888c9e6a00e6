from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple
from urllib.parse import urlparse

from .config import RegistrarConfig
from .errors import DescriptorError
from .schema import PARQUET_INPUT_FORMAT, PARQUET_OUTPUT_FORMAT, PARQUET_SERDE, parse_type

OBJECT_STORE_SCHEMES = {"s3", "s3a", "s3n"}

DELTA_CLASSIFICATION = "delta"
# Documented by AWS for Lake Formation, but Athena rejects tables that carry it.
SPARK_PROVIDER_KEY = "spark.sql.sources.provider"
# Set by table_parameters; extra parameters may not override them.
RESERVED_PARAMETERS = {"classification", "table_type", SPARK_PROVIDER_KEY}


@dataclass(frozen=True)
class ColumnDescriptor:
    name: str
    data_type: str
    nullable: bool = False

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise DescriptorError("Column name must be a non-empty string")
        if not self.data_type or not self.data_type.strip():
            raise DescriptorError(f"Column {self.name!r} must have a data type")


@dataclass(frozen=True)
class TableDescriptor:
    """
    A single table definition, validated on construction so that a malformed
    request never reaches the catalog.
    """

    name: str
    database: str
    storage_location: str
    columns: Tuple[ColumnDescriptor, ...]
    input_format: str = PARQUET_INPUT_FORMAT
    output_format: str = PARQUET_OUTPUT_FORMAT
    serialization_library: str = PARQUET_SERDE
    parameters: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise DescriptorError("Table name must be a non-empty string")
        if not self.database or not self.database.strip():
            raise DescriptorError(f"Database name for table {self.name} must be a non-empty string")
        # Accept any sequence but store an immutable one.
        object.__setattr__(self, "columns", tuple(self.columns))
        if not self.columns:
            raise DescriptorError(f"Table {self.name} must declare at least one column")
        seen = set()
        for column in self.columns:
            if column.name in seen:
                raise DescriptorError(f"Duplicate column {column.name!r} in table {self.name}")
            seen.add(column.name)
        _check_location(self.storage_location)
        for key, value in self.parameters.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise DescriptorError(f"Table parameter {key!r} must map a string to a string")
        # Parameters are stored as a read-only copy.
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @property
    def qualified_name(self) -> str:
        return f"{self.database}.{self.name}"


def _check_location(location: str) -> None:
    parsed = urlparse(location or "")
    if parsed.scheme not in OBJECT_STORE_SCHEMES or not parsed.netloc:
        raise DescriptorError(f"Storage location must be an s3:// URI with a bucket, got {location!r}")


def build_column(name: str, data_type: str, nullable: bool) -> ColumnDescriptor:
    return ColumnDescriptor(name=name, data_type=data_type, nullable=nullable)


def columns_from_schema(schema: Mapping[str, str]) -> Tuple[ColumnDescriptor, ...]:
    """Turn a declarative {name: "type?"} schema into columns, keeping declaration order."""
    columns = []
    for name, declared in schema.items():
        data_type, nullable = parse_type(declared)
        columns.append(build_column(name, data_type, nullable))
    return tuple(columns)


def table_parameters(config: RegistrarConfig) -> Dict[str, str]:
    reserved = RESERVED_PARAMETERS.intersection(config.extra_parameters)
    if reserved:
        raise DescriptorError(f"Extra table parameters may not set reserved keys: {sorted(reserved)}")
    parameters = {"classification": DELTA_CLASSIFICATION}
    if config.legacy_table_type:
        # AWS says not to use this key, but it is the one Athena honours.
        parameters["table_type"] = "DELTA"
    else:
        parameters[SPARK_PROVIDER_KEY] = DELTA_CLASSIFICATION
    parameters.update(config.extra_parameters)
    return parameters


def build_descriptor(config: RegistrarConfig) -> TableDescriptor:
    """
    Assemble the table definition described by config.

    Args:
        config: Table name, database, location, schema and parameter options.

    Returns:
        A validated TableDescriptor for a Parquet-backed Delta table.
    """
    return TableDescriptor(
        name=config.table_name,
        database=config.database,
        storage_location=config.location,
        columns=columns_from_schema(config.schema),
        parameters=table_parameters(config),
    )


def to_table_input(descriptor: TableDescriptor) -> Dict[str, Any]:
    """Render the descriptor as the `TableInput` payload of Glue's CreateTable."""
    return {
        "Name": descriptor.name,
        "StorageDescriptor": {
            "Columns": [
                {
                    "Name": column.name,
                    "Type": column.data_type,
                    "Parameters": {"nullable": str(column.nullable).lower()},
                }
                for column in descriptor.columns
            ],
            "Location": descriptor.storage_location,
            "InputFormat": descriptor.input_format,
            "OutputFormat": descriptor.output_format,
            "SerdeInfo": {"SerializationLibrary": descriptor.serialization_library},
        },
        "Parameters": dict(descriptor.parameters),
    }


def from_table_input(database: str, table_input: Mapping[str, Any]) -> TableDescriptor:
    storage = table_input.get("StorageDescriptor", {})
    columns = [
        build_column(
            column.get("Name", ""),
            column.get("Type", ""),
            column.get("Parameters", {}).get("nullable", "false") == "true",
        )
        for column in storage.get("Columns", [])
    ]
    return TableDescriptor(
        name=table_input.get("Name", ""),
        database=database,
        storage_location=storage.get("Location", ""),
        columns=tuple(columns),
        input_format=storage.get("InputFormat", PARQUET_INPUT_FORMAT),
        output_format=storage.get("OutputFormat", PARQUET_OUTPUT_FORMAT),
        serialization_library=storage.get("SerdeInfo", {}).get("SerializationLibrary", PARQUET_SERDE),
        parameters=dict(table_input.get("Parameters", {})),
    )
