"""
Declarative column schemas for tables registered in the Glue Data Catalog.
A trailing "?" on a type marks the column as nullable.
"""

# Schema for the events table (Delta Lake, written as Parquet)
EVENTS_SCHEMA = {
    "id": "string",
    "time": "timestamp",
    "trace_id": "string?",
    "source": "string",
    "detail_type": "string",
}

# Hive classes Athena uses to read Parquet data files
PARQUET_INPUT_FORMAT = "org.apache.hadoop.hive.ql.io.parquet.MapredParquetInputFormat"
PARQUET_OUTPUT_FORMAT = "org.apache.hadoop.hive.ql.io.parquet.MapredParquetOutputFormat"
PARQUET_SERDE = "org.apache.hadoop.hive.ql.io.parquet.serde.ParquetHiveSerDe"

NULLABLE_SUFFIX = "?"


def parse_type(declared: str) -> tuple:
    """Split a declared type like "string?" into ("string", True)."""
    if declared.endswith(NULLABLE_SUFFIX):
        return declared[: -len(NULLABLE_SUFFIX)], True
    return declared, False
