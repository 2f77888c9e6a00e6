from .config import RegistrarConfig, load_config
from .descriptor import (
    ColumnDescriptor,
    TableDescriptor,
    build_column,
    build_descriptor,
    from_table_input,
    to_table_input,
)
from .errors import (
    CatalogAccessDeniedError,
    CatalogError,
    CatalogServiceError,
    CatalogTransportError,
    CatalogValidationError,
    DescriptorError,
    TableAlreadyExistsError,
)
from .registrar import TableRegistrar

__all__ = [
    "RegistrarConfig",
    "load_config",
    "ColumnDescriptor",
    "TableDescriptor",
    "build_column",
    "build_descriptor",
    "from_table_input",
    "to_table_input",
    "CatalogError",
    "DescriptorError",
    "CatalogTransportError",
    "CatalogServiceError",
    "TableAlreadyExistsError",
    "CatalogAccessDeniedError",
    "CatalogValidationError",
    "TableRegistrar",
    "get_registrar",
]


def get_registrar() -> TableRegistrar:
    """
    Get a registrar configured from the environment.
    """
    return TableRegistrar(config=load_config())
