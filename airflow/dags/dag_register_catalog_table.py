from __future__ import annotations

import os
import sys
from datetime import datetime

from airflow import DAG
from airflow.operators.python import PythonOperator

# Ensure project root is in path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../../")))

from catalog import get_registrar

# One-shot provisioning: a failed registration is not safe to retry blindly
# (the table may already exist), so reruns are left to a human.

default_args = {
    "owner": "airflow",
    "depends_on_past": False,
    "start_date": datetime(2023, 1, 1),
    "retries": 0,
}


def _register_table() -> str:
    """Create the configured table and return its qualified name for XCom."""
    descriptor = get_registrar().register_configured()
    return descriptor.qualified_name


with DAG(
    dag_id="register_catalog_table",
    default_args=default_args,
    description="Register the events Delta table in the AWS Glue Data Catalog",
    schedule=None,
    catchup=False,
) as dag:
    register_table = PythonOperator(
        task_id="register_table",
        python_callable=_register_table,
    )
