"""Helpers for the GitHub Actions workflow command protocol."""
import logging
import os
import uuid

logger = logging.getLogger(__name__)


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_output(name: str, value: str) -> None:
    output_path = os.environ.get("GITHUB_OUTPUT")
    if not output_path:
        logger.info(f"GITHUB_OUTPUT is not set, output {name}={value}")
        return
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    with open(output_path, "a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


def set_failed(message: str) -> None:
    print(f"::error::{escape_data(message)}", flush=True)
