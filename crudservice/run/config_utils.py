import logging
import os
from pathlib import Path
from typing import Any, Union

import yaml
from dependency_injector import containers
from jinja2 import Environment, StrictUndefined

logger = logging.getLogger(__name__)

CONFIG_FILE_ENVIRONMENT_VARIABLE_NAME = "CRUDSERVICE_CONFIG_FILE"
DEFAULT_CONFIG_FILE_PATH = "crudservice-config.yaml"
SECRET_FILE_ENVIRONMENT_VARIABLE_NAME = "CRUDSERVICE_SECRETS_FILE"
DEFAULT_SECRETS_FILE_PATH = ".crudservice-config-secrets/.secrets.yaml"

_template_environment = Environment(undefined=StrictUndefined, autoescape=False)


def get_application_config_files() -> tuple[str, str]:
    config_file_path = os.environ.get(
        CONFIG_FILE_ENVIRONMENT_VARIABLE_NAME, DEFAULT_CONFIG_FILE_PATH
    )
    secrets_file_path = os.environ.get(
        SECRET_FILE_ENVIRONMENT_VARIABLE_NAME, DEFAULT_SECRETS_FILE_PATH
    )

    return config_file_path, secrets_file_path


def render_config_value(value: Any, secrets: dict[str, Any]) -> Any:
    """Render jinja2 templates in every string of a configuration value.

    Only strings are rendered, so a secret may contain quotes or braces.
    Undefined secret names raise ``jinja2.UndefinedError``.
    """
    if isinstance(value, str):
        if "{{" not in value and "{%" not in value:
            return value
        return _template_environment.from_string(value).render(secrets)
    if isinstance(value, dict):
        return {key: render_config_value(item, secrets) for key, item in value.items()}
    if isinstance(value, list):
        return [render_config_value(item, secrets) for item in value]
    return value


def render_config_secrets(
    config: dict[str, Any], secrets: dict[str, Any]
) -> dict[str, Any]:
    if not secrets:
        logger.warning("Secrets dictionary is empty. Skipping config rendering")
        return config
    return render_config_value(config, secrets)


def load_yaml_file(file_path: str) -> Union[None, dict[str, Any]]:
    path = Path(file_path)
    if not path.exists():
        return None
    with path.open() as f:
        return yaml.safe_load(f) or {}


def set_application_configuration(
    container: containers.Container,
    config_file_path: Union[None, str] = None,
    secrets_file_path: Union[None, str] = None,
) -> bool:
    """Load configuration and secrets files into the container.

    File paths default to the environment variables
    ``CRUDSERVICE_CONFIG_FILE`` and ``CRUDSERVICE_SECRETS_FILE``. Returns
    False if the configuration file is missing or empty.
    """
    if not container:
        raise ValueError("Container is not defined")
    default_config_file_path, default_secrets_file_path = (
        get_application_config_files()
    )
    config_file_path = config_file_path or default_config_file_path
    secrets_file_path = secrets_file_path or default_secrets_file_path

    secrets = load_yaml_file(secrets_file_path)
    if secrets is None:
        logger.warning("Secret file %s does not exist.", secrets_file_path)
        secrets = {}
    elif not secrets:
        logger.warning("Secret file %s content is empty", secrets_file_path)
    else:
        container.secrets.from_dict(secrets)

    config = load_yaml_file(config_file_path)
    if config is None:
        logger.error("Config file %s does not exist", config_file_path)
        return False
    if not config:
        logger.error("Config file %s content is empty", config_file_path)
        return False
    container.config.from_dict(render_config_secrets(config, secrets))
    return True
