"""Configuration management utilities."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from ..core.constants import ENVIRONMENT_FILE_NAME, JSON_SUFFIXES, YAML_SUFFIXES
from ..core.exceptions import CodeBuildEnvError, ConfigurationError
from ..models.environment import EnvironmentVariable, ProjectEnvironment

logger = logging.getLogger(__name__)


def read_definition(path: Path) -> Dict[str, Any]:
    """Read a raw environment definition from a JSON or YAML file."""
    if not path.exists():
        raise ConfigurationError(f"File not found: {path}")

    suffix = path.suffix.lower()
    try:
        text = path.read_text()
        if suffix in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        elif suffix in JSON_SUFFIXES:
            data = json.loads(text)
        else:
            raise ConfigurationError(f"Unsupported file type '{path.suffix}', expected .json, .yaml or .yml")
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping at the top level")
    # Project descriptions nest the environment under its own key
    if isinstance(data.get("environment"), dict):
        data = data["environment"]
    return data


def load_environment_file(path: Path) -> ProjectEnvironment:
    """Load and validate a ProjectEnvironment from a JSON or YAML file."""
    return ProjectEnvironment.create(read_definition(path))


class ConfigManager:
    """Manages the build environment stored for a project."""

    def __init__(self, data_dir: Path):
        """Initialize config manager."""
        self.data_dir = data_dir
        self.environment_file = data_dir / ENVIRONMENT_FILE_NAME

    def save_environment(self, environment: ProjectEnvironment):
        """Save the build environment."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        data = environment.to_dict()
        self.environment_file.write_text(json.dumps(data, indent=2))
        logger.info(f"Saved environment to {self.environment_file}")

    def get_environment(self) -> Optional[ProjectEnvironment]:
        """Load the build environment, or None if none has been saved."""
        if not self.environment_file.exists():
            return None
        try:
            data = json.loads(self.environment_file.read_text())
            return ProjectEnvironment.create(data)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid environment file {self.environment_file}: {e}") from e
        except (CodeBuildEnvError, ValidationError) as e:
            raise ConfigurationError(f"Stored environment is not valid: {e}") from e

    def require_environment(self) -> ProjectEnvironment:
        environment = self.get_environment()
        if environment is None:
            raise ConfigurationError("No environment configured. Run 'codebuild-env init' first.")
        return environment

    def init_environment(self, env_type: str, image: str, compute_type: str) -> ProjectEnvironment:
        """Create and save a fresh environment."""
        environment = ProjectEnvironment.create({
            "type": env_type,
            "image": image,
            "computeType": compute_type,
        })
        self.save_environment(environment)
        return environment

    def _update(self, **changes) -> ProjectEnvironment:
        # Rebuild through validation; model_copy(update=...) would skip it
        current = self.require_environment()
        data = current.to_dict()
        data.update(changes)
        environment = ProjectEnvironment.create(data)
        self.save_environment(environment)
        return environment

    def set_image(self, image: str) -> ProjectEnvironment:
        """Change the build image."""
        logger.info(f"Setting image to {image}")
        return self._update(image=image)

    def set_compute_type(self, compute_type: str) -> ProjectEnvironment:
        """Change the compute tier."""
        logger.info(f"Setting compute type to {compute_type}")
        return self._update(computeType=compute_type)

    def set_privileged_mode(self, enabled: bool) -> ProjectEnvironment:
        """Enable or disable privileged mode."""
        return self._update(privilegedMode=enabled)

    def set_environment_variable(self, name: str, value: str, var_type: Optional[str] = None) -> ProjectEnvironment:
        """Add or update an environment variable, keeping its position if it exists."""
        current = self.require_environment()
        variable = EnvironmentVariable.create({"name": name, "value": value, "type": var_type})
        variables = list(current.environment_variables)
        for index, existing in enumerate(variables):
            if existing.name == name:
                variables[index] = variable
                break
        else:
            variables.append(variable)
        logger.info(f"Setting environment variable {name}")
        return self._update(environmentVariables=[v.to_dict() for v in variables])

    def remove_environment_variable(self, name: str) -> bool:
        """Remove an environment variable. Returns True if removed."""
        current = self.require_environment()
        variables = [v for v in current.environment_variables if v.name != name]
        if len(variables) == len(current.environment_variables):
            return False
        self._update(environmentVariables=[v.to_dict() for v in variables])
        logger.info(f"Removed environment variable {name}")
        return True
