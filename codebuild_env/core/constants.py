"""Constants used throughout codebuild-env."""


# Project-local configuration store
DATA_DIR_NAME = ".codebuild-env"
ENVIRONMENT_FILE_NAME = "environment.json"

# Input files accepted by the CLI
JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")

# Compute tier that needs an explicit compute configuration
ATTRIBUTE_BASED_COMPUTE = "ATTRIBUTE_BASED_COMPUTE"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
