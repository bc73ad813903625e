"""Core validation, errors and wire codec for codebuild-env."""
