"""CLI commands for codebuild-env."""
