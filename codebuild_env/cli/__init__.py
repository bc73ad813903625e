"""Command line interface for codebuild-env."""
