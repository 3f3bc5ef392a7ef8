"""CLI commands for clone-classifier."""
