"""Core configuration for clone-classifier."""
