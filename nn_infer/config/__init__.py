"""
Configuration module for nn_infer.

Provides environment-driven settings for the CLI, the API server and
test-case evaluation.
"""

from .settings import ConfigurationError, InferenceConfig, config

__all__ = ["ConfigurationError", "InferenceConfig", "config"]
