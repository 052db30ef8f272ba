"""Render data assembled from data files, overrides and the environment."""

from .values import DataError, build_context, coerce_value, load_data_file, set_value

__all__ = ["DataError", "build_context", "coerce_value", "load_data_file", "set_value"]
