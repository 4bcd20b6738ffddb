"""Configuration, connections, template models, exporters and the ``mh`` command line for code generation."""

__version__ = "0.1.0"
__all__ = ["__version__"]