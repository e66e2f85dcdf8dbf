"""javaline - scaffolding for lightweight Java projects."""

__version__ = "0.1.0"
