"""JSON-backed to-do store for tasks, exams, projects and reports, with a command line."""

__version__ = "1.0.0"
__all__ = ["__version__"]