"""Operating-systems exercises: worker and marker threads, file-based message queues and binary employee records."""

__version__ = "0.1.0"