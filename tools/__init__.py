"""External collaborators and instrumentation helpers."""
