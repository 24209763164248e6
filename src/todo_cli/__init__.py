"""
Todo CLI.

Components:
- core/models.py: the Todo record
- core/ports.py: storage protocol the manager depends on
- core/todos_manager.py: in-memory task list, persists after every mutation
- storage/: volatile (in-memory) and durable (JSON file) caches
- connectors/console_connector.py: interactive read-eval loop
- cli/: composition root and entrypoint
"""

__version__ = "0.1.0"
