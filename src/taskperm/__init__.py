"""TaskPerm - hierarchical permission resolution for workspaces, spaces, folders, lists and tasks."""

__version__ = "0.1.0"
