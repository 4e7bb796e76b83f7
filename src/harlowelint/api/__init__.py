"""REST API for the Harlowe linter."""
