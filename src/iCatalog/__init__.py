"""iCatalog: browse a remote item catalog by name, ID or ID range."""

__version__ = "2.0.0"
