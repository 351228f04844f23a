"""shopkit - storefront utility functions and their collaborator ports."""

__version__ = "0.1.0"
