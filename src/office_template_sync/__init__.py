"""office-template-sync -- keep Office template folders current with a remote template repository."""

__version__ = '0.1.0'
