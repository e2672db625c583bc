"""Classic algorithms and data structures: sorting, graphs, tries, linked lists,
expression conversion, integer utilities and array problems."""

__version__ = "0.1.0"