"""Command line interface for category-sorter."""
