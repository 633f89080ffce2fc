"""Scaffolds the Domain/Application/Infrastructure/Framework files of a PHP entity."""

__version__ = "0.1.0"
