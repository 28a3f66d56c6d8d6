"""Bytecode export generator for compiled contract artifacts."""

__version__ = "0.1.0"
