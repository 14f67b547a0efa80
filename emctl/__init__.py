"""Resource model, printing, settings file and staged installation helpers for an EaseMesh service mesh."""

__version__ = "0.1.0"