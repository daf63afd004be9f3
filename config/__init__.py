"""Konfiguration: Schema, Defaults und YAML-Manager."""
