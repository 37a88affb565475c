"""Ambient concerns shared by the validation engine: settings, logging, errors."""
