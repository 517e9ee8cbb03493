"""Application package for the School API backend.

This package exposes the configuration, model, repository and route
modules used by the FastAPI application. Individual modules contain the
concrete implementations and documentation; `main.create_app` wires them
together.
"""
