"""
Feature modules for Horse Compare.

Each feature is a self-contained module with:
- models.py - Dataclasses (no DB dependency)
- schemas.py - Pydantic schemas
- service.py - Business logic
- loader.py - Data ingestion (optional)
"""
