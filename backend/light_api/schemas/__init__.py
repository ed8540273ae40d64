"""Pydantic Schemas — request/response records for the API boundary.

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
