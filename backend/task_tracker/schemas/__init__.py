"""Pydantic Schemas: request/response shapes for the task API.

Invariants:
    - Request schemas parse structure only; field rules live in core/validators.py
    - Response schemas serialize with camelCase keys
"""
