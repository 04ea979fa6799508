"""
Pydantic schemas for catalog records, recommendation results and API payloads.

All FastAPI endpoints use strict Pydantic models with explicit types.
"""
