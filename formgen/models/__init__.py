"""Typed models for form documents and their fields."""
