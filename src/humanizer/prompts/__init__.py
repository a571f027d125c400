"""Prompt templates and assembly."""
