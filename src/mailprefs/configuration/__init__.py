"""Configuration helpers for projects using django-configurations."""
