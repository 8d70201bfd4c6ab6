"""Skill logic built on the request/response models."""

from .skill_handler import handle_request

__all__ = ["handle_request"]
