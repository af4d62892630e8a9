"""
Services Package
================

Business logic layer of the label data-access layer.

Available services:
- LabelService: label CRUD, cascading delete, items-by-labels query
- AuthorizationService: ownership-based permission gate
- UserAliasService: per-user display aliases
- ProjectItemsGrouper: date bucketing of project items
"""

from bujo.services.authorization import AuthorizationService
from bujo.services.grouping import ProjectItemsGrouper
from bujo.services.labels import LabelService, get_label_service
from bujo.services.user_alias import UserAliasService

__all__ = [
    "AuthorizationService",
    "ProjectItemsGrouper",
    "LabelService",
    "get_label_service",
    "UserAliasService",
]
