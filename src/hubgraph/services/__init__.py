"""Resource services composing the executor, error translator and mappers."""

from hubgraph.services.base import ResourceService
from hubgraph.services.categories import CategoryService
from hubgraph.services.comments import CommentService
from hubgraph.services.discussions import DiscussionService
from hubgraph.services.fields import FieldService
from hubgraph.services.projects import ProjectService
from hubgraph.services.views import ViewService

__all__ = [
    "CategoryService",
    "CommentService",
    "DiscussionService",
    "FieldService",
    "ProjectService",
    "ResourceService",
    "ViewService",
]
