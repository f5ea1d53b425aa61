"""Jira API module for mcp_jira.

This module provides the per-tenant Jira Cloud client, composed from one mixin
per area of the REST and Agile APIs.
"""

from .attachments import AttachmentsMixin
from .boards import BoardsMixin
from .client import JiraClient
from .comments import CommentsMixin
from .components import ComponentsMixin
from .config import JiraConfig
from .epics import EpicsMixin
from .filters import FiltersMixin
from .issues import IssuesMixin
from .links import LinksMixin
from .metadata import MetadataMixin
from .projects import ProjectsMixin
from .search import SearchMixin
from .sprints import SprintsMixin
from .transitions import TransitionsMixin
from .users import UsersMixin
from .versions import VersionsMixin
from .watchers import WatchersMixin
from .worklog import WorklogMixin


class JiraFetcher(
    SearchMixin,
    IssuesMixin,
    TransitionsMixin,
    LinksMixin,
    CommentsMixin,
    WorklogMixin,
    AttachmentsMixin,
    WatchersMixin,
    ProjectsMixin,
    ComponentsMixin,
    VersionsMixin,
    MetadataMixin,
    UsersMixin,
    FiltersMixin,
    BoardsMixin,
    SprintsMixin,
    EpicsMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - SearchMixin: JQL search
    - IssuesMixin: Issue CRUD, assignment and changelog
    - TransitionsMixin: Workflow transitions
    - LinksMixin: Issue links and link types
    - CommentsMixin: Comment operations
    - WorklogMixin: Worklog operations
    - AttachmentsMixin: Attachment listing and deletion
    - WatchersMixin: Watchers and votes
    - ProjectsMixin: Projects and project roles
    - ComponentsMixin: Project components
    - VersionsMixin: Project versions
    - MetadataMixin: Issue types, priorities, statuses, fields, labels
    - UsersMixin: Users, groups and connection checks
    - FiltersMixin: Saved filters and dashboards
    - BoardsMixin: Agile boards
    - SprintsMixin: Sprint operations
    - EpicsMixin: Epic operations

    One instance serves a single tenant; it is created per HTTP request.
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
