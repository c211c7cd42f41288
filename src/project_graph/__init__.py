"""Project graph sample data for ArangoDB.

Models and literal records for the ``project_graph`` database: teams,
members, projects, project health, tasks, task assignments and milestones.
"""

from .dataset import (
    COLLECTION_NAMES,
    EXPECTED_COUNTS,
    REFERENCES,
    SEED_PLAN,
    Reference,
    find_dangling_references,
    seed_documents,
)
from .models import (
    HealthStatus,
    Member,
    Milestone,
    MilestoneStatus,
    Project,
    ProjectHealth,
    ProjectStatus,
    Task,
    TaskAssignment,
    TaskStatus,
    Team,
)

__all__ = [
    "COLLECTION_NAMES",
    "EXPECTED_COUNTS",
    "REFERENCES",
    "SEED_PLAN",
    "Reference",
    "find_dangling_references",
    "seed_documents",
    "HealthStatus",
    "Member",
    "Milestone",
    "MilestoneStatus",
    "Project",
    "ProjectHealth",
    "ProjectStatus",
    "Task",
    "TaskAssignment",
    "TaskStatus",
    "Team",
]
