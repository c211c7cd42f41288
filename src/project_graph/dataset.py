"""Sample project graph dataset.

Fixed, hand-authored records for a small organization: two teams, their
members, two projects with health ratings, tasks, task assignments and
milestones. The seed order follows the reference chain:

    teams -> members -> projects -> project_health
          -> tasks -> task_assignments -> milestones
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

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

Record = Union[Team, Member, Project, ProjectHealth, Task, TaskAssignment, Milestone]

TEAMS: list[Team] = [
    Team(key="team-dev", name="Development Team", lead_member_id="member-oliver"),
    Team(key="team-design", name="Design Team", lead_member_id="member-ava"),
]

MEMBERS: list[Member] = [
    Member(
        key="member-oliver",
        first_name="Oliver",
        last_name="Mason",
        email="oliver.mason@example.com",
        role="Engineering Manager",
        team_id="team-dev",
    ),
    Member(
        key="member-ava",
        first_name="Ava",
        last_name="Nguyen",
        email="ava.nguyen@example.com",
        role="Design Lead",
        team_id="team-design",
    ),
    Member(
        key="member-liam",
        first_name="Liam",
        last_name="Garcia",
        email="liam.garcia@example.com",
        role="Backend Engineer",
        team_id="team-dev",
    ),
    Member(
        key="member-sofia",
        first_name="Sofia",
        last_name="Khan",
        email="sofia.khan@example.com",
        role="Product Designer",
        team_id="team-design",
    ),
]

PROJECTS: list[Project] = [
    Project(
        key="project-analytics",
        name="Analytics Platform Refresh",
        description="Rebuild the analytics data pipeline and dashboards.",
        status=ProjectStatus.ACTIVE,
        team_id="team-dev",
        start_date="2024-01-15",
        end_date="2024-12-15",
    ),
    Project(
        key="project-mobile",
        name="Mobile App Redesign",
        description="Modernise the mobile application UX and UI with new onboarding flows.",
        status=ProjectStatus.PLANNING,
        team_id="team-design",
        start_date="2024-03-01",
        end_date="2024-09-30",
    ),
]

PROJECT_HEALTH: list[ProjectHealth] = [
    ProjectHealth(
        key="health-project-analytics",
        project_id="project-analytics",
        status=HealthStatus.AT_RISK,
        updated_at="2024-04-10T10:00:00Z",
    ),
    ProjectHealth(
        key="health-project-mobile",
        project_id="project-mobile",
        status=HealthStatus.ON_TRACK,
        updated_at="2024-03-25T15:30:00Z",
    ),
]

TASKS: list[Task] = [
    Task(
        key="task-data-model",
        project_id="project-analytics",
        name="Define canonical data model",
        status=TaskStatus.IN_PROGRESS,
        due_date="2024-04-30",
        assigned_team_id="team-dev",
    ),
    Task(
        key="task-dashboard",
        project_id="project-analytics",
        name="Build executive dashboard",
        status=TaskStatus.NOT_STARTED,
        due_date="2024-06-15",
        assigned_team_id="team-dev",
    ),
    Task(
        key="task-onboarding-flow",
        project_id="project-mobile",
        name="Prototype onboarding flow",
        status=TaskStatus.IN_REVIEW,
        due_date="2024-05-20",
        assigned_team_id="team-design",
    ),
    Task(
        key="task-style-guide",
        project_id="project-mobile",
        name="Update mobile design system",
        status=TaskStatus.IN_PROGRESS,
        due_date="2024-06-10",
        assigned_team_id="team-design",
    ),
]

TASK_ASSIGNMENTS: list[TaskAssignment] = [
    TaskAssignment(
        key="assign-data-model-liam",
        task_id="task-data-model",
        member_id="member-liam",
        hours_planned=40,
        hours_actual=12,
    ),
    TaskAssignment(
        key="assign-dashboard-oliver",
        task_id="task-dashboard",
        member_id="member-oliver",
        hours_planned=24,
        hours_actual=0,
    ),
    TaskAssignment(
        key="assign-onboarding-ava",
        task_id="task-onboarding-flow",
        member_id="member-ava",
        hours_planned=32,
        hours_actual=18,
    ),
    TaskAssignment(
        key="assign-style-sofia",
        task_id="task-style-guide",
        member_id="member-sofia",
        hours_planned=28,
        hours_actual=9,
    ),
]

MILESTONES: list[Milestone] = [
    Milestone(
        key="milestone-analytics-alpha",
        project_id="project-analytics",
        name="Analytics alpha release",
        target_date="2024-08-01",
        status=MilestoneStatus.PLANNED,
    ),
    Milestone(
        key="milestone-mobile-beta",
        project_id="project-mobile",
        name="Mobile beta handoff",
        target_date="2024-07-15",
        status=MilestoneStatus.PLANNED,
    ),
]

# Dependency order: referenced collections come first.
SEED_PLAN: list[tuple[str, Sequence[Record]]] = [
    (Team.collection, TEAMS),
    (Member.collection, MEMBERS),
    (Project.collection, PROJECTS),
    (ProjectHealth.collection, PROJECT_HEALTH),
    (Task.collection, TASKS),
    (TaskAssignment.collection, TASK_ASSIGNMENTS),
    (Milestone.collection, MILESTONES),
]

COLLECTION_NAMES: list[str] = [name for name, _records in SEED_PLAN]

EXPECTED_COUNTS: dict[str, int] = {name: len(records) for name, records in SEED_PLAN}


@dataclass(frozen=True)
class Reference:
    """A document field holding the ``_key`` of a document in another collection."""

    collection: str
    field: str
    target: str

    @property
    def label(self) -> str:
        return f"{self.collection}.{self.field} -> {self.target}"


REFERENCES: list[Reference] = [
    Reference("teams", "leadMemberId", "members"),
    Reference("members", "teamId", "teams"),
    Reference("projects", "teamId", "teams"),
    Reference("project_health", "projectId", "projects"),
    Reference("tasks", "projectId", "projects"),
    Reference("tasks", "assignedTeamId", "teams"),
    Reference("task_assignments", "taskId", "tasks"),
    Reference("task_assignments", "memberId", "members"),
    Reference("milestones", "projectId", "projects"),
]


def seed_documents() -> dict[str, list[dict[str, Any]]]:
    """Return the sample dataset as ArangoDB documents, keyed by collection."""
    return {
        name: [record.to_document() for record in records]
        for name, records in SEED_PLAN
    }


def find_dangling_references(
    documents: Mapping[str, Sequence[Mapping[str, Any]]],
) -> dict[Reference, list[str]]:
    """Find documents whose reference fields point at missing keys.

    Args:
        documents: Documents per collection name (missing collections count
            as empty).

    Returns:
        Dict mapping each violated reference to the offending ``_key`` values.
        Empty when every reference resolves.
    """
    keys = {
        name: {doc["_key"] for doc in docs}
        for name, docs in documents.items()
    }
    dangling: dict[Reference, list[str]] = {}

    for ref in REFERENCES:
        targets = keys.get(ref.target, set())
        offenders = [
            doc["_key"]
            for doc in documents.get(ref.collection, [])
            if doc.get(ref.field) not in targets
        ]
        if offenders:
            dangling[ref] = offenders

    return dangling
