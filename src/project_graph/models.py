"""Document models for the project graph collections.

Each model maps one ArangoDB document collection. Documents are flat: the
record identifier is stored as ``_key`` and every other attribute uses the
camelCase field names the collections have always used.

Relationships are implied by identifier fields (``teamId``, ``projectId``,
...). ArangoDB does not enforce them; see ``dataset.REFERENCES``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class ProjectStatus(str, Enum):
    """Lifecycle state of a project."""
    ACTIVE = "ACTIVE"
    PLANNING = "PLANNING"


class HealthStatus(str, Enum):
    """Health rating attached to a project."""
    AT_RISK = "AT_RISK"
    ON_TRACK = "ON_TRACK"


class TaskStatus(str, Enum):
    """Progress state of a task."""
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    IN_REVIEW = "IN_REVIEW"


class MilestoneStatus(str, Enum):
    PLANNED = "PLANNED"


@dataclass
class Team:
    """A team, led by one of its members."""

    collection: ClassVar[str] = "teams"

    key: str
    name: str
    lead_member_id: str

    def to_document(self) -> dict[str, Any]:
        """Convert to an ArangoDB document."""
        return {
            "_key": self.key,
            "name": self.name,
            "leadMemberId": self.lead_member_id,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> Team:
        """Create Team from an ArangoDB document."""
        return cls(
            key=doc["_key"],
            name=doc["name"],
            lead_member_id=doc["leadMemberId"],
        )


@dataclass
class Member:
    """A person belonging to exactly one team."""

    collection: ClassVar[str] = "members"

    key: str
    first_name: str
    last_name: str
    email: str
    role: str
    team_id: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_document(self) -> dict[str, Any]:
        """Convert to an ArangoDB document."""
        return {
            "_key": self.key,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "role": self.role,
            "teamId": self.team_id,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> Member:
        """Create Member from an ArangoDB document."""
        return cls(
            key=doc["_key"],
            first_name=doc["firstName"],
            last_name=doc["lastName"],
            email=doc["email"],
            role=doc["role"],
            team_id=doc["teamId"],
        )


@dataclass
class Project:
    """A project owned by a team.

    Fields:
        start_date: ISO-8601 date (YYYY-MM-DD)
        end_date: ISO-8601 date (YYYY-MM-DD)
    """

    collection: ClassVar[str] = "projects"

    key: str
    name: str
    description: str
    status: ProjectStatus
    team_id: str
    start_date: str
    end_date: str

    def to_document(self) -> dict[str, Any]:
        """Convert to an ArangoDB document."""
        return {
            "_key": self.key,
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "teamId": self.team_id,
            "startDate": self.start_date,
            "endDate": self.end_date,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> Project:
        """Create Project from an ArangoDB document."""
        return cls(
            key=doc["_key"],
            name=doc["name"],
            description=doc["description"],
            status=ProjectStatus(doc["status"]),
            team_id=doc["teamId"],
            start_date=doc["startDate"],
            end_date=doc["endDate"],
        )


@dataclass
class ProjectHealth:
    """Latest health rating of a project (``updated_at`` is an ISO-8601 timestamp)."""

    collection: ClassVar[str] = "project_health"

    key: str
    project_id: str
    status: HealthStatus
    updated_at: str

    def to_document(self) -> dict[str, Any]:
        """Convert to an ArangoDB document."""
        return {
            "_key": self.key,
            "projectId": self.project_id,
            "status": self.status.value,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> ProjectHealth:
        """Create ProjectHealth from an ArangoDB document."""
        return cls(
            key=doc["_key"],
            project_id=doc["projectId"],
            status=HealthStatus(doc["status"]),
            updated_at=doc["updatedAt"],
        )


@dataclass
class Task:
    """A unit of work inside a project, assigned to a team."""

    collection: ClassVar[str] = "tasks"

    key: str
    project_id: str
    name: str
    status: TaskStatus
    due_date: str
    assigned_team_id: str

    def to_document(self) -> dict[str, Any]:
        """Convert to an ArangoDB document."""
        return {
            "_key": self.key,
            "projectId": self.project_id,
            "name": self.name,
            "status": self.status.value,
            "dueDate": self.due_date,
            "assignedTeamId": self.assigned_team_id,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> Task:
        """Create Task from an ArangoDB document."""
        return cls(
            key=doc["_key"],
            project_id=doc["projectId"],
            name=doc["name"],
            status=TaskStatus(doc["status"]),
            due_date=doc["dueDate"],
            assigned_team_id=doc["assignedTeamId"],
        )


@dataclass
class TaskAssignment:
    """Hours a member has planned and spent on a task."""

    collection: ClassVar[str] = "task_assignments"

    key: str
    task_id: str
    member_id: str
    hours_planned: float
    hours_actual: float

    @property
    def hours_remaining(self) -> float:
        return max(self.hours_planned - self.hours_actual, 0)

    def to_document(self) -> dict[str, Any]:
        """Convert to an ArangoDB document."""
        return {
            "_key": self.key,
            "taskId": self.task_id,
            "memberId": self.member_id,
            "hoursPlanned": self.hours_planned,
            "hoursActual": self.hours_actual,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> TaskAssignment:
        """Create TaskAssignment from an ArangoDB document."""
        return cls(
            key=doc["_key"],
            task_id=doc["taskId"],
            member_id=doc["memberId"],
            hours_planned=doc["hoursPlanned"],
            hours_actual=doc["hoursActual"],
        )


@dataclass
class Milestone:
    """A dated checkpoint of a project."""

    collection: ClassVar[str] = "milestones"

    key: str
    project_id: str
    name: str
    target_date: str
    status: MilestoneStatus

    def to_document(self) -> dict[str, Any]:
        """Convert to an ArangoDB document."""
        return {
            "_key": self.key,
            "projectId": self.project_id,
            "name": self.name,
            "targetDate": self.target_date,
            "status": self.status.value,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> Milestone:
        """Create Milestone from an ArangoDB document."""
        return cls(
            key=doc["_key"],
            project_id=doc["projectId"],
            name=doc["name"],
            target_date=doc["targetDate"],
            status=MilestoneStatus(doc["status"]),
        )
