#!/usr/bin/env python3
"""
Google Classroom Service - Read a student's active courses and coursework.

The active course list is fetched once per process and reused afterwards;
coursework is always fetched fresh.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Union

from googleapiclient.errors import HttpError

from google_services.auth import GoogleAuth

logger = logging.getLogger(__name__)


class ClassroomError(Exception):
    """A course or coursework listing call failed."""


@dataclass(frozen=True)
class Course:
    """An active Classroom course."""
    id: str
    name: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Course":
        return cls(id=data["id"], name=data.get("name", ""))


@dataclass(frozen=True)
class DueDate:
    """Calendar due date as Classroom reports it (no time zone)."""
    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


@dataclass(frozen=True)
class DriveFileMaterial:
    """Reference to a file in Google Drive."""
    id: str
    title: str


@dataclass(frozen=True)
class LinkMaterial:
    """Plain hyperlink."""
    url: str


Material = Union[DriveFileMaterial, LinkMaterial]


def parse_material(data: Dict[str, Any]) -> Optional[Material]:
    """Convert a Classroom material dict; kinds other than Drive files and links give None."""
    if "driveFile" in data:
        drive_file = data["driveFile"].get("driveFile") or {}
        if not drive_file.get("id"):
            return None
        return DriveFileMaterial(id=drive_file["id"], title=drive_file.get("title", ""))
    if "link" in data:
        url = (data["link"] or {}).get("url")
        return LinkMaterial(url=url) if url else None
    return None


@dataclass
class CourseWork:
    """An assignment posted in a course."""
    id: str
    title: str
    description: Optional[str] = None
    due_date: Optional[DueDate] = None
    materials: List[Material] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "CourseWork":
        due = data.get("dueDate")
        due_date = None
        if due:
            due_date = DueDate(
                day=due.get("day", 0),
                month=due.get("month", 0),
                year=due.get("year", 0),
            )

        materials = []
        for item in data.get("materials", []):
            material = parse_material(item)
            if material is not None:
                materials.append(material)

        return cls(
            id=data["id"],
            title=data.get("title", ""),
            description=data.get("description") or None,
            due_date=due_date,
            materials=materials,
        )

    @property
    def drive_files(self) -> List[DriveFileMaterial]:
        return [m for m in self.materials if isinstance(m, DriveFileMaterial)]

    @property
    def links(self) -> List[LinkMaterial]:
        return [m for m in self.materials if isinstance(m, LinkMaterial)]


def error_message(error: Exception) -> str:
    """Vendor-provided message for an API failure."""
    if isinstance(error, HttpError):
        return error.reason or str(error)
    return str(error)


class ClassroomService:
    """
    Google Classroom API service wrapper.

    Usage:
        classroom = ClassroomService(auth)
        for course in classroom.list_active_courses():
            works = classroom.list_coursework(course.id)
    """

    def __init__(self, auth: Optional[GoogleAuth] = None, service: Any = None):
        """
        Initialize Classroom service.

        Args:
            auth: GoogleAuth instance (creates one if not provided)
            service: Prebuilt Classroom API resource (skips auth)
        """
        self._auth = auth
        self._service = service
        self._courses: List[Course] = []

    @property
    def service(self):
        """Get the Classroom API service (lazy load)."""
        if self._service is None:
            if self._auth is None:
                self._auth = GoogleAuth()
            self._service = self._auth.get_service("classroom")
        return self._service

    @property
    def has_cached_courses(self) -> bool:
        return bool(self._courses)

    def list_active_courses(self) -> List[Course]:
        """
        List the user's active courses.

        The first non-empty result is kept for the rest of the process and
        returned unchanged on every later call.

        Raises:
            ClassroomError: If the API call fails
        """
        if self._courses:
            return self._courses

        try:
            response = self.service.courses().list(courseStates="ACTIVE").execute()
        except Exception as e:
            logger.warning(f"Failed to list courses: {e}")
            raise ClassroomError(error_message(e)) from e

        self._courses = [Course.from_api(c) for c in response.get("courses", [])]
        logger.debug(f"Cached {len(self._courses)} active courses")
        return self._courses

    def list_coursework(self, course_id: str) -> List[CourseWork]:
        """
        List coursework for a course (never cached).

        Raises:
            ClassroomError: If the API call fails
        """
        try:
            response = self.service.courses().courseWork().list(courseId=course_id).execute()
        except Exception as e:
            logger.warning(f"Failed to list coursework for course {course_id}: {e}")
            raise ClassroomError(error_message(e)) from e

        return [CourseWork.from_api(w) for w in response.get("courseWork", [])]
