"""
Google Workspace integrations for Classroom AI Assistant.

Provides authentication and services for:
- Classroom (courses and coursework)
- Drive (assignment attachments)
"""

from google_services.auth import (
    AuthorizationError,
    ConsentFlow,
    CredentialStore,
    GoogleAuth,
    authorize,
)
from google_services.classroom_service import (
    ClassroomError,
    ClassroomService,
    Course,
    CourseWork,
    DriveFileMaterial,
    DueDate,
    LinkMaterial,
)
from google_services.drive_service import Attachment, DriveService

__all__ = [
    "AuthorizationError",
    "ConsentFlow",
    "CredentialStore",
    "GoogleAuth",
    "authorize",
    "ClassroomError",
    "ClassroomService",
    "Course",
    "CourseWork",
    "DriveFileMaterial",
    "DueDate",
    "LinkMaterial",
    "Attachment",
    "DriveService",
]
