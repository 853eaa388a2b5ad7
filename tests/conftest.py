"""Shared fixtures: mocked Google API resources and a scripted prompt."""

from unittest.mock import MagicMock

import pytest

from google_services.classroom_service import ClassroomService
from google_services.drive_service import DriveService


def build_classroom_resource(courses=None, coursework=None):
    """Mock Classroom API resource returning fixed list responses."""
    resource = MagicMock()
    courses_api = resource.courses.return_value
    courses_api.list.return_value.execute.return_value = {"courses": courses or []}
    courses_api.courseWork.return_value.list.return_value.execute.return_value = {
        "courseWork": coursework or []
    }
    return resource


@pytest.fixture
def make_classroom():
    def factory(courses=None, coursework=None):
        return ClassroomService(service=build_classroom_resource(courses, coursework))
    return factory


@pytest.fixture
def drive():
    service = DriveService(service=MagicMock())
    service.fetch_attachment = MagicMock(return_value=None)
    return service


@pytest.fixture
def typhoon():
    client = MagicMock()
    client.summarize_text.return_value = "📌 **ประเภทงาน**: แบบฝึกหัด"
    client.summarize_file.return_value = "เนื้อหาไฟล์"
    return client


@pytest.fixture
def answers():
    """Build an ask() callable that replays the given inputs in order."""
    def factory(*values):
        remaining = iter(values)
        return lambda prompt: next(remaining)
    return factory


@pytest.fixture
def classroom_resource():
    return build_classroom_resource
