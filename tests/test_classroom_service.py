"""Course caching, coursework parsing and error wrapping."""

import httplib2
import pytest
from googleapiclient.errors import HttpError

from google_services.classroom_service import (
    ClassroomError,
    ClassroomService,
    CourseWork,
    DriveFileMaterial,
    DueDate,
    LinkMaterial,
)


def http_error(status, message):
    content = f'{{"error": {{"code": {status}, "message": "{message}"}}}}'.encode()
    return HttpError(httplib2.Response({"status": str(status)}), content)


def test_active_courses_are_cached_for_the_session(classroom_resource):
    resource = classroom_resource(courses=[{"id": "1", "name": "Math"}])
    classroom = ClassroomService(service=resource)

    first = classroom.list_active_courses()
    resource.courses.return_value.list.return_value.execute.return_value = {
        "courses": [{"id": "2", "name": "Physics"}]
    }
    second = classroom.list_active_courses()

    assert second is first
    assert [c.name for c in second] == ["Math"]
    resource.courses.return_value.list.assert_called_once_with(courseStates="ACTIVE")


def test_has_cached_courses_after_first_fetch(classroom_resource):
    classroom = ClassroomService(service=classroom_resource(courses=[{"id": "1", "name": "Math"}]))

    assert not classroom.has_cached_courses
    classroom.list_active_courses()
    assert classroom.has_cached_courses


def test_empty_course_list_is_requested_again(classroom_resource):
    resource = classroom_resource(courses=[])
    classroom = ClassroomService(service=resource)

    assert classroom.list_active_courses() == []
    assert not classroom.has_cached_courses

    resource.courses.return_value.list.return_value.execute.return_value = {
        "courses": [{"id": "1", "name": "Math"}]
    }
    courses = classroom.list_active_courses()

    assert [c.name for c in courses] == ["Math"]
    assert resource.courses.return_value.list.call_count == 2
    assert classroom.has_cached_courses


def test_coursework_is_fetched_fresh_every_time(classroom_resource):
    resource = classroom_resource(
        courses=[{"id": "1", "name": "Math"}],
        coursework=[{"id": "w1", "title": "Worksheet"}],
    )
    classroom = ClassroomService(service=resource)

    classroom.list_coursework("1")
    classroom.list_coursework("1")

    list_call = resource.courses.return_value.courseWork.return_value.list
    assert list_call.call_count == 2
    list_call.assert_called_with(courseId="1")


def test_coursework_parses_due_date_and_materials():
    work = CourseWork.from_api({
        "id": "w1",
        "title": "Lab report",
        "description": "Write it up",
        "dueDate": {"year": 2024, "month": 6, "day": 5},
        "materials": [
            {"driveFile": {"driveFile": {"id": "f1", "title": "sheet.pdf"}, "shareMode": "VIEW"}},
            {"link": {"url": "https://example.com/notes", "title": "Notes"}},
            {"youtubeVideo": {"id": "yt1"}},
            {"form": {"formUrl": "https://forms.example.com"}},
        ],
    })

    assert work.due_date == DueDate(day=5, month=6, year=2024)
    assert str(work.due_date) == "5/6/2024"
    assert work.materials == [
        DriveFileMaterial(id="f1", title="sheet.pdf"),
        LinkMaterial(url="https://example.com/notes"),
    ]
    assert work.drive_files == [DriveFileMaterial(id="f1", title="sheet.pdf")]
    assert work.links == [LinkMaterial(url="https://example.com/notes")]


def test_coursework_without_optional_fields():
    work = CourseWork.from_api({"id": "w2", "title": "Quiz"})

    assert work.description is None
    assert work.due_date is None
    assert work.materials == []


@pytest.mark.parametrize("material", [
    {"driveFile": {"driveFile": {"title": "untitled.pdf"}}},
    {"driveFile": {}},
    {"link": {"title": "Notes"}},
])
def test_incomplete_materials_are_skipped(material):
    work = CourseWork.from_api({
        "id": "w3",
        "title": "Reading",
        "materials": [material, {"link": {"url": "https://example.com/ok"}}],
    })

    assert work.materials == [LinkMaterial(url="https://example.com/ok")]


def test_course_listing_error_carries_vendor_message(classroom_resource):
    resource = classroom_resource()
    resource.courses.return_value.list.return_value.execute.side_effect = http_error(
        403, "The caller does not have permission"
    )

    with pytest.raises(ClassroomError, match="The caller does not have permission"):
        ClassroomService(service=resource).list_active_courses()


def test_coursework_network_error_is_wrapped(classroom_resource):
    resource = classroom_resource()
    resource.courses.return_value.courseWork.return_value.list.return_value.execute.side_effect = (
        OSError("Network is unreachable")
    )

    with pytest.raises(ClassroomError, match="Network is unreachable"):
        ClassroomService(service=resource).list_coursework("1")
