#!/usr/bin/env python3
"""
Console rendering for the Classroom assistant - menus, boxed lists, headers.
"""

from typing import List

from google_services.classroom_service import Course, CourseWork

RULE_WIDTH = 60


def truncate(text: str, limit: int) -> str:
    """Cut text longer than limit to limit-3 characters plus '...'."""
    if len(text) > limit:
        return text[:limit - 3] + "..."
    return text


def indent(text: str, prefix: str = "      ") -> str:
    return "\n".join(prefix + line for line in text.split("\n"))


def due_label(work: CourseWork) -> str:
    """'(d/m/y)' for the assignment table, empty without a due date."""
    return f"({work.due_date})" if work.due_date else ""


def print_rule(char: str = "═"):
    print("\n" + char * RULE_WIDTH)


def print_main_menu():
    print("\n╭─────────────────────────────────────╮")
    print("│      📚 Classroom AI Assistant      │")
    print("├─────────────────────────────────────┤")
    print("│  1. ดูรายวิชาทั้งหมด                 │")
    print("│  2. ดูงานแต่ละวิชา                   │")
    print("│  3. สรุปเนื้อหางาน (AI อ่าน PDF/รูป) │")
    print("│  0. ออกจากโปรแกรม                   │")
    print("╰─────────────────────────────────────╯")


def print_course_table(courses: List[Course]):
    """Boxed, numbered course list with a trailing count."""
    print("\n╭─────────────────────────────────────────────────╮")
    print("│           📚 รายวิชาทั้งหมด                      │")
    print("├─────────────────────────────────────────────────┤")

    for i, course in enumerate(courses, 1):
        print(f"│  {i:>2}. {truncate(course.name, 40):<42} │")

    print("╰─────────────────────────────────────────────────╯")
    print(f"\n✅ พบทั้งหมด {len(courses)} วิชา")


def print_coursework_table(course: Course, works: List[CourseWork]):
    """Boxed, numbered assignment list with due dates and a trailing count."""
    print("\n╭─────────────────────────────────────────────────────────╮")
    print(f"│  📝 งานในวิชา: {course.name[:38]:<38} │")
    print("├─────────────────────────────────────────────────────────┤")

    for i, work in enumerate(works, 1):
        print(f"│  {i:>2}. {truncate(work.title, 45):<45} {due_label(work):<12} │")

    print("╰─────────────────────────────────────────────────────────╯")
    print(f"\n✅ พบทั้งหมด {len(works)} งาน")


def print_course_picker(courses: List[Course]):
    print("\n📚 เลือกวิชา:")
    for i, course in enumerate(courses, 1):
        print(f"   {i}. {course.name}")
    print("   0. กลับเมนูหลัก")


def print_coursework_picker(works: List[CourseWork]):
    print("\n📝 เลือกงาน:")
    for i, work in enumerate(works, 1):
        due = f" (กำหนดส่ง: {work.due_date})" if work.due_date else ""
        print(f"   {i}. {work.title}{due}")
    print("   0. กลับ")
