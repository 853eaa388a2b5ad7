#!/usr/bin/env python3
"""
Classroom AI Assistant - Browse Google Classroom and summarize assignments with AI.

Lists active courses and their coursework, downloads Drive attachments,
reads images/PDFs with the Typhoon vision model and writes a structured
study summary for the chosen assignment.

Usage:
    python classroom_cli.py
"""

import logging
import sys
from typing import Callable, List, Optional

import display
from config import get_config, validate_config
from ai_services.typhoon import TyphoonClient
from google_services.auth import GoogleAuth
from google_services.classroom_service import (
    ClassroomError,
    ClassroomService,
    Course,
    CourseWork,
    DriveFileMaterial,
)
from google_services.drive_service import DriveService

logger = logging.getLogger(__name__)

CANCEL = "0"


def parse_selection(choice: str, count: int) -> Optional[int]:
    """
    Convert a 1-based menu choice into a list index.

    Anything other than an integer in [1, count] (including the cancel
    value "0") returns None, which callers treat as a silent cancel.
    """
    choice = choice.strip()
    if choice == CANCEL:
        return None
    try:
        value = int(choice)
    except ValueError:
        return None
    if 1 <= value <= count:
        return value - 1
    return None


def build_summary_input(work: CourseWork) -> str:
    """Text block sent to the summary model."""
    text = f"หัวข้อ: {work.title}\n"
    if work.description:
        text += f"คำอธิบาย: {work.description}\n"
    if work.due_date:
        text += f"กำหนดส่ง: {work.due_date}\n"
    return text


class ClassroomAssistant:
    """
    Interactive menu over Classroom, Drive and Typhoon.

    Every remote call runs to completion before the next one starts.
    """

    def __init__(
        self,
        classroom: ClassroomService,
        drive: DriveService,
        typhoon: TyphoonClient,
        ask: Optional[Callable[[str], str]] = None,
    ):
        self.classroom = classroom
        self.drive = drive
        self.typhoon = typhoon
        self.ask = ask or input

    # -------------------------------------------------------------------------
    # Selection helpers
    # -------------------------------------------------------------------------

    def _load_courses(self) -> List[Course]:
        if not self.classroom.has_cached_courses:
            print("\n⏳ กำลังโหลดรายวิชา...")
        courses = self.classroom.list_active_courses()
        if not courses:
            print("\n❌ ไม่พบวิชาเรียน")
        return courses

    def _choose_course(self) -> Optional[Course]:
        courses = self._load_courses()
        if not courses:
            return None

        display.print_course_picker(courses)
        index = parse_selection(self.ask("\n🔢 เลือกวิชา: "), len(courses))
        if index is None:
            return None
        return courses[index]

    def _load_coursework(self, course: Course) -> List[CourseWork]:
        works = self.classroom.list_coursework(course.id)
        if not works:
            print("\n📭 ไม่มีงานที่สั่งในวิชานี้")
        return works

    # -------------------------------------------------------------------------
    # Menu actions
    # -------------------------------------------------------------------------

    def list_courses(self):
        """Option 1: show all active courses."""
        courses = self._load_courses()
        if courses:
            display.print_course_table(courses)

    def list_assignments(self):
        """Option 2: show the coursework of one course."""
        course = self._choose_course()
        if course is None:
            return

        print(f'\n⏳ กำลังโหลดงานของวิชา "{course.name}"...')
        works = self._load_coursework(course)
        if works:
            display.print_coursework_table(course, works)

    def summarize_assignment(self):
        """Option 3: read attachments and summarize one assignment."""
        course = self._choose_course()
        if course is None:
            return

        print("\n⏳ กำลังโหลดงาน...")
        works = self._load_coursework(course)
        if not works:
            return

        display.print_coursework_picker(works)
        index = parse_selection(self.ask("\n🔢 เลือกงาน: "), len(works))
        if index is None:
            return
        work = works[index]

        display.print_rule()
        print(f"📋 งาน: {work.title}")
        print("═" * display.RULE_WIDTH)

        if work.description:
            print(f"\n📄 คำอธิบาย:\n{work.description}")
        if work.due_date:
            print(f"\n📅 กำหนดส่ง: {work.due_date}")

        for link in work.links:
            print(f"\n🔗 ลิงก์: {link.url}")

        files = work.drive_files
        if files:
            print(f"\n📎 ไฟล์แนบ: {len(files)} ไฟล์")
            for material in files:
                self._read_attachment(material)

        display.print_rule("─")
        print("✨ AI กำลังสรุปงาน...")

        summary = self.typhoon.summarize_text(build_summary_input(work))
        print(f"\n🎯 สรุป:\n{summary}")
        display.print_rule()

    def _read_attachment(self, material: DriveFileMaterial):
        print(f"\n   📁 {material.title}")
        print("   ⏳ กำลังให้ AI อ่านไฟล์...")

        attachment = self.drive.fetch_attachment(material.id)
        if attachment is None:
            print(f"   ⚠️ ไม่สามารถดึงไฟล์ได้: {material.title}")
            return
        if not attachment.is_vision_readable:
            print(f"   ⚠️ ไม่รองรับไฟล์ประเภท {attachment.mime_type}")
            return

        content = self.typhoon.summarize_file(attachment.data, attachment.mime_type, attachment.name)
        print(f"   📖 เนื้อหา:\n{display.indent(content)}")

    # -------------------------------------------------------------------------
    # Main loop
    # -------------------------------------------------------------------------

    def run(self):
        actions = {
            "1": self.list_courses,
            "2": self.list_assignments,
            "3": self.summarize_assignment,
        }

        while True:
            display.print_main_menu()
            choice = self.ask("\n🔢 เลือกเมนู: ").strip()

            if choice == CANCEL:
                print("\n👋 ลาก่อน!")
                return

            action = actions.get(choice)
            if action is None:
                print("\n⚠️ กรุณาเลือก 0-3")
                continue

            try:
                action()
            except ClassroomError as e:
                print(f"\n❌ เกิดข้อผิดพลาด: {e}")


def setup_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def main():
    config = get_config()
    setup_logging(config.logging.level)

    for error in validate_config(config):
        logger.warning(error)

    try:
        print("🚀 กำลังเชื่อมต่อ Google Classroom...")
        auth = GoogleAuth(
            credentials_file=config.google.credentials_file,
            token_file=config.google.token_file,
        )
        auth.authorize()
        assistant = ClassroomAssistant(
            classroom=ClassroomService(auth),
            drive=DriveService(auth),
            typhoon=TyphoonClient.from_config(config.typhoon),
        )
        print("✅ เชื่อมต่อสำเร็จ!")

        assistant.run()

    except (EOFError, KeyboardInterrupt):
        print("\n👋 ลาก่อน!")
    except Exception as e:
        logger.debug("Fatal error", exc_info=True)
        print(f"❌ เกิดข้อผิดพลาด: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
