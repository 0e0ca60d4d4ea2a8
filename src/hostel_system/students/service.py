from __future__ import annotations

import base64
import io
import logging
from contextlib import nullcontext
from typing import Callable, ContextManager, Optional, Sequence

from PIL import Image, UnidentifiedImageError

from ..common.validators import require_email, require_non_empty
from ..core.constants import DEFAULT_PROFILE_PICTURE_URL
from ..core.exceptions import ValidationError
from ..core.result import OperationResult
from ..rooms.repository import RoomRepository
from .model import EDITABLE_FIELDS, Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_FORMATS = {"JPEG": "image/jpeg", "PNG": "image/png"}


class StudentService:
    """Use case: manage the student roster (admin) and profiles."""

    def __init__(
        self,
        students: StudentRepository,
        rooms: RoomRepository,
        *,
        atomic: Optional[Callable[[], ContextManager]] = None,
    ):
        self._students = students
        self._rooms = rooms
        self._atomic = atomic or nullcontext

    def list_students(self, search: str = "") -> Sequence[Student]:
        students = self._students.list_all()
        term = (search or "").strip().lower()
        if not term:
            return students
        return [
            s for s in students
            if term in s.name.lower() or term in s.email.lower() or term in s.id.lower()
        ]

    def get_student(self, student_id: str) -> Optional[Student]:
        return self._students.get_by_id(student_id)

    def create_student(self, *, name: str, email: str, phone: str, address: str, course: str) -> Student:
        fields = self._clean_fields(name=name, email=email, phone=phone, address=address, course=course)

        with self._atomic():
            if self._students.get_by_email(fields["email"]):
                raise ValidationError("A student with this email already exists")

            student = self._students.create(profile_picture_url=DEFAULT_PROFILE_PICTURE_URL, **fields)

        logger.info("Student %s created", student.id)
        return student

    def update_student(self, student_id: str, **changes) -> OperationResult[Student]:
        unknown = set(changes) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Fields cannot be edited: {', '.join(sorted(unknown))}")

        fields = self._clean_fields(**changes)

        with self._atomic():
            if not self._students.get_by_id(student_id):
                return OperationResult.fail("Student not found.")

            if "email" in fields:
                other = self._students.get_by_email(fields["email"])
                if other and other.id != student_id:
                    raise ValidationError("A student with this email already exists")

            updated = self._students.update(student_id, **fields)

        return OperationResult.ok(updated)

    def delete_student(self, student_id: str) -> OperationResult[Student]:
        """Delete a student and drop the id from every room's occupant list."""

        with self._atomic():
            student = self._students.get_by_id(student_id)
            if not student:
                return OperationResult.fail("Student not found.")

            for room in self._rooms.list_all():
                if student_id in room.occupants:
                    self._rooms.save(room.without_occupant(student_id))

            self._students.delete_by_id(student_id)

        logger.info("Student %s deleted", student_id)
        return OperationResult.ok(student)

    def upload_profile_picture(self, student_id: str, *, data: bytes) -> OperationResult[Student]:
        """Store a JPEG/PNG image as an embedded data URL."""

        mime = self._detect_image_mime(data)
        encoded = base64.b64encode(data).decode("ascii")
        data_url = f"data:{mime};base64,{encoded}"

        updated = self._students.update(student_id, profile_picture_url=data_url)
        if not updated:
            return OperationResult.fail("Student not found.")
        return OperationResult.ok(updated)

    @staticmethod
    def _detect_image_mime(data: bytes) -> str:
        if not data:
            raise ValidationError("No image uploaded")
        try:
            with Image.open(io.BytesIO(data)) as img:
                fmt = img.format
        except (UnidentifiedImageError, OSError):
            raise ValidationError("Only JPEG or PNG images are supported") from None

        mime = ALLOWED_IMAGE_FORMATS.get(fmt or "")
        if not mime:
            raise ValidationError("Only JPEG or PNG images are supported")
        return mime

    @staticmethod
    def _clean_fields(**fields: str) -> dict[str, str]:
        cleaned = {}
        for key, value in fields.items():
            if key == "email":
                cleaned[key] = require_email(value)
            else:
                cleaned[key] = require_non_empty(value, key.capitalize())
        return cleaned
