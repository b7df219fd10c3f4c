"""Validation errors raised before any seating grid is built."""


class SeatingError(ValueError):
    """Base class for all seating validation failures."""


class UnknownClassroom(SeatingError):
    def __init__(self, classroom_no: str):
        self.classroom_no = classroom_no
        super().__init__(f"Classroom {classroom_no} not found")


class CapacityExceeded(SeatingError):
    def __init__(self, classroom_no: str, capacity: int, requested: int):
        self.classroom_no = classroom_no
        self.capacity = capacity
        self.requested = requested
        super().__init__(
            f"Configuration for classroom {classroom_no} exceeds capacity. "
            f"Maximum capacity: {capacity}, configured: {requested}"
        )


class InsufficientSeats(SeatingError):
    def __init__(self, student_count: int, total_capacity: int):
        self.student_count = student_count
        self.total_capacity = total_capacity
        super().__init__(
            f"Not enough seats. Students: {student_count}, Total capacity: {total_capacity}"
        )


class EmptyRoster(SeatingError):
    def __init__(self):
        super().__init__("No students found. Please upload students first.")


class EmptyClassroomSet(SeatingError):
    def __init__(self, message: str = "No classrooms found. Please upload classrooms first."):
        super().__init__(message)


class InvalidClassroomConfig(SeatingError):
    def __init__(self, classroom_no: str, field: str, value, low: int, high: int):
        self.classroom_no = classroom_no
        self.field = field
        self.value = value
        super().__init__(
            f"Classroom {classroom_no}: {field} must be between {low} and {high}, got {value}"
        )


class UnknownExamType(SeatingError):
    def __init__(self, exam_type: str):
        self.exam_type = exam_type
        super().__init__(f'Exam type must be either "semester" or "mid", got "{exam_type}"')
