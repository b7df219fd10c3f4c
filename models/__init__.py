from models.student import StudentRecord
from models.classroom import Classroom, ClassroomConfig
from models.seating import Placement, SeatingResult, SeatGrid
from models.audit import AuditEntry
