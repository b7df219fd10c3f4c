from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class AuditEntry:
    timestamp: datetime
    action: str              # "upload_students", "upload_classrooms", "generate", "delete", "export_pdf"
    result_id: Optional[str]
    detail: str
    performed_by: str = ""
