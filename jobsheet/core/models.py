"""Data models for job sheet records extracted from OCR transcripts."""
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

# fewer digits than this is not treated as a phone number
MIN_PHONE_DIGITS = 7

# snake_case attribute -> camelCase key used by the shared record payload
PAYLOAD_KEYS = {
    "description": "description",
    "client": "client",
    "contact_name": "contactName",
    "contact_number": "contactNumber",
    "address": "address",
    "job_id": "jobId",
    "date": "date",
    "notes": "notes",
    "supervisor_name": "supervisorName",
    "client_rep_name": "clientRepName",
    "start_time": "startTime",
    "finish_time": "finishTime",
    "travel_time": "travelTime",
    "total_time": "totalTime",
}


@dataclass
class LineItem:
    """One consumed material or quantity entry taken from a single line."""

    id: str
    description: str
    quantity: str
    unit: str = ""


@dataclass
class JobRecord:
    """Structured job sheet fields; every unresolved field is an empty string."""

    description: str = ""
    client: str = ""
    contact_name: str = ""
    contact_number: str = ""
    address: str = ""
    job_id: str = ""
    date: str = ""
    notes: str = ""
    items: List[LineItem] = field(default_factory=list)
    supervisor_name: str = ""
    client_rep_name: str = ""
    start_time: str = ""
    finish_time: str = ""
    travel_time: str = ""
    total_time: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain dictionary representation."""

        return asdict(self)

    def to_payload(self) -> Dict[str, Any]:
        """Return the camelCase shape shared with other record producers."""

        payload: Dict[str, Any] = {
            key: getattr(self, attribute) for attribute, key in PAYLOAD_KEYS.items()
        }
        payload["items"] = [asdict(item) for item in self.items]
        return payload

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "JobRecord":
        """Build a record from the camelCase payload, defaulting missing keys."""

        values = {
            attribute: str(payload.get(key) or "") for attribute, key in PAYLOAD_KEYS.items()
        }
        items = [
            LineItem(
                id=str(raw.get("id") or ""),
                description=str(raw.get("description") or ""),
                quantity=str(raw.get("quantity") or ""),
                unit=str(raw.get("unit") or ""),
            )
            for raw in payload.get("items") or []
            if isinstance(raw, dict)
        ]
        return cls(items=items, **values)


@dataclass
class SourcedRecord:
    """A job record paired with the transcript it came from and its review state."""

    source_name: str
    record: JobRecord
    status: str = "pending_review"
    issues: List[str] = field(default_factory=list)
    notes: Optional[str] = None
