# Rosters are read fresh from disk on every lookup; nothing here is persisted.
# Rows travel as plain dicts (pandas records) and RosterRecord gives a typed view of one.
from typing import Dict, NamedTuple

NAME_COLUMN = 'Name'
REG_NO_COLUMN = 'Registration No'
REQUIRED_COLUMNS = [NAME_COLUMN, REG_NO_COLUMN]

# Lookup results
STUDENT_NOT_FOUND = "Student not found. Please check the name spelling."
NO_MATCHING_REGISTRATION = "No matching registration number found in GPA data."
NO_ROOMMATES = "No roommates found for this student."
ROOMMATES_PREFIX = "Roommates found: "


class NameValidationError(ValueError):
    """Raised when a queried name fails validation."""


class RosterError(Exception):
    """Raised when a roster file cannot be read or lacks required columns."""


class RosterRecord(NamedTuple):
    name: str
    registration_no: str

    @classmethod
    def from_row(cls, row: Dict) -> 'RosterRecord':
        return cls(name=row[NAME_COLUMN], registration_no=row[REG_NO_COLUMN])

    def display(self) -> str:
        """
        Format: Name (Reg No: X), values as they appear in the file.
        """
        return f"{self.name} (Reg No: {self.registration_no})"
