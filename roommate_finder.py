import re
import logging
from typing import List, Optional

import pandas as pd

from models import (
    NAME_COLUMN, REG_NO_COLUMN, STUDENT_NOT_FOUND, NO_MATCHING_REGISTRATION,
    NO_ROOMMATES, ROOMMATES_PREFIX, NameValidationError, RosterRecord
)
from roster_handler import RosterHandler

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100
NAME_PATTERN = re.compile(r'[a-zA-Z\s-]+')


def validate_name(name: Optional[str]) -> str:
    """
    Check a queried name and return it trimmed and lowercased.
    Only letters, spaces and hyphens are allowed.
    """
    if not name:
        raise NameValidationError('Name is required')

    if len(name) < MIN_NAME_LENGTH or len(name) > MAX_NAME_LENGTH:
        raise NameValidationError(
            f'Name must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters'
        )

    if not NAME_PATTERN.fullmatch(name):
        raise NameValidationError('Name can only contain letters, spaces, and hyphens')

    return name.strip().lower()


def _normalized(column: pd.Series) -> pd.Series:
    return column.str.strip().str.lower()


class RoommateFinder:
    def __init__(self, roster_handler: Optional[RosterHandler] = None):
        self.logger = logging.getLogger(__name__)
        self.roster_handler = roster_handler or RosterHandler()

    def find_roommates(self, name: Optional[str], gpa_path: str, attachment_path: str) -> str:
        """
        Resolve a student's name to their roommates.

        The attachment roster maps the name to a registration number, the GPA
        roster groups registration numbers under a shared Name, and the other
        members of that group are looked up again in the attachment roster.

        Returns:
            Message for the user; failures come back as "Error: <message>".
        """
        try:
            sanitized_name = validate_name(name)

            gpa, attachment = self.roster_handler.load_rosters(gpa_path, attachment_path)

            # Find student registration number
            student = attachment[_normalized(attachment[NAME_COLUMN]) == sanitized_name]
            if student.empty:
                return STUDENT_NOT_FOUND

            reg_no = student.iloc[0][REG_NO_COLUMN].strip()

            # Find matching registration number in GPA data
            gpa_reg_nos = gpa[REG_NO_COLUMN].str.strip()
            matched = gpa[gpa_reg_nos == reg_no]
            if matched.empty:
                return NO_MATCHING_REGISTRATION

            group_name = matched.iloc[0][NAME_COLUMN].strip().lower()
            in_group = _normalized(gpa[NAME_COLUMN]) == group_name
            roommate_reg_nos = set(gpa_reg_nos[in_group & (gpa_reg_nos != reg_no)])

            roommates = self._records(
                attachment[attachment[REG_NO_COLUMN].str.strip().isin(roommate_reg_nos)]
            )
            if not roommates:
                return NO_ROOMMATES

            self.logger.debug(f"Found {len(roommates)} roommate(s) for registration {reg_no}")
            return ROOMMATES_PREFIX + ", ".join(record.display() for record in roommates)

        except Exception as e:
            self.logger.error(f"Error in find_roommates: {str(e)}", exc_info=True)
            return f"Error: {str(e)}"

    def _records(self, df: pd.DataFrame) -> List[RosterRecord]:
        return [RosterRecord.from_row(row) for row in df.to_dict('records')]
