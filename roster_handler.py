import pandas as pd
import os
import logging
from typing import Iterable, List, Tuple

from models import REQUIRED_COLUMNS, RosterError

CSV_EXTENSIONS = {'csv'}
EXCEL_EXTENSIONS = {'xlsx', 'xls'}


class RosterHandler:
    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def read_roster(self, filepath: str) -> pd.DataFrame:
        """
        Read a roster from a CSV or Excel file.
        Expected columns: Name, Registration No

        Every cell is kept as a string and blank cells become "" so that
        registration numbers like 0042 survive unchanged.
        """
        if not os.path.isfile(filepath):
            raise RosterError(f"Roster file not found: {filepath}")

        extension = os.path.splitext(filepath)[1].lstrip('.').lower()
        if extension in CSV_EXTENSIONS:
            # index_col=False keeps trailing-comma exports aligned to the header
            df = pd.read_csv(filepath, dtype=str, keep_default_na=False, index_col=False)
        elif extension in EXCEL_EXTENSIONS:
            df = pd.read_excel(filepath, dtype=str).fillna('')
        else:
            raise RosterError(f"Unsupported roster file type: {os.path.basename(filepath)}")

        # Normalize column names (handle stray spaces around headers)
        df.columns = [str(col).strip() for col in df.columns]

        missing_columns = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing_columns:
            self.logger.error(f"Missing columns in {filepath}: {missing_columns}")
            raise RosterError(
                f"{os.path.basename(filepath)} is missing columns: {', '.join(missing_columns)}"
            )

        self.logger.debug(f"Loaded {len(df)} rows from {filepath}")
        return df

    def load_rosters(self, gpa_path: str, attachment_path: str) -> Tuple[pd.DataFrame, pd.DataFrame]:
        """
        Load the GPA roster and the attachment roster, in that order.
        """
        return self.read_roster(gpa_path), self.read_roster(attachment_path)

    def verify_files(self, filepaths: Iterable[str]) -> List[str]:
        """
        Return the paths that are missing or not readable.
        """
        return [path for path in filepaths
                if not (os.path.isfile(path) and os.access(path, os.R_OK))]
