#!/usr/bin/env python3
"""
Generate a small pair of roster files for trying out the roommate finder.
"""
import pandas as pd
import os
import sys

# GPA roster: rows sharing a Name share a room
SAMPLE_GPA_ROWS = [
    {'Name': 'Hostel A-101', 'Registration No': '2023001', 'GPA': '3.4'},
    {'Name': 'Hostel A-101', 'Registration No': '2023002', 'GPA': '3.9'},
    {'Name': 'Hostel A-102', 'Registration No': '2023003', 'GPA': '2.8'},
    {'Name': 'Hostel A-102', 'Registration No': '2023004', 'GPA': '3.1'},
    {'Name': 'Hostel A-102', 'Registration No': '2023005', 'GPA': '3.6'},
    {'Name': 'Hostel B-201', 'Registration No': '2023006', 'GPA': '3.0'},
]

# Attachment roster: one row per student
SAMPLE_ATTACHMENT_ROWS = [
    {'Name': 'John Smith', 'Registration No': '2023001', 'Department': 'HUM'},
    {'Name': 'Mary-Jane Okafor', 'Registration No': '2023002', 'Department': 'HUM'},
    {'Name': 'Emma Johnson', 'Registration No': '2023003', 'Department': 'HUM'},
    {'Name': 'David Wilson', 'Registration No': '2023004', 'Department': 'HUM'},
    {'Name': 'Lisa Anderson', 'Registration No': '2023005', 'Department': 'HUM'},
    {'Name': 'Jo Park', 'Registration No': '2023006', 'Department': 'HUM'},
    {'Name': 'Michael Brown', 'Registration No': '2023099', 'Department': 'HUM'},
]

GPA_FILENAME = 'GpaData.csv'
ATTACHMENT_FILENAME = 'AttachmentHUM_1071_-_08-2025.csv'


def create_sample_rosters(output_dir='.'):
    """Write the sample rosters as CSV and return (gpa_path, attachment_path)."""
    os.makedirs(output_dir, exist_ok=True)

    gpa_path = os.path.join(output_dir, GPA_FILENAME)
    attachment_path = os.path.join(output_dir, ATTACHMENT_FILENAME)

    pd.DataFrame(SAMPLE_GPA_ROWS).to_csv(gpa_path, index=False)
    pd.DataFrame(SAMPLE_ATTACHMENT_ROWS).to_csv(attachment_path, index=False)

    return gpa_path, attachment_path


if __name__ == "__main__":
    output_dir = sys.argv[1] if len(sys.argv) > 1 else '.'
    gpa_path, attachment_path = create_sample_rosters(output_dir)

    gpa = pd.DataFrame(SAMPLE_GPA_ROWS)
    print(f"Sample GPA roster created in '{gpa_path}'")
    print(f"Sample attachment roster created in '{attachment_path}'")
    print(f"Students: {len(SAMPLE_ATTACHMENT_ROWS)}")
    print(f"Room sizes: {gpa.groupby('Name').size().to_dict()}")
