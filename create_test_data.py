#!/usr/bin/env python3
"""
Create realistic roster test data for the roommate finder.

Writes a GPA roster (rows grouped into rooms under a shared Name) and an
attachment roster (one row per student) that join on Registration No.
"""
import pandas as pd
import random
import sys
from faker import Faker

from sample_rosters import GPA_FILENAME, ATTACHMENT_FILENAME

# Hostel blocks and how many rooms each has
HOSTEL_BLOCKS = [
    {'block': 'A', 'rooms': 20},
    {'block': 'B', 'rooms': 15},
    {'block': 'C', 'rooms': 10},
]
ROOM_SIZES = [1, 2, 2, 3, 3, 4]
# Share of students that appear only in the attachment roster
UNALLOCATED_SHARE = 0.05


def _student_name(fake):
    # Query validation only accepts letters, spaces and hyphens
    while True:
        name = f"{fake.first_name()} {fake.last_name()}"
        if all(ch.isalpha() or ch in ' -' for ch in name) and name.isascii():
            return name


def create_roster_test_data(seed=None, file_format='csv'):
    """Create the two rosters and return (gpa_df, attachment_df)."""
    fake = Faker('en_IN')  # Indian locale for better names
    if seed is not None:
        Faker.seed(seed)
        random.seed(seed)

    gpa_rows = []
    attachment_rows = []
    reg_counter = 1

    for block_info in HOSTEL_BLOCKS:
        block = block_info['block']
        for room in range(1, block_info['rooms'] + 1):
            room_name = f"Hostel {block}-{100 + room}"
            for _ in range(random.choice(ROOM_SIZES)):
                reg_no = f"HUM{str(reg_counter).zfill(5)}"
                reg_counter += 1

                gpa_rows.append({
                    'Name': room_name,
                    'Registration No': reg_no,
                    'GPA': f"{random.uniform(2.0, 4.0):.2f}",
                })
                attachment_rows.append({
                    'Name': _student_name(fake),
                    'Registration No': reg_no,
                    'Department': 'HUM',
                })

    # Students registered for attachment without a room allocation
    for _ in range(max(1, int(len(attachment_rows) * UNALLOCATED_SHARE))):
        attachment_rows.append({
            'Name': _student_name(fake),
            'Registration No': f"HUM{str(reg_counter).zfill(5)}",
            'Department': 'HUM',
        })
        reg_counter += 1

    gpa_df = pd.DataFrame(gpa_rows)
    # Shuffle to make it more realistic
    attachment_df = pd.DataFrame(attachment_rows).sample(frac=1).reset_index(drop=True)

    if file_format == 'xlsx':
        gpa_df.to_excel(GPA_FILENAME.replace('.csv', '.xlsx'), index=False, engine='openpyxl')
        attachment_df.to_excel(ATTACHMENT_FILENAME.replace('.csv', '.xlsx'), index=False, engine='openpyxl')
    else:
        gpa_df.to_csv(GPA_FILENAME, index=False)
        attachment_df.to_csv(ATTACHMENT_FILENAME, index=False)

    return gpa_df, attachment_df


if __name__ == "__main__":
    print("🏠 Creating Roster Test Data")
    print("=" * 50)

    file_format = sys.argv[1] if len(sys.argv) > 1 else 'csv'
    try:
        gpa_df, attachment_df = create_roster_test_data(file_format=file_format)

        room_sizes = gpa_df.groupby('Name').size()
        print(f"✅ GPA roster: {len(gpa_df)} rows in {len(room_sizes)} rooms")
        print(f"✅ Attachment roster: {len(attachment_df)} students")
        print(f"📊 Room size distribution: {room_sizes.value_counts().sort_index().to_dict()}")
        print(f"\n🔎 Try looking up: {attachment_df['Name'].iloc[0]}")

    except Exception as e:
        print(f"❌ Error creating test data: {e}")
        sys.exit(1)
