import pandas as pd
import pytest

from models import RosterError
from roster_handler import RosterHandler


@pytest.fixture
def handler():
    return RosterHandler()


def test_read_csv_keeps_strings(handler, tmp_path, write_csv):
    path = write_csv(tmp_path / 'roster.csv',
                     'Name,Registration No,GPA\nAnn Lee,0042,3.50\nBo Chan,,\n')
    df = handler.read_roster(path)
    assert df['Registration No'].tolist() == ['0042', '']
    assert df['GPA'].tolist() == ['3.50', '']


def test_read_strips_header_whitespace(handler, tmp_path, write_csv):
    path = write_csv(tmp_path / 'roster.csv', ' Name , Registration No \nAnn Lee,1\n')
    df = handler.read_roster(path)
    assert list(df.columns) == ['Name', 'Registration No']


def test_read_excel(handler, tmp_path):
    path = str(tmp_path / 'roster.xlsx')
    pd.DataFrame([{'Name': 'Ann Lee', 'Registration No': '0042'}]).to_excel(
        path, index=False, engine='openpyxl')
    df = handler.read_roster(path)
    assert df.to_dict('records') == [{'Name': 'Ann Lee', 'Registration No': '0042'}]


def test_missing_column(handler, tmp_path, write_csv):
    path = write_csv(tmp_path / 'roster.csv', 'Name,Reg\nAnn Lee,1\n')
    with pytest.raises(RosterError, match='missing columns: Registration No'):
        handler.read_roster(path)


def test_missing_file(handler, tmp_path):
    with pytest.raises(RosterError, match='not found'):
        handler.read_roster(str(tmp_path / 'absent.csv'))


def test_unsupported_extension(handler, tmp_path, write_csv):
    path = write_csv(tmp_path / 'roster.txt', 'Name,Registration No\n')
    with pytest.raises(RosterError, match='Unsupported'):
        handler.read_roster(path)


def test_load_rosters_order(handler, roster_paths):
    gpa, attachment = handler.load_rosters(*roster_paths)
    assert 'GPA' in gpa.columns
    assert 'Department' in attachment.columns


def test_verify_files(handler, roster_paths, tmp_path):
    missing = str(tmp_path / 'absent.csv')
    assert handler.verify_files(list(roster_paths)) == []
    assert handler.verify_files([roster_paths[0], missing]) == [missing]


def test_read_csv_with_trailing_commas(handler, tmp_path, write_csv):
    path = write_csv(tmp_path / 'roster.csv',
                     'Name,Registration No\nAnn Lee,R1,\nBo Chan,R2,\n')
    df = handler.read_roster(path)
    assert df[['Name', 'Registration No']].to_dict('records') == [
        {'Name': 'Ann Lee', 'Registration No': 'R1'},
        {'Name': 'Bo Chan', 'Registration No': 'R2'},
    ]
