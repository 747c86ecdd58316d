import pytest

from oslabs.employee import (
    RECORD_SIZE,
    Employee,
    find_employee,
    pack_employee,
    unpack_employee,
    update_employee,
    write_employees,
)


@pytest.fixture
def staff_file(tmp_path):
    path = tmp_path / "staff.bin"
    write_employees(
        path,
        [Employee(1, "Anna", 12.5), Employee(2, "Ivan", 22.0), Employee(3, "Oleg", 30.5)],
    )
    return path


def test_read_existing_employee(staff_file):
    found = find_employee(staff_file, 2)
    assert found is not None
    assert found.num == 2
    assert found.name == "Ivan"
    assert found.hours == pytest.approx(22.0, rel=1e-5)


def test_read_nonexistent_employee(staff_file):
    assert find_employee(staff_file, 99) is None


def test_modify_employee(staff_file):
    assert update_employee(staff_file, Employee(3, "Olga", 88.8)) is True
    read_back = find_employee(staff_file, 3)
    assert read_back is not None
    assert read_back.name == "Olga"
    assert read_back.hours == pytest.approx(88.8, rel=1e-5)
    assert find_employee(staff_file, 1) == Employee(1, "Anna", 12.5)


def test_modify_missing_employee(staff_file):
    before = staff_file.read_bytes()
    assert update_employee(staff_file, Employee(99, "Ghost", 99.9)) is False
    assert staff_file.read_bytes() == before


def test_record_size_and_round_trip():
    data = pack_employee(Employee(7, "Anna", 12.5))
    assert len(data) == RECORD_SIZE == 24
    assert unpack_employee(data) == Employee(7, "Anna", 12.5)


def test_file_holds_fixed_records(staff_file):
    assert staff_file.stat().st_size == 3 * RECORD_SIZE


def test_long_name_rejected():
    with pytest.raises(ValueError):
        pack_employee(Employee(1, "Maximilian", 1.0))


def test_unpack_rejects_wrong_size():
    with pytest.raises(ValueError):
        unpack_employee(b"\0" * 5)