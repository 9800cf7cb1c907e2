import io

from labkit.cli import MENU, main, run_menu
from labkit.students import Student, StudentRegistry


def run(text, registry=None):
    out = io.StringIO()
    reg = run_menu(io.StringIO(text), out, registry)
    return reg, out.getvalue()


def test_add_student_with_spaced_name():
    reg, out = run("1\n7\nAnn Lee\n20\n3.5\n8\n")
    assert reg.get(7) == Student(7, "Ann Lee", 20, 3.5)
    assert "student is successfuly registered\n" in out
    assert out.endswith("Thank you")


def test_menu_is_printed_each_round():
    _, out = run("2\n8\n")
    assert out.count(MENU) == 2


def test_duplicate_add_reports_error():
    reg, out = run("1\n1\nAnn\n20\n3.0\n1\n1\nBob\n21\n2.0\n8\n")
    assert "Student ID already exists\n" in out
    assert reg.get(1).name == "Ann"
    assert len(reg) == 1


def test_invalid_choice():
    _, out = run("9\n8\n")
    assert "invalid input\n" in out


def test_display_empty():
    _, out = run("2\n8\n")
    assert "No students' data to print" in out


def test_display_lists_students():
    reg = StudentRegistry()
    reg.add(Student(1, "Ann", 20, 3.5))
    _, out = run("2\n8\n", reg)
    assert "ID: 1,Name: Ann,Age: 20,GPA: 3.500000\n" in out


def test_search_found_and_missing():
    reg = StudentRegistry()
    reg.add(Student(4, "Dee", 22, 2.5))
    _, out = run("3\n4\n3\n5\n8\n", reg)
    assert "ID: 4,Name: Dee" in out
    assert "No student with this id is found\n" in out


def test_update_student():
    reg = StudentRegistry()
    reg.add(Student(2, "Bob", 21, 3.0))
    reg, out = run("4\n2\nBobby\n22\n3.5\n8\n", reg)
    assert reg.get(2) == Student(2, "Bobby", 22, 3.5)
    assert "the updated data is: \n" in out


def test_update_missing():
    _, out = run("4\n3\n8\n")
    assert "No student id is found\n" in out


def test_delete_student():
    reg = StudentRegistry()
    reg.add(Student(2, "Bob", 21, 3.0))
    reg, out = run("5\n2\n5\n2\n8\n", reg)
    assert len(reg) == 0
    assert "Student data is successfuly deleted.\n" in out
    assert "No student with this id is found\n" in out


def test_average_output():
    reg = StudentRegistry()
    reg.add(Student(1, "Ann", 20, 3.0))
    _, out = run("6\n8\n", reg)
    assert "3.000000" in out


def test_highest_gpa_output():
    reg = StudentRegistry()
    reg.add(Student(1, "Ann", 20, 3.0))
    reg.add(Student(2, "Bob", 21, 4.0))
    _, out = run("7\n8\n", reg)
    assert out.count("this the data of the highest gpa student:\n") == 1
    assert "ID: 2,Name: Bob" in out


def test_end_of_input_stops_menu():
    reg, out = run("1\n3\nCid\n")
    assert len(reg) == 0
    assert "Thank you" not in out


def test_bad_number_is_reported():
    reg, out = run("3\nabc\n8\n")
    assert "invalid input\n" in out
    assert out.endswith("Thank you")


def test_main_runs_on_standard_streams(monkeypatch):
    out = io.StringIO()
    monkeypatch.setattr("sys.stdin", io.StringIO("8\n"))
    monkeypatch.setattr("sys.stdout", out)
    assert main([]) == 0
    assert out.getvalue().endswith("Thank you")