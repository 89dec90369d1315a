from examples.student_app import Student, detail_columns, list_columns, projection_keys, run_demo


def test_student_list_and_detail_columns():
    assert list_columns() == ["hello_world", "ext.dd", "name", "age"]
    assert detail_columns() == ["hello_world", "name", "age"]


def test_projection_keys_builds_lookup():
    keys = projection_keys("detail")
    assert keys == {"hello_world": 1, "name": 1, "age": 1}


def test_run_demo_returns_views(capsys):
    views = run_demo()
    assert set(views) == {"list", "detail"}
    assert "list: hello_world, ext.dd, name, age" in capsys.readouterr().out


def test_student_model_exposes_fields():
    student = Student(Name="Ada", Age="36")
    assert student.to_dict()["Name"] == "Ada"
