"""
StaffDesk Backend — Partial Update Builder Tests
==================================================

What:  Tests for collect_employee_changes() and build_employee_update().
Why:   The SET clause is assembled from whichever fields the client sent; the
       field order, the falsy filtering and the parameter binding must not drift.
"""

import pytest

from app.schemas.employee import EmployeeUpdate
from app.services.employee_service import (
    UPDATABLE_FIELDS,
    build_employee_update,
    collect_employee_changes,
)


class TestCollectEmployeeChanges:

    def test_all_fields_follow_fixed_order(self):
        changes = EmployeeUpdate(
            category_id=3,
            salary=5000,
            address="1 Main St",
            password="secret",
            email="a@b.c",
            name="Ann",
        )

        pairs = collect_employee_changes(changes, image="image_1.png")

        assert [field for field, _ in pairs] == list(UPDATABLE_FIELDS)

    def test_only_salary(self):
        pairs = collect_employee_changes(EmployeeUpdate(salary=5000))
        assert pairs == [("salary", 5000.0)]

    def test_no_fields(self):
        assert collect_employee_changes(EmployeeUpdate()) == []

    def test_image_alone_counts_as_a_change(self):
        pairs = collect_employee_changes(EmployeeUpdate(), image="image_1718000000000.jpg")
        assert pairs == [("image", "image_1718000000000.jpg")]

    # ── Falsy-as-absent quirk ─────────────────────────────────────────────
    # Zero and empty values are dropped, so they can never be written here.

    def test_zero_salary_is_treated_as_absent(self):
        assert collect_employee_changes(EmployeeUpdate(salary=0)) == []

    def test_empty_address_is_treated_as_absent(self):
        assert collect_employee_changes(EmployeeUpdate(address="")) == []

    def test_zero_category_is_treated_as_absent(self):
        assert collect_employee_changes(EmployeeUpdate(category_id=0)) == []

    def test_falsy_values_dropped_alongside_real_ones(self):
        pairs = collect_employee_changes(EmployeeUpdate(name="Bo", salary=0, address=""))
        assert pairs == [("name", "Bo")]

    def test_password_is_left_plaintext_for_the_caller(self):
        pairs = collect_employee_changes(EmployeeUpdate(password="hunter2"))
        assert pairs == [("password", "hunter2")]


class TestBuildEmployeeUpdate:

    def test_set_clause_uses_given_order(self):
        statement = build_employee_update(7, [("name", "Ann"), ("salary", 10.0)])
        sql = str(statement)

        assert sql.startswith("UPDATE employee SET ")
        assert sql.index("name=") < sql.index("salary=")
        assert "WHERE employee.id" in sql

    def test_order_is_not_resorted_by_column_position(self):
        statement = build_employee_update(7, [("category_id", 2), ("name", "Ann")])
        sql = str(statement)

        assert sql.index("category_id=") < sql.index("name=")

    def test_only_given_columns_are_set(self):
        sql = str(build_employee_update(7, [("salary", 5000.0)]))
        set_clause = sql.split(" SET ", 1)[1].split(" WHERE ", 1)[0]

        assert set_clause == "salary=:salary"

    def test_values_are_bound_not_inlined(self):
        hostile = "x'; DROP TABLE employee; --"
        statement = build_employee_update(7, [("name", hostile)])
        compiled = statement.compile()

        assert hostile not in str(compiled)
        assert hostile in compiled.params.values()
        assert 7 in compiled.params.values()

    def test_empty_pairs_rejected(self):
        with pytest.raises(ValueError):
            build_employee_update(7, [])

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError, match="cannot be updated"):
            build_employee_update(7, [("id", 99)])
