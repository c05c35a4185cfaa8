"""initial workforce schema

Revision ID: 3c1f0a9b7d21
Revises:
Create Date: 2026-10-18 09:12:44.201733

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0a9b7d21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _uuid_pk() -> sa.Column:
    return sa.Column("id", sa.String(length=36), primary_key=True, nullable=False)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("username", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )
    op.create_index("ix_users_id", "users", ["id"], unique=False)

    op.create_table(
        "profiles",
        _uuid_pk(),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("role", sa.String(), nullable=False, server_default="employee"),
        sa.Column("employee_number", sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.UniqueConstraint("user_id", name="uq_profiles_user_id"),
        sa.CheckConstraint("role IN ('admin', 'manager', 'employee')", name="ck_profiles_role"),
    )
    op.create_index("ix_profiles_id", "profiles", ["id"], unique=False)
    op.create_index("ix_profiles_email", "profiles", ["email"], unique=True)

    op.create_table(
        "departments",
        _uuid_pk(),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("manager_id", sa.String(length=36), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["manager_id"], ["profiles.id"]),
    )
    op.create_index("ix_departments_id", "departments", ["id"], unique=False)

    op.create_table(
        "employees",
        _uuid_pk(),
        sa.Column("profile_id", sa.String(length=36), nullable=False),
        sa.Column("department_id", sa.String(length=36), nullable=True),
        sa.Column("hire_date", sa.Date(), nullable=False),
        sa.Column("hourly_rate", sa.Numeric(10, 2), nullable=True),
        sa.Column("status", sa.String(), nullable=False, server_default="active"),
        sa.Column("emergency_contact_name", sa.String(), nullable=True),
        sa.Column("emergency_contact_phone", sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"]),
        sa.ForeignKeyConstraint(["department_id"], ["departments.id"]),
        sa.UniqueConstraint("profile_id", name="uq_employees_profile_id"),
        sa.CheckConstraint("status IN ('active', 'inactive', 'on_leave')", name="ck_employees_status"),
    )
    op.create_index("ix_employees_id", "employees", ["id"], unique=False)
    op.create_index("ix_employees_department_id", "employees", ["department_id"], unique=False)

    op.create_table(
        "tasks",
        _uuid_pk(),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("department_id", sa.String(length=36), nullable=True),
        sa.Column("estimated_hours", sa.Numeric(10, 2), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_by", sa.String(length=36), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["department_id"], ["departments.id"]),
        sa.ForeignKeyConstraint(["created_by"], ["profiles.id"]),
        sa.CheckConstraint(
            "type IN ('warehouse', 'logistics', 'maintenance', 'administrative')",
            name="ck_tasks_type",
        ),
    )
    op.create_index("ix_tasks_id", "tasks", ["id"], unique=False)
    op.create_index("ix_tasks_department_id", "tasks", ["department_id"], unique=False)

    op.create_table(
        "projects",
        _uuid_pk(),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("department_id", sa.String(length=36), nullable=True),
        sa.Column("manager_id", sa.String(length=36), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(), nullable=False, server_default="active"),
        sa.Column("budget", sa.Numeric(12, 2), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["department_id"], ["departments.id"]),
        sa.ForeignKeyConstraint(["manager_id"], ["profiles.id"]),
        sa.CheckConstraint("status IN ('active', 'completed', 'on_hold')", name="ck_projects_status"),
    )
    op.create_index("ix_projects_id", "projects", ["id"], unique=False)

    op.create_table(
        "work_hours",
        _uuid_pk(),
        sa.Column("employee_id", sa.String(length=36), nullable=False),
        sa.Column("task_id", sa.String(length=36), nullable=False),
        sa.Column("start_time", sa.DateTime(), nullable=False),
        sa.Column("end_time", sa.DateTime(), nullable=True),
        sa.Column("break_time_minutes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_hours", sa.Numeric(10, 2), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("status", sa.String(), nullable=False, server_default="in_progress"),
        sa.Column("approved_by", sa.String(length=36), nullable=True),
        sa.Column("approved_at", sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"]),
        sa.ForeignKeyConstraint(["task_id"], ["tasks.id"]),
        sa.ForeignKeyConstraint(["approved_by"], ["profiles.id"]),
        sa.CheckConstraint(
            "status IN ('in_progress', 'completed', 'pending_approval', 'approved')",
            name="ck_work_hours_status",
        ),
        sa.CheckConstraint("break_time_minutes >= 0", name="ck_work_hours_break_nonnegative"),
        sa.CheckConstraint(
            "end_time IS NULL OR end_time >= start_time",
            name="ck_work_hours_end_after_start",
        ),
    )
    op.create_index("ix_work_hours_id", "work_hours", ["id"], unique=False)
    op.create_index("ix_work_hours_employee_id", "work_hours", ["employee_id"], unique=False)
    op.create_index("ix_work_hours_task_id", "work_hours", ["task_id"], unique=False)
    op.create_index("ix_work_hours_start_time", "work_hours", ["start_time"], unique=False)
    op.create_index("ix_work_hours_status", "work_hours", ["status"], unique=False)

    op.create_table(
        "time_sessions",
        _uuid_pk(),
        sa.Column("employee_id", sa.String(length=36), nullable=False),
        sa.Column("task_id", sa.String(length=36), nullable=False),
        sa.Column("project_id", sa.String(length=36), nullable=True),
        sa.Column("start_time", sa.DateTime(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"]),
        sa.ForeignKeyConstraint(["task_id"], ["tasks.id"]),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"]),
    )
    op.create_index("ix_time_sessions_id", "time_sessions", ["id"], unique=False)
    op.create_index("ix_time_sessions_employee_id", "time_sessions", ["employee_id"], unique=False)
    op.create_index("ix_time_sessions_is_active", "time_sessions", ["is_active"], unique=False)

    op.create_table(
        "overtime",
        _uuid_pk(),
        sa.Column("employee_id", sa.String(length=36), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("hours", sa.Numeric(10, 2), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("status", sa.String(), nullable=False, server_default="pending"),
        sa.Column("approved_by", sa.String(length=36), nullable=True),
        sa.Column("approved_at", sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"]),
        sa.ForeignKeyConstraint(["approved_by"], ["profiles.id"]),
        sa.CheckConstraint("status IN ('pending', 'approved', 'rejected')", name="ck_overtime_status"),
    )
    op.create_index("ix_overtime_id", "overtime", ["id"], unique=False)
    op.create_index("ix_overtime_employee_id", "overtime", ["employee_id"], unique=False)
    op.create_index("ix_overtime_status", "overtime", ["status"], unique=False)

    op.create_table(
        "leave_requests",
        _uuid_pk(),
        sa.Column("employee_id", sa.String(length=36), nullable=False),
        sa.Column("type", sa.String(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("days", sa.Integer(), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("status", sa.String(), nullable=False, server_default="pending"),
        sa.Column("approved_by", sa.String(length=36), nullable=True),
        sa.Column("approved_at", sa.DateTime(), nullable=True),
        sa.Column("comments", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"]),
        sa.ForeignKeyConstraint(["approved_by"], ["profiles.id"]),
        sa.CheckConstraint(
            "type IN ('vacation', 'sick', 'personal', 'comp_time', 'unpaid')",
            name="ck_leave_requests_type",
        ),
        sa.CheckConstraint("status IN ('pending', 'approved', 'rejected')", name="ck_leave_requests_status"),
        sa.CheckConstraint("end_date >= start_date", name="ck_leave_requests_range"),
    )
    op.create_index("ix_leave_requests_id", "leave_requests", ["id"], unique=False)
    op.create_index("ix_leave_requests_employee_id", "leave_requests", ["employee_id"], unique=False)
    op.create_index("ix_leave_requests_status", "leave_requests", ["status"], unique=False)

    op.create_table(
        "attendance",
        _uuid_pk(),
        sa.Column("employee_id", sa.String(length=36), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("clock_in", sa.DateTime(), nullable=True),
        sa.Column("clock_out", sa.DateTime(), nullable=True),
        sa.Column("total_hours", sa.Numeric(10, 2), nullable=True),
        sa.Column("status", sa.String(), nullable=False, server_default="present"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"]),
        sa.UniqueConstraint("employee_id", "date", name="uq_attendance_employee_date"),
        sa.CheckConstraint(
            "status IN ('present', 'absent', 'late', 'half_day')",
            name="ck_attendance_status",
        ),
    )
    op.create_index("ix_attendance_id", "attendance", ["id"], unique=False)
    op.create_index("ix_attendance_employee_id", "attendance", ["employee_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    for table in (
        "attendance",
        "leave_requests",
        "overtime",
        "time_sessions",
        "work_hours",
        "projects",
        "tasks",
        "employees",
        "departments",
        "profiles",
        "users",
    ):
        op.drop_table(table)
