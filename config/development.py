import os

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Minutes an employee may still correct their own check-in/check-out
ATTENDANCE_EDIT_WINDOW_MINUTES = int(os.getenv("ATTENDANCE_EDIT_WINDOW_MINUTES", "15"))

# If enabled, the organization policy below is stored when none is configured yet
SEED_DEFAULT_POLICY = bool(int(os.getenv("SEED_DEFAULT_POLICY", "1")))

DEFAULT_POLICY = {
    "check_in_time": os.getenv("POLICY_CHECK_IN_TIME", "09:00"),
    "check_out_time": os.getenv("POLICY_CHECK_OUT_TIME", "17:00"),
    "required_work_hours": float(os.getenv("POLICY_REQUIRED_WORK_HOURS", "8")),
    "grace_period_minutes": int(os.getenv("POLICY_GRACE_PERIOD_MINUTES", "15")),
    "late_fine_base": int(os.getenv("POLICY_LATE_FINE_BASE", "250")),
    "late_fine_per_30_min": int(os.getenv("POLICY_LATE_FINE_PER_30_MIN", "250")),
    "leave_cost": int(os.getenv("POLICY_LEAVE_COST", "1000")),
    "paid_leaves_per_month": int(os.getenv("POLICY_PAID_LEAVES_PER_MONTH", "1")),
    "warning_leave_count": int(os.getenv("POLICY_WARNING_LEAVE_COUNT", "3")),
    "danger_leave_count": int(os.getenv("POLICY_DANGER_LEAVE_COUNT", "5")),
    "working_days": os.getenv("POLICY_WORKING_DAYS", "1,2,3,4,5"),
}
