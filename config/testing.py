DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

ATTENDANCE_EDIT_WINDOW_MINUTES = 15

SEED_DEFAULT_POLICY = True

DEFAULT_POLICY = {
    "check_in_time": "09:00",
    "check_out_time": "17:00",
    "required_work_hours": 8.0,
    "grace_period_minutes": 15,
    "late_fine_base": 250,
    "late_fine_per_30_min": 250,
    "leave_cost": 1000,
    "paid_leaves_per_month": 1,
    "warning_leave_count": 3,
    "danger_leave_count": 5,
    "working_days": "1,2,3,4,5",
}
