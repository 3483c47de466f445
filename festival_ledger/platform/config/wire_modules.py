"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from festival_ledger.service.festival.app.command import (
    add_expense_use_case,
    add_person_use_case,
    add_shift_use_case,
    add_show_use_case,
    assign_shift_use_case,
    check_in_ticket_use_case,
    import_tickets_use_case,
    restore_backup_use_case,
    sell_tickets_use_case,
    toggle_locale_use_case,
    void_ticket_use_case,
)
from festival_ledger.service.festival.app.query import (
    export_backup_use_case,
    get_daily_report_use_case,
    get_ledger_summary_use_case,
    list_recent_scans_use_case,
    list_schedule_use_case,
    list_staffing_coverage_use_case,
    search_people_use_case,
    search_tickets_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    add_show_use_case,
    sell_tickets_use_case,
    void_ticket_use_case,
    check_in_ticket_use_case,
    import_tickets_use_case,
    add_person_use_case,
    add_shift_use_case,
    assign_shift_use_case,
    add_expense_use_case,
    restore_backup_use_case,
    toggle_locale_use_case,
    list_schedule_use_case,
    get_ledger_summary_use_case,
    get_daily_report_use_case,
    export_backup_use_case,
    search_tickets_use_case,
    list_recent_scans_use_case,
    list_staffing_coverage_use_case,
    search_people_use_case,
]
