from cleanbook.admin.dashboard import DashboardSummary, filter_bookings, summarize

__all__ = ["DashboardSummary", "filter_bookings", "summarize"]
