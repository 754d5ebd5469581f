"""Dashboard services package."""
from .dashboard_service import DashboardService, next_payroll_dates

__all__ = ['DashboardService', 'next_payroll_dates']
