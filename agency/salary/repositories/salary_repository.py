"""Salary Repository - Data access for payroll tables.

Tables:
    personnelsalary       base components per personnel (one row each)
    salary                computed totals + payment status (one row each)
    deductions            deduction types
    personnel_deductions  latest contribution per personnel and type
    salarydeductions      lines making up a salary's total deductions
"""
from typing import List, Dict, Any

from core.base_repository import BaseRepository


class SalaryRepository(BaseRepository):
    """Repository for salary data access operations."""

    def get_personnel_salaries(self) -> List[Dict[str, Any]]:
        """Every personnel with its salary figures (zeros when none saved)."""
        return self.query_all('''
            SELECT
                p.personnel_id,
                p.personnel_name,
                COALESCE(ps.base_salary, 0) AS base_salary,
                COALESCE(ps.base_bonus, 0) AS base_bonus,
                COALESCE(ps.base_allowance, 0) AS base_allowance,
                COALESCE(s.total_gross, 0) AS gross_salary,
                COALESCE(s.total_deductions, 0) AS total_deductions,
                COALESCE(s.net_gross, 0) AS net_salary,
                NULL AS last_payment_date,
                NULL AS next_payment_due,
                NULL AS days_until_next_payment,
                (ps.personnel_id IS NOT NULL) AS has_salary,
                COALESCE(s.payment_status, 'unpaid') AS payment_status,
                FALSE AS payment_due
            FROM personnel p
            LEFT JOIN personnelsalary ps ON p.personnel_id = ps.personnel_id
            LEFT JOIN salary s ON p.personnel_id = s.personnel_id
            ORDER BY p.personnel_id ASC
        ''')

    def get_deduction_types(self) -> List[Dict[str, Any]]:
        return self.query_all('SELECT deduction_id, deduction_type FROM deductions ORDER BY deduction_id')

    def get_personnel_deductions(self, personnel_id: int) -> List[Dict[str, Any]]:
        """Deduction lines on the personnel's saved salary."""
        return self.query_all('''
            SELECT d.deduction_id, d.deduction_type, sd.amount
            FROM salarydeductions sd
            JOIN salary s ON sd.salary_id = s.salary_id
            JOIN personnel_deductions pd ON sd.deduct_id = pd.deduct_id
            JOIN deductions d ON pd.deduction_id = d.deduction_id
            WHERE s.personnel_id = %s
            ORDER BY d.deduction_id
        ''', (personnel_id,))

    def save_salary(self, salary, breakdown) -> int:
        """Upsert base components, totals and deduction lines in one transaction.

        Args:
            salary: SalaryInput with validated components and merged deductions
            breakdown: SalaryBreakdown computed from `salary`

        Returns:
            The salary_id, or None when the personnel does not exist
        """
        def _work(cursor):
            cursor.execute('SELECT 1 FROM personnel WHERE personnel_id = %s FOR UPDATE',
                           (salary.personnel_id,))
            if not cursor.fetchone():
                return None

            cursor.execute('''
                INSERT INTO personnelsalary (personnel_id, base_salary, base_bonus, base_allowance)
                VALUES (%s, %s, %s, %s)
                ON CONFLICT (personnel_id) DO UPDATE
                SET base_salary = EXCLUDED.base_salary,
                    base_bonus = EXCLUDED.base_bonus,
                    base_allowance = EXCLUDED.base_allowance
            ''', (salary.personnel_id, salary.base_salary, salary.base_bonus, salary.base_allowance))

            cursor.execute('''
                INSERT INTO salary (personnel_id, total_deductions, total_gross, net_gross, payment_status)
                VALUES (%s, %s, %s, %s, %s)
                ON CONFLICT (personnel_id) DO UPDATE
                SET total_deductions = EXCLUDED.total_deductions,
                    total_gross = EXCLUDED.total_gross,
                    net_gross = EXCLUDED.net_gross,
                    payment_status = EXCLUDED.payment_status,
                    updated_at = CURRENT_TIMESTAMP
                RETURNING salary_id
            ''', (salary.personnel_id, breakdown.total_deductions, breakdown.gross_salary,
                  breakdown.net_salary, salary.payment_status))
            salary_id = cursor.fetchone()['salary_id']

            # Replace the deduction lines wholesale
            cursor.execute('DELETE FROM salarydeductions WHERE salary_id = %s', (salary_id,))

            for line in salary.deductions:
                cursor.execute('''
                    INSERT INTO personnel_deductions (personnel_id, deduction_id, contribution_amount)
                    VALUES (%s, %s, %s)
                    ON CONFLICT (personnel_id, deduction_id)
                    DO UPDATE SET contribution_amount = EXCLUDED.contribution_amount
                    RETURNING deduct_id
                ''', (salary.personnel_id, line.deduction_id, line.amount))
                deduct_id = cursor.fetchone()['deduct_id']
                cursor.execute('''
                    INSERT INTO salarydeductions (salary_id, deduct_id, amount)
                    VALUES (%s, %s, %s)
                ''', (salary_id, deduct_id, line.amount))

            return salary_id

        return self.execute_many(_work)

    def delete_salary(self, personnel_id: int) -> bool:
        """Remove the salary, its deduction lines, contributions and base components.

        Returns:
            True if anything was deleted
        """
        def _work(cursor):
            cursor.execute('SELECT salary_id FROM salary WHERE personnel_id = %s', (personnel_id,))
            row = cursor.fetchone()
            deleted = 0
            if row:
                cursor.execute('DELETE FROM salarydeductions WHERE salary_id = %s', (row['salary_id'],))
                cursor.execute('DELETE FROM salary WHERE salary_id = %s', (row['salary_id'],))
                deleted += cursor.rowcount
            cursor.execute('DELETE FROM personnel_deductions WHERE personnel_id = %s', (personnel_id,))
            cursor.execute('DELETE FROM personnelsalary WHERE personnel_id = %s', (personnel_id,))
            deleted += cursor.rowcount
            return deleted > 0

        return self.execute_many(_work)
