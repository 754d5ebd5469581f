"""Database schema initialization.

Contains all CREATE TABLE statements and lookup seed data for the
agency database.

Called by database.init_db() at application startup.
"""

GENDERS = ['Male', 'Female']

CIVIL_STATUSES = ['Single', 'Married', 'Widowed', 'Separated']

CLIENT_TYPES = ['Corporate', 'Commercial', 'Residential', 'Government', 'Industrial', 'Educational']

ASSIGNMENT_STATUSES = ['Pending', 'Active', 'Completed', 'Cancelled']

DEDUCTION_TYPES = ['SSS', 'PhilHealth', 'Pag-IBIG', 'Withholding Tax', 'Cash Advance']


def create_schema(conn, cursor):
    """Create all database tables and seed lookup data.

    Args:
        conn: Database connection (caller commits)
        cursor: Database cursor from get_cursor(conn)
    """
    cursor.execute('''
        CREATE TABLE IF NOT EXISTS users (
            user_id SERIAL PRIMARY KEY,
            email TEXT NOT NULL UNIQUE,
            password_hash TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    # ============== Lookups ==============

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS gender (
            gender_id SERIAL PRIMARY KEY,
            gender_name TEXT NOT NULL UNIQUE
        )
    ''')

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS civilstatus (
            civilstatus_id SERIAL PRIMARY KEY,
            title TEXT NOT NULL UNIQUE
        )
    ''')

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS clienttype (
            clienttype_id SERIAL PRIMARY KEY,
            type_name TEXT NOT NULL UNIQUE
        )
    ''')

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS assignmentstatus (
            status_id SERIAL PRIMARY KEY,
            status_name TEXT NOT NULL UNIQUE
        )
    ''')

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS deductions (
            deduction_id SERIAL PRIMARY KEY,
            deduction_type TEXT NOT NULL UNIQUE
        )
    ''')

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS address (
            address_id SERIAL PRIMARY KEY,
            street TEXT,
            barangay TEXT,
            city TEXT,
            province TEXT,
            postal_code TEXT
        )
    ''')

    # ============== Core records ==============

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS personnel (
            personnel_id SERIAL PRIMARY KEY,
            personnel_name TEXT NOT NULL,
            personnel_age INTEGER,
            civilstatus_id INTEGER REFERENCES civilstatus(civilstatus_id),
            gender_id INTEGER REFERENCES gender(gender_id),
            address_id INTEGER REFERENCES address(address_id) ON DELETE SET NULL,
            contact_no TEXT,
            email TEXT
        )
    ''')

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS client (
            client_id SERIAL PRIMARY KEY,
            business_name TEXT NOT NULL,
            contact_person TEXT,
            contact_no TEXT,
            email TEXT,
            clienttype_id INTEGER REFERENCES clienttype(clienttype_id),
            address_id INTEGER REFERENCES address(address_id) ON DELETE SET NULL
        )
    ''')

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS contract (
            contract_id SERIAL PRIMARY KEY,
            client_id INTEGER REFERENCES client(client_id),
            company_name TEXT,
            contract_type TEXT NOT NULL DEFAULT 'Service Agreement',
            start_date DATE NOT NULL,
            end_date DATE NOT NULL,
            contract_value NUMERIC(15,2) NOT NULL DEFAULT 0,
            payment_terms TEXT NOT NULL DEFAULT 'Monthly',
            status TEXT NOT NULL DEFAULT 'active',
            notes TEXT,
            CHECK (end_date >= start_date)
        )
    ''')

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS assignment (
            assignment_id SERIAL PRIMARY KEY,
            personnel_id INTEGER NOT NULL REFERENCES personnel(personnel_id),
            contract_id INTEGER NOT NULL REFERENCES contract(contract_id),
            start_date DATE NOT NULL,
            end_date DATE,
            status_id INTEGER NOT NULL REFERENCES assignmentstatus(status_id)
        )
    ''')

    # ============== Payroll ==============

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS personnelsalary (
            personnel_id INTEGER PRIMARY KEY REFERENCES personnel(personnel_id),
            base_salary NUMERIC(12,2) NOT NULL DEFAULT 0,
            base_bonus NUMERIC(12,2) NOT NULL DEFAULT 0,
            base_allowance NUMERIC(12,2) NOT NULL DEFAULT 0
        )
    ''')

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS salary (
            salary_id SERIAL PRIMARY KEY,
            personnel_id INTEGER NOT NULL UNIQUE REFERENCES personnel(personnel_id),
            total_deductions NUMERIC(12,2) NOT NULL DEFAULT 0,
            total_gross NUMERIC(12,2) NOT NULL DEFAULT 0,
            net_gross NUMERIC(12,2) NOT NULL DEFAULT 0,
            payment_status TEXT NOT NULL DEFAULT 'unpaid',
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    ''')

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS personnel_deductions (
            deduct_id SERIAL PRIMARY KEY,
            personnel_id INTEGER NOT NULL REFERENCES personnel(personnel_id),
            deduction_id INTEGER NOT NULL REFERENCES deductions(deduction_id),
            contribution_amount NUMERIC(12,2) NOT NULL DEFAULT 0,
            UNIQUE (personnel_id, deduction_id)
        )
    ''')

    cursor.execute('''
        CREATE TABLE IF NOT EXISTS salarydeductions (
            salary_id INTEGER NOT NULL REFERENCES salary(salary_id) ON DELETE CASCADE,
            deduct_id INTEGER NOT NULL REFERENCES personnel_deductions(deduct_id),
            amount NUMERIC(12,2) NOT NULL DEFAULT 0,
            PRIMARY KEY (salary_id, deduct_id)
        )
    ''')

    cursor.execute('CREATE INDEX IF NOT EXISTS idx_assignment_personnel ON assignment(personnel_id)')
    cursor.execute('CREATE INDEX IF NOT EXISTS idx_assignment_contract ON assignment(contract_id)')
    cursor.execute('CREATE INDEX IF NOT EXISTS idx_contract_client ON contract(client_id)')

    _seed_lookups(cursor)


def _seed_lookups(cursor):
    """Insert the fixed lookup values used by the dashboard dropdowns."""
    for name in GENDERS:
        cursor.execute('INSERT INTO gender (gender_name) VALUES (%s) ON CONFLICT DO NOTHING', (name,))
    for title in CIVIL_STATUSES:
        cursor.execute('INSERT INTO civilstatus (title) VALUES (%s) ON CONFLICT DO NOTHING', (title,))
    for name in CLIENT_TYPES:
        cursor.execute('INSERT INTO clienttype (type_name) VALUES (%s) ON CONFLICT DO NOTHING', (name,))
    for name in ASSIGNMENT_STATUSES:
        cursor.execute('INSERT INTO assignmentstatus (status_name) VALUES (%s) ON CONFLICT DO NOTHING', (name,))
    for name in DEDUCTION_TYPES:
        cursor.execute('INSERT INTO deductions (deduction_type) VALUES (%s) ON CONFLICT DO NOTHING', (name,))
