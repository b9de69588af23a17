from ddlforge.dialects import get_dialect
from examples.issue_tracker import TABLES, render_migration, run_demo


def test_postgresql_migration_uses_serial_types():
    statements = render_migration(get_dialect("postgresql"))
    assert len(statements) == len(TABLES)
    assert statements[0].startswith("CREATE TABLE projects (id SERIAL NOT NULL,")
    assert statements[1].startswith("CREATE TABLE issues (id BIGSERIAL NOT NULL,")
    assert statements[-1].endswith(
        "CONSTRAINT pk_issue_labels_assoc PRIMARY KEY (issue_id,label_name))"
    )


def test_oracle_migration_adds_sequences_and_triggers():
    statements = render_migration(get_dialect("oracle"))
    assert len(statements) == len(TABLES) + 4
    assert statements[1] == "CREATE SEQUENCE projects_seq START WITH 1 INCREMENT BY 1"
    assert statements[2].startswith("CREATE OR REPLACE TRIGGER projects_idt")
    assert "color VARCHAR2 (7) NULL" in statements[6]


def test_run_demo_renders_a_script():
    script = run_demo("mysql")
    lines = script.splitlines()
    assert len(lines) == len(TABLES)
    assert all(line.endswith("COLLATE utf8_bin;") for line in lines)
