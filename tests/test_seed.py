from nexaops_api.app import seed
from nexaops_api.app.services.record_store import RecordStore
from nexaops_api.app.services.resources import EXPENSES, INVENTORY, SALES


def test_seed_populates_every_table(tmp_path, capsys):
    db_path = str(tmp_path / "seed.db")
    assert seed.main(["--db", db_path]) == 0
    assert "[+] sales: 3 records added" in capsys.readouterr().out

    database = seed.Database(db_path)
    assert len(RecordStore(database, SALES).list_all()) == 3
    assert len(RecordStore(database, EXPENSES).list_all()) == 3
    items = RecordStore(database, INVENTORY).list_all()
    assert items[0].item_name == "Basic Product C"


def test_seed_clear_replaces_rows(tmp_path):
    db_path = str(tmp_path / "seed.db")
    assert seed.main(["--db", db_path]) == 0
    assert seed.main(["--db", db_path, "--clear"]) == 0
    assert len(RecordStore(seed.Database(db_path), SALES).list_all()) == 3


def test_check_only(tmp_path, capsys):
    assert seed.main(["--db", str(tmp_path / "check.db"), "--check"]) == 0
    assert "Database connection OK" in capsys.readouterr().out


def test_check_fails_for_unreachable_database(tmp_path, capsys):
    assert seed.main(["--db", str(tmp_path / "missing" / "check.db"), "--check"]) == 1
    assert "Cannot connect to database" in capsys.readouterr().err
