"""Update, insert and delete builder tests"""

from sqlstring import Update, Insert, Delete, Select, Conflict

from ..setup import check_sql


def test_update():
    """Test 0200 update"""
    stmt = Update(True).set_table("t1")
    stmt.add_column_value("name", "Bruce", True)
    stmt.add_column_value("position", "Engineer", True)
    stmt.where("position == 'engineer'")
    assert stmt.render() == (
        'UPDATE t1 SET name = "Bruce", position = "Engineer" '
        "WHERE position == 'engineer'"
    )


def test_update_commas():
    """Test 0201 N assignments, N-1 commas"""
    stmt = Update().set_table("t1").where("name = 'Bruce'")
    stmt.add_column_value("position", "Engineer", True)
    stmt.add_column_value("salary", 200000)
    stmt.add_column_value("name", "Wayne", True)
    query = stmt.render()
    assert query == (
        "UPDATE t1 SET position = 'Engineer', salary = 200000, name = 'Wayne' "
        "WHERE name = 'Bruce'"
    )
    assert query.count(",") == 2
    check_sql(query)
    assert check_sql(query, "SELECT name, salary FROM t1 WHERE name = 'Wayne'") == [
        ("Wayne", 200000)
    ]


def test_update_single():
    """Test 0202 single assignment, no comma"""
    stmt = Update().set_table("t2").add_column_value("c3", 9).where("c1 = 'ID1'")
    assert stmt.render() == "UPDATE t2 SET c3 = 9 WHERE c1 = 'ID1'"
    assert stmt.columns == ("c3",)


def test_update_empty_where():
    """Test 0203 WHERE is written even without predicate"""
    stmt = Update().set_table("t2").add_column_value("c3", 0)
    assert stmt.render() == "UPDATE t2 SET c3 = 0 WHERE "
    assert stmt.reset().render() == "UPDATE  SET  WHERE "


def test_insert():
    """Test 0210 insert"""
    stmt = Insert().set_table("t1")
    stmt.add_column_value("name", "Bruce", True)
    stmt.add_column_value("position", "Engineer", True)
    stmt.add_column_value("salary", "100000", False)
    query = stmt.render()
    assert query == (
        "INSERT INTO t1 (name,position,salary) VALUES ('Bruce','Engineer',100000)"
    )
    assert stmt.values == ("'Bruce'", "'Engineer'", "100000")


def test_insert_exec():
    """Test 0211 insert executes"""
    stmt = Insert().set_table("t2")
    stmt.add_column_value("c1", "ID9", True).add_column_value("c3", 42)
    assert check_sql(stmt.render(), "SELECT c1, c2, c3 FROM t2 WHERE c3 = 42") == [
        ("ID9", None, 42)
    ]


def test_insert_double_quotes():
    """Test 0212 values are quoted when added"""
    stmt = Insert(True).set_table("t1").add_column_value("name", "Bruce", True)
    assert stmt.values == ('"Bruce"',)
    assert stmt.render() == 'INSERT INTO t1 (name) VALUES ("Bruce")'


def test_insert_conflict():
    """Test 0213 OR REPLACE / OR IGNORE"""
    stmt = Insert().set_table("t1").add_column_value("name", "Bruce", True)
    stmt.add_column_value("salary", 1)
    stmt.conflict(Conflict.REPLACE)
    assert stmt.render() == "INSERT OR REPLACE INTO t1 (name,salary) VALUES ('Bruce',1)"
    assert check_sql(stmt.render(), "SELECT salary FROM t1 WHERE name = 'Bruce'") == [
        (1,)
    ]
    stmt.conflict(Conflict.IGNORE)
    assert stmt.render().startswith("INSERT OR IGNORE INTO t1 ")
    assert check_sql(stmt.render(), "SELECT salary FROM t1 WHERE name = 'Bruce'") == [
        (100000,)
    ]


def test_insert_select():
    """Test 0214 insert from select ignores column values"""
    select = Select().add_table("t2").add_column("c1", "c2", "c3").where("c2 = 'ID2'")
    stmt = Insert().set_table("t1").add_column_value("name", "ignored", True)
    stmt.set_select(select)
    query = stmt.render()
    assert query == "INSERT INTO t1 SELECT c1, c2, c3 FROM t2 WHERE c2 = 'ID2'"
    assert check_sql(query, "SELECT count(*) FROM t1") == [(4,)]
    select.where("1 = 1")
    assert stmt.render() == query
    assert stmt.set_select(None).render().endswith("(name) VALUES ('ignored')")


def test_delete():
    """Test 0220 delete"""
    stmt = Delete(True).set_table("t2").where("c2 = 'ID2'")
    assert stmt.render() == "DELETE FROM t2  WHERE c2 = 'ID2'"
    assert check_sql(stmt.render(), "SELECT c1 FROM t2") == [("ID4",)]


def test_delete_no_where():
    """Test 0221 delete without predicate omits WHERE"""
    stmt = Delete().set_table("t2")
    assert stmt.render() == "DELETE FROM t2 "
    assert "WHERE" not in stmt.where("").render()
    assert check_sql(stmt.render(), "SELECT c1 FROM t2") == []


def test_reset_matches_fresh():
    """Test 0230 reset builders behave like new ones"""
    fresh = Update().set_table("t1").add_column_value("salary", 1).where("1 = 1")
    used = Update().set_table("x").add_column_value("a", "b", True).where("y")
    used.reset().set_table("t1").add_column_value("salary", 1).where("1 = 1")
    assert used.render() == fresh.render()

    used_insert = Insert().set_table("x").conflict(Conflict.IGNORE)
    used_insert.set_select(Select().add_column("a"))
    used_insert.reset().set_table("t1").add_column_value("name", "a", True)
    assert used_insert.render() == Insert().set_table("t1").add_column_value(
        "name", "a", True
    ).render()
    assert used_insert.select is None


def test_insert_select_quote_style():
    """Test 0215 nested select follows the insert quote style"""
    stmt = Insert(True).set_table("t1").set_select(Select().add_column("c1"))
    assert stmt.select.quote == '"'
    assert Insert().set_select(Select(True)).select.quote == "'"
