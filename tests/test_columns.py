from xlsxfmt.columns import Col, Columns


def test_delete():
    cols = Columns()

    cols.resolve(0)
    assert cols.items == [Col(min=1, max=1)]
    cols.delete(0)
    assert cols.items == []

    cols.resolve(0)
    cols.resolve(5)
    assert cols.items == [Col(min=1, max=1), Col(min=6, max=6)]
    cols.delete(0)
    assert cols.items == [Col(min=6, max=6)]

    cols.items = [Col(min=1, max=100, width=32)]
    cols.delete(0)
    assert cols.items == [Col(min=1, max=99, width=32)]
    cols.resolve(0)
    assert cols.items == [Col(min=1, max=99, width=32), Col(min=1, max=1, width=32)]
    cols.delete(0)
    assert cols.items == [Col(min=1, max=98, width=32)]
    cols.resolve(0)
    cols.resolve(5)
    assert cols.items == [
        Col(min=1, max=98, width=32),
        Col(min=1, max=1, width=32),
        Col(min=6, max=6, width=32),
    ]
    cols.delete(5)
    assert cols.items == [Col(min=1, max=97, width=32), Col(min=1, max=1, width=32)]


def test_resolve():
    cols = Columns()

    cols.resolve(0)
    assert cols.items == [Col(min=1, max=1)]
    cols.resolve(0)
    assert cols.items == [Col(min=1, max=1)]
    cols.resolve(5)
    assert cols.items == [Col(min=1, max=1), Col(min=6, max=6)]

    cols.items = [Col(min=1, max=100, width=32)]
    cols.resolve(0)
    assert cols.items == [Col(min=1, max=100, width=32), Col(min=1, max=1, width=32)]
    cols.resolve(5)
    assert cols.items == [
        Col(min=1, max=100, width=32),
        Col(min=1, max=1, width=32),
        Col(min=6, max=6, width=32),
    ]


def test_resolve_returns_same_object_for_existing_column():
    cols = Columns()
    first = cols.resolve(3)
    first.width = 100
    assert cols.resolve(3) is first
    assert len(cols.items) == 1


def test_resolved_copy_is_independent_of_group():
    cols = Columns(items=[Col(min=1, max=10, width=32)])
    single = cols.resolve(2)
    single.width = 200
    assert cols.items[0].width == 32
    assert single.min == single.max == 3