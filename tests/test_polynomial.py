import io

import pytest

from dslists.polynomial import Polynomial, Term, main


def exps(poly):
    return [term.exp for term in poly]


def test_term_format_sign():
    assert Term(3, 2).format() == "3x^2 + "
    assert not Term(-1.5, 1).format().endswith(" + ")
    assert Term(-1.5, 1).format().startswith("-1.5x^1")


def test_render_empty_and_terms():
    assert Polynomial().render() == "Danh sach rong!"
    assert Polynomial([Term(3, 2), Term(1, 0)]).render() == "f(x) = 3x^2 + 1x^0"


def test_insert_first_last_and_len():
    poly = Polynomial()
    poly.insert_last(Term(1, 1))
    poly.insert_first(Term(2, 2))
    poly.insert_last(Term(3, 3))
    assert list(poly) == [Term(2, 2), Term(1, 1), Term(3, 3)]
    assert len(poly) == 3


def test_find():
    poly = Polynomial([Term(1, 2), Term(5, 2)])
    assert poly.find(2) == Term(1, 2)
    assert poly.find(7) is None


def test_insert_after_key():
    poly = Polynomial([Term(1, 3), Term(1, 1)])
    poly.insert_after_key(3, Term(4, 2))
    assert exps(poly) == [3, 2, 1]


def test_insert_after_missing_key_raises():
    with pytest.raises(KeyError):
        Polynomial([Term(1, 1)]).insert_after_key(9, Term(1, 0))


def test_delete_first_last():
    poly = Polynomial([Term(1, 1), Term(2, 2), Term(3, 3)])
    assert poly.delete_first() == Term(1, 1)
    assert poly.delete_last() == Term(3, 3)
    assert list(poly) == [Term(2, 2)]


def test_delete_empty_raises():
    with pytest.raises(IndexError):
        Polynomial().delete_first()
    with pytest.raises(IndexError):
        Polynomial().delete_last()


def test_delete_after_key():
    poly = Polynomial([Term(1, 3), Term(1, 2), Term(1, 1)])
    assert poly.delete_after_key(3) == Term(1, 2)
    with pytest.raises(KeyError):
        poly.delete_after_key(1)
    with pytest.raises(KeyError):
        poly.delete_after_key(8)


def test_term_at():
    poly = Polynomial([Term(1, 3), Term(2, 2)])
    assert poly.term_at(1) == Term(2, 2)
    assert poly.term_at(-4) == Term(1, 3)
    with pytest.raises(IndexError):
        poly.term_at(2)


def test_sort_descending_exchange_order():
    poly = Polynomial([Term(5, 2), Term(6, 2), Term(1, 3)])
    poly.sort()
    assert list(poly) == [Term(1, 3), Term(6, 2), Term(5, 2)]


def test_sort_exponents_non_increasing():
    poly = Polynomial([Term(1, e) for e in [2, 7, 0, 4, 4, 1]])
    poly.sort()
    assert exps(poly) == sorted([2, 7, 0, 4, 4, 1], reverse=True)


def test_insert_ordered_keeps_order():
    poly = Polynomial()
    for e in [3, 5, 1, 4, 5]:
        poly.insert_ordered(Term(1, e))
    assert exps(poly) == sorted([3, 5, 1, 4, 5], reverse=True)


def test_insert_ordered_equal_goes_after():
    poly = Polynomial([Term(1, 2)])
    poly.insert_ordered(Term(9, 2))
    assert list(poly) == [Term(1, 2), Term(9, 2)]


def test_evaluate():
    assert Polynomial([Term(1, 3)]).evaluate(2) == 8.0
    assert Polynomial().evaluate(5) == 0.0
    poly = Polynomial([Term(2, 4), Term(3, 1), Term(-1, 0)])
    assert poly.evaluate(1) == pytest.approx(sum(t.coef for t in poly))


def test_clear():
    poly = Polynomial([Term(1, 1)])
    poly.clear()
    assert len(poly) == 0


def test_main_session(monkeypatch, capsys):
    lines = [
        "1", "0",
        "2", "1",
        "3", "2",
        "4", "3",
        "9",
        "5", "5",
        "9",
        "100",
        "6", "6",
    ]
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(lines) + "\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    expected_value = Polynomial([Term(1, 0), Term(2, 1), Term(3, 2)]).evaluate(3)
    assert f"KQ: {expected_value:g}" in out
    assert "Khong tim thay bac 9 de chen sau." in out
    assert "Khong the xoa sau bac 9 (khong ton tai hoac la cuoi)." in out
    assert "Vi tri khong hop le." in out
    assert "Giai phong danh sach." in out