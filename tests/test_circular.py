import pytest

from dslists.circular import CircularLinkedList, main


def test_init_iter_len():
    items = CircularLinkedList([3, 1, 2])
    assert list(items) == [3, 1, 2]
    assert len(items) == 3


def test_push_front_and_back():
    items = CircularLinkedList()
    items.push_back(10)
    items.push_back(20)
    items.push_front(5)
    assert list(items) == [5, 10, 20]


def test_pop_front_and_back():
    items = CircularLinkedList([1, 2, 3])
    assert items.pop_front() == 1
    assert items.pop_back() == 3
    assert list(items) == [2]
    assert items.pop_back() == 2
    assert len(items) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        CircularLinkedList().pop_front()
    with pytest.raises(IndexError):
        CircularLinkedList().pop_back()


def test_push_after_pops_keeps_ring():
    items = CircularLinkedList([1, 2, 3])
    items.pop_back()
    items.push_back(4)
    items.pop_front()
    items.push_front(0)
    assert list(items) == [0, 2, 4]


def test_remove_value_head_middle_tail():
    items = CircularLinkedList([7, 1, 7, 2, 7])
    assert items.remove_value(7) == 3
    assert list(items) == [1, 2]
    items.push_back(3)
    items.push_front(0)
    assert list(items) == [0, 1, 2, 3]


def test_remove_value_all_and_missing():
    items = CircularLinkedList([4, 4])
    assert items.remove_value(4) == 2
    assert list(items) == []
    other = CircularLinkedList([1, 2])
    assert other.remove_value(9) == 0
    assert list(other) == [1, 2]


def test_render():
    assert CircularLinkedList().render() == "Danh sach rong.\n"
    assert CircularLinkedList([1, 2]).render() == "1 2 \n"


def test_clear():
    items = CircularLinkedList([1, 2])
    items.clear()
    assert items.render() == "Danh sach rong.\n"


def test_main_demo_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == (
        "Danh sach hien tai: 5 10 20 30 \n"
        "Xoa dau\n"
        "10 20 30 \n"
        "Xoa cuoi\n"
        "10 20 \n"
        "Xoa theo gia tri 20\n"
        "10 \n"
        "Giai phong danh sach\n"
        "Danh sach rong.\n"
    )