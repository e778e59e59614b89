'''
Record store tests
'''

from dataclasses import FrozenInstanceError

from qcalc.record import Operator, RecordStore
from qcalc.util import RecordNotFound

from pytest import raises


def fill(store, count):
    for n in range(count):
        store.add(str(n), Operator.ADD, '1', str(n + 1))


def test_first_id():
    store = RecordStore()
    assert store.add('5', Operator.ADD, '3', '8').id == 1


def test_newest_first():
    store = RecordStore()
    fill(store, 3)
    assert [record.id for record in store] == [3, 2, 1]
    assert store.at(0).previous_operand == '2'


def test_bounded():
    store = RecordStore()
    fill(store, 101)
    assert len(store) == 100
    ids = [record.id for record in store]
    assert ids == sorted(set(ids), reverse=True)
    assert ids[0] == 101
    assert ids[-1] == 2
    with raises(RecordNotFound):
        store.get(1)


def test_lookup():
    store = RecordStore()
    fill(store, 3)
    assert store.get(2).result_operand == '2'
    assert store.find_index(2) == 1
    with raises(RecordNotFound):
        store.get(42)
    with raises(RecordNotFound):
        store.at(3)
    with raises(RecordNotFound):
        store.at(-1)


def test_memos():
    store = RecordStore()
    fill(store, 2)
    assert store.get_memo(1) is None
    store.set_memo(1, 'rent')
    assert store.get_memo(1) == 'rent'
    store.delete_memo(1)
    assert store.get_memo(1) is None
    with raises(RecordNotFound):
        store.set_memo(3, 'nope')


def test_memo_goes_with_record():
    store = RecordStore()
    fill(store, 2)
    store.set_memo(2, 'gone')
    store.delete(2)
    assert len(store) == 1
    with raises(RecordNotFound):
        store.get_memo(2)
    store.add('0', Operator.SUB, '1', '-1')
    assert store.get_memo(2) is None


def test_memo_evicted():
    store = RecordStore(max_records=2)
    fill(store, 1)
    store.set_memo(1, 'old')
    fill(store, 2)
    with raises(RecordNotFound):
        store.get_memo(1)
    assert store._memos == {}


def test_delete_and_clear():
    store = RecordStore()
    fill(store, 3)
    store.delete(3)
    assert [record.id for record in store] == [2, 1]
    store.set_memo(1, 'kept')
    store.clear()
    assert len(store) == 0
    assert store.add('1', Operator.MUL, '1', '1').id == 1


def test_record_is_frozen():
    record = RecordStore().add('5', Operator.ADD, '3', '8')
    with raises(FrozenInstanceError):
        record.result_operand = '9'


def test_record_str():
    store = RecordStore()
    assert str(store.add('5', Operator.ADD, '3', '8')) == '5 + 3 = 8'
    assert str(store.add('9', Operator.SQRT, None, '3')) == '√(9) = 3'
    assert str(store.add('200', (Operator.PERCENT, Operator.DIV), '4',
                         '5000')) == '200 ÷% 4 = 5000'
